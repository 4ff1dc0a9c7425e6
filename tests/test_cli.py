import pytest

from mnistnet.cli import main


def run(capsys):
    status = main([])
    lines = capsys.readouterr().out.splitlines()
    return status, lines


def values(line):
    return [float(v) for v in line.split(", ")]


def test_prints_two_dumps(capsys):
    status, lines = run(capsys)
    assert status == 0
    assert len(lines) == 4
    assert lines[0] == "MemoryArena Content (used=18, capacity=18):"
    assert lines[2] == lines[0]
    assert len(values(lines[1])) == 18
    assert len(values(lines[3])) == 18


def test_forward_dump_is_consistent(capsys):
    _, lines = run(capsys)
    dump = values(lines[1])
    w, b, z, a = dump[0:4], dump[4:6], dump[6:8], dump[8:10]
    assert b == [0.0, 0.0]
    for j in range(2):
        assert z[j] == pytest.approx(w[2 * j] + 2 * w[2 * j + 1], abs=1e-4)
        assert a[j] == pytest.approx(max(z[j], 0.0), abs=1e-5)
    assert all(-1.0 <= wi <= 1.0 for wi in w)
    assert dump[10:] == [0.0] * 8


def test_backward_dump_holds_gradients(capsys):
    _, lines = run(capsys)
    before, after = values(lines[1]), values(lines[3])
    assert after[:10] == before[:10]
    delta, grad_w, grad_b = after[10:12], after[12:16], after[16:18]
    assert delta == [1.0, 2.0]
    assert grad_b == delta
    assert grad_w[0:2] == [delta[0] * 1.0] * 2
    assert grad_w[2:4] == [delta[1] * 2.0] * 2


def test_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])