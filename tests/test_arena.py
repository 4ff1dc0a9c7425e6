import io

import numpy as np
import pytest

from mnistnet.arena import ArenaOverflowError, ArenaStats, MemoryArena


def test_allocations_are_zeroed_and_sized():
    arena = MemoryArena(10)
    first = arena.allocate(4)
    second = arena.allocate(6)
    assert first.shape == (4,)
    assert second.shape == (6,)
    assert not first.any()
    assert not second.any()
    assert first.dtype == np.float32


def test_stats_track_usage():
    arena = MemoryArena(8)
    arena.allocate(3)
    arena.allocate(2)
    assert arena.stats() == ArenaStats(capacity=8, used=5, peak=5)


def test_overflow_raises():
    arena = MemoryArena(5)
    arena.allocate(4)
    with pytest.raises(ArenaOverflowError, match="allocation overflow"):
        arena.allocate(2)


def test_exact_fit_is_allowed():
    arena = MemoryArena(6)
    arena.allocate(6)
    assert arena.stats().used == 6
    with pytest.raises(ArenaOverflowError):
        arena.allocate(1)


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        MemoryArena(-1)
    with pytest.raises(ValueError):
        MemoryArena(4).allocate(-2)


def test_reset_keeps_peak_and_restarts_offset():
    arena = MemoryArena(6)
    arena.allocate(5)
    arena.reset()
    assert arena.stats() == ArenaStats(capacity=6, used=0, peak=5)
    arena.allocate(2)
    assert arena.stats() == ArenaStats(capacity=6, used=2, peak=5)


def test_reset_reuses_same_memory():
    arena = MemoryArena(3)
    first = arena.allocate(3)
    first[:] = [1.0, 2.0, 3.0]
    arena.reset()
    again = arena.allocate(3)
    assert np.shares_memory(first, again)
    assert list(again) == [1.0, 2.0, 3.0]


def test_views_write_through_to_content():
    arena = MemoryArena(4)
    part = arena.allocate(2)
    part[:] = [1.5, 2.0]
    out = io.StringIO()
    arena.print_content(out)
    assert out.getvalue() == "MemoryArena Content (used=2, capacity=4):\n1.5, 2\n"


def test_print_content_empty():
    arena = MemoryArena(3)
    out = io.StringIO()
    arena.print_content(out)
    assert out.getvalue() == "MemoryArena Content (used=0, capacity=3):\n\n"


def test_print_content_lists_every_used_value():
    arena = MemoryArena(7)
    arena.allocate(5)
    out = io.StringIO()
    arena.print_content(out)
    lines = out.getvalue().splitlines()
    assert lines[1].split(", ") == ["0"] * 5