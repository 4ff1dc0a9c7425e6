"""Command that runs a single layer forward and backward inside an arena."""

from __future__ import annotations

import argparse
import sys

import numpy as np

from mnistnet.arena import MemoryArena
from mnistnet.layer import ActivationType, Layer, LayerConfig


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="mnistnet",
        description="Run a 2x2 ReLU layer forward and backward and dump its arena.",
    )
    parser.parse_args(argv)

    arena = MemoryArena(18)
    cfg = LayerConfig(
        input_size=2,
        output_size=2,
        weights=arena.allocate(2 * 2),
        biases=arena.allocate(2),
        z=arena.allocate(2),
        a=arena.allocate(2),
        delta=arena.allocate(2),
        grad_w=arena.allocate(2 * 2),
        grad_b=arena.allocate(2),
    )
    x = np.array([1.0, 2.0], dtype=np.float32)

    layer = Layer(cfg, ActivationType.RELU)
    layer.forward(x)
    arena.print_content(sys.stdout)

    grad_out = np.array([1.0, 2.0], dtype=np.float32)
    grad_in = np.zeros(2, dtype=np.float32)
    layer.backward(x, grad_out, grad_in)
    arena.print_content(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())