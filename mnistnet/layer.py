"""A dense neural-network layer operating on arena-provided buffers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

_rng = np.random.default_rng()


class ActivationType(Enum):
    IDENTITY = "identity"
    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    SOFTMAX = "softmax"


@dataclass
class LayerConfig:
    """Sizes of a layer and the pre-allocated float32 buffers it works in."""

    input_size: int
    output_size: int
    weights: np.ndarray
    biases: np.ndarray
    z: np.ndarray
    a: np.ndarray
    delta: np.ndarray
    grad_w: np.ndarray
    grad_b: np.ndarray


def _sigmoid(x: np.ndarray) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.float32(1.0) / (np.float32(1.0) + np.exp(-x))


def activate(x, kind: ActivationType):
    """Apply an element-wise activation; softmax is left to the layer."""
    x = np.asarray(x, dtype=np.float32)
    if kind is ActivationType.RELU:
        result = np.where(x > 0, x, np.float32(0.0))
    elif kind is ActivationType.SIGMOID:
        result = _sigmoid(x)
    elif kind is ActivationType.TANH:
        result = np.tanh(x)
    else:
        result = x
    return np.asarray(result, dtype=np.float32)[()]


def activate_derivative(x, kind: ActivationType):
    """Derivative of the activation at ``x``; 1 for identity and softmax."""
    x = np.asarray(x, dtype=np.float32)
    if kind is ActivationType.RELU:
        result = np.where(x > 0, np.float32(1.0), np.float32(0.0))
    elif kind is ActivationType.SIGMOID:
        s = _sigmoid(x)
        result = s * (np.float32(1.0) - s)
    elif kind is ActivationType.TANH:
        t = np.tanh(x)
        result = np.float32(1.0) - t * t
    else:
        result = np.ones_like(x)
    return np.asarray(result, dtype=np.float32)[()]


class Layer:
    """Fully connected layer whose state lives in externally owned buffers."""

    def __init__(self, cfg: LayerConfig, activation: ActivationType) -> None:
        self.in_size = cfg.input_size
        self.out_size = cfg.output_size
        expected = {
            "weights": self.in_size * self.out_size,
            "biases": self.out_size,
            "z": self.out_size,
            "a": self.out_size,
            "delta": self.out_size,
            "grad_w": self.in_size * self.out_size,
            "grad_b": self.out_size,
        }
        for name, size in expected.items():
            buffer = getattr(cfg, name)
            if not isinstance(buffer, np.ndarray) or buffer.ndim != 1 or buffer.size != size:
                raise ValueError(f"buffer {name!r} must be a 1-D array of {size} floats")

        self.weights = cfg.weights
        self.biases = cfg.biases
        self.z = cfg.z
        self.a = cfg.a
        self.delta = cfg.delta
        self.grad_w = cfg.grad_w
        self.grad_b = cfg.grad_b
        self.activation = activation

        self.reset_gradients()
        self.weights[:] = _rng.uniform(-1.0, 1.0, self.weights.size).astype(np.float32)
        self.biases[:] = 0.0

    def forward(self, x) -> None:
        """Compute raw sums and activations for one example."""
        x = np.asarray(x, dtype=np.float32).ravel()
        if x.size < self.in_size:
            raise ValueError(f"input needs at least {self.in_size} values")
        w = self.weights.reshape(self.out_size, self.in_size)
        self.z[:] = w @ x[:self.in_size] + self.biases
        if self.activation is ActivationType.SOFTMAX:
            self.apply_softmax()
        else:
            self.a[:] = activate(self.z, self.activation)

    def backward(self, x, grad_out, grad_in: np.ndarray) -> np.ndarray:
        """Accumulate gradients for one example and add into ``grad_in``."""
        if self.in_size > self.out_size:
            raise ValueError("backward requires input_size <= output_size")
        if not isinstance(grad_in, np.ndarray):
            raise TypeError("grad_in must be a numpy array")
        if grad_in.size < self.in_size:
            raise ValueError(f"grad_in needs at least {self.in_size} values")
        x = np.asarray(x, dtype=np.float32).ravel()
        grad_out = np.asarray(grad_out, dtype=np.float32).ravel()
        if x.size < self.in_size or grad_out.size < self.out_size:
            raise ValueError("input or output gradient is too short")
        x = x[:self.in_size]
        grad_out = grad_out[:self.out_size]

        self.delta[:] = grad_out * activate_derivative(grad_out, self.activation)

        d = self.delta[:self.in_size]
        self.grad_b[:self.in_size] += d
        grad_w = self.grad_w.reshape(self.in_size, self.out_size)
        grad_w += (d * x)[:, None]
        w = self.weights.reshape(self.in_size, self.out_size)
        grad_in[:self.in_size] += (w * d[:, None]).sum(axis=1, dtype=np.float32)
        return grad_in

    def reset_gradients(self) -> None:
        self.grad_w[:] = 0.0
        self.grad_b[:] = 0.0

    def apply_softmax(self) -> None:
        """Write a numerically stabilised softmax of ``z`` into ``a``."""
        if self.out_size == 0:
            raise ValueError("softmax needs at least one output")
        z = self.z.astype(np.float64)
        e = np.exp(z - z.max())
        total = e.sum()
        self.a[:] = e.astype(np.float32)
        self.a[:] = (self.a.astype(np.float64) / total).astype(np.float32)

    def output_activations(self) -> np.ndarray:
        return self.a

    def raw_sums(self) -> np.ndarray:
        return self.z