"""Reading and preparing images and labels in the MNIST IDX format."""

from __future__ import annotations

import struct
from os import PathLike
from typing import Iterable, Union

import numpy as np

PathType = Union[str, PathLike]

_SCALE = np.float32(1.0 / 255.0)


def _read_header(data: bytes, fields: int) -> tuple[int, ...]:
    size = 4 * fields
    if len(data) < size:
        raise ValueError("IDX file is too short for its header")
    return struct.unpack(f">{fields}I", data[:size])


def load_images(path: PathType) -> np.ndarray:
    """Load an image file as a ``(count, rows * cols)`` uint8 array."""
    with open(path, "rb") as handle:
        data = handle.read()
    _magic, count, rows, cols = _read_header(data, 4)
    pixels = rows * cols
    body = data[16:16 + count * pixels]
    if len(body) < count * pixels:
        raise ValueError("IDX image file is truncated")
    return np.frombuffer(body, dtype=np.uint8).reshape(count, pixels).copy()


def load_labels(path: PathType) -> np.ndarray:
    """Load a label file as a 1-D uint8 array."""
    with open(path, "rb") as handle:
        data = handle.read()
    _magic, count = _read_header(data, 2)
    body = data[8:8 + count]
    if len(body) < count:
        raise ValueError("IDX label file is truncated")
    return np.frombuffer(body, dtype=np.uint8).copy()


def normalize_images(raw_images) -> np.ndarray:
    """Scale pixel values from 0..255 to 0..1 as float32."""
    return np.asarray(raw_images, dtype=np.float32) * _SCALE


def to_one_hot(labels: Iterable[int], num_classes: int = 10) -> np.ndarray:
    """Encode each label as a float32 row with a single 1."""
    labels = np.asarray(list(labels), dtype=np.int64)
    if labels.size and (labels.min() < 0 or labels.max() >= num_classes):
        raise ValueError(f"labels must lie in 0..{num_classes - 1}")
    encoded = np.zeros((labels.size, num_classes), dtype=np.float32)
    encoded[np.arange(labels.size), labels] = 1.0
    return encoded