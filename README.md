# mnistnet

Building blocks for a small fully connected neural network, kept in one
shared float32 buffer, plus readers for MNIST IDX files.

## Modules

- `mnistnet.arena`
  - `MemoryArena(total_floats)`: a zero-filled float32 buffer that hands out
    consecutive slices with `allocate(n)`. Each slice is a numpy view into the
    buffer, so writes through it show up in the arena. Asking for more than is
    left raises `ArenaOverflowError` (a `RuntimeError`); a negative size
    raises `ValueError`.
  - `reset()` starts allocating from the beginning again without clearing
    the contents.
  - `stats()` returns an `ArenaStats` with `capacity`, `used` and `peak`,
    all counted in floats. `capacity` is also available as a property.
  - `print_content(stream)` writes a header line
    `MemoryArena Content (used=..., capacity=...):` followed by the used
    values as one comma-separated line.
- `mnistnet.layer`
  - `ActivationType`: `IDENTITY`, `RELU`, `SIGMOID`, `TANH`, `SOFTMAX`.
  - `activate(x, kind)` and `activate_derivative(x, kind)`: element-wise
    activation and its derivative on a scalar or array, as float32. Softmax
    is not applied by `activate` (it returns the input unchanged), and its
    derivative is taken as 1, as for identity.
  - `LayerConfig`: the layer's `input_size` and `output_size` and its
    buffers `weights`, `biases`, `z`, `a`, `delta`, `grad_w`, `grad_b`.
    Each must be a 1-D array of the right length (`input_size * output_size`
    for weights and weight gradients, `output_size` for the rest), otherwise
    `Layer` raises `ValueError`.
  - `Layer(cfg, activation)`: on creation it zeroes the gradient buffers,
    fills the weights with uniform random values in [-1, 1) and zeroes the
    biases.
    - `forward(x)` writes the raw sums into `z` and the activations into `a`;
      with `SOFTMAX` it calls `apply_softmax()`, a max-shifted softmax of `z`.
    - `backward(x, grad_out, grad_in)` computes `delta` from `grad_out`,
      accumulates into `grad_b` and `grad_w`, adds into `grad_in` in place
      and returns it. It requires `input_size <= output_size`.
    - `reset_gradients()` zeroes `grad_w` and `grad_b`.
    - `output_activations()` and `raw_sums()` return the `a` and `z` buffers.
- `mnistnet.mnist`
  - `load_images(path)`: a `(count, rows * cols)` uint8 array.
  - `load_labels(path)`: a 1-D uint8 array.
  Both read the big-endian IDX header and raise `ValueError` for a short
  header or truncated data.
  - `normalize_images(raw_images)`: pixel values scaled from 0–255 to 0–1
    as float32.
  - `to_one_hot(labels, num_classes=10)`: a float32 array with one row per
    label; labels outside `0..num_classes-1` raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from mnistnet.arena import MemoryArena
from mnistnet.layer import ActivationType, Layer, LayerConfig

arena = MemoryArena(18)
cfg = LayerConfig(
    input_size=2,
    output_size=2,
    weights=arena.allocate(4),
    biases=arena.allocate(2),
    z=arena.allocate(2),
    a=arena.allocate(2),
    delta=arena.allocate(2),
    grad_w=arena.allocate(4),
    grad_b=arena.allocate(2),
)
layer = Layer(cfg, ActivationType.RELU)
layer.forward([1.0, 2.0])
print(layer.output_activations())
```

Loading MNIST data:

```python
from mnistnet.mnist import load_images, load_labels, normalize_images, to_one_hot

images = normalize_images(load_images("train-images-idx3-ubyte"))
targets = to_one_hot(load_labels("train-labels-idx1-ubyte"), 10)
```

## Command line

```
mnistnet
```

lays out one 2×2 ReLU layer in an 18-float arena, runs a forward pass and a
backward pass on the fixed input `[1, 2]` (with `[1, 2]` as the output
gradient) and prints the arena contents after each step. Weights are random,
so the printed values change from run to run. It takes no options besides
`--help`.

## What it does not do

There is no multi-layer network, no loss function, no weight update step and
no training or evaluation loop. The MNIST readers and the layer are separate
pieces; nothing here trains a model on MNIST data.