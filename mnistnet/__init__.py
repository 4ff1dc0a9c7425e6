"""Dense neural network layers over an arena buffer, with MNIST IDX loading."""

__version__ = "0.1.0"
__all__ = ["arena", "layer", "mnist", "cli"]