"""A small feed-forward neural network trained by backpropagation."""

__version__ = "0.1.0"
__all__ = ["activations", "dataset", "layer", "losses", "network"]