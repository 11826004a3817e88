"""Working-set size estimation for a single Linux process."""

__version__ = "0.1.0"
