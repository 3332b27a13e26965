"""Interactive terminal tool for recording shared expenses within named groups."""

__version__ = "0.1.0"
__all__ = ["__version__"]