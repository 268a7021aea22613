"""Status-line generator for window-manager bars, with system readers."""

__version__ = "0.1.0"
__all__ = ["__version__"]