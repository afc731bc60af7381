"""Express multiplication and division by an integer constant as bit shifts."""

__version__ = "1.0.0"
__all__ = ["__version__"]