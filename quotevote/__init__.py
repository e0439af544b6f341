"""quotevote – shade post text by the votes cast on its passages."""

from quotevote.core import render

__version__ = "0.1.0"

__all__ = ["render", "__version__"]
