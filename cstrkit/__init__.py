"""C-style string routines, errno messages and sscanf-style scanning."""

__version__ = "0.1.0"
__all__ = ["cstr", "errors", "scan"]