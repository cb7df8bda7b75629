"""C-style string and memory routines, printf spec parsing and flag handling."""

__version__ = "0.1.0"
__all__ = ["cstr", "flags", "memory", "spec", "transform"]