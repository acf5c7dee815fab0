"""Observer pattern primitives and a workspace helper for hooks and tools."""

__version__ = "0.1.0"
__all__ = ["observer", "xtask"]