"""A container with ascending, descending, insertion, reverse, side-cross and middle-out traversal orders, and a demo command."""

__version__ = "0.1.0"
__all__ = ["container", "iterators", "demo"]