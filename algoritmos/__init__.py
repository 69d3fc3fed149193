"""Red-black trees, sorted and circular linked lists, and small algorithmic problems."""

__version__ = "0.1.0"