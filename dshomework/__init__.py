"""Data-structure exercises: browser history, an AVL address book, window flips and triage."""

__version__ = "0.1.0"
__all__ = ["browser", "address_book", "flips", "triage"]