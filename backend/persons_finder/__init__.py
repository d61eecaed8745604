"""Person profiles with generated bios and proximity search over MongoDB."""

__version__ = "0.1.0"
