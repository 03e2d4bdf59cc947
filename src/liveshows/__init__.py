"""liveshows -- cached recorded-show listings from a YouTube playlist."""

__version__ = "0.1.0"
