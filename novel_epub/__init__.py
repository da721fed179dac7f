"""Download a lightnovelworld.com novel chapter by chapter and pack it into an EPUB."""

__version__ = "0.1.0"
