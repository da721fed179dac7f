"""
Error types raised while scraping and packaging a novel.

Every failure kind is its own class so callers can branch on it. The payload
is kept as attributes (selector path, status code, attribute name, ...) and
only rendered into a message when the error is printed.
"""

from typing import Optional


class NovelError(Exception):
    """Base class for every expected failure in the pipeline."""


class HttpStatus(NovelError):
    """The server answered with anything other than 200."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} for '{url}'")


class SourceBlocked(NovelError):
    """Cloudflare in front of the site refused the request (challenge, loop, ban)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Blocked by Cloudflare on '{url}': {reason}")


class SelectorNotFound(NovelError):
    """No element matched the selector."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Selector not found: '{selector}'")


class AttributeNotFound(NovelError):
    """The element was found but lacks the requested attribute."""

    def __init__(self, attribute: str, selector: Optional[str] = None):
        self.attribute = attribute
        self.selector = selector
        where = f" on '{selector}'" if selector else ""
        super().__init__(f"Attribute not found: '{attribute}'{where}")


class EmptyField(NovelError):
    """A value that has to be non-empty came out empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Empty value for '{field}'")


class InvalidUrl(NovelError):
    """No scheme and dotted host name could be read from the url."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid url: '{url}'")


class ImageKindUnrecognized(NovelError):
    """The cover url does not end in an image extension."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Cannot determine image type of '{url}'")


class UnsupportedSource(NovelError):
    """The url points to a site other than the supported one."""

    def __init__(self, url: str, supported: str = "lightnovelworld.com"):
        self.url = url
        self.supported = supported
        super().__init__(f"Only {supported} is supported, got '{url}'")


class UsageError(NovelError):
    """Wrong command line arguments."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingArtifact(NovelError):
    """A file the assembler expects under the working directory is absent."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Missing file: '{path}'")
