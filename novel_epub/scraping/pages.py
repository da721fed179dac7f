from bs4 import BeautifulSoup, Tag
import re
from typing import Optional

from novel_epub.errors import (
    AttributeNotFound,
    EmptyField,
    ImageKindUnrecognized,
    NovelError,
    SelectorNotFound,
)
from novel_epub.scraping.models import ChapterRecord, CoverMetadata

# Characters that are not allowed in file names on common platforms
_FORBIDDEN_TITLE_CHARS = re.compile(r'[\\/:"|?\r\n]+')
_REDUNDANT_WHITESPACE = re.compile(r'\s{2,}')

# Trailing extension, a "?v=123" cache buster after it is ignored
_IMAGE_KIND = re.compile(r'([A-Za-z]+)(?:\?v=\d*)??$')

# Shortest match from an opening div to the next closing div. Not nesting aware:
# an ad container holding another div leaves its tail behind.
_AD_BLOCK = re.compile(r'<div.*?</div>')


def normalize_title(text: str, field: str = "title") -> str:
    """
    Turn the inner text of a title element into something usable as a path
    segment and as epub metadata.

    Forbidden characters are stripped and any run of two or more whitespace
    characters is deleted outright (not replaced by a single space).

    Raises:
        EmptyField: if nothing is left after normalization
    """
    title = _FORBIDDEN_TITLE_CHARS.sub('', text.strip())
    title = _REDUNDANT_WHITESPACE.sub('', title.strip())
    if not title:
        raise EmptyField(field)
    return title


def image_kind(url: str) -> str:
    """
    Guess the image type from the trailing alphabetic run of the url.

    >>> image_kind("https://cdn.example.com/cover.jpg?v=3")
    'jpg'
    """
    match = _IMAGE_KIND.search(url)
    if not match:
        raise ImageKindUnrecognized(url)
    return match.group(1)


def remove_ads(html: str) -> str:
    """Remove every <div>...</div> block, repeating until none is left."""
    removed = 1
    while removed:
        html, removed = _AD_BLOCK.subn('', html)
    return html


class Page:
    """
    A parsed page of the source site.

    Subclasses only declare selectors, the lookups here raise the matching
    NovelError when the markup does not have what is asked for.
    """

    def __init__(self, page: BeautifulSoup):
        self.page = page

    @classmethod
    def from_html(cls, html_content: str):
        return cls(BeautifulSoup(html_content, 'html.parser'))

    def _select(self, selector: str) -> Tag:
        element = self.page.select_one(selector)
        if element is None:
            raise SelectorNotFound(selector)
        return element

    def _select_text(self, selector: str) -> str:
        return self._select(selector).get_text().strip()

    def _select_attr(self, selector: str, attr_name: str) -> str:
        value = self._select(selector).get(attr_name)
        if value is None:
            raise AttributeNotFound(attr_name, selector)
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return str(value)


class CoverPage(Page):
    """The landing page of a novel."""

    TITLE_SELECTOR = "h1.novel-title"
    AUTHOR_SELECTOR = "div.author > a > span"
    COVER_IMG_SELECTOR = "div.fixed-img > figure > img"
    COVER_IMG_ATTR = "data-src"
    FIRST_CHAPTER_SELECTOR = "#readchapterbtn"
    FIRST_CHAPTER_ATTR = "href"

    def title(self) -> str:
        return normalize_title(self._select_text(self.TITLE_SELECTOR))

    def author(self) -> str:
        return self._select_text(self.AUTHOR_SELECTOR)

    def cover_img_url(self) -> str:
        # The real src is a placeholder, the image is lazy loaded from data-src
        return self._select_attr(self.COVER_IMG_SELECTOR, self.COVER_IMG_ATTR)

    def cover_img_type(self) -> str:
        return image_kind(self.cover_img_url())

    def chapter_first_url(self) -> str:
        return self._select_attr(self.FIRST_CHAPTER_SELECTOR, self.FIRST_CHAPTER_ATTR)

    def metadata(self) -> CoverMetadata:
        """Extract every cover field at once, the first failing one is raised."""
        return CoverMetadata(
            title=self.title(),
            author=self.author(),
            cover_image_url=self.cover_img_url(),
            cover_image_kind=self.cover_img_type(),
            first_chapter_url=self.chapter_first_url(),
        )


class ChapterPage(Page):
    """A single chapter page."""

    TITLE_SELECTOR = "span.chapter-title"
    CONTENT_SELECTOR = "div.chapter-content"
    NEXT_CHAPTER_SELECTOR = "a.button.nextchap"
    NEXT_CHAPTER_ATTR = "href"

    def title(self) -> str:
        return normalize_title(self._select_text(self.TITLE_SELECTOR), field="chapter title")

    def content(self) -> str:
        """
        Inner HTML of the chapter body with the advertisement blocks removed.

        Returns:
            str: raw markup, not escaped
        """
        body = self._select(self.CONTENT_SELECTOR).decode_contents().strip()
        return remove_ads(body)

    def chapter_next_url(self) -> str:
        return self._select_attr(self.NEXT_CHAPTER_SELECTOR, self.NEXT_CHAPTER_ATTR)

    def record(self, sequence_number: int) -> ChapterRecord:
        """
        Build the ChapterRecord for this page.

        A next link that cannot be read is stored as None, it marks the last chapter.
        """
        next_url: Optional[str]
        try:
            next_url = self.chapter_next_url()
        except NovelError:
            next_url = None

        return ChapterRecord(
            sequence_number=sequence_number,
            title=self.title(),
            body_html=self.content(),
            next_chapter_url=next_url,
        )
