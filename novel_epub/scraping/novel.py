"""
Chapter traversal for a single novel.

A Novel holds the landing page and at most one chapter page. Each call to
next() follows the link of the current chapter (or the "read" button of the
landing page for the first one). The site has no end-of-book marker, so the
walk stops the first time the next chapter cannot be reached.
"""

import re
import requests
from urllib.parse import urljoin
from typing import Optional

from novel_epub.errors import EmptyField, InvalidUrl, NovelError
from novel_epub.scraping.fetcher import NovelScraper
from novel_epub.scraping.pages import ChapterPage, CoverPage
from novel_epub.utils.logging_utils import get_logger

logger = get_logger(__name__)

# scheme + at least two dot separated labels, optional port
_HOST = re.compile(r'^https?://[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+(?::\d+)?')


def host(title_url: str) -> str:
    """
    Return scheme and authority of the url.

    >>> host("https://example.site.com/novel/123")
    'https://example.site.com'

    Raises:
        InvalidUrl: if the url does not start with a scheme and a dotted host name
    """
    match = _HOST.match(title_url)
    if not match:
        raise InvalidUrl(title_url)
    return match.group(0)


class Novel:
    def __init__(self, title_url: str, workdir: str, scraper: Optional[NovelScraper] = None):
        """
        Resolve the host and fetch the landing page.

        Args:
            title_url (str): URL of the novel landing page
            workdir (str): Directory the chapters and the epub are written to
            scraper (NovelScraper, optional): HTTP access, a fresh one if not given
        """
        self.url = title_url
        self.workdir = workdir
        self.host_url = host(title_url)
        self.scraper = scraper if scraper is not None else NovelScraper()
        self.cover = CoverPage(self.scraper.fetch_page(title_url))
        self.chapter: Optional[ChapterPage] = None
        self.chapter_id = 0
        self.finished = False

    def next(self) -> Optional[ChapterPage]:
        """
        Advance to the next chapter.

        Returns:
            ChapterPage or None: the new current chapter, None once there is
            nothing left to read. After the first None every later call
            returns None as well.
        """
        if self.finished:
            return None

        try:
            if self.chapter is None:
                chapter = self._chapter_first()
            else:
                chapter = self._chapter_next()
        except (NovelError, requests.RequestException) as e:
            logger.info(f"No more chapters after #{self.chapter_id}: {e}")
            self.chapter = None
            self.finished = True
            return None

        self.chapter = chapter
        self.chapter_id += 1
        return self.chapter

    def _chapter_first(self) -> ChapterPage:
        url = urljoin(self.host_url, self.cover.chapter_first_url())
        return self._request_chapter(url)

    def _chapter_next(self) -> ChapterPage:
        if self.chapter is None:
            raise EmptyField("chapter")
        url = urljoin(self.host_url, self.chapter.chapter_next_url())
        return self._request_chapter(url)

    def _request_chapter(self, url: str) -> ChapterPage:
        # Title and body are only read when the chapter is saved, a broken
        # chapter page aborts the run there instead of ending the book here
        return ChapterPage(self.scraper.fetch_page(url))

    def close(self):
        self.scraper.close()
