"""
Scraping layer for lightnovelworld.com.

pages    - extraction rules over a parsed page
fetcher  - blocking HTTP access
novel    - chapter traversal
"""

from novel_epub.scraping.models import CoverMetadata, ChapterRecord
from novel_epub.scraping.pages import CoverPage, ChapterPage
from novel_epub.scraping.fetcher import NovelScraper
from novel_epub.scraping.novel import Novel, host


__all__ = [
    'CoverMetadata',
    'ChapterRecord',
    'CoverPage',
    'ChapterPage',
    'NovelScraper',
    'Novel',
    'host',
]
