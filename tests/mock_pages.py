"""Canned lightnovelworld pages and a scraper that serves them without a network."""

from bs4 import BeautifulSoup

from novel_epub.errors import HttpStatus

NOVEL_URL = "https://www.lightnovelworld.com/novel/shadow-slave-1234"
HOST = "https://www.lightnovelworld.com"
COVER_IMG_URL = "https://static.lightnovelworld.com/bookcover/300x400/01234-shadow-slave.jpg?v=3"
CHAPTER_1_URL = HOST + "/novel/shadow-slave-1234/chapter-1"
CHAPTER_2_URL = HOST + "/novel/shadow-slave-1234/chapter-2"
COVER_IMG_DATA = b"\xff\xd8\xff\xe0fake-jpeg"

MOCK_COVER_HTML = f"""
<!DOCTYPE html>
<html>
<head><title>Shadow Slave</title></head>
<body>
<article id="novel">
<header class="novel-header">
  <div class="header-body container">
    <div class="fixed-img">
      <figure class="cover">
        <img src="/static/img/placeholder.gif" data-src="{COVER_IMG_URL}" alt="Shadow Slave">
      </figure>
    </div>
    <div class="novel-info">
      <div class="main-head">
        <h1 class="novel-title text2row">  Shadow: Slave?
        </h1>
        <div class="author"><a href="/author/guiltythree"><span itemprop="author">  Guiltythree </span></a></div>
      </div>
    </div>
  </div>
</header>
<div class="action-buttons">
  <a id="readchapterbtn" class="button" href="/novel/shadow-slave-1234/chapter-1">Read Chapter 1</a>
</div>
</article>
</body>
</html>
"""

MOCK_CHAPTER_1_HTML = """
<!DOCTYPE html>
<html>
<head><title>Chapter 1</title></head>
<body>
<article id="chapter-article">
<section class="page-in content-wrap">
  <div class="titles">
    <h1><span class="chapter-title">Chapter 1: Nightmare Begins</span></h1>
  </div>
  <div id="chapter-container" class="chapter-content font_default">
    <p>Sunny stared at the sky.</p><div class="vm-placement" data-id="1">advertisement</div><p>The sky stared back.</p>
  </div>
  <div class="chapternav skiptranslate">
    <a class="button prevchap isDisabled" href="#">Prev</a>
    <a class="button nextchap" href="/novel/shadow-slave-1234/chapter-2">Next</a>
  </div>
</section>
</article>
</body>
</html>
"""

MOCK_CHAPTER_2_HTML = """
<!DOCTYPE html>
<html>
<head><title>Chapter 2</title></head>
<body>
<article id="chapter-article">
<section class="page-in content-wrap">
  <div class="titles">
    <h1><span class="chapter-title">Chapter 2: "Sleepers"</span></h1>
  </div>
  <div id="chapter-container" class="chapter-content">
    <p>Second chapter &amp; last.</p>
  </div>
  <div class="chapternav skiptranslate">
    <a class="button prevchap" href="/novel/shadow-slave-1234/chapter-1">Prev</a>
  </div>
</section>
</article>
</body>
</html>
"""


class FakeScraper:
    """Stands in for NovelScraper, unknown urls answer with a 404."""

    def __init__(self, pages=None, data=None):
        self.pages = pages or {}
        self.data = data or {}
        self.requested = []
        self.closed = False

    def fetch_url(self, url):
        self.requested.append(url)
        if url not in self.pages:
            raise HttpStatus(404, url)
        return self.pages[url]

    def fetch_page(self, url):
        return BeautifulSoup(self.fetch_url(url), 'html.parser')

    def fetch_data(self, url):
        self.requested.append(url)
        if url not in self.data:
            raise HttpStatus(404, url)
        return self.data[url]

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def novel_scraper():
    """A scraper serving the cover, its image and two chapters."""
    return FakeScraper(
        pages={
            NOVEL_URL: MOCK_COVER_HTML,
            CHAPTER_1_URL: MOCK_CHAPTER_1_HTML,
            CHAPTER_2_URL: MOCK_CHAPTER_2_HTML,
        },
        data={COVER_IMG_URL: COVER_IMG_DATA},
    )
