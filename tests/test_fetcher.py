import unittest
from unittest import mock

import requests
from cloudscraper.exceptions import CloudflareChallengeError, CloudflareCode1020

from novel_epub.errors import HttpStatus, SourceBlocked
from novel_epub.scraping.fetcher import NovelScraper


def response(status_code=200, text="", content=b""):
    resp = mock.Mock()
    resp.status_code = status_code
    resp.text = text
    resp.content = content
    return resp


class TestNovelScraper(unittest.TestCase):

    def setUp(self):
        self.session = mock.Mock()
        self.scraper = NovelScraper(timeout=5, session=self.session)

    def test_fetch_page(self):
        self.session.get.return_value = response(text='<html><h1 class="novel-title">Title</h1></html>')
        page = self.scraper.fetch_page("https://www.lightnovelworld.com/novel/x")
        self.assertEqual(page.select_one("h1.novel-title").get_text(), "Title")
        self.session.get.assert_called_once_with("https://www.lightnovelworld.com/novel/x", timeout=5)

    def test_fetch_data(self):
        self.session.get.return_value = response(content=b"\x89PNG")
        self.assertEqual(self.scraper.fetch_data("https://static.example.com/cover.png"), b"\x89PNG")

    def test_only_200_is_success(self):
        for status in [201, 204, 301, 403, 404, 500]:
            with self.subTest(status=status):
                self.session.get.return_value = response(status_code=status)
                with self.assertRaises(HttpStatus) as ctx:
                    self.scraper.fetch_url("https://www.lightnovelworld.com/novel/x")
                self.assertEqual(ctx.exception.status_code, status)
                self.assertEqual(ctx.exception.url, "https://www.lightnovelworld.com/novel/x")

    def test_transport_errors_propagate(self):
        self.session.get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(requests.ConnectionError):
            self.scraper.fetch_data("https://static.example.com/cover.png")
        self.assertEqual(self.session.get.call_count, 1)

    def test_cloudflare_refusal(self):
        for error in [CloudflareChallengeError("challenge"), CloudflareCode1020("banned")]:
            with self.subTest(error=type(error).__name__):
                self.session.get.side_effect = error
                with self.assertRaises(SourceBlocked) as ctx:
                    self.scraper.fetch_page("https://www.lightnovelworld.com/novel/x/chapter-2")
                self.assertEqual(ctx.exception.url, "https://www.lightnovelworld.com/novel/x/chapter-2")
                self.assertIs(ctx.exception.__cause__, error)

    def test_context_manager_closes_session(self):
        with NovelScraper(session=self.session):
            pass
        self.session.close.assert_called_once_with()

    @mock.patch("novel_epub.scraping.fetcher.cloudscraper.create_scraper")
    def test_default_session_is_cloudscraper(self, create_scraper):
        NovelScraper()
        create_scraper.assert_called_once()


if __name__ == '__main__':
    unittest.main()
