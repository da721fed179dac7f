#!/usr/bin/env python3
"""
Novel to EPUB - Command Line Interface

Downloads every chapter of a lightnovelworld.com novel and packs them into
a single EPUB file.

Usage:
    novel-epub URL [-o WORKDIR] [--no-progress]

Output:
    <workdir>/<title>/<title>.<kind>               cover image
    <workdir>/<title>/00000001 <chapter>.xhtml     one file per chapter
    <workdir>/<title>.epub
"""

import argparse
import re
import sys
from typing import List, Optional
from urllib.parse import urlparse

import requests
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from novel_epub.config import SUPPORTED_SOURCE, WORKDIR
from novel_epub.conversion.epub_builder import build_epub
from novel_epub.errors import NovelError, UnsupportedSource, UsageError
from novel_epub.persistence import save_chapter, save_cover
from novel_epub.scraping.fetcher import NovelScraper
from novel_epub.scraping.novel import Novel, host

console = Console(stderr=True)


class ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="novel-epub",
        description="Download a novel from lightnovelworld.com and convert it to an EPUB.",
    )
    parser.add_argument("url",
                        help="URL of the novel landing page.")
    parser.add_argument("-o", "--workdir",
                        default=WORKDIR,
                        help=f"Directory for the downloaded chapters and the epub (default: {WORKDIR}).")
    parser.add_argument("--no-progress",
                        action="store_true",
                        help="Do not show the progress spinner.")
    return parser


def validate_url(url: str, supported: str = SUPPORTED_SOURCE) -> str:
    """
    Check the novel url before anything is requested.

    Only the host name is matched against the supported site pattern, a
    subdomain of the site is fine, the site name in the path or query is not.

    Raises:
        InvalidUrl: if no host can be derived from the url
        UnsupportedSource: if the url is not from the supported site
    """
    host(url)
    hostname = urlparse(url).hostname or ""
    if not re.fullmatch(rf"(?:[\w-]+\.)*(?:{supported})", hostname):
        raise UnsupportedSource(url, supported.replace("\\", ""))
    return url


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    validate_url(args.url)
    return args


def _download_chapters(novel: Novel, show_progress: bool) -> int:
    """Save chapters until the novel runs out of them, return how many were saved."""
    if not show_progress:
        while novel.next() is not None:
            save_chapter(novel)
        return novel.chapter_id

    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task("Downloading chapters...", total=None)
        while novel.next() is not None:
            path = save_chapter(novel)
            progress.update(task, description=f"Saved {path.name}")
    return novel.chapter_id


def run(args: argparse.Namespace) -> int:
    with NovelScraper() as scraper:
        novel = Novel(args.url, args.workdir, scraper=scraper)
        save_cover(novel)
        saved = _download_chapters(novel, show_progress=not args.no_progress)
        output_path = build_epub(novel)

    console.print(f"✅ {saved} chapters written to '{output_path}'", style="green")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as e:
        console.print(f"❌ {e}", style="red")
        return 2
    except NovelError as e:
        console.print(f"❌ {e}", style="red")
        return 1

    try:
        return run(args)
    except (NovelError, OSError, requests.RequestException) as e:
        console.print(f"❌ {e}", style="red")
        return 1


if __name__ == "__main__":
    sys.exit(main())
