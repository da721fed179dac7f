"""
Builds the epub from what the scraper left in the working directory.

Nothing is taken from memory except the cover metadata: the chapters are
whatever *.xhtml files sit in the novel directory, in file name order. The
builder can be run again on its own against a directory from an earlier run.
"""

import io
import re
import uuid
from pathlib import Path

from ebooklib import epub
from natsort import natsorted

from novel_epub.errors import MissingArtifact
from novel_epub.utils.logging_utils import get_logger

logger = get_logger(__name__)

_SEQUENCE_PREFIX = re.compile(r'^\d* ')


def chapter_display_title(filename: str) -> str:
    """'00000012 The Duel.xhtml' -> 'The Duel'"""
    return _SEQUENCE_PREFIX.sub('', Path(filename).stem, count=1)


def _gather_chapter_files(chapter_dir: Path) -> list:
    # Every name carries the same 8 digit prefix width, natural and plain
    # lexical order agree
    return natsorted(
        (path for path in chapter_dir.glob("*.xhtml") if path.is_file()),
        key=lambda path: path.name,
    )


def assemble_book(novel) -> epub.EpubBook:
    """
    Create the EpubBook for a novel from its persisted files.

    Args:
        novel: Novel whose cover page is loaded and whose files are on disk

    Returns:
        epub.EpubBook: cover, chapters in file name order, inline table of contents

    Raises:
        MissingArtifact: if the cover image is not in the novel directory
    """
    metadata = novel.cover.metadata()
    title = metadata.title
    img_type = metadata.cover_image_kind
    chapter_dir = Path(novel.workdir) / title

    book = epub.EpubBook()
    book.set_identifier(str(uuid.uuid5(uuid.NAMESPACE_URL, novel.url)))
    book.set_title(title)
    book.set_language("en")
    book.add_author(metadata.author)

    # --- Cover ---
    cover_path = chapter_dir / f"{title}.{img_type}"
    if not cover_path.is_file():
        raise MissingArtifact(cover_path)
    logger.info(f"Reading '{cover_path}'")
    book.set_cover(f"cover.{img_type}", cover_path.read_bytes())
    # ebooklib guesses the type from the extension, the site tells us the kind
    book.get_item_with_id("cover-img").media_type = f"image/{img_type}"

    # --- Chapters ---
    chapters = []
    for index, path in enumerate(_gather_chapter_files(chapter_dir), start=1):
        logger.info(f"Reading '{path}'")
        chapter = epub.EpubHtml(
            title=chapter_display_title(path.name),
            file_name=f"chapter_{index:08d}.xhtml",
            lang="en",
        )
        # bytes, lxml refuses str input that carries an encoding declaration
        chapter.content = path.read_bytes()
        book.add_item(chapter)
        chapters.append(chapter)

    book.toc = tuple(chapters)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["cover", "nav"] + chapters
    return book


def build_epub(novel) -> Path:
    """
    Write <workdir>/<title>.epub, replacing an existing file.

    The book is serialized in memory first so a failure leaves no partial file.

    Returns:
        Path: the written epub
    """
    book = assemble_book(novel)

    buffer = io.BytesIO()
    epub.write_epub(buffer, book, {})
    data = buffer.getvalue()
    if not data:
        raise MissingArtifact("<epub archive>")

    output_path = Path(novel.workdir) / f"{book.title}.epub"
    output_path.write_bytes(data)
    logger.info(f"EPUB created successfully: {output_path}")
    return output_path
