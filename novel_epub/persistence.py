"""
Writes the scraped artifacts of a novel to its working directory.

    <workdir>/<title>/<title>.<kind>                cover image
    <workdir>/<title>/00000001 <chapter>.xhtml      one file per chapter

The zero padded prefix is the only ordering the epub builder gets, sorting
the file names has to give the chapter order.
"""

import html
import os
from pathlib import Path

from novel_epub.errors import EmptyField
from novel_epub.utils.logging_utils import get_logger

logger = get_logger(__name__)

XHTML_TEMPLATE = """<?xml version='1.0' encoding='utf-8'?>
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en-US">
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
{content}
</body>
</html>
"""


def novel_dir(novel) -> Path:
    return Path(novel.workdir) / novel.cover.title()


def _ensure_output_directory(dir_path: Path) -> Path:
    """Creates the directory and its parents if needed."""
    if not dir_path.is_dir():
        os.makedirs(dir_path, exist_ok=True)
        logger.info(f"Created directory: {dir_path}")
    return dir_path


def chapter_filename(sequence_number: int, title: str) -> str:
    return f"{sequence_number:0>8} {title}.xhtml"


def compose_xhtml(title: str, content: str) -> str:
    """
    Wrap a chapter in a standalone XHTML document.

    Args:
        title (str): Chapter title, escaped into the heading
        content (str): Chapter markup, inserted as is

    Returns:
        str: The document text
    """
    return XHTML_TEMPLATE.format(title=html.escape(title, quote=False), content=content)


def save_cover(novel) -> Path:
    """Download the cover image into the novel directory, overwriting any previous one."""
    metadata = novel.cover.metadata()
    output_dir = _ensure_output_directory(Path(novel.workdir) / metadata.title)
    img = novel.scraper.fetch_data(metadata.cover_image_url)

    filepath = output_dir / f"{metadata.title}.{metadata.cover_image_kind}"
    logger.info(f"Save to '{filepath}'")
    filepath.write_bytes(img)
    return filepath


def save_chapter(novel) -> Path:
    """
    Write the current chapter of the novel as an xhtml file.

    The chapter fields are extracted here, a chapter page missing its title
    or body raises and aborts the run. Saving the same chapter twice
    overwrites the file.

    Raises:
        EmptyField: if the novel has no current chapter
    """
    if novel.chapter is None:
        raise EmptyField("chapter")

    record = novel.chapter.record(novel.chapter_id)
    output_dir = _ensure_output_directory(novel_dir(novel))
    xhtml = compose_xhtml(record.title, record.body_html)

    filepath = output_dir / chapter_filename(record.sequence_number, record.title)
    logger.info(f"Save to '{filepath}'")
    filepath.write_text(xhtml, encoding="utf-8")
    return filepath
