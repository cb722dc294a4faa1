"""Markdown parsing: chapter titles and XHTML rendering."""

import logging
import re
from pathlib import PurePath
from typing import NamedTuple

import markdown
from bs4 import BeautifulSoup

from ..models import TableOfContentsEntry
from ..utils.exceptions import UnsupportedMarkup


logger = logging.getLogger(__name__)

# Constants
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists", "toc"]

# Elements the supported markdown subset can produce
SUPPORTED_TAGS = frozenset(
    {
        "a", "blockquote", "br", "code", "em", "h1", "h2", "h3", "h4", "h5", "h6",
        "hr", "img", "li", "ol", "p", "pre", "strong", "table", "tbody", "td",
        "th", "thead", "tr", "ul",
    }
)  # fmt: skip

HEADING_RE = re.compile(r"^ {0,3}#{1,6}[ \t]+(?P<title>.+?)(?:[ \t]+#+)?[ \t]*$")
ORDERING_PREFIX_RE = re.compile(r"^\d+(?=[\s._-]|$)")
SEPARATORS_RE = re.compile(r"[\s._-]+")


class RenderedMarkup(NamedTuple):
    """XHTML body of a chapter and its level-2 sections."""

    body: str
    sections: list[tuple[str, str]]


def title_from_filename(path: str, position: int) -> str:
    """Derive a human-readable title from a source file name.

    A leading numeric ordering prefix is dropped, separators become spaces
    and each word is capitalised: ``03-conclusion.md`` gives ``Conclusion``.
    Names without any letters or digits fall back to ``Chapter N``.

    Args:
        path: Source file name or path
        position: 1-based position of the document

    Returns:
        Display title
    """
    stem = ORDERING_PREFIX_RE.sub("", PurePath(path).stem)
    words = SEPARATORS_RE.sub(" ", stem).split()
    title = " ".join(word[:1].upper() + word[1:] for word in words)
    if not any(ch.isalnum() for ch in title):
        return f"Chapter {position}"
    return title


def split_title(path: str, text: str, position: int) -> tuple[str, str]:
    """Split a document into its display title and remaining markdown body.

    When the first non-blank line is an ATX heading, its text becomes the
    title and the line is removed from the body. Otherwise the title comes
    from the file name and the body is left untouched.

    Args:
        path: Source file name or path
        text: Raw markdown text
        position: 1-based position of the document

    Returns:
        Tuple of (title, body)
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines()
    for index, line in enumerate(lines):
        if not line.strip():
            continue
        match = HEADING_RE.match(line)
        if match and match.group("title").strip():
            body = "\n".join(lines[index + 1 :])
            return match.group("title").strip(), body
        break

    return title_from_filename(path, position), text


def chapter_file_name(position: int, width: int) -> str:
    """Build the zero-padded file name stem for a chapter (e.g., chapter01)."""
    return f"chapter{position:0{width}d}"


def pad_width(count: int, minimum: int) -> int:
    """Digits needed so that ``count`` chapters never share a file name."""
    return max(minimum, len(str(count)))


class MarkdownRenderer:
    """Renders the supported markdown subset to well-formed XHTML fragments.

    Headings, paragraphs, lists, block quotes, fenced code blocks and
    tables are supported. Anything else Python-Markdown passes through
    (raw HTML, for instance) is kept as-is unless ``strict`` is set, in
    which case it raises ``UnsupportedMarkup``.
    """

    def __init__(self, strict: bool = False):
        """
        Initialize the renderer.

        Args:
            strict: Reject elements the markdown subset cannot produce
        """
        self.strict = strict
        self._md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="xhtml")

    def render(
        self, text: str, document: str = "<string>", reserved_id: str | None = None
    ) -> RenderedMarkup:
        """
        Render markdown text to an XHTML fragment.

        Args:
            text: Markdown body
            document: Name of the source document, used in error messages
            reserved_id: Id already used by the enclosing document; body
                elements carrying it are renamed

        Returns:
            RenderedMarkup with the XHTML body and (id, title) of each ## heading

        Raises:
            UnsupportedMarkup: In strict mode, for elements outside the subset
        """
        self._md.reset()
        html = self._md.convert(text)
        if not html.strip():
            return RenderedMarkup("", [])

        soup = BeautifulSoup(html, "lxml")
        body = soup.body
        if body is None:
            return RenderedMarkup("", [])

        if self.strict:
            for tag in body.find_all(True):
                if tag.name not in SUPPORTED_TAGS:
                    raise UnsupportedMarkup(document, tag.name)

        if reserved_id:
            self._release_id(body, reserved_id)

        sections = [
            (str(heading["id"]), " ".join(heading.get_text().split()))
            for heading in body.find_all("h2")
            if heading.get("id")
        ]
        logger.debug(f"Rendered {document}: {len(html)} chars, {len(sections)} sections")
        return RenderedMarkup(body.decode_contents(formatter="minimal").strip(), sections)

    @staticmethod
    def _release_id(body, reserved_id: str) -> None:
        """Rename body elements whose id clashes with ``reserved_id``.

        Uses the ``_N`` suffix Python-Markdown gives duplicate heading ids.
        """
        taken = {str(tag["id"]) for tag in body.find_all(id=True)}
        taken.add(reserved_id)
        for tag in body.find_all(id=reserved_id):
            n = 1
            while f"{reserved_id}_{n}" in taken:
                n += 1
            tag["id"] = f"{reserved_id}_{n}"
            taken.add(tag["id"])

    @staticmethod
    def section_entries(
        file_name: str, sections: list[tuple[str, str]]
    ) -> list[TableOfContentsEntry]:
        """Turn rendered ## headings into nested TOC entries for a chapter.

        Heading ids are only unique within one chapter, so entry anchors are
        prefixed with the chapter file name.
        """
        return [
            TableOfContentsEntry(
                href=f"{file_name}.xhtml#{heading_id}",
                title=title,
                anchor=f"{file_name}-{heading_id}",
            )
            for heading_id, title in sections
        ]
