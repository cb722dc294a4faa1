"""
EPUB Builder module - Responsible for serializing a compiled package to EPUB bytes.
"""

import io
import zipfile
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..models import EpubPackage, RenderedChapter, TableOfContentsEntry
from ..models.package import COVER_ID, NAV_HREF, NCX_HREF, STYLESHEET_HREF


MIMETYPE = "application/epub+zip"
CONTENT_DIR = "OEBPS"

# Fixed member timestamp and permissions so identical packages give identical bytes
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
ZIP_FILE_MODE = 0o644 << 16


class EPUBBuilder:
    """
    Builds EPUB 3.0 containers from a compiled EpubPackage.

    This class handles:
    - Rendering EPUB metadata files (content.opf, toc.ncx, nav.xhtml)
    - Rendering chapter documents
    - Creating the EPUB ZIP structure in memory
    """

    def __init__(self, package: EpubPackage):
        """
        Initialize the EPUB builder.

        Args:
            package: Compiled package to serialize
        """
        self.package = package
        self.metadata = package.metadata

        # Initialize Jinja2 template environment
        templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(enabled_extensions=("xml", "xhtml", "j2")),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def build(self) -> bytes:
        """
        Build the complete EPUB container.

        Returns:
            The .epub archive as bytes
        """
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as epub:
            for name, data in self.members():
                self._add_member(epub, name, data)
        return buffer.getvalue()

    def members(self) -> list[tuple[str, bytes]]:
        """
        List every archive member in write order.

        The mimetype file comes first, as the OCF container format requires.

        Returns:
            List of (archive path, content) tuples
        """
        members = [
            ("mimetype", MIMETYPE.encode("ascii")),
            ("META-INF/container.xml", self._encode(self.render_container_xml())),
            (f"{CONTENT_DIR}/content.opf", self._encode(self.render_content_opf())),
            (f"{CONTENT_DIR}/{NCX_HREF}", self._encode(self.render_toc_ncx())),
            (f"{CONTENT_DIR}/{NAV_HREF}", self._encode(self.render_nav_xhtml())),
        ]

        for chapter in self.package.chapters:
            members.append(
                (f"{CONTENT_DIR}/{chapter.href}", self._encode(self.render_chapter(chapter)))
            )

        if self.package.stylesheet is not None:
            members.append(
                (f"{CONTENT_DIR}/{STYLESHEET_HREF}", self.package.stylesheet.encode("utf-8"))
            )

        if self.package.cover is not None:
            members.append((f"{CONTENT_DIR}/{self.package.cover_href}", self.package.cover.data))

        return members

    @staticmethod
    def _encode(content: str) -> bytes:
        return content.encode("utf-8", "xmlcharrefreplace")

    @staticmethod
    def _add_member(epub: zipfile.ZipFile, name: str, data: bytes) -> None:
        """
        Write one member with a fixed timestamp.

        The mimetype member is stored uncompressed and without extra field
        data; everything else is compressed with ZIP_DEFLATED.
        """
        info = zipfile.ZipInfo(name, date_time=ZIP_EPOCH)
        info.compress_type = zipfile.ZIP_STORED if name == "mimetype" else zipfile.ZIP_DEFLATED
        info.external_attr = ZIP_FILE_MODE
        epub.writestr(info, data)

    def render_container_xml(self) -> str:
        """Render META-INF/container.xml."""
        return self.env.get_template("container.xml.j2").render()

    def render_content_opf(self) -> str:
        """Render OEBPS/content.opf with book metadata, manifest and spine."""
        template = self.env.get_template("content.opf.j2")
        return template.render(
            identifier=self.metadata.identifier,
            title=self.metadata.title,  # Jinja2 will auto-escape
            language=self.metadata.language,
            authors=self.metadata.get_author_names(),
            publisher=self.metadata.publisher.name if self.metadata.publisher else "",
            date=self.metadata.date or "",
            description=self.metadata.description or "",
            rights=self.metadata.rights or "",
            subjects=self.metadata.get_subject_names(),
            modified=self.metadata.modified_timestamp(),
            cover_id=COVER_ID if self.package.cover is not None else None,
            manifest=self.package.manifest,
            spine=self.package.spine,
        )

    def render_toc_ncx(self) -> str:
        """Render OEBPS/toc.ncx (NCX table of contents for EPUB 2 compatibility)."""
        navmap, _ = self._parse_toc(self.package.toc)

        template = self.env.get_template("toc.ncx.j2")
        return template.render(
            identifier=self.metadata.identifier,
            depth=self.package.toc_depth(),
            title=self.metadata.title,
            author=", ".join(self.metadata.get_author_names()),
            navmap=navmap,
        )

    def render_nav_xhtml(self) -> str:
        """Render OEBPS/nav.xhtml (EPUB 3 navigation document)."""
        template = self.env.get_template("nav.xhtml.j2")
        return template.render(
            title=self.metadata.title,
            language=self.metadata.language,
            nav_items=self._parse_nav_toc(self.package.toc),
        )  # Jinja2 auto-escapes title

    def render_chapter(self, chapter: RenderedChapter) -> str:
        """Render one chapter document around its XHTML body."""
        template = self.env.get_template("chapter.xhtml.j2")
        return template.render(
            title=chapter.title,
            language=self.metadata.language,
            anchor=chapter.file_name,
            stylesheet_href=STYLESHEET_HREF if self.package.stylesheet is not None else None,
            body=chapter.body,
        )

    @staticmethod
    def _parse_toc(toc_list: list[TableOfContentsEntry], count: int = 0) -> tuple[str, int]:
        """
        Render TOC entries as NCX navPoints (EPUB 2 compatibility).

        Args:
            toc_list: Entries to render
            count: Play order of the previous entry

        Returns:
            Tuple of (navmap_xml, final_count)
        """
        result = ""
        for item in toc_list:
            count += 1
            result += (
                f'<navPoint id="{escape(item.anchor)}" playOrder="{count}">'
                f"<navLabel><text>{escape(item.title)}</text></navLabel>"
                f'<content src="{escape(item.href)}"/>'
            )

            if item.has_children():
                sub_result, count = EPUBBuilder._parse_toc(item.children, count)
                result += sub_result

            result += "</navPoint>\n"

        return result, count

    @staticmethod
    def _parse_nav_toc(toc_list: list[TableOfContentsEntry]) -> str:
        """
        Render TOC entries as HTML5 nav list items for EPUB 3.

        Args:
            toc_list: Entries to render

        Returns:
            HTML list items as string
        """
        result = ""
        for item in toc_list:
            href = escape(item.href)
            label = escape(item.title)
            if item.has_children():
                children_html = EPUBBuilder._parse_nav_toc(item.children)
                result += f'<li>\n<a href="{href}">{label}</a>\n<ol>\n{children_html}</ol>\n</li>\n'
            else:
                result += f'<li><a href="{href}">{label}</a></li>\n'
        return result
