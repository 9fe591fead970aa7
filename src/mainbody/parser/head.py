"""Title and charset lookup in the document head."""

from typing import NamedTuple

from bs4.element import NavigableString, PageElement, Tag

from mainbody.parser.charset import LEGACY_CODECS
from mainbody.parser.document import BYTE_VIEW_ENCODING, parse_document

CHARSET_MARKER = "charset="


class HeadInfo(NamedTuple):
    """Title and charset declared in a head element."""

    title: str | None
    charset: str | None


def meta_charset(meta: Tag) -> str | None:
    """Return the charset declared by a meta element, if any.

    ``<meta charset="...">`` wins over a ``content`` attribute. For the
    ``http-equiv`` form everything after ``charset=`` is returned as is.
    """
    charset = meta.attrs.get("charset")
    if charset:
        return charset

    content = meta.attrs.get("content")
    if content is not None and CHARSET_MARKER in content:
        return content[content.index(CHARSET_MARKER) + len(CHARSET_MARKER):]
    return None


class HeadScanner:
    """Scans the direct children of a head element."""

    def scan(self, head: Tag) -> HeadInfo:
        """Collect the title and charset from ``head``.

        A later meta charset overwrites an earlier one. The first title
        with content ends the scan.

        Args:
            head: The head element.

        Returns:
            HeadInfo with None for anything not declared.

        """
        title: str | None = None
        charset: str | None = None

        for child in head.children:
            if not isinstance(child, Tag):
                continue
            if child.name == "meta":
                found = meta_charset(child)
                if found is not None:
                    charset = found
            elif child.name == "title" and child.contents:
                title = _node_text(child.contents[0])
                break

        return HeadInfo(title=title, charset=charset)


def _node_text(node: PageElement) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        return node.get_text()
    return ""


def sniff_charset(raw: bytes, parser: str = "lxml") -> str | None:
    """Read the charset declared in the head of undecoded document bytes.

    The bytes are parsed one character per byte, which is enough to read
    the ASCII charset names. Documents that mention none of the legacy
    charsets are not parsed, their declaration does not change decoding.

    Args:
        raw: Document bytes.
        parser: BeautifulSoup tree builder to use.

    Returns:
        The last charset declared in a head element, or None.

    """
    lowered = raw.lower()
    if not any(name.encode("ascii") in lowered for name in LEGACY_CODECS):
        return None

    soup = parse_document(raw.decode(BYTE_VIEW_ENCODING), parser)
    scanner = HeadScanner()
    charset: str | None = None
    for head in soup.find_all("head"):
        found = scanner.scan(head).charset
        if found is not None:
            charset = found
    return charset
