"""Document input, node classification and serialization.

Byte documents are decoded before parsing (see ``mainbody.parser.charset``)
so character references resolve to the characters they name. Text input is
parsed as given.
"""

from typing import IO

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Comment, NavigableString, PageElement, PreformattedString, Tag

from mainbody.exceptions import MalformedInputError

__all__ = [
    "BYTE_VIEW_ENCODING",
    "Source",
    "is_comment",
    "is_element",
    "is_text",
    "parse_document",
    "read_source",
    "render",
]

# One character per byte, used to look at undecoded documents
BYTE_VIEW_ENCODING = "latin-1"

Source = bytes | bytearray | memoryview | str | IO[bytes] | IO[str]


def read_source(source: Source) -> bytes | str:
    """Read a document.

    Args:
        source: Bytes, a string, or a readable stream of either.

    Returns:
        The document bytes, or the document text for string sources.

    Raises:
        MalformedInputError: If the source type is unsupported or reading fails.

    """
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, "read"):
        try:
            data = source.read()
        except OSError as e:
            raise MalformedInputError(f"Could not read document: {e}") from e
        return read_source(data)
    raise MalformedInputError(f"Unsupported document source: {type(source).__name__}")


def parse_document(markup: str, parser: str = "lxml") -> BeautifulSoup:
    """Parse decoded document text.

    Attribute values are kept as plain strings so class and id values can
    be scored as written. Of repeated attributes the first one is kept.

    Args:
        markup: Document text.
        parser: BeautifulSoup tree builder to use.

    Returns:
        The parsed document.

    Raises:
        MalformedInputError: If the document cannot be parsed.

    """
    # lxml and html5lib already drop repeated attributes, html.parser keeps the last
    options = {"on_duplicate_attribute": "ignore"} if parser == "html.parser" else {}
    if not markup:
        return BeautifulSoup("", parser, multi_valued_attributes=None, **options)
    # A definite encoding keeps a meta charset in the text from being applied again
    data = markup.encode("utf-8")
    try:
        return BeautifulSoup(
            data, parser, from_encoding="utf-8", multi_valued_attributes=None, **options
        )
    except ParserRejectedMarkup as e:
        raise MalformedInputError(f"Parser rejected document: {e}") from e


def is_element(node: PageElement) -> bool:
    """Return True for element nodes (the document object excluded)."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def is_text(node: PageElement) -> bool:
    """Return True for character data (comments and doctypes excluded)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_comment(node: PageElement) -> bool:
    """Return True for comment nodes."""
    return isinstance(node, Comment)


def render(node: Tag) -> str:
    """Render an element and its descendants back to markup."""
    return str(node)
