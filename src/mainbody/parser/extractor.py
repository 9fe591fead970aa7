"""Title and main content extraction from an HTML document."""

from typing import NamedTuple

from mainbody.config import Settings, get_settings
from mainbody.exceptions import InvalidBaseURLError
from mainbody.logger import logger
from mainbody.parser.charset import CharsetConverter, ConversionResult, decode_document
from mainbody.parser.document import Source, parse_document, read_source, render
from mainbody.parser.head import HeadScanner, sniff_charset
from mainbody.parser.sanitizer import AttributeSanitizer, parse_url_reference
from mainbody.parser.scorer import KeywordScorer
from mainbody.parser.selector import select_content_root
from mainbody.parser.walker import TreeWalker


class Extraction(NamedTuple):
    """Result of extracting a document."""

    title: str
    content: str


class Extractor:
    """Extracts the title and principal article body of HTML documents.

    Pipeline: bytes -> text (declared charset) -> tree -> walk (prune, score,
    sanitize, collect) -> content root -> markup -> invalid byte policy.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the extractor with settings.

        Args:
            settings: Application settings containing extraction configuration.

        """
        self._settings = settings
        self._scorer = KeywordScorer()
        self._head_scanner = HeadScanner()
        self._converter = CharsetConverter(errors=settings.transcode_errors)

    def extract(self, source: Source, base_url: str | None = None) -> Extraction:
        """Extract the title and content of a document.

        Args:
            source: Document bytes, string or readable stream.
            base_url: URL relative image sources are resolved against.

        Returns:
            Extraction with the title and the rendered content root. Both are
            empty strings when nothing was found or could not be decoded.

        Raises:
            InvalidBaseURLError: If ``base_url`` does not parse.
            MalformedInputError: If the document cannot be read or parsed.
            DocumentTooDeepError: If the document nests too deeply.

        """
        if base_url is not None:
            validate_base_url(base_url)

        logger.debug("[EXTRACTION STARTED] (base=%s)", base_url)
        parser = self._settings.html_parser
        raw = read_source(source)
        if isinstance(raw, str):
            # Already text, a declared charset no longer applies
            text, charset = raw, None
        else:
            charset = sniff_charset(raw, parser)
            text = decode_document(raw, charset)
        document = parse_document(text, parser)

        walker = TreeWalker(
            scorer=self._scorer,
            sanitizer=AttributeSanitizer(
                base_url=base_url,
                legacy_image_attributes=self._settings.legacy_image_attributes,
            ),
            head_scanner=self._head_scanner,
            max_depth=self._settings.max_nesting_depth,
        )
        walked = walker.walk(document)

        root = select_content_root(walked.candidates)
        if root is None:
            logger.debug("No content found")
            markup = ""
        else:
            markup = render(root)

        content = self._converter.convert(markup, charset)
        title = self._converter.convert(walked.title or "", charset)
        return Extraction(
            title=_text_or_empty(title, "title"),
            content=_text_or_empty(content, "content"),
        )


def validate_base_url(base_url: str) -> None:
    """Check that a base URL parses.

    Raises:
        InvalidBaseURLError: If it does not.

    """
    try:
        parse_url_reference(base_url)
    except ValueError as e:
        raise InvalidBaseURLError(f"Invalid base URL {base_url!r}: {e}") from e


def _text_or_empty(result: ConversionResult, field: str) -> str:
    if not result.ok:
        logger.warning("Could not convert %s: %s", field, result.error)
    return result.text


def extract(source: Source, *, settings: Settings | None = None) -> Extraction:
    """Extract the title and main content of a document.

    Args:
        source: Document bytes, string or readable stream.
        settings: Settings to use instead of the environment defaults.

    Returns:
        Extraction(title, content).

    """
    return Extractor(settings or get_settings()).extract(source)


def extract_with_base(
    source: Source, base_url: str, *, settings: Settings | None = None
) -> Extraction:
    """Extract like ``extract``, resolving image sources against ``base_url``.

    Raises:
        InvalidBaseURLError: If ``base_url`` does not parse.

    """
    return Extractor(settings or get_settings()).extract(source, base_url)
