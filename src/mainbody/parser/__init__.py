"""Parser package for heuristic main content extraction.

This package turns an HTML document into its title and principal article
body: one walk over the parsed tree prunes chrome, scores elements by their
class/id keywords and collects the deepest content text, then the common
ancestor of that text is rendered. Byte documents declaring EUC-JP or
Shift_JIS are decoded with that charset before parsing.
"""

from mainbody.exceptions import (
    DocumentTooDeepError,
    EncodingConversionError,
    InvalidBaseURLError,
    MalformedInputError,
)
from mainbody.parser.charset import CharsetConverter, ConversionResult, decode_document
from mainbody.parser.document import parse_document, render
from mainbody.parser.extractor import Extraction, Extractor, extract, extract_with_base
from mainbody.parser.head import HeadInfo, HeadScanner, sniff_charset
from mainbody.parser.matcher import index_word
from mainbody.parser.protocols import NodeSanitizer, NodeScorer
from mainbody.parser.sanitizer import AttributeSanitizer
from mainbody.parser.scorer import KeywordScorer
from mainbody.parser.selector import nearest_common_ancestor, select_content_root
from mainbody.parser.walker import TreeWalker, WalkResult

__all__ = [
    "AttributeSanitizer",
    "CharsetConverter",
    "ConversionResult",
    "DocumentTooDeepError",
    "EncodingConversionError",
    "Extraction",
    "Extractor",
    "HeadInfo",
    "HeadScanner",
    "InvalidBaseURLError",
    "KeywordScorer",
    "MalformedInputError",
    "NodeSanitizer",
    "NodeScorer",
    "TreeWalker",
    "WalkResult",
    "decode_document",
    "extract",
    "extract_with_base",
    "index_word",
    "nearest_common_ancestor",
    "parse_document",
    "render",
    "select_content_root",
    "sniff_charset",
]
