"""Decoding of legacy Japanese charsets.

Byte documents declaring EUC-JP or Shift_JIS are decoded with the matching
codec before parsing; every other byte document is read as UTF-8. Bytes
that are invalid in the legacy codec become marker characters in the
private use range U+F700-U+F7FF, one per byte, so the error policy is
applied after extraction to the title and content separately.
"""

import codecs
import re
from typing import NamedTuple

from mainbody.exceptions import EncodingConversionError

__all__ = [
    "CharsetConverter",
    "ConversionResult",
    "codec_for",
    "decode_document",
    "mark_invalid_bytes",
]

PASSTHROUGH_CODEC = "utf-8"

# Declared charset names (lower case) -> Python codec
LEGACY_CODECS: dict[str, str] = {
    "euc-jp": "euc_jp",
    "eucjp": "euc_jp",
    "x-euc-jp": "euc_jp",
    "shift_jis": "shift_jis",
    "shift-jis": "shift_jis",
    "sjis": "shift_jis",
    "x-sjis": "shift_jis",
    "ms_kanji": "shift_jis",
    "csshiftjis": "shift_jis",
}

MARK_ERRORS = "mainbody-mark"
MARKER_BASE = 0xF700
_MARKERS = re.compile("[\uf700-\uf7ff]")


def mark_invalid_bytes(error: UnicodeError) -> tuple[str, int]:
    """Codec error handler turning each undecodable byte into a marker."""
    if not isinstance(error, UnicodeDecodeError):
        raise error
    invalid = error.object[error.start:error.end]
    return "".join(chr(MARKER_BASE + byte) for byte in invalid), error.end


codecs.register_error(MARK_ERRORS, mark_invalid_bytes)


class ConversionResult(NamedTuple):
    """Outcome of converting one field."""

    text: str
    error: EncodingConversionError | None = None

    @property
    def ok(self) -> bool:
        """Whether the conversion succeeded."""
        return self.error is None


def codec_for(charset: str | None) -> str | None:
    """Return the codec for a declared charset, or None to pass through."""
    if not charset:
        return None
    return LEGACY_CODECS.get(charset.strip().lower())


def decode_document(raw: bytes, charset: str | None) -> str:
    """Decode document bytes according to the declared charset.

    Args:
        raw: Document bytes.
        charset: Charset declared in the document head, if any.

    Returns:
        The document text. Invalid UTF-8 is replaced, invalid legacy
        bytes are marked for ``CharsetConverter``.

    """
    codec = codec_for(charset)
    if codec is None:
        return raw.decode(PASSTHROUGH_CODEC, errors="replace")
    return raw.decode(codec, errors=MARK_ERRORS)


class CharsetConverter:
    """Applies the codec error policy to extracted fields."""

    def __init__(self, errors: str = "strict") -> None:
        """Initialize the converter.

        Args:
            errors: Error policy for the legacy charsets (strict, replace, ignore).

        """
        self._errors = errors

    def convert(self, text: str, charset: str | None) -> ConversionResult:
        """Settle the invalid bytes of one field.

        Args:
            text: Rendered markup or title decoded by ``decode_document``.
            charset: Charset the document was decoded with, if any.

        Returns:
            ConversionResult with the text, or with an empty text and the
            error when the field holds bytes invalid in the charset and
            the policy is strict.

        """
        if codec_for(charset) is None:
            return ConversionResult(text)

        invalid = _MARKERS.search(text)
        if invalid is None:
            return ConversionResult(text)

        if self._errors == "replace":
            return ConversionResult(_MARKERS.sub("\ufffd", text))
        if self._errors == "ignore":
            return ConversionResult(_MARKERS.sub("", text))

        byte = ord(invalid.group()) - MARKER_BASE
        error = EncodingConversionError(f"Invalid {charset} data: undecodable byte 0x{byte:02x}")
        return ConversionResult("", error)
