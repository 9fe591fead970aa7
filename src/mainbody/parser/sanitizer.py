"""Per-tag attribute allow-list applied to kept elements."""

from typing import ClassVar
from urllib.parse import SplitResult, urljoin, urlsplit

from bs4.element import Tag

from mainbody.logger import logger


def parse_url_reference(value: str) -> SplitResult:
    """Parse an absolute or relative URL reference.

    Args:
        value: URL reference to parse.

    Returns:
        The split URL.

    Raises:
        ValueError: If the reference is malformed (bad IPv6 host, bad port).

    """
    parts = urlsplit(value)
    # Accessing port validates it
    _ = parts.port
    return parts


class AttributeSanitizer:
    """Strips attributes from kept elements.

    Links keep their ``href``, images keep a small set of presentational
    attributes with ``src`` resolved against the base URL, everything else
    loses all attributes.
    """

    IMAGE_ATTRIBUTES: ClassVar[tuple[str, ...]] = ("src", "alt", "width", "height")

    def __init__(self, base_url: str | None = None, legacy_image_attributes: bool = False) -> None:
        """Initialize the sanitizer.

        Args:
            base_url: Already validated URL that relative image sources are
                resolved against. None keeps sources as written.
            legacy_image_attributes: Leave an image untouched when its ``src``
                does not parse, instead of dropping the ``src``.

        """
        self._base_url = base_url
        self._legacy_image_attributes = legacy_image_attributes

    def sanitize(self, tag: Tag) -> None:
        """Rewrite the attributes of ``tag`` in place."""
        if tag.name == "a":
            self._sanitize_link(tag)
        elif tag.name == "img":
            self._sanitize_image(tag)
        else:
            tag.attrs = {}

    def resolve(self, src: str) -> str:
        """Resolve an image source against the base URL.

        Raises:
            ValueError: If ``src`` is not a valid URL reference.

        """
        parse_url_reference(src)
        if self._base_url is None:
            return src
        return urljoin(self._base_url, src)

    def _sanitize_link(self, tag: Tag) -> None:
        href = tag.attrs.get("href")
        tag.attrs = {} if href is None else {"href": href}

    def _sanitize_image(self, tag: Tag) -> None:
        kept: dict[str, str] = {}
        for key, value in tag.attrs.items():
            if key not in self.IMAGE_ATTRIBUTES:
                continue
            if key != "src":
                kept[key] = value
                continue
            try:
                kept[key] = self.resolve(value)
            except ValueError as e:
                if self._legacy_image_attributes:
                    logger.debug("Keeping image attributes, bad src %r: %s", value, e)
                    return
                logger.debug("Dropping unparsable image src %r: %s", value, e)
        tag.attrs = kept
