"""Keyword scoring of elements by their class and id attributes."""

from collections.abc import Sequence

from bs4.element import Tag

from mainbody.parser.matcher import index_word

__all__ = ["NEGATIVE_KEYWORDS", "POSITIVE_KEYWORDS", "KeywordScorer"]

# Keywords hinting that an element wraps the article itself
POSITIVE_KEYWORDS: tuple[str, ...] = (
    "article",
    "body",
    "content",
    "entry",
    "hentry",
    "page",
    "post",
    "text",
)

# Keywords hinting at page chrome
NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "breadcrumb",
    "combx",
    "comment",
    "contact",
    "disqus",
    "foot",
    "footer",
    "footnote",
    "header",
    "hidden",
    "link",
    "media",
    "meta",
    "mod-conversations",
    "pager",
    "pagination",
    "promo",
    "reaction",
    "related",
    "scroll",
    "share",
    "shoutbox",
    "sidebar",
    "social",
    "sponsor",
    "tags",
    "toolbox",
    "widget",
)

SCORED_ATTRIBUTES = frozenset({"class", "id"})


class KeywordScorer:
    """Weighs an element by keyword hits in its class and id attributes.

    Every positive keyword found as a whole word adds one, every negative
    keyword subtracts one. A negative total marks the element as chrome,
    a positive total as a likely content container.
    """

    def __init__(
        self,
        positive: Sequence[str] = POSITIVE_KEYWORDS,
        negative: Sequence[str] = NEGATIVE_KEYWORDS,
    ) -> None:
        """Initialize the scorer.

        Args:
            positive: Keywords that raise the weight.
            negative: Keywords that lower the weight.

        """
        self._positive = tuple(positive)
        self._negative = tuple(negative)

    def score_value(self, value: str) -> int:
        """Return the weight contributed by a single attribute value."""
        weight = sum(1 for word in self._positive if index_word(value, word) >= 0)
        weight -= sum(1 for word in self._negative if index_word(value, word) >= 0)
        return weight

    def score(self, tag: Tag) -> int:
        """Return the summed weight of the element's class and id attributes."""
        return sum(
            self.score_value(value)
            for key, value in tag.attrs.items()
            if key in SCORED_ATTRIBUTES
        )
