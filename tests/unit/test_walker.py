"""Unit tests for the tree walker."""

import pytest
from bs4 import BeautifulSoup
from bs4.element import Comment, Tag

from mainbody.exceptions import DocumentTooDeepError, MalformedInputError
from mainbody.parser.sanitizer import AttributeSanitizer
from mainbody.parser.scorer import KeywordScorer
from mainbody.parser.walker import TreeWalker, WalkResult


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)


def _texts(result: WalkResult) -> list[str]:
    return [str(text) for text in result.candidates]


@pytest.fixture
def walker() -> TreeWalker:
    """Create a walker with the default scorer and no base URL."""
    return TreeWalker(scorer=KeywordScorer(), sanitizer=AttributeSanitizer())


class TestWalkResult:
    """Test the candidate set update rule."""

    def test_collect_rules(self) -> None:
        """Test reset on deeper level, append on equal, ignore lower."""
        soup = _soup("<p>a</p><p>b</p><p>c</p><p>d</p>")
        a, b, c, d = soup.find_all(string=True)
        result = WalkResult()

        result.collect(a, 0)
        result.collect(b, 1)
        result.collect(c, 0)
        result.collect(d, 1)

        assert result.candidates == [b, d]
        assert result.max_level == 1


class TestPruning:
    """Test removal of non-content nodes."""

    @pytest.mark.parametrize("tag", [
        "embed", "form", "iframe", "link", "meta", "noscript",
        "object", "option", "script", "style", "aside",
    ])
    def test_ignored_tags_removed(self, walker: TreeWalker, tag: str) -> None:
        """Test that ignored tags are removed."""
        soup = _soup(f"<p>keep</p><{tag}></{tag}>")
        walker.walk(soup)
        assert soup.find(tag) is None
        assert str(soup) == "<p>keep</p>"

    def test_ignored_subtrees_removed(self, walker: TreeWalker) -> None:
        """Test that the content of ignored containers goes with them."""
        soup = _soup(
            "<p>keep</p><form><span>gone</span></form><aside><p>gone</p></aside>"
            "<noscript>gone</noscript><div><script>gone()</script></div>"
        )
        result = walker.walk(soup)
        assert "gone" not in str(soup)
        assert _texts(result) == ["keep"]

    def test_comments_removed(self, walker: TreeWalker) -> None:
        """Test that comments are removed at any depth."""
        soup = _soup("<!-- top --><div><p>a<!-- inner --></p></div>")
        walker.walk(soup)
        assert soup.find(string=lambda s: isinstance(s, Comment)) is None

    def test_negative_weight_prunes_subtree(self, walker: TreeWalker) -> None:
        """Test that chrome containers are removed without being collected."""
        soup = _soup('<div class="sidebar"><p>side</p></div><p>main</p>')
        result = walker.walk(soup)
        assert "side" not in str(soup)
        assert _texts(result) == ["main"]

    def test_removal_keeps_sibling_traversal(self, walker: TreeWalker) -> None:
        """Test that removing nodes does not skip their siblings."""
        soup = _soup("<p>a</p><script>s</script><p>b</p><style>t</style><!--c--><p>c</p>")
        result = walker.walk(soup)
        assert _texts(result) == ["a", "b", "c"]
        assert result.pruned == 3

    def test_emptied_divs_removed(self, walker: TreeWalker) -> None:
        """Test that wrappers emptied by pruning are dropped bottom-up."""
        soup = _soup("<div><div><script>s</script></div></div><p>x</p>")
        walker.walk(soup)
        assert soup.find("div") is None
        assert str(soup) == "<p>x</p>"

    def test_empty_non_div_kept(self, walker: TreeWalker) -> None:
        """Test that only div wrappers are dropped when emptied."""
        soup = _soup("<section><script>s</script></section><p>x</p>")
        walker.walk(soup)
        assert soup.find("section") is not None

    def test_div_with_text_kept(self, walker: TreeWalker) -> None:
        """Test that a div with remaining children stays."""
        soup = _soup("<div>text<script>s</script></div>")
        walker.walk(soup)
        assert str(soup) == "<div>text</div>"


class TestLevels:
    """Test confidence level tracking."""

    def test_positive_container_raises_level(self, walker: TreeWalker) -> None:
        """Test that text inside a positive container wins."""
        soup = _soup('<div class="post"><p>deep</p></div><p>shallow</p>')
        result = walker.walk(soup)
        assert result.max_level == 1
        assert _texts(result) == ["deep"]

    def test_deeper_level_resets_candidates(self, walker: TreeWalker) -> None:
        """Test that earlier shallower text is discarded."""
        soup = _soup('<p>first</p><div class="post"><p>second</p></div>')
        result = walker.walk(soup)
        assert _texts(result) == ["second"]

    def test_nested_positive_containers(self, walker: TreeWalker) -> None:
        """Test that levels stack through nesting."""
        soup = _soup('<div class="post"><div class="content"><p>two</p></div><p>one</p></div>')
        result = walker.walk(soup)
        assert result.max_level == 2
        assert _texts(result) == ["two"]

    def test_level_restored_for_siblings(self, walker: TreeWalker) -> None:
        """Test that a sibling after a positive subtree is back at the outer level."""
        soup = _soup('<div class="post"><p>a</p></div><div class="entry"><p>b</p></div><p>c</p>')
        result = walker.walk(soup)
        assert _texts(result) == ["a", "b"]

    def test_no_positive_containers(self, walker: TreeWalker) -> None:
        """Test that level 0 text is collected in document order."""
        soup = _soup("<p>a</p><p>b</p>")
        result = walker.walk(soup)
        assert result.max_level == 0
        assert _texts(result) == ["a", "b"]


class TestTransparentTags:
    """Test html and body handling."""

    def test_html_and_body_not_scored_or_sanitized(self, walker: TreeWalker) -> None:
        """Test that html and body keep their attributes and are never pruned."""
        soup = _soup('<html class="sidebar"><body class="comment"><p>x</p></body></html>')
        result = walker.walk(soup)
        assert soup.body is not None
        assert soup.body["class"] == "comment"
        assert soup.html is not None
        assert soup.html["class"] == "sidebar"
        assert _texts(result) == ["x"]

    def test_body_does_not_raise_level(self, walker: TreeWalker) -> None:
        """Test that a positive body class adds no level."""
        soup = _soup('<body class="content"><p>x</p></body>')
        result = walker.walk(soup)
        assert result.max_level == 0


class TestHead:
    """Test head handling."""

    def test_head_scanned_then_removed(self, walker: TreeWalker) -> None:
        """Test that title and charset are read before the head is dropped."""
        soup = _soup(
            '<html><head><meta charset="EUC-JP"><title>T</title></head>'
            "<body><p>x</p></body></html>"
        )
        result = walker.walk(soup)
        assert result.title == "T"
        assert result.charset == "EUC-JP"
        assert soup.head is None
        assert _texts(result) == ["x"]

    def test_title_outside_head_is_content(self, walker: TreeWalker) -> None:
        """Test that a title element elsewhere is not the document title."""
        soup = _soup("<title>T</title>")
        result = walker.walk(soup)
        assert result.title is None
        assert _texts(result) == ["T"]


class TestSanitizing:
    """Test that kept elements are sanitized."""

    def test_attributes_stripped(self, walker: TreeWalker) -> None:
        """Test that ordinary elements lose their attributes."""
        soup = _soup('<div class="post" style="x"><p class="lead">t</p><a href="/x" rel="n">l</a></div>')
        walker.walk(soup)
        assert str(soup) == '<div><p>t</p><a href="/x">l</a></div>'

    def test_custom_scorer(self) -> None:
        """Test that any object with a score method can drive the walk."""

        class SectionScorer:
            def score(self, tag: Tag) -> int:
                return 1 if tag.name == "section" else 0

        walker = TreeWalker(scorer=SectionScorer(), sanitizer=AttributeSanitizer())
        soup = _soup('<div class="sidebar">a</div><section><p>b</p></section>')
        result = walker.walk(soup)
        assert _texts(result) == ["b"]


class TestDepthGuard:
    """Test the nesting guard."""

    def test_too_deep_raises(self) -> None:
        """Test that nesting beyond the limit raises."""
        walker = TreeWalker(scorer=KeywordScorer(), sanitizer=AttributeSanitizer(), max_depth=3)
        soup = _soup("<span>" * 10 + "x" + "</span>" * 10)
        with pytest.raises(DocumentTooDeepError):
            walker.walk(soup)

    def test_too_deep_is_malformed_input(self) -> None:
        """Test the error hierarchy."""
        assert issubclass(DocumentTooDeepError, MalformedInputError)

    def test_within_limit(self) -> None:
        """Test that nesting at the limit is accepted."""
        walker = TreeWalker(scorer=KeywordScorer(), sanitizer=AttributeSanitizer(), max_depth=3)
        soup = _soup("<span><span>x</span></span>")
        assert _texts(walker.walk(soup)) == ["x"]
