"""Single-pass tree walk that prunes, scores and collects content text.

The walk threads a confidence level through the recursion. Entering an
element whose class/id weight is positive raises the level by one for its
subtree. Text nodes found at the deepest level reached are the candidates
the content root is later chosen from.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from bs4.element import NavigableString, PageElement, Tag

from mainbody.exceptions import DocumentTooDeepError
from mainbody.logger import logger
from mainbody.parser.document import is_comment, is_element, is_text
from mainbody.parser.head import HeadScanner
from mainbody.parser.protocols import NodeSanitizer, NodeScorer


@dataclass
class WalkResult:
    """Everything a walk learned about the document."""

    title: str | None = None
    charset: str | None = None
    candidates: list[NavigableString] = field(default_factory=list)
    max_level: int = 0
    pruned: int = 0

    def collect(self, text: NavigableString, level: int) -> None:
        """Record a text node found at ``level``."""
        if level > self.max_level:
            self.max_level = level
            self.candidates = [text]
        elif level == self.max_level:
            self.candidates.append(text)


class TreeWalker:
    """Walks a parsed document once, mutating it in place.

    Ignored tags and comments are removed, negatively scored elements are
    pruned, kept elements are sanitized and emptied ``div`` wrappers are
    dropped on the way back up. The walker keeps no per-document state, so
    one instance can serve several documents.
    """

    # Removed together with their subtree
    IGNORED_TAGS: ClassVar[frozenset[str]] = frozenset({
        "embed", "form", "iframe", "link", "meta", "noscript",
        "object", "option", "script", "style", "aside", "head",
    })
    # Kept and descended into, but never scored or sanitized
    TRANSPARENT_TAGS: ClassVar[frozenset[str]] = frozenset({"html", "body"})

    def __init__(
        self,
        scorer: NodeScorer,
        sanitizer: NodeSanitizer,
        head_scanner: HeadScanner | None = None,
        max_depth: int = 512,
    ) -> None:
        """Initialize the walker.

        Args:
            scorer: Weighs ordinary elements.
            sanitizer: Rewrites attributes of kept elements.
            head_scanner: Reads title and charset from the head element.
            max_depth: Deepest nesting accepted before giving up.

        """
        self._scorer = scorer
        self._sanitizer = sanitizer
        self._head_scanner = head_scanner or HeadScanner()
        self._max_depth = max_depth

    def walk(self, document: Tag) -> WalkResult:
        """Walk ``document`` from its root at level 0.

        Args:
            document: Parsed document; it is modified in place.

        Returns:
            WalkResult with the title, charset and candidate text nodes.

        Raises:
            DocumentTooDeepError: If the nesting exceeds the configured depth.

        """
        result = WalkResult()
        self._visit(document, 0, 0, result)
        logger.debug(
            "Walk finished: %d candidate(s) at level %d, %d node(s) pruned",
            len(result.candidates),
            result.max_level,
            result.pruned,
        )
        return result

    def _visit(self, node: PageElement, level: int, depth: int, result: WalkResult) -> None:
        if depth > self._max_depth:
            raise DocumentTooDeepError(f"Document nesting exceeds {self._max_depth} levels")

        element = is_element(node)

        if element and node.name == "head":
            self._scan_head(node, result)

        if (element and node.name in self.IGNORED_TAGS) or is_comment(node):
            self._prune(node, result)
            return

        if element and node.name not in self.TRANSPARENT_TAGS:
            weight = self._scorer.score(node)
            if weight < 0:
                self._prune(node, result)
                return
            if weight > 0:
                level += 1
            self._sanitizer.sanitize(node)

        if is_text(node):
            result.collect(node, level)

        if not isinstance(node, Tag):
            return

        child = node.contents[0] if node.contents else None
        while child is not None:
            # Capture the sibling first, the child may detach itself
            following = child.next_sibling
            self._visit(child, level, depth + 1, result)
            child = following

        if element and node.name == "div" and not node.contents:
            node.extract()

    def _scan_head(self, head: Tag, result: WalkResult) -> None:
        info = self._head_scanner.scan(head)
        if info.charset is not None:
            result.charset = info.charset
        if info.title is not None:
            result.title = info.title

    def _prune(self, node: PageElement, result: WalkResult) -> None:
        node.extract()
        result.pruned += 1
