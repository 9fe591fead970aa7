"""Choice of the subtree that holds the content text."""

from collections.abc import Iterator, Sequence

from bs4.element import NavigableString, PageElement, Tag

from mainbody.logger import logger


def _lineage(node: PageElement) -> Iterator[PageElement]:
    """Yield ``node`` followed by its ancestors up to the root."""
    yield node
    yield from node.parents


def nearest_common_ancestor(first: PageElement, second: PageElement) -> PageElement | None:
    """Return the common ancestor of two nodes nearest to ``first``.

    Nodes are compared by identity. A node counts as its own ancestor.

    Args:
        first: Node whose ancestor chain is walked outward.
        second: Node whose ancestor chain is looked up.

    Returns:
        The nearest shared node, or None for nodes in different trees.

    """
    second_chain = {id(node) for node in _lineage(second)}
    for node in _lineage(first):
        if id(node) in second_chain:
            return node
    return None


def select_content_root(candidates: Sequence[NavigableString]) -> Tag | None:
    """Pick the element that contains every candidate text node.

    One candidate selects its parent; several are folded left to right
    through their nearest common ancestor.

    Args:
        candidates: Text nodes from the deepest confidence level.

    Returns:
        The content root, or None when there is no candidate.

    """
    if not candidates:
        return None

    root: PageElement | None = candidates[0].parent
    for text in candidates[1:]:
        if root is None:
            break
        root = nearest_common_ancestor(root, text.parent)

    if not isinstance(root, Tag):
        return None

    logger.debug("Content root <%s> chosen from %d candidate(s)", root.name, len(candidates))
    return root
