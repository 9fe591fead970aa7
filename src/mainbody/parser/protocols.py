"""Protocol definitions for the parser package.

Contains structural typing protocols for the pluggable parts of the tree
walk, so alternative scoring or attribute policies can be swapped in.
"""

from typing import Protocol

from bs4.element import Tag


class NodeScorer(Protocol):
    """Protocol defining the interface for element scorers.

    Implementations should:
    - Return a negative weight for elements to prune with their subtree
    - Return a positive weight for likely content containers
    - Return zero for neutral elements
    """

    def score(self, tag: Tag) -> int:
        """Return the weight of an element."""
        ...


class NodeSanitizer(Protocol):
    """Protocol defining the interface for attribute sanitizers."""

    def sanitize(self, tag: Tag) -> None:
        """Rewrite the attributes of a kept element in place."""
        ...
