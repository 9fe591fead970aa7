"""Whole-word keyword matching for class and id attribute values."""


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def index_word(haystack: str, word: str) -> int:
    """Find ``word`` in ``haystack`` when it is not glued to other letters.

    Only the leftmost occurrence is considered. An occurrence at the start
    of the haystack is rejected when a letter follows it; any other
    occurrence is rejected when a letter precedes it. The character after
    a non-leading occurrence is not checked, so ``"block-pagers"`` still
    matches ``"pager"``.

    Args:
        haystack: Attribute value to search.
        word: Keyword to look for.

    Returns:
        Position of the accepted occurrence, or -1 when there is none.

    Example:
        >>> index_word("new-pager", "pager")
        4
        >>> index_word("newpagertext foo", "pager")
        -1

    """
    index = haystack.find(word)
    if index < 0:
        return -1

    end = index + len(word)
    if index == 0 and end == len(haystack):
        return 0

    if index == 0:
        return -1 if _is_ascii_letter(haystack[end]) else 0

    return -1 if _is_ascii_letter(haystack[index - 1]) else index
