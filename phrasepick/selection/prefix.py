from typing import Sequence

ALPHABET = tuple("abcdefghijklmnopqrstuvwxyz")


def matches(vocabulary: Sequence[str], prefix: str | None = "") -> list[str]:
    """
    Returns every word starting with prefix, in vocabulary order.
    Nothing matches the empty prefix.
    """
    if not prefix:
        return []
    return [w for w in vocabulary if w.startswith(prefix)]


def next_chars(vocabulary: Sequence[str], prefix: str | None = "") -> list[str]:
    """
    Returns the sorted characters that extend prefix towards at least one word.
    The first letter is always chosen from the full alphabet.
    """
    if not prefix:
        return list(ALPHABET)

    position = len(prefix)
    chars = set()
    for word in matches(vocabulary, prefix):
        # A word equal to the prefix has nothing at this position
        if len(word) > position:
            chars.add(word[position])
    return sorted(chars)
