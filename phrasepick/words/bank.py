import json
import logging
from pathlib import Path
from typing import Iterable, Iterator

from phrasepick.selection.prefix import matches, next_chars

logger = logging.getLogger(__name__)


class VocabularyError(ValueError):
    """Raised when a word list cannot be turned into a vocabulary."""


class Vocabulary:
    """
    Immutable, ordered word list that a selection session narrows over.
    """

    def __init__(self, words: Iterable[str]):
        # Store as lowercase for consistent comparison
        cleaned = [w.strip().lower() for w in words]
        cleaned = [w for w in cleaned if w]

        seen = set()
        duplicates = []
        for w in cleaned:
            if w in seen:
                duplicates.append(w)
            seen.add(w)
        if duplicates:
            raise VocabularyError(f"Duplicate words in vocabulary: {', '.join(sorted(set(duplicates)))}")

        self._words = tuple(cleaned)
        self._members = frozenset(cleaned)
        if not self._words:
            logger.warning("Vocabulary is empty; no word can ever be confirmed")

    @classmethod
    def from_text(cls, text: str) -> "Vocabulary":
        return cls(text.splitlines())

    @classmethod
    def from_file(cls, filepath: str | Path) -> "Vocabulary":
        """
        Reads a JSON array of words (``.json``) or a plain list, one word per line.
        """
        path = Path(filepath)
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix == ".json":
                words = json.load(f)
                if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                    raise VocabularyError(f"{path} must contain a JSON array of strings")
                return cls(words)
            return cls.from_text(f.read())

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def matches(self, prefix: str = "") -> list[str]:
        return matches(self._words, prefix)

    def next_chars(self, prefix: str = "") -> list[str]:
        return next_chars(self._words, prefix)

    def __contains__(self, word: object) -> bool:
        return word in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._words)} words)"
