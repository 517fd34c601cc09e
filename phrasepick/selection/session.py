import logging
from typing import List
from phrasepick.selection.errors import CapacityExceeded, IndexOutOfRange, InvalidSelection
from phrasepick.selection.models import SelectionState, SessionView
from phrasepick.selection.prefix import matches, next_chars
from phrasepick.words.bank import Vocabulary

logger = logging.getLogger(__name__)

class SelectionSession:
    """
    Accumulates a recovery phrase one word at a time.

    The in-progress word is spelled into a prefix, one character per call,
    and a word is confirmed only if it is a vocabulary word starting with
    that prefix. Matches and next characters are recomputed from the
    vocabulary on every query.

    Rejected operations raise a SelectionError and leave the session untouched.
    """

    def __init__(self, vocabulary: Vocabulary, capacity: int = 24):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.vocabulary = vocabulary
        self._capacity = capacity
        self._prefix = ""
        self._confirmed: List[str] = []

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def confirmed(self) -> List[str]:
        return list(self._confirmed)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def state(self) -> SelectionState:
        return SelectionState.FULL if self.is_complete() else SelectionState.ACCEPTING

    def is_complete(self) -> bool:
        return len(self._confirmed) == self._capacity

    def matches(self) -> List[str]:
        return matches(self.vocabulary.words, self._prefix)

    def next_chars(self) -> List[str]:
        return next_chars(self.vocabulary.words, self._prefix)

    def append_char(self, char: str):
        if self.is_complete():
            raise CapacityExceeded(self._capacity)
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidSelection(f"Expected a single character, got {char!r}")
        self._prefix += char

    def backspace(self):
        # Slicing an empty prefix is already a no-op
        self._prefix = self._prefix[:-1]

    def confirm_word(self, word: str):
        if self.is_complete():
            raise CapacityExceeded(self._capacity)
        if word not in self.vocabulary:
            raise InvalidSelection("Word is not in the vocabulary")
        if word not in self.matches():
            raise InvalidSelection("Word does not match the current prefix")

        self._confirmed.append(word)
        self._prefix = ""
        logger.debug(f"Confirmed word {len(self._confirmed)} of {self._capacity}")

    def remove_at(self, index: int):
        # Negative indices are positions from the end for lists, not here
        if not 0 <= index < len(self._confirmed):
            raise IndexOutOfRange(index, len(self._confirmed))
        del self._confirmed[index]
        logger.debug(f"Removed word at position {index}, {len(self._confirmed)} left")

    def clear(self):
        self._prefix = ""
        self._confirmed = []
        logger.debug("Session cleared")

    def phrase(self) -> str:
        return " ".join(self._confirmed)

    def view(self) -> SessionView:
        return SessionView(
            prefix=self._prefix,
            confirmed=self.confirmed,
            capacity=self._capacity,
            state=self.state,
            matches=self.matches(),
            next_chars=self.next_chars(),
        )
