from enum import Enum
from pydantic import BaseModel, Field

BIP39_ENGLISH_URL = "https://raw.githubusercontent.com/bitcoin/bips/master/bip-0039/english.txt"


class SelectionState(str, Enum):
    ACCEPTING = "accepting"      # Fewer than capacity words confirmed
    FULL = "full"                # Capacity reached, only undo operations apply


class SessionConfig(BaseModel):
    capacity: int = Field(24, ge=1)           # Maximum confirmed words
    wordlist_url: str = BIP39_ENGLISH_URL     # Where the vocabulary is fetched from
    fetch_timeout: float = Field(10.0, gt=0)  # Seconds before falling back


class SessionView(BaseModel):
    prefix: str
    confirmed: list[str]
    capacity: int
    state: SelectionState
    matches: list[str]           # Words still reachable from prefix
    next_chars: list[str]        # Letters that keep at least one match

    @property
    def remaining(self) -> int:
        return self.capacity - len(self.confirmed)
