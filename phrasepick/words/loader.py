import asyncio
import logging
from pathlib import Path
import aiohttp
from phrasepick.selection.models import SessionConfig
from phrasepick.words.bank import Vocabulary, VocabularyError

logger = logging.getLogger(__name__)

# Used when the word list cannot be downloaded. Enough to demo the narrowing
# on the first letter, not a full BIP-39 list.
FALLBACK_WORDS = [
    "abandon", "ability", "able", "about", "above", "absent", "absorb", "abstract",
    "absurd", "abuse", "access", "accident", "account", "accuse", "achieve", "acid",
    "acoustic", "acquire", "across", "act", "action", "actor", "actress", "actual",
    "adapt", "add", "addict", "address", "adjust", "admit", "adult", "advance",
    "advice", "aerobic", "affair", "afford", "afraid", "again", "age", "agent",
    "agree", "ahead", "aim", "air", "airport", "aisle", "alarm", "album",
    "alcohol", "alert",
]


def fallback_vocabulary() -> Vocabulary:
    return Vocabulary(FALLBACK_WORDS)


async def fetch_wordlist(url: str, timeout: float = 10.0) -> list[str]:
    """
    Downloads a newline separated word list. Returns an empty list when the
    server answers with anything but 200.
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.get(url) as resp:
            if resp.status != 200:
                logger.error(f"Word list download failed: HTTP {resp.status} from {url}")
                return []
            text = await resp.text()

    return [w.strip() for w in text.splitlines() if w.strip()]


async def load_vocabulary(config: SessionConfig, path: str | Path | None = None) -> Vocabulary:
    """
    Resolves the vocabulary before a session starts.

    A local file is authoritative and its errors propagate. A download that
    fails for any network or content reason falls back to FALLBACK_WORDS.
    """
    if path is not None:
        vocabulary = Vocabulary.from_file(path)
        logger.info(f"Loaded {len(vocabulary)} words from {path}")
        return vocabulary

    try:
        words = await fetch_wordlist(config.wordlist_url, config.fetch_timeout)
        if not words:
            raise VocabularyError("Downloaded word list is empty")
        vocabulary = Vocabulary(words)
    except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError, VocabularyError) as e:
        logger.error(f"Failed to fetch word list, using fallback: {e}")
        return fallback_vocabulary()

    logger.info(f"Fetched {len(vocabulary)} words from {config.wordlist_url}")
    return vocabulary
