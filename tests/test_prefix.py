import string
from phrasepick.selection.prefix import ALPHABET, matches, next_chars
from phrasepick.words.bank import Vocabulary
from phrasepick.words.loader import FALLBACK_WORDS

WORDS = ["abandon", "ability", "able", "about"]

def test_matches_keep_vocabulary_order():
    assert matches(WORDS, "ab") == ["abandon", "ability", "able", "about"]
    assert matches(WORDS, "abl") == ["able"]
    assert matches(WORDS, "abx") == []

def test_next_chars_at_prefix_position():
    assert next_chars(WORDS, "ab") == ["a", "i", "l", "o"]
    assert next_chars(WORDS, "abo") == ["u"]

def test_empty_prefix():
    assert matches(WORDS, "") == []
    assert matches(WORDS, None) == []
    assert next_chars(WORDS, "") == list(string.ascii_lowercase)
    assert next_chars(WORDS, None) == list(ALPHABET)

def test_alphabet_does_not_depend_on_vocabulary():
    assert next_chars([], "") == list(string.ascii_lowercase)
    assert next_chars(["zoo"], "") == list(string.ascii_lowercase)

def test_exact_word_contributes_no_character():
    words = ["act", "action", "actor"]
    assert next_chars(words, "act") == ["i", "o"]
    assert next_chars(["able"], "able") == []

def test_empty_vocabulary_after_first_letter():
    assert matches([], "a") == []
    assert next_chars([], "a") == []

def test_every_match_starts_with_prefix():
    for prefix in ["a", "ab", "ac", "ad", "al", "zz"]:
        for word in matches(FALLBACK_WORDS, prefix):
            assert word.startswith(prefix)

def test_every_next_char_extends_a_word():
    for prefix in ["", "a", "ab", "ac", "act", "ad", "al"]:
        for char in next_chars(FALLBACK_WORDS, prefix):
            assert any(w.startswith(prefix + char) for w in FALLBACK_WORDS)

def test_vocabulary_delegates():
    vocab = Vocabulary(WORDS)
    assert vocab.matches("abl") == ["able"]
    assert vocab.next_chars("ab") == ["a", "i", "l", "o"]
    assert vocab.next_chars() == list(ALPHABET)
