"""Loading word lists into a DictionaryTrie."""

from __future__ import annotations

import logging
import os

from scrabble_solver.trie import DictionaryTrie

log = logging.getLogger("scrabble_solver")

DEFAULT_SEARCH_PATHS = (
    "dictionary.txt",
    "ospd.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
)

# Used when no word list file can be found.
MINIMAL_WORDS = frozenset({
    "aa", "ab", "ad", "ae", "ag", "ah", "ai", "al", "am", "an",
    "ar", "as", "at", "aw", "ax", "ay", "ba", "be", "bi", "bo",
    "by", "de", "do", "ed", "ef", "eh", "el", "em", "en", "er",
    "es", "et", "ex", "fa", "go", "ha", "he", "hi", "hm", "ho",
    "id", "if", "in", "is", "it", "jo", "ka", "la", "li", "lo",
    "ma", "me", "mi", "mm", "mo", "mu", "my", "na", "ne", "no",
    "nu", "od", "oe", "of", "oh", "oi", "om", "on", "op", "or",
    "os", "ow", "ox", "oy", "pa", "pe", "pi", "re", "sh", "si",
    "so", "ta", "ti", "to", "uh", "um", "un", "up", "us", "ut",
    "we", "wo", "xi", "xu", "ya", "ye", "yo", "za",
    "the", "and", "for", "are", "but", "not", "you", "all", "can",
    "her", "was", "one", "our", "out", "day", "had", "has", "his",
    "how", "its", "may", "new", "now", "old", "see", "way", "who",
    "boy", "did", "get", "him", "let", "say", "she", "too", "use",
    "cat", "dog", "god", "run", "set", "top", "red", "word", "play",
    "game", "tile", "best", "move", "quiz", "jinx", "zero", "zone",
    "jazz", "fizz", "buzz", "haze", "maze", "gaze", "oxen", "apex",
    "lynx", "onyx", "waxy", "envy", "have", "gave", "save", "wave",
    "cave", "dove", "five", "give", "live", "love", "oven", "over",
    "very", "view", "even", "ever", "evil", "void", "bad", "bed",
    "sad", "sea", "tea", "eat", "ate", "bead", "beads", "based",
})


def read_word_list(path: str) -> DictionaryTrie:
    """Load a whitespace-delimited word list.

    Every word must be alphabetic; anything else means the file is
    corrupt and raises ValueError.
    """
    trie = DictionaryTrie()
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            for word in line.split():
                try:
                    trie.insert(word.lower())
                except ValueError as exc:
                    raise ValueError(f"{path}:{lineno}: bad word {word!r} ({exc})") from exc
    return trie


def load_dictionary(dict_path: str | None = None) -> DictionaryTrie:
    """Load the first word list found, falling back to a built-in list.

    An explicit *dict_path* that is missing or holds no words is an error
    rather than a reason to fall back.
    """
    if dict_path is not None:
        if not os.path.exists(dict_path):
            raise FileNotFoundError(f"Dictionary file not found: {dict_path}")
        trie = read_word_list(dict_path)
        if not trie.word_count:
            raise ValueError(f"Dictionary file {dict_path} contains no words")
        log.info("Loaded %s words from %s", f"{trie.word_count:,}", dict_path)
        return trie

    for path in DEFAULT_SEARCH_PATHS:
        if os.path.exists(path):
            trie = read_word_list(path)
            if trie.word_count:
                log.info("Loaded %s words from %s", f"{trie.word_count:,}", path)
                return trie
            log.warning("Word list %s is empty -- skipping.", path)

    log.warning("No dictionary file found -- using built-in minimal word list.")
    log.warning("Save an OSPD or TWL word list as dictionary.txt for best results.")
    return DictionaryTrie.from_words(sorted(MINIMAL_WORDS))
