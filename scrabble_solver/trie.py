"""Prefix trie over a-z for word lookups and incremental prefix descent."""

from __future__ import annotations

from typing import Iterable

ALPHABET_SIZE = 26
ROOT_INDEX = 0


def letter_index(ch: str) -> int:
    """Alphabet position of *ch* (case-insensitive)."""
    if "a" <= ch <= "z":
        return ord(ch) - 97
    if "A" <= ch <= "Z":
        return ord(ch) - 65
    raise ValueError(f"Non alphabetical character {ch!r}")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: list[int | None] = [None] * ALPHABET_SIZE
        self.is_word: bool = False


class TrieNodeHandle:
    """Read-only view of one trie node, used to walk down a prefix."""

    __slots__ = ("trie", "index")

    def __init__(self, trie: DictionaryTrie, index: int):
        self.trie = trie
        self.index = index

    def is_word(self) -> bool:
        return self.trie.nodes[self.index].is_word

    def get_child(self, ch: str) -> TrieNodeHandle | None:
        return self.get_child_idx(letter_index(ch))

    def get_child_idx(self, alpha_idx: int) -> TrieNodeHandle | None:
        child = self.trie.nodes[self.index].children[alpha_idx]
        if child is None:
            return None
        return TrieNodeHandle(self.trie, child)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNodeHandle):
            return NotImplemented
        return self.trie is other.trie and self.index == other.index

    def __repr__(self) -> str:
        return f"TrieNodeHandle(index={self.index}, is_word={self.is_word()})"


class DictionaryTrie:
    """Prefix trie stored as a flat list of nodes; node 0 is the root."""

    def __init__(self):
        self.nodes: list[TrieNode] = [TrieNode()]
        self.word_count = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> DictionaryTrie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    @classmethod
    def from_word_list(cls, text: str) -> DictionaryTrie:
        """Build from whitespace-delimited words."""
        return cls.from_words(text.split())

    def insert(self, word: str) -> None:
        """Add *word*. Raises ValueError on any non a-z character."""
        if not word:
            raise ValueError("Cannot insert an empty word")
        indices = [letter_index(ch) for ch in word]
        node_idx = ROOT_INDEX
        for i in indices:
            child = self.nodes[node_idx].children[i]
            if child is None:
                self.nodes.append(TrieNode())
                child = len(self.nodes) - 1
                self.nodes[node_idx].children[i] = child
            node_idx = child
        node = self.nodes[node_idx]
        if not node.is_word:
            node.is_word = True
            self.word_count += 1

    def root(self) -> TrieNodeHandle:
        return TrieNodeHandle(self, ROOT_INDEX)

    def find_node(self, prefix: str) -> TrieNodeHandle | None:
        """Handle for *prefix*, or None if no word starts with it."""
        node: TrieNodeHandle | None = self.root()
        for ch in prefix:
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    def is_word(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_word()

    def is_word_from_raw_bytes(self, data: bytes) -> bool:
        return self.is_word(data.decode("ascii"))

    def is_prefix(self, prefix: str) -> bool:
        return self.find_node(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __len__(self) -> int:
        return len(self.nodes)
