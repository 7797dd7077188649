from __future__ import annotations


class TrieNode:
    __slots__ = ("children", "terminal", "doc_ids")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.terminal = False
        self.doc_ids: set[int] = set()


class PrefixTrie:
    """Character trie mapping any prefix to the documents holding a term with that prefix."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, term: str, handle: int) -> None:
        node = self.root
        for ch in term.lower():
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        node.terminal = True
        node.doc_ids.add(handle)

    def _find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, prefix: str) -> set[int]:
        start = self._find(prefix)
        if start is None:
            return set()
        found: set[int] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node.terminal:
                found |= node.doc_ids
            stack.extend(node.children.values())
        return found

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str):
            return False
        node = self._find(term)
        return node is not None and node.terminal
