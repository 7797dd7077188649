from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Mapping
from types import MappingProxyType

_EMPTY: Mapping[int, int] = MappingProxyType({})


class InvertedIndex:
    """term -> {doc handle -> occurrences of term in that doc}"""

    def __init__(self) -> None:
        self._postings: dict[str, dict[int, int]] = defaultdict(dict)

    def record_occurrence(self, term: str, handle: int) -> None:
        docs = self._postings[term]
        docs[handle] = docs.get(handle, 0) + 1

    def document_frequency(self, term: str) -> int:
        docs = self._postings.get(term)
        return len(docs) if docs else 0

    def postings(self, term: str) -> Mapping[int, int]:
        docs = self._postings.get(term)
        if docs is None:
            return _EMPTY
        return MappingProxyType(docs)

    def terms(self) -> Iterator[str]:
        return iter(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)
