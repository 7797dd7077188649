from __future__ import annotations

import logging
import threading
from collections import Counter

from index.inverted import InvertedIndex
from index.tfidf import TfidfVectors
from index.tokenizer import tokenize
from index.trie import PrefixTrie
from search.documents import Document
from search.errors import ValidationError
from search.hybrid import SearchOptions, rank

logger = logging.getLogger(__name__)


class SearchEngine:
    """In-memory catalog index combining TF-IDF, prefix and fuzzy matching.

    Documents are only ever added. Each one is weighted against the corpus
    statistics at the time it is added; earlier vectors are not refreshed.
    A single lock serializes `add_document` and `search`, so a search never
    sees a half-indexed document.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

        # mappings
        self.str2int: dict[str, int] = {}
        self.docs: dict[int, Document] = {}
        self.next_int: int = 0

        self.index = InvertedIndex()
        self.vectors = TfidfVectors()
        self.trie = PrefixTrie()

    def _validate(self, doc: Document) -> None:
        doc_id = getattr(doc, "id", None)
        if not isinstance(doc_id, str) or not doc_id.strip():
            raise ValidationError("document id must be a non-empty string", doc_id)
        content = getattr(doc, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise ValidationError(f"document {doc_id!r} has empty content", doc_id)
        if doc_id in self.str2int:
            raise ValidationError(f"document {doc_id!r} is already indexed", doc_id)

    def add_document(self, doc: Document) -> None:
        with self._lock:
            try:
                self._validate(doc)
            except ValidationError as e:
                logger.warning("Rejected document: %s", e)
                raise

            # everything below only touches fresh keys and cannot fail midway
            terms = tokenize(doc.content)
            counts = Counter(terms)

            int_id = self.next_int
            self.next_int += 1
            self.str2int[doc.id] = int_id
            self.docs[int_id] = doc

            for term in terms:
                self.index.record_occurrence(term, int_id)
            for term in counts:
                self.trie.insert(term, int_id)
            self.vectors.add(int_id, counts, len(terms), self.index, len(self.docs))

        logger.debug("Indexed document %s: %d terms, %d distinct", doc.id, len(terms), len(counts))

    def search_scored(
        self, query: str, options: SearchOptions | None = None
    ) -> list[tuple[Document, float]]:
        query_terms = tokenize(query)
        if not query_terms:
            return []
        with self._lock:
            ranked = rank(
                query_terms,
                index=self.index,
                vectors=self.vectors,
                trie=self.trie,
                total_docs=len(self.docs),
                options=options,
            )
            out = [(self.docs[h], score) for h, score in ranked]
        logger.debug("Query %r matched %d of %d documents", query, len(out), len(self.docs))
        return out

    def search(self, query: str, options: SearchOptions | None = None) -> list[Document]:
        return [doc for doc, _score in self.search_scored(query, options)]

    def get(self, doc_id: str) -> Document | None:
        int_id = self.str2int.get(doc_id)
        if int_id is None:
            return None
        return self.docs[int_id]

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.str2int

    def __len__(self) -> int:
        return len(self.docs)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "documents": len(self.docs),
                "terms": len(self.index),
            }
