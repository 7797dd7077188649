from __future__ import annotations

import os
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from index.inverted import InvertedIndex
from index.tfidf import TfidfVectors
from index.trie import PrefixTrie
from search.fuzzy import fuzzy_matches

ENV_FUZZY_THRESHOLD = "CATALOG_SEARCH_FUZZY_THRESHOLD"
ENV_PREFIX_BOOST = "CATALOG_SEARCH_PREFIX_BOOST"
ENV_FUZZY_BOOST = "CATALOG_SEARCH_FUZZY_BOOST"


class SearchOptions(BaseModel):
    """Weights for fusing cosine, prefix and fuzzy signals.

    Strict: "2" or True are rejected rather than coerced; parsing query strings
    is the caller's job.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    fuzzy_threshold: int = Field(default=2, ge=0)
    prefix_boost: float = Field(default=1.5, ge=0, allow_inf_nan=False)
    fuzzy_boost: float = Field(default=0.5, ge=0, allow_inf_nan=False)

    @classmethod
    def from_env(cls) -> SearchOptions:
        return cls(
            fuzzy_threshold=int(os.getenv(ENV_FUZZY_THRESHOLD) or "2"),
            prefix_boost=float(os.getenv(ENV_PREFIX_BOOST) or "1.5"),
            fuzzy_boost=float(os.getenv(ENV_FUZZY_BOOST) or "0.5"),
        )


def rank(
    query_terms: Sequence[str],
    *,
    index: InvertedIndex,
    vectors: TfidfVectors,
    trie: PrefixTrie,
    total_docs: int,
    options: SearchOptions | None = None,
) -> list[tuple[int, float]]:
    """Score every indexed document against the query and return (handle, score) best first.

    - cosine(idf-weighted query vector, stored tf-idf vector) seeds every document
    - each query term adds `prefix_boost` to every document with a term starting with it
    - each (query term, indexed term within `fuzzy_threshold` edits, posting) adds `fuzzy_boost`
    - documents scoring <= 0 are dropped; ties keep insertion order
    """
    opts = options or SearchOptions.from_env()
    if not query_terms:
        return []

    q_vec = vectors.query_vector(query_terms, index, total_docs)
    scores = vectors.similarities(q_vec)

    # duplicated query terms boost twice, same as fuzzy
    for term in query_terms:
        for handle in trie.search(term):
            scores[handle] = scores.get(handle, 0.0) + opts.prefix_boost

    for _q, indexed in fuzzy_matches(query_terms, index, opts.fuzzy_threshold):
        for handle in index.postings(indexed):
            scores[handle] = scores.get(handle, 0.0) + opts.fuzzy_boost

    ranked = [(h, s) for h, s in scores.items() if s > 0]
    ranked.sort(key=lambda x: x[1], reverse=True)
    return ranked
