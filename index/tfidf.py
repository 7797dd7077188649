from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

import numpy as np

from index.inverted import InvertedIndex


def idf(index: InvertedIndex, term: str, total_docs: int) -> float:
    df = index.document_frequency(term)
    if df == 0 or total_docs == 0:
        return 0.0
    return math.log(total_docs / df)


def _norm(weights: Iterable[float]) -> float:
    arr = np.fromiter(weights, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(np.linalg.norm(arr))


def _dot(query_vec: Mapping[str, float], doc_vec: Mapping[str, float]) -> float:
    shared = [term for term in query_vec if term in doc_vec]
    if not shared:
        return 0.0
    q = np.fromiter((query_vec[t] for t in shared), dtype=np.float64, count=len(shared))
    d = np.fromiter((doc_vec[t] for t in shared), dtype=np.float64, count=len(shared))
    return float(q @ d)


def _cosine(dot: float, q_norm: float, d_norm: float) -> float:
    if q_norm == 0 or d_norm == 0:
        return 0.0
    # float error can push a parallel pair slightly past 1
    return min(1.0, max(0.0, dot / (q_norm * d_norm)))


def cosine_similarity(query_vec: Mapping[str, float], doc_vec: Mapping[str, float]) -> float:
    return _cosine(_dot(query_vec, doc_vec), _norm(query_vec.values()), _norm(doc_vec.values()))


class TfidfVectors:
    """Sparse TF-IDF vectors, one per indexed document.

    - tf = count / document length
    - idf = ln(N / df), with N and df read at the moment the document is added
    - vectors are never recomputed when later documents change N or df
    """

    def __init__(self) -> None:
        self.doc_vecs: dict[int, dict[str, float]] = {}
        self.doc_norms: dict[int, float] = {}

    def add(
        self,
        handle: int,
        counts: Mapping[str, int],
        length: int,
        index: InvertedIndex,
        total_docs: int,
    ) -> dict[str, float]:
        vec: dict[str, float] = {}
        for term, freq in counts.items():
            vec[term] = (freq / length) * idf(index, term, total_docs)
        self.doc_vecs[handle] = vec
        self.doc_norms[handle] = _norm(vec.values())
        return vec

    def query_vector(
        self, terms: Iterable[str], index: InvertedIndex, total_docs: int
    ) -> dict[str, float]:
        # idf only, no tf factor: repeated query terms do not add weight
        q_vec: dict[str, float] = {}
        for term in terms:
            if term in index:
                q_vec[term] = idf(index, term, total_docs)
        return q_vec

    def similarities(self, query_vec: Mapping[str, float]) -> dict[int, float]:
        q_norm = _norm(query_vec.values())
        scores: dict[int, float] = {}
        for handle, dvec in self.doc_vecs.items():
            scores[handle] = _cosine(_dot(query_vec, dvec), q_norm, self.doc_norms[handle])
        return scores

    def __len__(self) -> int:
        return len(self.doc_vecs)
