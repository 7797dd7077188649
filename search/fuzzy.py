from __future__ import annotations

from collections.abc import Iterable, Iterator

import Levenshtein

from index.inverted import InvertedIndex


def levenshtein(a: str, b: str, score_cutoff: int | None = None) -> int:
    # unit cost for substitution, insertion and deletion; past score_cutoff the
    # result is only guaranteed to be > score_cutoff
    return Levenshtein.distance(a, b, score_cutoff=score_cutoff)


def fuzzy_matches(
    query_terms: Iterable[str], index: InvertedIndex, threshold: int
) -> Iterator[tuple[str, str]]:
    """Yield (query term, indexed term) for every pair within `threshold` edits.

    Every query term is compared against the whole vocabulary, so this is the
    dominant cost of a search. Pairs whose lengths differ by more than
    `threshold` cannot match and are skipped without computing a distance.
    """
    terms = list(query_terms)
    for indexed in index.terms():
        for q in terms:
            if abs(len(q) - len(indexed)) > threshold:
                continue
            if levenshtein(q, indexed, score_cutoff=threshold) <= threshold:
                yield q, indexed
