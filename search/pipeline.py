from __future__ import annotations

import logging
from collections.abc import Iterable

from search.documents import Document
from search.engine import SearchEngine
from search.hybrid import SearchOptions

logger = logging.getLogger(__name__)


def index_corpus(engine: SearchEngine, docs: Iterable[Document]) -> int:
    """Rebuild an engine from the document store's full corpus at startup.

    The engine keeps no durable state, so this must run after every restart,
    before any search. A rejected document aborts the load with ValidationError;
    documents indexed before it stay indexed.
    """
    added = 0
    for d in docs:
        engine.add_document(d)
        added += 1
    logger.info("Indexed %d documents (%d total)", added, len(engine))
    return added


def search_docs(
    docs: Iterable[Document],
    query: str,
    top_k: int = 5,
    *,
    options: SearchOptions | None = None,
) -> list[dict]:
    engine = SearchEngine()
    index_corpus(engine, docs)
    ranked = engine.search_scored(query, options)

    out: list[dict] = []
    for d, score in ranked[:top_k]:
        out.append(
            {
                "id": d.id,
                "title": d.title or (d.content[:60] + ("…" if len(d.content) > 60 else "")),
                "tags": list(d.tags),
                "score": float(round(score, 6)),
                "snippet": d.content[:220],
            }
        )
    return out
