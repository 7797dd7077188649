from __future__ import annotations


class SearchError(Exception):
    pass


class ValidationError(SearchError, ValueError):
    """A document was rejected by `SearchEngine.add_document`; the index is unchanged."""

    def __init__(self, message: str, doc_id: object = None) -> None:
        super().__init__(message)
        self.doc_id = doc_id
