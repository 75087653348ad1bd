# search.py - docseek query interface
# Loads a saved index and ranks its documents against free-text queries.

import index_store
from ranker import rank


def search(index_path: str, query: str, limit: int) -> list:
    """Rank the documents of the index at index_path; returns [(path, score)].

    StorageError and FormatError from loading the index propagate unchanged.
    """
    return rank(index_store.load(index_path), query, limit)


class SearchSession:
    """One loaded index, read-only for as long as the session lives.

    Ranking never writes to the index, so a session can serve concurrent
    queries without locking.
    """

    def __init__(self, index, index_path=None):
        self.index = index
        self.index_path = index_path

    @classmethod
    def from_file(cls, index_path: str):
        return cls(index_store.load(index_path), index_path)

    def search(self, query: str, limit: int) -> list:
        return [
            {"path": path, "score": score}
            for path, score in rank(self.index, query, limit)
        ]

    def stats(self) -> dict:
        stats = index_store.describe(self.index)
        return {
            "index_path":     self.index_path,
            "documents":      stats.document_count,
            "unique_terms":   stats.unique_terms,
            "distinct_terms": len({t for d in self.index.documents.values() for t in d.term_freq}),
        }
