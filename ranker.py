# ranker.py - docseek TF-IDF ranking

import math

from indexer import Document, Index
from lexer import tokenize


def tf(term: str, document: Document) -> float:
    if document.total_tokens == 0:
        return 0.0
    return document.term_freq.get(term, 0) / document.total_tokens


def idf(term: str, index: Index) -> float:
    n = len(index)
    df = index.document_frequency(term)
    return math.log(n / (1 + df))


def rank(index: Index, query: str, limit: int) -> list:
    """Score every document against query; returns [(path, score)] best first.

    Ties are broken by path so repeated calls give the same order.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    terms = list(dict.fromkeys(tokenize(query)))
    if not terms or not len(index):
        return []

    weights = {term: idf(term, index) for term in terms}
    results = []
    for path, doc in index.documents.items():
        score = sum(tf(term, doc) * weights[term] for term in terms)
        results.append((path, score))

    results.sort(key=lambda x: (-x[1], x[0]))
    return results[:limit]
