# index_store.py - docseek index persistence
# The index file is a single JSON document:
#   {"version": 1, "documents": {path: {"total_tokens": n, "terms": {term: count}}}}

import json
import logging
from typing import NamedTuple

from errors import FormatError, StorageError
from indexer import Document, Index

FORMAT_VERSION = 1

log = logging.getLogger("docseek-store")


class IndexStats(NamedTuple):
    document_count: int
    unique_terms: dict   # {path: number of distinct terms}


# ─── ENCODING ─────────────────────────────────────────────────────────────────
def encode(index: Index) -> bytes:
    data = {
        "version": FORMAT_VERSION,
        "documents": {
            path: {"total_tokens": doc.total_tokens, "terms": doc.term_freq}
            for path, doc in index.documents.items()
        },
    }
    return json.dumps(data, indent=2, sort_keys=True).encode("utf-8")


def _unique_keys(pairs) -> dict:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise FormatError(f"duplicate key {key!r}")
        obj[key] = value
    return obj


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_document(path, entry) -> Document:
    if not isinstance(entry, dict):
        raise FormatError(f"document {path!r} is not an object")
    terms = entry.get("terms")
    total = entry.get("total_tokens")
    if not isinstance(terms, dict):
        raise FormatError(f"document {path!r} has no 'terms' object")
    if not _is_int(total) or total < 0:
        raise FormatError(f"document {path!r} has an invalid 'total_tokens'")
    for term, count in terms.items():
        if not _is_int(count) or count < 1:
            raise FormatError(f"document {path!r}: invalid count for term {term!r}")
    if sum(terms.values()) != total:
        raise FormatError(f"document {path!r}: 'total_tokens' does not match its term counts")
    return Document(path, dict(terms), total)


def decode(data: bytes) -> Index:
    try:
        raw = json.loads(data.decode("utf-8"), object_pairs_hook=_unique_keys)
    except UnicodeDecodeError as e:
        raise FormatError(f"index is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise FormatError(f"index is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise FormatError("index must be a JSON object")
    version = raw.get("version")
    if not _is_int(version) or version != FORMAT_VERSION:
        raise FormatError(f"unsupported index version: {version!r}")
    documents = raw.get("documents")
    if not isinstance(documents, dict):
        raise FormatError("index has no 'documents' object")

    index = Index()
    for path, entry in documents.items():
        index.add(_decode_document(path, entry))
    return index


# ─── FILES ────────────────────────────────────────────────────────────────────
def save(index: Index, path: str):
    data = encode(index)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StorageError(path, e.strerror or str(e)) from e
    log.info(f"Index saved to {path} ({len(index)} documents)")


def load(path: str) -> Index:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise StorageError(path, e.strerror or str(e)) from e
    try:
        index = decode(data)
    except FormatError as e:
        raise FormatError(e.reason, path) from e
    log.info(f"Index loaded from {path}: {len(index)} documents")
    return index


def describe(index: Index) -> IndexStats:
    return IndexStats(
        document_count=len(index),
        unique_terms={path: doc.unique_terms for path, doc in index.documents.items()},
    )
