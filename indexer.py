# indexer.py - docseek Local File Indexer
# Turns (path, text) pairs into per-document term statistics.

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from errors import BuildCancelled, DuplicateDocument, ExtractionError
from extractor import iter_documents
from lexer import Lexer, normalize

log = logging.getLogger("docseek-indexer")


# ─── DATA MODEL ───────────────────────────────────────────────────────────────
@dataclass
class Document:
    path: str
    term_freq: dict = field(default_factory=dict)   # {term: count}
    total_tokens: int = 0

    @property
    def unique_terms(self) -> int:
        return len(self.term_freq)


@dataclass
class Index:
    documents: dict = field(default_factory=dict)   # {path: Document}
    # failures of the build that produced this index; never persisted
    skipped: dict = field(default_factory=dict, compare=False, repr=False)

    def __len__(self):
        return len(self.documents)

    def __contains__(self, path):
        return path in self.documents

    def add(self, document: Document):
        if document.path in self:
            raise DuplicateDocument(document.path)
        self.documents[document.path] = document

    def document_frequency(self, term: str) -> int:
        return sum(1 for doc in self.documents.values() if term in doc.term_freq)


# ─── ANALYSIS ─────────────────────────────────────────────────────────────────
def analyze(path: str, text: str) -> Document:
    term_freq = {}
    total = 0
    for token in Lexer(text):
        term = normalize(token.text(text))
        term_freq[term] = term_freq.get(term, 0) + 1
        total += 1
    return Document(path, term_freq, total)


def _load_text(path, source) -> str:
    text = source() if callable(source) else source
    if not isinstance(text, str):
        raise ExtractionError(path, f"expected text, got {type(text).__name__}")
    return text


def _skip(index: Index, path, error: ExtractionError):
    log.warning(f"Skipping {path}: {error.reason}")
    index.skipped[path] = error.reason


def _cancelled(cancel) -> bool:
    return cancel is not None and cancel.is_set()


# ─── BUILD ────────────────────────────────────────────────────────────────────
def build(documents, workers: int = 1, cancel=None) -> Index:
    """Build a fresh Index from (path, source) pairs.

    source is either the document text or a zero-argument callable returning
    it. Documents whose text cannot be extracted are skipped and listed in
    Index.skipped. cancel is an optional threading.Event checked between
    documents.
    """
    if workers <= 1:
        return _build_serial(documents, cancel)
    return _build_parallel(documents, workers, cancel)


def _build_serial(documents, cancel) -> Index:
    index = Index()
    for path, source in documents:
        if _cancelled(cancel):
            raise BuildCancelled(len(index))
        try:
            document = analyze(path, _load_text(path, source))
        except ExtractionError as e:
            _skip(index, path, e)
            continue
        index.add(document)
        log.debug(f"  Indexed: {path} ({document.total_tokens} tokens)")
    return index


def _build_parallel(documents, workers, cancel) -> Index:
    index = Index()
    lock = threading.Lock()

    def work(path, source):
        if _cancelled(cancel):
            return
        try:
            document = analyze(path, _load_text(path, source))
        except ExtractionError as e:
            with lock:
                _skip(index, path, e)
            return
        with lock:
            index.add(document)
        log.debug(f"  Indexed: {path} ({document.total_tokens} tokens)")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(work, path, source) for path, source in documents]
        try:
            for future in as_completed(futures):
                future.result()
                if _cancelled(cancel):
                    break
        finally:
            for future in futures:
                future.cancel()

    if _cancelled(cancel):
        raise BuildCancelled(len(index))
    return index


def index_folder(folder: str, recursive: bool = False, workers: int = 1,
                 cancel=None) -> Index:
    log.info(f"Scanning {folder}/" + (" (recursive)" if recursive else ""))
    index = build(iter_documents(folder, recursive), workers, cancel)
    log.info(f"Files indexed : {len(index)}")
    if index.skipped:
        log.warning(f"Files skipped : {len(index.skipped)}")
    return index
