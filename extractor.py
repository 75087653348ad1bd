# extractor.py - docseek markup text extraction and folder enumeration

import os
from functools import partial

from bs4 import BeautifulSoup

from config import SUPPORTED_EXTENSIONS
from errors import ExtractionError, StorageError

NOISE_TAGS = ["script", "style"]


def extract_text(path: str) -> str:
    """Return the character data of a markup file, in document order.

    Text nodes are joined with a space so that adjacent nodes never merge into
    a single token.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ExtractionError(path, e.strerror or str(e)) from e

    soup = BeautifulSoup(raw, "html.parser")
    for tag in soup(NOISE_TAGS):
        tag.decompose()
    return soup.get_text(separator=" ")


def _raise_storage_error(error: OSError):
    raise StorageError(error.filename, error.strerror or str(error)) from error


def iter_documents(folder: str, recursive: bool = False,
                   extensions=SUPPORTED_EXTENSIONS):
    """Yield (path, loader) pairs for every markup file under folder.

    Paths come out sorted so that indexing an unchanged folder twice gives the
    same index. Sub-directories are only entered when recursive is set;
    hidden ones are always skipped. Symlinked directories are not followed.
    """
    for root, dirs, files in os.walk(folder, onerror=_raise_storage_error):
        # Skip hidden directories
        dirs[:] = sorted(d for d in dirs if not d.startswith(".")) if recursive else []
        for filename in sorted(files):
            if os.path.splitext(filename)[1].lower() not in extensions:
                continue
            path = os.path.join(root, filename).replace("\\", "/")
            yield path, partial(extract_text, path)
