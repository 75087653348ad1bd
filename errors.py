# errors.py - docseek error kinds


class DocseekError(Exception):
    """Base class for every error docseek raises on purpose."""


class StorageError(DocseekError):
    """A document folder or index file could not be read or written."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FormatError(DocseekError):
    """Persisted index does not match the expected schema."""

    def __init__(self, reason, path=None):
        self.path = str(path) if path is not None else None
        self.reason = reason
        super().__init__(f"{self.path}: {reason}" if self.path else reason)


class ExtractionError(DocseekError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"could not extract text from {self.path}: {reason}")


class DuplicateDocument(DocseekError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"document indexed twice: {self.path}")


class BuildCancelled(DocseekError):
    """Raised between documents once the caller asks the build to stop."""

    def __init__(self, indexed):
        self.indexed = indexed
        super().__init__(f"indexing cancelled after {indexed} documents")
