class TableError(Exception):
    """Base exception for tabular dataset I/O."""


class TableReadError(TableError):
    """Raised when a dataset cannot be read."""


class TableWriteError(TableError):
    """Raised when a dataset cannot be written."""
