class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ConfigurationError(ProcessorError):
    """Raised when required settings are missing or inconsistent."""


class InputFileNotFoundError(ProcessorError):
    """Raised when the configured input dataset does not exist."""


class ColumnBindingError(ProcessorError):
    """Raised when a configured category cannot be bound to a dataset column."""
