class AnonymizationError(Exception):
    """Base exception for all pseudonymization engine errors."""


class UnknownFieldCategoryError(AnonymizationError):
    """Raised when a value arrives for a category the engine has no policy for."""


class GenerationExhaustedError(AnonymizationError):
    """Raised when no unused synthetic value was found within the retry budget."""


class PlaceholderNamesError(AnonymizationError):
    """Raised when the placeholder name list cannot be loaded or is too small."""
