class RepositoryError(Exception):
    """Raised by repository adapters when the store fails"""


class DuplicateRecordError(RepositoryError):
    """Raised when a write violates a uniqueness constraint"""
