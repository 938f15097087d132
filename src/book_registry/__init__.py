"""Book Registry - track book editions, translations and revisions."""

__version__ = "0.1.0"

from book_registry.errors import BookRegistryError, ErrorCode
from book_registry.models import BookKey, BookRecord, DerivationKind
from book_registry.registry import BookRegistry

__all__ = [
    "__version__",
    "BookRegistry",
    "BookRegistryError",
    "ErrorCode",
    "BookKey",
    "BookRecord",
    "DerivationKind",
]
