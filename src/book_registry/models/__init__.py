"""Data models for book keys and records."""

from book_registry.models.book import BookKey, BookRecord, DerivationKind

__all__ = ["BookKey", "BookRecord", "DerivationKind"]
