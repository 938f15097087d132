"""
Book Registry

Keeps original, translated and revised books keyed by (title, edition)
and answers lineage queries over the "derived from" edges between them.
The registry is append-only: entries are never updated or removed.
"""

import logging
from collections import defaultdict
from typing import Iterable, Iterator

from .config import get_settings
from .errors import BookRegistryError, ErrorCode
from .models import BookKey, BookRecord, DerivationKind

logger = logging.getLogger(__name__)

LANGUAGE_CODE_LENGTH = 2


class BookRegistry:
    """
    In-memory registry of book editions and their derivations.

    Every mutating operation validates all of its inputs before touching
    state, so a rejected call leaves the registry unchanged.

    Usage:
        registry = BookRegistry()
        registry.add_original_book(BookKey("Dune"), ["F. Herbert"], "en", 1965)
        registry.add_translation("Duna", BookKey("Dune"), "pl", 1985)
        registry.get_original_book(BookKey("Duna"))  # BookKey("Dune", 1)
    """

    def __init__(self, enforce_revision_year: bool | None = None):
        """
        Initialize an empty registry.

        Args:
            enforce_revision_year: Reject revisions published before their
                source. Defaults to the ``enforce_revision_year`` setting.
        """
        if enforce_revision_year is None:
            enforce_revision_year = get_settings().enforce_revision_year
        self.enforce_revision_year = enforce_revision_year

        self._books: dict[BookKey, BookRecord] = {}
        self._editions: dict[str, set[int]] = defaultdict(set)
        self._derived: dict[BookKey, list[BookKey]] = defaultdict(list)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_original_book(
        self,
        key: BookKey,
        authors: Iterable[str],
        language: str,
        year: int,
    ) -> None:
        """Register a book that is not derived from any other book."""
        # A bare string names a single author
        authors = (authors,) if isinstance(authors, str) else tuple(authors)

        self._check_title(key.title)
        if key.edition <= 0:
            raise BookRegistryError(ErrorCode.NON_POSITIVE_EDITION, str(key.edition))
        self._check_unique(key)
        if not authors:
            raise BookRegistryError(ErrorCode.EMPTY_AUTHORS_LIST)
        seen: set[str] = set()
        for author in authors:
            if author in seen:
                raise BookRegistryError(ErrorCode.DUPLICATE_AUTHOR, author)
            seen.add(author)
        self._check_language(language)

        self._insert(
            key,
            BookRecord(
                language=language,
                publication_year=year,
                authors=authors,
                kind=DerivationKind.ORIGINAL,
            ),
        )

    def add_translation(
        self,
        title: str,
        source_key: BookKey,
        language: str,
        year: int,
    ) -> None:
        """
        Register a translation of an existing book.

        The translation takes the source's edition number, so it is stored
        under ``BookKey(title, source_key.edition)``. Authors are copied
        from the source.
        """
        self._check_title(title)
        key = BookKey(title, source_key.edition)
        self._check_unique(key)
        source = self._require(source_key)
        self._check_language(language)
        if language == source.language:
            raise BookRegistryError(ErrorCode.TRANSLATED_TO_SAME_LANGUAGE, language)
        if year < source.publication_year:
            raise BookRegistryError(
                ErrorCode.DERIVED_BEFORE_ORIGINAL,
                f"{year} < {source.publication_year}",
            )

        self._insert(
            key,
            BookRecord(
                language=language,
                publication_year=year,
                authors=source.authors,
                derived_from=source_key,
                kind=DerivationKind.TRANSLATION,
            ),
        )

    def add_revised(self, revised_key: BookKey, source_key: BookKey, year: int) -> None:
        """
        Register a revised edition of an existing book.

        The revision keeps the source's language and authors. Its edition
        must be greater than the source's; that is checked before the
        source is looked up.
        """
        self._check_title(revised_key.title)
        self._check_unique(revised_key)
        if revised_key.edition <= source_key.edition:
            raise BookRegistryError(
                ErrorCode.REVISED_EDITION_LESS_EQU,
                f"{revised_key.edition} <= {source_key.edition}",
            )
        source = self._require(source_key)
        if self.enforce_revision_year and year < source.publication_year:
            raise BookRegistryError(
                ErrorCode.DERIVED_BEFORE_ORIGINAL,
                f"{year} < {source.publication_year}",
            )

        self._insert(
            revised_key,
            BookRecord(
                language=source.language,
                publication_year=year,
                authors=source.authors,
                derived_from=source_key,
                kind=DerivationKind.REVISION,
            ),
        )

    # ------------------------------------------------------------------
    # Identity queries
    # ------------------------------------------------------------------

    def get_book(self, key: BookKey) -> BookRecord:
        """Get the full record stored for a key."""
        return self._require(key)

    def get_book_language(self, key: BookKey) -> str:
        return self._require(key).language

    def get_book_publication_year(self, key: BookKey) -> int:
        return self._require(key).publication_year

    def get_book_authors(self, key: BookKey) -> list[str]:
        return list(self._require(key).authors)

    # ------------------------------------------------------------------
    # Lineage queries
    # ------------------------------------------------------------------

    def find_book_editions(self, title: str) -> list[BookKey]:
        """Get every key with this exact title, ordered by edition."""
        return [BookKey(title, edition) for edition in sorted(self._require_title(title))]

    def get_book_latest_edition(self, title: str) -> int:
        """Get the highest edition number registered under a title."""
        return max(self._require_title(title))

    def find_book_translations(self, key: BookKey) -> list[BookKey]:
        """
        Get translations made directly from this key, in the order added.

        A translation always shares its source's edition number, so derived
        keys with a different edition (revisions) are left out.
        """
        self._require(key)
        return [
            derived for derived in self._derived.get(key, [])
            if derived.edition == key.edition
        ]

    def find_derived_books(self, key: BookKey) -> list[BookKey]:
        """Get all books derived directly from this key, in the order added."""
        self._require(key)
        return list(self._derived.get(key, []))

    def get_original_book(self, key: BookKey) -> BookKey:
        """Get the immediate source of a translated or revised book."""
        record = self._require(key)
        if record.derived_from is None:
            raise BookRegistryError(ErrorCode.NOT_A_DERIVED_BOOK, str(key))
        return record.derived_from

    def get_lineage(self, key: BookKey) -> list[BookKey]:
        """Get the derivation chain from ``key`` back to its root original."""
        lineage = [key]
        record = self._require(key)
        while record.derived_from is not None:
            lineage.append(record.derived_from)
            record = self._books[record.derived_from]
        return lineage

    def get_root_original(self, key: BookKey) -> BookKey:
        """Get the original book at the root of a key's lineage."""
        return self.get_lineage(key)[-1]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, key: object) -> bool:
        return key in self._books

    def __iter__(self) -> Iterator[BookKey]:
        return iter(self._books)

    def records(self) -> Iterator[tuple[BookKey, BookRecord]]:
        """Iterate over (key, record) pairs in registration order."""
        return iter(self._books.items())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _insert(self, key: BookKey, record: BookRecord) -> None:
        self._books[key] = record
        self._editions[key.title].add(key.edition)
        if record.derived_from is not None:
            self._derived[record.derived_from].append(key)
        logger.debug("Registered %s %s", record.kind.value, key)

    def _require(self, key: BookKey) -> BookRecord:
        record = self._books.get(key)
        if record is None:
            raise BookRegistryError(ErrorCode.BOOK_NOT_FOUND, str(key))
        return record

    def _require_title(self, title: str) -> set[int]:
        editions = self._editions.get(title)
        if not editions:
            raise BookRegistryError(ErrorCode.BOOK_NOT_FOUND, title)
        return editions

    def _check_unique(self, key: BookKey) -> None:
        if key in self._books:
            raise BookRegistryError(ErrorCode.NON_UNIQUE_TITLE, str(key))

    @staticmethod
    def _check_title(title: str) -> None:
        if not title:
            raise BookRegistryError(ErrorCode.EMPTY_TITLE)

    @staticmethod
    def _check_language(language: str) -> None:
        if len(language) != LANGUAGE_CODE_LENGTH or not language.isascii():
            raise BookRegistryError(ErrorCode.LANGUAGE_CODE_NOT_2_CHARS, repr(language))
