"""Book key and record models for the registry."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DerivationKind(str, Enum):
    """How a registered book came to exist."""

    ORIGINAL = "original"
    TRANSLATION = "translation"
    REVISION = "revision"


class BookKey(BaseModel):
    """Composite identifier of a book: title plus edition number.

    Keys order by title first, then by edition. Empty titles and
    non-positive editions are representable so that lookups with them
    can fail as "not found" rather than at construction time.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    edition: int = 1

    def __init__(self, title: str, edition: int = 1, **data) -> None:
        super().__init__(title=title, edition=edition, **data)

    def _sort_key(self) -> tuple[str, int]:
        return (self.title, self.edition)

    def __lt__(self, other: "BookKey") -> bool:
        if not isinstance(other, BookKey):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "BookKey") -> bool:
        if not isinstance(other, BookKey):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "BookKey") -> bool:
        if not isinstance(other, BookKey):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "BookKey") -> bool:
        if not isinstance(other, BookKey):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return f"{self.title} (ed. {self.edition})"


class BookRecord(BaseModel):
    """What the registry stores for a key."""

    model_config = ConfigDict(frozen=True)

    language: str
    publication_year: int
    authors: tuple[str, ...] = Field(default_factory=tuple)
    derived_from: BookKey | None = None  # immediate source, None for originals
    kind: DerivationKind = DerivationKind.ORIGINAL

    @property
    def is_derived(self) -> bool:
        return self.derived_from is not None
