"""
Catalog files

A catalog is a JSON document listing registrations in the order they were
made. Replaying it through a BookRegistry rebuilds the same registry.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .models import BookKey, DerivationKind
from .registry import BookRegistry

logger = logging.getLogger(__name__)


class KeyRef(BaseModel):
    """Reference to a registered book inside a catalog entry."""

    title: str
    edition: int = 1

    def to_key(self) -> BookKey:
        return BookKey(self.title, self.edition)

    @classmethod
    def from_key(cls, key: BookKey) -> "KeyRef":
        return cls(title=key.title, edition=key.edition)


class OriginalEntry(BaseModel):
    kind: Literal["original"] = "original"
    title: str
    edition: int = 1
    authors: list[str]
    language: str
    year: int


class TranslationEntry(BaseModel):
    kind: Literal["translation"] = "translation"
    title: str
    source: KeyRef
    language: str
    year: int


class RevisionEntry(BaseModel):
    kind: Literal["revision"] = "revision"
    title: str
    edition: int
    source: KeyRef
    year: int


CatalogEntry = Annotated[
    Union[OriginalEntry, TranslationEntry, RevisionEntry],
    Field(discriminator="kind"),
]


class Catalog(BaseModel):
    """An ordered list of registrations."""

    books: list[CatalogEntry] = Field(default_factory=list)


def apply_entry(registry: BookRegistry, entry: CatalogEntry) -> None:
    """Register a single catalog entry."""
    if isinstance(entry, OriginalEntry):
        registry.add_original_book(
            BookKey(entry.title, entry.edition),
            entry.authors,
            entry.language,
            entry.year,
        )
    elif isinstance(entry, TranslationEntry):
        registry.add_translation(entry.title, entry.source.to_key(), entry.language, entry.year)
    else:
        registry.add_revised(BookKey(entry.title, entry.edition), entry.source.to_key(), entry.year)


def build_registry(catalog: Catalog, registry: BookRegistry | None = None) -> BookRegistry:
    """Replay a catalog into a (new or given) registry."""
    if registry is None:
        registry = BookRegistry()
    for entry in catalog.books:
        apply_entry(registry, entry)
    return registry


def catalog_from_registry(registry: BookRegistry) -> Catalog:
    """Describe a registry as a catalog, in registration order."""
    entries: list[CatalogEntry] = []
    for key, record in registry.records():
        if record.kind == DerivationKind.ORIGINAL:
            entries.append(
                OriginalEntry(
                    title=key.title,
                    edition=key.edition,
                    authors=list(record.authors),
                    language=record.language,
                    year=record.publication_year,
                )
            )
        elif record.kind == DerivationKind.TRANSLATION:
            entries.append(
                TranslationEntry(
                    title=key.title,
                    source=KeyRef.from_key(record.derived_from),
                    language=record.language,
                    year=record.publication_year,
                )
            )
        else:
            entries.append(
                RevisionEntry(
                    title=key.title,
                    edition=key.edition,
                    source=KeyRef.from_key(record.derived_from),
                    year=record.publication_year,
                )
            )
    return Catalog(books=entries)


def load_catalog(path: Path, registry: BookRegistry | None = None) -> BookRegistry:
    """
    Load a catalog file into a registry.

    A missing file yields an empty registry.

    Args:
        path: Catalog JSON file
        registry: Registry to populate (a new one if not given)

    Returns:
        The populated registry
    """
    path = Path(path)
    if not path.exists():
        logger.info("Catalog %s not found, starting empty", path)
        return registry if registry is not None else BookRegistry()

    with open(path, "r", encoding="utf-8") as f:
        catalog = Catalog.model_validate(json.load(f))

    registry = build_registry(catalog, registry)
    logger.info("Loaded %d books from %s", len(registry), path)
    return registry


def save_catalog(registry: BookRegistry, path: Path) -> None:
    """Write a registry to a catalog file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    catalog = catalog_from_registry(registry)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(catalog.model_dump(mode="json"), f, indent=2)
    logger.info("Saved %d books to %s", len(catalog.books), path)
