"""Tests for book keys and records."""

import pytest
from pydantic import ValidationError

from book_registry.models import BookKey, BookRecord, DerivationKind


class TestBookKey:
    """Tests for the composite book key."""

    def test_default_edition(self):
        assert BookKey("Dune").edition == 1

    def test_positional_and_keyword_construction(self):
        assert BookKey("Dune", 2) == BookKey(title="Dune", edition=2)

    def test_equality(self):
        assert BookKey("Dune") == BookKey("Dune", 1)
        assert BookKey("Dune", 1) != BookKey("Dune", 2)
        assert BookKey("Dune", 1) != BookKey("Duna", 1)

    def test_hashable(self):
        keys = {BookKey("Dune"), BookKey("Dune", 1), BookKey("Dune", 2)}
        assert len(keys) == 2

    def test_immutable(self):
        key = BookKey("Dune")
        with pytest.raises(ValidationError):
            key.edition = 2

    def test_orders_by_title_then_edition(self):
        keys = [BookKey("b", 1), BookKey("a", 10), BookKey("a", 2), BookKey("b", 0)]
        assert sorted(keys) == [BookKey("a", 2), BookKey("a", 10), BookKey("b", 0), BookKey("b", 1)]

    def test_edition_compares_numerically(self):
        assert BookKey("a", 9) < BookKey("a", 10)
        assert BookKey("a", 10) >= BookKey("a", 9)
        assert BookKey("a", 10) <= BookKey("a", 10)
        assert BookKey("b", 1) > BookKey("a", 100)

    def test_allows_empty_title_and_bad_edition(self):
        # Lookups with such keys must fail as "not found", not at construction
        key = BookKey("", -5)
        assert key.title == ""
        assert key.edition == -5

    def test_str(self):
        assert str(BookKey("Dune", 3)) == "Dune (ed. 3)"


class TestBookRecord:
    """Tests for stored records."""

    def test_original_defaults(self):
        record = BookRecord(language="en", publication_year=1965, authors=("F. Herbert",))
        assert record.kind == DerivationKind.ORIGINAL
        assert record.derived_from is None
        assert not record.is_derived

    def test_derived(self):
        record = BookRecord(
            language="pl",
            publication_year=1985,
            authors=("F. Herbert",),
            derived_from=BookKey("Dune"),
            kind=DerivationKind.TRANSLATION,
        )
        assert record.is_derived
        assert record.derived_from == BookKey("Dune", 1)

    def test_authors_stored_as_tuple(self):
        record = BookRecord(language="en", publication_year=1965, authors=["A", "B"])
        assert record.authors == ("A", "B")

    def test_derivation_kind_values(self):
        assert [k.value for k in DerivationKind] == ["original", "translation", "revision"]
