# ABOUTME: Tests for keyword-based event categorization.
# ABOUTME: Validates whole-word and phrase matching and the General fallback.

from on_this_day.events.categories import (
    ALL_CATEGORIES,
    CATEGORY_KEYWORDS,
    DEFAULT_CATEGORY,
    categorize,
)


class TestCategorize:
    """Tests for categorize."""

    def test_politics_keyword(self) -> None:
        """A treaty is a political event."""
        assert "Politics" in categorize("A Treaty is signed", "...")

    def test_general_fallback(self) -> None:
        """Text with no keywords is General."""
        assert categorize("nothing matches", "xyz") == ["General"]

    def test_whole_word_only(self) -> None:
        """Keywords do not match inside longer words."""
        # "war" must not match "warm" or "toward", "state" not "statement"
        assert categorize("started the race", "") == ["General"]
        assert categorize("A warm statement", "toward the end") == ["General"]

    def test_multiple_categories(self) -> None:
        """An event can belong to several categories."""
        categories = categorize("Battle ends with a peace treaty", "")
        assert "Military" in categories
        assert "Politics" in categories

    def test_phrase_keyword(self) -> None:
        """Multi-word keywords match as phrases."""
        assert "Economics" in categorize("Panic on the stock market", "")

    def test_phrase_ignores_punctuation(self) -> None:
        """Punctuation between phrase words does not prevent a match."""
        assert "Politics" in categorize("Rally for civil-rights", "")

    def test_case_insensitive_acronym(self) -> None:
        """Upper-case keywords match regardless of case."""
        assert "Science" in categorize("Structure of dna described", "")

    def test_description_counts(self) -> None:
        """Keywords in the description are considered."""
        assert "Science" in categorize("Apollo 11", "Astronauts landed on the Moon.")

    def test_deterministic(self) -> None:
        """Repeated calls give the same ordered result."""
        first = categorize("Election and war", "The army marched.")
        assert categorize("Election and war", "The army marched.") == first

    def test_general_is_not_a_table_key(self) -> None:
        """General is only ever the fallback."""
        assert DEFAULT_CATEGORY not in CATEGORY_KEYWORDS
        assert ALL_CATEGORIES[0] == DEFAULT_CATEGORY
        assert set(ALL_CATEGORIES[1:]) == {
            "Politics",
            "Science",
            "Economics",
            "Military",
            "People",
            "Technology",
        }
