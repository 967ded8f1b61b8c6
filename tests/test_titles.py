# ABOUTME: Tests for headline extraction from event descriptions.
# ABOUTME: Validates sentence boundary detection, abbreviation handling, and fallbacks.

from on_this_day.events.titles import extract_title


class TestExtractTitle:
    """Tests for extract_title."""

    def test_first_sentence(self) -> None:
        """The first sentence becomes the title."""
        text = "Apollo 11 astronauts landed on the Moon. It was historic."
        assert extract_title(text) == "Apollo 11 astronauts landed on the Moon."

    def test_skips_leading_abbreviation(self) -> None:
        """An honorific period is not a sentence boundary."""
        text = "Dr. Smith opened the lab. It was a success."
        assert extract_title(text) == "Dr. Smith opened the lab."

    def test_skips_country_abbreviation(self) -> None:
        """'U.S.' followed by a capital does not end the title."""
        text = "The U.S. Senate ratified the agreement. Celebrations followed."
        assert extract_title(text) == "The U.S. Senate ratified the agreement."

    def test_single_sentence_returned_whole(self) -> None:
        """Text without a boundary is returned verbatim when short."""
        text = "The September 11 attacks occurred in the United States."
        assert extract_title(text) == text

    def test_short_first_sentence_extends(self) -> None:
        """A first sentence of 10 characters or fewer is not used alone."""
        text = "It rained. The harvest was lost across the valley. Prices rose."
        assert extract_title(text) == "It rained. The harvest was lost across the valley."

    def test_period_space_fallback(self) -> None:
        """A period followed by a lowercase word still ends the title in the fallback pass."""
        text = "The treaty was signed in the great hall. afterwards the delegates dined."
        assert extract_title(text) == "The treaty was signed in the great hall."

    def test_long_text_truncated(self) -> None:
        """Long text without usable boundaries is cut with an ellipsis."""
        text = "word " * 60
        title = extract_title(text)

        assert title.endswith("...")
        assert len(title) <= 153
        assert title == text[:150].strip() + "..."

    def test_overlong_sentence_rejected(self) -> None:
        """A first sentence longer than the maximum falls back to truncation."""
        text = "a" * 250 + ". Then more."
        title = extract_title(text)

        assert title == "a" * 150 + "..."

    def test_custom_lengths(self) -> None:
        """Maximum and fallback lengths are configurable."""
        text = "This sentence is definitely longer than thirty characters. Next."
        assert extract_title(text, max_length=30, fallback_length=20) == text[:20].strip() + "..."

    def test_never_empty_for_text(self) -> None:
        """Any non-empty text yields a non-empty title."""
        assert extract_title("Short.") == "Short."
