"""Tests for slug generation."""

import pytest

from cabradar.slugs import (
    event_slug,
    extract_id_from_slug,
    inspector_slug,
    make_slug,
    normalize,
    road_disruption_slug,
    transport_disruption_slug,
)


class TestNormalize:
    """Tests for normalize function."""

    def test_road_name_with_code(self) -> None:
        assert normalize("A302 Kennington Park Road!") == "a302-kennington-park-road"

    def test_collapses_runs_of_separators(self) -> None:
        assert normalize("Oxford   Street -- (W1)") == "oxford-street-w1"

    def test_strips_leading_and_trailing_hyphens(self) -> None:
        assert normalize("  --St. Pancras--  ") == "st-pancras"

    def test_non_ascii_becomes_separator(self) -> None:
        assert normalize("Café Nero") == "caf-nero"

    def test_empty_and_none(self) -> None:
        assert normalize("") == ""
        assert normalize(None) == ""

    def test_only_punctuation(self) -> None:
        assert normalize("!!! ???") == ""

    @pytest.mark.parametrize(
        "name",
        [
            "A302 Kennington Park Road!",
            "[M25] Junction 10 (Wisley)",
            "  lambeth-bridge-TIMS-204461  ",
            "Café Nero",
            "---",
            "",
        ],
    )
    def test_idempotent(self, name: str) -> None:
        assert normalize(normalize(name)) == normalize(name)


class TestMakeSlug:
    """Tests for make_slug and per-category slug builders."""

    def test_name_and_id(self) -> None:
        assert make_slug("Oxford Street", "TIMS-12345") == "oxford-street-TIMS-12345"

    def test_id_kept_unmodified(self) -> None:
        """Test that the id is appended without normalization."""
        assert make_slug("Lambeth Bridge", "TIMS-204461") == "lambeth-bridge-TIMS-204461"

    def test_empty_name_uses_lowercased_id(self) -> None:
        assert make_slug("", "TIMS-12345") == "tims-12345"
        assert make_slug(None, "EV99") == "ev99"

    def test_name_normalizing_to_nothing(self) -> None:
        assert make_slug("???", "ABC") == "abc"

    def test_not_injective(self) -> None:
        assert make_slug("High St.", "1") == make_slug("high-st", "1")

    def test_category_builders_delegate(self) -> None:
        assert road_disruption_slug("Lambeth Bridge", "TIMS-1") == "lambeth-bridge-TIMS-1"
        assert event_slug("Arsenal v Spurs", "ev-7") == "arsenal-v-spurs-ev-7"
        assert inspector_slug("Bank Junction", "ins1") == "bank-junction-ins1"
        assert transport_disruption_slug("Euston Station", "940G") == "euston-station-940G"


class TestExtractIdFromSlug:
    """Tests for extract_id_from_slug function."""

    def test_simple_id(self) -> None:
        assert extract_id_from_slug("o2-arena-ev123") == "ev123"

    def test_hyphenated_id_is_lossy(self) -> None:
        assert extract_id_from_slug("lambeth-bridge-TIMS-204461") == "204461"

    def test_no_hyphen(self) -> None:
        assert extract_id_from_slug("tims") == "tims"
