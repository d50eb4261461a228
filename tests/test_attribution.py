"""Tests for booking-source attribution."""

import pytest

from mathwaa_portfolio.attribution import classify_source
from mathwaa_portfolio.models import AttributionCategory


class TestClassifySource:
    """Tests for classify_source."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("Bayut", AttributionCategory.LISTING_PLATFORMS),
            ("aqar.fm", AttributionCategory.LISTING_PLATFORMS),
            ("Online Listing", AttributionCategory.LISTING_PLATFORMS),
            ("Social Media Campaign", AttributionCategory.PAID_SOCIAL_ADVERTISING),
            ("Facebook Ad", AttributionCategory.PAID_SOCIAL_ADVERTISING),
            ("INSTAGRAM", AttributionCategory.PAID_SOCIAL_ADVERTISING),
            ("TikTok", AttributionCategory.PAID_SOCIAL_ADVERTISING),
            ("Word of Mouth", AttributionCategory.WORD_OF_MOUTH),
            ("Walk in", AttributionCategory.WALK_IN),
            ("Saw the building board", AttributionCategory.WALK_IN),
            ("Google Maps", AttributionCategory.OTHER),
            ("Wasalt", AttributionCategory.OTHER),
            ("", AttributionCategory.OTHER),
        ],
    )
    def test_categories(self, source: str, expected: AttributionCategory) -> None:
        assert classify_source(source) == expected

    def test_first_rule_wins(self) -> None:
        """Test listing keywords take precedence over social ones."""
        assert classify_source("Bayut Instagram page") == AttributionCategory.LISTING_PLATFORMS

    def test_social_before_word_of_mouth(self) -> None:
        """Test rule order between social and word of mouth."""
        assert classify_source("word of mouth on social") == (
            AttributionCategory.PAID_SOCIAL_ADVERTISING
        )

    def test_walk_in_needs_space(self) -> None:
        """Test "walk-in" with a hyphen does not match the walk in rule."""
        assert classify_source("Walk-in") == AttributionCategory.OTHER
