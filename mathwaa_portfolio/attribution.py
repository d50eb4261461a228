"""Booking-source attribution.

Maps the free-text "how did you hear about us" answer onto a fixed set of
marketing channels for aggregate reporting.
"""

from mathwaa_portfolio.models.enums import AttributionCategory

# Evaluated in order; first keyword hit wins
CATEGORY_KEYWORDS: tuple[tuple[AttributionCategory, tuple[str, ...]], ...] = (
    (AttributionCategory.LISTING_PLATFORMS, ("bayut", "aqar", "listing")),
    (AttributionCategory.PAID_SOCIAL_ADVERTISING, ("social", "facebook", "instagram", "tiktok")),
    (AttributionCategory.WORD_OF_MOUTH, ("word of mouth",)),
    (AttributionCategory.WALK_IN, ("walk in", "building board")),
)


def classify_source(source: str) -> AttributionCategory:
    """Classify a booking source string.

    Parameters
    ----------
    source : str
        Raw source text, e.g. ``"Facebook Ad"``.

    Returns
    -------
    AttributionCategory
        The matching channel, ``OTHER`` when nothing matches.
    """
    cleaned = source.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in cleaned for keyword in keywords):
            return category
    return AttributionCategory.OTHER
