"""Enumeration types for portfolio entities."""

from enum import Enum


class ApartmentStatus(str, Enum):
    RENTED = "RENTED"
    VACANT = "VACANT"
    RESERVED = "RESERVED"


class ApartmentType(str, Enum):
    STUDIO = "Studio"
    ONE_BEDROOM = "One Bedroom"
    TWO_BEDROOM = "Two Bedroom"


class AttributionCategory(str, Enum):
    LISTING_PLATFORMS = "Listing Platforms"
    PAID_SOCIAL_ADVERTISING = "Paid Social Advertising"
    WORD_OF_MOUTH = "Word of Mouth"
    WALK_IN = "Walk in"
    OTHER = "Other"
