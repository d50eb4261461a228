"""Domain models for the apartment portfolio."""

from mathwaa_portfolio.models.apartment import ApartmentRecord
from mathwaa_portfolio.models.booking import NewBooking
from mathwaa_portfolio.models.branch import Branch, RevenueTarget
from mathwaa_portfolio.models.enums import (
    ApartmentStatus,
    ApartmentType,
    AttributionCategory,
)

__all__ = [
    "ApartmentRecord",
    "ApartmentStatus",
    "ApartmentType",
    "AttributionCategory",
    "Branch",
    "NewBooking",
    "RevenueTarget",
]
