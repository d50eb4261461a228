"""Tests for the default portfolio."""

from decimal import Decimal

from mathwaa_portfolio.models import ApartmentStatus, ApartmentType, Branch
from mathwaa_portfolio.seed import (
    MATHWAA_52,
    BranchSeed,
    LeaseEntry,
    build_branch,
    build_default_branches,
    list_rent,
)


class TestDefaultBranches:
    """Tests for build_default_branches."""

    def test_two_branches_of_32(self, branches: tuple[Branch, ...]) -> None:
        """Test branch ids and sizes."""
        assert [b.id for b in branches] == ["mathwaa-52", "mathwaa-53"]
        assert all(len(b.apartments) == 32 for b in branches)

    def test_unit_numbering(self, branches: tuple[Branch, ...]) -> None:
        """Test ids run 01 to 32 and equal the unit number."""
        ids = [a.id for a in branches[1].apartments]

        assert ids[0] == "53-01"
        assert ids[-1] == "53-32"
        assert len(set(ids)) == 32
        assert all(a.id == a.number for a in branches[1].apartments)

    def test_targets(self, branches: tuple[Branch, ...]) -> None:
        """Test yearly revenue targets."""
        assert branches[0].target_yearly_revenue.min == Decimal("819000")
        assert branches[1].target_yearly_revenue.max == Decimal("1036800")

    def test_rented_unit(self, branches: tuple[Branch, ...]) -> None:
        """Test a leased unit takes its values from the leasing sheet."""
        apartment = branches[0].find_apartment("52-13")

        assert apartment.status == ApartmentStatus.RENTED
        assert apartment.unit_type == ApartmentType.ONE_BEDROOM
        assert apartment.monthly_rent == Decimal("2900")
        assert apartment.contract_duration_months == 12
        assert apartment.cash_collected == Decimal("2900")
        assert apartment.lifetime_value == Decimal("34800")
        assert apartment.how_heard == "Aqar"

    def test_rent_rounded_to_whole_units(self, branches: tuple[Branch, ...]) -> None:
        """Test a derived rent is rounded, and stays a studio under the threshold."""
        apartment = branches[0].find_apartment("52-11")

        assert apartment.monthly_rent == Decimal("192")
        assert apartment.unit_type == ApartmentType.STUDIO

    def test_branch_threshold(self, branches: tuple[Branch, ...]) -> None:
        """Test branch 53 uses its own one-bedroom threshold."""
        assert branches[1].find_apartment("53-26").unit_type == ApartmentType.ONE_BEDROOM
        assert branches[1].find_apartment("53-12").unit_type == ApartmentType.STUDIO

    def test_vacant_units(self, branches: tuple[Branch, ...]) -> None:
        """Test vacant units carry list rent and every fourth is a one bedroom."""
        first = branches[0].find_apartment("52-01")
        fourth = branches[0].find_apartment("52-04")

        assert first.status == ApartmentStatus.VACANT
        assert first.monthly_rent == Decimal("2400")
        assert first.unit_type == ApartmentType.STUDIO
        assert first.how_heard is None
        assert first.contract_duration_months == 0
        assert fourth.unit_type == ApartmentType.ONE_BEDROOM

    def test_rented_records_are_consistent(self, branches: tuple[Branch, ...]) -> None:
        """Test every rented unit has a positive duration."""
        for branch in branches:
            for apartment in branch.apartments:
                if apartment.is_rented:
                    assert apartment.contract_duration_months > 0
                    assert apartment.implied_monthly_rent() is not None

    def test_builds_fresh_objects(self) -> None:
        """Test repeated calls give equal, independent portfolios."""
        assert build_default_branches() == build_default_branches()


class TestBuildBranch:
    """Tests for build_branch."""

    def test_list_rent_by_floor(self) -> None:
        """Test the four floor tiers."""
        assert list_rent(MATHWAA_52, 1) == Decimal("2400")
        assert list_rent(MATHWAA_52, 9) == Decimal("2300")
        assert list_rent(MATHWAA_52, 24) == Decimal("2200")
        assert list_rent(MATHWAA_52, 32) == Decimal("2000")

    def test_repeated_entries_fold(self) -> None:
        """Test several sheet rows for one unit are summed."""
        seed = BranchSeed(
            id="test",
            name="Test",
            prefix="10",
            target=MATHWAA_52.target,
            floor_rents=MATHWAA_52.floor_rents,
            one_bedroom_threshold=Decimal("2500"),
            leases=(
                LeaseEntry("10-01", Decimal("2400"), 3, Decimal("7200"), "Bayut"),
                LeaseEntry("10-01", Decimal("2400"), 12, Decimal("28800"), "Aqar"),
                LeaseEntry("10-01", Decimal("2400"), 1, Decimal("2400"), "Walk in"),
            ),
        )

        apartment = build_branch(seed, units=2).apartments[0]

        assert apartment.cash_collected == Decimal("7200")
        assert apartment.lifetime_value == Decimal("38400")
        assert apartment.contract_duration_months == 12
        assert apartment.how_heard == "Aqar"
        assert apartment.monthly_rent == Decimal("2400")
