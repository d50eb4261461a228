"""Tests for custom exception hierarchy."""

from mathwaa_portfolio.exceptions import (
    ApartmentNotFoundError,
    BranchNotFoundError,
    ConfigurationError,
    EntityNotFoundError,
    FormatError,
    PortfolioError,
    StaleStateError,
)
from mathwaa_portfolio.messages import MESSAGES, render


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_portfolio_error_is_exception(self) -> None:
        assert isinstance(PortfolioError("test"), Exception)

    def test_format_error_is_portfolio_error(self) -> None:
        assert isinstance(FormatError("missing_rows"), PortfolioError)

    def test_not_found_errors(self) -> None:
        for err in (BranchNotFoundError("x"), ApartmentNotFoundError("x")):
            assert isinstance(err, EntityNotFoundError)
            assert isinstance(err, PortfolioError)

    def test_stale_state_is_portfolio_error(self) -> None:
        assert isinstance(StaleStateError("test"), PortfolioError)

    def test_configuration_error_is_portfolio_error(self) -> None:
        assert isinstance(ConfigurationError("test"), PortfolioError)

    def test_exception_message(self) -> None:
        err = ApartmentNotFoundError("Apartment 52-99 not found")
        assert str(err) == "Apartment 52-99 not found"


class TestFormatError:
    """Tests for FormatError details and rendering."""

    def test_attributes(self) -> None:
        err = FormatError("invalid_amount", row=4, column="Cash Collected", value="abc")

        assert err.code == "invalid_amount"
        assert err.row == 4
        assert err.column == "Cash Collected"
        assert err.value == "abc"
        assert str(err) == "Row 4: Invalid 'Cash Collected' value \"abc\"."

    def test_defaults_are_none(self) -> None:
        err = FormatError("missing_rows")

        assert err.row is None
        assert err.column is None
        assert err.value is None

    def test_localized_arabic(self) -> None:
        err = FormatError("invalid_status", row=3, value="LEASED")

        assert err.localized("ar") == "الصف 3: قيمة \"الحالة\" غير صالحة \"LEASED\"."

    def test_unknown_locale_falls_back(self) -> None:
        err = FormatError("missing_column", column="Status")

        assert err.localized("fr") == str(err) == "Missing required column in CSV: Status"


class TestMessages:
    """Tests for the message catalogue."""

    def test_locales_share_codes(self) -> None:
        assert set(MESSAGES["en"]) == set(MESSAGES["ar"])

    def test_render_success(self) -> None:
        assert render("upload_success") == "Apartment data updated successfully!"
        assert render("upload_success", "ar") == "تم تحديث بيانات الشقق بنجاح!"
