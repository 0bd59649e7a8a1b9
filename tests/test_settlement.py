from datetime import date
from types import SimpleNamespace

import pytest

from app.schemas.booking import BookingCreate
from app.services.settlement import (
    InvalidGuestCount,
    NegativeAmount,
    PrimarySettlementMismatch,
    SettlementError,
    SnackSettlementMismatch,
    rebalance,
    validate_settlement,
)


def make_booking(**overrides) -> BookingCreate:
    fields = dict(
        theatre_name="Screen 1",
        time_slot="2:00 PM - 4:00 PM",
        booking_date=date(2026, 2, 25),
        guests=4,
        total_amount=1200,
        cash_amount=800,
        upi_amount=400,
    )
    fields.update(overrides)
    return BookingCreate(**fields)


# ---------------------------------------------------------------------------
# Accept path
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "cash, upi",
    [(0, 0), (1200, 0), (0, 1200), (800, 400), (0.1, 0.2), (333.33, 666.67), (99999.99, 0.01)],
)
def test_split_that_adds_up_is_accepted(cash, upi):
    booking = make_booking(total_amount=cash + upi, cash_amount=cash, upi_amount=upi)
    assert validate_settlement(booking) is booking


def test_full_booking_with_snacks_is_accepted():
    booking = make_booking(
        total_amount=1200, cash_amount=800, upi_amount=400,
        snacks_amount=300, snacks_cash=200, snacks_upi=100,
    )
    assert validate_settlement(booking) is booking


def test_values_are_not_rounded_or_normalised():
    booking = make_booking(total_amount=100, cash_amount=60, upi_amount=39.995)
    validate_settlement(booking)
    assert booking.upi_amount == 39.995


def test_missing_snack_attributes_count_as_zero():
    booking = SimpleNamespace(guests=2, total_amount=500, cash_amount=500, upi_amount=0)
    assert validate_settlement(booking) is booking


# ---------------------------------------------------------------------------
# Tolerance
# ---------------------------------------------------------------------------


def test_delta_within_tolerance_is_accepted():
    validate_settlement(make_booking(total_amount=100, cash_amount=60, upi_amount=39.995))


def test_delta_beyond_tolerance_is_rejected():
    with pytest.raises(PrimarySettlementMismatch) as exc:
        validate_settlement(make_booking(total_amount=100, cash_amount=60, upi_amount=39.98))
    assert exc.value.delta == pytest.approx(0.02)


# ---------------------------------------------------------------------------
# Reject path
# ---------------------------------------------------------------------------


def test_short_payment_reports_primary_mismatch():
    with pytest.raises(PrimarySettlementMismatch) as exc:
        validate_settlement(make_booking(total_amount=1200, cash_amount=800, upi_amount=300))
    err = exc.value
    assert str(err) == "Cash + UPI must equal total amount"
    assert err.kind == "PrimarySettlementMismatch"
    assert err.paid == 1100
    assert err.total == 1200
    assert err.delta == pytest.approx(100)


def test_overpayment_is_also_a_mismatch():
    with pytest.raises(PrimarySettlementMismatch):
        validate_settlement(make_booking(total_amount=1000, cash_amount=800, upi_amount=400))


def test_snack_mismatch_message():
    booking = make_booking(snacks_amount=300, snacks_cash=200, snacks_upi=50)
    with pytest.raises(SnackSettlementMismatch) as exc:
        validate_settlement(booking)
    assert str(exc.value) == "Snacks cash + UPI must equal snacks amount"


def test_snack_check_skipped_without_snacks():
    booking = make_booking(snacks_amount=0, snacks_cash=150, snacks_upi=75)
    assert validate_settlement(booking) is booking


def test_primary_mismatch_is_reported_before_snack_mismatch():
    booking = make_booking(upi_amount=0, snacks_amount=300, snacks_cash=0, snacks_upi=0)
    with pytest.raises(PrimarySettlementMismatch):
        validate_settlement(booking)


@pytest.mark.parametrize(
    "field", ["total_amount", "cash_amount", "upi_amount", "snacks_amount", "snacks_cash", "snacks_upi"]
)
def test_negative_amounts_are_rejected(field):
    with pytest.raises(NegativeAmount) as exc:
        validate_settlement(make_booking(**{field: -1}))
    assert exc.value.field == field
    assert "cannot be negative" in str(exc.value)


def test_nan_amount_is_treated_as_negative():
    with pytest.raises(NegativeAmount):
        validate_settlement(make_booking(cash_amount=float("nan")))


def test_infinite_split_is_rejected():
    booking = make_booking(total_amount="inf", cash_amount="inf", upi_amount=500)
    with pytest.raises(SettlementError) as exc:
        validate_settlement(booking)
    assert exc.value.kind == "NegativeAmount"
    assert exc.value.field == "total_amount"
    assert str(exc.value) == "Total amount must be a finite number"


@pytest.mark.parametrize("value", [float("inf"), float("-inf")])
@pytest.mark.parametrize("field", ["upi_amount", "snacks_amount", "snacks_upi"])
def test_non_finite_amounts_are_rejected(field, value):
    with pytest.raises(NegativeAmount) as exc:
        validate_settlement(make_booking(**{field: value}))
    assert exc.value.field == field


@pytest.mark.parametrize("guests", [0, -3, float("nan"), None])
def test_invalid_guest_counts(guests):
    booking = SimpleNamespace(guests=guests, total_amount=0, cash_amount=0, upi_amount=0)
    with pytest.raises(InvalidGuestCount):
        validate_settlement(booking)


def test_errors_share_a_value_error_base():
    with pytest.raises(ValueError):
        validate_settlement(make_booking(guests=0))
    assert issubclass(SnackSettlementMismatch, SettlementError)


# ---------------------------------------------------------------------------
# Rebalance
# ---------------------------------------------------------------------------


def test_rebalance_derives_upi_from_cash():
    edited = make_booking(cash_amount=500, upi_amount=0)
    result = rebalance(edited, "cash_amount")
    assert result.cash_amount == 500
    assert result.upi_amount == 700


def test_rebalance_derives_cash_from_upi():
    result = rebalance(make_booking(cash_amount=0, upi_amount=1000), "upi_amount")
    assert result.cash_amount == 200


def test_rebalance_snack_pair():
    edited = make_booking(snacks_amount=300, snacks_cash=120, snacks_upi=0)
    result = rebalance(edited, "snacks_cash")
    assert result.snacks_upi == 180


def test_rebalance_does_not_touch_its_input():
    edited = make_booking(cash_amount=500, upi_amount=0)
    rebalance(edited, "cash_amount")
    assert edited.upi_amount == 0


def test_rebalance_floors_at_zero_and_still_validates():
    edited = make_booking(cash_amount=1500, upi_amount=0)
    with pytest.raises(PrimarySettlementMismatch):
        rebalance(edited, "cash_amount")


def test_rebalance_rejects_unknown_field():
    with pytest.raises(ValueError):
        rebalance(make_booking(), "guests")
