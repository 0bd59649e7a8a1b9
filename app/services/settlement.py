"""
Settlement rules for booking payments.

A booking carries two independent charges:

  - the primary charge:   cash_amount + upi_amount  == total_amount
  - the snack add-on:     snacks_cash + snacks_upi  == snacks_amount

Both are compared within ``TOLERANCE`` because amounts arrive as decimal
strings parsed to float. The snack check only applies when snacks were sold.

Everything here is pure: no I/O, no logging, inputs are never mutated.
"""
import math
from typing import Any

TOLERANCE = 0.01

AMOUNT_FIELDS = (
    "total_amount",
    "cash_amount",
    "upi_amount",
    "snacks_amount",
    "snacks_cash",
    "snacks_upi",
)

# Edited field -> (complementary field, anchor it must add up to)
REBALANCE_PAIRS = {
    "cash_amount": ("upi_amount", "total_amount"),
    "upi_amount": ("cash_amount", "total_amount"),
    "snacks_cash": ("snacks_upi", "snacks_amount"),
    "snacks_upi": ("snacks_cash", "snacks_amount"),
}

_LABELS = {
    "total_amount": "Total amount",
    "cash_amount": "Cash amount",
    "upi_amount": "UPI amount",
    "snacks_amount": "Snacks amount",
    "snacks_cash": "Snacks cash",
    "snacks_upi": "Snacks UPI",
}


class SettlementError(ValueError):
    kind = "SettlementError"


class NegativeAmount(SettlementError):
    kind = "NegativeAmount"

    def __init__(self, field: str, value: float):
        self.field = field
        self.value = value
        label = _LABELS.get(field, field)
        if math.isfinite(value):
            super().__init__(f"{label} cannot be negative")
        else:
            super().__init__(f"{label} must be a finite number")


class InvalidGuestCount(SettlementError):
    kind = "InvalidGuestCount"

    def __init__(self, guests):
        self.guests = guests
        super().__init__("Guests must be at least 1")


class PrimarySettlementMismatch(SettlementError):
    kind = "PrimarySettlementMismatch"

    def __init__(self, paid: float, total: float, delta: float):
        self.paid = paid
        self.total = total
        self.delta = delta
        super().__init__("Cash + UPI must equal total amount")


class SnackSettlementMismatch(SettlementError):
    kind = "SnackSettlementMismatch"

    def __init__(self, paid: float, total: float, delta: float):
        self.paid = paid
        self.total = total
        self.delta = delta
        super().__init__("Snacks cash + UPI must equal snacks amount")


def _amount(booking: Any, field: str) -> float:
    value = getattr(booking, field, None)
    return 0.0 if value is None else float(value)


def validate_settlement(booking: Any) -> Any:
    """
    Gate a proposed booking on its payment split.

    ``booking`` is any object exposing the six amount attributes plus
    ``guests`` (a ``BookingCreate`` or an ORM ``Booking``); missing snack
    fields count as 0. Returns ``booking`` unchanged or raises a
    ``SettlementError`` subclass. NaN and infinite amounts fail the sign
    check instead of leaking into the arithmetic.
    """
    amounts = {field: _amount(booking, field) for field in AMOUNT_FIELDS}

    for field, value in amounts.items():
        if not math.isfinite(value) or value < 0:
            raise NegativeAmount(field, value)

    guests = getattr(booking, "guests", None)
    if guests is None or not guests >= 1:
        raise InvalidGuestCount(guests)

    paid = amounts["cash_amount"] + amounts["upi_amount"]
    total = amounts["total_amount"]
    delta = abs(paid - total)
    if not delta <= TOLERANCE:
        raise PrimarySettlementMismatch(paid, total, delta)

    snacks_total = amounts["snacks_amount"]
    if snacks_total > 0:
        snacks_paid = amounts["snacks_cash"] + amounts["snacks_upi"]
        snacks_delta = abs(snacks_paid - snacks_total)
        if not snacks_delta <= TOLERANCE:
            raise SnackSettlementMismatch(snacks_paid, snacks_total, snacks_delta)

    return booking


def complement(anchor: float, changed: float) -> float:
    """The other half of a split once one side is known, floored at zero."""
    return max(0.0, anchor - changed)


def rebalance(booking: Any, changed_field: str) -> Any:
    """
    Recompute the counterpart of an interactively edited payment field.

    Editing ``cash_amount`` re-derives ``upi_amount`` from ``total_amount``
    (and vice versa); the snack pair works the same against
    ``snacks_amount``. The result is a copy that has passed
    ``validate_settlement``. Only meant for the moment of an edit, never
    to repair a stored record.
    """
    if changed_field not in REBALANCE_PAIRS:
        raise ValueError(f"Cannot rebalance on {changed_field!r}")

    other_field, anchor_field = REBALANCE_PAIRS[changed_field]
    value = complement(_amount(booking, anchor_field), _amount(booking, changed_field))
    rebalanced = booking.model_copy(update={other_field: value})
    return validate_settlement(rebalanced)
