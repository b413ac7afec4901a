"""Shipping fee by weight tier, destination zone and insurance flag.

Validation failures are returned alongside a zero fee, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


MIN_WEIGHT = 0.0
MAX_WEIGHT = 50.0
HEAVY_THRESHOLD = 10.0

HEAVY_SURCHARGE = 7.5
INSURANCE_RATE = 1.015

ZONE_BASE_FEES = {
    "Domestic": 5.0,
    "International": 20.0,
    "Express": 30.0,
}


class FeeError(Enum):
    INVALID_WEIGHT = "invalid_weight"
    INVALID_ZONE = "invalid_zone"


class Tier(Enum):
    STANDARD = "standard"
    HEAVY = "heavy"


@dataclass
class ShippingFeeInput:

    weight: float

    zone: str

    insured: bool


class ShippingFeeResult(NamedTuple):
    fee: float
    error: Optional[FeeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate(weight: float, zone: str) -> Optional[FeeError]:
    """Return the first failing check, or None when both inputs are valid."""
    # NaN compares false on both sides and lands here
    if not (MIN_WEIGHT < weight <= MAX_WEIGHT):
        return FeeError.INVALID_WEIGHT

    if zone not in ZONE_BASE_FEES:
        return FeeError.INVALID_ZONE

    return None


def classify_tier(weight: float) -> Tier:
    if weight <= HEAVY_THRESHOLD:
        return Tier.STANDARD
    return Tier.HEAVY


def shipping_fee(input: ShippingFeeInput) -> ShippingFeeResult:

    weight = input.weight

    zone = input.zone

    insured = input.insured

    error = validate(weight, zone)
    if error is not None:
        return ShippingFeeResult(0.0, error)

    if classify_tier(weight) == Tier.STANDARD:

        # R1
        base_fee = ZONE_BASE_FEES[zone]

    else:

        # R2
        base_fee = ZONE_BASE_FEES[zone] + HEAVY_SURCHARGE

    if insured:

        # R3
        return ShippingFeeResult(base_fee * INSURANCE_RATE)

    # R4
    return ShippingFeeResult(base_fee)


def calculate_shipping_fee(weight: float, zone: str, insured: bool) -> ShippingFeeResult:
    return shipping_fee(ShippingFeeInput(weight=weight, zone=zone, insured=insured))
