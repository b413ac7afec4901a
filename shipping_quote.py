"""Itemised shipping quote built on top of the fee calculator."""

import logging
from dataclasses import dataclass
from typing import Optional

from shipping_fee import (
    HEAVY_SURCHARGE,
    ZONE_BASE_FEES,
    FeeError,
    ShippingFeeInput,
    ShippingFeeResult,
    Tier,
    classify_tier,
    shipping_fee,
    validate,
)

logger = logging.getLogger(__name__)


@dataclass
class ShippingQuoteInput:
    weight: float
    zone: str
    insured: bool


@dataclass
class ShippingQuoteOutput:
    tier: Tier
    base_fee: float
    heavy_surcharge: float
    insurance_surcharge: float
    total: float


@dataclass
class ShippingQuoteContext:
    classify: Optional[Tier] = None
    calc_fee: Optional[ShippingFeeResult] = None
    price: Optional[float] = None


class ShippingQuoteError(Exception):
    def __init__(self, step: str, error_type: str, message: str):
        self.step = step
        self.error_type = error_type
        super().__init__(message)


def _gate_failed(step: str, error: FeeError, message: str) -> ShippingQuoteError:
    logger.warning("Gate %s failed: %s", step, message)
    return ShippingQuoteError(step, error.value, message)


def shipping_quote(input: ShippingQuoteInput) -> ShippingQuoteOutput:
    ctx = ShippingQuoteContext()
    error = validate(input.weight, input.zone)

    # Gate: require_valid_weight
    if error == FeeError.INVALID_WEIGHT:
        raise _gate_failed(
            "require_valid_weight",
            error,
            f"Gate condition failed: 0 < weight <= 50 (got {input.weight!r})",
        )

    # Gate: require_known_zone
    if error == FeeError.INVALID_ZONE:
        raise _gate_failed(
            "require_known_zone",
            error,
            f"Gate condition failed: unknown zone {input.zone!r}",
        )

    # Step: classify
    ctx.classify = classify_tier(input.weight)
    logger.debug("classify: weight=%s tier=%s", input.weight, ctx.classify.value)

    # Step: calc_fee (call shipping_fee)
    calc_fee_input = ShippingFeeInput(
        weight=input.weight,
        zone=input.zone,
        insured=input.insured,
    )
    ctx.calc_fee = shipping_fee(calc_fee_input)
    if not ctx.calc_fee.ok:
        raise _gate_failed(
            "calc_fee",
            ctx.calc_fee.error,
            f"Fee calculation failed: {ctx.calc_fee.error.value}",
        )

    # Step: price
    base_fee = ZONE_BASE_FEES[input.zone]
    heavy_surcharge = HEAVY_SURCHARGE if ctx.classify == Tier.HEAVY else 0.0
    ctx.price = base_fee + heavy_surcharge
    logger.debug("price: zone=%s base=%s heavy=%s", input.zone, base_fee, heavy_surcharge)

    # Step: insure
    insurance_surcharge = ctx.calc_fee.fee - ctx.price
    logger.debug("insure: insured=%s total=%s", input.insured, ctx.calc_fee.fee)

    return ShippingQuoteOutput(
        tier=ctx.classify,
        base_fee=base_fee,
        heavy_surcharge=heavy_surcharge,
        insurance_surcharge=insurance_surcharge,
        total=ctx.calc_fee.fee,
    )
