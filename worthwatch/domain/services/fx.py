"""Currency conversion helpers."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from worthwatch.utils.decimal_utils import coerce_decimal


def build_rate_map(
    fx_rates: Mapping[str, object],
    target_currency: str,
    logger: Logger | None = None,
) -> dict[str, Decimal]:
    """Normalize rates into the target currency keyed by upper-case code.

    Args:
        fx_rates: Rate per source currency into the target currency.
        target_currency: Currency every amount is converted into.
        logger: Optional logger used for warnings.

    Returns:
        dict[str, Decimal]: Finite positive rates, with the target mapped to 1.
    """
    rates: dict[str, Decimal] = {}
    for code, raw in fx_rates.items():
        if not code:
            continue
        rate = coerce_decimal(raw)
        if not rate.is_finite() or rate <= 0:
            if logger is not None:
                logger.warning(f"Skipping unusable FX rate for {code}: {rate}")
            continue
        rates[code.upper()] = rate
    rates[target_currency.upper()] = Decimal("1")
    return rates


def rate_for(
    currency: str | None,
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> Decimal:
    """Return the conversion rate of a currency into the target.

    Missing currencies and missing rates fall back to 1.

    Args:
        currency: Source currency code.
        rates: Normalized rate map.
        target_currency: Target currency code.
        logger: Optional logger used for warnings.

    Returns:
        Decimal: Conversion rate.
    """
    if not currency or currency.upper() == target_currency.upper():
        return Decimal("1")
    rate = rates.get(currency.upper())
    if rate is None:
        if logger is not None:
            logger.warning(
                f"Missing FX rate {currency}->{target_currency}; using 1"
            )
        return Decimal("1")
    return rate


def convert_amount(
    amount: Decimal,
    currency: str | None,
    rates: Mapping[str, Decimal],
    target_currency: str,
    logger: Logger | None = None,
) -> Decimal:
    """Convert an amount into the target currency."""
    return coerce_decimal(amount) * rate_for(
        currency, rates, target_currency, logger
    )


__all__ = ["build_rate_map", "rate_for", "convert_amount"]
