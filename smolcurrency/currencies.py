"""The two sides of a trading pair: base and quote currency.

In the symbol BTCUSD, BTC is the base currency and USD the quote currency.
Margin held in quote currency means linear futures; margin held in base
currency means inverse futures.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from smolcurrency.money import DecimalLike, MarginCurrency


def _require(value: object, kind: type, name: str) -> None:
    if type(value) is not kind:
        raise TypeError(f"{name} must be {kind.__name__}, not {type(value).__name__}")


def _same_precision(*amounts: MarginCurrency) -> int:
    precisions = {amount.precision for amount in amounts}
    if len(precisions) != 1:
        raise ValueError(f"precision mismatch: {sorted(precisions)}")
    return precisions.pop()


def _positive_price(price: QuoteCurrency, name: str) -> None:
    _require(price, QuoteCurrency, name)
    if not price.is_positive():
        raise ValueError(f"{name} must be positive, got {price}")


class BaseCurrency(MarginCurrency):
    """An amount of base currency; as margin it settles inverse futures."""

    __slots__ = ()

    unit_label: ClassVar[str] = "Base"

    @classmethod
    def _convert(cls, units: QuoteCurrency, price_per_unit: QuoteCurrency) -> BaseCurrency:
        precision = _same_precision(units, price_per_unit)
        return cls(units.value, precision) / price_per_unit.value

    @classmethod
    def convert_from(
        cls, units: QuoteCurrency, price_per_unit: QuoteCurrency
    ) -> BaseCurrency:
        """Buy base currency with ``units`` of quote currency at ``price_per_unit``."""
        _require(units, QuoteCurrency, "units")
        _positive_price(price_per_unit, "price_per_unit")
        if units.is_negative():
            raise ValueError(f"units must not be negative, got {units}")
        return cls._convert(units, price_per_unit)

    @classmethod
    def pnl(
        cls,
        entry_price: QuoteCurrency,
        exit_price: QuoteCurrency,
        quantity: QuoteCurrency,
    ) -> BaseCurrency:
        """Profit and loss of an inverse futures position, in base currency."""
        _positive_price(entry_price, "entry_price")
        _positive_price(exit_price, "exit_price")
        _require(quantity, QuoteCurrency, "quantity")
        return cls._convert(quantity, entry_price) - cls._convert(quantity, exit_price)


class QuoteCurrency(MarginCurrency):
    """An amount of quote currency; as margin it settles linear futures."""

    __slots__ = ()

    unit_label: ClassVar[str] = "Quote"

    @classmethod
    def _convert(cls, units: BaseCurrency, price_per_unit: QuoteCurrency) -> QuoteCurrency:
        precision = _same_precision(units, price_per_unit)
        return cls(units.value, precision) * price_per_unit.value

    @classmethod
    def convert_from(
        cls, units: BaseCurrency, price_per_unit: QuoteCurrency
    ) -> QuoteCurrency:
        """Value ``units`` of base currency at ``price_per_unit``."""
        _require(units, BaseCurrency, "units")
        _positive_price(price_per_unit, "price_per_unit")
        if units.is_negative():
            raise ValueError(f"units must not be negative, got {units}")
        return cls._convert(units, price_per_unit)

    @classmethod
    def pnl(
        cls,
        entry_price: QuoteCurrency,
        exit_price: QuoteCurrency,
        quantity: BaseCurrency,
    ) -> QuoteCurrency:
        """Profit and loss of a linear futures position, in quote currency."""
        _positive_price(entry_price, "entry_price")
        _positive_price(exit_price, "exit_price")
        _require(quantity, BaseCurrency, "quantity")
        return cls._convert(quantity, exit_price) - cls._convert(quantity, entry_price)

    def _liquidation(self, factor: Decimal) -> QuoteCurrency:
        return self * factor

    @staticmethod
    def _margin_requirement(maint_margin_req: DecimalLike) -> Decimal:
        requirement = Decimal(maint_margin_req)
        if requirement > 1:
            raise ValueError(
                f"maintenance margin requirement {requirement} exceeds one"
            )
        return requirement

    def liquidation_price_long(self, maint_margin_req: DecimalLike) -> QuoteCurrency:
        """Price at which a long entered at this price is liquidated."""
        return self._liquidation(1 - self._margin_requirement(maint_margin_req))

    def liquidation_price_short(self, maint_margin_req: DecimalLike) -> QuoteCurrency:
        """Price at which a short entered at this price is liquidated."""
        return self._liquidation(1 + self._margin_requirement(maint_margin_req))

    @classmethod
    def new_weighted_price(
        cls,
        price_0: QuoteCurrency,
        weight_0: DecimalLike,
        price_1: QuoteCurrency,
        weight_1: DecimalLike,
    ) -> QuoteCurrency:
        """Average of two prices weighted by ``weight_0`` and ``weight_1``."""
        _require(price_0, cls, "price_0")
        _require(price_1, cls, "price_1")
        _same_precision(price_0, price_1)
        w0, w1 = Decimal(weight_0), Decimal(weight_1)
        for name, price in (("price_0", price_0), ("price_1", price_1)):
            if price.is_negative():
                raise ValueError(f"{name} must not be negative, got {price}")
        for name, weight in (("weight_0", w0), ("weight_1", w1)):
            if weight <= 0:
                raise ValueError(f"{name} must be positive, got {weight}")
        return (price_0 * w0 + price_1 * w1) / (w0 + w1)