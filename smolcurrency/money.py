"""Fixed-precision monetary values and the currency protocol."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import ClassVar, TypeVar, Union

DecimalLike = Union[Decimal, int, str]

C = TypeVar("C", bound="Currency")

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


class ParseDecimalError(ValueError):
    """Raised when text cannot be read as a decimal of the given precision."""


def _check_precision(precision: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be an int, not {type(precision).__name__}")
    if not 0 <= precision <= 255:
        raise ValueError(f"precision {precision} is outside 0..255")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _raw_of(value: DecimalLike, precision: int) -> int:
    """Scale ``value`` to an integer count of ``10**-precision`` units, exactly."""
    if isinstance(value, bool) or not isinstance(value, (int, Decimal, str)):
        raise TypeError(f"cannot use {type(value).__name__} as a decimal value")
    if isinstance(value, int):
        return value * 10**precision
    if isinstance(value, str):
        try:
            value = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal literal {value!r}") from exc
    if not value.is_finite():
        raise ValueError(f"{value} is not a finite number")
    sign, digits, exponent = value.as_tuple()
    magnitude = int("".join(str(d) for d in digits))
    shift = exponent + precision
    if shift >= 0:
        raw = magnitude * 10**shift
    else:
        divisor = 10**-shift
        if magnitude % divisor:
            raise ValueError(
                f"{value} is not representable with {precision} decimal places"
            )
        raw = magnitude // divisor
    return -raw if sign else raw


def _to_decimal(raw: int, precision: int) -> Decimal:
    sign, digits, _ = Decimal(raw).as_tuple()
    return Decimal((sign, digits, -precision))


def scaled_decimal(integer: int, scale: int, precision: int) -> Decimal:
    """Return ``integer * 10**-scale`` held at ``precision`` decimal places.

    ``scale`` may not exceed ``precision``.
    """
    _check_precision(precision)
    if isinstance(integer, bool) or not isinstance(integer, int):
        raise TypeError("integer must be an int")
    if not 0 <= scale <= precision:
        raise ValueError(f"scale {scale} must lie between 0 and precision {precision}")
    return _to_decimal(integer * 10 ** (precision - scale), precision)


@total_ordering
class Currency(ABC):
    """An amount of some currency held as a fixed-point decimal.

    The amount is an integer number of ``10**-precision`` units; products and
    quotients are truncated toward zero.
    """

    __slots__ = ("_raw", "_precision")

    unit_label: ClassVar[str] = ""

    def __init__(self, value: DecimalLike, precision: int) -> None:
        _check_precision(precision)
        self._raw = _raw_of(value, precision)
        self._precision = precision

    @classmethod
    def _from_raw(cls: type[C], raw: int, precision: int) -> C:
        obj = cls.__new__(cls)
        obj._raw = raw
        obj._precision = precision
        return obj

    @classmethod
    def new(cls: type[C], integer: int, scale: int, precision: int) -> C:
        """Create an amount of ``integer * 10**-scale``."""
        return cls(scaled_decimal(integer, scale, precision), precision)

    @classmethod
    def zero(cls: type[C], precision: int) -> C:
        _check_precision(precision)
        return cls._from_raw(0, precision)

    @classmethod
    def one(cls: type[C], precision: int) -> C:
        _check_precision(precision)
        return cls._from_raw(10**precision, precision)

    @classmethod
    def from_str_radix(cls: type[C], text: str, radix: int, precision: int) -> C:
        """Parse a plain decimal literal such as ``"-12.5"``; only radix 10 is read."""
        _check_precision(precision)
        if radix != 10:
            raise ParseDecimalError(f"unsupported radix {radix}")
        if not _NUMBER.fullmatch(text):
            raise ParseDecimalError(f"invalid decimal literal {text!r}")
        try:
            return cls._from_raw(_raw_of(Decimal(text), precision), precision)
        except ValueError as exc:
            raise ParseDecimalError(str(exc)) from exc

    @property
    def value(self) -> Decimal:
        """The amount as a ``Decimal`` with exactly ``precision`` places."""
        return _to_decimal(self._raw, self._precision)

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def raw(self) -> int:
        """The amount in units of ``10**-precision``."""
        return self._raw

    def is_zero(self) -> bool:
        return self._raw == 0

    def is_one(self) -> bool:
        return self == self.one(self._precision)

    def abs(self: C) -> C:
        return self._from_raw(abs(self._raw), self._precision)

    def abs_sub(self: C, other: C) -> C:
        """Return ``self - other`` when positive, otherwise zero."""
        other_raw = self._same_kind(other)
        if other_raw is None:
            raise TypeError(f"expected {type(self).__name__}, got {type(other).__name__}")
        return self._from_raw(max(self._raw - other_raw, 0), self._precision)

    def signum(self: C) -> C:
        sign = (self._raw > 0) - (self._raw < 0)
        return self._from_raw(sign * 10**self._precision, self._precision)

    def is_positive(self) -> bool:
        return self._raw > 0

    def is_negative(self) -> bool:
        return self._raw < 0

    def quantize_round_to_zero(self: C, quantum: C) -> C:
        """Round to a multiple of ``quantum``, toward zero."""
        step = self._same_kind(quantum)
        if step is None:
            raise TypeError(f"expected {type(self).__name__}, got {type(quantum).__name__}")
        return self._from_raw(_trunc_div(self._raw, step) * step, self._precision)

    @classmethod
    @abstractmethod
    def convert_from(cls, units: Currency, price_per_unit: Currency) -> Currency:
        """Convert ``units`` of the paired currency at ``price_per_unit``."""

    def _same_kind(self, other: object) -> int | None:
        if type(other) is not type(self):
            return None
        if other._precision != self._precision:
            raise ValueError(
                f"precision mismatch: {self._precision} and {other._precision}"
            )
        return other._raw

    def _factor(self, other: object) -> int | None:
        raw = self._same_kind(other)
        if raw is not None:
            return raw
        if isinstance(other, (Decimal, int)) and not isinstance(other, bool):
            return _raw_of(other, self._precision)
        return None

    def __add__(self: C, other: C) -> C:
        raw = self._same_kind(other)
        if raw is None:
            return NotImplemented
        return self._from_raw(self._raw + raw, self._precision)

    def __sub__(self: C, other: C) -> C:
        raw = self._same_kind(other)
        if raw is None:
            return NotImplemented
        return self._from_raw(self._raw - raw, self._precision)

    def __neg__(self: C) -> C:
        return self._from_raw(-self._raw, self._precision)

    def __abs__(self: C) -> C:
        return self.abs()

    def __mul__(self: C, other: object) -> C:
        raw = self._factor(other)
        if raw is None:
            return NotImplemented
        return self._from_raw(
            _trunc_div(self._raw * raw, 10**self._precision), self._precision
        )

    def __truediv__(self: C, other: object) -> C:
        raw = self._factor(other)
        if raw is None:
            return NotImplemented
        return self._from_raw(
            _trunc_div(self._raw * 10**self._precision, raw), self._precision
        )

    def __mod__(self: C, other: C) -> C:
        raw = self._same_kind(other)
        if raw is None:
            return NotImplemented
        return self._from_raw(self._raw - raw * _trunc_div(self._raw, raw), self._precision)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw and self._precision == other._precision

    def __lt__(self, other: object) -> bool:
        raw = self._same_kind(other)
        if raw is None:
            return NotImplemented
        return self._raw < raw

    def __hash__(self) -> int:
        return hash((type(self), self._raw, self._precision))

    def __float__(self) -> float:
        return self._raw / 10**self._precision

    def __str__(self) -> str:
        text = format(self.value, "f")
        return f"{text} {self.unit_label}" if self.unit_label else text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format(self.value, 'f')!r}, {self._precision})"


class MarginCurrency(Currency):
    """A currency in which margin is held; it fixes how profit and loss is computed."""

    __slots__ = ()

    @classmethod
    @abstractmethod
    def pnl(
        cls,
        entry_price: Currency,
        exit_price: Currency,
        quantity: Currency,
    ) -> MarginCurrency:
        """Profit and loss of ``quantity`` contracts (negative if short)."""