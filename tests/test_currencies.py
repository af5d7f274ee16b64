from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from smolcurrency.currencies import BaseCurrency, QuoteCurrency

P = 2

prices = st.integers(min_value=1, max_value=10**6).map(lambda n: QuoteCurrency.new(n, 2, P))
bases = st.integers(min_value=-(10**6), max_value=10**6).map(lambda n: BaseCurrency.new(n, 2, P))
quotes = st.integers(min_value=-(10**6), max_value=10**6).map(lambda n: QuoteCurrency.new(n, 2, P))


def test_display_labels():
    assert str(BaseCurrency.one(P)) == "1.00 Base"
    assert str(QuoteCurrency.zero(P)) == "0.00 Quote"


def test_quote_to_base_and_back_exact():
    units = QuoteCurrency.new(100, 0, P)
    price = QuoteCurrency.new(4, 0, P)
    base = BaseCurrency.convert_from(units, price)
    assert QuoteCurrency.convert_from(base, price) == units


@given(st.integers(min_value=0, max_value=10**6), prices)
def test_round_trip_never_exceeds_original(n, price):
    units = QuoteCurrency.new(n, 2, P)
    back = QuoteCurrency.convert_from(BaseCurrency.convert_from(units, price), price)
    assert back <= units
    assert not back.is_negative()


def test_convert_from_rejects_negative_units():
    with pytest.raises(ValueError):
        BaseCurrency.convert_from(QuoteCurrency.new(-1, 0, P), QuoteCurrency.one(P))
    with pytest.raises(ValueError):
        QuoteCurrency.convert_from(BaseCurrency.new(-1, 0, P), QuoteCurrency.one(P))


def test_convert_from_rejects_non_positive_price():
    with pytest.raises(ValueError):
        BaseCurrency.convert_from(QuoteCurrency.one(P), QuoteCurrency.zero(P))
    with pytest.raises(ValueError):
        QuoteCurrency.convert_from(BaseCurrency.one(P), QuoteCurrency.new(-5, 0, P))


def test_convert_from_rejects_wrong_kind():
    with pytest.raises(TypeError):
        BaseCurrency.convert_from(BaseCurrency.one(P), QuoteCurrency.one(P))
    with pytest.raises(TypeError):
        QuoteCurrency.convert_from(QuoteCurrency.one(P), QuoteCurrency.one(P))


def test_convert_from_rejects_precision_mismatch():
    with pytest.raises(ValueError):
        QuoteCurrency.convert_from(BaseCurrency.one(2), QuoteCurrency.one(3))


@given(prices, bases)
def test_linear_pnl_flat_when_prices_equal(price, qty):
    assert QuoteCurrency.pnl(price, price, qty).is_zero()


@given(prices, quotes)
def test_inverse_pnl_flat_when_prices_equal(price, qty):
    assert BaseCurrency.pnl(price, price, qty).is_zero()


@given(prices, prices, bases)
def test_linear_pnl_antisymmetric(entry, exit_, qty):
    assert QuoteCurrency.pnl(entry, exit_, qty) == -QuoteCurrency.pnl(exit_, entry, qty)
    assert QuoteCurrency.pnl(entry, exit_, -qty) == -QuoteCurrency.pnl(entry, exit_, qty)


@given(prices, prices, quotes)
def test_inverse_pnl_antisymmetric(entry, exit_, qty):
    assert BaseCurrency.pnl(entry, exit_, qty) == -BaseCurrency.pnl(exit_, entry, qty)


def test_long_profits_when_price_rises():
    entry = QuoteCurrency.new(100, 0, P)
    exit_ = QuoteCurrency.new(110, 0, P)
    assert QuoteCurrency.pnl(entry, exit_, BaseCurrency.one(P)).is_positive()
    assert BaseCurrency.pnl(entry, exit_, QuoteCurrency.new(1000, 0, P)).is_positive()
    assert QuoteCurrency.pnl(entry, exit_, -BaseCurrency.one(P)).is_negative()


def test_pnl_rejects_non_positive_prices_and_wrong_quantity():
    one = QuoteCurrency.one(P)
    with pytest.raises(ValueError):
        QuoteCurrency.pnl(QuoteCurrency.zero(P), one, BaseCurrency.one(P))
    with pytest.raises(ValueError):
        BaseCurrency.pnl(one, QuoteCurrency.zero(P), one)
    with pytest.raises(TypeError):
        QuoteCurrency.pnl(one, one, one)
    with pytest.raises(TypeError):
        BaseCurrency.pnl(one, one, BaseCurrency.one(P))


@given(prices)
def test_liquidation_with_zero_requirement_is_entry(price):
    assert QuoteCurrency.liquidation_price_long(price, 0) == price
    assert QuoteCurrency.liquidation_price_short(price, Decimal("0")) == price


@given(prices, st.integers(min_value=1, max_value=99))
def test_liquidation_brackets_entry(price, pct):
    req = Decimal(pct) / 100
    long_liq = QuoteCurrency.liquidation_price_long(price, req)
    short_liq = QuoteCurrency.liquidation_price_short(price, req)
    assert long_liq <= price <= short_liq
    assert short_liq > long_liq


def test_liquidation_rejects_requirement_above_one():
    with pytest.raises(ValueError):
        QuoteCurrency.one(P).liquidation_price_long(Decimal("1.01"))
    with pytest.raises(ValueError):
        QuoteCurrency.one(P).liquidation_price_short(2)


@given(prices, st.integers(min_value=1, max_value=100), st.integers(min_value=1, max_value=100))
def test_weighted_price_of_equal_prices(price, w0, w1):
    assert QuoteCurrency.new_weighted_price(price, w0, price, w1) == price


@given(prices, prices, st.integers(min_value=1, max_value=100), st.integers(min_value=1, max_value=100))
def test_weighted_price_lies_between(p0, p1, w0, w1):
    result = QuoteCurrency.new_weighted_price(p0, w0, p1, w1)
    assert min(p0, p1) <= result <= max(p0, p1)


def test_weighted_price_rejects_bad_inputs():
    one = QuoteCurrency.one(P)
    with pytest.raises(ValueError):
        QuoteCurrency.new_weighted_price(one, 0, one, 1)
    with pytest.raises(ValueError):
        QuoteCurrency.new_weighted_price(-one, 1, one, 1)
    with pytest.raises(TypeError):
        QuoteCurrency.new_weighted_price(BaseCurrency.one(P), 1, one, 1)


def test_kinds_do_not_mix():
    assert BaseCurrency.one(P) != QuoteCurrency.one(P)
    with pytest.raises(TypeError):
        BaseCurrency.one(P) + QuoteCurrency.one(P)


def test_parse_matches_new():
    assert QuoteCurrency.from_str_radix("1.5", 10, P) == QuoteCurrency.new(15, 1, P)
    assert float(BaseCurrency.from_str_radix("-2.25", 10, P)) == -2.25