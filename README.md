# smolcurrency

Exact, fixed-precision monetary values for futures trading. A symbol such as
BTCUSD pairs a **base** currency (BTC) with a **quote** currency (USD). Each
side has its own type, so the two cannot be mixed by accident. Every amount is
an integer count of `10**-precision` units. Products and quotients are
truncated toward zero.

The package has no dependencies outside the standard library.

## Installation

```
pip install smolcurrency
```

To run the test suite:

```
pip install "smolcurrency[test]"
pytest
```

## Values

`BaseCurrency` and `QuoteCurrency` live in `smolcurrency.currencies`. Both
derive from `MarginCurrency`, and `MarginCurrency` derives from `Currency`
(in `smolcurrency.money`).

```python
from decimal import Decimal
from smolcurrency.currencies import BaseCurrency, QuoteCurrency

price = QuoteCurrency.new(1000, 0, 2)   # 1000.00
qty = BaseCurrency.new(5, 1, 2)         # 0.50
also_qty = BaseCurrency("0.5", 2)       # from an int, str or Decimal

str(price)                              # '1000.00 Quote'
float(qty)                              # 0.5
price.value                             # Decimal('1000.00')
price.precision, price.raw              # (2, 100000)
```

Ways to build a value:

- `new(integer, scale, precision)` reads `integer` as having `scale`
  fractional digits. It raises `ValueError` unless `0 <= scale <= precision`.
  `smolcurrency.money.scaled_decimal(integer, scale, precision)` returns the
  same `Decimal` without wrapping it.
- `Currency(value, precision)` takes an `int`, `str` or `Decimal`. It raises
  `ValueError` if the value needs more than `precision` fractional digits.
  `precision` must be an `int` from 0 to 255.
- `zero(precision)` and `one(precision)`.
- `from_str_radix(text, radix, precision)` parses a plain literal such as
  `"-12.5"`. Only radix 10 is accepted. Anything else raises
  `smolcurrency.money.ParseDecimalError`, which is a `ValueError`.

Values of the same type and precision support `+`, `-`, `%`, comparison,
hashing and unary `-` / `abs()`. `*` and `/` accept a value of the same type,
an `int` or a `Decimal`. Mixing precisions raises `ValueError`. Mixing base
and quote amounts is rejected as an unsupported operation.

Other methods: `is_zero`, `is_one`, `abs`, `abs_sub` (the difference when
positive, otherwise zero), `signum` (−1, 0 or 1 in the same currency),
`is_positive`, `is_negative`, and `quantize_round_to_zero(quantum)`, which
rounds toward zero to a multiple of `quantum`:

```python
QuoteCurrency("12.37", 2).quantize_round_to_zero(QuoteCurrency("0.05", 2))
# QuoteCurrency('12.35', 2)
```

## Converting and profit and loss

`convert_from(units, price_per_unit)` converts from the paired currency.
`units` must not be negative and the price must be positive. Otherwise it
raises `ValueError`:

```python
notional = QuoteCurrency.convert_from(qty, price)   # 500.00 Quote (base * price)
units = BaseCurrency.convert_from(notional, price)  # 0.50 Base (quote / price)
```

The margin currency determines the contract type:

- `QuoteCurrency.pnl(entry_price, exit_price, quantity)` prices a linear
  future. `quantity` is a `BaseCurrency` and the result is in quote currency,
  computed as `quantity * exit - quantity * entry`.
- `BaseCurrency.pnl(entry_price, exit_price, quantity)` prices an inverse
  future. `quantity` is a `QuoteCurrency` and the result is in base currency,
  computed as `quantity / entry - quantity / exit`.

Both prices must be positive `QuoteCurrency` values. For a short position,
pass a negative quantity.

```python
QuoteCurrency.pnl(price, QuoteCurrency.new(1100, 0, 2), qty)  # 50.00 Quote
```

## Price helpers on `QuoteCurrency`

- `liquidation_price_long(maint_margin_req)` returns `price * (1 - req)`.
- `liquidation_price_short(maint_margin_req)` returns `price * (1 + req)`.
  Both raise `ValueError` if the requirement exceeds one.
- `QuoteCurrency.new_weighted_price(price_0, weight_0, price_1, weight_1)`
  returns the weighted average of two prices. Prices must not be negative and
  weights must be positive.

## Integer helpers

`smolcurrency.arith` provides three functions:

- `add_one(a)` returns `a + 1`. It raises `OverflowError` unless `a` is a
  signed 64-bit integer below the maximum.
- `minimum(v0, v1)` and `maximum(v0, v1)` return one of the two arguments.
  On a tie they return the second.

## What it does not do

This is a library of value types only. It has no command-line tool. It does
not fetch prices, talk to an exchange, or store positions. It parses decimal
text in radix 10 only.