# carlkit

A small pure-Python toolkit in three parts:

- **IEEE 802.11 numbers** – channel and frequency conversions for the FHSS,
  DSSS (also used for HR/DSSS and ERP) and OFDM physical layers, plus time
  unit conversion (`carlkit.channels`), and named constants for status codes,
  reason codes, element ids, action categories, block-ack and TDLS action
  codes, A-MPDU parameters and key lengths (`carlkit.ieee80211_consts`).
- **Kconfig-style expressions** – tristate logic, symbols and expression
  trees with evaluation and comparison (`carlkit.expr`), rewriting and
  simplification passes (`carlkit.simplify`) and printing
  (`carlkit.exprprint`).
- **Configuration files** – reading `CONFIG_FOO=...` lines, expanding
  `$NAME` references and tracking unsaved changes (`carlkit.confvalues`),
  and formatting symbols and comments for `.config`, C header, CMake and
  tristate outputs (`carlkit.confout`).

Integer helpers `bit`, `mask`, `align`, `roundup` and `is_err_value` live in
`carlkit.bitops`.

## Installation

```
pip install carlkit
```

No third-party dependencies are needed.

## Examples

Convert between channels and frequencies (out-of-range input raises
`ValueError`):

```python
from carlkit.channels import dsss_chan_to_freq, freq_to_dsss_chan

dsss_chan_to_freq(6)      # 2437
freq_to_dsss_chan(2484)   # 14
```

Tristate logic and expression evaluation:

```python
from carlkit.expr import (
    SYMBOL_YES, Symbol, SymbolType, Tristate,
    and_expr, calc_value, symbol_expr, tri_and, tri_not,
)
from carlkit.exprprint import expr_to_str

tri_and(Tristate.YES, Tristate.MOD)   # Tristate.MOD
tri_not(Tristate.NO)                  # Tristate.YES

foo = Symbol("FOO", SymbolType.TRISTATE, Tristate.MOD)
e = and_expr(symbol_expr(foo), symbol_expr(SYMBOL_YES))
calc_value(e)       # Tristate.MOD
expr_to_str(e)      # 'FOO && y'
```

Read configuration lines:

```python
from carlkit.confvalues import parse_config_line, unescape_string_value

parse_config_line("CONFIG_FOO=y\n")               # ('FOO', 'y')
parse_config_line("# CONFIG_BAR is not set\n")    # ('BAR', None)
unescape_string_value('"a\\"b"')                  # 'a"b'
```

Format output:

```python
from carlkit.confout import format_comment, format_header_symbol
from carlkit.expr import Symbol, SymbolType

format_comment("Automatically generated file")
# '# Automatically generated file\n'
format_header_symbol(Symbol("FOO", SymbolType.TRISTATE), "m")
# '#define CONFIG_FOO_MODULE 1\n'
```

Bit helpers:

```python
from carlkit.bitops import align, roundup

roundup(10, 4)   # 12
align(10, 8)     # 16
```

## What carlkit does not do

carlkit has no helpers for inspecting 802.11 frames: it does not decode
frame-control fields, compute header lengths, pick source or destination
addresses out of a header or check TIM bitmaps. It also does not parse
Kconfig files or run an interactive configuration session; it works on
symbols and expressions you build yourself and formats the lines you ask it
for, leaving reading and writing files to the caller.

## Running the tests

```
pip install carlkit[test]
pytest
```