"""
This module expresses the agreement about what a run-time value can be.

There are exactly four kinds: number, string, boolean, and none.
Primitive values play themselves: float, str, bool, and None.
Python's bool is a kind of int, so nothing here trusts isinstance for numbers.
"""
import math
from typing import Union

Value = Union[float, str, bool, None]

NUMBER, STRING, BOOLEAN, NONE = "number", "string", "boolean", "none"

_KINDS = {float: NUMBER, str: STRING, bool: BOOLEAN, type(None): NONE}

def kind_of(value:Value) -> str:
	try: return _KINDS[type(value)]
	except KeyError: raise TypeError("Not a Zen value: %r" % (value,))

def is_number(value:Value) -> bool:
	return kind_of(value) == NUMBER

def is_string(value:Value) -> bool:
	return kind_of(value) == STRING

def is_truthy(value:Value) -> bool:
	""" Only none and false are false. Zero and the empty string count as true. """
	kind = kind_of(value)
	if kind == NONE: return False
	if kind == BOOLEAN: return value
	return True

def is_equal(a:Value, b:Value) -> bool:
	# No coercion: true is not 1, and "1" is not 1.
	if kind_of(a) != kind_of(b): return False
	# Numbers compare as IEEE doubles: 0 == -0, and NaN equals nothing.
	return a == b

def stringify(value:Value) -> str:
	kind = kind_of(value)
	if kind == NONE: return "none"
	if kind == BOOLEAN: return "true" if value else "false"
	if kind == NUMBER: return _render_number(value)
	return value

def _render_number(value:float) -> str:
	if math.isnan(value): return "NaN"
	if math.isinf(value): return "Infinity" if value > 0 else "-Infinity"
	text = repr(value)
	if text.endswith(".0"): text = text[:-2]
	return text
