# -*- coding: utf-8 -*-
"""Numeric expression evaluation for entry fields.

Entry fields accept plain numbers as well as constant expressions such as
``2*pi`` or ``sqrt(2)/2``. Parsing goes through SymPy with a small set of
whitelisted functions; any free symbol is an error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import sympy as sp


_ALLOWED_FUNCS: Dict[str, Any] = {
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "sqrt": sp.sqrt,
    "abs": sp.Abs,
    "min": sp.Min,
    "max": sp.Max,
    "pi": sp.pi,
    "E": sp.E,
}


def eval_number_expression(expr: str) -> Tuple[Optional[float], Optional[str]]:
    """Evaluate a constant expression string using SymPy.

    Returns (value, error_message). If evaluation fails, value is None.
    """
    expr = (expr or "").strip()
    if not expr:
        return None, "Empty expression"

    try:
        parsed = sp.sympify(expr, locals=dict(_ALLOWED_FUNCS))
    except Exception as ex:
        return None, f"Parse error: {ex}"

    free = sorted(str(s) for s in getattr(parsed, "free_symbols", set()))
    if free:
        return None, f"Unknown symbol(s): {', '.join(free)}"

    try:
        val = float(parsed.evalf())
    except Exception as ex:
        return None, f"Eval error: {ex}"
    if val != val:  # NaN
        return None, "Expression evaluated to NaN"
    return val, None
