from __future__ import annotations

import math
import re
from typing import Any, Dict, Optional

from sympy import Integer, nan, oo, zoo
from sympy.core.power import Pow
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from generator import format_number

# Answers within this absolute distance of the expected value are correct.
ANSWER_TOLERANCE = 0.01

# --- Parsing / validation helpers ------------------------------------------------
LEN_LIMIT = 100
_REQUIRED_MSG = "Answer required."
_TOO_LONG_MSG = "Answer too long (> 100)."
_INVALID_CHARS_MSG = (
    "Only numeric answers using digits, spaces, + - * / ^ . and parentheses are allowed."
)
_NON_FINITE_MSG = "Answer is not finite (e.g., division by zero)."
_TOO_COMPLEX_MSG = "Answer is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/^().\s]{1,100}$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

_MAX_OPS = 200
_MAX_INT_DIGITS = 200
_MAX_EXPONENT_ABS = 2000

CORRECT_FEEDBACK = "Correct! Well done!"


def validate_answer_text(s: Any) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return _REQUIRED_MSG
    if len(s) > LEN_LIMIT:
        return _TOO_LONG_MSG
    if _ALLOWED_RE.fullmatch(s) is None:
        return _INVALID_CHARS_MSG
    return None


def _assert_finite_sym(val: Any) -> None:
    if getattr(val, "is_finite", None) is False:
        raise ValueError(_NON_FINITE_MSG)
    if val in (oo, -oo, zoo, nan):
        raise ValueError(_NON_FINITE_MSG)


def _assert_expr_complexity(sym: Any) -> None:
    if getattr(sym, "is_Integer", False):
        if len(str(abs(int(sym)))) > _MAX_INT_DIGITS:
            raise ValueError(_TOO_COMPLEX_MSG)
        return
    if getattr(sym, "is_Number", False):
        return
    if not hasattr(sym, "atoms"):
        return
    if sym.count_ops() > _MAX_OPS:
        raise ValueError(_TOO_COMPLEX_MSG)
    for node in sym.atoms(Integer):
        if len(str(abs(int(node)))) > _MAX_INT_DIGITS:
            raise ValueError(_TOO_COMPLEX_MSG)
    for node in sym.atoms(Pow):
        exp = node.exp
        if getattr(exp, "is_number", False):
            try:
                e = float(exp)
            except (TypeError, ValueError, OverflowError):
                raise ValueError(_TOO_COMPLEX_MSG)
            if not math.isfinite(e) or abs(e) > _MAX_EXPONENT_ABS:
                raise ValueError(_TOO_COMPLEX_MSG)


def parse_answer(text: str) -> float:
    """
    Turn a typed answer into a float.

    Plain numbers skip the parser; short numeric expressions such as "3^2" or
    "(1/2)" are evaluated with sympy. Raises ValueError with a message fit to
    show the learner.
    """
    msg = validate_answer_text(text)
    if msg:
        raise ValueError(msg)

    raw = text.strip()
    try:
        val = float(raw)
    except ValueError:
        val = None
    if val is not None:
        if not math.isfinite(val):
            raise ValueError(_NON_FINITE_MSG)
        return val

    # check the unevaluated tree first so towers like 9^9^9 are never computed
    try:
        unevaluated = parse_expr(raw, transformations=TRANSFORMS, evaluate=False)
    except Exception:
        # sympy raises a mix of SyntaxError/TokenError/TypeError for junk input
        raise ValueError(_INVALID_CHARS_MSG)
    _assert_expr_complexity(unevaluated)

    try:
        sym = parse_expr(raw, transformations=TRANSFORMS, evaluate=True)
    except Exception:
        raise ValueError(_INVALID_CHARS_MSG)
    _assert_expr_complexity(sym)
    _assert_finite_sym(sym)
    try:
        val = float(sym.evalf())
    except (TypeError, ValueError):
        raise ValueError(_INVALID_CHARS_MSG)
    if not math.isfinite(val):
        raise ValueError(_NON_FINITE_MSG)
    return val


def is_correct(value: float, expected: float) -> bool:
    return abs(value - expected) < ANSWER_TOLERANCE


def grade_answer(text: str, expected: float) -> Dict[str, Any]:
    exp_str = format_number(expected)
    try:
        value = parse_answer(text)
    except ValueError as e:
        return {
            "ok": False,
            "correct": False,
            "value": None,
            "feedback": str(e),
            "expected_str": exp_str,
        }

    correct = is_correct(value, expected)
    return {
        "ok": True,
        "correct": correct,
        "value": value,
        "feedback": CORRECT_FEEDBACK if correct else f"Incorrect. The answer is {exp_str}",
        "expected_str": exp_str,
    }
