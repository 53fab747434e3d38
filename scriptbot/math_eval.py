"""Arithmetic and percentage evaluator for numbers embedded in natural text"""

import logging
import math
import re
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

ARITHMETIC = "arithmetic"
PERCENTAGE = "percentage"

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  PATTERNS (tried in this order, first match wins)
# ═══════════════════════════════════════════════════════════════════════════════

_NUM = r'(-?\d+(?:\.\d+)?)'
_OP = r'([+\-*/])'

_EXPLICIT_RE = re.compile(
    r"\b(?:what\s+is|what's|calculate)\s+" + _NUM + r'\s*' + _OP + r'\s*' + _NUM,
    re.I)
_BARE_RE = re.compile(_NUM + r'\s*' + _OP + r'\s*' + _NUM)
_PERCENT_RE = re.compile(r'(\d+(?:\.\d+)?)\s*%\s*of\s+' + _NUM, re.I)

_ARITHMETIC_PATTERNS = (_EXPLICIT_RE, _BARE_RE)

# ═══════════════════════════════════════════════════════════════════════════════
# § 2  REPLY TEXT
# ═══════════════════════════════════════════════════════════════════════════════

DIVISION_BY_ZERO_MESSAGE = (
    "Oops! Division by zero is undefined in mathematics, so I can't calculate that. "
    "Try a different divisor! 🤔"
)
ARITHMETIC_FOLLOW_UP = "Need help with another calculation? Just type it in!"
PERCENTAGE_FOLLOW_UP = "Percentages are handy! Want to calculate another one?"


class MathResult(NamedTuple):
    kind: str  # ARITHMETIC or PERCENTAGE
    text: str


def _fmt(val: float) -> str:
    """Format number: whole values without a decimal part, others in full."""
    if math.isfinite(val) and val.is_integer():
        return str(int(val))
    return repr(val)


def _apply(a: float, op: str, b: float) -> float:
    if op == '+':
        return a + b
    if op == '-':
        return a - b
    if op == '*':
        return a * b
    return a / b


class MathEvaluator:
    """
    Detects `<num> <op> <num>` and `<num>% of <num>` inside free text.
    evaluate() returns None when the text holds no calculation.
    """

    def evaluate(self, text: str) -> Optional[MathResult]:
        for pattern in _ARITHMETIC_PATTERNS:
            m = pattern.search(text)
            if m:
                return self._arithmetic(*m.groups())

        m = _PERCENT_RE.search(text)
        if m:
            return self._percentage(m.group(1), m.group(2))

        return None

    def _arithmetic(self, left: str, op: str, right: str) -> MathResult:
        a, b = float(left), float(right)
        if op == '/' and b == 0:
            logger.info(f"Refusing division by zero: {left} / {right}")
            return MathResult(ARITHMETIC, DIVISION_BY_ZERO_MESSAGE)

        result = _apply(a, op, b)
        logger.debug(f"Arithmetic: {a} {op} {b} = {result}")
        return MathResult(
            ARITHMETIC,
            f"🧮 {left} {op} {right} = **{_fmt(result)}**\n\n{ARITHMETIC_FOLLOW_UP}",
        )

    def _percentage(self, pct: str, base: str) -> MathResult:
        p, b = float(pct), float(base)
        result = p * b / 100
        return MathResult(
            PERCENTAGE,
            f"🧮 {pct}% of {base} = **{_fmt(result)}**\n\n{PERCENTAGE_FOLLOW_UP}",
        )
