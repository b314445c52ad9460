"""
Free-text input parser for the Statistics Calculator.

Turns whatever the user typed into the sample handed to the engine.
Handles:

- Comma, semicolon, newline and general whitespace separators
- Leading-prefix number reading (``"12abc"`` reads as 12, ``"1.2.3"``
  as 1.2), so stray units or punctuation glued to a number are tolerated
- Scientific notation (``"1e3"``, ``"-2.5E-2"``)
- Non-numeric and non-finite tokens (dropped, with a warning)

The parser is the only place non-numeric text is filtered: the engine
assumes it receives finite floats.
"""

import math
import re
import warnings
from typing import List, Optional

from .constants import MAX_REPORTED_TOKENS


_SEPARATORS = re.compile(r'[,;\n]')
_LEADING_NUMBER = re.compile(
    r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?'
)


def parse_number(token: str) -> Optional[float]:
    """Read the numeric prefix of *token*.

    Returns ``None`` when the token does not start with a number or
    the number overflows to a non-finite value.
    """
    match = _LEADING_NUMBER.match(token)
    if match is None:
        return None
    value = float(match.group(0))
    # "1e999" overflows to inf; treat like any other unusable token
    if not math.isfinite(value):
        return None
    return value


def parse_input_data(text: str) -> List[float]:
    """Parse free text into a list of floats, in input order.

    Parameters
    ----------
    text : str
        Raw contents of the input box.

    Returns
    -------
    list of float
        May be empty when nothing numeric was found.  Emptiness is left
        for the caller to report (see ``EmptyInputError``).
    """
    cleaned = _SEPARATORS.sub(' ', text)
    values: List[float] = []
    dropped: List[str] = []

    for token in cleaned.split():
        value = parse_number(token)
        if value is None:
            dropped.append(token)
        else:
            values.append(value)

    if dropped:
        examples = ", ".join(repr(t) for t in dropped[:MAX_REPORTED_TOKENS])
        if len(dropped) > MAX_REPORTED_TOKENS:
            examples += f" ... and {len(dropped) - MAX_REPORTED_TOKENS} more"
        warnings.warn(
            f"Ignored {len(dropped)} non-numeric token(s): {examples}",
            stacklevel=2,
        )

    return values
