"""Single-pass ``${NAME}`` substitution.

Substituted values are never scanned again, so a value that itself contains
``${...}`` ends up in the output verbatim.
"""

from __future__ import annotations

import logging
from typing import Callable

from envload.domain.models import ExpansionResult

logger = logging.getLogger(__name__)

Lookup = Callable[[str], str | None]

OPEN = "${"
CLOSE = "}"


def expand(line_number: int, raw_value: str, lookup: Lookup) -> ExpansionResult:
    parts: list[str] = []
    unresolved: list[str] = []
    prev = 0

    while True:
        start = raw_value.find(OPEN, prev)
        if start == -1:
            break
        end = raw_value.find(CLOSE, start + len(OPEN))
        if end == -1:
            # unterminated reference: the remainder is copied as-is below
            break

        parts.append(raw_value[prev:start])
        token = raw_value[start : end + 1]
        resolved = lookup(token[len(OPEN) : -len(CLOSE)])
        if resolved is None:
            logger.debug("Variable %s is not defined on line %d", token, line_number)
            unresolved.append(token)
            parts.append(token)
        else:
            parts.append(resolved)
        prev = end + 1

    parts.append(raw_value[prev:])
    return ExpansionResult("".join(parts), tuple(unresolved))
