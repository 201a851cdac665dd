"""Configured format rule for a single text field."""

import re
from dataclasses import dataclass, field

from core.exceptions import FormatViolationError


def _end_anchored(pattern: str) -> str:
    """Rewrite every ``$`` anchor as ``\\Z``.

    Rules are written with ``$`` meaning end of input. Python's ``$`` also
    matches before a trailing newline, which would let ``"alice\\n"`` pass
    ``^[a-z]+$``. Escaped dollars and dollars inside ``[...]`` are literals
    and stay as they are.
    """
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            out.append(pattern[i : i + 2])
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            end = i + 1
            if pattern[end : end + 1] == "^":
                end += 1
            # A "]" right after "[" or "[^" is a literal member.
            if pattern[end : end + 1] == "]":
                end += 1
            out.append(pattern[i:end])
            i = end
            continue
        elif char == "$":
            char = r"\Z"
        out.append(char)
        i += 1
    return "".join(out)


@dataclass(frozen=True, slots=True)
class FieldRule:
    """A regex pattern plus the message reported when a value fails it."""

    pattern: str
    message: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(_end_anchored(self.pattern)))

    def matches(self, value: str) -> bool:
        return self._compiled.search(value) is not None

    def check(self, value: str, field: str) -> None:
        """Raise FormatViolationError carrying the configured message."""
        if not self.matches(value):
            raise FormatViolationError(self.message, field)
