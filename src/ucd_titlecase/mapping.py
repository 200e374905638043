"""Fixed-capacity case mapping cursor."""
from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

# Unused trailing slot of a 3-codepoint table mapping
NUL = "\0"

MAX_LENGTH = 3

_STATES = ("Empty", "One", "Two", "Three")


def require_char(c) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a character, got {c!r}")
    return c


class CaseMapping:
    """The codepoints still to be emitted from one character's case mapping.

    Holds zero to three codepoints and yields them from either end: next()
    takes from the front, next_back() from the back, and len() is always
    the exact number left. Iterating consumes the mapping; use copy() to
    keep a cursor at the current position.
    """

    __slots__ = ("_chars",)

    def __init__(self, chars: Sequence[str] = ()):
        chars = tuple(chars)
        if len(chars) > MAX_LENGTH:
            raise ValueError(f"a case mapping holds at most {MAX_LENGTH} codepoints, got {len(chars)}")
        for c in chars:
            require_char(c)
        self._chars: Tuple[str, ...] = chars

    @classmethod
    def from_table(cls, mapping: Tuple[str, str, str]) -> "CaseMapping":
        """Build from a 3-slot table value, dropping trailing NUL slots.

        Slot 0 is the mapped character itself and is always kept.
        """
        first, second, third = mapping
        if third == NUL:
            if second == NUL:
                return cls((first,))
            return cls((first, second))
        return cls((first, second, third))

    @classmethod
    def from_string(cls, s: str) -> "CaseMapping":
        return cls(tuple(s))

    @property
    def state(self) -> str:
        return _STATES[len(self._chars)]

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self._chars:
            raise StopIteration
        head, self._chars = self._chars[0], self._chars[1:]
        return head

    def next_back(self) -> Optional[str]:
        """Take the last remaining codepoint, or None once exhausted."""
        if not self._chars:
            return None
        tail, self._chars = self._chars[-1], self._chars[:-1]
        return tail

    def __reversed__(self) -> Iterator[str]:
        while self._chars:
            yield self.next_back()

    def __len__(self) -> int:
        return len(self._chars)

    def __length_hint__(self) -> int:
        return len(self._chars)

    def copy(self) -> "CaseMapping":
        return CaseMapping(self._chars)

    __copy__ = copy

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"CaseMapping.{self.state}({', '.join(repr(c) for c in self._chars)})"
