"""Reference-counted interning of description strings.

Pools store small integer codes instead of description text.  The registry
keeps one copy of each description for as long as at least one retained
entry references its code, and forgets it as soon as the last one goes.
"""

from __future__ import annotations


class DescriptionRegistry:
    """Bidirectional description <-> code map with per-code use counts.

    Codes come from a monotonically increasing counter and are never reused,
    even after the description they named has been released.
    """

    def __init__(self) -> None:
        self._code_of: dict[str, int] = {}
        self._description_of: dict[int, str] = {}
        self._use_count: dict[int, int] = {}
        self._next_code = 0

    def __len__(self) -> int:
        return len(self._description_of)

    def __contains__(self, description: object) -> bool:
        return description in self._code_of

    @property
    def next_code(self) -> int:
        return self._next_code

    def intern(self, description: str) -> int:
        """Return the code for *description*, taking one reference on it."""
        code = self._code_of.get(description)
        if code is not None:
            self._use_count[code] += 1
            return code

        code = self._next_code
        self._next_code += 1
        self._code_of[description] = code
        self._description_of[code] = description
        self._use_count[code] = 1
        return code

    def release(self, code: int) -> None:
        """Drop one reference on *code*; forget the description at zero.

        Unknown codes are ignored.
        """
        count = self._use_count.get(code)
        if count is None:
            return
        if count > 1:
            self._use_count[code] = count - 1
            return
        del self._use_count[code]
        description = self._description_of.pop(code)
        del self._code_of[description]

    def lookup(self, code: int) -> str | None:
        return self._description_of.get(code)

    def code_for(self, description: str) -> int | None:
        return self._code_of.get(description)

    def use_count(self, code: int) -> int:
        return self._use_count.get(code, 0)

    def total_references(self) -> int:
        """Sum of use counts across all live codes."""
        return sum(self._use_count.values())
