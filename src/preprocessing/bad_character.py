from collections.abc import Iterator, Mapping
from types import MappingProxyType


class BadCharacterTable(Mapping):
    """Read-only mapping of pattern character -> index of its rightmost occurrence."""

    def __init__(self, pattern: str):
        last: dict[str, int] = {}
        for index, char in enumerate(pattern):
            last[char] = index
        self.pattern = pattern
        self._last = MappingProxyType(last)

    def last_occurrence(self, char: str) -> int:
        """Return the rightmost index of char in the pattern, or -1 if absent."""
        return self._last.get(char, -1)

    def __getitem__(self, char: str) -> int:
        return self._last[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._last)

    def __len__(self) -> int:
        return len(self._last)

    def __repr__(self) -> str:
        return f"BadCharacterTable({dict(self._last)!r})"


def build_bad_character_table(pattern: str) -> BadCharacterTable:
    """Scan the pattern left to right, keeping the last index seen per character."""
    return BadCharacterTable(pattern)
