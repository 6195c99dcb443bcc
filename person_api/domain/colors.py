"""Color code table: integer codes stored in the CSV file <-> color names."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

# Code written to the file when a color name has no entry in the table.
UNKNOWN_COLOR_CODE = 0


class ColorTable(Mapping[int, str]):
    """Read-only mapping of color codes to names, in configuration order."""

    def __init__(self, mapping: Mapping[int, str]) -> None:
        self._mapping = MappingProxyType(dict(mapping))

    def __getitem__(self, code: int) -> str:
        return self._mapping[code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"ColorTable({dict(self._mapping)!r})"

    def name_for(self, code: int) -> Optional[str]:
        return self._mapping.get(code)

    def code_for(self, name: Optional[str]) -> int:
        """Return the first code whose name equals ``name`` exactly.

        Duplicate names resolve to whichever code comes first in table order.
        """
        for code, value in self._mapping.items():
            if value == name:
                return code
        return UNKNOWN_COLOR_CODE
