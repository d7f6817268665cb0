"""Extraction domain models."""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class ExtractionResult(Mapping):
    """Placeholder values extracted from text, in capture order.

    Behaves as a read-only mapping of placeholder name to value and compares
    equal to any mapping with the same items. ``source`` is not part of the
    comparison.
    """
    values: dict[str, str] = field(default_factory=dict)
    source: str = "<string>"

    def __getitem__(self, name: str) -> str:
        return self.values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> dict[str, str]:
        """Copy of the extracted values."""
        return dict(self.values)
