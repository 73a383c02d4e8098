"""Toggle-sets of weekday and month indices."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from .errors import IndexOutOfRangeError


@dataclass(frozen=True, slots=True)
class Selection:
    """Set of indices into a fixed, ordered vocabulary of names."""

    names: tuple[str, ...]
    indices: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for index in self.indices:
            self._check(index)

    @classmethod
    def from_labels(cls, names: Iterable[str], labels: Iterable[str]) -> "Selection":
        vocabulary = tuple(names)
        lookup = {name.casefold(): index for index, name in enumerate(vocabulary)}
        indices = set()
        for label in labels:
            index = lookup.get(label.strip().casefold())
            if index is None:
                raise IndexOutOfRangeError(label, len(vocabulary))
            indices.add(index)
        return cls(vocabulary, frozenset(indices))

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.indices))

    def __len__(self) -> int:
        return len(self.indices)

    def add(self, index: int) -> "Selection":
        self._check(index)
        return replace(self, indices=self.indices | {index})

    def remove(self, index: int) -> "Selection":
        self._check(index)
        return replace(self, indices=self.indices - {index})

    def toggle(self, index: int) -> "Selection":
        self._check(index)
        return replace(self, indices=self.indices ^ {index})

    def labels(self) -> list[str]:
        return [self.names[index] for index in self]

    def _check(self, index: object) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(index, len(self.names))
        if not 0 <= index < len(self.names):
            raise IndexOutOfRangeError(index, len(self.names))
