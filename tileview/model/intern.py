"""Interning update lists.

Each interner logs, per frame, an ordered list of update batches. A batch adds
values under fresh ids and retires old ids. Values are kept as decoded (frozen)
data; only their debug form is ever shown.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from tileview.types import ItemUid


@dataclass(frozen=True)
class Insertion:
    uid: ItemUid
    value: Any


@dataclass(frozen=True)
class Removal:
    uid: ItemUid


@dataclass(frozen=True)
class UpdateList:
    """One batch of interner changes.

    Attributes:
        insertions: Newly interned values, in order.
        removals: Ids no longer interned, in order.
    """

    insertions: PVector[Insertion] = pvector()
    removals: PVector[Removal] = pvector()


@dataclass(frozen=True)
class UpdateListsByCategory(Mapping[str, PVector[UpdateList]]):
    """Update batches per interning category, in logged category order.

    ``lists`` is the lookup store and ``order`` the logged order, which is what
    iteration follows. Use :meth:`from_items` to keep both in sync.

    Attributes:
        lists: Category name -> time-ordered batches.
        order: Category names in logged order (unique).
    """

    lists: PMap[str, PVector[UpdateList]] = pmap()
    order: PVector[str] = pvector()

    @classmethod
    def from_items(
        cls, items: Iterable[Tuple[str, Iterable[UpdateList]]]
    ) -> "UpdateListsByCategory":
        """Build from ``(name, batches)`` pairs; a repeated name keeps its first position and last batches."""
        lists: Dict[str, PVector[UpdateList]] = {}
        for name, batches in items:
            lists[name] = pvector(batches)
        return cls(lists=pmap(lists), order=pvector(lists.keys()))

    def __getitem__(self, name: str) -> PVector[UpdateList]:
        return self.lists[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)
