"""Order-preserving list differences used to explain membership changes."""

from typing import Hashable, List, Sequence, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


def ordered_difference(items: Sequence[T], exclude: Sequence[T]) -> List[T]:
    """Return the elements of ``items`` not in ``exclude``, in ``items`` order.

    Duplicates in ``items`` are kept, matching a plain filter over the list.
    """
    excluded = set(exclude)
    return [item for item in items if item not in excluded]


def removed_and_added(old: Sequence[T], new: Sequence[T]) -> Tuple[List[T], List[T]]:
    """Return ``(old - new, new - old)``, each in its source list's order."""
    return ordered_difference(old, new), ordered_difference(new, old)
