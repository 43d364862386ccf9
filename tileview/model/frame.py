"""A single logged frame: its slices plus its interning updates."""

from dataclasses import dataclass

from pyrsistent import PVector, pvector

from tileview.model.intern import UpdateListsByCategory
from tileview.model.slice import Slice


@dataclass(frozen=True)
class Frame:
    """Everything decoded from one frame file.

    Attributes:
        name: Source file name; output files are named after it.
        slices: Slices in logged order.
        update_lists: Interning category name -> update batches. Category
            order is the logged order and is kept in the report.
    """

    name: str
    slices: PVector[Slice] = pvector()
    update_lists: UpdateListsByCategory = UpdateListsByCategory()
