"""GroceryList aggregate: ordered grocery lines derived from the week board."""
from typing import Iterable, List, Optional
from mealboard.domain.Ingredient import Number, format_quantity
from mealboard.utilities.constants import EXPORT_LINE_PREFIX, EXPORT_LINE_SEPARATOR


class GroceryLine:
    def __init__(self, name: str, unit: str, quantity: Number = 0):
        self.name = name
        self.unit = unit
        self.quantity = quantity

    @property
    def key(self):
        return (self.name, self.unit)

    @property
    def text(self) -> str:
        '''Display/copy text; also the identity used for the checked state.'''
        return f"{self.name} {format_quantity(self.quantity)} {self.unit}"

    def __str__(self) -> str:
        return self.text

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, GroceryLine):
            return NotImplemented
        return (self.name, self.unit, self.quantity) == (other.name, other.unit, other.quantity)

    def to_dict(self):
        return {"name": self.name, "unit": self.unit, "quantity": self.quantity, "text": self.text}


class GroceryList:
    def __init__(self, lines: Optional[Iterable[GroceryLine]] = None):
        self.lines: List[GroceryLine] = list(lines) if lines else []

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def texts(self) -> List[str]:
        return [line.text for line in self.lines]

    def unchecked(self, checked_items: Iterable[str]) -> List[GroceryLine]:
        checked = set(checked_items)
        return [line for line in self.lines if line.text not in checked]

    def export_text(self, checked_items: Iterable[str]) -> str:
        '''
        Copyable text: unchecked lines only, "- " prefixed, CRLF separated.
        Checked lines are treated as "already have it".
        '''
        return EXPORT_LINE_SEPARATOR.join(
            f"{EXPORT_LINE_PREFIX}{line.text}" for line in self.unchecked(checked_items)
        )

    def to_dict(self, checked_items: Iterable[str] = ()):
        checked = set(checked_items)
        return [dict(line.to_dict(), checked=line.text in checked) for line in self.lines]

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(line) for line in self.lines)
        return f"Grocery List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
