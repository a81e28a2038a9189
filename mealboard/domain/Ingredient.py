"""Ingredient value: name, numeric quantity, unit."""
from typing import Union

Number = Union[int, float]


def format_quantity(quantity: Number) -> str:
    '''Renders integral floats without a trailing ".0" (500.0 -> "500").'''
    if isinstance(quantity, float) and quantity.is_integer():
        return str(int(quantity))
    return str(quantity)


def _coerce_quantity(value) -> Number:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        text = str(value).strip()
        return int(text) if text.lstrip('-').isdigit() else float(text)
    except (TypeError, ValueError):
        return 0


class Ingredient:
    def __init__(self, name: str = "", quantity: Number = 0, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.name} {format_quantity(self.quantity)} {self.unit}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=str(d.get("name") or ""),
            quantity=_coerce_quantity(d.get("quantity", 0)),
            unit=str(d.get("unit") or ""),
        )

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}
