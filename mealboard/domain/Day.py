"""Day slot on the week board: fixed label plus an optional meal reference."""
from typing import Optional


class Day:
    def __init__(self, label: str, meal_id: Optional[str] = None, continuation: bool = False):
        self._label = label
        self.meal_id = meal_id
        self.continuation = continuation

    @property
    def label(self) -> str:
        return self._label

    @property
    def is_empty(self) -> bool:
        return not self.meal_id

    def assign(self, meal_id: str, continuation: bool = False):
        self.meal_id = meal_id
        self.continuation = continuation

    def clear(self):
        self.meal_id = None
        self.continuation = False

    def __str__(self) -> str:
        if self.is_empty:
            return f"{self.label}: -"
        suffix = " (night 2)" if self.continuation else ""
        return f"{self.label}: {self.meal_id}{suffix}"

    __repr__ = __str__

    @staticmethod
    def from_dict(label: str, data):
        '''The label always comes from the weekday order, never from stored data.'''
        d = data if isinstance(data, dict) else {}
        meal_id = d.get("mealId")
        return Day(label, str(meal_id) if meal_id else None, bool(d.get("continuation")))

    def to_dict(self):
        return {"label": self.label, "mealId": self.meal_id, "continuation": self.continuation}
