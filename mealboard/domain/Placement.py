"""Placement sub-state of the board.

A two-night block is placed in two clicks: the first anchors the meal, the
second picks its continuation night. Between the two the board is
AwaitingSecondNight; otherwise it is Idle.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Idle:
    @property
    def pending_meal_id(self):
        return None


@dataclass(frozen=True)
class AwaitingSecondNight:
    meal_id: str

    @property
    def pending_meal_id(self):
        return self.meal_id


IDLE = Idle()

__all__ = ['Idle', 'AwaitingSecondNight', 'IDLE']
