"""Bounded integer stepper used for count inputs (e.g. a group's required days)."""

from __future__ import annotations

import math
from typing import Union

from pydantic import BaseModel, model_validator

Number = Union[int, float]


class Stepper(BaseModel):
    """An integer value that moves one step at a time inside ``[min, max]``."""

    value: int
    min: int = 0
    max: Number = math.inf

    @model_validator(mode="after")
    def _check_bounds(self) -> "Stepper":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    @property
    def can_increment(self) -> bool:
        return self.value < self.max

    @property
    def can_decrement(self) -> bool:
        return self.value > self.min

    def increment(self) -> int:
        """Next value, never above ``max``."""
        return int(min(self.max, self.value + 1))

    def decrement(self) -> int:
        """Previous value, never below ``min``."""
        return int(max(self.min, self.value - 1))
