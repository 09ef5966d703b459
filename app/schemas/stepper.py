"""Stepper API schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class StepRequest(BaseModel):
    value: int
    min: int = 0
    max: Optional[int] = Field(None, description="Upper bound (unbounded if omitted)")
    direction: Literal["increment", "decrement"]


class StepResponse(BaseModel):
    value: int
    can_increment: bool
    can_decrement: bool
