"""
Input helper endpoints.
"""

import math

from fastapi import APIRouter, HTTPException, status

from app.schemas.stepper import StepRequest, StepResponse
from app.tracking.stepper import Stepper

router = APIRouter()


@router.post("/stepper", summary="Step a bounded number up or down.", response_model=StepResponse)
def step(data: StepRequest):
    try:
        stepper = Stepper(value=data.value, min=data.min, max=data.max if data.max is not None else math.inf)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    value = stepper.increment() if data.direction == "increment" else stepper.decrement()
    moved = Stepper(value=value, min=stepper.min, max=stepper.max)
    return StepResponse(value=value, can_increment=moved.can_increment, can_decrement=moved.can_decrement)
