from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from .base import AgvPosition, OptionalHeaderMessage, Velocity

__all__ = ["AgvPosition", "Velocity", "Visualization"]


class Visualization(OptionalHeaderMessage):
    """
    AGV position and/or velocity for visualization purposes.

    Can be published at a higher rate than state, independent of the order
    and state cadence. Since bandwidth may be expensive, every field is optional.
    """
    topic: ClassVar[str] = "visualization"

    agvPosition: Optional[AgvPosition] = Field(
        None, description='The AGVs position', title='agvPosition'
    )
    velocity: Optional[Velocity] = Field(
        None, description='The AGVs velocity in vehicle coordinates', title='velocity'
    )
