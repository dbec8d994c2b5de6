from __future__ import annotations

from typing import ClassVar, List, Optional

from pydantic import Field

from .base import Action, ActionParameter, BlockingType, OptionalHeaderMessage

__all__ = ["Action", "ActionParameter", "BlockingType", "InstantActions"]


class InstantActions(OptionalHeaderMessage):
    """Actions the AGV is to execute as soon as they arrive, outside of order sequencing."""
    topic: ClassVar[str] = "instantActions"

    actions: Optional[List[Action]] = Field(
        None, description='Array of actions to be executed immediately.'
    )
