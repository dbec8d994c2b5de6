from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from .base import VDA5050Message

ACCEPT_DISCONNECTED = "accept_disconnected"


class ConnectionState(Enum):
    """
    Connection state of the AGV as seen by the broker.

    DISCONNECTED is not part of the regular value set. It is only accepted
    when a payload is decoded with ``accept_disconnected=True``, for
    deployments whose vehicles announce an orderly shutdown that way instead
    of with OFFLINE.
    """
    ONLINE = 'ONLINE'
    OFFLINE = 'OFFLINE'
    CONNECTIONBROKEN = 'CONNECTIONBROKEN'
    DISCONNECTED = 'DISCONNECTED'


REGULAR_CONNECTION_STATES = (
    ConnectionState.ONLINE,
    ConnectionState.OFFLINE,
    ConnectionState.CONNECTIONBROKEN,
)


class Connection(VDA5050Message):
    """
    Connection state message, always published with the retain flag.

    The AGV arms the broker's last will with CONNECTIONBROKEN, then publishes
    ONLINE. An orderly shutdown is announced before disconnecting.
    """
    topic: ClassVar[str] = "connection"

    connectionState: ConnectionState = Field(
        ...,
        description='ONLINE: connection between AGV and broker is active. OFFLINE: connection between AGV and broker has gone offline in a coordinated way. CONNECTIONBROKEN: The connection between AGV and broker has unexpectedly ended.',
        json_schema_extra={"enum": [state.value for state in REGULAR_CONNECTION_STATES]},
    )

    @field_validator("connectionState")
    @classmethod
    def _gate_disconnected(cls, value: ConnectionState, info: ValidationInfo) -> ConnectionState:
        if value is ConnectionState.DISCONNECTED and not (info.context or {}).get(ACCEPT_DISCONNECTED):
            raise PydanticCustomError(
                "enum",
                "Input should be 'ONLINE', 'OFFLINE' or 'CONNECTIONBROKEN'",
            )
        return value
