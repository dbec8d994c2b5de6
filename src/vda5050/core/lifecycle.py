# src/vda5050/core/lifecycle.py

import logging
from enum import Enum
from typing import Optional

from .header import HeaderSequence
from ..models.connection import ACCEPT_DISCONNECTED, Connection, ConnectionState
from ..utils.exceptions import ProtocolError

logger = logging.getLogger(__name__)


class ShutdownNotice(Enum):
    """
    Connection state announced on an orderly shutdown.

    OFFLINE is the regular value. DISCONNECTED is offered for deployments
    that expect it; receivers must then decode with accept_disconnected=True.
    """
    OFFLINE = 'OFFLINE'
    DISCONNECTED = 'DISCONNECTED'


class ConnectionLifecycle:
    """
    Builds the Connection messages of an AGV in the order the protocol requires.

    The transport integration publishes what this class returns, always with
    the retain flag:

    1. ``last_will()`` goes into the broker's last-will slot before connecting,
       so an abrupt disconnect surfaces CONNECTIONBROKEN without the AGV.
    2. ``online()`` is published once connected.
    3. ``shutdown()`` is published right before an orderly disconnect.
    """

    def __init__(
        self,
        headers: HeaderSequence,
        shutdown_notice: ShutdownNotice = ShutdownNotice.OFFLINE,
    ):
        self.headers = headers
        self.shutdown_notice = ShutdownNotice(shutdown_notice)
        self._last_will: Optional[Connection] = None
        self._state: Optional[ConnectionState] = None

    @property
    def state(self) -> Optional[ConnectionState]:
        """Last connection state announced by this AGV, None before going online."""
        return self._state

    @property
    def armed(self) -> bool:
        return self._last_will is not None

    def last_will(self) -> Connection:
        """Arm and return the CONNECTIONBROKEN last-will message."""
        if self._last_will is None:
            self._last_will = self.headers.build(
                Connection, connectionState=ConnectionState.CONNECTIONBROKEN
            )
            logger.debug(f"Armed last will with headerId {self._last_will.headerId}")
        return self._last_will

    def online(self) -> Connection:
        """Return the ONLINE message. The last will must be armed first."""
        if not self.armed:
            raise ProtocolError("Last will must be armed with CONNECTIONBROKEN before going ONLINE")
        message = self.headers.build(Connection, connectionState=ConnectionState.ONLINE)
        self._state = ConnectionState.ONLINE
        logger.info(f"AGV {self.headers.manufacturer}/{self.headers.serial_number} is ONLINE")
        return message

    def shutdown(self) -> Connection:
        """Return the orderly-disconnect notice and disarm the last will."""
        if self._state is not ConnectionState.ONLINE:
            raise ProtocolError("Cannot announce a shutdown while not ONLINE")

        if self.shutdown_notice is ShutdownNotice.DISCONNECTED:
            header = self.headers.next_header(Connection.topic)
            header["timestamp"] = header["timestamp"].isoformat()
            message = Connection.from_dict(
                {**header, "connectionState": ConnectionState.DISCONNECTED.value},
                **{ACCEPT_DISCONNECTED: True},
            )
        else:
            message = self.headers.build(Connection, connectionState=ConnectionState.OFFLINE)

        self._state = message.connectionState
        self._last_will = None
        logger.info(
            f"AGV {self.headers.manufacturer}/{self.headers.serial_number} "
            f"announced {message.connectionState.value}"
        )
        return message

    def broken(self) -> None:
        """Record that the transport dropped; the broker has published the last will."""
        if self._last_will is not None:
            self._state = ConnectionState.CONNECTIONBROKEN
            self._last_will = None
            logger.warning(
                f"AGV {self.headers.manufacturer}/{self.headers.serial_number} connection broken"
            )
