# src/vda5050/core/header.py

import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, Optional, Type, TypeVar

from ..models.base import VDA5050Model
from ..utils.exceptions import ProtocolError

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "1.1.0"

M = TypeVar("M", bound=VDA5050Model)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HeaderSequence:
    """
    Sender-side header stamping for one vehicle.

    Keeps one headerId counter per topic. Each counter starts at ``start`` and
    increases by 1 with every header handed out, whether or not the message
    is eventually received.
    """

    def __init__(
        self,
        manufacturer: str,
        serial_number: str,
        version: str = PROTOCOL_VERSION,
        start: int = 0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        # VDA5050 identity shared by every header
        self.manufacturer = manufacturer
        self.serial_number = serial_number
        self.version = version
        self._start = start
        self._clock = clock or utc_now
        self._counters: Dict[str, Iterator[int]] = {}

    def next_header_id(self, topic: str) -> int:
        """Advance and return the headerId counter of a topic."""
        if topic not in self._counters:
            self._counters[topic] = itertools.count(self._start)
        return next(self._counters[topic])

    def next_header(self, topic: str) -> Dict[str, Any]:
        """Return the five header fields for the next message on a topic."""
        return {
            "headerId": self.next_header_id(topic),
            "timestamp": self._clock(),
            "version": self.version,
            "manufacturer": self.manufacturer,
            "serialNumber": self.serial_number,
        }

    def build(self, model: Type[M], **fields: Any) -> M:
        """
        Construct a message stamped with the next header of its topic.

        The counter advances before construction, so a message rejected by
        validation still consumes its headerId.
        """
        if not getattr(model, "topic", ""):
            raise ProtocolError(f"{model.__name__} is not a topic-level message")
        header = self.next_header(model.topic)
        message = model(**{**header, **fields})
        logger.debug(f"Built {model.topic} message with headerId {header['headerId']}")
        return message
