"""
VDA5050 Message Schema Library
===============================

Immutable, validated models of the VDA5050 messages exchanged between master
control and AGVs (order, state, visualization, connection, instantActions),
with JSON encoding/decoding, JSON Schema validation, header sequencing and a
connection last-will helper. No transport is included.
"""

__version__ = "0.1.0"

from .core.header import PROTOCOL_VERSION, HeaderSequence
from .core.lifecycle import ConnectionLifecycle, ShutdownNotice
from .models import (
    MESSAGE_TYPES,
    Connection,
    ConnectionState,
    InstantActions,
    OrderMessage,
    State,
    Visualization,
    parse_message,
)
from .utils.exceptions import DecodeError, ProtocolError, ValidationError, VDA5050Error
from .validation.validator import MessageValidator

__all__ = [
    "Connection",
    "ConnectionLifecycle",
    "ConnectionState",
    "DecodeError",
    "HeaderSequence",
    "InstantActions",
    "MESSAGE_TYPES",
    "MessageValidator",
    "OrderMessage",
    "PROTOCOL_VERSION",
    "ProtocolError",
    "ShutdownNotice",
    "State",
    "ValidationError",
    "VDA5050Error",
    "Visualization",
    "parse_message",
]
