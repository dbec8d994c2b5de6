import logging
from typing import Any, Dict, Type, Union

from .base import OptionalHeaderMessage, VDA5050Message, VDA5050Model
from .connection import Connection, ConnectionState
from .instant_actions import InstantActions
from .order import OrderMessage
from .state import State
from .visualization import Visualization
from ..utils.exceptions import ProtocolError, SchemaError

logger = logging.getLogger(__name__)

# Topic name -> message model
MESSAGE_TYPES: Dict[str, Type[VDA5050Model]] = {
    model.topic: model
    for model in (OrderMessage, State, Visualization, Connection, InstantActions)
}


def get_message_model(message_type: str) -> Type[VDA5050Model]:
    """Return the model class for a topic name such as 'order' or 'instantActions'."""
    try:
        return MESSAGE_TYPES[message_type]
    except KeyError:
        raise ProtocolError(f"Unknown message type: {message_type}") from None


def parse_message(
    message_type: str, payload: Union[str, bytes, Dict[str, Any]], **context: Any
) -> VDA5050Model:
    """
    Decode a wire payload of the given message type.

    Accepts a JSON string/bytes or an already parsed dict. Raises DecodeError
    or ValidationError on rejection and ProtocolError for an unknown type.
    """
    model = get_message_model(message_type)
    try:
        if isinstance(payload, dict):
            message = model.from_dict(payload, **context)
        else:
            message = model.from_json(payload, **context)
    except SchemaError as e:
        logger.warning(f"Rejected {message_type} message: {e.fields}")
        raise
    logger.debug(f"Decoded {message_type} message (headerId={getattr(message, 'headerId', None)})")
    return message


__all__ = [
    "Connection",
    "ConnectionState",
    "InstantActions",
    "MESSAGE_TYPES",
    "OptionalHeaderMessage",
    "OrderMessage",
    "State",
    "VDA5050Message",
    "VDA5050Model",
    "Visualization",
    "get_message_model",
    "parse_message",
]
