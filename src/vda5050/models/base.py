from __future__ import annotations

import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    SerializerFunctionWrapHandler,
    ValidationError as PydanticValidationError,
    confloat,
    conint,
    constr,
    model_serializer,
    model_validator,
)

from ..utils.exceptions import DecodeError, FieldError, from_pydantic

logger = logging.getLogger(__name__)

PI_BOUND = 3.14159265359
DEVIATION_THETA_BOUND = 3.141592654

Angle = confloat(ge=-PI_BOUND, le=PI_BOUND)
SemVer = constr(pattern=r"^\d+\.\d+\.\d+(?:[-+][0-9A-Za-z.+-]*)?$")

_ABSENT = object()


class VDA5050Model(BaseModel):
    """
    Base class for every VDA5050 value object.

    Instances are immutable and fully validated: keyword construction either
    yields a valid object or raises ``vda5050.utils.exceptions.ValidationError``.
    Optional fields that hold no value are omitted from the encoded form, so
    "absent" survives an encode/decode round trip.

    Keyword construction is lax (Python values such as enum members and
    datetimes are accepted). Decoding wire input is strict JSON: a string
    where a number is expected, a number where a timestamp is expected and
    the like are rejected with DecodeError.
    """
    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise from_pydantic(type(self).__name__, exc) from exc

    # Keeps pydantic from routing model_validate and nested validation
    # through this __init__ (same marker as BaseModel and RootModel).
    __init__.__pydantic_base_init__ = True  # type: ignore[attr-defined]

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if not field.is_required() and data.get(name, _ABSENT) is None:
                del data[name]
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-compatible wire representation."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Return the wire representation as a JSON string."""
        return self.model_dump_json()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **context: Any):
        """
        Decode a parsed wire object.

        The object must hold JSON values only; it is checked with the same
        strict rules as from_json. Raises DecodeError for structural problems
        and ValidationError when only range constraints failed.
        """
        try:
            payload = json.dumps(data, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise DecodeError(
                cls.__name__, [FieldError("", f"Not a JSON value: {exc}", "json_type")]
            ) from exc
        return cls.from_json(payload, **context)

    @classmethod
    def from_json(cls, payload: Union[str, bytes], **context: Any):
        """Decode a JSON payload. See from_dict for the error contract."""
        try:
            return cls.model_validate_json(payload, strict=True, context=context or None)
        except PydanticValidationError as exc:
            raise from_pydantic(cls.__name__, exc, decoding=True) from exc

    def replace(self, **changes: Any):
        """Return a new, re-validated instance with the given fields changed."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self)(**data)


class VDA5050Message(VDA5050Model):
    """
    Message with the mandatory header envelope (Order, State, Connection).

    Attributes:
        headerId: Message counter, defined per topic and incremented by 1 with each sent message
        timestamp: ISO8601 timestamp of message creation
        version: Protocol version in semver format (Major.Minor.Patch)
        manufacturer: Name of the AGV manufacturer
        serialNumber: Unique identifier of the specific AGV instance
    """
    topic: ClassVar[str] = ""

    headerId: int = Field(
        ...,
        description='Header ID of the message. The headerId is defined per topic and incremented by 1 with each sent (but not necessarily received) message.',
    )
    timestamp: datetime = Field(
        ...,
        description='Timestamp in ISO8601 format (YYYY-MM-DDTHH:mm:ss.ssZ).',
        examples=['1991-03-11T11:40:03.12Z'],
    )
    version: SemVer = Field(
        ...,
        description='Version of the protocol [Major].[Minor].[Patch]',
        examples=['1.1.0'],
    )
    manufacturer: str = Field(..., description='Manufacturer of the AGV.')
    serialNumber: str = Field(..., description='Serial number of the AGV.')


class OptionalHeaderMessage(VDA5050Model):
    """
    Message whose header envelope is optional (Visualization, InstantActions).

    These topics are bandwidth-sensitive or fire-and-forget, so every header
    field may be left out.
    """
    topic: ClassVar[str] = ""

    headerId: Optional[int] = Field(
        None,
        description='headerId of the message. The headerId is defined per topic and incremented by 1 with each sent (but not necessarily received) message.',
    )
    timestamp: Optional[datetime] = Field(
        None,
        description='Timestamp in ISO8601 format (YYYY-MM-DDTHH:mm:ss.ssZ).',
    )
    version: Optional[SemVer] = Field(
        None, description='Version of the protocol [Major].[Minor].[Patch]'
    )
    manufacturer: Optional[str] = Field(None, description='Manufacturer of the AGV')
    serialNumber: Optional[str] = Field(None, description='Serial number of the AGV.')


class BlockingType(Enum):
    """
    Blocking behavior of an action during execution.

    Values:
        NONE: Action can happen in parallel with others, including movement
        SOFT: Action can happen simultaneously with others, but not while moving
        HARD: No other actions can be performed while this action is running
    """
    NONE = 'NONE'
    SOFT = 'SOFT'
    HARD = 'HARD'


class ActionParameter(VDA5050Model):
    """
    Key/value parameter of an action.

    The value is any JSON value: string, number, boolean, null, array or object.
    """
    key: str = Field(
        ...,
        description='The key of the action parameter.',
        examples=['duration', 'direction', 'signal'],
    )
    value: JsonValue = Field(
        ...,
        description='The value of the action parameter',
        examples=[103.2, 'left', True, ['arrays', 'are', 'also', 'valid']],
    )


class Action(VDA5050Model):
    """
    An action that the AGV can perform.

    Shared by Order messages (actions on nodes and edges) and InstantActions.

    Attributes:
        actionType: Identifies the function of the action (e.g. 'pick', 'drop')
        actionId: Unique identifier mapping the action to its actionState
        actionDescription: Optional human-readable description
        blockingType: Execution behavior relative to movement and other actions
        actionParameters: Optional parameters customizing the action
    """
    actionType: str = Field(
        ...,
        description='Name of action as described in the first column of "Actions and Parameters". Identifies the function of the action.',
    )
    actionId: str = Field(
        ...,
        description='Unique ID to identify the action and map them to the actionState in the state. Suggestion: Use UUIDs.',
    )
    actionDescription: Optional[str] = Field(
        None, description='Additional information on the action.'
    )
    blockingType: BlockingType = Field(
        ...,
        description='Regulates if the action is allowed to be executed during movement and/or parallel to other actions.\nnone: action can happen in parallel with others, including movement.\nsoft: action can happen simultaneously with others, but not while moving.\nhard: no other actions can be performed while this action is running.',
    )
    actionParameters: Optional[List[ActionParameter]] = Field(
        None,
        description='Array of actionParameter-objects for the indicated action e. g. deviceId, loadId, external Triggers.',
    )


class ControlPoint(VDA5050Model):
    """
    Control point of a NURBS trajectory.

    Attributes:
        x: X coordinate in the world coordinate system (meters)
        y: Y coordinate in the world coordinate system (meters)
        weight: Pull of this point on the curve; 1.0 when absent
    """
    DEFAULT_WEIGHT: ClassVar[float] = 1.0

    x: float = Field(
        ..., description='X coordinate described in the world coordinate system.'
    )
    y: float = Field(
        ..., description='Y coordinate described in the world coordinate system.'
    )
    weight: Optional[confloat(ge=0.0)] = Field(
        None,
        description='The weight, with which this control point pulls on the curve. When not defined, the default will be 1.0.',
    )

    @property
    def effective_weight(self) -> float:
        return self.DEFAULT_WEIGHT if self.weight is None else self.weight


class Trajectory(VDA5050Model):
    """
    NURBS curve followed between two nodes.

    Used in Order messages (planned trajectory of an edge) and State messages
    (trajectory segment of an edgeState). The knot vector must hold exactly
    ``len(controlPoints) + degree + 1`` entries.

    Attributes:
        degree: Number of control points that influence any given point on the curve
        knotVector: Parameter values determining how control points affect the curve
        controlPoints: Control points, including the start and end point
    """
    degree: conint(ge=1) = Field(
        ...,
        description='Defines the number of control points that influence any given point on the curve. Increasing the degree increases continuity. If not defined, the default value is 1.',
    )
    knotVector: List[float] = Field(
        ...,
        description='Sequence of parameter values that determines where and how the control points affect the NURBS curve. knotVector has size of number of control points + degree + 1.',
    )
    controlPoints: List[ControlPoint] = Field(
        ...,
        description='List of JSON controlPoint objects defining the control points of the NURBS, which includes the beginning and end point.',
    )

    @model_validator(mode="after")
    def _check_knot_vector_length(self) -> Trajectory:
        expected = len(self.controlPoints) + self.degree + 1
        if len(self.knotVector) != expected:
            raise ValueError(
                f"knotVector has {len(self.knotVector)} entries, expected {expected} "
                f"(controlPoints + degree + 1)"
            )
        return self


class AgvPosition(VDA5050Model):
    """
    AGV position on a map in world coordinates.

    This is the Visualization shape. State reports a superset that adds
    mapDescription, see ``vda5050.models.state.AgvPosition``.

    Attributes:
        x: X coordinate in the world coordinate system (meters)
        y: Y coordinate in the world coordinate system (meters)
        theta: Orientation in radians, within [-pi, pi]
        mapId: Map on which the position is referenced
        positionInitialized: Whether the position has been initialized
        localizationScore: Localization quality in [0.0, 1.0]
        deviationRange: Position deviation range in meters
    """
    x: float
    y: float
    theta: Angle
    mapId: str
    positionInitialized: bool = Field(
        ...,
        description='True: position is initialized. False: position is not initizalized.',
    )
    localizationScore: Optional[confloat(ge=0.0, le=1.0)] = Field(
        None,
        description='Describes the quality of the localization and therefore, can be used, e.g., by SLAM-AGV to describe how accurate the current position information is.\n0.0: position unknown\n1.0: position known\nOptional for vehicles that cannot estimate their localization score.\nOnly for logging and visualization purposes',
    )
    deviationRange: Optional[float] = Field(
        None,
        description='Value for position deviation range in meters. Optional for vehicles that cannot estimate their deviation, e.g., grid-based localization. Only for logging and visualization purposes.',
    )


class Velocity(VDA5050Model):
    """AGV velocity in vehicle coordinates."""
    vx: Optional[float] = Field(
        None, description='The AVGs velocity in its x direction'
    )
    vy: Optional[float] = Field(
        None, description='The AVGs velocity in its y direction'
    )
    omega: Optional[float] = Field(
        None, description='The AVGs turning speed around its z axis.'
    )


class BoundingBoxReference(VDA5050Model):
    """
    Reference point of a load's bounding box.

    Always the center of the bounding box bottom surface (height = 0), in
    AGV coordinates.
    """
    x: float
    y: float
    z: float
    theta: Optional[float] = Field(
        None,
        description='Orientation of the loads bounding box. Important for tugger, trains, etc.',
    )


class LoadDimensions(VDA5050Model):
    length: float = Field(
        ..., description='Absolute length of the loads bounding box in meter.'
    )
    width: float = Field(
        ..., description='Absolute width of the loads bounding box in meter.'
    )
    height: Optional[float] = Field(
        None,
        description='Absolute height of the loads bounding box in meter.\nOptional:\nSet value only if known.',
    )
