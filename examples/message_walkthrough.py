#!/usr/bin/env python3
"""
Message Walkthrough Example
===========================

Builds, encodes and decodes the messages one AGV exchanges with master
control, without any broker.

It demonstrates:
- Header stamping with a per-topic headerId counter
- The connection last-will sequence (CONNECTIONBROKEN, ONLINE, OFFLINE)
- Encoding an order and decoding it back on the AGV side
- Schema validation of a raw payload and the two rejection kinds

Usage:
    python message_walkthrough.py [options]

    Examples:
    python message_walkthrough.py --manufacturer MyCompany --agv-serial AGV-002
    python message_walkthrough.py --shutdown-notice DISCONNECTED
"""

import argparse
import json
import logging

from vda5050 import (
    ConnectionLifecycle,
    DecodeError,
    HeaderSequence,
    MessageValidator,
    OrderMessage,
    ShutdownNotice,
    ValidationError,
    parse_message,
)
from vda5050.models.order import Action, Edge, Node, NodePosition

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="VDA5050 message walkthrough")
    parser.add_argument("--manufacturer", default="DemoRobotics", help="AGV manufacturer")
    parser.add_argument("--agv-serial", default="AGV-001", help="AGV serial number")
    parser.add_argument("--map-id", default="warehouse_map", help="Map used for node positions")
    parser.add_argument(
        "--shutdown-notice",
        choices=[notice.value for notice in ShutdownNotice],
        default=ShutdownNotice.OFFLINE.value,
        help="Connection state announced on an orderly shutdown",
    )
    return parser.parse_args()


def build_order(headers: HeaderSequence, map_id: str) -> OrderMessage:
    """Two released nodes joined by one edge, with a pick on the last node."""
    pick = Action(actionId="pick-1", actionType="pick", blockingType="HARD")
    return headers.build(
        OrderMessage,
        orderId="order-1",
        orderUpdateId=0,
        nodes=[
            Node(nodeId="start", sequenceId=0, released=True, actions=[],
                 nodePosition=NodePosition(x=0.0, y=0.0, mapId=map_id)),
            Node(nodeId="rack-7", sequenceId=2, released=True, actions=[pick],
                 nodePosition=NodePosition(x=12.5, y=3.0, theta=1.57, mapId=map_id)),
        ],
        edges=[
            Edge(edgeId="start-rack-7", sequenceId=1, released=True,
                 startNodeId="start", endNodeId="rack-7", maxSpeed=1.2, actions=[]),
        ],
    )


def main():
    args = parse_args()

    # Master control and AGV each stamp their own headers
    master = HeaderSequence(args.manufacturer, args.agv_serial)
    agv = HeaderSequence(args.manufacturer, args.agv_serial)

    lifecycle = ConnectionLifecycle(agv, shutdown_notice=args.shutdown_notice)
    logger.info(f"Last will: {lifecycle.last_will().to_json()}")
    logger.info(f"Online:    {lifecycle.online().to_json()}")

    order = build_order(master, args.map_id)
    raw = order.to_json()
    logger.info(f"Order on the wire ({len(raw)} bytes)")

    received = parse_message("order", raw)
    logger.info(
        f"AGV decoded order {received.orderId}: "
        f"{len(received.base_nodes)} base nodes, {len(received.horizon_nodes)} horizon nodes"
    )

    validator = MessageValidator()
    broken = json.loads(raw)
    broken["orderUpdateId"] = -1
    try:
        validator.validate_message("order", broken)
    except ValidationError as e:
        logger.warning(f"Out-of-range value rejected:\n{e}")

    del broken["nodes"]
    try:
        validator.validate_message("order", broken)
    except DecodeError as e:
        logger.warning(f"Malformed order rejected:\n{e}")

    notice = lifecycle.shutdown()
    logger.info(f"Shutdown:  {notice.to_json()}")


if __name__ == "__main__":
    main()
