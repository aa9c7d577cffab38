"""Node status and role vocabulary shared with the on-chain item records."""

from __future__ import annotations
from enum import Enum
from typing import Dict, Optional

class NodeStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    ERROR = "error"
    IN_TRANSIT = "in_transit"
    PROCESSING = "processing"
    CREATED = "created"
    REJECTED = "rejected"

class NodeRole(str, Enum):
    SUPPLIER = "Supplier"
    MANUFACTURER = "Manufacturer"
    DISTRIBUTOR = "Distributor"
    CUSTOMER = "Customer"
    UNASSIGNED = "Unassigned"

STATUS_LABELS: Dict[str, str] = {
    NodeStatus.PENDING.value: "Pending",
    NodeStatus.ACTIVE.value: "Active",
    NodeStatus.COMPLETED.value: "Completed",
    NodeStatus.ERROR.value: "Error",
    NodeStatus.IN_TRANSIT.value: "In Transit",
    NodeStatus.PROCESSING.value: "Processing",
    NodeStatus.CREATED.value: "Created",
    NodeStatus.REJECTED.value: "Rejected",
}

# On-chain item status codes, 0..4
_CHAIN_TO_STATUS = {
    0: NodeStatus.CREATED,
    1: NodeStatus.IN_TRANSIT,
    2: NodeStatus.PROCESSING,
    3: NodeStatus.COMPLETED,
    4: NodeStatus.REJECTED,
}

_STATUS_TO_CHAIN = {
    NodeStatus.CREATED.value: 0,
    NodeStatus.IN_TRANSIT.value: 1,
    NodeStatus.PROCESSING.value: 2,
    NodeStatus.COMPLETED.value: 3,
    NodeStatus.REJECTED.value: 4,
    NodeStatus.ACTIVE.value: 2,
    NodeStatus.PENDING.value: 0,
    NodeStatus.ERROR.value: 4,
}

def is_known_status(status: Optional[str]) -> bool:
    return status in STATUS_LABELS

def is_known_role(role: Optional[str]) -> bool:
    return role in {r.value for r in NodeRole}

def status_label(status: Optional[str]) -> Optional[str]:
    """Display label for a status; unknown values are returned unchanged."""
    return STATUS_LABELS.get(status, status)

def blockchain_status_to_node_status(code: Optional[int]) -> NodeStatus:
    # bool is an int subclass; only real numeric codes map
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return NodeStatus.PENDING
    return _CHAIN_TO_STATUS.get(code, NodeStatus.PENDING)

def node_status_to_blockchain_status(status: Optional[str]) -> int:
    if isinstance(status, NodeStatus):
        status = status.value
    if not isinstance(status, str):
        return 0
    return _STATUS_TO_CHAIN.get(status, 0)
