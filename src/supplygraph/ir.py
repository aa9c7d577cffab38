from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional, Any, Union

def _id_to_str(value: Any) -> Any:
    # YAML reads bare numeric ids such as `id: 1` as numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value

class Node(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    role: Optional[str] = None
    status: Optional[str] = None
    assigned_user_id: Optional[Union[str, int]] = Field(default=None, alias="assignedUserId")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_numeric_id(cls, value: Any) -> Any:
        return _id_to_str(value)

class Edge(BaseModel):
    model_config = ConfigDict(extra="allow")

    source: str
    target: str
    id: Optional[str] = None
    label: Optional[str] = None

    @field_validator("source", "target", mode="before")
    @classmethod
    def coerce_numeric_endpoint(cls, value: Any) -> Any:
        return _id_to_str(value)

class Graph(BaseModel):
    nodes: List[Node] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def node_map(self) -> Dict[str, Node]:
        return {n.id: n for n in self.nodes}

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]
