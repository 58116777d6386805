"""Input models for service definitions.

Shapes reference each other by name through ``ShapeRef`` objects, so a
definition is a flat, possibly cyclic, graph keyed by raw shape name.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shapecodec.naming import up_cam

__all__ = ['ShapeKind', 'ShapeRef', 'Shape', 'Operation', 'ServiceDefinition']


class ShapeKind(Enum):
    boolean = 'boolean'
    float = 'float'
    double = 'double'
    integer = 'integer'
    long = 'long'
    string = 'string'
    blob = 'blob'
    timestamp = 'timestamp'
    list = 'list'
    map = 'map'
    structure = 'structure'


class ShapeRef(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)

    shape: str


class Shape(BaseModel):
    """A single node of the shape graph.

    ``kind`` is read from the raw ``type`` key and kept as a plain string;
    unknown kinds are reported by the resolver, not by validation. ``name``
    is empty until the registry assigns the canonical name.
    """

    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)

    name: str | None = None
    kind: str | None = Field(None, alias='type')
    member: ShapeRef | None = None
    key: ShapeRef | None = None
    value: ShapeRef | None = None
    members: dict[str, ShapeRef] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    enum: list[str] | None = None
    flattened: bool = False
    exception: bool = False
    documentation: str | None = None

    def describe(self) -> str:
        """Serialize the shape for diagnostics."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Operation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str | None = None
    input: ShapeRef | None = None
    output: ShapeRef | None = None
    documentation: str | None = None


class ServiceDefinition(BaseModel):
    """A service definition document: metadata, operations and shapes."""

    model_config = ConfigDict(extra='ignore')

    metadata: dict[str, Any] = Field(default_factory=dict)
    operations: dict[str, Operation] = Field(default_factory=dict)
    shapes: dict[str, Shape] = Field(default_factory=dict)

    @property
    def input_shapes(self) -> list[str]:
        """Canonical names of the shapes used as operation inputs."""
        return [
            up_cam(op.input.shape) for op in self.operations.values() if op.input
        ]

    @property
    def output_shapes(self) -> list[str]:
        """Canonical names of the shapes used as operation outputs."""
        return [
            up_cam(op.output.shape) for op in self.operations.values() if op.output
        ]
