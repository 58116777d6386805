"""shapecodec - Resolve service definition shapes into codec descriptors.

shapecodec reads the shape graph of a service definition (primitives, lists,
maps, enums and structures referencing each other by name) and resolves every
shape into a codec descriptor: the type name, JSON decoder and encoder, and
query-string encoder that a renderer needs to emit typed bindings.

Quick Start:
    >>> from shapecodec import resolve_shapes
    >>>
    >>> resolved = resolve_shapes(
    ...     {'Tier': {'type': 'string', 'enum': ['Gold', 'Silver']}}
    ... )
    >>> resolved[0].category
    'union'

CLI Usage:
    $ shapecodec resolve ./service.json
    $ shapecodec resolve ./service.json --output build/shapes.json
    $ shapecodec generate --config shapecodec.yaml
"""

from shapecodec.config import ServiceConfig, ShapecodecConfig, get_config
from shapecodec.descriptors import CodecDescriptor, MemberDescriptor, ResolvedTypes
from shapecodec.exceptions import (
    ConfigurationError,
    CyclicShapeError,
    DefinitionError,
    DefinitionLoadError,
    DefinitionValidationError,
    OutputError,
    ShapecodecError,
    ShapeError,
    UnknownShapeKindError,
    UnknownShapeReferenceError,
    UnsupportedMapKeyTypeError,
)
from shapecodec.loader import ServiceLoader
from shapecodec.registry import ShapeRegistry
from shapecodec.resolver import Resolver, resolve_shapes
from shapecodec.shapes import ServiceDefinition, Shape, ShapeKind, ShapeRef
from shapecodec.writer import ManifestWriter

__all__ = [
    # Main classes
    'Resolver',
    'resolve_shapes',
    'ShapeRegistry',
    'ServiceLoader',
    'ManifestWriter',
    # Models
    'Shape',
    'ShapeKind',
    'ShapeRef',
    'ServiceDefinition',
    'CodecDescriptor',
    'MemberDescriptor',
    'ResolvedTypes',
    # Configuration
    'ServiceConfig',
    'ShapecodecConfig',
    'get_config',
    # Exceptions
    'ShapecodecError',
    'ShapeError',
    'UnknownShapeKindError',
    'UnknownShapeReferenceError',
    'UnsupportedMapKeyTypeError',
    'CyclicShapeError',
    'DefinitionError',
    'DefinitionLoadError',
    'DefinitionValidationError',
    'ConfigurationError',
    'OutputError',
]

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version('shapecodec')
except PackageNotFoundError:
    __version__ = 'unknown'
