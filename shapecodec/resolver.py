"""Shape resolution: turn a shape graph into codec descriptors.

The Resolver walks the by-name shape graph held by a ShapeRegistry and
produces one CodecDescriptor per shape. Each shape kind has its own rule;
rules for containers resolve their children first and embed the children's
expressions in their own.

The decoder and encoder expressions are fragments of the generated Elm
modules. They are assembled here as opaque strings and never parsed.
"""

import dataclasses
import logging
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from shapecodec.descriptors import (
    QUERY_BASE,
    Category,
    CodecDescriptor,
    MemberDescriptor,
    ResolvedTypes,
)
from shapecodec.exceptions import (
    CyclicShapeError,
    UnknownShapeKindError,
    UnknownShapeReferenceError,
    UnsupportedMapKeyTypeError,
)
from shapecodec.naming import low_cam, safe_identifier, up_cam
from shapecodec.registry import ShapeRegistry
from shapecodec.shapes import Shape, ShapeKind, ShapeRef

__all__ = ['Resolver', 'resolve_shapes', 'is_enum_of_floats']

logger = logging.getLogger(__name__)

JSON_DECODE = 'JD'
JSON_ENCODE = 'JE'

ENUM_TO_STRING = 'AWS.Core.Enum.toString >> Result.withDefault ""'
ENUM_TO_FLOAT = 'AWS.Core.Enum.toFloat >> Result.withDefault 0.0'

ENUM_IMPORT = 'import AWS.Core.Enum'
DICT_IMPORT = 'import Dict exposing (Dict)'
DECODE_EXTRA_IMPORT = 'import Json.Decode.Extra as JDX'

_FLOAT_LITERAL = re.compile(r'\d+\.\d+')


def _parenthesize(expression: str) -> str:
    if ' ' not in expression:
        return expression
    if expression.startswith('(') and expression.endswith(')'):
        return expression
    return f'({expression})'


def _one_to_query(query_encoder_type: str) -> str:
    return (
        f'AWS.Core.Encode.addOneToQueryArgs {_parenthesize(query_encoder_type)} '
        f'"{QUERY_BASE}"'
    )


def _merge_imports(*groups: Iterable[str]) -> tuple[str, ...]:
    merged: dict[str, None] = {}
    for group in groups:
        merged.update(dict.fromkeys(group))
    return tuple(merged)


def _scalar(type_: str, codec: str, query_encoder_type: str) -> CodecDescriptor:
    return CodecDescriptor(
        type=type_,
        decoder=f'{JSON_DECODE}.{codec}',
        json_encoder=f'{JSON_ENCODE}.{codec}',
        query_encoder_type=query_encoder_type,
        query_encoder_template=_one_to_query(query_encoder_type),
    )


_BOOL_CODEC = _scalar('Bool', 'bool', 'AWS.Core.Encode.bool')
_FLOAT_CODEC = _scalar('Float', 'float', 'toString')
_INT_CODEC = _scalar('Int', 'int', 'toString')
_STRING_CODEC = _scalar('String', 'string', '(\\x -> x)')

# double and long share the codecs of float and integer.
_SCALAR_CODECS = {
    ShapeKind.boolean: _BOOL_CODEC,
    ShapeKind.float: _FLOAT_CODEC,
    ShapeKind.double: _FLOAT_CODEC,
    ShapeKind.integer: _INT_CODEC,
    ShapeKind.long: _INT_CODEC,
}

_TIMESTAMP_CODEC = CodecDescriptor(
    type='Date',
    decoder='JDX.date',
    json_encoder=f'Date.Extra.toUtcIsoString >> {JSON_ENCODE}.string',
    query_encoder_type='Date.Extra.toUtcIsoString',
    query_encoder_template=_one_to_query('Date.Extra.toUtcIsoString'),
    extra_imports=(
        'import Date exposing (Date)',
        'import Date.Extra',
        DECODE_EXTRA_IMPORT,
    ),
)


def is_enum_of_floats(descriptor: CodecDescriptor) -> bool:
    """Check whether every enum literal of ``descriptor`` is a decimal number."""
    if not descriptor.enum_values:
        return False
    return all(_FLOAT_LITERAL.fullmatch(value) for value in descriptor.enum_values)


class Resolver:
    """Resolves shapes from a registry into codec descriptors.

    Descriptors are memoised by raw shape name. A structure reached again
    while its own resolution is still in progress resolves to a stand-in
    without members (``is_reference``), whose names and expressions match
    the full descriptor, which is what lets cyclic graphs terminate.

    Example:
        >>> registry = ShapeRegistry({'Active': {'type': 'boolean'}})
        >>> Resolver(registry).resolve_shape_ref('Active').type
        'Bool'
    """

    def __init__(
        self,
        registry: ShapeRegistry,
        input_shapes: Iterable[str] = (),
        output_shapes: Iterable[str] = (),
    ):
        """Initialize the resolver.

        Args:
            registry: Registry holding the named shapes.
            input_shapes: Canonical names of request structures.
            output_shapes: Canonical names of response structures.
        """
        self.registry = registry
        self.input_shapes = frozenset(input_shapes)
        self.output_shapes = frozenset(output_shapes)
        self._cache: dict[str, CodecDescriptor] = {}
        self._stack: list[str] = []
        self._rules: dict[ShapeKind, Callable[[Shape], CodecDescriptor]] = {
            ShapeKind.boolean: self._resolve_scalar,
            ShapeKind.float: self._resolve_scalar,
            ShapeKind.double: self._resolve_scalar,
            ShapeKind.integer: self._resolve_scalar,
            ShapeKind.long: self._resolve_scalar,
            ShapeKind.string: self._resolve_string,
            ShapeKind.blob: self._resolve_blob,
            ShapeKind.timestamp: self._resolve_timestamp,
            ShapeKind.list: self._resolve_list,
            ShapeKind.map: self._resolve_map,
            ShapeKind.structure: self._resolve_structure,
        }

    def resolve_all(self) -> ResolvedTypes:
        """Resolve every shape in the registry, in definition order."""
        descriptors = [
            self.resolve_shape_ref(raw_name)
            for raw_name in self.registry.get_shape_names()
        ]
        logger.info(f'Resolved {len(descriptors)} shapes')
        return ResolvedTypes(descriptors)

    def resolve_type(self, shape: Shape) -> CodecDescriptor:
        """Resolve a named shape with the rule for its kind.

        Raises:
            UnknownShapeKindError: If no rule handles the shape's kind.
        """
        try:
            kind = ShapeKind(shape.kind)
        except ValueError:
            raise UnknownShapeKindError(shape.kind, shape.describe()) from None

        return self._rules[kind](shape).with_name(shape.name)

    def resolve_shape_ref(self, ref: ShapeRef | str) -> CodecDescriptor:
        """Resolve a shape reference by looking its name up in the registry.

        Raises:
            UnknownShapeReferenceError: If the name is not in the registry.
            CyclicShapeError: If the reference closes a cycle that contains
                no structure.
        """
        raw_name = ref.shape if isinstance(ref, ShapeRef) else ref
        if raw_name in self._cache:
            return self._cache[raw_name]

        shape = self.registry.get(raw_name)
        reentered = raw_name in self._stack
        if reentered:
            if shape.kind == ShapeKind.structure.value:
                logger.debug(f'Shape {raw_name} is recursive, using a reference')
                return dataclasses.replace(
                    self._resolve_structure(shape, include_members=False),
                    name=shape.name,
                    is_reference=True,
                )
            cycle = self._stack[self._stack.index(raw_name) :]
            if not any(
                self.registry.get(name).kind == ShapeKind.structure.value
                for name in cycle
            ):
                raise CyclicShapeError(cycle + [raw_name])

        logger.debug(f'Resolving shape {raw_name}')
        self._stack.append(raw_name)
        try:
            descriptor = self.resolve_type(shape)
        finally:
            self._stack.pop()

        if not reentered:
            self._cache[raw_name] = descriptor
        return descriptor

    def classify(self, shape: Shape) -> Category:
        """Categorize a structure: exception, response, request or record."""
        if shape.exception:
            return 'exception'
        if shape.name in self.output_shapes:
            return 'response'
        if shape.name in self.input_shapes:
            return 'request'
        return 'record'

    def _child(self, shape: Shape, field: str) -> CodecDescriptor:
        ref = getattr(shape, field)
        if ref is None:
            raise UnknownShapeReferenceError(
                f'{shape.name}.{field}', f'{shape.kind} shape has no {field}'
            )
        return self.resolve_shape_ref(ref)

    def _resolve_scalar(self, shape: Shape) -> CodecDescriptor:
        return _SCALAR_CODECS[ShapeKind(shape.kind)]

    def _resolve_string(self, shape: Shape) -> CodecDescriptor:
        if shape.enum:
            return self._resolve_enum(shape)
        return _STRING_CODEC

    def _resolve_blob(self, shape: Shape) -> CodecDescriptor:
        logger.debug(f'Blob shape {shape.name} is resolved as a string')
        return self._resolve_string(shape)

    def _resolve_timestamp(self, shape: Shape) -> CodecDescriptor:
        return _TIMESTAMP_CODEC

    def _resolve_enum(self, shape: Shape) -> CodecDescriptor:
        literals = ', '.join(f'"{value}"' for value in shape.enum)
        doc = f'One of {literals}.'
        if shape.documentation:
            doc = f'{shape.documentation}\n\n{doc}'

        return CodecDescriptor(
            type=shape.name,
            decoder=f'{low_cam(shape.name)}Decoder',
            json_encoder=f'{ENUM_TO_STRING} >> {JSON_ENCODE}.string',
            query_encoder_type=ENUM_TO_STRING,
            query_encoder_template=_one_to_query(ENUM_TO_STRING),
            extra_imports=(ENUM_IMPORT,),
            category='union',
            enum=tuple(
                safe_identifier(value, capitalize=True) for value in shape.enum
            ),
            enum_values=tuple(shape.enum),
            doc=doc,
        )

    def _resolve_list(self, shape: Shape) -> CodecDescriptor:
        child = self._child(shape, 'member')
        flattened = 'True' if shape.flattened else 'False'

        return CodecDescriptor(
            type=f'(List {child.type})',
            decoder=f'({JSON_DECODE}.list {child.decoder})',
            json_encoder=f'(List.map ({child.json_encoder})) >> {JSON_ENCODE}.list',
            query_encoder_type=child.query_encoder_type,
            query_encoder_template=(
                f'AWS.Core.Encode.addListToQueryArgs {flattened} '
                f'({child.query_encoder("")}) "{QUERY_BASE}"'
            ),
            extra_imports=child.extra_imports,
        )

    def _resolve_map(self, shape: Shape) -> CodecDescriptor:
        key = self._child(shape, 'key')
        if key.type != _STRING_CODEC.type and not key.enum:
            raise UnsupportedMapKeyTypeError(shape.name, key.type)
        value = self._child(shape, 'value')

        if is_enum_of_floats(key):
            query_encoder_type = f'{ENUM_TO_FLOAT} >> toString'
            return CodecDescriptor(
                type=f'(Dict Float {value.type})',
                decoder=f'(JDX.dict2 {JSON_DECODE}.float {value.decoder})',
                json_encoder=f'{ENUM_TO_FLOAT} >> {JSON_ENCODE}.float',
                query_encoder_type=query_encoder_type,
                query_encoder_template=_one_to_query(query_encoder_type),
                extra_imports=_merge_imports(
                    (ENUM_IMPORT, DICT_IMPORT, DECODE_EXTRA_IMPORT),
                    value.extra_imports,
                ),
            )

        # An enum key is coerced with its own toString, a string key passes through.
        return CodecDescriptor(
            type=f'(Dict String {value.type})',
            decoder=f'(AWS.Core.Decode.dict {value.decoder})',
            json_encoder=key.json_encoder,
            query_encoder_type=key.query_encoder_type,
            query_encoder_template=_one_to_query(key.query_encoder_type),
            extra_imports=_merge_imports(
                (ENUM_IMPORT, DICT_IMPORT), value.extra_imports
            ),
        )

    def _resolve_structure(
        self, shape: Shape, include_members: bool = True
    ) -> CodecDescriptor:
        category = self.classify(shape)
        lower_name = low_cam(shape.name)

        if category == 'response':
            doc = f'Type of HTTP response from {lower_name.removesuffix("Response")}'
        else:
            doc = shape.documentation

        members = ()
        if include_members:
            members = tuple(
                self._resolve_member(shape, key, ref)
                for key, ref in shape.members.items()
            )

        return CodecDescriptor(
            type=shape.name,
            decoder=f'{lower_name}Decoder',
            json_encoder=f'{lower_name}Encoder',
            query_encoder_type=f'{lower_name}Encoder',
            query_encoder_template=(
                f'AWS.Core.Encode.addRecordToQueryArgs {lower_name}Encoder '
                f'"{QUERY_BASE}"'
            ),
            category=category,
            doc=doc,
            members=members,
        )

    def _resolve_member(
        self, shape: Shape, key: str, ref: ShapeRef
    ) -> MemberDescriptor:
        return MemberDescriptor(
            required=key in shape.required,
            key=safe_identifier(key, capitalize=False),
            raw_key=key,
            decode_keys=tuple(dict.fromkeys([key, low_cam(key), up_cam(key)])),
            value=self.resolve_shape_ref(ref),
        )


def resolve_shapes(
    shapes: Mapping[str, Shape | Mapping[str, Any]] | ShapeRegistry,
    input_shapes: Iterable[str] = (),
    output_shapes: Iterable[str] = (),
) -> ResolvedTypes:
    """Resolve a whole shape map into codec descriptors.

    Args:
        shapes: Mapping of raw shape name to shape, or a ready registry.
        input_shapes: Canonical names of request structures.
        output_shapes: Canonical names of response structures.

    Returns:
        The descriptors, one per shape in input order, with a lookup by
        rendered type name.

    Raises:
        ShapeError: If any shape fails to resolve; nothing is returned then.
    """
    registry = shapes if isinstance(shapes, ShapeRegistry) else ShapeRegistry(shapes)
    return Resolver(registry, input_shapes, output_shapes).resolve_all()
