"""Codec descriptors produced by the resolver.

A codec descriptor bundles everything the renderer needs to know about one
shape: its type expression, JSON decoder and encoder, query-string encoding,
extra imports and, for structures, its members. Descriptors are immutable
once built.
"""

import dataclasses
import json
from collections.abc import Iterator, Sequence
from typing import Any, Literal

__all__ = [
    'QUERY_BASE',
    'Category',
    'CodecDescriptor',
    'MemberDescriptor',
    'ResolvedTypes',
]

# Placeholder for the query parameter base name inside query encoder templates.
QUERY_BASE = '{base}'

Category = Literal['union', 'request', 'response', 'exception', 'record']


@dataclasses.dataclass(frozen=True)
class MemberDescriptor:
    """One field of a structure.

    Attributes:
        required: Whether the field is listed in the structure's required set.
        key: Safe, lower-camel field identifier for generated code.
        raw_key: The field name as written in the service definition.
        decode_keys: Key spellings accepted when decoding, raw key first.
        value: The resolved descriptor of the field's shape.
    """

    required: bool
    key: str
    raw_key: str
    decode_keys: tuple[str, ...]
    value: 'CodecDescriptor'

    def to_dict(self) -> dict[str, Any]:
        return {
            'required': self.required,
            'key': self.key,
            'rawKey': self.raw_key,
            'decodeKeys': list(self.decode_keys),
            'value': self.value.to_dict(),
        }


@dataclasses.dataclass(frozen=True)
class CodecDescriptor:
    """Resolved codec for one shape.

    ``query_encoder_template`` holds the full query encoding expression with
    ``QUERY_BASE`` standing in for the parameter base name; call
    ``query_encoder(base)`` to fill it in.

    For enums, ``enum`` holds the safe variant identifiers and
    ``enum_values`` the literal values they stand for, in the same order.

    ``is_reference`` marks the member-less stand-in returned when a structure
    is reached again while it is still being resolved. Its type, decoder and
    encoders are identical to the full descriptor's.
    """

    type: str
    decoder: str
    json_encoder: str
    query_encoder_type: str
    query_encoder_template: str
    name: str | None = None
    extra_imports: tuple[str, ...] = ()
    category: Category | None = None
    enum: tuple[str, ...] | None = None
    enum_values: tuple[str, ...] | None = None
    doc: str | None = None
    members: tuple[MemberDescriptor, ...] = ()
    is_reference: bool = False

    def query_encoder(self, base: str) -> str:
        """Build the query encoding expression for parameter ``base``."""
        return self.query_encoder_template.replace(QUERY_BASE, base)

    def with_name(self, name: str | None) -> 'CodecDescriptor':
        return dataclasses.replace(self, name=name)

    def to_dict(self) -> dict[str, Any]:
        data = {
            'name': self.name,
            'type': self.type,
            'decoder': self.decoder,
            'jsonEncoder': self.json_encoder,
            'queryEncoderType': self.query_encoder_type,
            'queryEncoder': self.query_encoder_template,
            'extraImports': list(self.extra_imports),
            'category': self.category,
            'enum': list(self.enum) if self.enum is not None else None,
            'enumValues': (
                list(self.enum_values) if self.enum_values is not None else None
            ),
            'doc': self.doc,
            'members': [m.to_dict() for m in self.members],
        }
        if self.is_reference:
            data['isReference'] = True
        return data


class ResolvedTypes(Sequence[CodecDescriptor]):
    """Ordered descriptors of one resolution run, indexed by type name.

    Example:
        >>> resolved = resolve_shapes({'Active': {'type': 'boolean'}})
        >>> resolved[0].type
        'Bool'
        >>> resolved.find_by_type('Bool').name
        'Active'
    """

    def __init__(self, descriptors: Sequence[CodecDescriptor]):
        self._descriptors: tuple[CodecDescriptor, ...] = tuple(descriptors)
        # Later descriptors win when several shapes render to the same type.
        self._by_type: dict[str, CodecDescriptor] = {
            d.type: d for d in self._descriptors
        }

    def find_by_type(self, type_name: str) -> CodecDescriptor | None:
        """Get the descriptor whose rendered type is ``type_name``."""
        return self._by_type.get(type_name)

    def to_dict(self) -> dict[str, Any]:
        return {'types': [d.to_dict() for d in self._descriptors]}

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __getitem__(self, index):
        return self._descriptors[index]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[CodecDescriptor]:
        return iter(self._descriptors)

    def __repr__(self) -> str:
        return f'ResolvedTypes({[d.name for d in self._descriptors]!r})'
