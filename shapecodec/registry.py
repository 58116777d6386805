"""Shape registry for looking up shapes during resolution.

This module provides the ShapeRegistry class, which assigns every shape its
canonical type name up front and serves lookups by raw shape name while the
resolver walks the shape graph.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from shapecodec.exceptions import DefinitionValidationError, UnknownShapeReferenceError
from shapecodec.naming import up_cam
from shapecodec.shapes import Shape

logger = logging.getLogger(__name__)


def assign_names(shapes: Mapping[str, Shape | Mapping[str, Any]]) -> dict[str, Shape]:
    """Return a copy of ``shapes`` where every shape carries its canonical name.

    Two raw names that differ only in the case of their first letter end up
    with the same canonical name. Both shapes are kept and a warning is
    logged, since the rendered types will clash.

    Args:
        shapes: Mapping of raw shape name to shape, with or without names.

    Returns:
        Mapping of raw shape name to Shape with ``name`` set to the
        upper-camel-cased raw name, in the input order.

    Raises:
        DefinitionValidationError: If a raw shape is not a valid shape.
    """
    named: dict[str, Shape] = {}
    owners: dict[str, str] = {}
    for raw_name, shape in shapes.items():
        if not isinstance(shape, Shape):
            try:
                shape = Shape.model_validate(shape)
            except ValidationError as e:
                raise DefinitionValidationError(
                    f'shape {raw_name!r}', errors=[err['msg'] for err in e.errors()]
                ) from e

        name = up_cam(raw_name)
        if name in owners:
            logger.warning(
                f'Shapes {owners[name]!r} and {raw_name!r} share the name {name}'
            )
        else:
            owners[name] = raw_name
        named[raw_name] = shape.model_copy(update={'name': name})
    return named


class ShapeRegistry:
    """Registry of named shapes, keyed by raw shape name.

    Names are assigned once when the registry is built, before any resolution
    starts, so every lookup of the same raw name yields the same canonical
    name.

    Example:
        >>> registry = ShapeRegistry({'tier': {'type': 'string'}})
        >>> registry.get('tier').name
        'Tier'
    """

    def __init__(self, shapes: Mapping[str, Shape | Mapping[str, Any]]):
        """Initialize the registry.

        Args:
            shapes: Mapping of raw shape name to shape definition.
        """
        self._shapes: dict[str, Shape] = assign_names(shapes)

    def get(self, raw_name: str) -> Shape:
        """Get a shape by its raw name.

        Args:
            raw_name: The raw shape name, as used in shape references.

        Returns:
            The named Shape.

        Raises:
            UnknownShapeReferenceError: If no shape has that name.
        """
        try:
            return self._shapes[raw_name]
        except KeyError:
            available = ', '.join(sorted(self._shapes)[:10])
            if len(self._shapes) > 10:
                available += f', ... ({len(self._shapes)} total)'
            raise UnknownShapeReferenceError(
                raw_name, f'Shape not found. Available shapes: {available}'
            ) from None

    def get_shape_names(self) -> list[str]:
        """Get all raw shape names, in definition order."""
        return list(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes.values())

    def __contains__(self, raw_name: str) -> bool:
        return raw_name in self._shapes
