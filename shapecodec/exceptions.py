"""Custom exceptions for shapecodec.

This module defines a hierarchy of exceptions used throughout the shapecodec
library. Every resolution error is fatal: a run either resolves every shape or
raises one of these and produces nothing.
"""


class ShapecodecError(Exception):
    """Base exception for all shapecodec errors.

    All exceptions raised by shapecodec inherit from this class, making it easy
    to catch all shapecodec-related errors with a single except clause.

    Example:
        try:
            resolve_shapes(shapes)
        except ShapecodecError as e:
            print(f"shapecodec error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ShapeError(ShapecodecError):
    """Base exception for errors raised while resolving shapes."""

    pass


class UnknownShapeKindError(ShapeError):
    """A shape's kind has no resolution rule.

    Attributes:
        kind: The offending kind string.
        shape_description: JSON dump of the shape, for locating it in the
            source definition.
    """

    def __init__(self, kind: str | None, shape_description: str):
        self.kind = kind
        self.shape_description = shape_description
        super().__init__(
            f"Could not find type resolver for kind '{kind}': {shape_description}"
        )


class UnknownShapeReferenceError(ShapeError):
    """A shape reference names a shape absent from the registry.

    Attributes:
        reference: The raw shape name that could not be found.
        reason: Explanation of why the reference couldn't be resolved.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve shape reference '{reference}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class UnsupportedMapKeyTypeError(ShapeError):
    """A map's key resolves to something other than a string or an enum.

    Attributes:
        shape_name: Canonical name of the map shape.
        key_type: The resolved type of the key.
    """

    def __init__(self, shape_name: str | None, key_type: str):
        self.shape_name = shape_name
        self.key_type = key_type
        super().__init__(
            f"Unexpected map key type '{key_type}' in '{shape_name}', "
            "don't know how to decode"
        )


class CyclicShapeError(ShapeError):
    """A reference cycle passes through no structure and cannot be named.

    Attributes:
        cycle: Raw shape names forming the cycle, first name repeated last.
    """

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(
            f'Shape cycle without a structure cannot be resolved: '
            f'{" -> ".join(cycle)}'
        )


class DefinitionError(ShapecodecError):
    """Base exception for service-definition loading errors."""

    pass


class DefinitionLoadError(DefinitionError):
    """Failed to load a service definition from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load service definition from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class DefinitionValidationError(DefinitionError):
    """The loaded document is not a usable service definition.

    Attributes:
        source: The source path or URL of the invalid definition.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Service definition validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ConfigurationError(ShapecodecError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(ShapecodecError):
    """Error writing the resolved manifest.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
