"""Test suite for shapecodec exceptions."""

import pytest

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


class TestShapecodecError:
    """Tests for the base ShapecodecError exception."""

    def test_basic_message(self):
        """Test that the error stores the message."""
        error = ShapecodecError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    def test_can_be_caught_as_exception(self):
        """Test that the error can be caught as a generic Exception."""
        with pytest.raises(Exception):
            raise ShapecodecError('Test error')


class TestShapeErrors:
    """Tests for resolution errors."""

    @pytest.mark.parametrize(
        'error',
        [
            UnknownShapeKindError('character', '{"type":"character"}'),
            UnknownShapeReferenceError('Missing'),
            UnsupportedMapKeyTypeError('Lookup', 'Bool'),
            CyclicShapeError(['Loop', 'Loop']),
        ],
    )
    def test_inheritance(self, error):
        """Test that every resolution error is a ShapeError."""
        assert isinstance(error, ShapeError)
        assert isinstance(error, ShapecodecError)

    def test_unknown_shape_kind(self):
        """Test UnknownShapeKindError carries the shape description."""
        error = UnknownShapeKindError('character', '{"type":"character"}')

        assert error.kind == 'character'
        assert error.shape_description == '{"type":"character"}'
        assert '{"type":"character"}' in str(error)

    def test_unknown_shape_reference(self):
        """Test UnknownShapeReferenceError with and without a reason."""
        error = UnknownShapeReferenceError('Missing', reason='Shape not found')

        assert error.reference == 'Missing'
        assert error.reason == 'Shape not found'
        assert "'Missing'" in str(error)
        assert 'Shape not found' in str(error)
        assert UnknownShapeReferenceError('Missing').reason is None

    def test_unsupported_map_key_type(self):
        """Test UnsupportedMapKeyTypeError."""
        error = UnsupportedMapKeyTypeError('Lookup', 'Bool')

        assert error.shape_name == 'Lookup'
        assert error.key_type == 'Bool'
        assert 'Bool' in str(error)

    def test_cyclic_shape(self):
        """Test CyclicShapeError renders the cycle."""
        error = CyclicShapeError(['Outer', 'Inner', 'Outer'])

        assert error.cycle == ['Outer', 'Inner', 'Outer']
        assert 'Outer -> Inner -> Outer' in str(error)


class TestDefinitionErrors:
    """Tests for definition loading errors."""

    def test_load_error_with_cause(self):
        """Test DefinitionLoadError with a cause exception."""
        cause = ConnectionError('Network unavailable')
        error = DefinitionLoadError('https://example.com/sqs.json', cause=cause)

        assert isinstance(error, DefinitionError)
        assert error.source == 'https://example.com/sqs.json'
        assert error.cause is cause
        assert 'Network unavailable' in str(error)

    def test_validation_error(self):
        """Test DefinitionValidationError with and without details."""
        error = DefinitionValidationError('./sqs.json', errors=['bad members'])

        assert error.errors == ['bad members']
        assert 'bad members' in str(error)
        assert DefinitionValidationError('./sqs.json').errors == []


class TestOtherErrors:
    """Tests for configuration and output errors."""

    def test_configuration_error(self):
        """Test ConfigurationError with path and field."""
        error = ConfigurationError(
            'Invalid value', config_path='shapecodec.yaml', field='services'
        )

        assert error.config_path == 'shapecodec.yaml'
        assert error.field == 'services'
        assert "in 'shapecodec.yaml'" in str(error)
        assert '(field: services)' in str(error)

    def test_output_error(self):
        """Test OutputError."""
        cause = PermissionError('Permission denied')
        error = OutputError('/readonly/shapes.json', cause=cause)

        assert error.output_path == '/readonly/shapes.json'
        assert 'Permission denied' in str(error)
