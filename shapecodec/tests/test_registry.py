"""Test the shape registry and name assignment."""

import logging

import pytest

from shapecodec.exceptions import DefinitionValidationError, UnknownShapeReferenceError
from shapecodec.registry import ShapeRegistry, assign_names
from shapecodec.shapes import Shape

from .fixtures import QUEUE_SERVICE


class TestAssignNames:
    """Test assign_names function."""

    def test_names_are_upper_camel(self):
        """Test that canonical names upper-case the first letter."""
        named = assign_names({'tier': {'type': 'string'}, 'Count': {'type': 'integer'}})

        assert named['tier'].name == 'Tier'
        assert named['Count'].name == 'Count'

    def test_keeps_raw_keys_and_order(self):
        """Test that the raw keys and their order are preserved."""
        raw = {'b': {'type': 'string'}, 'a': {'type': 'string'}}
        assert list(assign_names(raw)) == ['b', 'a']

    def test_accepts_shape_models(self):
        """Test that Shape instances are accepted and not mutated."""
        shape = Shape(type='boolean')
        named = assign_names({'active': shape})

        assert named['active'].name == 'Active'
        assert named['active'].kind == 'boolean'
        assert shape.name is None

    def test_existing_name_is_overridden(self):
        """Test that the canonical name always comes from the raw key."""
        named = assign_names({'tier': {'type': 'string', 'name': 'Other'}})
        assert named['tier'].name == 'Tier'

    def test_name_collision_is_logged(self, caplog):
        """Test that two raw names sharing a canonical name log a warning."""
        with caplog.at_level(logging.WARNING, logger='shapecodec.registry'):
            named = assign_names(
                {
                    'foo': {'type': 'string', 'enum': ['A']},
                    'Foo': {'type': 'integer'},
                }
            )

        assert named['foo'].name == named['Foo'].name == 'Foo'
        assert named['Foo'].kind == 'integer'
        assert "Shapes 'foo' and 'Foo' share the name Foo" in caplog.text

    def test_distinct_names_do_not_warn(self, caplog):
        """Test that a definition without collisions logs no warning."""
        with caplog.at_level(logging.WARNING, logger='shapecodec.registry'):
            assign_names(QUEUE_SERVICE['shapes'])

        assert caplog.records == []

    def test_malformed_shape(self):
        """Test that an invalid raw shape raises DefinitionValidationError."""
        with pytest.raises(DefinitionValidationError) as exc_info:
            assign_names({'Items': {'type': 'list', 'member': 'B'}})

        assert exc_info.value.source == "shape 'Items'"
        assert exc_info.value.errors

    def test_fields_are_carried_over(self):
        """Test that every kind-specific field survives naming."""
        named = assign_names(QUEUE_SERVICE['shapes'])
        request = named['DescribeQueueRequest']

        assert request.kind == 'structure'
        assert request.required == ['QueueUrl']
        assert list(request.members) == ['QueueUrl', 'AttributeNames']
        assert named['AttributeNameList'].flattened is True
        assert named['QueueDoesNotExist'].exception is True


class TestShapeRegistry:
    """Test ShapeRegistry class."""

    @pytest.fixture
    def registry(self):
        return ShapeRegistry(QUEUE_SERVICE['shapes'])

    def test_get(self, registry):
        """Test lookup by raw name."""
        shape = registry.get('AttributeName')

        assert shape.name == 'AttributeName'
        assert shape.enum == ['All', 'VisibilityTimeout', 'CreatedTimestamp']

    def test_get_unknown(self, registry):
        """Test that unknown names raise UnknownShapeReferenceError."""
        with pytest.raises(UnknownShapeReferenceError) as exc_info:
            registry.get('Missing')

        assert exc_info.value.reference == 'Missing'
        assert 'Available shapes' in str(exc_info.value)

    def test_get_is_stable(self, registry):
        """Test that the canonical name is stable across lookups."""
        assert registry.get('TagList') is registry.get('TagList')
        assert registry.get('TagList').name == 'TagList'

    def test_container_protocol(self, registry):
        """Test len, contains and iteration."""
        assert len(registry) == len(QUEUE_SERVICE['shapes'])
        assert 'String' in registry
        assert 'Missing' not in registry
        assert [s.name for s in registry][0] == 'DescribeQueueRequest'
        assert registry.get_shape_names() == list(QUEUE_SERVICE['shapes'])

    def test_empty_registry(self):
        """Test that an empty registry is valid."""
        registry = ShapeRegistry({})
        assert len(registry) == 0
        assert registry.get_shape_names() == []
