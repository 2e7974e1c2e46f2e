"""
Tests for the JSON Schema collaborator and its error formatting.
"""

import pytest

from rendergate.errors import SchemaConfigurationError
from rendergate.models.documents import RendererRegistry
from rendergate.validators.schema_validator import (
    RejectedDocument,
    SchemaIssue,
    SchemaValidator,
    ValidatedDocument,
)

SIMPLE_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
        "nested": {
            "type": "object",
            "additionalProperties": False,
            "properties": {"count": {"type": "integer"}},
        },
    },
}


class TestIssueFormatting:
    def test_root_path(self):
        issue = SchemaIssue(path=[], keyword="required", message="'name' is a required property")
        assert issue.format() == "(root) 'name' is a required property"

    def test_dotted_path(self):
        issue = SchemaIssue(path=["outputs", "determinism", "markers", 0], keyword="type", message="is not a string")
        assert issue.format() == "outputs.determinism.markers.0 is not a string"

    def test_additional_property_at_root(self):
        issue = SchemaIssue(
            path=[], keyword="additionalProperties", message="x", params={"additionalProperty": "extra"}
        )
        assert issue.format() == "extra is not allowed"

    def test_additional_property_nested(self):
        issue = SchemaIssue(
            path=["renderer"],
            keyword="additionalProperties",
            message="x",
            params={"additionalProperty": "owner"},
        )
        assert issue.format() == "renderer.owner is not allowed"


class TestSchemaValidator:
    def test_valid_document(self):
        check = SchemaValidator(SIMPLE_SCHEMA).check({"name": "web"})
        assert check.valid
        assert check.issues == []
        assert check.first_error is None

    def test_missing_required_property(self):
        check = SchemaValidator(SIMPLE_SCHEMA).check({})
        assert not check.valid
        assert check.issues[0].keyword == "required"
        assert check.first_error.startswith("(root) ")
        assert "name" in check.first_error

    def test_one_issue_per_extra_property(self):
        check = SchemaValidator(SIMPLE_SCHEMA).check({"name": "web", "alpha": 1, "beta": 2})
        assert sorted(check.formatted()) == ["alpha is not allowed", "beta is not allowed"]
        assert all(issue.keyword == "additionalProperties" for issue in check.issues)

    def test_nested_extra_property(self):
        check = SchemaValidator(SIMPLE_SCHEMA).check({"name": "web", "nested": {"count": 1, "other": True}})
        assert check.formatted() == ["nested.other is not allowed"]

    def test_collects_all_errors(self):
        check = SchemaValidator(SIMPLE_SCHEMA).check({"name": 3, "nested": {"count": "many"}})
        paths = [issue.dotted_path for issue in check.issues]
        assert paths == ["name", "nested.count"]

    def test_invalid_schema_raises(self):
        with pytest.raises(SchemaConfigurationError):
            SchemaValidator({"type": "not-a-type"}, "Broken schema")


class TestTaggedResult:
    def test_validated_document_is_typed(self, registry, registry_schema):
        result = SchemaValidator(registry_schema).validate_as(registry, RendererRegistry)
        assert isinstance(result, ValidatedDocument)
        assert isinstance(result.document, RendererRegistry)
        assert result.document.find("web-renderer", "2.3.0", "web") is not None

    def test_rejected_document_carries_issues(self, registry_schema):
        result = SchemaValidator(registry_schema).validate_as({"renderers": []}, RendererRegistry)
        assert isinstance(result, RejectedDocument)
        assert not result.check.valid
        assert "registry_version" in result.check.first_error

    def test_model_rejection_after_lenient_schema(self):
        lenient = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}
        result = SchemaValidator(lenient).validate_as({"renderers": []}, RendererRegistry)
        assert isinstance(result, RejectedDocument)
        assert result.check.issues[0].dotted_path == "registry_version"
