"""Schema Validator — JSON Schema (draft 2020-12) checks for untyped documents.

Wraps ``jsonschema`` and turns its errors into structured SchemaIssues.
Documents that pass are upgraded to typed models; only a ValidatedDocument
may be handed to the semantic rules.
"""

import re
from typing import Any, Generic, Optional, TypeVar, Union

import jsonschema
from jsonschema.exceptions import ValidationError as JsonSchemaError
from pydantic import BaseModel, Field, ValidationError

from rendergate.errors import SchemaConfigurationError

ROOT_PATH = "(root)"

ModelT = TypeVar("ModelT", bound=BaseModel)


class SchemaIssue(BaseModel):
    """A single structural error reported by the schema collaborator."""

    path: list[Union[str, int]] = Field(default_factory=list)  # Instance path segments
    keyword: str
    message: str
    params: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def dotted_path(self) -> str:
        if not self.path:
            return ROOT_PATH
        return ".".join(str(segment) for segment in self.path)

    def format(self) -> str:
        """Render as ``<dotted.path> <message>``; extra properties read ``<path>.<name> is not allowed``."""
        if self.keyword == "additionalProperties" and self.params.get("additionalProperty"):
            extra = self.params["additionalProperty"]
            if not self.path:
                return f"{extra} is not allowed"
            return f"{self.dotted_path}.{extra} is not allowed"
        message = self.message or "is invalid"
        return f"{self.dotted_path} {message}".strip()


class SchemaCheck(BaseModel):
    """Boolean verdict plus every issue found."""

    valid: bool
    issues: list[SchemaIssue] = Field(default_factory=list)

    model_config = {"frozen": True}

    def formatted(self) -> list[str]:
        return [issue.format() for issue in self.issues]

    @property
    def first_error(self) -> Optional[str]:
        formatted = self.formatted()
        return formatted[0] if formatted else None


class ValidatedDocument(BaseModel, Generic[ModelT]):
    """A document that passed its schema and its typed model."""

    document: ModelT


class RejectedDocument(BaseModel):
    """A document that failed validation; carries the structural errors."""

    check: SchemaCheck


DocumentResult = Union[ValidatedDocument, RejectedDocument]


def _extra_properties(error: JsonSchemaError) -> list[str]:
    """Property names that triggered an additionalProperties error."""
    instance = error.instance
    schema = error.schema if isinstance(error.schema, dict) else {}
    if not isinstance(instance, dict):
        return []
    properties = schema.get("properties", {})
    patterns = schema.get("patternProperties", {})
    extras = []
    for name in instance:
        if name in properties:
            continue
        if any(re.search(pattern, name) for pattern in patterns):
            continue
        extras.append(name)
    return extras


def _issues_from_error(error: JsonSchemaError) -> list[SchemaIssue]:
    path = list(error.absolute_path)
    if error.validator == "additionalProperties":
        extras = _extra_properties(error)
        if extras:
            return [
                SchemaIssue(
                    path=path,
                    keyword="additionalProperties",
                    message="must NOT have additional properties",
                    params={"additionalProperty": extra},
                )
                for extra in extras
            ]
    return [
        SchemaIssue(
            path=path,
            keyword=str(error.validator),
            message=error.message,
        )
    ]


def _issue_sort_key(issue: SchemaIssue) -> tuple:
    return (len(issue.path), [str(segment) for segment in issue.path], issue.keyword, issue.message)


class SchemaValidator:
    """Compiled JSON Schema validator for one document kind.

    Contract:
        - check() collects all errors, never raises for invalid documents
        - issue order is deterministic (shallowest path first)
        - a broken schema raises SchemaConfigurationError at construction
    """

    def __init__(self, schema: dict, name: str = "schema"):
        self.name = name
        try:
            jsonschema.Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise SchemaConfigurationError(f"{name} is not a valid JSON Schema: {e.message}") from e
        self._validator = jsonschema.Draft202012Validator(schema)

    def check(self, document: Any) -> SchemaCheck:
        """Validate an untyped document against the schema."""
        issues: list[SchemaIssue] = []
        for error in self._validator.iter_errors(document):
            issues.extend(_issues_from_error(error))
        issues.sort(key=_issue_sort_key)
        return SchemaCheck(valid=not issues, issues=issues)

    def validate_as(self, document: Any, model: type[ModelT]) -> DocumentResult:
        """Schema-check a document and, when valid, upgrade it to ``model``.

        A schema-valid document the typed model still rejects is reported as
        a rejection, so the semantic rules only ever see typed documents.
        """
        check = self.check(document)
        if not check.valid:
            return RejectedDocument(check=check)
        try:
            typed = model.model_validate(document)
        except ValidationError as e:
            return RejectedDocument(check=SchemaCheck(valid=False, issues=issues_from_model_error(e)))
        return ValidatedDocument(document=typed)


def issues_from_model_error(error: ValidationError) -> list[SchemaIssue]:
    """Translate pydantic errors into SchemaIssues with the same path format."""
    return [
        SchemaIssue(
            path=list(detail.get("loc", ())),
            keyword=str(detail.get("type", "type")),
            message=str(detail.get("msg", "is invalid")),
        )
        for detail in error.errors()
    ]
