"""Specification assembler — folds route documentation into one OpenAPI document."""

from pydantic import BaseModel, Field

from nextjs_openapi.parser.base import Operation, Parameter, RouteDocumentation

OPENAPI_VERSION = "3.0.0"
API_TITLE = "Next.js API Documentation"
API_VERSION = "1.0.0"


class SpecificationDocument(BaseModel):
    """The OpenAPI document as written to disk."""

    openapi: str = OPENAPI_VERSION
    info: dict = Field(default_factory=lambda: {"title": API_TITLE, "version": API_VERSION})
    paths: dict[str, dict[str, dict]] = {}


def standard_responses() -> dict:
    """Response placeholders attached to every operation."""
    return {
        "200": {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "schema": {"type": "object", "description": "Response data"},
                },
            },
        },
        "400": {"description": "Bad request", "content": _error_content()},
        "500": {"description": "Internal server error", "content": _error_content()},
    }


def render_parameter(param: Parameter) -> dict:
    return {
        "name": param.name,
        "in": param.location,
        "required": param.required,
        "schema": {"type": param.param_type},
    }


def render_operation(operation: Operation) -> dict:
    return {
        "summary": operation.summary,
        "description": operation.description,
        "parameters": [render_parameter(p) for p in operation.parameters],
        "responses": standard_responses(),
    }


class SpecAssembler:
    """Single owner of the growing specification document.

    A route whose path is already present replaces the earlier entry
    entirely; methods are never merged across routes.
    """

    def __init__(self):
        self.document = SpecificationDocument()

    def add(self, doc: RouteDocumentation) -> None:
        path_item = {}
        for method, operation in doc.methods.items():
            path_item[method.lower()] = render_operation(operation)
        self.document.paths[doc.path] = path_item

    def build(self) -> SpecificationDocument:
        return self.document


def _error_content() -> dict:
    return {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {"error": {"type": "string"}},
            },
        },
    }
