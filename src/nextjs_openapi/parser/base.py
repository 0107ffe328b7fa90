"""Route documentation models recovered from model replies.

Field names follow the JSON shape the prompt asks for, so a reply can be
validated directly into these models.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Parameter(BaseModel):
    """A single route parameter."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    param_type: str = Field(default="string", alias="type")
    location: str = Field(default="query", alias="in")  # path / query / body
    required: bool = False

    @field_validator("param_type", "location", mode="before")
    @classmethod
    def _default_when_null(cls, value, info):
        if value is None:
            return "string" if info.field_name == "param_type" else "query"
        return value


class Operation(BaseModel):
    """Documentation for one HTTP method of a route."""

    summary: str = ""
    description: str = ""
    parameters: list[Parameter] = []

    @field_validator("summary", "description", mode="before")
    @classmethod
    def _empty_when_null(cls, value):
        return "" if value is None else value

    @field_validator("parameters", mode="before")
    @classmethod
    def _no_parameters_when_null(cls, value):
        return [] if value is None else value


class RouteDocumentation(BaseModel):
    """Everything the model reported about one route file."""

    path: str
    description: str = ""
    methods: dict[str, Operation] = {}

    @field_validator("description", mode="before")
    @classmethod
    def _empty_when_null(cls, value):
        return "" if value is None else value

    @field_validator("methods", mode="before")
    @classmethod
    def _no_methods_when_null(cls, value):
        if value is None:
            return {}
        if isinstance(value, dict):
            return {method: {} if op is None else op for method, op in value.items()}
        return value
