"""Document model describing API groups and their expected exchanges.

Both renderers consume these models read-only. Field names are snake_case;
the camelCase aliases (``groupName``, ``keyPath`` ...) are accepted on input
and used when serializing.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, JsonValue, field_validator, model_validator
from pydantic.alias_generators import to_camel

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


class ConditionType(str, Enum):
    """How an assertion on a response leaf is rewritten."""

    VALUE_EQUAL = "ValueEqual"
    KEY_EXIST = "KeyExist"
    IGNORE = "Ignore"
    VALUE_RANGE = "ValueRange"


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class QueryParameter(_Model):
    """A documented parameter; its example also fills ``{key}`` in the URI."""

    key: str
    example: str | int | float
    type: str  # "number", or "number?" when optional
    description: str = ""

    @property
    def optional(self) -> bool:
        return self.type.endswith("?")

    @property
    def type_name(self) -> str:
        return self.type[:-1] if self.optional else self.type


class Condition(_Model):
    """Override for the assertion generated at ``key_path`` in the response body."""

    key_path: str  # data/users/0/uid
    type: str
    value_range: tuple[float, float] | None = None

    @model_validator(mode="after")
    def _check_range(self) -> "Condition":
        if self.type == ConditionType.VALUE_RANGE.value:
            if self.value_range is None:
                raise ValueError("ValueRange condition requires value_range")
            low, high = self.value_range
            if not low < high:
                raise ValueError(f"value_range lower bound must be below upper bound, got {low}, {high}")
        return self


class ApiDescription(_Model):
    """One endpoint with its expected request and response."""

    description: str
    detail_description: str | None = None
    method: str
    uri: str  # /products?{pid}
    query_parameters: list[QueryParameter] | None = None
    request_headers: dict[str, str] | None = None
    request_body: JsonValue = None
    response_body: JsonValue = None
    additional_conditions: list[Condition] | None = None

    @field_validator("description")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be empty")
        return value

    @field_validator("method")
    @classmethod
    def _known_method(cls, value: str) -> str:
        method = value.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method: {value}")
        return method


class ApiDoc(_Model):
    """A group of endpoints, usually one controller."""

    group_name: str
    descriptions: list[ApiDescription]

    @field_validator("group_name")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("group_name must not be empty")
        return value
