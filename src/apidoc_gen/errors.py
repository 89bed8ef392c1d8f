"""Errors raised while loading or rendering API documents."""

from typing import Any


class ApiDocError(Exception):
    """Base class for all apidoc-gen failures."""


class KeyPathError(ApiDocError):
    """A condition's key path does not resolve inside the response body."""

    def __init__(self, body: Any, key_path: str):
        self.body = body
        self.key_path = key_path
        super().__init__(f"Key path '{key_path}' not found in response body: {body!r}")


class UnknownConditionKind(ApiDocError):
    """A condition carries a type that is not one of the known kinds."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown condition type: {kind!r}")


class DocumentFormatError(ApiDocError):
    """The input document does not contain API groups in a known shape."""
