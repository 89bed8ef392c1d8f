"""Assertion records derived from an expected response body.

A response body is walked depth-first and every scalar leaf becomes one
``AssertionRecord``. Records stay structured until a renderer turns them into
source lines, so conditions can rewrite them without touching generated text.
"""

import json
from dataclasses import dataclass
from typing import Any, Union

# str accessors index objects, int accessors index arrays
AccessorPath = tuple[Union[str, int], ...]


@dataclass(frozen=True)
class Equal:
    value: Any


@dataclass(frozen=True)
class Exists:
    key: str | int  # property expected on the record's (parent) path


@dataclass(frozen=True)
class Ignored:
    pass


@dataclass(frozen=True)
class Range:
    low: float
    high: float


AssertionKind = Union[Equal, Exists, Ignored, Range]


@dataclass(frozen=True)
class AssertionRecord:
    """One check against the response body.

    ``target`` is the leaf this record was built from and never changes;
    ``path`` is where the check is made, which differs from ``target`` once a
    KeyExist condition moves it to the parent.
    """

    target: AccessorPath
    path: AccessorPath
    kind: AssertionKind


def build_assertions(body: Any, path: AccessorPath = ()) -> list[AssertionRecord]:
    """Return one ``Equal`` record per scalar leaf of ``body``, depth-first."""
    if body is None or isinstance(body, (bool, int, float, str)):
        return [AssertionRecord(target=path, path=path, kind=Equal(body))]

    records: list[AssertionRecord] = []
    if isinstance(body, list):
        for index, item in enumerate(body):
            records.extend(build_assertions(item, path + (index,)))
    elif isinstance(body, dict):
        for key, value in body.items():
            records.extend(build_assertions(value, path + (str(key),)))
    else:
        raise TypeError(f"Unsupported value in response body at {render_path(path) or 'root'}: {type(body).__name__}")
    return records


def render_path(path: AccessorPath) -> str:
    """Bracket accessors, e.g. ``["data"]["users"][0]``."""
    parts = []
    for accessor in path:
        if isinstance(accessor, int):
            parts.append(f"[{accessor}]")
        else:
            parts.append(f"[{json.dumps(accessor, ensure_ascii=False)}]")
    return "".join(parts)
