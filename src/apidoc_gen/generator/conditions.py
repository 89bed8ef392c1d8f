"""Rewrite generated assertions with path-keyed conditions."""

import logging
from dataclasses import replace
from typing import Any

from apidoc_gen.errors import KeyPathError, UnknownConditionKind
from apidoc_gen.generator.assertions import (
    AccessorPath,
    AssertionRecord,
    Equal,
    Exists,
    Ignored,
    Range,
    build_assertions,
)
from apidoc_gen.model.base import ApiDescription, Condition, ConditionType

logger = logging.getLogger(__name__)


def resolve_key_path(body: Any, key_path: str) -> tuple[AccessorPath, Any]:
    """Walk ``key_path`` (``data/users/0/uid``) through ``body``.

    Returns the accessor path and the value found there. Segments address
    array elements by decimal index and objects by key.
    """
    node = body
    path: list[str | int] = []
    for segment in key_path.split("/"):
        if isinstance(node, list):
            if not segment.isdigit() or int(segment) >= len(node):
                raise KeyPathError(body, key_path)
            accessor: str | int = int(segment)
        elif isinstance(node, dict):
            if segment not in node:
                raise KeyPathError(body, key_path)
            accessor = segment
        else:
            raise KeyPathError(body, key_path)
        node = node[accessor]
        path.append(accessor)
    return tuple(path), node


def apply_conditions(
    body: Any,
    records: list[AssertionRecord],
    conditions: list[Condition] | None,
) -> list[AssertionRecord]:
    """Apply ``conditions`` in order and return the surviving records.

    Each condition edits the records as the earlier ones left them. A record
    marked ``Ignored`` is final: later conditions on its path leave it alone and
    it is dropped from the result. ``ValueRange`` only rewrites equality or
    range checks, so it does not undo an earlier ``KeyExist``. ``ValueRange`` on
    an object or array has no leaf to bound; it is logged as a warning and has
    no effect.
    """
    records = list(records)
    for condition in conditions or []:
        path, node = resolve_key_path(body, condition.key_path)
        try:
            kind = ConditionType(condition.type)
        except ValueError:
            raise UnknownConditionKind(condition.type) from None

        logger.debug("Applying %s to %s", kind.value, condition.key_path)

        if kind is ConditionType.VALUE_EQUAL:
            continue
        if kind is ConditionType.IGNORE:
            records = [
                replace(r, kind=Ignored()) if _under(r.target, path) else r
                for r in records
            ]
        elif kind is ConditionType.KEY_EXIST:
            records = _key_exist(records, path)
        elif kind is ConditionType.VALUE_RANGE:
            if isinstance(node, (dict, list)):
                logger.warning("ValueRange on non-leaf '%s' skipped", condition.key_path)
                continue
            low, high = condition.value_range
            records = [
                replace(r, kind=Range(low, high))
                if r.target == path and isinstance(r.kind, (Equal, Range)) else r
                for r in records
            ]

    return [r for r in records if not isinstance(r.kind, Ignored)]


def build_checks(description: ApiDescription) -> list[AssertionRecord]:
    """Assertions for one endpoint's response, with its conditions applied."""
    body = description.response_body
    records = build_assertions(body) if body is not None else []
    return apply_conditions(body, records, description.additional_conditions)


def _under(target: AccessorPath, path: AccessorPath) -> bool:
    return target[: len(path)] == path


def _key_exist(records: list[AssertionRecord], path: AccessorPath) -> list[AssertionRecord]:
    """Collapse everything at or below ``path`` into one existence check on its parent.

    Ignored records stay ignored. When every record under ``path`` was ignored
    no check is added; one is appended only for a container without leaves.
    """
    check = AssertionRecord(target=path, path=path[:-1], kind=Exists(path[-1]))
    result = []
    matched = False
    placed = False
    for record in records:
        if not _under(record.target, path):
            result.append(record)
            continue
        matched = True
        if isinstance(record.kind, Ignored):
            result.append(record)
        elif not placed:
            # keep the leaf's own target so later conditions still find it
            result.append(replace(check, target=record.target))
            placed = True
    if not matched:
        result.append(check)
    return result
