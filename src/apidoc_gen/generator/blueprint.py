"""API Blueprint (format 1A) rendering of API groups."""

import json
import logging
import textwrap
from typing import Any

from apidoc_gen.generator.uri import format_example, substitute_uri
from apidoc_gen.model.base import ApiDescription, ApiDoc, QueryParameter

logger = logging.getLogger(__name__)

BODY_INDENT = " " * 12


def render_blueprint(host: str, docs: list[ApiDoc]) -> str:
    """Render all groups into one Blueprint document."""
    content = f"FORMAT: 1A\nHOST: {host}\n\n"
    for doc in docs:
        content += f"# Group {doc.group_name}\n\n"
        for description in doc.descriptions:
            content += _render_description(description)
        logger.debug("Rendered blueprint group %s (%d endpoints)", doc.group_name, len(doc.descriptions))
    return content


def _render_description(description: ApiDescription) -> str:
    uri = substitute_uri(description.uri, description.query_parameters)
    title = description.detail_description or description.description
    sections = [
        f"## {description.description} [{uri}]",
        f"### {title} [{description.method}]",
    ]

    if description.query_parameters:
        sections.append(_parameters_block(description.query_parameters))
    if description.request_body is not None:
        sections.append(_body_block("+ Request (application/json)", description.request_body))
    if description.response_body is not None:
        sections.append(_body_block("+ Response 200 (application/json)", description.response_body))

    return "\n\n".join(sections) + "\n\n"


def _parameters_block(params: list[QueryParameter]) -> str:
    """Parameter list, e.g.::

        + Parameters

            + id: 10 (number, required) - object id
            + type: length (string, optional) - length or weight
    """
    lines = ["+ Parameters"]
    for param in params:
        requirement = "optional" if param.optional else "required"
        lines.append(
            f"    + {param.key}: {format_example(param.example)} "
            f"({param.type_name}, {requirement}) - {param.description}"
        )
    return "\n\n".join(lines)


def _body_block(title: str, body: Any) -> str:
    pretty = json.dumps(body, indent=4, ensure_ascii=False)
    return f"{title}\n\n    + Body\n\n{textwrap.indent(pretty, BODY_INDENT)}"
