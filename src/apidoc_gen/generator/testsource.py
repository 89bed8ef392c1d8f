"""Integration test source generated from API groups.

Two targets are supported:

- ``mocha``: TypeScript using supertest and chai, one ``describe`` per group
  and one callback-style ``it`` per endpoint.
- ``pytest``: Python using requests, one test class per group.

Every endpoint's response assertions come from ``build_checks``, so conditions
are resolved before any source is written. A bad condition aborts the whole
file.
"""

import json
import logging
import pprint
import re

from apidoc_gen.generator.assertions import AssertionRecord, Equal, Exists, Range, render_path
from apidoc_gen.generator.conditions import build_checks
from apidoc_gen.generator.uri import format_example, substitute_uri
from apidoc_gen.model.base import ApiDescription, ApiDoc

logger = logging.getLogger(__name__)

TARGETS = ("mocha", "pytest")

LICENSE_HEADER = (
    "// Copyright The apidoc-gen Authors. All rights reserved.\n"
    "// Use of this source code is governed by a license that can be found in the LICENSE file.\n"
    "//\n"
    "// The unit test is generated by apidoc-gen. Do not edit it by hand.\n\n"
)


def _js(value) -> str:
    return json.dumps(value, ensure_ascii=False)


class UnitTestRenderer:
    """Renders one test file per API group.

    Requests go to ``host`` when it is given. Otherwise the generated file
    declares a base URL initialised from ``base_url`` (and overridable through
    the ``API_BASE_URL`` environment variable when the tests run).
    """

    def __init__(self, host: str | None = None, base_url: str | None = None, target: str = "mocha"):
        if host is None and base_url is None:
            raise ValueError("Either host or base_url is required")
        if target not in TARGETS:
            raise ValueError(f"Unknown test target: {target}")
        self.host = host
        self.base_url = base_url
        self.target = target

    def file_name(self, doc: ApiDoc) -> str:
        if self.target == "pytest":
            return f"test_{_snake(doc.group_name)}_controller.py"
        return f"test-{_kebab(doc.group_name)}-controller.ts"

    def render(self, doc: ApiDoc) -> str:
        if self.target == "pytest":
            content = self._render_pytest(doc)
        else:
            content = self._render_mocha(doc)
        logger.debug("Rendered %s tests for %s (%d cases)", self.target, doc.group_name, len(doc.descriptions))
        return content

    def render_all(self, docs: list[ApiDoc]) -> dict[str, str]:
        """Returns {filename: source} for every group."""
        return {self.file_name(doc): self.render(doc) for doc in docs}

    # -- mocha ----------------------------------------------------------------

    def _render_mocha(self, doc: ApiDoc) -> str:
        content = LICENSE_HEADER
        content += 'import * as supertest from "supertest";\nimport * as chai from "chai";\n\n'
        if self.host is None:
            content += f"const url: string = process.env.API_BASE_URL || {_js(self.base_url)};\n\n"

        content += f"describe({_js(f'Test {doc.group_name} API')}, () => {{\n\n"
        for description in doc.descriptions:
            content += self._mocha_case(description)
        content += "});\n"
        return content

    def _mocha_case(self, description: ApiDescription) -> str:
        checks = build_checks(description)

        content = f"  it({_js(description.description)}, (done: MochaDone) => {{\n"
        if description.request_body is not None:
            pretty = json.dumps(description.request_body, indent=2, ensure_ascii=False)
            content += "    const request: any = " + pretty.replace("\n", "\n    ") + ";\n\n"

        target = _js(self.host) if self.host is not None else "url"
        uri = substitute_uri(description.uri, description.query_parameters)
        content += f"    supertest({target})\n"
        content += f"      .{description.method.lower()}({_js(uri)})\n"
        for key, value in (description.request_headers or {}).items():
            content += f"      .set({_js(key)}, {_js(value)})\n"
        if description.request_body is not None:
            content += "      .send(JSON.stringify(request))\n"

        content += "      .expect((res: supertest.Response)=> {\n"
        for record in checks:
            content += f"        {self._mocha_assertion(record)}\n"
        content += "      })\n"
        content += "      .expect(200, done);\n"
        content += "  });\n\n"
        return content

    def _mocha_assertion(self, record: AssertionRecord) -> str:
        subject = f"res.body{render_path(record.path)}"
        kind = record.kind
        if isinstance(kind, Equal):
            return f"chai.expect({subject}).to.equal({_js(kind.value)});"
        if isinstance(kind, Exists):
            return f"chai.expect({subject}).to.have.property({_js(str(kind.key))});"
        if isinstance(kind, Range):
            return (
                f"chai.expect({subject}).to.greaterThan({format_example(kind.low)})"
                f".and.lessThan({format_example(kind.high)});"
            )
        raise TypeError(f"Cannot render assertion kind {type(kind).__name__}")

    # -- pytest ---------------------------------------------------------------

    def _render_pytest(self, doc: ApiDoc) -> str:
        lines = [
            f'"""Integration tests for the {doc.group_name} API.',
            "",
            "Generated by apidoc-gen. Do not edit by hand.",
            '"""',
            "",
        ]
        if self.host is None:
            lines += ["import os", "", "import requests", "", f'BASE_URL = os.getenv("API_BASE_URL", {self.base_url!r})']
        else:
            lines += ["import requests", "", f"BASE_URL = {self.host!r}"]

        class_name = "".join(part.title() for part in _snake(doc.group_name).split("_")) + "Api"
        lines += ["", "", f"class Test{class_name}:", f'    """Test {doc.group_name} API"""']

        seen: set[str] = set()
        for description in doc.descriptions:
            lines += [""] + self._pytest_case(description, _test_name(description.description, seen))
        return "\n".join(lines) + "\n"

    def _pytest_case(self, description: ApiDescription, name: str) -> list[str]:
        checks = build_checks(description)

        lines = [f"    def {name}(self):", f"        {description.description!r}"]
        if description.request_body is not None:
            pretty = pprint.pformat(description.request_body, width=72, sort_dicts=False)
            lines.append("        request = " + pretty.replace("\n", "\n" + " " * 18))

        uri = substitute_uri(description.uri, description.query_parameters)
        lines += [f"        resp = requests.{description.method.lower()}(", f"            BASE_URL + {uri!r},"]
        if description.request_headers:
            lines.append(f"            headers={dict(description.request_headers)!r},")
        if description.request_body is not None:
            lines.append("            json=request,")
        lines.append("        )")

        if checks:
            lines.append("        body = resp.json()")
        lines += [f"        {self._pytest_assertion(record)}" for record in checks]
        lines.append("        assert resp.status_code == 200")
        return lines

    def _pytest_assertion(self, record: AssertionRecord) -> str:
        subject = f"body{render_path(record.path)}"
        kind = record.kind
        if isinstance(kind, Equal):
            if kind.value is None or isinstance(kind.value, bool):
                return f"assert {subject} is {kind.value!r}"
            return f"assert {subject} == {kind.value!r}"
        if isinstance(kind, Exists):
            if isinstance(kind.key, int):
                return f"assert len({subject}) > {kind.key}"
            return f"assert {kind.key!r} in {subject}"
        if isinstance(kind, Range):
            return f"assert {format_example(kind.low)} < {subject} < {format_example(kind.high)}"
        raise TypeError(f"Cannot render assertion kind {type(kind).__name__}")


def _kebab(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip()).lower()


def _snake(name: str) -> str:
    return re.sub(r"\W+", "_", name).strip("_").lower() or "default"


def _test_name(description: str, seen: set[str]) -> str:
    base = "test_" + _snake(description)
    name = base
    n = 2
    while name in seen:
        name = f"{base}_{n}"
        n += 1
    seen.add(name)
    return name
