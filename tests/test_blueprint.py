from apidoc_gen.generator.blueprint import render_blueprint
from apidoc_gen.model.base import ApiDescription, ApiDoc, QueryParameter

HOST = "https://api.gagogroup.cn/api"


def _monitor_doc() -> ApiDoc:
    return ApiDoc(
        group_name="Monitor",
        descriptions=[
            ApiDescription(
                description="获得所有用户信息",
                detail_description="获得所有用户信息，以数组的形式返回",
                method="GET",
                uri="/products?{pid}",
                query_parameters=[
                    QueryParameter(key="pid", example=5, type="number", description="产品的 ID"),
                ],
                request_headers={"token": "it-is-a-token"},
                response_body={
                    "data": {
                        "users": [
                            {"uid": 1, "displayName": "linxiaoyi"},
                            {"uid": 2, "displayName": "huangtaihu"},
                        ],
                    },
                },
            ),
        ],
    )


EXPECTED_MONITOR = """FORMAT: 1A
HOST: https://api.gagogroup.cn/api

# Group Monitor

## 获得所有用户信息 [/products?5]

### 获得所有用户信息，以数组的形式返回 [GET]

+ Parameters

    + pid: 5 (number, required) - 产品的 ID

+ Response 200 (application/json)

    + Body

            {
                "data": {
                    "users": [
                        {
                            "uid": 1,
                            "displayName": "linxiaoyi"
                        },
                        {
                            "uid": 2,
                            "displayName": "huangtaihu"
                        }
                    ]
                }
            }

"""


class TestRenderBlueprint:
    def test_monitor_document(self):
        assert render_blueprint(HOST, [_monitor_doc()]) == EXPECTED_MONITOR

    def test_header_only_without_docs(self):
        assert render_blueprint(HOST, []) == f"FORMAT: 1A\nHOST: {HOST}\n\n"

    def test_optional_parameter(self):
        doc = ApiDoc(group_name="Pigs", descriptions=[
            ApiDescription(
                description="Pig lengths",
                method="GET",
                uri="/pigs/{id}",
                query_parameters=[
                    QueryParameter(key="id", example=10, type="number", description="pig id"),
                    QueryParameter(key="type", example="length", type="string?", description="length or weight"),
                ],
            ),
        ])
        content = render_blueprint(HOST, [doc])
        assert "## Pig lengths [/pigs/10]\n\n### Pig lengths [GET]\n\n" in content
        assert "    + id: 10 (number, required) - pig id\n\n" in content
        assert "    + type: length (string, optional) - length or weight\n\n" in content

    def test_request_and_response_blocks(self):
        doc = ApiDoc(group_name="Users", descriptions=[
            ApiDescription(
                description="Create user",
                method="POST",
                uri="/users",
                request_body={"name": "linxiaoyi"},
                response_body={"uid": 1},
            ),
        ])
        content = render_blueprint(HOST, [doc])
        assert content.endswith(
            "### Create user [POST]\n\n"
            "+ Request (application/json)\n\n"
            "    + Body\n\n"
            "            {\n"
            '                "name": "linxiaoyi"\n'
            "            }\n\n"
            "+ Response 200 (application/json)\n\n"
            "    + Body\n\n"
            "            {\n"
            '                "uid": 1\n'
            "            }\n\n"
        )

    def test_sections_separated_by_one_blank_line(self):
        doc = ApiDoc(group_name="Users", descriptions=[
            ApiDescription(description="Ping", method="GET", uri="/ping", request_body={"a": 1}),
            ApiDescription(description="Pong", method="GET", uri="/pong"),
        ])
        content = render_blueprint(HOST, [doc])
        assert "\n\n\n" not in content
        assert "            }\n\n## Pong [/pong]" in content

    def test_multiple_groups(self):
        docs = [ApiDoc(group_name="A", descriptions=[]), ApiDoc(group_name="B", descriptions=[])]
        content = render_blueprint(HOST, docs)
        assert content.index("# Group A") < content.index("# Group B")
