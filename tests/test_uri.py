from apidoc_gen.generator.uri import format_example, substitute_uri
from apidoc_gen.model.base import QueryParameter


def _param(key, example):
    return QueryParameter(key=key, example=example, type="number")


class TestSubstituteUri:
    def test_substitutes_example(self):
        assert substitute_uri("/products?{pid}", [_param("pid", 5)]) == "/products?5"

    def test_no_matching_placeholder(self):
        assert substitute_uri("/products", [_param("pid", 5)]) == "/products"

    def test_no_parameters(self):
        assert substitute_uri("/products/{pid}", None) == "/products/{pid}"

    def test_only_first_occurrence(self):
        assert substitute_uri("/a/{id}/b/{id}", [_param("id", 3)]) == "/a/3/b/{id}"

    def test_parameters_applied_in_order(self):
        uri = substitute_uri("/farms/{farm}/pigs/{pig}", [_param("pig", 9), _param("farm", "east")])
        assert uri == "/farms/east/pigs/9"


class TestFormatExample:
    def test_integral_float(self):
        assert format_example(5.0) == "5"

    def test_fractional_float(self):
        assert format_example(2.5) == "2.5"

    def test_string(self):
        assert format_example("length") == "length"
