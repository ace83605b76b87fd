import pytest

from idl_endpoint.parser.base import Endpoint, Method, PathVariable, Segment, Variable, VariableType
from idl_endpoint.parser.endpoint import parse_endpoint
from idl_endpoint.parser.errors import EndpointSyntaxError, ParseError, UnsupportedTypeError

REGISTER_PATH = [
    Segment(literal="register"),
    PathVariable(name="id", type=VariableType.STRING),
]
REGISTER_PARAMS = [
    Variable(name="type", type=VariableType.STRING),
    Variable(name="order", type=VariableType.STRING),
]


class TestParseEndpoint:
    def test_endpoint(self):
        ep = parse_endpoint("GET /register/{id:string}?type:string&order:string RQ -> RS")
        assert ep == Endpoint(
            method=Method.GET,
            path=REGISTER_PATH,
            query_params=REGISTER_PARAMS,
            request_type="RQ",
            response_type="RS",
        )

    def test_endpoint_without_type_clause(self):
        ep = parse_endpoint("GET /register/{id:string}?type:string&order:string ")
        assert ep == Endpoint(
            method=Method.GET,
            path=REGISTER_PATH,
            query_params=REGISTER_PARAMS,
            request_type=None,
            response_type=None,
        )

    def test_endpoint_without_query_params(self):
        ep = parse_endpoint("GET /register/{id:string} RQ -> RS")
        assert ep.path == REGISTER_PATH
        assert ep.query_params == []
        assert ep.request_type == "RQ"
        assert ep.response_type == "RS"

    def test_post_with_int_variable(self):
        ep = parse_endpoint("POST /x/{n:int}")
        assert ep == Endpoint(
            method=Method.POST,
            path=[Segment(literal="x"), PathVariable(name="n", type=VariableType.INT)],
        )

    def test_multiple_path_variables(self):
        ep = parse_endpoint("GET /register/{id:string}/{field:string}?type:string&order:string RQ -> RS")
        assert [p.kind for p in ep.path] == ["segment", "variable", "variable"]
        assert ep.path[2].name == "field"

    @pytest.mark.parametrize(
        "verb, expected",
        [
            ("GET", Method.GET),
            ("post", Method.POST),
            ("Put", Method.PUT),
            ("dElEtE", Method.DELETE),
        ],
    )
    def test_method_any_case(self, verb, expected):
        assert parse_endpoint(f"{verb} /x").method is expected

    def test_variable_type_any_case(self):
        ep = parse_endpoint("GET /x/{a:LONG}?b:Double&c:FLOAT&d:short")
        assert ep.path[1].type is VariableType.LONG
        assert [p.type for p in ep.query_params] == [VariableType.DOUBLE, VariableType.FLOAT, VariableType.SHORT]

    def test_segments_keep_literal_text(self):
        ep = parse_endpoint("GET /api/v1/user-profile")
        assert [p.literal for p in ep.path] == ["api", "v1", "user-profile"]


class TestParseEndpointErrors:
    @pytest.mark.parametrize("text", ["PATCH /x", "HEAD /x", "OPTIONS /x"])
    def test_unknown_method(self, text):
        with pytest.raises(EndpointSyntaxError):
            parse_endpoint(text)

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedTypeError):
            parse_endpoint("GET /x/{n:integer}")

    def test_unsupported_query_param_type(self):
        with pytest.raises(UnsupportedTypeError):
            parse_endpoint("GET /x?n:uuid")

    def test_invalid_type_shape_is_syntax_error(self):
        with pytest.raises(EndpointSyntaxError):
            parse_endpoint("GET /x/{n:9int}")

    def test_empty_path(self):
        with pytest.raises(EndpointSyntaxError):
            parse_endpoint("GET /")

    def test_all_errors_are_parse_errors(self):
        for text in ("PATCH /x", "GET /x/{n:integer}"):
            with pytest.raises(ParseError):
                parse_endpoint(text)
