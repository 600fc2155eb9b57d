import re

import pytest
from jsonpath_rfc9535 import (NOTHING, ExpressionType, FilterFunction,
                              JSONPathEnvironment, JSONPathNameError,
                              JSONPathTypeError, compile)
from jsonpath_rfc9535.function_extensions import (Length, Match, Search,
                                                  map_iregexp)


class StartsWith(FilterFunction):
    arg_types = (ExpressionType.value, ExpressionType.value)
    return_type = ExpressionType.logical

    def __call__(self, value, prefix):
        return (isinstance(value, str) and isinstance(prefix, str) and
                value.startswith(prefix))


class Negate(FilterFunction):
    arg_types = (ExpressionType.logical,)
    return_type = ExpressionType.logical

    def __call__(self, value):
        return not value


class HasDigit(FilterFunction):
    arg_types = (ExpressionType.value,)
    return_type = ExpressionType.logical

    def __call__(self, value):
        return isinstance(value, str) and re.search(r"\d", value)


class Children(FilterFunction):
    arg_types = (ExpressionType.nodes,)
    return_type = ExpressionType.nodes

    def __call__(self, nodes):
        return [node for node in nodes]


def test_length():
    data = ["ab", "abc", [1, 2, 3], {"a": 1}, 5, None]
    assert compile("$[?length(@) > 2]").values(data) == ["abc", [1, 2, 3]]
    assert compile("$[?length(@) == 1]").values(data) == [{"a": 1}]


def test_length_values():
    length = Length()
    assert length("caf\u00e9") == 4
    assert length([]) == 0
    assert length({"a": 1, "b": 2}) == 2
    assert length(5) is NOTHING
    assert length(True) is NOTHING
    assert length(None) is NOTHING
    assert length(NOTHING) is NOTHING


def test_count():
    data = [[1, 2], [1], {"a": 1, "b": 2}, 7]
    assert compile("$[?count(@.*) == 2]").values(data) == [
        [1, 2], {"a": 1, "b": 2}
    ]
    assert compile("$[?count(@.*) == 0]").values(data) == [7]


def test_value():
    data = [
        {"color": "red"},
        {"x": {"color": "red"}},
        {"color": "red", "x": {"color": "blue"}},
    ]
    path = compile("$[?value(@..color) == 'red']")
    assert path.values(data) == data[:2]


def test_match():
    data = [{"d": "1974-05-01"}, {"d": "1974-05-011"}, {"d": "1974-06-01"}]
    path = compile("$[?match(@.d, '1974-05-..')]")
    assert path.values(data) == [{"d": "1974-05-01"}]


def test_search():
    data = [{"b": "jazz"}, {"b": "king"}, {"b": "bop"}, {"b": 1}]
    path = compile("$[?search(@.b, '[jk]')]")
    assert path.values(data) == [{"b": "jazz"}, {"b": "king"}]
    path = compile("$[?!search(@.b, '[jk]')]")
    assert path.values(data) == [{"b": "bop"}, {"b": 1}]


def test_anchors_are_literal():
    assert Match()("a^b", "a^b")
    assert Match()("$", "$")
    assert not Search()("ab", "^a")
    assert Search()("x^ay", "^a")
    assert not Match()("a", "a$")


def test_dot_excludes_line_breaks():
    assert Match()("x", ".")
    assert not Match()("\n", ".")
    assert not Match()("\r", ".")
    assert Match()(".", "[.]")


def test_non_string_arguments():
    assert not Match()(1, "1")
    assert not Match()("a", 1)
    assert not Match()(NOTHING, "a")
    assert not Search()(None, "a")
    assert not Search()(["a"], "a")
    assert not Match(raise_errors=True)(1, "(")
    assert not Match(raise_errors=True)("a", None)
    assert not Search(raise_errors=True)("a", 1)
    assert not Search(raise_errors=True)(NOTHING, "[")


def test_non_string_arguments_in_query():
    env = JSONPathEnvironment(raise_regex_errors=True)
    assert env.compile("$[?match(@.x, '(')]").values([{"x": 1}]) == []
    assert env.compile("$[?search(@.x, '[')]").values([{}]) == []


def test_invalid_pattern():
    assert not Match()("a", "(")
    assert not Search()("a", "[")
    with pytest.raises(re.error):
        Match(raise_errors=True)("a", "(")


def test_invalid_pattern_in_query():
    assert compile("$[?match(@, '(')]").values(["a", "("]) == []

    env = JSONPathEnvironment(raise_regex_errors=True)
    path = env.compile("$[?match(@, '(')]")
    with pytest.raises(re.error):
        path.find(["a"])


def test_regex_cache():
    match = Match(cache_size=2)
    assert match("a", "a")
    compiled = match.cache.get("a")
    assert match("aa", "a+")
    assert match("a", "a")
    assert match.cache.get("a") is compiled
    assert match("b", "b")
    assert match.cache.keys() == ["a", "b"]


def test_regex_cache_disabled():
    match = Match(cache_size=0)
    assert match("a", "a")
    assert len(match.cache) == 0


def test_regex_cache_size_from_environment():
    env = JSONPathEnvironment(regex_cache_size=3)
    assert env.function_extensions["match"].cache.capacity == 3
    assert env.function_extensions["search"].cache.capacity == 3


def test_custom_function():
    env = JSONPathEnvironment()
    env.function_extensions["startswith"] = StartsWith()
    path = env.compile("$[?startswith(@, 'ab')]")
    assert path.values(["abc", "xab", 1, "ab"]) == ["abc", "ab"]


def test_custom_function_logical_argument():
    env = JSONPathEnvironment()
    env.function_extensions["negate"] = Negate()
    data = [{"a": 1}, {"b": 2}, {"a": 2}]
    assert env.compile("$[?negate(@.a)]").values(data) == [{"b": 2}]
    assert env.compile("$[?negate(@.a == 1)]").values(data) == [
        {"b": 2}, {"a": 2}
    ]


def test_logical_result_not_comparable():
    env = JSONPathEnvironment()
    env.function_extensions["startswith"] = StartsWith()
    with pytest.raises(JSONPathTypeError):
        env.compile("$[?startswith(@, 'a') == true]")


def test_custom_function_table():
    env = JSONPathEnvironment(function_extensions={"negate": Negate()})
    assert env.compile("$[?negate(@.a)]").values([{"a": 1}, {}]) == [{}]
    with pytest.raises(JSONPathNameError):
        env.compile("$[?length(@) == 1]")


def test_map_iregexp():
    assert map_iregexp("a.b") == "a[^\\n\\r]b"
    assert map_iregexp("[.^$]") == "[.^$]"
    assert map_iregexp("\\.") == "\\."
    assert map_iregexp("^a$") == "\\^a\\$"
    assert map_iregexp("[a\\]^]^") == "[a\\]^]\\^"


def test_truthy_logical_result():
    env = JSONPathEnvironment()
    env.function_extensions["hasdigit"] = HasDigit()
    path = env.compile("$[?hasdigit(@)]")
    assert path.values(["a1", "b", 3, "22"]) == ["a1", "22"]


def test_plain_list_nodes_result():
    env = JSONPathEnvironment()
    env.function_extensions["children"] = Children()
    data = [[1], [], {"a": 1}, {}]
    assert env.compile("$[?children(@.*)]").values(data) == [[1], {"a": 1}]
