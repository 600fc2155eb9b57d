from jsonpath_rfc9535 import (JSONPathEnvironment, NodeList, compile, find,
                              finditer, normalized_path)
from jsonpath_rfc9535.segments import descendants
from jsonpath_rfc9535.node import JSONPathNode


def test_empty_path_returns_root():
    data = {"a": 1}
    nodes = compile("$").find(data)
    assert len(nodes) == 1
    assert nodes[0].value is data
    assert nodes[0].location == ()
    assert nodes[0].path() == "$"


def test_find_returns_node_list():
    nodes = find("$.a", {"a": 1})
    assert isinstance(nodes, NodeList)
    assert nodes.values() == [1]
    assert nodes.paths() == ["$['a']"]
    assert not nodes.empty()
    assert find("$.b", {"a": 1}).empty()


def test_reverse_slice():
    assert compile("$[::-1]").values([0, 1, 2, 3]) == [3, 2, 1, 0]


def test_key():
    domain = {
        "foo": 10,
        "bar": 20,
        "baz": [1, 2, 3],
        "husk:stats": 30
    }
    assert compile("$.foo").values(domain) == [10]
    assert compile("$['bar']").values(domain) == [20]
    assert compile("$.baz").values(domain) == [[1, 2, 3]]
    assert compile("$['husk:stats']").values(domain) == [30]
    assert compile("$.bazz").values(domain) == []


def test_index():
    domain = {
        "foo": [5, 7, 10],
    }
    assert compile("$.foo[1]").values(domain) == [7]
    assert compile("$.foo[-1]").values(domain) == [10]
    assert compile("$.foo[3]").values(domain) == []
    assert compile("$.bar[3]").values(domain) == []


def test_slice():
    domain = {
        "foo": [5, 10, 15, 20, 25, 30],
    }
    assert compile("$.foo[1:2]").values(domain) == [10]
    assert compile("$.foo[3:]").values(domain) == [20, 25, 30]
    assert compile("$.foo[::2]").values(domain) == [5, 15, 25]
    assert compile("$.foo[-2:]").values(domain) == [25, 30]
    assert compile("$.foo[5:1:-2]").values(domain) == [30, 20]


def test_every():
    domain = {
        "books": {
            "foo": {"a": 10, "b": 20},
            "bar": {"a": 30, "b": 40},
            "baz": {"a": 50, "b": 60},
        }
    }
    assert compile("$.books[*].b").values(domain) == [20, 40, 60]
    assert compile("$.books.*.b").values(domain) == [20, 40, 60]


def test_match_path():
    domain = {
        "alfa": {
            "bravo": "a",
            "charlie": "b",
        },
        "echo": {
            "foxtrot": "d",
        },
        "hotel": {
            "kilo": {
                "lima": "h",
            }
        }
    }
    p = compile("$.*.*")
    assert p.values(domain) == ["a", "b", "d", {"lima": "h"}]
    assert [node.location for node in p.find(domain)] == [
        ("alfa", "bravo"), ("alfa", "charlie"), ("echo", "foxtrot"),
        ("hotel", "kilo"),
    ]


def test_descendants():
    domain = {
        "alfa": {
            "bravo": "a",
            "charlie": "b",
            "delta": "c"
        },
        "echo": {
            "foxtrot": "d",
            "golf": "e",
            "mike": "j"
        },
        "hotel": {
            "india": "f",
            "juliet": "g",
            "kilo": {
                "lima": "h",
                "mike": "i"
            }
        }
    }
    nodes = compile("$..mike").find(domain)
    assert nodes.values() == ["j", "i"]
    assert nodes.paths() == ["$['echo']['mike']",
                             "$['hotel']['kilo']['mike']"]


def test_descendants_visit_order():
    data = {"a": {"b": 1}, "c": [1, 2]}
    visited = [node.location for node in
               descendants(JSONPathNode(data, (), data))]
    assert visited == [(), ("a",), ("a", "b"), ("c",), ("c", 0), ("c", 1)]


def test_descendant_wildcard():
    data = {"a": {"b": 1}, "c": [1, 2]}
    nodes = compile("$..*").find(data)
    assert nodes.values() == [{"b": 1}, [1, 2], 1, 1, 2]
    assert nodes.paths() == ["$['a']", "$['c']", "$['a']['b']",
                             "$['c'][0]", "$['c'][1]"]


def test_descendant_index():
    data = [[1, [2]], [3]]
    assert compile("$..[0]").values(data) == [[1, [2]], 1, 2, 3]


def test_selector_order():
    # Results follow selector order, and duplicates are kept
    assert compile("$[1, 0, 1]").values(["a", "b"]) == ["b", "a", "b"]
    data = {"a": 1, "b": 2}
    assert compile("$['b', 'a', *]").values(data) == [2, 1, 1, 2]


def test_segments_apply_to_each_node():
    data = [[1, 2], [3, 4], 5]
    assert compile("$[*][1, 0]").values(data) == [2, 1, 4, 3]


def test_find_is_repeatable():
    data = {"a": [{"b": 1}, {"b": 2}]}
    path = compile("$.a[*].b")
    assert path.find(data) == path.find(data)
    assert data == {"a": [{"b": 1}, {"b": 2}]}


def test_find_one():
    path = compile("$.a[*]")
    assert path.find_one({"a": [1, 2]}).value == 1
    assert path.find_one({"a": []}) is None


def test_finditer():
    nodes = finditer("$.a[*]", {"a": [1, 2]})
    assert [node.value for node in nodes] == [1, 2]


def test_tuple_is_sequence():
    assert compile("$[1]").values((1, 2)) == [2]


def test_string_is_not_sequence():
    assert compile("$[0]").values("abc") == []
    assert compile("$[*]").values("abc") == []


def test_singular_query():
    assert compile("$.a[0]['b']").singular_query()
    assert compile("$").singular_query()
    assert not compile("$.a[*]").singular_query()
    assert not compile("$..a").singular_query()
    assert not compile("$['a', 'b']").singular_query()


def test_environment_find():
    env = JSONPathEnvironment()
    assert env.find("$.a", {"a": 1}).values() == [1]


def test_normalized_path():
    location = ("a'b", "\\", "\n", "\x01", 0, "c")
    assert normalized_path(location) == \
        r"$['a\'b']['\\']['\n']['\u0001'][0]['c']"


def test_node_path_escaping():
    nodes = find("$.*", {"it's": 1})
    assert nodes.paths() == [r"$['it\'s']"]
