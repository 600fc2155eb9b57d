from jsonpath_rfc9535.node import JSONPathNode
from jsonpath_rfc9535.selectors import (IndexSelector, NameSelector,
                                        SliceSelector, WildcardSelector,
                                        resolve, slice_indices)
from jsonpath_rfc9535.tokens import Kind, Span, Token

TOKEN = Token(Kind.wild, "*", Span(0, 1))


def root(data):
    return JSONPathNode(data, (), data)


def values(nodes):
    return [node.value for node in nodes]


def locations(nodes):
    return [node.location for node in nodes]


def test_name():
    nodes = resolve(NameSelector(TOKEN, "a"), root({"a": 1, "b": 2}))
    assert values(nodes) == [1]
    assert locations(nodes) == [("a",)]


def test_name_miss():
    assert resolve(NameSelector(TOKEN, "c"), root({"a": 1})) == []
    assert resolve(NameSelector(TOKEN, "a"), root(["a"])) == []
    assert resolve(NameSelector(TOKEN, "a"), root("a")) == []
    assert resolve(NameSelector(TOKEN, "a"), root(None)) == []


def test_index():
    data = [0, 1, 2, 3]
    assert values(resolve(IndexSelector(TOKEN, 0), root(data))) == [0]
    nodes = resolve(IndexSelector(TOKEN, -1), root(data))
    assert values(nodes) == [3]
    assert locations(nodes) == [(3,)]
    assert values(resolve(IndexSelector(TOKEN, -4), root(data))) == [0]


def test_index_miss():
    data = [0, 1, 2, 3]
    assert resolve(IndexSelector(TOKEN, -5), root(data)) == []
    assert resolve(IndexSelector(TOKEN, 4), root(data)) == []
    assert resolve(IndexSelector(TOKEN, 0), root({"0": 1})) == []
    assert resolve(IndexSelector(TOKEN, 0), root("abc")) == []
    assert resolve(IndexSelector(TOKEN, 0), root([])) == []


def test_singular():
    assert NameSelector(TOKEN, "a").singular
    assert IndexSelector(TOKEN, 0).singular
    assert not WildcardSelector(TOKEN).singular
    assert not SliceSelector(TOKEN).singular


def test_wildcard():
    nodes = resolve(WildcardSelector(TOKEN), root({"a": 1, "b": 2}))
    assert values(nodes) == [1, 2]
    assert locations(nodes) == [("a",), ("b",)]

    nodes = resolve(WildcardSelector(TOKEN), root(["x", "y"]))
    assert values(nodes) == ["x", "y"]
    assert locations(nodes) == [(0,), (1,)]


def test_wildcard_empty():
    assert resolve(WildcardSelector(TOKEN), root({})) == []
    assert resolve(WildcardSelector(TOKEN), root([])) == []
    assert resolve(WildcardSelector(TOKEN), root("abc")) == []
    assert resolve(WildcardSelector(TOKEN), root(5)) == []


def test_slice_all():
    data = [0, 1, 2, 3]
    nodes = resolve(SliceSelector(TOKEN), root(data))
    assert values(nodes) == data
    assert locations(nodes) == [(0,), (1,), (2,), (3,)]


def test_slice_reverse():
    data = [0, 1, 2, 3]
    nodes = resolve(SliceSelector(TOKEN, None, None, -1), root(data))
    assert values(nodes) == [3, 2, 1, 0]
    # Keyed by position in the source sequence, not in the result
    assert locations(nodes) == [(3,), (2,), (1,), (0,)]


def test_slice_locations():
    data = ["a", "b", "c", "d", "e"]
    nodes = resolve(SliceSelector(TOKEN, 1, None, 2), root(data))
    assert values(nodes) == ["b", "d"]
    assert locations(nodes) == [(1,), (3,)]


def test_slice_empty():
    assert resolve(SliceSelector(TOKEN, None, None, 0), root([1, 2])) == []
    assert resolve(SliceSelector(TOKEN), root([])) == []
    assert resolve(SliceSelector(TOKEN), root({"a": 1})) == []
    assert resolve(SliceSelector(TOKEN), root("abc")) == []


def test_slice_indices():
    assert list(slice_indices(5, None, None, -2)) == [4, 2, 0]
    assert list(slice_indices(5, 10, None, 1)) == []
    assert list(slice_indices(5, -10, 2, None)) == [0, 1]
    assert list(slice_indices(5, 3, -10, -1)) == [3, 2, 1, 0]
    assert list(slice_indices(5, 10, None, -1)) == [4, 3, 2, 1, 0]
    assert list(slice_indices(5, -10, None, -1)) == []
    assert list(slice_indices(5, None, None, 0)) == []
    assert list(slice_indices(0, None, None, 1)) == []


def test_slice_indices_agree_with_python():
    data = list(range(5))
    bounds = [None] + list(range(-7, 8))
    for step in (-3, -2, -1, 1, 2, 3):
        for start in bounds:
            for stop in bounds:
                expected = data[start:stop:step]
                indices = slice_indices(len(data), start, stop, step)
                assert [data[i] for i in indices] == expected, \
                    (start, stop, step)


def test_resolve_does_not_mutate():
    data = {"a": [1, 2, {"b": 3}]}
    node = root(data)
    for selector in (NameSelector(TOKEN, "a"), WildcardSelector(TOKEN)):
        resolve(selector, node)
    assert data == {"a": [1, 2, {"b": 3}]}
    assert node.location == ()
