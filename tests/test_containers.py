"""Tests for Array, HashMap, Set and MultiSet."""

from collections.abc import Mapping, MutableMapping, MutableSequence, MutableSet

import pytest

import rune
from rune import NONE, Some


def test_array_construction() -> None:
    """Test the accepted Array inputs."""
    assert rune.Array([1, 2]) == [1, 2]
    assert rune.Array((1, 2)).inner() == [1, 2]
    assert rune.Array(None).len() == 0
    assert rune.Array("word") == ["word"]
    assert rune.Array(7) == [7]
    assert isinstance(rune.Array(), MutableSequence)


def test_array_repr_quotes_strings() -> None:
    """Test strings are double-quoted in the Array rendering."""
    assert repr(rune.Array([1, "a", None])) == 'Array {1, "a", None}'
    assert repr(rune.Array()) == "Array {}"


def test_array_range_and_initialize() -> None:
    """Test the Array factories use 1-based positions."""
    assert rune.Array.range(3) == [1, 2, 3]
    assert rune.Array.range(2, 4) == [2, 3, 4]
    assert rune.Array.range(None) == []
    assert rune.Array.initialize(3) == [1, 2, 3]
    assert rune.Array.initialize(2, str) == ["1", "2"]


def test_array_from_iterator() -> None:
    """Test from_iterator drains a pull iterator."""
    assert rune.Array.from_iterator(rune.iterx.count().take(2)) == [1, 2]


def test_array_add() -> None:
    """Test + concatenates sequences and appends or prepends scalars."""
    assert rune.Array([1, 2]) + [3, 4] == [1, 2, 3, 4]
    assert [1, 2] + rune.Array([3, 4]) == [1, 2, 3, 4]
    assert rune.Array(["@"]) + "&" == ["@", "&"]
    assert "@" + rune.Array(["&"]) == ["@", "&"]


def test_array_equality() -> None:
    """Test Array equality compares length and items."""
    assert rune.Array([1, 2]) == rune.Array([1, 2])
    assert rune.Array([1, 2]) == (1, 2)
    assert rune.Array([1, 2]) != [1, 2, 3]
    assert rune.Array([1, 2]) != [2, 1]
    assert rune.Array(["a"]) != "a"


def test_array_append_returns_self() -> None:
    """Test append and foreach return the same Array."""
    arr = rune.Array()
    assert arr.append(1) is arr
    seen: list[int] = []
    assert arr.foreach(seen.append) is arr
    assert seen == [1]


def test_array_transformations() -> None:
    """Test map, filter and filtermap return new Arrays."""
    arr = rune.Array.range(5)
    assert arr.map(lambda x, y: x + y, 10) == [11, 12, 13, 14, 15]
    assert arr.filter(lambda x: x > 3) == [4, 5]
    assert arr.filter() == arr
    assert arr.filter() is not arr
    assert arr.filtermap(lambda x: x if x % 2 else None) == [1, 3, 5]
    assert arr == [1, 2, 3, 4, 5]


def test_array_extend_and_copy() -> None:
    """Test extend and copy leave the original untouched."""
    arr = rune.Array([1])
    extended = arr.extend([2, 3])
    assert extended == [1, 2, 3]
    assert arr == [1]
    copied = arr.copy()
    copied.append(9)
    assert arr == [1]


def test_array_in_place_add() -> None:
    """Test += extends in place."""
    arr = rune.Array([1])
    same = arr
    arr += [2, 3]
    assert arr is same
    assert arr == [1, 2, 3]


def test_array_pop() -> None:
    """Test pop returns a Result."""
    arr = rune.Array([1, 2])
    assert arr.pop() == rune.Ok(2)
    assert arr.pop() == rune.Ok(1)
    error = arr.pop().unwrap_err()
    assert isinstance(error, IndexError)
    assert str(error) == "Array is of length 0"


def test_array_remove() -> None:
    """Test remove validates its index."""
    arr = rune.Array(["a", "b", "c"])
    assert arr.remove(0) == rune.Ok("a")
    assert arr.remove(-1) == rune.Ok("c")
    assert isinstance(arr.remove(1).unwrap_err(), IndexError)
    assert isinstance(arr.remove(1.0).unwrap_err(), TypeError)
    assert arr.remove(0) == rune.Ok("b")
    assert str(arr.remove(0).unwrap_err()) == "Array is of length 0"


def test_array_mutable_sequence_protocol() -> None:
    """Test the inherited MutableSequence methods still behave."""
    arr = rune.Array([3, 1, 2])
    arr[0] = 0
    arr.insert(1, 5)
    del arr[-1]
    assert arr == [0, 5, 1]
    arr.reverse()
    assert arr == [1, 5, 0]
    assert arr[1:] == rune.Array([5, 0])
    assert 5 in arr
    arr.clear()
    assert arr.len() == 0


def test_array_truncated_repr() -> None:
    """Test the Array rendering respects max_items."""
    previous = rune.get_config()
    try:
        rune.set_config(max_items=3)
        assert repr(rune.Array.range(5)) == "Array {1, 2, 3, ...}"
    finally:
        rune.set_config(max_items=previous.max_items)


def test_hashmap_construction() -> None:
    """Test HashMap accepts mappings and pairs, and ignores anything else."""
    assert rune.HashMap({"a": 1}) == {"a": 1}
    assert rune.HashMap([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}
    assert len(rune.HashMap(None)) == 0
    assert len(rune.HashMap("ab")) == 0
    assert len(rune.HashMap(3)) == 0
    assert isinstance(rune.HashMap(), MutableMapping)


def test_hashmap_repr() -> None:
    """Test HashMap renders key=value pairs in insertion order."""
    assert repr(rune.HashMap({"b": 2, "a": 1})) == "HashMap {b=2, a=1}"


def test_hashmap_add_update() -> None:
    """Test add and update modify in place and chain."""
    h = rune.HashMap()
    assert h.add("a", 1).update({"b": 2}).update(42) is h
    assert h == {"a": 1, "b": 2}


def test_hashmap_initialize() -> None:
    """Test initialize builds pairs from positions."""
    assert rune.HashMap.initialize(2) == {1: 1, 2: 2}
    assert rune.HashMap.initialize(2, lambda i, k: (i * k, i), 10) == {10: 1, 20: 2}


def test_hashmap_map_filter_foreach() -> None:
    """Test the functional HashMap methods."""
    h = rune.HashMap({"a": 1, "b": 2, "c": 3})
    assert h.map(lambda k, v, n: v * n, 2) == {"a": 2, "b": 4, "c": 6}
    assert h.filter(lambda k, v: k != "b") == {"a": 1, "c": 3}
    seen: list[tuple[str, int]] = []
    assert h.foreach(lambda k, v: seen.append((k, v))) is h
    assert seen == [("a", 1), ("b", 2), ("c", 3)]


def test_hashmap_has_remove() -> None:
    """Test membership and removal."""
    h = rune.HashMap({"a": None})
    assert h.has("a")
    assert not h.has("b")
    assert h.remove("a") == Some(None)
    assert h.remove("a") is NONE


def test_hashmap_add_operator() -> None:
    """Test + merges into a new HashMap, the right side winning."""
    left = rune.HashMap({"a": 1, "b": 1})
    merged = left + {"b": 2, "c": 3}
    assert merged == {"a": 1, "b": 2, "c": 3}
    assert left == {"a": 1, "b": 1}
    assert {"a": 0, "z": 9} + left == {"a": 1, "b": 1, "z": 9}
    assert left + [1, 2] == left


def test_hashmap_iter() -> None:
    """Test iter yields key/value pairs."""
    assert rune.HashMap({"a": 1}).iter().collect() == [("a", 1)]


def test_set_construction() -> None:
    """Test the accepted Set inputs."""
    assert rune.Set([1, 1, 2]) == {1, 2}
    assert rune.Set({"k": "v"}) == {"k"}
    assert rune.Set("abc") == {"abc"}
    assert rune.Set(4) == {4}
    assert len(rune.Set()) == 0
    assert isinstance(rune.Set(), MutableSet)


def test_set_add_remove() -> None:
    """Test add and remove chain, ignoring missing members."""
    s = rune.Set()
    assert s.add(1).add(2).remove(1).remove(42) is s
    assert s == {2}


def test_set_operations() -> None:
    """Test the named set operations and operators."""
    s = rune.Set([1, 2, 3])
    assert s.union([4]) == {1, 2, 3, 4}
    assert s.intersection([2, 3, 4]) == {2, 3}
    assert s.difference({3: None}) == {1, 2}
    assert s + [5] == {1, 2, 3, 5}
    assert s | {0} == {0, 1, 2, 3}
    assert s - rune.Set([1]) == {2, 3}
    assert s & 2 == {2}
    assert 3 & s == {3}
    assert s ^ {3, 4} == {1, 2, 4}
    assert s == {1, 2, 3}
    assert isinstance(s + [5], rune.Set)


def test_set_contains_items() -> None:
    """Test contains and items."""
    s = rune.Set(["x", "y"])
    assert s.contains("x")
    assert not s.contains("z")
    assert sorted(s.items()) == ["x", "y"]


def test_multiset_construction() -> None:
    """Test the accepted MultiSet inputs."""
    assert rune.MultiSet("abca") == {"a": 2, "b": 1, "c": 1}
    assert rune.MultiSet(["x", "x"]) == {"x": 2}
    assert rune.MultiSet({"x": 3, "y": "text", "z": 2.0}) == {"x": 3, "y": 1, "z": 2}
    assert rune.MultiSet(5) == {5: 1}
    assert len(rune.MultiSet()) == 0
    assert isinstance(rune.MultiSet(), Mapping)


def test_multiset_counts() -> None:
    """Test counting, adding and removing."""
    m = rune.MultiSet("aab")
    assert m.count("a") == 2
    assert m["zzz"] == 0
    assert "zzz" not in m
    assert m.add("b", 3).add("c") is m
    assert m.total() == 7
    m.remove("a", 5)
    assert "a" not in m
    assert m == {"b": 4, "c": 1}


@pytest.mark.parametrize("n", [0, -1, -5])
def test_multiset_add_non_positive_drops_member(n: int) -> None:
    """Test an element counted zero times or fewer is not a member."""
    m = rune.MultiSet().add("a", n)
    assert "a" not in m
    assert len(m) == 0
    m = rune.MultiSet("b").add("b", n - 1)
    assert "b" not in m
    assert m.total() == 0


def test_multiset_mapping_drops_non_positive_counts() -> None:
    """Test zero and negative mapping values are not counted."""
    m = rune.MultiSet({"x": 0, "y": -2, "z": 1})
    assert m == {"z": 1}
    assert len(m) == 1
    assert "x" not in m
    assert repr(m) == "MultiSet { z=1 }"


def test_multiset_most_common_and_elements() -> None:
    """Test most_common and elements."""
    m = rune.MultiSet("mississippi")
    assert m.most_common(1) == [("i", 4)]
    assert m.elements().filter(lambda c: c == "p").collect() == ["p", "p"]


def test_multiset_add_and_repr() -> None:
    """Test + sums counts, and the rendering."""
    total = rune.MultiSet("ab") + rune.MultiSet("b")
    assert repr(total) == "MultiSet { a=1, b=2 }"
    assert repr(rune.MultiSet()) == "MultiSet {}"


@pytest.mark.parametrize(
    "container",
    [rune.Array([1]), rune.HashMap({1: 1}), rune.Set([1]), rune.MultiSet([1])],
)
def test_into_and_inspect(container: object) -> None:
    """Test every container supports into and inspect."""
    seen: list[object] = []
    assert container.inspect(seen.append) is container  # type: ignore[attr-defined]
    assert seen == [container]
    assert container.into(len) == 1  # type: ignore[attr-defined]
