"""Tests for stringx, tablex, pprint and misc."""

import pytest

import rune
from rune import misc, stringx, tablex


def test_split_default_whitespace() -> None:
    """Test split without separator splits on any whitespace."""
    assert stringx.split("  a b\tc\n").collect() == ["a", "b", "c"]


def test_split_character_set() -> None:
    """Test separator is a set of characters, and empty runs are dropped."""
    assert stringx.split("a,,b;c", ",;").collect() == ["a", "b", "c"]
    assert stringx.split("a]b^c", "]^").collect() == ["a", "b", "c"]
    assert stringx.split("", ",").collect() == []


def test_split_is_lazy() -> None:
    """Test split returns an Iter that can be chained."""
    result = stringx.split("1 2 3").map(int).reduce(lambda a, b: a + b)
    assert result.unwrap().unwrap() == 6


def test_chars_words_lines() -> None:
    """Test the other splitting helpers."""
    assert stringx.chars("ab").collect() == ["a", "b"]
    assert stringx.words(" hello   world ").collect() == ["hello", "world"]
    assert stringx.lines("a\nb\r\nc").collect() == ["a", "b", "c"]


def test_trim_and_dedent() -> None:
    """Test trim and dedent."""
    assert stringx.trim("  \t x y \n") == "x y"
    assert stringx.trim("   ") == ""
    assert stringx.dedent("  a\n  b") == "a\nb"


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (None, False),
        (True, False),
        (False, 0),
        (2.5, 10),
        (99, "a"),
        ("a", "b"),
        ("z", len),
        (len, object()),
        (object(), []),
        ([1, 2], [1, 3]),
        ([1], [1, 0]),
    ],
)
def test_compare_anything_order(a: object, b: object) -> None:
    """Test compare_anything is a strict ordering across kinds."""
    assert tablex.compare_anything(a, b)
    assert not tablex.compare_anything(b, a)


def test_compare_anything_equal_values() -> None:
    """Test equal values never come before each other."""
    for value in (None, True, 1, "x", [1, "a"], {"k": 1}):
        assert not tablex.compare_anything(value, value)
    assert not tablex.compare_anything([1, 2], [1, 2])


def test_compare_anything_self_containing() -> None:
    """Test comparing containers that contain themselves terminates."""
    first: list[object] = []
    first.append(first)
    second: list[object] = []
    second.append(second)
    assert not tablex.compare_anything(first, second)
    assert not tablex.compare_anything(second, first)
    first.append(1)
    second.append(2)
    assert tablex.compare_anything(first, second)
    assert not tablex.compare_anything(second, first)
    assert tablex.sort([second, first]) == [first, second]


def test_sort_mixed_values() -> None:
    """Test sort orders mixed types in place."""
    values = ["b", [0], 3, None, False, True, "a", 1]
    assert tablex.sort(values) is values
    assert values == [None, True, False, 1, 3, "a", "b", [0]]


def test_sort_custom_predicate() -> None:
    """Test sort accepts a 'comes before' predicate."""
    arr = rune.Array(["ccc", "a", "bb"])
    assert tablex.sort(arr, lambda a, b: len(a) > len(b)) == ["ccc", "bb", "a"]


def test_flatten() -> None:
    """Test flatten collapses nested iterables, keeping strings whole."""
    assert tablex.flatten([1, [2, (3, [4])], "56", rune.Array([7])]) == [1, 2, 3, 4, "56", 7]
    assert tablex.flatten([]) == []


def test_flatten_cycle() -> None:
    """Test flatten terminates on self-referencing containers."""
    inner: list[object] = [2]
    outer: list[object] = [1, inner]
    inner.append(outer)
    assert tablex.flatten(outer) == [1, 2]


def test_pprint_scalars() -> None:
    """Test scalar renderings."""
    assert rune.pprint("a\"b") == '"a\\"b"'
    assert rune.pprint(3) == "3"
    assert rune.pprint(None) == "None"
    assert rune.pprint({}) == "{}"


def test_pprint_nested() -> None:
    """Test nested containers are indented one level deeper."""
    expected = '{\n  ["k"] = {\n    [0] = 1,\n  },\n  [2] = "v",\n}'
    assert rune.pprint({"k": [1], 2: "v"}) == expected


def test_pprint_indent_and_set() -> None:
    """Test a custom indent, and sets sorted with compare_anything."""
    assert rune.pprint({3, 1}, indent=4) == "{\n    [0] = 1,\n    [1] = 3,\n}"


def test_pprint_cycle() -> None:
    """Test self-containing values render a cycle marker."""
    data: list[object] = [1]
    data.append(data)
    assert rune.pprint(data) == "{\n  [0] = 1,\n  [1] = ... (cycle),\n}"


def test_pprint_shared_value_is_not_a_cycle() -> None:
    """Test a value appearing twice, without containing itself, is rendered twice."""
    shared = [0]
    assert "cycle" not in rune.pprint([shared, shared])


def test_pprint_uses_configured_indent() -> None:
    """Test the default indent comes from the configuration."""
    previous = rune.get_config()
    try:
        rune.set_config(pprint_indent=1)
        assert rune.pprint([1]) == "{\n [0] = 1,\n}"
    finally:
        rune.set_config(pprint_indent=previous.pprint_indent)


def test_dump_prints(capsys: pytest.CaptureFixture[str]) -> None:
    """Test dump writes the rendering followed by a newline."""
    rune.dump(["[bold]x[/bold]"])
    assert capsys.readouterr().out == '{\n  [0] = "[bold]x[/bold]",\n}\n'


def test_is_integer() -> None:
    """Test is_integer."""
    assert misc.is_integer(1)
    assert misc.is_integer(-2.0)
    assert not misc.is_integer(0.1)
    assert not misc.is_integer(False)
    assert not misc.is_integer(None)
    assert not misc.is_integer("1")


def test_is_empty() -> None:
    """Test is_empty on collections and non-collections."""
    assert misc.is_empty({}) == rune.Ok(True)
    assert misc.is_empty(rune.Array([0])) == rune.Ok(False)
    assert misc.is_empty(rune.Set()) == rune.Ok(True)
    assert isinstance(misc.is_empty(None).unwrap_err(), rune.ConfigurationError)
