import pytest
from hypothesis import given
from hypothesis import strategies as st

from keypath.keys import Key, Map, NativeKey, wrap
from keypath.paths import Path, Wildcard, append, base, clone, from_string, join, new, parent
from keypath.paths import equal as path_equal


def test_new_wraps_raw_values_and_keeps_keys() -> None:
    key = wrap("b")
    path = new("a", key, 3, {"x": 1})

    assert isinstance(path, Path)
    assert len(path) == 4
    assert all(isinstance(element, Key) for element in path)
    assert path[1] is key
    assert isinstance(path[3].underlying, Map)


def test_new_without_elements_is_empty() -> None:
    assert new() == Path()
    assert len(new()) == 0


def test_append_returns_new_path() -> None:
    path = new("a")
    result = append(path, "b", wrap("c"))

    assert result is not path
    assert path_equal(result, new("a", "b", "c"))
    assert path_equal(path, new("a"))


def test_append_nothing_returns_same_path() -> None:
    path = new("a", "b")
    assert append(path) is path


def test_join_concatenates_paths() -> None:
    assert path_equal(join(new("a"), new("b", "c"), new()), new("a", "b", "c"))
    assert join() == Path()
    assert join(new(), new()) == Path()


def test_parent_and_base() -> None:
    path = new("a", "b", "c")

    assert path_equal(parent(path), new("a", "b"))
    assert isinstance(parent(path), Path)
    assert parent(new("a")) == Path()
    assert parent(Path()) == Path()
    assert base(path) == wrap("c")
    assert base(Path()) is None


def test_clone_copies_elements() -> None:
    path = new("a", {"b": 1})
    duplicate = clone(path)

    assert path_equal(duplicate, path)
    assert isinstance(duplicate, Path)
    assert duplicate[1] is path[1]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        pytest.param("", new(), id="empty"),
        pytest.param("/", new(), id="root"),
        pytest.param("a", new("a"), id="single-no-slash"),
        pytest.param("a/b", new("a", "b"), id="relative"),
        pytest.param("/a/b", new("a", "b"), id="absolute"),
        pytest.param("/a//b", new("a", "", "b"), id="empty-element"),
        pytest.param("/a/b/", new("a", "b", ""), id="trailing-slash"),
        pytest.param("//", new("", ""), id="double-slash"),
    ],
)
def test_from_string(text: str, expected: Path) -> None:
    result = from_string(text)
    assert path_equal(result, expected)
    assert all(isinstance(element, NativeKey) for element in result)


def test_path_str_and_repr() -> None:
    assert str(new()) == "/"
    assert str(new("net", "iface0")) == "/net/iface0"
    assert str(new("a", 1, Wildcard)) == "/a/1/*"
    assert repr(new("a", "b")) == "Path('/a/b')"


def test_wildcard_is_plain_key_under_equality() -> None:
    assert Wildcard.equal(Wildcard)
    assert not Wildcard.equal(wrap("*"))
    assert not wrap("a").equal(Wildcard)
    assert wrap(Wildcard) is Wildcard


_SEGMENTS = st.lists(st.text(alphabet=st.characters(exclude_characters="/"), min_size=1, max_size=6), min_size=1)


@given(segments=_SEGMENTS)
def test_from_string_roundtrips_absolute_paths_property(segments: list[str]) -> None:
    text = "/" + "/".join(segments)
    path = from_string(text)
    assert str(path) == text
    assert path_equal(path, new(*segments))


def test_paths_work_as_map_keys() -> None:
    state = Map()
    state[from_string("/interfaces/eth0/mtu")] = 1500
    state[new("interfaces", {"name": "eth0"})] = "map-element"

    assert state.lookup(new("interfaces", "eth0", "mtu")) == (1500, True)
    assert state.lookup(new("interfaces", {"name": "eth0"})) == ("map-element", True)
    assert state.lookup(new("interfaces", "eth1", "mtu")) == (None, False)


def test_join_wraps_raw_elements() -> None:
    result = join(("a",), new("b"), [{"c": 1}])

    assert all(isinstance(element, Key) for element in result)
    assert path_equal(result, new("a", "b", {"c": 1}))
