import pytest

from blockframe import Frame
from blockframe.errors import (
    DuplicateColumnError,
    FrameError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    UnknownColumnError,
)


@pytest.fixture
def frame():
    frame = Frame("a", "b", "c")
    frame.append([1, "x", 1.5])
    frame.append([2, "y", None])
    frame.append([3, "z", 3.5])
    return frame


def test_init_and_repr():
    frame = Frame("a", "b")
    assert frame.columns() == ["a", "b"]
    assert frame.size() == 2
    assert frame.length() == 0
    assert repr(frame) == "Frame(columns=['a', 'b'], rows=0)"


def test_init_from_list():
    frame = Frame(["a", "b"])
    assert frame.columns() == ["a", "b"]
    assert frame.col_index("b") == 1


def test_duplicate_columns_rejected():
    with pytest.raises(DuplicateColumnError):
        Frame("x", "x")


def test_from_columns():
    frame = Frame.from_columns({"a": [1, 2, 3], "b": ["x"]})
    assert frame.length() == 3
    assert frame.column(1) == ["x", None, None]


def test_from_columns_pairs_with_duplicates():
    with pytest.raises(DuplicateColumnError):
        Frame.from_columns([("a", [1]), ("a", [2])])


def test_build_and_read():
    frame = Frame("a", "b")
    frame.append([1, 2]).append([3, 4])
    assert frame.length() == 2
    assert len(frame) == 2
    assert frame.get(1, "a") == 3
    assert frame.get(1, 1) == 4
    assert frame.row(0) == [1, 2]


def test_append_accepts_any_iterable(frame):
    frame.append((4, "w", None))
    assert frame.row(3) == [4, "w", None]


@pytest.mark.parametrize("row", [[1, 2], [1, 2, 3, 4], []])
def test_append_shape_mismatch(frame, row):
    with pytest.raises(ShapeMismatchError):
        frame.append(row)
    # Frame was left untouched.
    assert frame.length() == 3
    assert all(len(frame.column(c)) == 3 for c in range(frame.size()))


def test_set(frame):
    frame.set(0, "b", "new")
    frame.set(1, 2, 2.5)
    assert frame.row(0) == [1, "new", 1.5]
    assert frame.row(1) == [2, "y", 2.5]


def test_get_unknown_column(frame):
    with pytest.raises(UnknownColumnError) as excinfo:
        frame.get(0, "missing")
    assert str(excinfo.value) == "Unknown column: missing"
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, FrameError)


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, "a")])
def test_get_out_of_range(frame, row, col):
    with pytest.raises(IndexOutOfRangeError):
        frame.get(row, col)


def test_row_does_not_alias_storage(frame):
    row = frame.row(0)
    row[0] = 1000
    assert frame.get(0, 0) == 1


def test_column_is_a_copy(frame):
    column = frame.column(0)
    column.append(4)
    assert frame.length() == 3
    assert frame.column(10) is None


def test_iteration(frame):
    assert list(frame) == [[1, "x", 1.5], [2, "y", None], [3, "z", 3.5]]
    assert frame.rows() == list(frame)


def test_iteration_captures_row_count(frame):
    rows = iter(frame)
    assert next(rows) == [1, "x", 1.5]
    frame.append([4, "w", 4.5])
    # Rows appended after the iteration started are not visited.
    assert list(rows) == [[2, "y", None], [3, "z", 3.5]]
    assert frame.length() == 4


def test_add_column(frame):
    frame.add("d")
    assert frame.columns() == ["a", "b", "c", "d"]
    assert frame.col_index("d") == 3
    assert frame.column(3) == [None, None, None]
    frame.append([4, "w", None, True])
    assert frame.get(3, "d") is True


def test_add_column_to_empty_frame():
    frame = Frame("a").add("b")
    frame.append([1, 2])
    assert frame.row(0) == [1, 2]


def test_add_duplicate_column(frame):
    with pytest.raises(DuplicateColumnError):
        frame.add("a")
    assert frame.size() == 3


def test_drop_by_name(frame):
    frame.drop("b")
    assert frame.columns() == ["a", "c"]
    assert frame.col_index("b") is None
    assert frame.col_index("c") == 1
    assert frame.row(0) == [1, 1.5]


def test_drop_by_index_is_descending(frame):
    frame.drop(0, 1)
    assert frame.columns() == ["c"]
    assert frame.column(0) == [1.5, None, 3.5]


def test_drop_mixed_references(frame):
    # Both refer to positions before the drop.
    frame.drop("a", 2)
    assert frame.columns() == ["b"]
    assert frame.column(0) == ["x", "y", "z"]


def test_drop_repeated_reference(frame):
    frame.drop("a", 0)
    assert frame.columns() == ["b", "c"]


def test_drop_unknown_leaves_frame_untouched(frame):
    with pytest.raises(UnknownColumnError):
        frame.drop("a", "missing")
    assert frame.columns() == ["a", "b", "c"]
    with pytest.raises(IndexOutOfRangeError):
        frame.drop(0, 5)
    assert frame.size() == 3


def test_drop_row(frame):
    frame.drop_row(0, 2)
    assert frame.rows() == [[2, "y", None]]


def test_drop_row_order_independent(frame):
    frame.drop_row(2, 0)
    assert frame.rows() == [[2, "y", None]]


def test_drop_row_out_of_range(frame):
    with pytest.raises(IndexOutOfRangeError):
        frame.drop_row(1, 3)
    assert frame.length() == 3


def test_rename(frame):
    frame.rename("a", "alpha")
    assert frame.columns() == ["alpha", "b", "c"]
    assert frame.col_index("alpha") == 0
    assert frame.col_index("a") is None
    assert frame.get(0, "alpha") == 1


def test_rename_mapping(frame):
    frame.rename({"a": "A", "b": "B"})
    assert frame.columns() == ["A", "B", "c"]


def test_rename_mapping_is_applied_in_order(frame):
    frame.rename({"a": "tmp", "b": "a", "tmp": "b"})
    assert frame.columns() == ["b", "a", "c"]
    assert frame.get(0, "a") == "x"


def test_rename_unknown(frame):
    with pytest.raises(UnknownColumnError):
        frame.rename("missing", "x")


def test_rename_to_existing(frame):
    with pytest.raises(DuplicateColumnError):
        frame.rename("a", "b")


def test_rename_to_same_name_is_noop(frame):
    frame.rename("a", "a")
    assert frame.columns() == ["a", "b", "c"]


def test_rename_mapping_is_atomic(frame):
    with pytest.raises(DuplicateColumnError):
        frame.rename({"a": "A", "b": "c"})
    assert frame.columns() == ["a", "b", "c"]


def test_rename_requires_new_name(frame):
    with pytest.raises(TypeError):
        frame.rename("a")
    assert frame.columns() == ["a", "b", "c"]


def test_rename_mapping_rejects_new_name(frame):
    with pytest.raises(TypeError):
        frame.rename({"a": "A"}, "B")
    assert frame.columns() == ["a", "b", "c"]


def test_rename_to_none_is_explicit(frame):
    frame.rename("a", None)
    assert frame.columns() == [None, "b", "c"]


def test_fill_na(frame):
    frame.fill_na("c", 0.0)
    assert frame.column(2) == [1.5, 0.0, 3.5]


def test_fill_na_map(frame):
    frame.add("d")
    frame.fill_na_map({"c": 0.0, 3: "empty"})
    assert frame.column(2) == [1.5, 0.0, 3.5]
    assert frame.column(3) == ["empty"] * 3


def test_fill_na_unknown_column_changes_nothing(frame):
    with pytest.raises(UnknownColumnError):
        frame.fill_na_map({"c": 0.0, "missing": 1})
    assert frame.get(1, "c") is None


def test_clone(frame):
    cloned = frame.clone()
    assert cloned == frame
    assert cloned is not frame

    cloned.set(0, "a", 100)
    cloned.add("d")
    cloned.append([4, "w", None, None])
    cloned.rename("b", "B")
    assert frame.get(0, "a") == 1
    assert frame.columns() == ["a", "b", "c"]
    assert frame.length() == 3
    assert cloned != frame


def test_equality():
    assert Frame("a") == Frame("a")
    assert Frame("a") != Frame("b")
    assert Frame.from_columns({"a": [1]}) != Frame.from_columns({"a": [2]})
    assert Frame("a") != "a"


def test_frame_is_not_hashable(frame):
    with pytest.raises(TypeError):
        hash(frame)


def test_str(frame):
    assert str(frame) == "\n".join(
        [
            "a | b | c",
            "- | - | ----",
            "1 | x | 1.50",
            "2 | y | null",
            "3 | z | 3.50",
        ]
    )


def test_subclass_is_preserved():
    class MyFrame(Frame):
        pass

    frame = MyFrame.from_columns({"a": [2, 1]})
    assert isinstance(frame.sort_by("a"), MyFrame)
    assert isinstance(frame.unique(), MyFrame)
    assert isinstance(frame.clone(), MyFrame)
