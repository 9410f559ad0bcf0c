import pytest

from blockframe import Frame, config
from blockframe.utils.tabulate import format_value, tabulate


@pytest.fixture
def frame():
    return Frame.from_columns(
        {"name": ["Alice", "Bob", "Charlie"], "score": [1.0, None, 2.25]}
    )


@pytest.fixture
def display_options():
    max_rows, max_width = config.display_max_rows, config.display_max_width
    yield
    config.set_display_options(max_rows=max_rows, max_width=max_width)


def test_tabulate(frame):
    assert tabulate(frame) == "\n".join(
        [
            "name    | score",
            "------- | -----",
            "Alice   | 1.00",
            "Bob     | null",
            "Charlie | 2.25",
        ]
    )


def test_tabulate_max_rows(frame):
    assert tabulate(frame, max_rows=1).splitlines() == [
        "name  | score",
        "----- | -----",
        "Alice | 1.00",
        "... and 2 more rows",
    ]


def test_tabulate_empty_frame():
    assert tabulate(Frame("a", "bb")) == "a | bb\n- | --"


def test_tabulate_uses_display_options(frame, display_options):
    config.set_display_options(max_rows=2, max_width=5)
    lines = str(frame).splitlines()
    assert lines[-1] == "... and 1 more rows"
    assert lines[2:4] == ["Alice | 1.00", "Bob   | null"]


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "null"),
        (False, "false"),
        (3, "3"),
        (2.5, "2.50"),
        ("x" * 40, "x" * 27 + "..."),
        ([1, 2], "[1, 2]"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected
