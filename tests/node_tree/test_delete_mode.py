"""Unit tests for the DeleteMode enum."""

import pytest

from inodetree.node_tree.delete_mode import DeleteMode


def test_delete_mode_values():
    assert DeleteMode.SOFT == "soft"
    assert DeleteMode.HARD == "hard"
    assert DeleteMode("hard") is DeleteMode.HARD


@pytest.mark.parametrize(
    "options,expected",
    [
        ([], DeleteMode.SOFT),
        (["--force"], DeleteMode.HARD),
        (["-f"], DeleteMode.HARD),
        (["--force", "-f"], DeleteMode.HARD),
        (["-v", "-f"], DeleteMode.HARD),
        (["--forced", "-F", "force"], DeleteMode.SOFT),
    ],
)
def test_from_options(options, expected):
    assert DeleteMode.from_options(options) is expected


def test_from_options_accepts_any_iterable():
    assert DeleteMode.from_options(iter(("-f",))) is DeleteMode.HARD
    assert DeleteMode.from_options(("--force",)) is DeleteMode.HARD
