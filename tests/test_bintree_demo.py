"""Tests for the ``bintree_demo`` command line script."""

from __future__ import annotations

import logging

import pytest

import bintree_demo
from bintree_demo import (
    TreeInputError,
    format_statistics,
    interactive_loop,
    parse_values,
)
from bintree.operations import build


def _scripted(lines: list[str]):
    pending = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1,2,3", [1, 2, 3]),
        (" 4 , 5 ,6 ", [4, 5, 6]),
        ("-7", [-7]),
        ("", []),
        ("   ", []),
    ],
)
def test_parse_values_accepts_integer_lists(text: str, expected: list[int]) -> None:
    assert parse_values(text) == expected


@pytest.mark.parametrize("text", ["1,two,3", "1,,2", "1,2,", "1.5", "abc"])
def test_parse_values_rejects_malformed_input(text: str) -> None:
    with pytest.raises(TreeInputError):
        parse_values(text)


def test_format_statistics_reports_tree_properties() -> None:
    lines = format_statistics(build([1, 2, 3, 4, 5]), [1, 2, 3, 4, 5])
    assert lines == [
        "Tree Statistics:",
        "  • Original input: 1, 2, 3, 4, 5",
        "  • Preorder traversal: 1, 2, 4, 5, 3",
        "  • Number of elements: 5",
        "  • Tree depth: 3",
        "  • Is complete binary tree: True",
    ]


def test_interactive_loop_builds_trees_until_quit() -> None:
    output: list[str] = []
    built = interactive_loop(read=_scripted(["1,2,3", "QUIT"]), write=output.append)

    assert built == 1
    assert "Generated tree:" in output
    start = output.index("Generated tree:") + 1
    assert output[start : start + 3] == ["1", "├── 2", "└── 3"]
    assert "  • Tree depth: 2" in output
    assert output[-1] == "Goodbye!"


def test_interactive_loop_distinguishes_empty_and_invalid_input(
    caplog: pytest.LogCaptureFixture,
) -> None:
    output: list[str] = []
    with caplog.at_level(logging.WARNING, logger="bintree_demo"):
        built = interactive_loop(read=_scripted(["", "1,x"]), write=output.append)

    assert built == 0
    assert "Please enter at least one number." in output
    assert "Invalid input. Please enter comma-separated integers." in output
    assert output[-1] == "Goodbye!"
    assert any("Rejected input" in record.getMessage() for record in caplog.records)


def test_main_with_values_prints_single_tree(capsys: pytest.CaptureFixture[str]) -> None:
    assert bintree_demo.main(["--values", "10,20,30,40"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == ["10", "├── 20", "│   └── 40", "└── 30"]
    assert "  • Preorder traversal: 10, 20, 40, 30" in lines


def test_main_with_ascii_style(capsys: pytest.CaptureFixture[str]) -> None:
    assert bintree_demo.main(["--values", "1,2,3", "--ascii"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["1", "|-- 2", "`-- 3"]


def test_main_rejects_invalid_values(capsys: pytest.CaptureFixture[str]) -> None:
    assert bintree_demo.main(["--values", "1,oops"]) == 2
    assert capsys.readouterr().out == ""


def test_main_runs_all_demonstrations(capsys: pytest.CaptureFixture[str]) -> None:
    assert bintree_demo.main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()

    assert "Demo 1: Basic Tree Operations" in lines
    assert "Demo 2: Building Trees from Lists" in lines
    assert "Demo 3: Different Data Types" in lines
    assert "Tree Properties Analysis:" in lines
    assert "  Preorder traversal: [1, 2, 4, 5, 3, 6, 7]" in lines
    assert "  Preorder: ['root', 'left', 'deep', 'leaf', 'right']" in lines
    assert "     Large: 15 elements, depth  4 (min possible:  4)" in lines
    assert "    Single:  1 elements, depth  1 (min possible:  1)" in lines


def test_main_interactive_reads_until_eof(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("builtins.input", _scripted(["7"]))
    assert bintree_demo.main(["--interactive"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "  • Original input: 7" in lines
    assert lines[-1] == "Goodbye!"
