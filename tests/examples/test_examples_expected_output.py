"""Run every topic example and compare stdout with its ``# =>`` comments."""

from __future__ import annotations

import ast
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"
EXPECTED_MARKER = "# =>"


def _topic_files() -> list[Path]:
    topic_files: list[Path] = []
    for topic_dir in sorted(EXAMPLES_ROOT.glob("ex_*")):
        main_files = sorted(topic_dir.glob("01_*.py"))
        assert len(main_files) == 1, f"{topic_dir}: expected one '01_*.py' file, found {main_files}"
        topic_files.extend(main_files)
    return topic_files


def _expected_stdout(path: Path) -> list[str]:
    """Collect the text after ``# =>`` on the closing line of each print() call."""
    source = path.read_text(encoding="utf-8")
    lines = source.splitlines()
    prints = sorted(
        (
            node
            for node in ast.walk(ast.parse(source, filename=str(path)))
            if isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "print"
        ),
        key=lambda node: (node.lineno, node.col_offset),
    )

    expected: list[str] = []
    for node in prints:
        closing_line = lines[(node.end_lineno or node.lineno) - 1]
        assert EXPECTED_MARKER in closing_line, (
            f"{path}:{node.end_lineno}: print() needs a '{EXPECTED_MARKER}' comment"
        )
        expected.append(closing_line.split(EXPECTED_MARKER, maxsplit=1)[1].strip())
    return expected


@pytest.mark.parametrize(
    "path",
    _topic_files(),
    ids=lambda path: str(path.relative_to(EXAMPLES_ROOT)),
)
def test_example_stdout_matches_expected_comments(path: Path) -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(SRC_ROOT), env.get("PYTHONPATH")) if part
    )

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr == ""
    assert completed.stdout.splitlines() == _expected_stdout(path)
