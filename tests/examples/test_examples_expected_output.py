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
EXPECTATION_MARKER = "# =>"


def _example_scripts() -> list[Path]:
    scripts = sorted(EXAMPLES_ROOT.glob("ex_*/01_*.py"))
    assert scripts, f"no example scripts found under {EXAMPLES_ROOT}"
    return scripts


def expected_output(path: Path) -> list[str]:
    """Collect the ``# =>`` expectation written after every ``print`` call, in source order."""
    source = path.read_text(encoding="utf-8")
    lines = source.splitlines()
    calls = sorted(
        (
            node
            for node in ast.walk(ast.parse(source, filename=str(path)))
            if isinstance(node, ast.Call) and isinstance(node.func, ast.Name) and node.func.id == "print"
        ),
        key=lambda node: (node.lineno, node.col_offset),
    )

    expected = []
    for call in calls:
        closing = lines[(call.end_lineno or call.lineno) - 1]
        assert EXPECTATION_MARKER in closing, f"{path}:{call.lineno}: print() without '{EXPECTATION_MARKER}'"
        expected.append(closing.split(EXPECTATION_MARKER, maxsplit=1)[1].strip())
    return expected


def run_example(path: Path) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, (str(SRC_ROOT), env.get("PYTHONPATH"))))
    return subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )


@pytest.mark.parametrize(
    "script",
    _example_scripts(),
    ids=lambda path: path.parent.name,
)
def test_example_prints_documented_output(script: Path) -> None:
    completed = run_example(script)

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr == ""
    assert completed.stdout.splitlines() == expected_output(script)
