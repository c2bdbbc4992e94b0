"""Type definition writer tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_typegen.output_writing import write_type_definitions


def test_writes_text_and_returns_resolved_path(tmp_path: Path) -> None:
    output_path = tmp_path / "types.ts"

    written = write_type_definitions("export type A = {};\n", output_path)

    assert written == output_path.resolve()
    assert output_path.read_text(encoding="utf-8") == "export type A = {};\n"


def test_creates_missing_parent_directories(tmp_path: Path) -> None:
    output_path = tmp_path / "src" / "generated" / "types.ts"

    write_type_definitions("export type A = {};\n", str(output_path))

    assert output_path.exists()


def test_overwrites_previous_output(tmp_path: Path) -> None:
    output_path = tmp_path / "types.ts"
    output_path.write_text("stale", encoding="utf-8")

    write_type_definitions("fresh", output_path)

    assert output_path.read_text(encoding="utf-8") == "fresh"


def test_propagates_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OSError):
        write_type_definitions("text", blocker / "types.ts")
