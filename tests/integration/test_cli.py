from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cgfloorplan.cli import main
from cgfloorplan.utils import logger
from cgfloorplan.utils.config import config

SAMPLE = """\
number of modules: 3
module dimension
1 A (4, 1)
2 B (4, 1)
3 C (1, 2)
edges in HCG
A to B
edges in VCG

"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "design.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_writes_result_next_to_input(tmp_path: Path, capsys) -> None:
    src = _write(tmp_path, SAMPLE)

    assert main([str(src)]) == 0

    out = tmp_path / f"design{config.output_suffix}.txt"
    assert capsys.readouterr().out.strip() == str(out)
    assert out.read_text(encoding="utf-8") == (
        "number of horizontal critical edges 1\n"
        "A to B\n"
        "\n"
        "number of vertical critical edges 0\n"
        "\n"
        "minimum floorplan area 8"
    )


def test_cli_no_search_keeps_baseline(tmp_path: Path) -> None:
    src = _write(tmp_path, SAMPLE)
    out = tmp_path / "explicit.txt"

    assert main([str(src), "-o", str(out), "--no-search"]) == 0
    assert out.read_text(encoding="utf-8").endswith("minimum floorplan area 16")


def test_cli_reports_cycle_as_failure(tmp_path: Path) -> None:
    src = _write(tmp_path, SAMPLE.replace("A to B", "A to B, B to A"))
    out = tmp_path / "never.txt"

    assert main([str(src), "-o", str(out)]) == 1
    assert not out.exists()


def test_cli_missing_input(tmp_path: Path) -> None:
    assert main([str(tmp_path / "absent.txt")]) == 1


@pytest.fixture
def restore_config():
    debug = config.debug
    yield config
    config.debug = debug
    logger.setLevel(logging.NOTSET)


def test_cli_debug_flag_enables_debug_logging(tmp_path: Path, restore_config, caplog) -> None:
    src = _write(tmp_path, SAMPLE)

    assert main([str(src), "--debug"]) == 0

    assert restore_config.debug is True
    assert logger.level == logging.DEBUG
    assert any(
        r.levelno == logging.DEBUG and r.name.startswith("cgfloorplan.analysis")
        for r in caplog.records
    )


def test_cli_verbose_flag_logs_final_area(tmp_path: Path, restore_config, caplog) -> None:
    src = _write(tmp_path, SAMPLE)

    assert main([str(src), "-v"]) == 0

    assert restore_config.debug is False
    assert logger.level == logging.INFO
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert any("minimum area 8" in m for m in messages)


def test_cli_default_level_is_quiet(tmp_path: Path, restore_config, caplog) -> None:
    src = _write(tmp_path, SAMPLE)

    assert main([str(src)]) == 0

    assert logger.level == logging.WARNING
    assert not [r for r in caplog.records if r.levelno < logging.WARNING]
