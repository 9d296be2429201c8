"""Tests for the ``beanwire`` command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from beanwire.cli import STRATEGIES, build_parser, demo_config, main


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_every_strategy_prints_42(strategy: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--strategy", strategy]) == 0

    captured = capsys.readouterr()
    assert captured.out == "42\n"
    assert captured.err == ""


def test_default_strategy_is_config() -> None:
    assert build_parser().parse_args([]).strategy == "config"


def test_bundled_configs_exist() -> None:
    for strategy in ("config", "xml", "properties"):
        assert demo_config(strategy).is_file()


def test_custom_config_and_component(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "beans.yaml"
    config.write_text(
        "classes:\n"
        "  dao: beanwire.demo.dao.DaoImplV2\n"
        "  metier: beanwire.demo.metier.MetierImpl\n",
        encoding="utf-8",
    )

    assert main(["--config", str(config)]) == 0
    assert capsys.readouterr().out == "100\n"

    assert main(["--config", str(config), "--component", "dao", "--method", "value"]) == 0
    assert capsys.readouterr().out == "50\n"


def test_resolution_error_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "beans.yaml"
    config.write_text(
        "classes:\n  dao: com.example.DoesNotExist\n  metier: beanwire.demo.metier.MetierImpl\n",
        encoding="utf-8",
    )

    assert main(["--config", str(config)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: Cannot resolve type 'com.example.DoesNotExist'")


def test_missing_required_component_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "beans.properties"
    config.write_text("dao=beanwire.demo.dao.DaoImpl\n", encoding="utf-8")

    assert main(["--strategy", "properties", "--config", str(config)]) == 1
    assert "'metier'" in capsys.readouterr().err


def test_unknown_method_exits_non_zero(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--method", "missing"]) == 1
    assert "has no method 'missing'" in capsys.readouterr().err


def test_invalid_strategy_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--strategy", "spring"])

    assert exc_info.value.code == 2


@pytest.mark.parametrize("strategy", ["manual", "annotations"])
def test_config_rejected_for_strategies_without_a_file(
    strategy: str,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--strategy", strategy, "--config", str(tmp_path / "beans.yaml")])

    assert exc_info.value.code == 2
    assert f"--config cannot be used with the {strategy} strategy" in capsys.readouterr().err
