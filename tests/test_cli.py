"""CLI parser and command behaviour tests."""

from __future__ import annotations

import pytest

from soapgen.cli import _build_parser, main
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project(project_builder: ProjectBuilder) -> ProjectBuilder:
    project_builder.write_config(
        {
            "client": {"name": "Client", "namespace": "App", "destination": "src"},
            "types": {"namespace": "App\\Type", "destination": "src/Type"},
        }
    )
    project_builder.write_metadata(
        {
            "types": [{"name": "Address", "properties": [{"name": "street", "type": "string"}]}],
            "methods": [{"name": "getAddress", "parameters": [{"name": "id", "type": "int"}]}],
        }
    )
    return project_builder


def test_cli_accepts_verbose_before_command() -> None:
    args = _build_parser().parse_args(["--verbose", "factory"])
    assert args.verbose is True
    assert args.command == "factory"


def test_cli_accepts_verbose_after_command() -> None:
    args = _build_parser().parse_args(["types", "metadata.yml", "--verbose"])
    assert args.verbose is True
    assert args.metadata == "metadata.yml"


def test_cli_defaults() -> None:
    args = _build_parser().parse_args(["client", "metadata.yml"])
    assert args.verbose is False
    assert args.dry_run is False
    assert args.config == ".soapgen.yml"
    assert args.log_file is None


def test_types_command_writes_classes(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    root = project.path()
    main(["types", str(root / "metadata.yml"), "--config", str(root)])

    assert (root / "src" / "Type" / "Address.php").exists()
    assert "App\\Type\\Address -> " in capsys.readouterr().out


def test_client_dry_run_prints_source(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    root = project.path()
    main(["client", str(root / "metadata.yml"), "--config", str(root), "--dry-run"])

    out = capsys.readouterr().out
    assert "<?php" in out
    assert "public function getAddress(int $id)" in out
    assert not (root / "src" / "Client.php").exists()


def test_factory_command(project: ProjectBuilder) -> None:
    root = project.path()
    main(["factory", "--config", str(root / ".soapgen.yml")])

    assert (root / "src" / "ClientFactory.php").exists()


def test_invalid_config_exits(project_builder: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    root = project_builder.path()
    (root / ".soapgen.yml").write_text("property:\n  visibility: internal\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["factory", "--config", str(root)])

    assert excinfo.value.code == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_missing_metadata_exits(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    root = project.path()

    with pytest.raises(SystemExit) as excinfo:
        main(["types", str(root / "missing.yml"), "--config", str(root)])

    assert excinfo.value.code == 1
    assert "Invalid metadata" in capsys.readouterr().err


def test_unknown_assembler_exits(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    root = project.path()
    project.write_config({"types": {"assemblers": ["property", "nope"]}})

    with pytest.raises(SystemExit) as excinfo:
        main(["types", str(root / "metadata.yml"), "--config", str(root)])

    assert excinfo.value.code == 1
    assert "Unknown assemblers requested: nope" in capsys.readouterr().err


def test_log_file_receives_generation_records(project: ProjectBuilder) -> None:
    root = project.path()
    log_file = root / "logs" / "soapgen.log"
    main(["types", str(root / "metadata.yml"), "--config", str(root), "--log-file", str(log_file)])

    contents = log_file.read_text(encoding="utf-8")
    assert "INFO soapgen.orchestrator: Generated App\\Type\\Address" in contents
