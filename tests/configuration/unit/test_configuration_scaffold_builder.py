"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from record_jsonschema.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from record_jsonschema.configuration.loader import ConfigurationError, load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Schema generation configuration" in scaffold
    assert "output_dir:" in scaffold
    assert "indent:" in scaffold
    assert "targets:" in scaffold
    assert "metadata:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold
    assert isinstance(yaml.safe_load(scaffold), dict)


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "schemagen.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_unedited_scaffold_is_rejected_by_loader(tmp_path: Path) -> None:
    output_path = write_placeholder_configuration(tmp_path / "schemagen.yaml")

    with pytest.raises(ConfigurationError, match="placeholder"):
        load_configuration(output_path)


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schemagen.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
