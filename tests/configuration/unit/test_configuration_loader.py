"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from record_jsonschema.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemagen.yaml",
        """
targets:
  - type: "pkg.models:Person"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.output_dir == tmp_path.resolve()
    assert configuration.indent == 2
    assert len(configuration.targets) == 1
    assert configuration.targets[0].type_path == "pkg.models:Person"
    assert configuration.targets[0].output_path is None
    assert configuration.metadata == ()


def test_loads_json_configuration_with_outputs_and_metadata(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemagen.json",
        json.dumps(
            {
                "output_dir": "out",
                "indent": 4,
                "targets": [
                    "pkg.models:Person",
                    {"type": "pkg.models:Order", "output": "orders/order.json"},
                ],
                "metadata": {
                    "pkg.models:Person": {
                        "description": "A person",
                        "fields": {
                            "email": {"description": "Contact email", "format": "email"},
                            "name": "Display name",
                        },
                    }
                },
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.output_dir == (tmp_path / "out").resolve()
    assert configuration.indent == 4
    assert [target.type_path for target in configuration.targets] == [
        "pkg.models:Person",
        "pkg.models:Order",
    ]
    assert configuration.targets[1].output_path == Path("orders/order.json")
    (person,) = configuration.metadata
    assert person.type_path == "pkg.models:Person"
    assert person.description == "A person"
    assert person.fields["email"].description == "Contact email"
    assert person.fields["email"].format == "email"
    assert person.fields["name"].description == "Display name"
    assert person.fields["name"].format is None


def test_optional_placeholders_are_treated_as_absent(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemagen.yaml",
        """
output_dir: "<OPTIONAL>"
targets:
  - type: "pkg.models:Person"
    output: "<OPTIONAL>"
metadata:
  "<OPTIONAL>":
    description: "<OPTIONAL>"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.output_dir == tmp_path.resolve()
    assert configuration.targets[0].output_path is None
    assert configuration.metadata == ()


def test_required_placeholder_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemagen.yaml",
        """
targets:
  - type: "<REQUIRED>"
""",
    )

    with pytest.raises(ConfigurationError, match=r"targets\[0\]\.type still holds"):
        load_configuration(config_path)


def test_missing_file_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_invalid_yaml_raises_configuration_error(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "broken.yaml", "targets: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("indent: 2\n", "'targets' must be a list"),
        ("targets: []\n", "must not be empty"),
        ("targets:\n  - output: x.json\n", r"targets\[0\]\.type must be a string"),
        ("targets:\n  - type: '  '\n", "must not be empty"),
        ("indent: 0\ntargets: ['a:B']\n", "indent must be greater than zero"),
        ("indent: true\ntargets: ['a:B']\n", "indent must be an integer"),
        ("output_dir: 3\ntargets: ['a:B']\n", "output_dir must be a string"),
        ("targets: ['a:B']\nmetadata: [1]\n", "'metadata' must be a mapping"),
        (
            "targets: ['a:B']\nmetadata:\n  42:\n    description: x\n",
            "'metadata' keys must be type paths, got 42",
        ),
        (
            "targets: ['a:B']\nmetadata:\n  a:B:\n    fields:\n      x: {format: 5}\n",
            r"metadata\.a:B\.fields\.x\.format must be a string",
        ),
    ],
)
def test_invalid_sections_raise_configuration_error(
    tmp_path: Path, contents: str, message: str
) -> None:
    config_path = _write_file(tmp_path / "schemagen.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
