"""Tests for TOML configuration loading."""

import pytest

from symrc4.config import (
    OutputConfig,
    Rc4Config,
    find_config_file,
    generate_default_config,
    init_config,
    load_config,
)
from symrc4.logging import LogLevel


def test_defaults_match_reference_scenario():
    config = Rc4Config()
    assert config.prover.key_length == 5
    assert config.prover.plaintext_length == 5
    assert config.prover.timeout_ms is None


def test_load_standalone_file(tmp_path):
    path = tmp_path / "symrc4.toml"
    path.write_text(
        "[prover]\nkey_length = 8\ntimeout_ms = 2000\n\n[output]\nverbose = true\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.prover.key_length == 8
    assert config.prover.plaintext_length == 5
    assert config.prover.timeout_ms == 2000
    assert config.output.verbose
    assert config.project_root == tmp_path


def test_pyproject_needs_tool_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    found = find_config_file(tmp_path)
    assert found is None or found.parent != tmp_path
    (tmp_path / "pyproject.toml").write_text(
        "[tool.symrc4.prover]\nplaintext_length = 16\n", encoding="utf-8"
    )
    assert find_config_file(tmp_path) == tmp_path / "pyproject.toml"
    assert load_config(start_dir=tmp_path).prover.plaintext_length == 16


def test_search_walks_up(tmp_path):
    (tmp_path / ".symrc4.toml").write_text("[prover]\nkey_length = 3\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert load_config(start_dir=nested).prover.key_length == 3


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "symrc4.toml"
    path.write_text("[prover\n", encoding="utf-8")
    assert load_config(path).prover.key_length == 5


def test_generated_config_round_trips(tmp_path):
    path = init_config(tmp_path)
    assert path.read_text(encoding="utf-8") == generate_default_config()
    assert load_config(path).to_dict() == Rc4Config().to_dict()
    with pytest.raises(FileExistsError):
        init_config(tmp_path)


@pytest.mark.parametrize(
    "flags,level",
    [
        ({}, LogLevel.NORMAL),
        ({"verbose": True}, LogLevel.VERBOSE),
        ({"debug": True, "verbose": True}, LogLevel.DEBUG),
        ({"quiet": True, "debug": True}, LogLevel.QUIET),
    ],
)
def test_output_log_level(flags, level):
    assert OutputConfig(**flags).log_level() is level
