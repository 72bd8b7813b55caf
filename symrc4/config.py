"""Configuration system for symrc4.
Supports TOML configuration files with project-level and user-level settings.
"""
from __future__ import annotations
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from symrc4.logging import LogLevel, Rc4Logger, configure_logging, get_logger
CONFIG_FILES = [
    "symrc4.toml",
    ".symrc4.toml",
    "pyproject.toml",
]
@dataclass
class ProverConfig:
    """Configuration for the round-trip prover."""
    key_length: int = 5
    plaintext_length: int = 5
    timeout_ms: int | None = None
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "key_length": self.key_length,
            "plaintext_length": self.plaintext_length,
            "timeout_ms": self.timeout_ms,
        }
@dataclass
class OutputConfig:
    """Configuration for log output."""
    color: bool = True
    verbose: bool = False
    quiet: bool = False
    debug: bool = False
    def log_level(self) -> LogLevel:
        """Map the output flags to a log level."""
        if self.quiet:
            return LogLevel.QUIET
        if self.debug:
            return LogLevel.DEBUG
        if self.verbose:
            return LogLevel.VERBOSE
        return LogLevel.NORMAL
    def apply(self) -> Rc4Logger:
        """Install a global logger matching these flags."""
        return configure_logging(level=self.log_level(), color=self.color)
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "color": self.color,
            "verbose": self.verbose,
            "quiet": self.quiet,
            "debug": self.debug,
        }
@dataclass
class Rc4Config:
    """Main configuration for symrc4."""
    prover: ProverConfig = field(default_factory=ProverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    project_root: Path | None = None
    config_file: Path | None = None
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "prover": self.prover.to_dict(),
            "output": self.output.to_dict(),
        }
    def to_toml(self) -> str:
        """Generate TOML configuration string."""
        lines = ["[tool.symrc4]", ""]
        for section, values in self.to_dict().items():
            lines.append(f"[tool.symrc4.{section}]")
            for key, value in values.items():
                if value is None:
                    continue
                if isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                else:
                    lines.append(f"{key} = {value}")
            lines.append("")
        return "\n".join(lines)
def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file by walking up directory tree.
    A ``pyproject.toml`` only counts if it has a ``[tool.symrc4]`` table.
    """
    if start_dir is None:
        start_dir = Path.cwd()
    current = start_dir.resolve()
    while True:
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists() and _has_settings(config_path):
                return config_path
        if current == current.parent:
            break
        current = current.parent
    return None
def _has_settings(config_path: Path) -> bool:
    if config_path.name != "pyproject.toml":
        return True
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return "symrc4" in data.get("tool", {})
def load_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> Rc4Config:
    """Load configuration from file or use defaults.
    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching for config
    Returns:
        Loaded configuration
    """
    config = Rc4Config()
    if config_path is None:
        config_path = find_config_file(start_dir)
    if config_path is None or not config_path.exists():
        return config
    config.config_file = config_path
    config.project_root = config_path.parent
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        get_logger().warning(f"Failed to parse config file {config_path}: {e}")
        return config
    if config_path.name == "pyproject.toml":
        rc4_data = data.get("tool", {}).get("symrc4", {})
    else:
        rc4_data = data.get("tool", {}).get("symrc4", data)
    _apply_config(config, rc4_data)
    return config
def _apply_config(config: Rc4Config, data: dict[str, Any]) -> None:
    """Apply configuration data to config object."""
    if "prover" in data:
        prover_data = data["prover"]
        for key in ["key_length", "plaintext_length", "timeout_ms"]:
            if key in prover_data:
                setattr(config.prover, key, prover_data[key])
    if "output" in data:
        out_data = data["output"]
        for key in ["color", "verbose", "quiet", "debug"]:
            if key in out_data:
                setattr(config.output, key, out_data[key])
def generate_default_config() -> str:
    """Generate default configuration file content."""
    return Rc4Config().to_toml()
def init_config(directory: Path | None = None) -> Path:
    """Initialize a new configuration file in the given directory.
    Args:
        directory: Directory to create config in (default: current)
    Returns:
        Path to created config file
    """
    if directory is None:
        directory = Path.cwd()
    config_path = directory / "symrc4.toml"
    if config_path.exists():
        raise FileExistsError(f"Config file already exists: {config_path}")
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path
__all__ = [
    "Rc4Config",
    "ProverConfig",
    "OutputConfig",
    "load_config",
    "find_config_file",
    "generate_default_config",
    "init_config",
]
