"""Configuration system for the test smell scanner."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Set
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_SECTION = "test-smells"
STANDALONE_CONFIG = "test-smells.toml"
OUTPUT_FORMATS = ("log", "json")


@dataclass
class ScanConfig:
    """Main configuration for the scanner."""

    # Input
    test_directory: Path = field(default_factory=lambda: Path("src/test/java"))
    file_extension: str = ".java"

    # Detector settings
    disabled_smells: Set[str] = field(default_factory=set)

    # Output
    output_format: str = "log"  # log, json

    # Advanced settings
    parallel_processing: bool = False
    max_workers: Optional[int] = None

    # Where the configuration was read from, if anywhere
    config_path: Optional[Path] = None


class ConfigLoader:
    """Loads configuration from TOML files."""

    @staticmethod
    def load_from_file(config_file: Path) -> ScanConfig:
        """Load configuration from a TOML file.

        Args:
            config_file: Path to the config file (pyproject.toml or test-smells.toml)

        Returns:
            Loaded configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If TOML parsing fails or a value is invalid
        """
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {config_file}: {e}") from e

        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ValueError(f"tool must be a table in {config_file}")

        if config_file.name == STANDALONE_CONFIG:
            # Standalone file may use the table or top-level keys
            config_data = tool.get(CONFIG_SECTION, data)
        else:
            config_data = tool.get(CONFIG_SECTION, {})
        if not isinstance(config_data, dict):
            raise ValueError(f"tool.{CONFIG_SECTION} must be a table in {config_file}")

        config = ConfigLoader._parse_config_dict(config_data, base_dir=config_file.parent)
        config.config_path = config_file
        return config

    @staticmethod
    def _parse_config_dict(data: Dict[str, Any], base_dir: Optional[Path] = None) -> ScanConfig:
        """Parse configuration dictionary into ScanConfig.

        Args:
            data: Configuration dictionary
            base_dir: Directory relative paths are resolved against

        Returns:
            Parsed configuration
        """
        config = ScanConfig()

        if "test-directory" in data:
            directory = Path(_expect(data, "test-directory", str))
            if base_dir is not None and not directory.is_absolute():
                directory = base_dir / directory
            config.test_directory = directory

        if "file-extension" in data:
            config.file_extension = _expect(data, "file-extension", str)

        if "disabled-smells" in data:
            config.disabled_smells = set(_expect(data, "disabled-smells", list))

        if "output-format" in data:
            output_format = _expect(data, "output-format", str)
            if output_format not in OUTPUT_FORMATS:
                raise ValueError(
                    f"output-format must be one of {', '.join(OUTPUT_FORMATS)}, "
                    f"got {output_format!r}"
                )
            config.output_format = output_format

        if "parallel-processing" in data:
            config.parallel_processing = _expect(data, "parallel-processing", bool)

        if "max-workers" in data:
            max_workers = _expect(data, "max-workers", int)
            if max_workers < 1:
                raise ValueError(f"max-workers must be positive, got {max_workers}")
            config.max_workers = max_workers

        return config


def _expect(data: Dict[str, Any], key: str, expected_type: type) -> Any:
    value = data[key]
    # bool is a subclass of int
    if not isinstance(value, expected_type) or (
        expected_type is int and isinstance(value, bool)
    ):
        raise ValueError(
            f"{key} must be of type {expected_type.__name__}, got {type(value).__name__}"
        )
    return value


def get_default_config() -> ScanConfig:
    """Get default configuration.

    Returns:
        Default ScanConfig
    """
    return ScanConfig()


def find_config_file(start_dir: Path) -> Optional[Path]:
    """Find configuration file by searching up the directory tree.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file or None if not found
    """
    current = start_dir.resolve()

    # Search up to root
    while True:
        config_file = current / STANDALONE_CONFIG
        if config_file.is_file():
            return config_file

        # Only a pyproject.toml with our section counts
        pyproject = current / "pyproject.toml"
        if pyproject.is_file():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError):
                data = {}
            tool = data.get("tool")
            if isinstance(tool, dict) and CONFIG_SECTION in tool:
                return pyproject

        parent = current.parent
        if parent == current:
            # Reached root
            break
        current = parent

    return None


def load_config(config_file: Optional[Path] = None, start_dir: Optional[Path] = None) -> ScanConfig:
    """Load configuration from file or use defaults.

    Args:
        config_file: Explicit config file path
        start_dir: Directory to start searching for config

    Returns:
        Loaded or default configuration
    """
    if config_file:
        return ConfigLoader.load_from_file(config_file)

    if start_dir:
        found_config = find_config_file(start_dir)
        if found_config:
            return ConfigLoader.load_from_file(found_config)

    return get_default_config()
