"""
Tests for the configuration module.

These tests verify that the pyproject.toml / test-smells.toml configuration
loading works correctly.
"""

import tempfile
from pathlib import Path

import pytest

from smells_analyzer.core.config import (
    ConfigLoader,
    ScanConfig,
    find_config_file,
    load_config,
)


def test_config_defaults():
    """Test that default configuration values are set correctly."""
    config = ScanConfig()

    assert config.test_directory == Path("src/test/java")
    assert config.file_extension == ".java"
    assert config.disabled_smells == set()
    assert config.output_format == "log"
    assert config.parallel_processing is False
    assert config.max_workers is None
    assert config.config_path is None


def test_load_from_pyproject():
    """Test loading configuration from pyproject.toml."""
    with tempfile.TemporaryDirectory() as tmpdir:
        pyproject_path = Path(tmpdir) / "pyproject.toml"
        pyproject_path.write_text("""
[tool.test-smells]
test-directory = "module/src/test/java"
file-extension = "Test.java"
disabled-smells = ["conditional-test-logic", "Mystery Guest"]
output-format = "json"
parallel-processing = true
max-workers = 4
""")

        config = load_config(config_file=pyproject_path)

        assert config.test_directory == Path(tmpdir) / "module/src/test/java"
        assert config.file_extension == "Test.java"
        assert config.disabled_smells == {"conditional-test-logic", "Mystery Guest"}
        assert config.output_format == "json"
        assert config.parallel_processing is True
        assert config.max_workers == 4
        assert config.config_path == pyproject_path


def test_absolute_test_directory_is_kept(tmp_path):
    config_file = tmp_path / "test-smells.toml"
    config_file.write_text(f'test-directory = "{(tmp_path / "elsewhere").as_posix()}"\n')

    config = load_config(config_file=config_file)

    assert config.test_directory == tmp_path / "elsewhere"


def test_standalone_config_with_table(tmp_path):
    config_file = tmp_path / "test-smells.toml"
    config_file.write_text('[tool.test-smells]\nfile-extension = ".kt"\n')

    assert load_config(config_file=config_file).file_extension == ".kt"


def test_pyproject_without_section_uses_defaults(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.black]\nline-length = 100\n')

    config = ConfigLoader.load_from_file(pyproject)

    assert config.test_directory == Path("src/test/java")
    assert config.disabled_smells == set()


def test_find_config_file_searches_upwards(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.test-smells]\nmax-workers = 2\n')
    nested = tmp_path / "module" / "src" / "test"
    nested.mkdir(parents=True)

    assert find_config_file(nested) == (tmp_path / "pyproject.toml").resolve()
    assert load_config(start_dir=nested).max_workers == 2


def test_find_config_file_skips_unrelated_pyproject(tmp_path):
    (tmp_path / "test-smells.toml").write_text('file-extension = ".groovy"\n')
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text('[project]\nname = "demo"\n')

    assert find_config_file(project) == (tmp_path / "test-smells.toml").resolve()


def test_load_config_without_any_file():
    assert load_config() == ScanConfig()


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(config_file=tmp_path / "nope.toml")


@pytest.mark.parametrize(
    "body",
    [
        'parallel-processing = "yes"',
        "max-workers = 0",
        "max-workers = true",
        'output-format = "html"',
        'disabled-smells = "sleepy-test"',
        "test-directory = [",
    ],
)
def test_invalid_values(tmp_path, body):
    config_file = tmp_path / "test-smells.toml"
    config_file.write_text(body + "\n")

    with pytest.raises(ValueError):
        load_config(config_file=config_file)


@pytest.mark.parametrize(
    "file_name, body",
    [
        ("pyproject.toml", 'tool = "black"'),
        ("pyproject.toml", "[tool]\ntest-smells = 3"),
        ("test-smells.toml", "tool = 1"),
        ("test-smells.toml", '[tool]\ntest-smells = ["src/test/java"]'),
    ],
)
def test_non_table_sections(tmp_path, file_name, body):
    config_file = tmp_path / file_name
    config_file.write_text(body + "\n")

    with pytest.raises(ValueError):
        load_config(config_file=config_file)


def test_find_config_file_ignores_non_table_tool(tmp_path):
    (tmp_path / "pyproject.toml").write_text('tool = "test-smells"\n')
    nested = tmp_path / "module"
    nested.mkdir()

    found = find_config_file(nested)

    assert found is None or found.parent != tmp_path.resolve()
