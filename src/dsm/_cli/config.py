"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from dsm._io import DEFAULT_SEPARATOR


class ConfigError(Exception):
    """Error in dsm configuration."""


@dataclass(slots=True, frozen=True)
class DsmConfig:
    """Configuration loaded from the [tool.dsm] table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    input: Path | None = None
    output: Path | None = None
    separator: str = DEFAULT_SEPARATOR
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_path(section: dict[str, object], key: str, project_root: Path) -> Path | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.dsm].{key}: expected string path"
        raise ConfigError(msg)
    path = Path(value)
    if not path.is_absolute():
        path = project_root / path
    return path


def load_config(pyproject_path: Path) -> DsmConfig:
    """Load and validate [tool.dsm] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DsmConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    dsm_section = data.get("tool", {}).get("dsm", {})
    if not dsm_section:
        return DsmConfig(project_root=project_root)

    separator = dsm_section.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str) or not separator:
        msg = "Invalid [tool.dsm].separator: expected non-empty string"
        raise ConfigError(msg)

    return DsmConfig(
        input=_parse_path(dsm_section, "input", project_root),
        output=_parse_path(dsm_section, "output", project_root),
        separator=separator,
        project_root=project_root,
    )


def get_config() -> DsmConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DsmConfig (may be empty if no pyproject.toml or no [tool.dsm] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DsmConfig()
    return load_config(pyproject_path)
