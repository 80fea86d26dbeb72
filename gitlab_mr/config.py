"""
Configuration loading for gitlab-mr.

Configuration lives in a JSON file that is discovered by walking from the
working directory up to the file-system root, falling back to a user-level
configuration directory.
"""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gitlab_mr.exceptions import ConfigParseError, ConfigurationError
from gitlab_mr.filesystem import FileSystem
from gitlab_mr.logging import get_logger

logger = get_logger("config")

# Checked in this order inside every directory
CONFIG_FILE_NAMES = (
    ".gitlab-mr.json",
    "gitlab-mr.json",
    ".gitlab-cli.json",
    "gitlab-cli.json",
)

CONFIG_DIR_NAME = "gitlab-mr"
EMPTY_LABEL = ""


@dataclass(frozen=True)
class Configuration:
    """Settings for a single run. Never mutated after loading."""

    remote_base_url: str
    project_id: str
    access_token: str | None = None
    reviewers: tuple[str, ...] = ()
    default_target_branches: tuple[str, ...] = ()
    default_labels: tuple[str, ...] = (EMPTY_LABEL,)

    @classmethod
    def from_dict(cls, data: Any) -> "Configuration":
        """
        Build a Configuration from a decoded JSON document.

        Unknown keys are ignored.

        Raises:
            ConfigurationError: If a required key is missing or a value has the wrong type
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Configuration must be a JSON object")

        remote_base_url = _require_str(data, "remoteBaseUrl")
        project_id = data.get("projectId")
        if isinstance(project_id, int) and not isinstance(project_id, bool):
            project_id = str(project_id)
        if not isinstance(project_id, str) or not project_id:
            raise ConfigurationError("'projectId' must be a non-empty string or number")

        access_token = data.get("gitlabApiToken")
        if access_token is not None and not isinstance(access_token, str):
            raise ConfigurationError("'gitlabApiToken' must be a string")

        labels = _optional_str_list(data, "defaultLabels")

        return cls(
            remote_base_url=remote_base_url.rstrip("/"),
            project_id=project_id,
            access_token=access_token or None,
            reviewers=_optional_str_list(data, "reviewers") or (),
            default_target_branches=_optional_str_list(data, "defaultTargetBranches") or (),
            default_labels=labels if labels is not None else (EMPTY_LABEL,),
        )


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{key}' must be a non-empty string")
    return value


def _optional_str_list(data: Mapping[str, Any], key: str) -> tuple[str, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(
            f"'{key}' from configuration file is not valid: {json.dumps(value)}"
        )
    return tuple(value)


class ConfigResolver:
    """
    Finds and loads the nearest configuration file.

    Example:
        ```python
        config = ConfigResolver().resolve()
        if config is None:
            ...  # no configuration anywhere
        ```
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        cwd: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.fs = fs or FileSystem()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.environ = environ if environ is not None else os.environ

    def resolve(self) -> Configuration | None:
        """
        Locate and parse the configuration file.

        Returns:
            The loaded Configuration, or None if no file exists anywhere

        Raises:
            ConfigParseError: If a file was found but could not be read or parsed
        """
        path = self.find_config_file()
        if path is None:
            logger.debug("No configuration file found")
            return None
        return self.load(path)

    def load(self, path: Path) -> Configuration:
        logger.debug("Loading configuration from %s", path)
        try:
            data = json.loads(self.fs.read_text(path))
            return Configuration.from_dict(data)
        except (OSError, ValueError) as e:
            raise ConfigParseError(str(path), str(e)) from e
        except ConfigurationError as e:
            raise ConfigParseError(str(path), e.message) from e

    def find_config_file(self) -> Path | None:
        """Return the path of the nearest recognized configuration file."""
        directory = self.cwd.absolute()
        while True:
            found = self._find_in_directory(directory)
            if found is not None:
                return found
            if directory.parent == directory:
                break
            directory = directory.parent

        return self._find_in_directory(self.config_home())

    def config_home(self) -> Path:
        """User-level configuration directory."""
        xdg_home = self.environ.get("XDG_CONFIG_HOME")
        if xdg_home:
            return Path(xdg_home) / CONFIG_DIR_NAME
        home = self.environ.get("HOME")
        base = Path(home) if home else Path.home()
        return base / ".config" / CONFIG_DIR_NAME

    def _find_in_directory(self, directory: Path) -> Path | None:
        try:
            names = set(self.fs.list_files(directory))
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return None

        for name in CONFIG_FILE_NAMES:
            if name in names:
                return directory / name
        return None
