"""XDG-compliant configuration management for linecol."""

import json
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

OUTPUT_FORMATS = ("text", "json", "yaml")
DEFAULT_EDITOR_COMMAND = "code --goto {target}"


class Config:
    """Manages linecol configuration following XDG Base Directory spec.

    Attributes:
        config_dir: Path to ~/.config/linecol/
        config_file: Path to ~/.config/linecol/config.toml
    """

    def __init__(self, config_dir: Optional[Path] = None, load: bool = True):
        """Initialize config paths using XDG Base Directory specification.

        Args:
            config_dir: Override for the configuration directory
            load: Read the config file if it exists. With load=False only
                the paths are set and every setting has its default.

        Raises:
            RuntimeError: If load is set and the config file cannot be parsed
        """
        if config_dir is None:
            # Use XDG_CONFIG_HOME if set, otherwise default to ~/.config
            xdg_config = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / "linecol"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.toml"

        self._config = self._load() if load and self.config_file.exists() else {}

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_file.exists()

    def _load(self) -> dict:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

    def get(self, key: str, default=None):
        """Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'editor.command')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def output_format(self) -> str:
        fmt = self.get("output.format", "text")
        if fmt not in OUTPUT_FORMATS:
            raise RuntimeError(
                f"Invalid output.format '{fmt}' in {self.config_file}, "
                f"expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        return fmt

    @property
    def jobs(self) -> int:
        jobs = self.get("resolver.jobs", 4)
        # bool is an int subclass; reject `jobs = true`
        if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
            raise RuntimeError(
                f"Invalid resolver.jobs {jobs!r} in {self.config_file}, "
                "expected a positive integer"
            )
        return jobs

    @property
    def editor_command(self) -> str:
        return self.get("editor.command", DEFAULT_EDITOR_COMMAND)

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "WARNING")).upper()

    def settings(self) -> List[Tuple[str, str, bool]]:
        """Effective settings for display.

        Returns:
            (key, value, from_file) for every known key, where from_file is
            False when the built-in default applies

        Raises:
            RuntimeError: If a configured value is invalid
        """
        values = {
            "output.format": self.output_format,
            "resolver.jobs": self.jobs,
            "editor.command": self.editor_command,
            "logging.level": self.log_level,
        }
        return [
            (key, str(value), self.get(key) is not None)
            for key, value in values.items()
        ]

    @staticmethod
    def get_default_config(editor_command: str = DEFAULT_EDITOR_COMMAND) -> str:
        """Return default configuration TOML template.

        Args:
            editor_command: Value written for editor.command
        """
        # JSON string escapes are valid TOML basic-string escapes
        return _TEMPLATE.replace("@EDITOR_COMMAND@", json.dumps(editor_command))

    def create_default(self, editor_command: Optional[str] = None) -> Path:
        """Create default configuration file.

        Args:
            editor_command: Editor command to store instead of the default

        Returns:
            Path to created config file

        Raises:
            FileExistsError: If config already exists
        """
        if self.config_file.exists():
            raise FileExistsError(
                f"Configuration already exists: {self.config_file}\n"
                "Remove it first or use --force to overwrite"
            )

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(
            self.get_default_config(editor_command or DEFAULT_EDITOR_COMMAND)
        )

        return self.config_file


_TEMPLATE = """# Linecol Configuration
# Location: ~/.config/linecol/config.toml
# Follows XDG Base Directory Specification

[output]
# Output format for `linecol resolve`: text, json or yaml
format = "text"

[resolver]
# Worker threads used when several arguments are resolved at once
jobs = 4

[editor]
# Command used by `linecol open`
# Placeholders: {path}, {line}, {column}, {target} (path:line:column)
command = @EDITOR_COMMAND@

[logging]
# DEBUG, INFO, WARNING or ERROR
level = "WARNING"
"""
