"""
Persisted display settings.

Settings live in ``<config dir>/settings.json`` where the config dir is
``$HOME/.term-shell`` (``%APPDATA%\\.term-shell`` on Windows). A missing or
unreadable file yields the defaults; saving creates the directory.
"""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from .exceptions import CustomError, ShellIOError

logger = logging.getLogger(__name__)

if sys.platform == 'win32':
    CONFIG_PATH_DIR_ENVVAR = 'APPDATA'
    USER_NAME_ENVVAR = 'USERNAME'
else:
    CONFIG_PATH_DIR_ENVVAR = 'HOME'
    USER_NAME_ENVVAR = 'USER'

CONFIG_DIR_NAME = '.term-shell'
SETTINGS_FILE_NAME = 'settings.json'

ANSI_RESET = '\x1b[0m'


@dataclass
class Color:
    """24-bit terminal color."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for component in (self.r, self.g, self.b):
            if not isinstance(component, int) or not 0 <= component <= 255:
                raise CustomError(f"color component {component!r} is not in 0..255")

    def to_ansi(self) -> str:
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"

    def paint(self, text: str) -> str:
        """Wrap text in this color followed by a reset."""
        return f"{self.to_ansi()}{text}{ANSI_RESET}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Color':
        return cls(data['r'], data['g'], data['b'])

    def __str__(self):
        return f"({self.r}, {self.g}, {self.b})"


def default_path_color() -> Color:
    return Color(20, 255, 247)


def default_user_name_color() -> Color:
    return Color(179, 30, 0)


def default_git_branch_color() -> Color:
    return Color(255, 204, 246)


@dataclass
class Settings:
    """Display settings shared by the prompt and the ``cfg`` command."""

    path_color: Color = field(default_factory=default_path_color)
    user_name_color: Color = field(default_factory=default_user_name_color)
    git_branch_color: Color = field(default_factory=default_git_branch_color)
    show_user_name: bool = True

    def reset(self) -> None:
        defaults = Settings()
        self.path_color = defaults.path_color
        self.user_name_color = defaults.user_name_color
        self.git_branch_color = defaults.git_branch_color
        self.show_user_name = defaults.show_user_name

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """
        Build settings from decoded JSON; absent keys keep their defaults.

        Raises:
            CustomError: If a color is malformed
        """
        settings = cls()
        try:
            for key in ('path_color', 'user_name_color', 'git_branch_color'):
                if key in data:
                    setattr(settings, key, Color.from_dict(data[key]))
        except (KeyError, TypeError) as e:
            raise CustomError(f"malformed color in settings: {e}")
        if 'show_user_name' in data:
            settings.show_user_name = bool(data['show_user_name'])
        return settings

    def save(self, config_dir: Optional[str] = None) -> str:
        """
        Write the settings to disk.

        Args:
            config_dir: Directory to write into; defaults to ``config_location()``

        Returns:
            Path of the written settings file

        Raises:
            CustomError: If no config location can be determined
            ShellIOError: If the directory or file cannot be written
        """
        if config_dir is None:
            config_dir = config_location()
        if config_dir is None:
            raise CustomError(f"no suitable path: ${CONFIG_PATH_DIR_ENVVAR} is not set")

        path = os.path.join(config_dir, SETTINGS_FILE_NAME)
        try:
            os.makedirs(config_dir, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise ShellIOError(e, path)

        logger.info("settings saved to %s", path)
        return path


def config_location() -> Optional[str]:
    """Directory the config folder should live in, whether or not it exists."""
    base = os.environ.get(CONFIG_PATH_DIR_ENVVAR)
    if not base:
        return None
    return os.path.join(base, CONFIG_DIR_NAME)


def config_folder() -> Optional[str]:
    """The config folder, only if it already exists."""
    location = config_location()
    if location is None or not os.path.isdir(location):
        return None
    return location


def load_settings(config_dir: Optional[str] = None) -> Settings:
    """
    Load settings from disk, falling back to defaults.

    A missing file is silent; a corrupt one is reported on stderr and logged.
    """
    if config_dir is None:
        config_dir = config_folder()
    if config_dir is None:
        return Settings()

    path = os.path.join(config_dir, SETTINGS_FILE_NAME)
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return Settings()
    except (OSError, ValueError) as e:
        logger.warning("could not read settings from %s: %s", path, e)
        print(f"failed to load settings! ({e})", file=sys.stderr)
        return Settings()

    try:
        if not isinstance(data, dict):
            raise CustomError("settings file does not contain an object")
        return Settings.from_dict(data)
    except CustomError as e:
        logger.warning("invalid settings in %s: %s", path, e)
        print(f"failed to load settings! ({e})", file=sys.stderr)
        return Settings()


def current_user_name() -> Optional[str]:
    return os.environ.get(USER_NAME_ENVVAR) or None
