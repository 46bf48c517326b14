"""
VOS Configuration Loader

Dataclass-based configuration for the namespace engine:
- JSON configuration file loading
- Default value handling
- Validation of loaded values
- Dot-notation runtime access

Author: YSNRFD
Version: 1.0.0
"""

import json
import re
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Optional

from vos.exceptions import ConfigError, ConfigValidationError
from vos.filesystem.path_resolver import PathResolver, ROOT


_SYMBOLIC_RE = re.compile(r'^[rwx-]{9}$')
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_BACKENDS = ('memory', 'json')

# Files seeded into every fresh namespace by build_default_tree.
SYSTEM_FILES = ('/bin/ls', '/bin/mkdir', '/bin/rm', '/etc/passwd', '/etc/hostname')


@dataclass
class FilesystemConfig:
    """Namespace tree settings."""
    home_path: str = "/home/user"
    default_dir_permissions: str = "rwxr-xr-x"
    default_file_permissions: str = "rw-r--r--"


@dataclass
class StorageConfig:
    """Persistence settings."""
    backend: str = "memory"
    key: str = "virtualFileSystem"
    path: str = "vos_state.json"


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Example:
        >>> config = Config()
        >>> config.filesystem.home_path
        '/home/user'
    """
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'filesystem': FilesystemConfig,
    'storage': StorageConfig,
    'logging': LoggingConfig,
}


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('vos.json')
        >>> config.storage.backend
        'json'
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config()

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Sections and keys missing from the file keep their defaults.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be read or parsed
            ConfigValidationError: If a key or value is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError("Configuration file not found", source=config_path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file: {e}", source=config_path)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file: {e}", source=config_path)

        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be an object", source=config_path)

        config = self._parse_config(data, source=config_path)
        validate_config(config)
        self._config = config
        return self._config

    def _parse_config(self, data: dict[str, Any], source: Optional[str] = None) -> Config:
        """Parse configuration data into a Config object."""
        config = Config()

        for section_name, section_data in data.items():
            section_cls = _SECTIONS.get(section_name)
            if section_cls is None:
                raise ConfigValidationError(
                    f"Unknown configuration section: {section_name}",
                    key=section_name,
                    source=source
                )
            if not isinstance(section_data, dict):
                raise ConfigValidationError(
                    f"Section '{section_name}' must be an object",
                    key=section_name,
                    source=source
                )

            known = {f.name for f in fields(section_cls)}
            for key in section_data:
                if key not in known:
                    raise ConfigValidationError(
                        f"Unknown configuration key: {section_name}.{key}",
                        key=f"{section_name}.{key}",
                        source=source
                    )

            setattr(config, section_name, section_cls(**section_data))

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'storage.backend')
            default: Default value if key not found
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        The change is validated but not written back to disk.
        """
        parts = key.split('.')
        if len(parts) != 2:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        section = getattr(self._config, parts[0], None)
        if section is None or not hasattr(section, parts[1]):
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        previous = getattr(section, parts[1])
        setattr(section, parts[1], value)
        try:
            validate_config(self._config)
        except ConfigValidationError:
            setattr(section, parts[1], previous)
            raise

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self._config)


def validate_config(config: Config) -> None:
    """
    Check configuration values.

    Raises:
        ConfigValidationError: On the first invalid value
    """
    fs = config.filesystem
    if not isinstance(fs.home_path, str) or not fs.home_path.startswith('/'):
        raise ConfigValidationError(
            f"home_path must be an absolute path: {fs.home_path!r}",
            key='filesystem.home_path'
        )
    home = PathResolver.join(ROOT, fs.home_path)
    for system_file in SYSTEM_FILES:
        if PathResolver.is_within(home, system_file):
            raise ConfigValidationError(
                f"home_path collides with system file {system_file}: {fs.home_path!r}",
                key='filesystem.home_path'
            )
    for name in ('default_dir_permissions', 'default_file_permissions'):
        value = getattr(fs, name)
        if not isinstance(value, str) or not _SYMBOLIC_RE.fullmatch(value):
            raise ConfigValidationError(
                f"{name} must be a 9-character symbolic mode: {value!r}",
                key=f'filesystem.{name}'
            )

    storage = config.storage
    if storage.backend not in _BACKENDS:
        raise ConfigValidationError(
            f"Unknown storage backend: {storage.backend!r}",
            key='storage.backend'
        )
    if not storage.key:
        raise ConfigValidationError("storage.key must not be empty", key='storage.key')

    level = config.logging.level
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        raise ConfigValidationError(f"Unknown log level: {level!r}", key='logging.level')


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a file, or return the defaults.

    Args:
        config_path: Optional JSON configuration file

    Returns:
        Config object
    """
    if config_path is None:
        return Config()
    return ConfigLoader().load(config_path)
