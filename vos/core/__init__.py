"""
VOS Core Module

Core components:
- Configuration Loader
- Subsystem lifecycle base
"""

from .config_loader import (
    Config,
    ConfigLoader,
    FilesystemConfig,
    StorageConfig,
    LoggingConfig,
    load_config,
    validate_config,
)
from .subsystem import Subsystem, SubsystemState

__all__ = [
    # Config
    'Config',
    'ConfigLoader',
    'FilesystemConfig',
    'StorageConfig',
    'LoggingConfig',
    'load_config',
    'validate_config',
    # Subsystem
    'Subsystem',
    'SubsystemState',
]
