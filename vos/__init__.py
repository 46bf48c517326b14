"""
VOS - Virtual namespace engine

An in-memory hierarchical filesystem with a working-directory cursor,
permission handling, glob-lite search and key-value persistence.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# The engine is imported first: storage depends on the node types.
from .filesystem import NamespaceEngine, OperationResult
from .storage import PersistenceAdapter, MemoryStore, JsonFileStore
from .core import Config, ConfigLoader, load_config
from .logger import Logger, get_logger

__all__ = [
    'NamespaceEngine',
    'OperationResult',
    'PersistenceAdapter',
    'MemoryStore',
    'JsonFileStore',
    'Config',
    'ConfigLoader',
    'load_config',
    'Logger',
    'get_logger',
]
