"""
VOS Storage Module

Persistence of the namespace tree:
- Key-value blob stores (memory, JSON file)
- Tree/cursor serialization with timestamp restoration
"""

from .kv_store import KeyValueStore, MemoryStore, JsonFileStore, create_store
from .persistence import (
    PersistenceAdapter,
    CorruptStateError,
    DEFAULT_KEY,
    serialize_node,
    deserialize_node,
    serialize_state,
    deserialize_state,
)

__all__ = [
    # Stores
    'KeyValueStore',
    'MemoryStore',
    'JsonFileStore',
    'create_store',
    # Persistence
    'PersistenceAdapter',
    'CorruptStateError',
    'DEFAULT_KEY',
    'serialize_node',
    'deserialize_node',
    'serialize_state',
    'deserialize_state',
]
