"""
VOS Subsystem Base

Lifecycle base class for long-lived components such as the namespace
engine.

Lifecycle:
    1. __init__() - Subsystem is created
    2. initialize() - Subsystem prepares its state
    3. stop() - Subsystem flushes state and stops
    4. cleanup() - Subsystem releases resources

Author: YSNRFD
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from enum import Enum, auto

from vos.logger import Logger, get_logger


class SubsystemState(Enum):
    """Lifecycle state of a subsystem."""
    CREATED = auto()
    INITIALIZING = auto()
    INITIALIZED = auto()
    STOPPED = auto()
    ERROR = auto()


class Subsystem(ABC):
    """Abstract base class for engine subsystems."""

    def __init__(self, name: str):
        self._name = name
        self._logger = get_logger(name)
        self._state = SubsystemState.CREATED

    @property
    def name(self) -> str:
        """Get the subsystem name."""
        return self._name

    @property
    def state(self) -> SubsystemState:
        """Get the current state."""
        return self._state

    @property
    def logger(self) -> Logger:
        """Get the subsystem logger."""
        return self._logger

    def set_state(self, state: SubsystemState) -> None:
        """Set the subsystem state."""
        self._state = state
        self._logger.debug(f"State changed to {state.name}")

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the subsystem for operation."""

    def stop(self) -> None:
        """Stop the subsystem. Default implementation only records the state."""
        self.set_state(SubsystemState.STOPPED)

    def cleanup(self) -> None:
        """Release resources. Default implementation does nothing."""
