"""
VOS Bootloader

Brings up a namespace engine from configuration:
    1. Load configuration
    2. Initialize logging
    3. Open the key-value store
    4. Restore or create the namespace

Author: YSNRFD
Version: 1.0.0
"""

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from vos.core.config_loader import Config, ConfigLoader
from vos.exceptions import ConfigError
from vos.filesystem.engine import NamespaceEngine
from vos.logger import Logger, LogLevel, get_logger
from vos.storage.kv_store import KeyValueStore, create_store


class BootStage(Enum):
    """Boot sequence stages."""
    CONFIG_LOAD = auto()
    LOGGING_INIT = auto()
    STORAGE_INIT = auto()
    ENGINE_INIT = auto()
    COMPLETE = auto()
    FAILED = auto()


@dataclass
class BootResult:
    """Result of the boot process."""
    success: bool
    stage: BootStage
    message: str
    elapsed_time: float
    error: Optional[Exception] = None


class Bootloader:
    """
    Boots a NamespaceEngine.

    Example:
        >>> bootloader = Bootloader('vos.json')
        >>> result = bootloader.boot()
        >>> engine = bootloader.get_engine()
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config: Optional[Config] = None,
        store: Optional[KeyValueStore] = None
    ):
        self._config_path = config_path
        self._config = config
        self._store = store
        self._stage = BootStage.CONFIG_LOAD
        self._engine: Optional[NamespaceEngine] = None
        self._logger = get_logger('bootloader')

    @property
    def stage(self) -> BootStage:
        return self._stage

    @property
    def config(self) -> Optional[Config]:
        return self._config

    def boot(self) -> BootResult:
        """
        Execute the boot sequence.

        Returns:
            BootResult indicating success or failure
        """
        start = time.time()
        try:
            self._stage = BootStage.CONFIG_LOAD
            self._load_config()

            self._stage = BootStage.LOGGING_INIT
            self._init_logging()

            self._stage = BootStage.STORAGE_INIT
            if self._store is None:
                self._store = create_store(self._config)

            self._stage = BootStage.ENGINE_INIT
            self._engine = NamespaceEngine(self._store, self._config)

            self._stage = BootStage.COMPLETE
            elapsed = time.time() - start
            self._logger.info(
                "Boot complete",
                context={'elapsed_ms': f"{elapsed * 1000:.2f}", 'cwd': self._engine.current_path}
            )
            return BootResult(
                success=True,
                stage=self._stage,
                message="Namespace engine ready",
                elapsed_time=elapsed
            )

        except (ConfigError, OSError, ValueError) as e:
            failed_stage = self._stage
            self._stage = BootStage.FAILED
            self._logger.critical(f"Boot failed at stage {failed_stage.name}: {e}")
            return BootResult(
                success=False,
                stage=failed_stage,
                message=f"Boot failed: {e}",
                elapsed_time=time.time() - start,
                error=e
            )

    def _load_config(self) -> None:
        if self._config is not None:
            return
        loader = ConfigLoader()
        if self._config_path is not None:
            loader.load(self._config_path)
        self._config = loader.config

    def _init_logging(self) -> None:
        settings = self._config.logging
        Logger.initialize(
            level=LogLevel.from_name(settings.level),
            log_file=settings.log_file,
            console=settings.console_output
        )

    def get_engine(self) -> Optional[NamespaceEngine]:
        """Get the engine created by ``boot``."""
        return self._engine

    def shutdown(self) -> None:
        """Flush and stop the engine."""
        if self._engine is not None:
            self._engine.stop()
            self._logger.info("Namespace engine shut down")


def boot_engine(
    config_path: Optional[str] = None,
    store: Optional[KeyValueStore] = None
) -> tuple[BootResult, Optional[NamespaceEngine]]:
    """
    Convenience function to boot an engine.

    Returns:
        Tuple of (BootResult, engine or None)
    """
    bootloader = Bootloader(config_path, store=store)
    result = bootloader.boot()
    return result, bootloader.get_engine()
