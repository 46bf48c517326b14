"""Bootloader tests."""

import unittest

from vos.bootloader import Bootloader, BootStage, boot_engine
from vos.core.config_loader import Config, LoggingConfig
from vos.exceptions import ConfigError
from vos.storage.kv_store import MemoryStore
from vos.storage.persistence import DEFAULT_KEY


def quiet_config() -> Config:
    return Config(logging=LoggingConfig(level='WARNING', console_output=False))


class TestBootloader(unittest.TestCase):

    def test_boot(self):
        store = MemoryStore()
        bootloader = Bootloader(config=quiet_config(), store=store)

        result = bootloader.boot()

        self.assertTrue(result.success, result.message)
        self.assertEqual(result.stage, BootStage.COMPLETE)
        engine = bootloader.get_engine()
        self.assertEqual(engine.current_path, '/home/user')

        bootloader.shutdown()
        self.assertIsNotNone(store.get(DEFAULT_KEY))

    def test_boot_with_home_on_system_file(self):
        config = quiet_config()
        config.filesystem.home_path = '/etc/passwd'
        bootloader = Bootloader(config=config, store=MemoryStore())

        result = bootloader.boot()

        self.assertFalse(result.success)
        self.assertEqual(result.stage, BootStage.ENGINE_INIT)
        self.assertIsInstance(result.error, ConfigError)
        self.assertIsNone(bootloader.get_engine())

    def test_boot_with_missing_config(self):
        result, engine = boot_engine('/definitely/not/here.json', store=MemoryStore())
        self.assertFalse(result.success)
        self.assertEqual(result.stage, BootStage.CONFIG_LOAD)
        self.assertIsInstance(result.error, ConfigError)
        self.assertIsNone(engine)


if __name__ == '__main__':
    unittest.main()
