"""Configuration loader tests."""

import json
import os
import tempfile
import unittest

from vos.core.config_loader import SYSTEM_FILES, Config, ConfigLoader, load_config
from vos.exceptions import ConfigError, ConfigValidationError
from vos.filesystem.engine import NamespaceEngine
from vos.storage.kv_store import JsonFileStore, MemoryStore, create_store
from vos.storage.persistence import DEFAULT_KEY


class TestConfig(unittest.TestCase):
    """Test the configuration system."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, data) -> str:
        path = os.path.join(self.tmpdir.name, 'vos.json')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(data if isinstance(data, str) else json.dumps(data))
        return path

    def test_default_config(self):
        config = Config()
        self.assertEqual(config.filesystem.home_path, '/home/user')
        self.assertEqual(config.filesystem.default_dir_permissions, 'rwxr-xr-x')
        self.assertEqual(config.filesystem.default_file_permissions, 'rw-r--r--')
        self.assertEqual(config.storage.backend, 'memory')
        self.assertEqual(config.storage.key, DEFAULT_KEY)

    def test_load(self):
        path = self.write({
            'filesystem': {'home_path': '/users/alice'},
            'storage': {'backend': 'json', 'path': 'state.json'},
        })
        config = ConfigLoader().load(path)
        self.assertEqual(config.filesystem.home_path, '/users/alice')
        self.assertEqual(config.filesystem.default_dir_permissions, 'rwxr-xr-x')
        self.assertEqual(config.storage.backend, 'json')
        self.assertEqual(config.logging.level, 'INFO')

    def test_load_config_defaults(self):
        self.assertEqual(load_config(), Config())

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(os.path.join(self.tmpdir.name, 'absent.json'))

    def test_invalid_json(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(self.write('{oops'))

    def test_unknown_key(self):
        with self.assertRaises(ConfigValidationError) as ctx:
            ConfigLoader().load(self.write({'storage': {'colour': 'blue'}}))
        self.assertEqual(ctx.exception.key, 'storage.colour')

    def test_invalid_values(self):
        for data in (
            {'filesystem': {'home_path': 'relative'}},
            {'filesystem': {'default_file_permissions': '644'}},
            {'storage': {'backend': 'redis'}},
            {'logging': {'level': 'LOUD'}},
        ):
            with self.assertRaises(ConfigValidationError, msg=str(data)):
                ConfigLoader().load(self.write(data))

    def test_home_on_system_file_rejected(self):
        for home in ('/bin/ls', '/etc/passwd', '/etc/passwd/inner', '/etc//hostname/'):
            with self.assertRaises(ConfigValidationError, msg=home) as ctx:
                ConfigLoader().load(self.write({'filesystem': {'home_path': home}}))
            self.assertEqual(ctx.exception.key, 'filesystem.home_path')

    def test_home_beside_system_files_allowed(self):
        for home in ('/bin', '/etc/users', '/bin/lsx'):
            config = ConfigLoader().load(self.write({'filesystem': {'home_path': home}}))
            self.assertEqual(config.filesystem.home_path, home)

    def test_engine_rejects_home_on_system_file(self):
        config = Config()
        config.filesystem.home_path = '/bin/ls'
        with self.assertRaises(ConfigValidationError):
            NamespaceEngine(MemoryStore(), config)

    def test_home_under_bin_keeps_cursor_on_directory(self):
        config = Config()
        config.filesystem.home_path = '/bin'
        engine = NamespaceEngine(MemoryStore(), config)
        self.assertEqual(engine.current_path, '/bin')
        self.assertTrue(engine.get_file_details('/bin').value['is_directory'])
        for path in SYSTEM_FILES:
            self.assertTrue(engine.file_exists(path).value, path)

    def test_get_set(self):
        loader = ConfigLoader()
        self.assertEqual(loader.get('storage.key'), DEFAULT_KEY)
        self.assertEqual(loader.get('storage.nothing', 'fallback'), 'fallback')

        loader.set('storage.key', 'fs')
        self.assertEqual(loader.config.storage.key, 'fs')

        with self.assertRaises(ConfigValidationError):
            loader.set('storage.backend', 'redis')
        self.assertEqual(loader.config.storage.backend, 'memory')

        with self.assertRaises(ConfigValidationError):
            loader.set('storage.unknown', 1)

    def test_to_dict(self):
        data = ConfigLoader().to_dict()
        self.assertEqual(data['filesystem']['home_path'], '/home/user')

    def test_create_store(self):
        self.assertIsInstance(create_store(Config()), MemoryStore)
        config = Config()
        config.storage.backend = 'json'
        config.storage.path = os.path.join(self.tmpdir.name, 's.json')
        self.assertIsInstance(create_store(config), JsonFileStore)

    def test_engine_uses_configured_home(self):
        config = Config()
        config.filesystem.home_path = '/users/alice'
        engine = NamespaceEngine(MemoryStore(), config)
        self.assertEqual(engine.current_path, '/users/alice')
        self.assertTrue(engine.file_exists('/users/alice/welcome.txt').value)
        engine.change_directory('/tmp')
        self.assertEqual(engine.change_directory('~').value, '/users/alice')

    def test_engine_uses_configured_key_and_permissions(self):
        config = Config()
        config.storage.key = 'custom'
        config.filesystem.default_file_permissions = 'rw-------'
        store = MemoryStore()
        engine = NamespaceEngine(store, config)
        engine.create_file('/tmp/secret')
        self.assertIn('custom', store)
        self.assertEqual(engine.get_file_details('/tmp/secret').value['permissions'], 'rw-------')


if __name__ == '__main__':
    unittest.main()
