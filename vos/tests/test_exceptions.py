"""Exception hierarchy tests."""

import unittest

from vos.exceptions import (
    ConfigError,
    ConfigValidationError,
    DirectoryNotEmptyError,
    InvalidPatternError,
    InvalidPermissionFormatError,
    NamespaceError,
    NodeExistsError,
    NodeNotFoundError,
    NoParentError,
    NotADirectoryError,
    NotAFileError,
    PersistenceError,
)


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_kinds_and_codes(self):
        errors = [
            (NodeNotFoundError('a'), 'NotFound', 4001),
            (NodeExistsError('a'), 'AlreadyExists', 4002),
            (DirectoryNotEmptyError('a'), 'NotEmpty', 4004),
            (NotAFileError('a'), 'NotAFile', 4008),
            (NotADirectoryError('a'), 'NotADirectory', 4009),
            (InvalidPermissionFormatError('999'), 'InvalidPermissionFormat', 4010),
            (InvalidPatternError('['), 'InvalidPattern', 4011),
            (NoParentError(), 'NoParent', 4012),
            (PersistenceError('failed'), 'PersistenceError', 4020),
        ]
        for exc, kind, code in errors:
            self.assertIsInstance(exc, NamespaceError)
            self.assertEqual(exc.kind, kind)
            self.assertEqual(exc.error_code, code)

    def test_fields(self):
        exc = NodeNotFoundError('docs', path='/home/docs/a')
        self.assertEqual(exc.kind, 'NotFound')
        self.assertEqual(exc.error_code, 4001)
        self.assertEqual(exc.context['name'], 'docs')
        self.assertIn('4001', str(exc))
        self.assertIn('/home/docs/a', str(exc))

    def test_not_empty_entries(self):
        exc = DirectoryNotEmptyError('logs', entries=3)
        self.assertEqual(exc.kind, 'NotEmpty')
        self.assertEqual(exc.context['entries'], 3)

    def test_persistence_error_cause(self):
        cause = OSError('disk gone')
        exc = PersistenceError('save failed', key='k', cause=cause)
        self.assertIs(exc.cause, cause)
        self.assertEqual(exc.context['cause'], 'OSError')

    def test_config_errors_are_separate(self):
        exc = ConfigValidationError('bad', key='storage.backend')
        self.assertIsInstance(exc, ConfigError)
        self.assertNotIsInstance(exc, NamespaceError)
        self.assertEqual(exc.key, 'storage.backend')


if __name__ == '__main__':
    unittest.main()
