"""Permission codec tests."""

import unittest

from vos.exceptions import InvalidPermissionFormatError
from vos.filesystem.permissions import PermissionCodec


class TestPermissionCodec(unittest.TestCase):

    def test_octal_to_symbolic(self):
        """Each digit maps to its own rwx triplet."""
        self.assertEqual(PermissionCodec.octal_to_symbolic('755'), 'rwxr-xr-x')
        self.assertEqual(PermissionCodec.octal_to_symbolic('644'), 'rw-r--r--')
        self.assertEqual(PermissionCodec.octal_to_symbolic('000'), '---------')
        self.assertEqual(PermissionCodec.octal_to_symbolic('777'), 'rwxrwxrwx')
        self.assertEqual(PermissionCodec.octal_to_symbolic('421'), 'r---w---x')

    def test_invalid_octal(self):
        for mode in ('8xx', '75', '7555', '789', ''):
            with self.assertRaises(InvalidPermissionFormatError):
                PermissionCodec.octal_to_symbolic(mode)

    def test_validate_symbolic(self):
        self.assertTrue(PermissionCodec.validate_symbolic('rwxr-xr-x'))
        self.assertTrue(PermissionCodec.validate_symbolic('---------'))
        self.assertFalse(PermissionCodec.validate_symbolic('rwxrwxrw'))
        self.assertFalse(PermissionCodec.validate_symbolic('drwxr-xr-x'))
        self.assertFalse(PermissionCodec.validate_symbolic('rwsr-xr-x'))

    def test_normalize(self):
        self.assertEqual(PermissionCodec.normalize('600'), 'rw-------')
        self.assertEqual(PermissionCodec.normalize('r--r--r--'), 'r--r--r--')
        with self.assertRaises(InvalidPermissionFormatError) as ctx:
            PermissionCodec.normalize('999')
        self.assertEqual(ctx.exception.name, '999')

    def test_symbolic_to_octal(self):
        self.assertEqual(PermissionCodec.symbolic_to_octal('rwxr-xr-x'), '755')
        self.assertEqual(PermissionCodec.symbolic_to_octal('rw-r--r--'), '644')
        with self.assertRaises(InvalidPermissionFormatError):
            PermissionCodec.symbolic_to_octal('wr-------')


if __name__ == '__main__':
    unittest.main()
