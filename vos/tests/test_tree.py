"""Namespace tree tests."""

import unittest

from vos.exceptions import NodeNotFoundError, NotADirectoryError, NoParentError
from vos.filesystem.node import DirectoryNode, FileNode
from vos.filesystem.tree import NamespaceTree


def make_tree() -> NamespaceTree:
    """/a/b/c.txt, /a/notes.txt and an empty /empty."""
    tree = NamespaceTree()
    a = DirectoryNode()
    b = DirectoryNode()
    b.add_entry('c.txt', FileNode(content='c'))
    a.add_entry('b', b)
    a.add_entry('notes.txt', FileNode(content='hello'))
    tree.root.add_entry('a', a)
    tree.root.add_entry('empty', DirectoryNode())
    return tree


class TestLookup(unittest.TestCase):

    def setUp(self):
        self.tree = make_tree()

    def test_root(self):
        self.assertIs(self.tree.lookup('/'), self.tree.root)

    def test_nested(self):
        node = self.tree.lookup('/a/b/c.txt')
        self.assertTrue(node.is_file)
        self.assertEqual(node.content, 'c')

    def test_missing_names_first_missing_component(self):
        with self.assertRaises(NodeNotFoundError) as ctx:
            self.tree.lookup('/a/x/y/z')
        self.assertEqual(ctx.exception.name, 'x')
        self.assertEqual(ctx.exception.kind, 'NotFound')

    def test_file_as_directory_names_the_file(self):
        with self.assertRaises(NotADirectoryError) as ctx:
            self.tree.lookup('/a/notes.txt/inner')
        self.assertEqual(ctx.exception.name, 'notes.txt')

    def test_exists(self):
        self.assertTrue(self.tree.exists('/a/b'))
        self.assertFalse(self.tree.exists('/a/notes.txt/inner'))
        self.assertFalse(self.tree.exists('/nope'))


class TestParentAndName(unittest.TestCase):

    def setUp(self):
        self.tree = make_tree()

    def test_existing_target(self):
        parent, name = self.tree.parent_and_name('/a/b')
        self.assertIs(parent, self.tree.lookup('/a'))
        self.assertEqual(name, 'b')

    def test_missing_target_is_fine(self):
        parent, name = self.tree.parent_and_name('/a/new.txt')
        self.assertIs(parent, self.tree.lookup('/a'))
        self.assertEqual(name, 'new.txt')

    def test_top_level(self):
        parent, name = self.tree.parent_and_name('/empty')
        self.assertIs(parent, self.tree.root)
        self.assertEqual(name, 'empty')

    def test_root_has_no_parent(self):
        with self.assertRaises(NoParentError):
            self.tree.parent_and_name('/')

    def test_missing_ancestor(self):
        with self.assertRaises(NodeNotFoundError) as ctx:
            self.tree.parent_and_name('/missing/child')
        self.assertEqual(ctx.exception.name, 'missing')

    def test_file_ancestor(self):
        with self.assertRaises(NotADirectoryError) as ctx:
            self.tree.parent_and_name('/a/notes.txt/child')
        self.assertEqual(ctx.exception.name, 'notes.txt')


class TestWalk(unittest.TestCase):

    def test_walk_yields_every_descendant(self):
        tree = make_tree()
        paths = {path for path, _, _ in tree.walk(tree.root)}
        self.assertEqual(
            paths,
            {'/a', '/a/b', '/a/b/c.txt', '/a/notes.txt', '/empty'}
        )

    def test_walk_from_subdirectory(self):
        tree = make_tree()
        paths = [path for path, _, _ in tree.walk(tree.lookup('/a/b'), '/a/b')]
        self.assertEqual(paths, ['/a/b/c.txt'])

    def test_walk_visits_parent_before_its_entries(self):
        tree = make_tree()
        paths = [path for path, _, _ in tree.walk(tree.root)]
        self.assertEqual(
            paths,
            ['/a', '/a/b', '/a/b/c.txt', '/a/notes.txt', '/empty']
        )

    def test_walk_deeper_than_recursion_limit(self):
        tree = NamespaceTree()
        current = tree.root
        for _ in range(3000):
            child = DirectoryNode()
            current.add_entry('d', child)
            current = child
        current.add_entry('end.txt', FileNode(content='end'))

        entries = list(tree.walk(tree.root))
        self.assertEqual(len(entries), 3001)
        self.assertEqual(entries[-1][1], 'end.txt')
        self.assertEqual(tree.count(), (3000, 1, 3))

    def test_count(self):
        directories, files, total = make_tree().count()
        self.assertEqual(directories, 3)
        self.assertEqual(files, 2)
        self.assertEqual(total, len('c') + len('hello'))


if __name__ == '__main__':
    unittest.main()
