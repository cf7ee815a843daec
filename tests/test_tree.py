#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for the directory tree renderer."""
from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
TOOLS_DIR = Path(__file__).resolve().parent / "tools"
for _p in (SRC, TOOLS_DIR):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

import build_fixtures  # noqa: E402
from concacti.rendering.tree import DirectoryTreeRenderer, TreeNode  # noqa: E402


class TreeNodeRenderTests(unittest.TestCase):
    def test_single_node(self) -> None:
        self.assertEqual(TreeNode("root").render(), "root\n")

    def test_box_drawing_layout(self) -> None:
        tree = TreeNode("root")
        tree.push(TreeNode("a.txt"))
        sub = TreeNode("sub")
        sub.push(TreeNode("b.txt")).push(TreeNode("inner", [TreeNode("c.txt")]))
        tree.push(sub)

        expected = (
            "root\n"
            "├── a.txt\n"
            "└── sub\n"
            "    ├── b.txt\n"
            "    └── inner\n"
            "        └── c.txt\n"
        )
        self.assertEqual(tree.render(), expected)
        self.assertEqual(str(tree), expected)

    def test_vertical_bar_continues_under_non_last_child(self) -> None:
        tree = TreeNode("r", [TreeNode("x", [TreeNode("y")]), TreeNode("z")])
        self.assertEqual(tree.render(), "r\n├── x\n│   └── y\n└── z\n")


class DirectoryTreeRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = build_fixtures.build(Path(self._tmp.name) / "project")
        self.renderer = DirectoryTreeRenderer()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_root_label_is_canonical_basename(self) -> None:
        tree = self.renderer.build(self.root / "subdir" / "..")
        self.assertEqual(tree.label, "project")

    def test_children_follow_listing_order(self) -> None:
        tree = self.renderer.build(self.root)
        with os.scandir(self.root) as it:
            listing = [e.name for e in it]
        self.assertEqual([c.label for c in tree.children], listing)

    def test_directories_become_subtrees(self) -> None:
        tree = self.renderer.build(self.root)
        by_label = {c.label: c for c in tree.children}
        self.assertEqual([c.label for c in by_label["subdir"].children], ["file3.ts"])
        self.assertEqual([c.label for c in by_label["node_modules"].children], ["file4.ts"])
        self.assertEqual(by_label["file1.txt"].children, [])

    def test_render_mentions_every_entry(self) -> None:
        text = self.renderer.render(self.root)
        for name in ("project", "subdir", "node_modules", "file1.txt", "file2.ts", "file3.ts", "file4.ts"):
            self.assertIn(name, text)
        self.assertTrue(text.endswith("\n"))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not available")
    def test_symlinked_directories_are_leaves(self) -> None:
        try:
            os.symlink(self.root, self.root / "loop", target_is_directory=True)
        except OSError:
            self.skipTest("cannot create symlinks here")
        tree = self.renderer.build(self.root)
        loop = next(c for c in tree.children if c.label == "loop")
        self.assertEqual(loop.children, [])

    def test_missing_root_raises(self) -> None:
        with self.assertRaises(OSError):
            self.renderer.render(self.root / "missing")


if __name__ == "__main__":
    unittest.main(verbosity=2)
