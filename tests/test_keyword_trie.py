from __future__ import annotations

import unittest

from flashtext.keywords.trie import ROOT, KeywordTrie


class KeywordTrieTestCase(unittest.TestCase):
    def test_insert_and_contains(self) -> None:
        trie = KeywordTrie(["new", "new york", "newark"])
        self.assertEqual(len(trie), 3)
        self.assertTrue(trie.contains("new york"))
        self.assertIn("newark", trie)
        self.assertFalse(trie.contains("ne"))
        self.assertFalse(trie.contains("new yorker"))
        self.assertNotIn(42, trie)

    def test_insert_is_idempotent(self) -> None:
        trie = KeywordTrie()
        trie.insert("cat")
        nodes = trie.node_count
        trie.insert("cat")
        self.assertEqual(len(trie), 1)
        self.assertEqual(trie.node_count, nodes)

    def test_shared_prefix_shares_nodes(self) -> None:
        trie = KeywordTrie(["cat", "car"])
        # root + c + a + t + r
        self.assertEqual(trie.node_count, 5)

    def test_empty_keyword_ignored(self) -> None:
        trie = KeywordTrie([""])
        self.assertEqual(len(trie), 0)
        self.assertEqual(trie.node_count, 1)
        self.assertFalse(trie.contains(""))

    def test_child_and_terminal(self) -> None:
        trie = KeywordTrie(["ab"])
        a = trie.child(ROOT, "a")
        self.assertIsNotNone(a)
        self.assertIsNone(trie.terminal(a))
        b = trie.child(a, "b")
        self.assertEqual(trie.terminal(b), "ab")
        self.assertIsNone(trie.child(b, "c"))
        self.assertIsNone(trie.child(ROOT, "x"))

    def test_remove_clears_terminal_without_pruning(self) -> None:
        trie = KeywordTrie(["cat", "category"])
        nodes = trie.node_count
        self.assertTrue(trie.remove("category"))
        self.assertFalse(trie.contains("category"))
        self.assertTrue(trie.contains("cat"))
        self.assertEqual(len(trie), 1)
        self.assertEqual(trie.node_count, nodes)

    def test_remove_missing_is_noop(self) -> None:
        trie = KeywordTrie(["cat"])
        self.assertFalse(trie.remove("dog"))
        self.assertFalse(trie.remove("ca"))
        self.assertFalse(trie.remove("cats"))
        self.assertFalse(trie.remove(""))
        self.assertTrue(trie.remove("cat"))
        self.assertFalse(trie.remove("cat"))
        self.assertEqual(len(trie), 0)

    def test_reinsert_after_remove(self) -> None:
        trie = KeywordTrie(["cat"])
        trie.remove("cat")
        trie.insert("cat")
        self.assertTrue(trie.contains("cat"))
        self.assertEqual(len(trie), 1)

    def test_keywords_lists_live_entries(self) -> None:
        trie = KeywordTrie(["a", "ab", "abc", "b", "北京"])
        trie.remove("ab")
        self.assertEqual(set(trie.keywords()), {"a", "abc", "b", "北京"})
        self.assertEqual(sorted(trie), sorted(["a", "abc", "b", "北京"]))


if __name__ == "__main__":
    unittest.main()
