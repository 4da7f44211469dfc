import random
import string
import unittest

from tries import Trie, TrieConfig, TrieConfigurationError

HELP_WORDS = ["hel", "hell", "hello", "help", "helping", "helps", "dog", "cat", "a"]


def gen_random_words(n, alphabet=string.ascii_lowercase, min_len=3, max_len=10, seed=1337):
    rng = random.Random(seed)
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len))) for _ in range(n)]


class TestHas(unittest.TestCase):
    def test_exact_vs_prefix(self):
        t = Trie(["abcd", "abce"])
        self.assertFalse(t.has("abc", exact_search=True))
        self.assertTrue(t.has("abc", exact_search=False))
        self.assertTrue(t.has("abcd"))
        self.assertTrue(t.has("abce"))
        self.assertFalse(t.has("abcf", exact_search=False))
        self.assertFalse(t.has("abcde", exact_search=False))

    def test_case_insensitive_by_default(self):
        t = Trie(["AbC", "aBd"])
        for probe in ["abc", "ABC", "AbC", "abd", "ABD"]:
            self.assertTrue(t.has(probe), probe)

    def test_case_sensitive(self):
        t = Trie(["AbC"], case_insensitive=False)
        self.assertTrue(t.has("AbC"))
        self.assertFalse(t.has("abc"))
        self.assertFalse(t.has("ABC"))

    def test_empty_string_is_never_found(self):
        for case_insensitive in (True, False):
            t = Trie(["a", "ab"], case_insensitive=case_insensitive)
            self.assertFalse(t.has(""))
            self.assertFalse(t.has("", exact_search=False))

    def test_contains(self):
        t = Trie(["apple"])
        self.assertIn("APPLE", t)
        self.assertNotIn("app", t)

    def test_unicode_casefold(self):
        t = Trie(["Straße"])
        for probe in ["straße", "STRASSE", "Strasse"]:
            self.assertTrue(t.has(probe), probe)


class TestAdd(unittest.TestCase):
    def test_add_after_construction(self):
        t = Trie()
        self.assertTrue(t.is_empty())
        t.add("dog")
        self.assertFalse(t.is_empty())
        self.assertTrue(t.has("dog"))
        self.assertEqual(len(t), 1)

    def test_empty_word_is_ignored(self):
        t = Trie()
        t.add("")
        self.assertTrue(t.is_empty())
        self.assertEqual(len(t), 0)
        self.assertFalse(t.root.is_terminal)

    def test_re_adding_existing_key_keeps_first_payload(self):
        first = {"id": 1, "text": "Apple"}
        second = {"id": 2, "text": "apple"}
        t = Trie([first], text_selector=lambda o: o["text"])
        t.add(second)
        self.assertEqual(len(t), 1)
        self.assertEqual(t.search("app"), [first])
        self.assertIs(t.search("app")[0], first)

    def test_re_adding_string_in_other_case_is_noop(self):
        t = Trie(["Hello"])
        t.add("HELLO")
        self.assertEqual(t.search("h"), ["Hello"])

    def test_per_call_text_selector(self):
        t = Trie()
        item = {"name": "Widget"}
        t.add(item, text_selector=lambda o: o["name"])
        self.assertTrue(t.has("widget"))
        self.assertEqual(t.search("wid"), [item])

    def test_per_call_selector_is_kept_for_lookup_and_removal(self):
        t = Trie()
        item = {"name": "Widget"}
        t.add(item, text_selector=lambda o: o["name"])
        self.assertTrue(t.has(item))
        self.assertIn(item, t)
        t.remove(item)
        self.assertFalse(t.has(item))
        self.assertTrue(t.is_empty())

    def test_configured_selector_wins_over_per_call_selector(self):
        t = Trie(text_selector=lambda o: o["text"])
        t.add({"text": "apple", "name": "pear"}, text_selector=lambda o: o["name"])
        self.assertTrue(t.has("pear"))
        self.assertTrue(t.has({"text": "pear"}))

    def test_selector_returning_none_is_ignored(self):
        t = Trie(text_selector=lambda o: o.get("text"))
        t.add({"id": 3})
        self.assertTrue(t.is_empty())

    def test_selector_must_return_str(self):
        t = Trie(text_selector=lambda o: o["id"])
        with self.assertRaises(TypeError):
            t.add({"id": 3})


class TestRemove(unittest.TestCase):
    def test_remove_prunes_but_keeps_shared_prefix(self):
        t = Trie(["abcd", "abce"])
        t.remove("abcd")
        self.assertFalse(t.has("abcd"))
        self.assertFalse(t.has("abcd", exact_search=False))
        self.assertTrue(t.has("abc", exact_search=False))
        self.assertTrue(t.has("abce"))
        t.remove("abce")
        self.assertTrue(t.is_empty())
        self.assertEqual(len(t), 0)
        self.assertIsNotNone(t.root)
        self.assertEqual(t.count_nodes(), 1)

    def test_remove_inner_word_keeps_longer_words(self):
        t = Trie(["a", "ab", "abc"])
        t.remove("ab")
        self.assertFalse(t.has("ab"))
        self.assertTrue(t.has("ab", exact_search=False))
        self.assertTrue(t.has("a"))
        self.assertTrue(t.has("abc"))

    def test_remove_longer_word_keeps_inner_word(self):
        t = Trie(["a", "ab", "abc"])
        t.remove("abc")
        self.assertTrue(t.has("ab"))
        self.assertFalse(t.has("abc", exact_search=False))
        self.assertEqual(t.count_nodes(), 3)

    def test_remove_absent_is_noop(self):
        t = Trie(["hello"])
        t.remove("help")
        t.remove("hell")
        t.remove("")
        self.assertTrue(t.has("hello"))
        self.assertEqual(len(t), 1)

    def test_remove_from_empty_is_noop(self):
        t = Trie()
        t.remove("anything")
        self.assertTrue(t.is_empty())

    def test_remove_uses_case_policy(self):
        t = Trie(["Hello"])
        t.remove("HELLO")
        self.assertTrue(t.is_empty())

    def test_remove_object_by_selector(self):
        item = {"text": "cat"}
        t = Trie([item, {"text": "car"}], text_selector=lambda o: o["text"])
        t.remove(item)
        self.assertFalse(t.has("cat"))
        self.assertTrue(t.has("car"))

    def test_removed_word_can_be_added_again(self):
        t = Trie(["x1"])
        t.remove("x1")
        t.add("X1")
        self.assertEqual(t.search("x"), ["X1"])

    def test_no_dangling_branches(self):
        words = gen_random_words(300, alphabet="abc", min_len=1, max_len=6)
        t = Trie(words)
        for w in words[::2]:
            t.remove(w)

        # every leaf must be terminal
        stack = [t.root]
        while stack:
            node = stack.pop()
            if node is not t.root and not node.children:
                self.assertTrue(node.is_terminal)
            if node.children:
                stack.extend(node.children.values())


class TestSearch(unittest.TestCase):
    def test_prefix_search(self):
        t = Trie(HELP_WORDS)
        self.assertEqual(set(t.search("hel")), {"hel", "hell", "hello", "help", "helping", "helps"})
        self.assertEqual(t.search("xyz"), [])
        self.assertEqual(t.search("a"), ["a"])

    def test_search_includes_prefix_node_first(self):
        t = Trie(HELP_WORDS)
        self.assertEqual(t.search("hel")[0], "hel")

    def test_search_follows_insertion_order(self):
        t = Trie(["cb", "ca", "cc"])
        self.assertEqual(t.search("c"), ["cb", "ca", "cc"])

    def test_search_empty_prefix(self):
        t = Trie(HELP_WORDS)
        self.assertEqual(t.search(""), [])

    def test_search_is_case_insensitive(self):
        t = Trie(["Hello", "help"])
        self.assertEqual(set(t.search("HEL")), {"Hello", "help"})

    def test_search_limit(self):
        t = Trie(HELP_WORDS)
        self.assertEqual(len(t.search("hel", limit=2)), 2)
        self.assertEqual(len(t.search("hel", limit=100)), 6)

    def test_search_returns_original_objects(self):
        items = [{"id": i, "text": text} for i, text in enumerate(["Hello", "help", "dog"])]
        t = Trie(items, text_selector=lambda o: o["text"])
        got = t.search("he")
        self.assertEqual(len(got), 2)
        self.assertTrue(all(any(g is item for item in items) for g in got))
        self.assertEqual({g["id"] for g in got}, {0, 1})

    def test_string_word_bypasses_selector(self):
        t = Trie(["plain"], text_selector=lambda o: o["text"])
        self.assertTrue(t.has("plain"))
        self.assertEqual(t.search("pl"), ["plain"])

    def test_search_after_remove(self):
        t = Trie(HELP_WORDS)
        t.remove("help")
        t.remove("hello")
        self.assertEqual(set(t.search("hel")), {"hel", "hell", "helping", "helps"})


class TestStructure(unittest.TestCase):
    def test_iter_and_len(self):
        t = Trie(HELP_WORDS)
        self.assertEqual(len(t), len(HELP_WORDS))
        self.assertEqual(set(t), set(HELP_WORDS))

    def test_count_nodes_and_avg_branch_factor(self):
        t = Trie(["a", "ab", "ac", "b"])
        self.assertEqual(t.count_nodes(), 5)
        self.assertEqual(t.count_nodes(get_avg_branch_factor=True), 2.0)
        self.assertEqual(Trie().count_nodes(get_avg_branch_factor=True), 0.0)

    def test_node_labels(self):
        t = Trie(["ab"])
        a = t.root.children["a"]
        self.assertEqual(t.root.character, "")
        self.assertEqual(a.character, "a")
        self.assertEqual(a.children["b"].payload, "ab")

    def test_config_object(self):
        t = Trie(["MiXeD"], config=TrieConfig(case_insensitive=False))
        self.assertTrue(t.has("MiXeD"))
        self.assertFalse(t.has("mixed"))

    def test_bad_selector_raises(self):
        with self.assertRaises(TrieConfigurationError):
            TrieConfig(text_selector="text")
        with self.assertRaises(ValueError):
            Trie(text_selector=42)

    def test_large_random_roundtrip(self):
        words = gen_random_words(2000, min_len=4, max_len=9)
        t = Trie(words + words[:200])
        unique = {w for w in words}
        self.assertEqual(len(t), len(unique))
        self.assertEqual(set(t), unique)

        to_delete = words[: len(words) // 2]
        for w in to_delete:
            t.remove(w)
        self.assertFalse(any(t.has(w) for w in to_delete))
        survivors = unique - set(to_delete)
        self.assertEqual(set(t), survivors)
        self.assertEqual(len(t), len(survivors))


if __name__ == "__main__":
    unittest.main(verbosity=2)
