from re import compile
from unittest import TestCase

from tex_snips.snippets.serialize import serialize_snippet_like
from tex_snips.snippets.types import RawSnippet


class Serialize(TestCase):
    def test_1(self) -> None:
        raw = {"trigger": compile("ab", 0), "replacement": len, "options": "rA"}
        text = serialize_snippet_like(raw)
        self.assertIn("[[RegExp]]: /ab/u", text)
        self.assertIn("[[Function]]", text)
        self.assertIn("options: rA", text)

    def test_2(self) -> None:
        raw = RawSnippet(trigger="a", replacement="line 1\nline 2", options="t")
        text = serialize_snippet_like(raw)
        self.assertTrue(text.startswith("trigger: a"))
        self.assertIn("replacement: |-", text)
        self.assertIn("priority: 0", text)

    def test_3(self) -> None:
        self.assertEqual(serialize_snippet_like("oops"), "'oops'")
        self.assertEqual(serialize_snippet_like(3), "3")
