from re import compile
from unittest import TestCase

from tex_snips.consts import DEFAULT_DESCRIPTION
from tex_snips.snippets.loaders.validate import validate_raw_snippet, validate_raw_snippets
from tex_snips.snippets.types import RawSnippet, ShapeError


def _good(trigger: str) -> dict:
    return {"trigger": trigger, "replacement": trigger.upper(), "options": "t"}


class ValidateOne(TestCase):
    def test_1(self) -> None:
        raw = validate_raw_snippet(_good("a"))
        self.assertEqual(
            raw,
            RawSnippet(
                trigger="a",
                replacement="A",
                options="t",
                flags="",
                priority=0,
                description=DEFAULT_DESCRIPTION,
            ),
        )

    def test_2(self) -> None:
        pattern = compile("a")
        fn = lambda m: m
        raw = validate_raw_snippet(
            {
                "trigger": pattern,
                "replacement": fn,
                "options": "m",
                "flags": "i",
                "priority": 1.5,
                "description": "desc",
                "unknown": object(),
            }
        )
        assert raw
        self.assertIs(raw.trigger, pattern)
        self.assertIs(raw.replacement, fn)
        self.assertEqual((raw.flags, raw.priority, raw.description), ("i", 1.5, "desc"))

    def test_3(self) -> None:
        self.assertIsNone(validate_raw_snippet({"trigger": "a", "replacement": "b"}))
        self.assertIsNone(validate_raw_snippet({**_good("a"), "trigger": 1}))
        self.assertIsNone(validate_raw_snippet({**_good("a"), "replacement": None}))
        self.assertIsNone(validate_raw_snippet({**_good("a"), "priority": "1"}))
        self.assertIsNone(validate_raw_snippet({**_good("a"), "priority": True}))
        self.assertIsNone(validate_raw_snippet({**_good("a"), "flags": None}))
        self.assertIsNone(validate_raw_snippet(["a", "b", "c"]))


class ValidateMany(TestCase):
    def test_1(self) -> None:
        raws = validate_raw_snippets([_good("a"), _good("b"), _good("c")])
        self.assertEqual([raw.trigger for raw in raws], ["a", "b", "c"])

    def test_2(self) -> None:
        for value in ({"a": 1}, "abc", 1, None):
            with self.assertRaises(ShapeError) as ctx:
                validate_raw_snippets(value)
            self.assertIn("Expected snippets to be an array", str(ctx.exception))

    def test_3(self) -> None:
        bad = {"trigger": "zzz_offending", "replacement": 1, "options": "t"}
        later = {"trigger": "zzz_later", "options": 2}
        with self.assertRaises(ShapeError) as ctx:
            validate_raw_snippets([_good("a"), bad, _good("b"), later])

        msg = str(ctx.exception)
        self.assertIn("index 1", msg)
        self.assertIn("zzz_offending", msg)
        self.assertIn("Erroring snippet", msg)
        self.assertNotIn("zzz_later", msg)
        self.assertNotIn("trigger: a", msg)

    def test_4(self) -> None:
        self.assertEqual(validate_raw_snippets([]), ())
