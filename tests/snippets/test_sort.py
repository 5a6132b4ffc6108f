from unittest import TestCase

from tex_snips.snippets.options import parse_options
from tex_snips.snippets.sort import sort_snippets
from tex_snips.snippets.types import StringSnippet


def _snip(trigger: str, priority: float) -> StringSnippet:
    return StringSnippet(
        trigger=trigger,
        replacement="",
        options=parse_options(""),
        priority=priority,
        description="",
        excluded_environments=(),
    )


class Sort(TestCase):
    def test_1(self) -> None:
        snippets = [_snip("a", 0), _snip("b", 1), _snip("c", -1), _snip("d", 1)]
        triggers = [s.trigger for s in sort_snippets(snippets)]
        self.assertEqual(triggers, ["b", "d", "a", "c"])

    def test_2(self) -> None:
        snippets = [_snip(str(i), 0) for i in range(10)]
        self.assertEqual(list(sort_snippets(snippets)), snippets)
