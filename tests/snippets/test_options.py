from unittest import TestCase

from tex_snips.snippets.options import Mode, parse_mode, parse_options


class Modes(TestCase):
    def test_1(self) -> None:
        mode = parse_mode("")
        self.assertEqual(
            mode, Mode(text=True, inline_math=True, block_math=True, code=True)
        )

    def test_2(self) -> None:
        self.assertEqual(parse_mode("m"), Mode(inline_math=True, block_math=True))
        self.assertEqual(parse_mode("n"), Mode(inline_math=True))
        self.assertEqual(parse_mode("M"), Mode(block_math=True))
        self.assertEqual(parse_mode("tc"), Mode(text=True, code=True))

    def test_3(self) -> None:
        self.assertEqual(parse_mode("rA"), parse_mode(""))


class Options(TestCase):
    def test_1(self) -> None:
        options = parse_options("rAwv")
        self.assertTrue(options.regex)
        self.assertTrue(options.automatic)
        self.assertTrue(options.word_boundary)
        self.assertTrue(options.visual)

    def test_2(self) -> None:
        options = parse_options("mA")
        self.assertFalse(options.regex)
        self.assertFalse(options.visual)
        self.assertEqual(options.mode, Mode(inline_math=True, block_math=True))
