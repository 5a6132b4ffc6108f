from dataclasses import dataclass

_CATCH_ALL = "tmc"


@dataclass(frozen=True)
class Mode:
    text: bool = False
    inline_math: bool = False
    block_math: bool = False
    code: bool = False

    @property
    def any(self) -> bool:
        return self.text or self.inline_math or self.block_math or self.code


@dataclass(frozen=True)
class Options:
    mode: Mode
    automatic: bool = False
    regex: bool = False
    word_boundary: bool = False
    visual: bool = False


def parse_mode(source: str) -> Mode:
    """
    `m` covers both math modes, absent any mode code the snippet fires everywhere
    """

    codes = {*source}
    mode = Mode(
        text="t" in codes,
        inline_math=bool(codes & {"m", "n"}),
        block_math=bool(codes & {"m", "M"}),
        code="c" in codes,
    )
    return mode if mode.any else parse_mode(_CATCH_ALL)


def parse_options(source: str) -> Options:
    codes = {*source}
    options = Options(
        mode=parse_mode(source),
        automatic="A" in codes,
        regex="r" in codes,
        word_boundary="w" in codes,
        visual="v" in codes,
    )
    return options
