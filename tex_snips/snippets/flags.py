from re import (
    ASCII,
    DOTALL,
    IGNORECASE,
    MULTILINE,
    UNICODE,
    VERBOSE,
    Pattern,
    RegexFlag,
)
from typing import Mapping

# `d` `g` `y` change how a match is reported or resumed, never whether the
# pattern matches at the cursor
_VALID: Mapping[str, RegexFlag] = {
    "i": IGNORECASE,
    "m": MULTILINE,
    "s": DOTALL,
    "u": UNICODE,
    "v": UNICODE,
}

_REVERSE = (("i", IGNORECASE), ("m", MULTILINE), ("s", DOTALL), ("u", UNICODE))

# carried over from a compiled trigger, no flag character of their own
_KEPT = VERBOSE | ASCII


def sanitize_flags(flags: str) -> str:
    """
    Drop duplicate and unsupported flags, first occurrence wins the position
    """

    return "".join(flag for flag in dict.fromkeys(flags) if flag in _VALID)


def to_regex_flags(flags: str) -> RegexFlag:
    acc = RegexFlag(0)
    for flag in flags:
        acc |= _VALID[flag]
    return acc


def pattern_flags(pattern: Pattern) -> str:
    return "".join(char for char, flag in _REVERSE if pattern.flags & flag)


def pattern_kept_flags(pattern: Pattern) -> RegexFlag:
    return RegexFlag(pattern.flags & _KEPT)

