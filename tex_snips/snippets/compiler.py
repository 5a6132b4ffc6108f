from dataclasses import replace
from re import ASCII, UNICODE, VERBOSE, Pattern, RegexFlag, compile

from ..consts import VISUAL_PLACEHOLDER
from .environments import get_excluded_environments
from .flags import (
    pattern_flags,
    pattern_kept_flags,
    sanitize_flags,
    to_regex_flags,
)
from .loaders.variables import SnippetVariables, insert_snippet_variables
from .options import parse_options
from .types import RawSnippet, RegexSnippet, Snippet, StringSnippet, VisualSnippet


def _compile_regex(raw: RawSnippet, variables: SnippetVariables) -> RegexSnippet:
    kept = RegexFlag(0)
    if isinstance(raw.trigger, Pattern):
        source = raw.trigger.pattern
        flags = pattern_flags(raw.trigger) + raw.flags
        kept = pattern_kept_flags(raw.trigger)
    else:
        source, flags = raw.trigger, raw.flags

    flags = sanitize_flags(flags)
    source = insert_snippet_variables(source, variables)
    excluded = get_excluded_environments(source)

    regex_flags = to_regex_flags(flags) | kept
    if kept & ASCII:
        regex_flags &= ~UNICODE

    # only ever match up to the cursor, `$` also matches before a final newline
    anchor = "$" if "m" in flags else r"\Z"
    if kept & VERBOSE:
        anchor = "\n" + anchor
    trigger = compile(source + anchor, flags=regex_flags)

    options = replace(parse_options(raw.options), regex=True)
    return RegexSnippet(
        trigger=trigger,
        flags=flags,
        replacement=raw.replacement,
        options=options,
        priority=raw.priority,
        description=raw.description,
        excluded_environments=excluded,
    )


def compile_snippet(raw: RawSnippet, variables: SnippetVariables) -> Snippet:
    """
    Regex-ness is decided before visual-ness, a regex trigger whose
    replacement mentions the selection placeholder stays a regex snippet
    """

    options = parse_options(raw.options)
    if options.regex or isinstance(raw.trigger, Pattern):
        return _compile_regex(raw, variables=variables)

    assert isinstance(raw.trigger, str)
    trigger = insert_snippet_variables(raw.trigger, variables)
    excluded = get_excluded_environments(trigger)

    if isinstance(raw.replacement, str) and VISUAL_PLACEHOLDER in raw.replacement:
        options = replace(options, visual=True)

    if options.visual:
        return VisualSnippet(
            trigger=trigger,
            replacement=raw.replacement,
            options=options,
            priority=raw.priority,
            description=raw.description,
            excluded_environments=excluded,
        )
    else:
        return StringSnippet(
            trigger=trigger,
            replacement=raw.replacement,
            options=options,
            priority=raw.priority,
            description=raw.description,
            excluded_environments=excluded,
        )
