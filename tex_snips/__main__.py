from argparse import ArgumentParser, Namespace
from asyncio import run
from logging import DEBUG as DEBUG_LV
from logging import INFO
from pathlib import Path
from sys import exit, stderr
from typing import Any, Iterator, Mapping, MutableMapping, Optional, Sequence

from pynvim_pp.logging import log
from std2.types import never
from yaml import SafeDumper, safe_dump_all

from .consts import DEBUG
from .shared.types import Err, Ok, SourceCode
from .snippets.loaders.variables import SnippetVariables, parse_snippet_variables
from .snippets.parse import parse_snippets
from .snippets.serialize import to_plain
from .snippets.types import RegexSnippet, Snippet, StringSnippet, VisualSnippet

_WIDTH = 80
_TAB = 2


def _parse_args(argv: Optional[Sequence[str]]) -> Namespace:
    parser = ArgumentParser(prog="tex_snips")
    parser.add_argument("snippets", type=Path)
    parser.add_argument("-v", "--variables", type=Path)
    parser.add_argument("-d", "--debug", action="store_true", default=DEBUG)
    return parser.parse_args(argv)


def _kind(snippet: Snippet) -> str:
    if isinstance(snippet, RegexSnippet):
        return "regex"
    elif isinstance(snippet, VisualSnippet):
        return "visual"
    elif isinstance(snippet, StringSnippet):
        return "string"
    else:
        never(snippet)


def _pprn(snippets: Sequence[Snippet]) -> str:
    def cont() -> Iterator[Mapping[str, Any]]:
        for snippet in snippets:
            mapping: MutableMapping[str, Any] = {"kind": _kind(snippet)}
            if isinstance(snippet, RegexSnippet):
                mapping.update(
                    trigger=snippet.trigger.pattern,
                    flags=snippet.flags,
                )
            else:
                mapping.update(trigger=snippet.trigger)

            yield {
                **mapping,
                "replacement": to_plain(snippet.replacement),
                "options": to_plain(snippet.options),
                "priority": snippet.priority,
                "description": snippet.description,
                "excluded": [
                    f"{env.open_symbol}...{env.close_symbol}"
                    for env in snippet.excluded_environments
                ],
            }

    yaml = safe_dump_all(
        tuple(cont()),
        Dumper=SafeDumper,
        allow_unicode=True,
        explicit_start=True,
        sort_keys=False,
        width=_WIDTH,
        indent=_TAB,
    )
    return str(yaml)


async def _compile(ns: Namespace) -> int:
    try:
        snippets = SourceCode(source_code=ns.snippets.read_text(), path=ns.snippets)
        maybe_vars = (
            SourceCode(source_code=ns.variables.read_text(), path=ns.variables)
            if ns.variables
            else None
        )
    except OSError as e:
        print(f"Cannot read: {e.filename}\nreason: {e.strerror}", file=stderr)
        return 1

    variables: SnippetVariables = {}
    if maybe_vars:
        parsed = await parse_snippet_variables(maybe_vars)
        if isinstance(parsed, Err):
            print(parsed.error, file=stderr)
            return 1
        else:
            variables = parsed.value

    compiled = await parse_snippets(snippets, variables=variables)
    if isinstance(compiled, Ok):
        print(_pprn(compiled.value), end="")
        return 0
    else:
        print(compiled.error, file=stderr)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = _parse_args(argv)
    log.setLevel(DEBUG_LV if ns.debug else INFO)
    return run(_compile(ns))


if __name__ == "__main__":
    exit(main())
