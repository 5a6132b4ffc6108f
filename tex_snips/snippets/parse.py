from typing import Any, Iterator, Sequence

from pynvim_pp.logging import log

from ..shared.timeit import timeit
from ..shared.types import Err, Ok, Result, SourceCode
from .compiler import compile_snippet
from .loaders.module import import_raw
from .loaders.parse import fmt_err
from .loaders.validate import validate_raw_snippets
from .loaders.variables import SnippetVariables
from .serialize import serialize_snippet_like
from .sort import sort_snippets
from .types import CompileError, RawSnippet, Snippet, SnippetError


def compile_snippets(
    source: SourceCode, value: Any, variables: SnippetVariables
) -> Sequence[Snippet]:
    """
    All or nothing, the first bad snippet fails the whole batch
    """

    with timeit("validate", source.path):
        raws = validate_raw_snippets(value, path=source.path)

    def cont() -> Iterator[Snippet]:
        for raw in raws:
            try:
                yield compile_snippet(raw, variables=variables)
            except Exception as e:
                raise CompileError(_compile_err(source, raw=raw, e=e)) from e

    with timeit("compile", source.path):
        compiled = tuple(cont())

    log.debug("%s", f"compiled {len(compiled)} snippets :: {source.path}")
    return sort_snippets(compiled)


def _compile_err(source: SourceCode, raw: RawSnippet, e: Exception) -> str:
    return fmt_err(
        source.path,
        reason=f"{type(e).__name__}: {e}",
        snippet=serialize_snippet_like(raw),
    )


async def parse_snippets(
    source: SourceCode, variables: SnippetVariables
) -> Result[Sequence[Snippet], SnippetError]:
    with timeit("load", source.path):
        loaded = await import_raw(source)

    if isinstance(loaded, Err):
        return loaded

    try:
        snippets = compile_snippets(source, value=loaded.value, variables=variables)
    except SnippetError as e:
        return Err(e)
    else:
        return Ok(snippets)
