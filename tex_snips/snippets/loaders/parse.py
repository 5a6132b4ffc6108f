from pathlib import PurePath
from textwrap import indent
from typing import Iterator, Optional

from ...consts import DEFAULT_MODULE_PATH

_INDENT = " " * 2


def fmt_err(
    path: Optional[PurePath], reason: str, snippet: Optional[str] = None
) -> str:
    def cont() -> Iterator[str]:
        yield "Invalid snippet format:"
        yield f"path:   {path or DEFAULT_MODULE_PATH}"
        yield "reason: |-"
        yield indent(reason, _INDENT)
        if snippet is not None:
            yield "Erroring snippet: |-"
            yield indent(snippet, _INDENT)

    return "\n".join(cont())
