from typing import Any, Mapping, MutableMapping, Sequence

from std2.pickle.decoder import new_decoder
from std2.pickle.types import DecodeError

from ...consts import VAR_CLOSE, VAR_OPEN
from ...shared.types import Err, Ok, Result, SourceCode
from ..types import ShapeError, SnippetError, VariableNameError
from .module import import_raw
from .parse import fmt_err

SnippetVariables = Mapping[str, str]

_DECODER = new_decoder[Mapping[str, str]](Mapping[str, str])


def normalize_variables(raw: Mapping[str, str]) -> SnippetVariables:
    """
    `name` and `${name}` are the same variable, half wrapped is neither
    """

    variables: MutableMapping[str, str] = {}
    for name, value in raw.items():
        if name.startswith(VAR_OPEN):
            if not name.endswith(VAR_CLOSE):
                raise VariableNameError(name, missing="closing")
            variables[name] = value
        else:
            if name.endswith(VAR_CLOSE):
                raise VariableNameError(name, missing="opening")
            variables[VAR_OPEN + name + VAR_CLOSE] = value

    return variables


def insert_snippet_variables(trigger: str, variables: SnippetVariables) -> str:
    for name, value in variables.items():
        trigger = trigger.replace(name, value)
    return trigger


def _decode(value: Any, source: SourceCode) -> SnippetVariables:
    if isinstance(value, Sequence) and not isinstance(value, str):
        raise ShapeError("Cannot parse an array as a variables object")

    try:
        decoded = _DECODER(value)
    except DecodeError as e:
        reason = f"Expected snippet variables to map names to text\n{e}"
        raise ShapeError(fmt_err(source.path, reason=reason)) from e
    else:
        return normalize_variables(decoded)


async def parse_snippet_variables(
    source: SourceCode,
) -> Result[SnippetVariables, SnippetError]:
    loaded = await import_raw(source)
    if isinstance(loaded, Err):
        return loaded

    try:
        variables = _decode(loaded.value, source=source)
    except SnippetError as e:
        return Err(e)
    else:
        return Ok(variables)
