from dataclasses import dataclass
from re import Pattern
from typing import Any, Callable, Literal, Sequence, Union

from ..consts import DEFAULT_DESCRIPTION
from .options import Options


class SnippetError(Exception):
    ...


class LoadError(SnippetError):
    ...


class NoDefaultExport(LoadError):
    ...


class ShapeError(SnippetError):
    ...


class CompileError(SnippetError):
    ...


Delimiter = Literal["opening", "closing"]


class VariableNameError(SnippetError):
    def __init__(self, name: str, missing: Delimiter) -> None:
        if missing == "closing":
            reason = "Starts with '${' but does not end with '}'"
        else:
            reason = "Ends with '}' but does not start with '${'"
        super().__init__(
            f"Invalid snippet variable name '{name}': {reason}. You need to have both or neither."
        )
        self.name, self.missing = name, missing


Replacement = Union[str, Callable[..., Any]]
Trigger = Union[str, Pattern]


@dataclass(frozen=True)
class Environment:
    open_symbol: str
    close_symbol: str


@dataclass(frozen=True)
class RawSnippet:
    trigger: Trigger
    replacement: Replacement
    options: str
    flags: str = ""
    priority: float = 0
    description: str = DEFAULT_DESCRIPTION


@dataclass(frozen=True)
class StringSnippet:
    trigger: str
    replacement: Replacement
    options: Options
    priority: float
    description: str
    excluded_environments: Sequence[Environment]


@dataclass(frozen=True)
class RegexSnippet:
    trigger: Pattern
    flags: str
    replacement: Replacement
    options: Options
    priority: float
    description: str
    excluded_environments: Sequence[Environment]


@dataclass(frozen=True)
class VisualSnippet:
    trigger: str
    replacement: Replacement
    options: Options
    priority: float
    description: str
    excluded_environments: Sequence[Environment]


Snippet = Union[StringSnippet, RegexSnippet, VisualSnippet]
