from dataclasses import dataclass
from pathlib import PurePath
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class SourceCode:
    source_code: str
    path: Optional[PurePath] = None


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]
