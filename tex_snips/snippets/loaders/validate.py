from dataclasses import MISSING, dataclass, fields
from pathlib import PurePath
from re import Pattern
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from ..serialize import serialize_snippet_like
from ..types import RawSnippet, ShapeError
from .parse import fmt_err


@dataclass(frozen=True)
class _Field:
    name: str
    expected: str
    check: Callable[[Any], bool]
    required: bool


def _is_str(x: Any) -> bool:
    return isinstance(x, str)


def _is_pattern(x: Any) -> bool:
    return isinstance(x, Pattern) and _is_str(x.pattern)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


_CHECKS: Mapping[str, Callable[[Any], bool]] = {
    "trigger": lambda x: _is_str(x) or _is_pattern(x),
    "replacement": lambda x: _is_str(x) or callable(x),
    "options": _is_str,
    "flags": _is_str,
    "priority": _is_number,
    "description": _is_str,
}

_EXPECTED: Mapping[str, str] = {
    "trigger": "str | re.Pattern[str]",
    "replacement": "str | Callable",
    "options": "str",
    "flags": "str",
    "priority": "int | float",
    "description": "str",
}

_SCHEMA: Sequence[_Field] = tuple(
    _Field(
        name=field.name,
        expected=_EXPECTED[field.name],
        check=_CHECKS[field.name],
        required=field.default is MISSING,
    )
    for field in fields(RawSnippet)
)


def _violations(raw: Any) -> Iterator[str]:
    if not isinstance(raw, Mapping):
        yield f"expected a mapping, got {type(raw).__name__}"
    else:
        for field in _SCHEMA:
            if field.name not in raw:
                if field.required:
                    yield f"missing key `{field.name}` :: {field.expected}"
            elif not field.check(raw[field.name]):
                got = type(raw[field.name]).__name__
                yield f"bad `{field.name}` :: expected {field.expected}, got {got}"


def validate_raw_snippet(raw: Any) -> Optional[RawSnippet]:
    if next(_violations(raw), None) is not None:
        return None
    else:
        known = {field.name for field in _SCHEMA}
        return RawSnippet(**{k: v for k, v in raw.items() if k in known})


def validate_raw_snippets(
    value: Any, path: Optional[PurePath] = None
) -> Sequence[RawSnippet]:
    """
    Fail on the first element that does not look like a snippet
    """

    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ShapeError(
            fmt_err(
                path,
                reason=f"Expected snippets to be an array, got {type(value).__name__}",
            )
        )

    def cont() -> Iterator[RawSnippet]:
        for idx, raw in enumerate(value):
            snippet = validate_raw_snippet(raw)
            if snippet is None:
                reasons = "\n".join(_violations(raw))
                msg = fmt_err(
                    path,
                    reason=f"Value does not resemble snippet (index {idx}).\n{reasons}",
                    snippet=serialize_snippet_like(raw),
                )
                raise ShapeError(msg)
            else:
                yield snippet

    return tuple(cont())
