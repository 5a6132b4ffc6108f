from dataclasses import fields, is_dataclass
from re import Pattern
from typing import Any, Mapping, Sequence

from yaml import SafeDumper, dump

from .flags import pattern_flags

_WIDTH = 80
_TAB = 2


class _Dumper(SafeDumper):
    ...


def _repr_str(dumper: SafeDumper, data: str) -> Any:
    style = "|" if len(data.splitlines()) > 1 else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_Dumper.add_representer(str, _repr_str)


def to_plain(value: Any) -> Any:
    if isinstance(value, Pattern):
        return f"[[RegExp]]: /{value.pattern}/{pattern_flags(value)}"
    elif callable(value):
        return "[[Function]]"
    elif is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    elif isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    elif isinstance(value, (str, int, float, bool)) or value is None:
        return value
    elif isinstance(value, (Sequence, frozenset, set)):
        return [to_plain(v) for v in value]
    else:
        return repr(value)


def serialize_snippet_like(value: Any) -> str:
    plain = to_plain(value)
    if not isinstance(plain, (dict, list)):
        return repr(value)

    yaml = dump(
        plain,
        Dumper=_Dumper,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=_WIDTH,
        indent=_TAB,
    )
    return str(yaml).rstrip()
