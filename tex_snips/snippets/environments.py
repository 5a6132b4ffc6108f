from dataclasses import dataclass
from typing import AbstractSet, Mapping, Sequence

from pynvim_pp.lib import decode
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from ..consts import ENVIRONMENTS_ARTIFACTS
from .types import Environment


@dataclass(frozen=True)
class Catalog:
    text_areas: AbstractSet[str]
    math_fonts: AbstractSet[str]
    exclusions: Mapping[str, Sequence[Environment]]


CATALOG = new_decoder[Catalog](Catalog)(
    safe_load(decode(ENVIRONMENTS_ARTIFACTS.read_bytes()))
)


def get_excluded_environments(
    trigger: str, exclusions: Mapping[str, Sequence[Environment]] = CATALOG.exclusions
) -> Sequence[Environment]:
    return tuple(exclusions.get(trigger, ()))
