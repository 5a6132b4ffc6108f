from typing import Iterable, Sequence

from .types import Snippet


def sort_snippets(snippets: Iterable[Snippet]) -> Sequence[Snippet]:
    """
    Highest priority first, equal priorities keep declaration order
    """

    return sorted(snippets, key=lambda s: -s.priority)
