"""Citation source merging for streamed replies."""

from collections.abc import Iterable

from zentro.models import Source


def merge_sources(existing: Iterable[Source], incoming: Iterable[Source]) -> list[Source]:
    """Merge citation sources, keeping the first record seen for each URI.

    Order is first-seen order across both inputs.
    """
    merged: list[Source] = []
    seen: set[str] = set()
    for source in (*existing, *incoming):
        if source.uri in seen:
            continue
        seen.add(source.uri)
        merged.append(source)
    return merged
