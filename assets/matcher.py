from typing import Iterable, Protocol

class NamedEntry(Protocol):
    short_name: str

def best_match(candidate_name: str, catalog: Iterable[NamedEntry], case_sensitive: bool = True) -> NamedEntry | None:
    """
    Find the catalog entry whose short name is the longest substring of the candidate name.
    Entries of equal length resolve to the first one in catalog order.

    Args:
        candidate_name: the name to find a substitution for
        catalog: the entries to choose from
        case_sensitive: whether short names must match with the same letter case

    Returns:
        The best entry, or None if no short name is contained in the candidate name
    """

    haystack = candidate_name if case_sensitive else candidate_name.casefold()

    best = None
    for entry in catalog:
        # An empty short name is a substring of everything
        if not entry.short_name:
            continue
        needle = entry.short_name if case_sensitive else entry.short_name.casefold()
        if needle not in haystack:
            continue
        if best is None or len(entry.short_name) > len(best.short_name):
            best = entry

    return best
