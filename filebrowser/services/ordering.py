from __future__ import annotations

from typing import Iterable, Union

from .filesystem import Entry, ParentEntry

ListingEntry = Union[Entry, ParentEntry]


def entry_sort_key(entry: ListingEntry) -> tuple[bool, bool]:
    return (not entry.is_parent, not entry.is_dir)


def sort_entries(entries: Iterable[ListingEntry]) -> list[ListingEntry]:
    # sorted() is stable, so entries in the same group keep backend order.
    return sorted(entries, key=entry_sort_key)
