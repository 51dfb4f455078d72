from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional


@dataclass(frozen=True)
class DispatchEntry:
    tag: str
    decode: Optional[Callable] = None
    name: Optional[Callable] = None


class AtomRegistry:
    """Maps a sanitized atom tag to its decode and display-name callables.

    ``decode(dumper, pos, length)`` renders the atom's payload and may recurse
    back into the dumper; ``name(dumper)`` returns the label printed on the
    atom's header line.
    """

    def __init__(self, entries: Iterable = ()):
        self._entries: Dict[str, DispatchEntry] = {}
        self.update(entries)

    def __contains__(self, tag):
        return tag in self._entries

    def __len__(self):
        return len(self._entries)

    def tags(self):
        return sorted(self._entries)

    def lookup(self, tag) -> Optional[DispatchEntry]:
        return self._entries.get(tag)

    def register(self, tag, decode=None, name=None):
        if not tag:
            raise ValueError("atom tag must not be empty")
        if isinstance(name, str):
            label = name
            name = lambda dumper: label
        entry = DispatchEntry(tag, decode, name)
        self._entries[tag] = entry
        return entry

    def unregister(self, tag):
        self._entries.pop(tag, None)

    def update(self, entries):
        for entry in entries:
            if isinstance(entry, DispatchEntry):
                self._entries[entry.tag] = entry
            else:
                self.register(*entry)

    def copy(self):
        clone = AtomRegistry()
        clone._entries = dict(self._entries)
        return clone
