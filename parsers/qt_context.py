import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Optional

ROOT_TAG = 'global'


@dataclass
class ContextFrame:
    tag: str
    attributes: Dict[str, Any] = field(default_factory=dict)


class ContextStack:
    """
    Stack of per-atom attribute frames. A decoder publishes facts (time scale,
    handler sub type, action type) on its parent's frame so that the parent's
    later descendants can find them by searching outward from the innermost
    frame.
    """

    def __init__(self):
        self.frames = []

    def __len__(self):
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    @property
    def depth(self):
        return len(self.frames)

    def clear(self):
        self.frames.clear()

    def push(self, tag):
        frame = ContextFrame(tag)
        self.frames.append(frame)
        return frame

    def pop(self):
        if not self.frames:
            raise IndexError("pop from empty context stack")
        return self.frames.pop()

    def top_tag(self):
        return self.frames[-1].tag if self.frames else None

    def parent_tag(self):
        return self.frames[-2].tag if len(self.frames) > 1 else None

    def find(self, attrib, pattern=None) -> Optional[ContextFrame]:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        for frame in reversed(self.frames):
            if attrib not in frame.attributes:
                continue
            if regex is None or regex.search(str(frame.attributes[attrib])):
                return frame
        return None

    def find_value(self, attrib, pattern=None, default=None):
        frame = self.find(attrib, pattern)
        return frame.attributes[attrib] if frame is not None else default

    def _parent(self):
        if len(self.frames) < 2:
            raise IndexError("context stack has no parent frame")
        return self.frames[-2]

    def set_on_parent(self, attrib, value):
        self._parent().attributes[attrib] = value

    def parent_attributes(self):
        return MappingProxyType(self._parent().attributes)
