class DumperError(Exception):
    """Base class for errors raised while dumping an atom stream."""


class ShortReadError(DumperError):
    """Returned if fewer bytes are available than a read asked for."""
    def __init__(self, requested, received, offset=None):
        self.requested = requested
        self.received = received
        self.offset = offset
        self.partial_report = None
        where = f" at {offset}" if offset is not None else ""
        super().__init__(f"short read ({requested}/{received}){where}")


class EndOfStream(DumperError):
    """Raised when a read starts with no bytes left. Ends a dump normally."""
    def __init__(self, offset=None):
        self.offset = offset
        super().__init__("end of stream")


class EmptyTagError(DumperError):
    """An atom header whose tag sanitized to nothing; the stream is corrupt."""
    def __init__(self, offset):
        self.offset = offset
        self.partial_report = None
        super().__init__(f"empty atom tag at {offset} (0x{offset:08x})")
