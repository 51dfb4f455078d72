import io
import os

from bytereader.error import EndOfStream, ShortReadError

PROGRESS_STEPS = 100


class ByteReader:
    """Positioned reads over a finite binary stream.

    ``source`` may be a path, a bytes-like object or an open binary file. Every
    successful read is counted toward ``consumed``; when the count crosses the
    next of ``PROGRESS_STEPS`` equal checkpoints of the stream size the
    ``progress`` callback is called with ``(consumed, size)``.
    """

    def __init__(self, source, progress=None):
        self._owns_handle = False
        if isinstance(source, (bytes, bytearray, memoryview)):
            self.handle = io.BytesIO(bytes(source))
        elif isinstance(source, (str, os.PathLike)):
            self.handle = open(source, 'rb')
            self._owns_handle = True
        else:
            self.handle = source

        self.handle.seek(0, os.SEEK_END)
        self.size = self.handle.tell()
        self.handle.seek(0)

        self.progress = progress
        self.reset()

    def reset(self):
        self.consumed = 0
        self.next_update = self.size / PROGRESS_STEPS
        self.handle.seek(0)

    # Return the current cursor position
    def tell(self):
        return self.handle.tell()

    # Return the number of bytes between the cursor and the end of the stream
    def bytes_left(self):
        return max(0, self.size - self.handle.tell())

    def read(self, length, offset=None):
        if offset is not None:
            self.handle.seek(offset)
        start = self.handle.tell()

        if length <= 0:
            return b''

        buf = self.handle.read(length)
        if not buf:
            raise EndOfStream(start)
        if len(buf) != length:
            raise ShortReadError(length, len(buf), start)

        self.credit(len(buf))
        return buf

    # Count bytes a decoder skipped over as parsed without reading them
    def credit(self, length):
        if length <= 0:
            return
        self.consumed += length
        if self.progress is None or self.consumed < self.next_update:
            return

        step = self.size / PROGRESS_STEPS
        while self.next_update <= self.consumed and step > 0:
            self.next_update += step
        self.progress(self.consumed, self.size)

    def close(self):
        if self._owns_handle and not self.handle.closed:
            self.handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
