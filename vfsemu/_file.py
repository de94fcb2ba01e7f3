class MemoryBuffer:
    """Growable byte buffer that holds an open handle's working copy.

    Offsets past the end are allowed for writes; the gap is zero-filled,
    as for a seek-then-write on a real file.
    """

    def __init__(self, initial_data: bytes = b"") -> None:
        self._buf: bytearray = bytearray(initial_data)

    def get_size(self) -> int:
        return len(self._buf)

    def read_at(self, offset: int, size: int) -> bytes:
        if size < 0:
            return bytes(self._buf[offset:])
        return bytes(self._buf[offset: offset + size])

    def write_at(self, offset: int, data: bytes) -> int:
        n = len(data)
        if n == 0:
            return 0
        current_len = len(self._buf)
        if offset > current_len:
            self._buf.extend(bytes(offset - current_len))
        self._buf[offset: offset + n] = data
        return n

    def truncate(self, size: int) -> None:
        old_size = len(self._buf)
        if size > old_size:
            self._buf.extend(bytes(size - old_size))
            return
        del self._buf[size:]

    def getvalue(self) -> bytes:
        return bytes(self._buf)
