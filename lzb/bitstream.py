class BitWriter:
    """Pack fixed-width fields into bytes with no alignment between fields.

    Each field is written least significant bit first and every bit is
    shifted into the pending byte from the low end, so the first bit of a
    byte ends up in its most significant position.
    """

    def __init__(self, buffer=None):
        self._buffer = bytearray() if buffer is None else buffer
        self._value = 0
        self._position = 0

    def write(self, value, width):
        value = int(value)
        for _ in range(width):
            self._value = ((self._value << 1) | (value & 1)) & 0xFF
            value >>= 1
            if self._position == 7:
                self._buffer.append(self._value)
                self._value = 0
                self._position = 0
            else:
                self._position += 1

    def flush(self):
        # Always pads at least one bit: an aligned writer appends a zero byte.
        self._buffer.append((self._value << (8 - self._position)) & 0xFF)
        self._value = 0
        self._position = 0

    def getvalue(self):
        return self._buffer

    @property
    def bit_count(self):
        return len(self._buffer) * 8 + self._position


class BitReader:
    """Read fields written by :class:`BitWriter` from ``data[offset:offset + length]``."""

    def __init__(self, data, offset=0, length=None):
        self._data = data
        self._index = offset
        self._end = len(data) if length is None else min(len(data), offset + length)
        self._value = 0
        self._mask = 0

    def read(self, width):
        from .errors import TruncatedStream
        result = 0
        for power in range(width):
            if self._mask == 0:
                if self._index >= self._end:
                    raise TruncatedStream()
                self._value = self._data[self._index]
                self._index += 1
                self._mask = 0x80
            if self._value & self._mask:
                result |= 1 << power
            self._mask >>= 1
        return result

    @property
    def consumed(self):
        return self._index
