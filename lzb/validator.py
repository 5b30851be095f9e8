class StreamValidator:
    @classmethod
    def validate(cls, data, offset=0, length=None):
        """Check decode arguments and return the number of readable bytes.

        A *length* reaching past the end of *data* is clamped to what is
        available; malformed content is left for the decoder to detect.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError('Compressed data must be bytes-like, got %s' % type(data).__name__)
        if not isinstance(offset, int) or offset < 0 or offset > len(data):
            raise ValueError('Offset %r outside compressed data' % (offset,))
        available = len(data) - offset
        if length is None or length > available:
            return available
        return length
