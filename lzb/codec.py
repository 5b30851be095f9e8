"""Public entry points of the LZB string codec.

The module-level functions are pure: every call builds its own dictionary
and bit cursor. :class:`LZB` wraps the same functions and additionally
reports metrics to a reporter.
"""


def _decode_symbols(data, offset, length, reporter=None):
    from .decoder import LZBDecoder
    from .validator import StreamValidator
    if isinstance(data, memoryview):
        data = data.cast('B')
    length = StreamValidator.validate(data, offset, length)
    if length <= 0:
        return []
    return LZBDecoder(reporter).decode(data, offset, length)


def compress_to_bytearray(text):
    """Compress *text* into a new ``bytearray``; ``None`` passes through."""
    if text is None:
        return None
    from .core import to_symbols
    from .encoder import LZBEncoder
    return LZBEncoder().encode(to_symbols(text))


def compress(text):
    """Compress *text* (a ``str``) into ``bytes``.

    ``None`` gives ``None`` and the empty string gives ``b''``.
    """
    data = compress_to_bytearray(text)
    if data is None:
        return None
    return bytes(data)


def compress_symbols(symbols):
    """Compress a sequence of UTF-16 code units (ints or a numpy array)."""
    if symbols is None:
        return None
    from .core import as_symbols
    from .encoder import LZBEncoder
    return bytes(LZBEncoder().encode(as_symbols(symbols)))


def decompress_strict(data, offset=0, length=None):
    """Like :func:`decompress` but raise :class:`~lzb.errors.MalformedStream`."""
    if data is None:
        return None
    if length is not None and length <= 0:
        return ''
    from .core import from_symbols
    return from_symbols(_decode_symbols(data, offset, length))


def decompress(data, offset=0, length=None):
    """Decompress ``data[offset:offset + length]`` back into a ``str``.

    Malformed or truncated data yields ``''`` instead of an exception, so an
    empty result is ambiguous unless the caller also checks the input size.
    """
    from .errors import MalformedStream
    try:
        return decompress_strict(data, offset, length)
    except MalformedStream:
        return ''


def decompress_from_bytearray(buffer):
    return decompress(buffer, 0, len(buffer)) if buffer is not None else None


def decompress_symbols(data, offset=0, length=None):
    if data is None:
        return None
    if length is not None and length <= 0:
        return []
    from .errors import MalformedStream
    try:
        return _decode_symbols(data, offset, length)
    except MalformedStream:
        return []


class LZB:
    def __init__(self, reporter=None):
        self._reporter = self._instantiate_reporter(reporter)

    def _instantiate_reporter(self, reporter):
        if reporter is None:
            reporter = __import__('main').Reporter
        if isinstance(reporter, type):
            reporter = reporter()
        return reporter

    @property
    def reporter(self):
        return self._reporter

    def _count(self, metric, description):
        count = self._reporter.report(metric) or 0
        self._reporter.report(metric, description, count + 1)

    def compress(self, text):
        if text is None:
            return None
        from .core import to_symbols
        from .encoder import LZBEncoder
        symbols = to_symbols(text)
        data = bytes(LZBEncoder(self._reporter).encode(symbols))
        ratio = len(data) / (2 * len(symbols)) if symbols else 0
        self._reporter.report(
            'compression_ratio',
            'Compressed size to UTF-16 size ratio',
            ratio,
        )
        self._count('encode_calls', 'Number of compress operations')
        return data

    def decompress(self, data, offset=0, length=None):
        if data is None:
            return None
        from .core import from_symbols
        from .errors import MalformedStream
        self._count('decode_calls', 'Number of decompress operations')
        if length is not None and length <= 0:
            return ''
        try:
            symbols = _decode_symbols(data, offset, length, self._reporter)
        except MalformedStream:
            return ''
        return from_symbols(symbols)

    def roundtrip(self, text):
        try:
            result = self.decompress(self.compress(text))
        except Exception:
            self._count('roundtrip_failures', 'Number of failed roundtrip comparisons')
            raise
        if result != text:
            self._count('roundtrip_failures', 'Number of failed roundtrip comparisons')
        return result
