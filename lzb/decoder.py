class LZBDecoder:
    def __init__(self, reporter=None, trace=False):
        self._reporter = reporter
        self._trace = trace
        self._reset_state()

    def _reset_state(self):
        from .dictionary import CodeWidth, DecoderDictionary
        self._dictionary = DecoderDictionary(self._reporter, trace=self._trace)
        # Mirrors the encoder right after its first literal.
        self._width = CodeWidth(num_bits=3, enlarge_in=4)

    @property
    def dictionary(self):
        return self._dictionary

    @property
    def trace(self):
        return self._dictionary.trace

    def _read_literal(self, reader, tag):
        from .control import ControlCode
        if tag == ControlCode.LITERAL_8:
            return (reader.read(8),)
        return (reader.read(16),)

    def decode(self, data, offset=0, length=None):
        """Decode an LZB stream into a list of 16-bit symbols.

        Raises a :class:`~lzb.errors.MalformedStream` subclass when the data
        is not a complete stream; nothing is returned for partial input.
        """
        from .bitstream import BitReader
        from .errors import MalformedStream
        self._reset_state()
        reader = BitReader(data, offset, length)
        try:
            result = self._decode(reader)
        except MalformedStream:
            if self._reporter:
                count = self._reporter.report('malformed_streams') or 0
                self._reporter.report(
                    'malformed_streams',
                    'Number of malformed compressed streams rejected',
                    count + 1,
                )
            raise
        if self._reporter:
            self._reporter.report(
                'code_width',
                'Code width in bits at the end of the stream',
                self._width.num_bits,
            )
        return result

    def _decode(self, reader):
        from .control import ControlCode
        from .errors import InvalidLiteralTag
        tag = reader.read(2)
        if tag not in (ControlCode.LITERAL_8, ControlCode.LITERAL_16):
            raise InvalidLiteralTag(tag)
        w = self._read_literal(reader, tag)
        self._dictionary.add_sequence(w)
        result = list(w)
        while True:
            cc = reader.read(self._width.num_bits)
            if cc == ControlCode.END:
                return result
            if cc in (ControlCode.LITERAL_8, ControlCode.LITERAL_16):
                cc = self._dictionary.add_sequence(self._read_literal(reader, cc))
                self._width.consume()
            entry = self._dictionary.entry(cc, w)
            result.extend(entry)
            self._dictionary.add_sequence(w + entry[:1])
            self._width.consume()
            w = entry
