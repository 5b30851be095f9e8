class LZBEncoder:
    """Greedy longest-match dictionary encoder producing the LZB bitstream.

    State is rebuilt on every :meth:`encode` call; an instance may be reused
    but never carries a dictionary from one input to the next.
    """

    def __init__(self, reporter=None, trace=False):
        self._reporter = reporter
        self._trace = trace
        self._reset_state()

    def _reset_state(self):
        from .core import SymbolAlphabet
        from .dictionary import CodeWidth, EncoderDictionary
        self._alphabet = SymbolAlphabet()
        self._dictionary = EncoderDictionary(self._reporter, trace=self._trace)
        # The first emission is always a literal and does not count as a code.
        self._width = CodeWidth(num_bits=2, enlarge_in=2)
        self._literals = 0

    @property
    def dictionary(self):
        return self._dictionary

    @property
    def trace(self):
        return self._dictionary.trace

    def _emit(self, writer, w):
        from .control import ControlCode
        if self._dictionary.is_pending(w):
            symbol = w[0]
            if self._alphabet.is_narrow(symbol):
                writer.write(ControlCode.LITERAL_8, self._width.num_bits)
            else:
                writer.write(ControlCode.LITERAL_16, self._width.num_bits)
            writer.write(symbol, self._alphabet.literal_width(symbol))
            self._width.consume()
            self._dictionary.mark_emitted(w)
            self._literals += 1
        else:
            writer.write(self._dictionary.code(w), self._width.num_bits)
        self._width.consume()
        self._dictionary.update_longest(len(w))

    def encode(self, symbols):
        from .bitstream import BitWriter
        from .control import ControlCode
        from .errors import SymbolOutOfRange
        self._reset_state()
        writer = BitWriter()
        if not len(symbols):
            return writer.getvalue()
        for s in symbols:
            if not self._alphabet.contains(s):
                raise SymbolOutOfRange('Symbol %r out of alphabet' % (s,))
        w = ()
        for s in symbols:
            c = (s,)
            if c not in self._dictionary:
                self._dictionary.add_symbol(c)
            wc = w + c
            if wc in self._dictionary:
                w = wc
            else:
                self._emit(writer, w)
                self._dictionary.add_sequence(wc)
                w = c
        self._emit(writer, w)
        writer.write(ControlCode.END, self._width.num_bits)
        writer.flush()
        if self._reporter:
            self._reporter.report(
                'literals_emitted',
                'Number of literal symbols written by the encoder',
                self._literals,
            )
            self._reporter.report(
                'code_width',
                'Code width in bits at the end of the stream',
                self._width.num_bits,
            )
        return writer.getvalue()
