class CodeWidth:
    """Track how many bits a code needs as the dictionary grows."""

    def __init__(self, num_bits, enlarge_in):
        self.num_bits = num_bits
        self.enlarge_in = enlarge_in

    def consume(self):
        self.enlarge_in -= 1
        if self.enlarge_in == 0:
            self.enlarge_in = 1 << self.num_bits
            self.num_bits += 1

    def __repr__(self):
        return 'CodeWidth(num_bits=%d, enlarge_in=%d)' % (self.num_bits, self.enlarge_in)


class EncoderDictionary:
    def __init__(self, reporter=None, trace=False):
        from .control import FIRST_CODE
        self._reporter = reporter
        self._trace_enabled = trace
        self._dict = {}
        self._pending = set()
        self._next = FIRST_CODE
        self._longest = 0
        self.trace = []

    def __contains__(self, seq):
        return seq in self._dict

    def __len__(self):
        return len(self._dict)

    def code(self, seq):
        return self._dict[seq]

    def add_symbol(self, seq):
        """Register a single symbol that still has to be sent as a literal."""
        code = self.add_sequence(seq)
        self._pending.add(seq)
        return code

    def add_sequence(self, seq):
        from .core import Code
        code = Code(self._next)
        self._dict[seq] = code
        self._next += 1
        if self._trace_enabled:
            self.trace.append((int(code), seq))
        if self._reporter:
            self._reporter.report(
                'dictionary_size',
                'Number of entries in encoder dictionary',
                len(self._dict),
            )
        return code

    def is_pending(self, seq):
        return seq in self._pending

    def mark_emitted(self, seq):
        self._pending.discard(seq)

    def update_longest(self, length):
        if length > self._longest:
            self._longest = length
            if self._reporter:
                self._reporter.report(
                    'longest_match',
                    'Length of longest match during compression',
                    length,
                )

    def export(self):
        entries = []
        for seq, code in sorted(self._dict.items(), key=lambda item: int(item[1])):
            entries.append({"seq": list(seq), "code": int(code)})
        return entries


class DecoderDictionary:
    def __init__(self, reporter=None, trace=False):
        from .control import FIRST_CODE
        self._reporter = reporter
        self._trace_enabled = trace
        # Reserved control codes are never looked up as entries.
        self._entries = [None] * FIRST_CODE
        self.trace = []

    @property
    def next_code(self):
        return len(self._entries)

    def add_sequence(self, seq):
        from .core import Code
        code = Code(len(self._entries))
        self._entries.append(seq)
        if self._trace_enabled:
            self.trace.append((int(code), seq))
        if self._reporter:
            count = self._reporter.report('decoder_mutations') or 0
            self._reporter.report(
                'decoder_mutations',
                'Number of decoder dictionary mutations',
                count + 1,
            )
        return code

    def entry(self, code, previous):
        """Return the sequence for *code*, building it if it is the next code."""
        if code < len(self._entries) and self._entries[code] is not None:
            return self._entries[code]
        if code == len(self._entries):
            return previous + previous[:1]
        from .errors import DictionaryMismatch
        raise DictionaryMismatch(code, len(self._entries))

    def export(self):
        entries = []
        for code, seq in enumerate(self._entries):
            if seq is not None:
                entries.append({"seq": list(seq), "code": code})
        return entries
