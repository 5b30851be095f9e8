class SymbolAlphabet:
    """The 16-bit code unit alphabet shared by encoder and decoder."""
    SIZE = 0x10000
    NARROW = 0x100

    def contains(self, symbol):
        return isinstance(symbol, int) and 0 <= symbol < self.SIZE

    def is_narrow(self, symbol):
        return symbol < self.NARROW

    def literal_width(self, symbol):
        return 8 if self.is_narrow(symbol) else 16


class Code(int):
    def __new__(cls, value):
        if not isinstance(value, int) or value < 0:
            raise ValueError('Code value must be non-negative integer')
        return int.__new__(cls, value)

    def __repr__(self):
        return 'Code(%d)' % int(self)


def to_symbols(text):
    """Split *text* into UTF-16 code units.

    Characters outside the Basic Multilingual Plane become two independent
    surrogate symbols; lone surrogates are kept as-is.
    """
    import numpy as np

    data = text.encode('utf-16-le', 'surrogatepass')
    return np.frombuffer(data, dtype='<u2').tolist()


def from_symbols(symbols):
    """Join UTF-16 code units back into a ``str``."""
    import numpy as np

    units = np.asarray(symbols, dtype='<u2')
    return units.tobytes().decode('utf-16-le', 'surrogatepass')


def as_symbols(sequence):
    """Normalise text, integer lists or numpy arrays into a symbol list."""
    import numpy as np
    from .errors import SymbolOutOfRange

    if isinstance(sequence, str):
        return to_symbols(sequence)
    array = np.asarray(sequence)
    if array.size == 0:
        return []
    if array.ndim != 1 or not np.issubdtype(array.dtype, np.integer):
        raise TypeError('Symbols must be a flat sequence of integers')
    if int(array.min()) < 0 or int(array.max()) >= SymbolAlphabet.SIZE:
        raise SymbolOutOfRange('Symbol outside 0..65535')
    return array.tolist()
