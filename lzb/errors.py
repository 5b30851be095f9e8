class CodecError(Exception):
    """Base class for every error raised by the LZB codec."""


class MalformedStream(CodecError):
    """Raised when compressed data does not follow the LZB wire format."""
    def __init__(self, message="Compressed stream is malformed"):
        super().__init__(message)


class InvalidLiteralTag(MalformedStream):
    """Raised when the stream does not open with a literal tag."""
    def __init__(self, tag=None):
        message = "Invalid initial literal tag"
        if tag is not None:
            message = "Invalid initial literal tag %d" % tag
        super().__init__(message)
        self.tag = tag


class DictionaryMismatch(MalformedStream):
    """Raised when a code refers to an entry the decoder cannot build."""
    def __init__(self, code=None, size=None):
        message = "Dictionary mismatch detected"
        if code is not None:
            message = "Unknown code %d (dictionary size %s)" % (code, size)
        super().__init__(message)
        self.code = code


class TruncatedStream(MalformedStream):
    """Raised when the input ends before the end-of-stream code."""
    def __init__(self, message="Compressed stream ended before end marker"):
        super().__init__(message)


class SymbolOutOfRange(CodecError, ValueError):
    """Raised when a raw symbol does not fit in 16 bits."""
    def __init__(self, message="Symbol out of alphabet"):
        super().__init__(message)


class DocumentError(CodecError):
    pass


class UnsupportedDocument(DocumentError):
    def __init__(self, path):
        super().__init__("Not a .json or .dat document: %s" % path)
        self.path = path


class EmptyDocument(DocumentError):
    def __init__(self, path):
        super().__init__("Document is empty: %s" % path)
        self.path = path
