class IntegrityChecker:
    def __init__(self, reporter=None, segment_size=64):
        """Compute cryptographic hashes for compressed data and dictionaries.

        Args:
            reporter: Optional reporter used for metric collection.
            segment_size: Number of bytes per segment when hashing streams.
        """
        self._reporter = reporter
        self._segment_size = segment_size

    def _hash_bytes(self, data):
        """Return SHA256 hexadecimal digest for *data* bytes."""
        import hashlib

        hasher = hashlib.sha256()
        hasher.update(data)
        return hasher.hexdigest()

    def _code_bytes(self, code):
        """Encode a dictionary code as 4-byte big-endian representation."""
        return int(code).to_bytes(4, 'big', signed=False)

    def _seq_bytes(self, seq):
        return b"".join(int(s).to_bytes(2, 'big', signed=False) for s in seq)

    def hash_stream(self, stream):
        """Hash a compressed buffer in fixed-size segments."""
        data = bytes(stream) if stream is not None else b""

        segment_hashes = []
        for i in range(0, len(data), self._segment_size):
            segment_hashes.append(self._hash_bytes(data[i : i + self._segment_size]))

        stream_hash = self._hash_bytes("".join(segment_hashes).encode("utf-8"))

        if self._reporter:
            self._reporter.report(
                "segment_hashes",
                "SHA256 hashes of individual stream segments",
                segment_hashes,
            )
            self._reporter.report(
                "stream_hash", "SHA256 hash of the entire stream", stream_hash
            )

        return stream_hash

    def hash_trace(self, trace):
        """Hash an ordered dictionary trace of ``(code, sequence)`` pairs.

        Order is significant: two traces hash equal only when entries were
        added with the same codes in the same order.
        """
        segment_hashes = []
        for code, seq in trace:
            segment_hashes.append(self._hash_bytes(self._code_bytes(code) + self._seq_bytes(seq)))

        digest = self._hash_bytes("".join(segment_hashes).encode("utf-8"))

        if self._reporter:
            self._reporter.report(
                "segment_hashes",
                "SHA256 hashes of dictionary trace entries",
                segment_hashes,
            )
            self._reporter.report(
                "trace_hash", "SHA256 hash of the dictionary trace", digest
            )

        return digest

    def hash_dictionary(self, dictionary):
        """Hash the final code-to-sequence mapping of either dictionary side."""
        if not hasattr(dictionary, "export"):
            raise TypeError("Unsupported dictionary type")
        items = sorted((e["code"], tuple(e["seq"])) for e in dictionary.export())
        return self.hash_trace(items)
