"""Structured documents stored as plain ``.json`` or LZB-compressed ``.dat``."""
import pathlib


class JsonSerializer:
    def serialize(self, obj):
        import json
        import numpy as np

        def default(o):
            if isinstance(o, np.ndarray):
                return {"__ndarray__": o.tolist(), "dtype": str(o.dtype)}
            if isinstance(o, np.generic):
                return o.item()
            raise TypeError(
                f"Object of type {type(o).__name__} is not JSON serializable"
            )

        return json.dumps(obj, separators=(",", ":"), sort_keys=True, default=default)

    def deserialize(self, text):
        import json
        import numpy as np

        def object_hook(d):
            if "__ndarray__" in d:
                return np.array(d["__ndarray__"], dtype=d.get("dtype"))
            return d

        return json.loads(text, object_hook=object_hook)


def _kind(path):
    from .errors import UnsupportedDocument
    suffix = path.suffix.lower()
    if suffix not in (".json", ".dat"):
        raise UnsupportedDocument(path)
    return suffix


def read_text(path, encoding="utf-8"):
    """Return the text of a ``.json`` or ``.dat`` document."""
    from .codec import decompress
    path = pathlib.Path(path)
    kind = _kind(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing document: {path}")
    if kind == ".dat":
        return decompress(path.read_bytes())
    return path.read_text(encoding=encoding)


def load_document(path, encoding="utf-8", serializer=None):
    from .errors import EmptyDocument
    path = pathlib.Path(path)
    text = read_text(path, encoding=encoding)
    if not text.strip():
        raise EmptyDocument(path)
    serializer = serializer if serializer is not None else JsonSerializer()
    obj = serializer.deserialize(text)
    if isinstance(obj, (dict, list)) and not obj:
        raise EmptyDocument(path)
    return obj


def save_document(path, obj, encoding="utf-8", serializer=None):
    from .codec import compress
    path = pathlib.Path(path)
    kind = _kind(path)
    serializer = serializer if serializer is not None else JsonSerializer()
    text = serializer.serialize(obj)
    if kind == ".dat":
        path.write_bytes(compress(text))
    else:
        path.write_text(text, encoding=encoding)
    return path


def compress_file(src, dst=None, encoding="utf-8"):
    """Write the compressed text of *src* next to it as ``<stem>.dat``."""
    from .codec import compress
    src = pathlib.Path(src)
    dst = src.with_suffix(".dat") if dst is None else pathlib.Path(dst)
    if src.resolve() == dst.resolve():
        raise ValueError(f"Refusing to overwrite source file {src}")
    dst.write_bytes(compress(src.read_text(encoding=encoding)))
    return dst
