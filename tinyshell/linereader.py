"""Read streams and files line by line in fixed-size chunks."""

BUFFER_SIZE = 4096
_MAX_BUFFER = 0x7FFFFFFF


def _lines(stream, buffer_size):
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if pending is None:
            pending = chunk[:0]
        if not chunk:
            break
        pending += chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        start = 0
        while (pos := pending.find(newline, start)) != -1:
            yield pending[start:pos + 1]
            start = pos + 1
        pending = pending[start:]
    if pending:
        yield pending


def iter_lines(stream, buffer_size=BUFFER_SIZE):
    """Yield the lines of a text or binary ``stream``, newlines kept.

    The last line has no newline if the stream does not end with one.
    Raises ValueError for a buffer size out of range.
    """
    if buffer_size <= 0 or buffer_size >= _MAX_BUFFER:
        raise ValueError(f"buffer size out of range: {buffer_size}")
    return _lines(stream, buffer_size)


def read_file(path):
    """Return the lines of the file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(iter_lines(stream))