"""A small printf: %c %s %d %i %u %x %X %p and %%."""

_MISSING = object()
_CONVERSIONS = frozenset("csdiuxXp")
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value):
    value = int(value) & _UINT32
    return value - (1 << 32) if value >= (1 << 31) else value


def _convert(spec, value):
    if spec == "c":
        if isinstance(value, str):
            return value[:1]
        return chr(int(value) % 256)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return str(int(value) & _UINT32)
    if spec == "x":
        return format(int(value) & _UINT32, "x")
    if spec == "X":
        return format(int(value) & _UINT32, "X")
    if not value:
        return "(nil)"
    return "0x" + format(int(value) & _UINT64, "x")


def format_printf(fmt, *args):
    """Format ``args`` according to ``fmt``.

    Every conversion other than %% takes one argument, unknown ones included,
    which print nothing.  Raises ValueError when a known conversion has no
    argument left.
    """
    out = []
    values = iter(args)
    index = 0
    while index < len(fmt):
        ch = fmt[index]
        if ch != "%":
            out.append(ch)
            index += 1
            continue
        spec = fmt[index + 1:index + 2]
        index += 2
        if spec == "%":
            out.append("%")
            continue
        value = next(values, _MISSING)
        if spec not in _CONVERSIONS:
            continue
        if value is _MISSING:
            raise ValueError(f"missing argument for %{spec}")
        out.append(_convert(spec, value))
    return "".join(out)


def printfd(stream, fmt, *args):
    """Write the formatted text to ``stream`` and return its length."""
    text = format_printf(fmt, *args)
    stream.write(text)
    return len(text)