"""A small printf supporting %d, %l, %x, %p, %s, %c and %%."""

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _format_int(value, base, signed):
    word = value & _MASK32
    negative = False
    if signed and word >= 1 << 31:
        negative = True
        word = (1 << 32) - word
    text = format(word, "X") if base == 16 else str(word)
    return "-" + text if negative else text


def _format_ptr(value):
    return "0x" + format(value & _MASK64, "016X")


def _format_str(value):
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("latin-1")
    return str(value).split("\0", 1)[0]


def format_string(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the resulting text.

    Integers behave as 32-bit words for %d, %l and %x, and as 64-bit words
    for %p. Unknown conversions are echoed with their percent sign.
    """
    values = iter(args)

    def next_arg():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pending = False
    for ch in fmt:
        if not pending:
            if ch == "%":
                pending = True
            else:
                out.append(ch)
            continue
        pending = False
        if ch == "d":
            out.append(_format_int(next_arg(), 10, True))
        elif ch == "l":
            out.append(_format_int(next_arg(), 10, False))
        elif ch == "x":
            out.append(_format_int(next_arg(), 16, False))
        elif ch == "p":
            out.append(_format_ptr(next_arg()))
        elif ch == "s":
            out.append(_format_str(next_arg()))
        elif ch == "c":
            out.append(chr(next_arg() & 0xFF))
        elif ch == "%":
            out.append("%")
        else:
            out.append("%" + ch)
    return "".join(out)


def print_to(stream, fmt, *args):
    """Write the formatted text to ``stream``."""
    stream.write(format_string(fmt, *args))