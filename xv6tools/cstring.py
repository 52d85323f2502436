"""Small string helpers with C library semantics."""


def atoi(s):
    """Return the value of the leading decimal digits of ``s`` (0 if none)."""
    n = 0
    for ch in s:
        if not "0" <= ch <= "9":
            break
        n = n * 10 + ord(ch) - ord("0")
    return n


def _codes(s):
    if isinstance(s, (bytes, bytearray)):
        codes = list(s)
    else:
        codes = [ord(ch) for ch in s]
    if 0 in codes:
        codes = codes[: codes.index(0)]
    return codes


def strcmp(p, q):
    """Compare two strings as C does; the result's sign gives the order."""
    a, b = _codes(p), _codes(q)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) == len(b):
        return 0
    return a[len(b)] if len(a) > len(b) else -b[len(a)]


def gets(stream, max):
    """Read at most ``max - 1`` characters, stopping after a newline or return."""
    pieces = []
    empty = ""
    while len(pieces) + 1 < max:
        ch = stream.read(1)
        empty = ch[:0]
        if not ch:
            break
        pieces.append(ch)
        if ch in ("\n", "\r", b"\n", b"\r"):
            break
    return empty.join(pieces)