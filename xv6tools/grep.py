"""A simple grep supporting the ^ . * $ operators."""

import sys

_BUFSIZE = 1024


def _match_star(c, re, ri, text, ti):
    while True:
        if _match_here(re, ri, text, ti):
            return True
        if ti >= len(text):
            return False
        ch = text[ti]
        ti += 1
        if not (ch == c or c == "."):
            return False


def _match_here(re, ri, text, ti):
    while True:
        if ri >= len(re):
            return True
        if ri + 1 < len(re) and re[ri + 1] == "*":
            return _match_star(re[ri], re, ri + 2, text, ti)
        if re[ri] == "$" and ri + 1 == len(re):
            return ti == len(text)
        if ti < len(text) and (re[ri] == "." or re[ri] == text[ti]):
            ri += 1
            ti += 1
            continue
        return False


def match(re, text):
    """Whether the pattern ``re`` matches anywhere in ``text``."""
    if re.startswith("^"):
        return _match_here(re, 1, text, 0)
    return any(_match_here(re, 0, text, ti) for ti in range(len(text) + 1))


def grep_lines(pattern, stream):
    """Yield each newline-terminated line of ``stream`` that matches ``pattern``.

    A final line without a newline is not reported, and reading stops at a
    line too long for the 1024-byte buffer. Byte streams are read as latin-1.
    """
    pending = ""
    while True:
        room = _BUFSIZE - 1 - len(pending)
        chunk = stream.read(room) if room > 0 else ""
        if not chunk:
            return
        if isinstance(chunk, (bytes, bytearray)):
            chunk = bytes(chunk).decode("latin-1")
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                yield line + "\n"


def _emit(lines):
    out = getattr(sys.stdout, "buffer", None)
    for line in lines:
        if out is None:
            sys.stdout.write(line)
        else:
            sys.stdout.flush()
            out.write(line.encode("latin-1"))
            out.flush()


def main(argv=None):
    """Command entry point: ``grep pattern [file ...]``; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern = args[0]
    if len(args) == 1:
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        _emit(grep_lines(pattern, stdin))
        return 0
    for path in args[1:]:
        try:
            handle = open(path, "rb")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            sys.stdout.flush()
            return 1
        with handle:
            _emit(grep_lines(pattern, handle))
    return 0