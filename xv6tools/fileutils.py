"""Small file utilities: cat, echo, wc, mkdir, rm, ln and sleep."""

import os
import sys
import time

from .cstring import atoi

_BUFSIZE = 512
_WC_SPACE = " \r\t\n\v\0"

TICK_SECONDS = 0.1


def _binary(stream):
    return getattr(stream, "buffer", stream)


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def cat(streams, out):
    """Copy each stream to ``out`` in order, 512 units at a time."""
    for stream in streams:
        while True:
            chunk = stream.read(_BUFSIZE)
            if not chunk:
                break
            out.write(chunk)


def echo(args, out):
    """Write ``args`` separated by spaces and ended by a newline.

    Nothing at all is written when ``args`` is empty.
    """
    args = list(args)
    if args:
        out.write(" ".join(args) + "\n")


def wc(stream):
    """Count lines, words and characters of ``stream``; return them as a tuple.

    Spaces, tabs, carriage returns, newlines, vertical tabs and NULs
    separate words. Byte streams are read as latin-1.
    """
    lines = words = chars = 0
    inword = False
    while True:
        chunk = stream.read(_BUFSIZE)
        if not chunk:
            break
        if isinstance(chunk, (bytes, bytearray)):
            chunk = bytes(chunk).decode("latin-1")
        for ch in chunk:
            chars += 1
            if ch == "\n":
                lines += 1
            if ch in _WC_SPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return lines, words, chars


def cat_main(argv=None):
    """Command entry point: ``cat [file ...]``; returns the exit status."""
    args = _args(argv)
    sys.stdout.flush()
    out = _binary(sys.stdout)
    try:
        if not args:
            cat([_binary(sys.stdin)], out)
            return 0
        for path in args:
            try:
                handle = open(path, "rb")
            except OSError:
                sys.stderr.write(f"cat: cannot open {path}\n")
                return 1
            with handle:
                cat([handle], out)
        return 0
    finally:
        out.flush()


def echo_main(argv=None):
    """Command entry point: ``echo [arg ...]``."""
    echo(_args(argv), sys.stdout)
    return 0


def wc_main(argv=None):
    """Command entry point: ``wc [file ...]``; returns the exit status."""
    args = _args(argv)
    if not args:
        lines, words, chars = wc(_binary(sys.stdin))
        sys.stdout.write(f"{lines} {words} {chars} \n")
        return 0
    for path in args:
        try:
            handle = open(path, "rb")
        except OSError:
            sys.stdout.write(f"wc: cannot open {path}\n")
            return 1
        with handle:
            lines, words, chars = wc(handle)
        sys.stdout.write(f"{lines} {words} {chars} {path}\n")
    return 0


def mkdir_main(argv=None):
    """Command entry point: ``mkdir dir ...``; stops at the first failure."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: mkdir files...\n")
        return 1
    for path in args:
        try:
            os.mkdir(path)
        except OSError:
            sys.stderr.write(f"mkdir: {path} failed to create\n")
            break
    return 0


def _unlink(path):
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def rm_main(argv=None):
    """Command entry point: ``rm file ...``; empty directories may be removed too."""
    args = _args(argv)
    if not args:
        sys.stderr.write("Usage: rm files...\n")
        return 1
    for path in args:
        try:
            _unlink(path)
        except OSError:
            sys.stderr.write(f"rm: {path} failed to delete\n")
            break
    return 0


def ln_main(argv=None):
    """Command entry point: ``ln old new`` makes a hard link."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: ln old new\n")
        return 1
    old, new = args
    try:
        os.link(old, new)
    except OSError:
        sys.stderr.write(f"link {old} {new}: failed\n")
    return 0


def sleep_main(argv=None):
    """Command entry point: ``sleep TICKS``; one tick is a tenth of a second."""
    args = _args(argv)
    if len(args) != 1:
        sys.stderr.write("Usage: sleep NUMBER\n")
        return 1
    text = args[0]
    if any(not "0" <= ch <= "9" for ch in text):
        sys.stderr.write(f"Invalid time interval '{text}'")
        return 1
    time.sleep(atoi(text) * TICK_SECONDS)
    return 0