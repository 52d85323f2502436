"""Directory listing (ls) and recursive name search (find)."""

import os
import stat
import sys

DIRSIZ = 14
_BUFSIZE = 512

T_DIR = 1
T_FILE = 2
T_DEVICE = 3


def _type_of(st):
    if stat.S_ISDIR(st.st_mode):
        return T_DIR
    if stat.S_ISREG(st.st_mode):
        return T_FILE
    return T_DEVICE


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def fmtname(path):
    """Return the last component of ``path``, blank-padded to DIRSIZ characters."""
    name = path[path.rfind("/") + 1:]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _line(path, st):
    return f"{fmtname(path)} {_type_of(st)} {st.st_ino} {st.st_size}\n"


def ls(path, out):
    """Write a line for the file ``path``, or for each entry of the directory.

    Directory entries, ``.`` and ``..`` first, are listed in name order.
    """
    try:
        st = os.stat(path)
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return
    kind = _type_of(st)
    if kind == T_FILE:
        out.write(_line(path, st))
    elif kind == T_DIR:
        if len(path) + 1 + DIRSIZ + 1 > _BUFSIZE:
            out.write("ls: path too long\n")
            return
        try:
            names = [".", ".."] + sorted(os.listdir(path))
        except OSError:
            sys.stderr.write(f"ls: cannot open {path}\n")
            return
        for name in names:
            full = f"{path}/{name}"
            try:
                entry = os.stat(full)
            except OSError:
                out.write(f"ls: cannot stat {full}\n")
                continue
            out.write(_line(full, entry))


def find(path, filename, out):
    """Write ``dir/filename`` for every regular file named ``filename`` below ``path``.

    Entries are visited in name order; symbolic links are not followed.
    """
    try:
        st = os.stat(path)
    except OSError:
        sys.stderr.write(f"find: cannot open {path}\n")
        return
    if not stat.S_ISDIR(st.st_mode):
        return
    try:
        names = sorted(os.listdir(path))
    except OSError:
        sys.stderr.write(f"find: cannot open {path}\n")
        return
    for name in names:
        full = f"{path}/{name}"
        try:
            entry = os.lstat(full)
        except OSError:
            sys.stderr.write(f"find: cannot stat {full}\n")
            continue
        if stat.S_ISDIR(entry.st_mode):
            find(full, filename, out)
        elif stat.S_ISREG(entry.st_mode) and name == filename:
            out.write(f"{path}/{filename}\n")


def ls_main(argv=None):
    """Command entry point: ``ls [path ...]``, listing ``.`` by default."""
    args = _args(argv)
    for path in args or ["."]:
        ls(path, sys.stdout)
    return 0


def find_main(argv=None):
    """Command entry point: ``find directory filename``."""
    args = _args(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: find directory filename\n")
        return 1
    find(args[0], args[1], sys.stdout)
    return 0