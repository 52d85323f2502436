"""Parser for the shell's command language: pipes, lists, background jobs,
redirections and parenthesised blocks."""

from dataclasses import dataclass

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"
MAXARGS = 10

_END = ""
_WORD = "a"


class ShellSyntaxError(ValueError):
    """The command line cannot be parsed."""


@dataclass(frozen=True)
class ExecCommand:
    """Run a program; ``argv`` is empty for a blank command."""

    argv: tuple


@dataclass(frozen=True)
class RedirCommand:
    """Run ``cmd`` with descriptor ``fd`` redirected to ``file``.

    ``mode`` is the operator used: ``"<"``, ``">"`` or ``">>"``.
    """

    cmd: object
    file: str
    mode: str
    fd: int


@dataclass(frozen=True)
class PipeCommand:
    """Connect the output of ``left`` to the input of ``right``."""

    left: object
    right: object


@dataclass(frozen=True)
class ListCommand:
    """Run ``left`` to completion, then ``right``."""

    left: object
    right: object


@dataclass(frozen=True)
class BackCommand:
    """Run ``cmd`` without waiting for it."""

    cmd: object


class _Parser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def _skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self):
        return self.pos >= len(self.text)

    def peek(self, toks):
        self._skip_space()
        return not self.at_end() and self.text[self.pos] in toks

    def gettoken(self):
        """Return ``(kind, word)``; kind is a symbol, ``">>"``, ``"a"`` or ``""``."""
        self._skip_space()
        start = self.pos
        if self.at_end():
            kind = _END
        else:
            ch = self.text[self.pos]
            if ch in "|();&<":
                self.pos += 1
                kind = ch
            elif ch == ">":
                self.pos += 1
                kind = ">"
                if not self.at_end() and self.text[self.pos] == ">":
                    self.pos += 1
                    kind = ">>"
            else:
                kind = _WORD
                while not self.at_end():
                    c = self.text[self.pos]
                    if c in WHITESPACE or c in SYMBOLS:
                        break
                    self.pos += 1
        word = self.text[start:self.pos]
        self._skip_space()
        return kind, word

    def parse_line(self):
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.gettoken()
            cmd = BackCommand(cmd)
        if self.peek(";"):
            self.gettoken()
            cmd = ListCommand(cmd, self.parse_line())
        return cmd

    def parse_pipe(self):
        cmd = self.parse_exec()
        if self.peek("|"):
            self.gettoken()
            cmd = PipeCommand(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self):
        redirs = []
        while self.peek("<>"):
            op, _ = self.gettoken()
            kind, word = self.gettoken()
            if kind != _WORD:
                raise ShellSyntaxError("missing file for redirection")
            redirs.append((op, word))
        return redirs

    @staticmethod
    def _wrap(cmd, redirs):
        for op, file in redirs:
            cmd = RedirCommand(cmd, file, op, 0 if op == "<" else 1)
        return cmd

    def parse_block(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.gettoken()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.gettoken()
        return self._wrap(cmd, self.parse_redirs())

    def parse_exec(self):
        if self.peek("("):
            return self.parse_block()
        argv = []
        redirs = self.parse_redirs()
        while not self.peek("|)&;"):
            kind, word = self.gettoken()
            if kind == _END:
                break
            if kind != _WORD:
                raise ShellSyntaxError("syntax")
            argv.append(word)
            if len(argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            redirs.extend(self.parse_redirs())
        return self._wrap(ExecCommand(tuple(argv)), redirs)


def parse_command(line):
    """Parse one command line into a command tree.

    Raises ShellSyntaxError when the line is malformed or has text left over.
    """
    parser = _Parser(line)
    cmd = parser.parse_line()
    parser.peek("")
    if not parser.at_end():
        raise ShellSyntaxError(f"syntax: leftovers: {line[parser.pos:]}")
    return cmd