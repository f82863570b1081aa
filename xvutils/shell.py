"""Parser for the command language of a minimal shell.

Supports words, pipes (``|``), command lists (``;``), background jobs
(``&``), parenthesised blocks and the redirections ``<``, ``>`` and ``>>``.
"""

from dataclasses import dataclass, field
from enum import Enum

MAXARGS = 10

_WHITESPACE = " \t\r\n\v"
_SYMBOLS = "<|>&;()"
_SINGLE = "|();&<"
_END = ""
_WORD = "a"
_APPEND = "+"


class RedirMode(Enum):
    """How a redirected file is opened."""

    READ = "<"
    WRITE = ">"
    APPEND = ">>"


class ShellSyntaxError(ValueError):
    """A command line could not be parsed."""

    def __init__(self, message, leftovers=None):
        super().__init__(message)
        self.leftovers = leftovers


@dataclass
class ExecCmd:
    """A program and its arguments."""

    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    """A command run with one file descriptor redirected to a file."""

    cmd: object
    file: str
    mode: RedirMode
    fd: int


@dataclass
class PipeCmd:
    """Two commands connected by a pipe."""

    left: object
    right: object


@dataclass
class ListCmd:
    """Two commands run one after the other."""

    left: object
    right: object


@dataclass
class BackCmd:
    """A command run in the background."""

    cmd: object


class _Scanner:
    def __init__(self, line):
        # The line ends at the first NUL, as a C string would.
        self.text = line.split("\0", 1)[0]
        self.pos = 0

    @property
    def at_end(self):
        return self.pos >= len(self.text)

    @property
    def rest(self):
        return self.text[self.pos:]

    def _skip(self):
        while not self.at_end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        self._skip()
        return not self.at_end and self.text[self.pos] in toks

    def next(self):
        self._skip()
        if self.at_end:
            return (_END, "")
        start = self.pos
        ch = self.text[self.pos]
        if ch in _SINGLE:
            self.pos += 1
            kind = ch
        elif ch == ">":
            self.pos += 1
            kind = ">"
            if not self.at_end and self.text[self.pos] == ">":
                self.pos += 1
                kind = _APPEND
        else:
            kind = _WORD
            while (not self.at_end
                   and self.text[self.pos] not in _WHITESPACE
                   and self.text[self.pos] not in _SYMBOLS):
                self.pos += 1
        token = (kind, self.text[start:self.pos])
        self._skip()
        return token


def tokenize(line):
    """Split a command line into ``(kind, text)`` tokens.

    ``kind`` is ``"a"`` for a word, ``"+"`` for ``>>`` and the symbol itself
    for every other operator.
    """
    scanner = _Scanner(line)
    tokens = []
    while True:
        token = scanner.next()
        if token[0] == _END:
            return tokens
        tokens.append(token)


def _parse_line(sc):
    cmd = _parse_pipe(sc)
    while sc.peek("&"):
        sc.next()
        cmd = BackCmd(cmd)
    if sc.peek(";"):
        sc.next()
        cmd = ListCmd(cmd, _parse_line(sc))
    return cmd


def _parse_pipe(sc):
    cmd = _parse_exec(sc)
    if sc.peek("|"):
        sc.next()
        cmd = PipeCmd(cmd, _parse_pipe(sc))
    return cmd


def _parse_redirs(cmd, sc):
    while sc.peek("<>"):
        kind, _ = sc.next()
        target_kind, target = sc.next()
        if target_kind != _WORD:
            raise ShellSyntaxError("missing file for redirection")
        if kind == "<":
            cmd = RedirCmd(cmd, target, RedirMode.READ, 0)
        elif kind == ">":
            cmd = RedirCmd(cmd, target, RedirMode.WRITE, 1)
        else:
            cmd = RedirCmd(cmd, target, RedirMode.APPEND, 1)
    return cmd


def _parse_block(sc):
    if not sc.peek("("):
        raise ShellSyntaxError("parseblock")
    sc.next()
    cmd = _parse_line(sc)
    if not sc.peek(")"):
        raise ShellSyntaxError("syntax - missing )")
    sc.next()
    return _parse_redirs(cmd, sc)


def _parse_exec(sc):
    if sc.peek("("):
        return _parse_block(sc)
    exec_cmd = ExecCmd()
    ret = _parse_redirs(exec_cmd, sc)
    while not sc.peek("|)&;"):
        kind, text = sc.next()
        if kind == _END:
            break
        if kind != _WORD:
            raise ShellSyntaxError("syntax")
        exec_cmd.argv.append(text)
        if len(exec_cmd.argv) >= MAXARGS:
            raise ShellSyntaxError("too many args")
        ret = _parse_redirs(ret, sc)
    return ret


def parse_command(line):
    """Parse a whole command line into a command tree."""
    sc = _Scanner(line)
    cmd = _parse_line(sc)
    sc.peek("")
    if not sc.at_end:
        raise ShellSyntaxError("syntax", leftovers=sc.rest)
    return cmd