"""Word counting, concatenation and echo."""

import sys
from dataclasses import dataclass

_CHUNK = 512
# A NUL byte counts as whitespace too.
_WHITESPACE = frozenset(" \r\t\n\v\0") | frozenset(b" \r\t\n\v\0")
_NEWLINES = frozenset(("\n", ord("\n")))


@dataclass(frozen=True)
class WordCount:
    """Line, word and character totals of a stream."""

    lines: int = 0
    words: int = 0
    chars: int = 0


class _StreamError(OSError):
    """A read or write failed while copying."""


def count(stream):
    """Count lines, words and characters in a binary or text stream."""
    lines = words = chars = 0
    in_word = False
    while chunk := stream.read(_CHUNK):
        for ch in chunk:
            chars += 1
            if ch in _NEWLINES:
                lines += 1
            if ch in _WHITESPACE:
                in_word = False
            elif not in_word:
                words += 1
                in_word = True
    return WordCount(lines, words, chars)


def cat(sources, out):
    """Copy every source stream to ``out`` in order."""
    for source in sources:
        while True:
            try:
                chunk = source.read(_CHUNK)
            except OSError as exc:
                raise _StreamError("read error") from exc
            if not chunk:
                break
            try:
                written = out.write(chunk)
            except OSError as exc:
                raise _StreamError("write error") from exc
            if written is not None and written != len(chunk):
                raise _StreamError("write error")


def echo(args):
    """Return the arguments joined by spaces with a final newline."""
    return " ".join(args) + "\n" if args else ""


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def wc_main(argv=None):
    """Command entry: wc [file ...]."""
    args = _args(argv)
    targets = [(None, "")] if not args else [(path, path) for path in args]
    for path, name in targets:
        try:
            if path is None:
                totals = count(sys.stdin.buffer)
            else:
                try:
                    handle = open(path, "rb")
                except OSError:
                    print(f"wc: cannot open {path}")
                    return 1
                with handle:
                    totals = count(handle)
        except OSError:
            print("wc: read error")
            return 1
        print(f"{totals.lines} {totals.words} {totals.chars} {name}")
    return 0


def cat_main(argv=None):
    """Command entry: cat [file ...]."""
    args = _args(argv)
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        if not args:
            cat([sys.stdin.buffer], out)
            return 0
        for path in args:
            try:
                handle = open(path, "rb")
            except OSError:
                print(f"cat: cannot open {path}", file=sys.stderr)
                return 1
            with handle:
                cat([handle], out)
    except _StreamError as exc:
        print(f"cat: {exc}", file=sys.stderr)
        return 1
    finally:
        out.flush()
    return 0


def echo_main(argv=None):
    """Command entry: echo [arg ...]."""
    sys.stdout.write(echo(_args(argv)))
    return 0