"""A tiny regular-expression matcher (^ . * $) and a grep built on it."""

import sys

_BUFSIZE = 1024


def _matchhere(re, ri, text, ti):
    while True:
        if ri == len(re):
            return True
        if ri + 1 < len(re) and re[ri + 1] == "*":
            return _matchstar(re[ri], re, ri + 2, text, ti)
        if re[ri] == "$" and ri + 1 == len(re):
            return ti == len(text)
        if ti < len(text) and (re[ri] == "." or re[ri] == text[ti]):
            ri += 1
            ti += 1
            continue
        return False


def _matchstar(c, re, ri, text, ti):
    while True:
        if _matchhere(re, ri, text, ti):
            return True
        if ti >= len(text):
            return False
        matched = text[ti] == c or c == "."
        ti += 1
        if not matched:
            return False


def match(pattern, text):
    """Return True if ``pattern`` matches anywhere in ``text``."""
    if pattern.startswith("^"):
        return _matchhere(pattern, 1, text, 0)
    return any(_matchhere(pattern, 0, text, start) for start in range(len(text) + 1))


def grep(pattern, stream):
    """Yield newline-terminated lines of a text stream that match ``pattern``.

    A trailing line without a newline is never reported, and scanning stops
    when a single line no longer fits in the 1024-byte buffer.
    """
    pending = ""
    while True:
        room = _BUFSIZE - 1 - len(pending)
        chunk = stream.read(room) if room > 0 else ""
        if not chunk:
            return
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                yield line + "\n"


def main(argv=None):
    """Command entry: grep pattern [file ...]."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: grep pattern [file ...]", file=sys.stderr)
        return 1
    pattern, paths = args[0], args[1:]
    if not paths:
        sys.stdout.writelines(grep(pattern, sys.stdin))
        return 0
    for path in paths:
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError:
            print(f"grep: cannot open {path}")
            return 1
        with handle:
            sys.stdout.writelines(grep(pattern, handle))
    return 0