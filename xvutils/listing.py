"""Directory listing in the style of a minimal ls."""

import os
import stat as _stat
import sys
from dataclasses import dataclass
from enum import IntEnum

DIRSIZ = 14
_PATH_BUFSIZE = 512


class FileType(IntEnum):
    """Kinds of file reported by stat."""

    DIR = 1
    FILE = 2
    DEVICE = 3


@dataclass(frozen=True)
class Stat:
    """File metadata as reported by stat."""

    dev: int
    ino: int
    type: FileType
    nlink: int
    size: int


def stat_path(path):
    """Return a Stat for ``path``; raises OSError if it cannot be examined."""
    st = os.stat(path)
    if _stat.S_ISDIR(st.st_mode):
        kind = FileType.DIR
    elif _stat.S_ISREG(st.st_mode):
        kind = FileType.FILE
    else:
        kind = FileType.DEVICE
    return Stat(st.st_dev, st.st_ino, kind, st.st_nlink, st.st_size)


def fmtname(path):
    """Return the last path component, blank-padded to DIRSIZ characters."""
    name = path.rsplit("/", 1)[-1]
    return name if len(name) >= DIRSIZ else name.ljust(DIRSIZ)


def _line(path, st):
    return f"{fmtname(path)} {int(st.type)} {st.ino} {st.size}\n"


def ls(path, out=None):
    """Write a listing of ``path`` (a file or a directory) to ``out``."""
    out = sys.stdout if out is None else out
    try:
        st = stat_path(path)
    except OSError:
        print(f"ls: cannot open {path}", file=sys.stderr)
        return
    if st.type != FileType.DIR:
        out.write(_line(path, st))
        return
    if len(path) + 1 + DIRSIZ + 1 > _PATH_BUFSIZE:
        out.write("ls: path too long\n")
        return
    try:
        names = [".", ".."] + sorted(os.listdir(path))
    except OSError:
        print(f"ls: cannot open {path}", file=sys.stderr)
        return
    for name in names:
        entry = f"{path}/{name[:DIRSIZ]}"
        try:
            entry_stat = stat_path(entry)
        except OSError:
            out.write(f"ls: cannot stat {entry}\n")
            continue
        out.write(_line(entry, entry_stat))


def main(argv=None):
    """Command entry: ls [path ...]."""
    args = sys.argv[1:] if argv is None else list(argv)
    for path in args or ["."]:
        ls(path)
    return 0