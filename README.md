# xvutils

A small collection of tools and models from a teaching operating system,
written as ordinary Python:

- **Command-line utilities**: `grep` (with `^ . * $`), `wc`, `cat`, `echo`
  and `ls`, which work on the host file system.
- **A shell command parser** (`xvutils.shell`): turns a command line into a
  tree of exec, redirection, pipe, list and background commands.
- **Virtio block-device structures** (`xvutils.virtio`): MMIO register
  offsets, status and descriptor flags, descriptors, rings and block
  requests, packed to and from their little-endian byte layouts.
- **Helpers**: a small `printf` (`xvutils.printf`) that knows
  `%d %u %x %p %s %%` and the `l`/`ll` forms of the integer conversions,
  and the Park–Miller random number generator (`xvutils.rand`).

## Installation

```
pip install .
```

Python 3.10 or later is needed; there are no other dependencies.

## Commands

```
xv-grep PATTERN [FILE ...]     print lines matching PATTERN
xv-wc [FILE ...]               line, word and byte counts
xv-cat [FILE ...]              copy files (or standard input) to standard output
xv-echo [ARG ...]              print arguments separated by spaces
xv-ls [PATH ...]               list names, types, inode numbers and sizes
```

`xv-grep` reads standard input when no file is given. It prints only
newline-terminated lines: a last line without a newline is not reported.

`xv-wc` prints `lines words bytes name` for each file, or for standard
input with an empty name.

`xv-ls` prints one line per entry: the name padded to 14 characters, the
file type (1 directory, 2 file, 3 device), the inode number and the size.
A directory is listed with `.` and `..` first, then its entries in sorted
order.

## Library use

Pattern matching:

```python
from xvutils.pattern import match, grep

match("^ab*c$", "abbbc")   # True
match("x.z", "wxyz")       # True

with open("notes.txt") as handle:
    for line in grep("^TODO", handle):
        print(line, end="")
```

Counting and echoing:

```python
import io
from xvutils.textutil import count, echo

count(io.BytesIO(b"one two\nthree\n"))   # WordCount(lines=2, words=3, chars=14)
echo(["hello", "world"])                  # "hello world\n"
```

Parsing a shell line:

```python
from xvutils.shell import parse_command, tokenize, PipeCmd

cmd = parse_command("cat < in | grep foo > out")
isinstance(cmd, PipeCmd)   # True
tokenize("echo hi >> log")  # [("a", "echo"), ("a", "hi"), ("+", ">>"), ("a", "log")]
```

Bad input, such as a redirection without a file, a missing `)`, ten or more
arguments to one command, or text left over after a complete command,
raises `ShellSyntaxError`.

Formatting:

```python
from xvutils.printf import sprintf

sprintf("%d %x %p %s", -5, 255, 1, None)
# "-5 FF 0x0000000000000001 (null)"
```

Random numbers:

```python
from xvutils.rand import ParkMillerRandom, do_rand

rng = ParkMillerRandom(seed=1)
rng.next()     # 33613
do_rand(1)     # 33613
```

Virtio structures:

```python
from xvutils.virtio import VirtqDesc, DescFlags, BlkRequest, BLK_T_OUT

desc = VirtqDesc(addr=0x1000, len=512, flags=DescFlags.NEXT, next=1)
raw = desc.pack()                  # 16 bytes
VirtqDesc.unpack(raw) == desc      # True
BlkRequest(type=BLK_T_OUT, sector=42).pack()
```

`unpack` raises `ValueError` when given the wrong number of bytes, and
`pack` raises `ValueError` when a field does not fit its width.

## What this package does not do

It has no commands to kill processes, make links, create directories or
remove files, and no builder for file-system images. It does not model page
tables or physical memory, and has no heap allocator. The shell module only
parses command lines; it does not run them. The virtio module describes the
data layouts but does not talk to any device.

## Running the tests

```
pip install ".[test]"
pytest
```