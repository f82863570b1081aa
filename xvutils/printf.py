"""Small printf-style formatter understanding %d, %u, %x (with l/ll), %p, %s and %%."""

import operator

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

# Integer conversions: spec -> (base, signed).  Every integer is narrowed to a
# 32-bit int before printing, whatever its length modifier.
_INT_SPECS = {
    "d": (10, True),
    "ld": (10, True),
    "lld": (10, True),
    "u": (10, False),
    "lu": (10, False),
    "llu": (10, False),
    "x": (16, False),
    "lx": (16, False),
    "llx": (16, False),
}
_ALL_SPECS = tuple(_INT_SPECS) + ("p", "s", "%")


def _int32(value):
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _format_int(value, base, signed):
    xx = _int32(operator.index(value))
    negative = signed and xx < 0
    x = -xx if negative else xx & _MASK32
    digits = []
    while True:
        x, rem = divmod(x, base)
        digits.append(_DIGITS[rem])
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _format_ptr(value):
    return "0x" + format(operator.index(value) & _MASK64, "016X")


def _next_arg(values):
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def sprintf(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the resulting string."""
    values = iter(args)
    out = []
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char != "%":
            out.append(char)
            i += 1
            continue
        rest = fmt[i + 1:i + 4]
        if not rest:
            break
        spec = next((s for s in _ALL_SPECS if rest.startswith(s)), None)
        if spec is None:
            # Unknown sequence: print it to draw attention.
            out.append("%" + rest[0])
            i += 2
            continue
        if spec == "%":
            out.append("%")
        elif spec == "p":
            out.append(_format_ptr(_next_arg(values)))
        elif spec == "s":
            text = _next_arg(values)
            out.append("(null)" if text is None else str(text))
        else:
            base, signed = _INT_SPECS[spec]
            out.append(_format_int(_next_arg(values), base, signed))
        i += 1 + len(spec)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write the formatted text to a text stream."""
    stream.write(sprintf(fmt, *args))