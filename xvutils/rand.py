"""Park-Miller minimal standard pseudo-random generator."""

_MASK64 = 0xFFFFFFFFFFFFFFFF


def do_rand(state):
    """Advance ``state`` once; the returned value is also the next state.

    Computes (16807 * x) mod (2**31 - 1) without overflow, giving a value
    in the range [0, 0x7ffffffd].
    """
    x = (state & _MASK64) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMillerRandom:
    """Stateful generator over do_rand."""

    def __init__(self, seed=1):
        self.state = seed & _MASK64

    def next(self):
        """Return the next pseudo-random value."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        while True:
            yield self.next()