"""The Park-Miller minimal standard pseudo-random generator."""

_MASK64 = (1 << 64) - 1


class ParkMiller:
    """Iterator of values in ``[0, 0x7ffffffd]``: x = 7**5 * x mod (2**31 - 1).

    The state is a 64-bit word; each value produced becomes the new state.
    """

    MODULUS = 0x7FFFFFFF
    MULTIPLIER = 16807

    def __init__(self, seed=1):
        if seed < 0:
            raise ValueError("seed must not be negative")
        self.state = seed & _MASK64

    def __iter__(self):
        return self

    def __next__(self):
        x = self.state % 0x7FFFFFFE + 1
        hi, lo = divmod(x, 127773)
        x = self.MULTIPLIER * lo - 2836 * hi
        if x < 0:
            x += self.MODULUS
        x -= 1
        self.state = x
        return x