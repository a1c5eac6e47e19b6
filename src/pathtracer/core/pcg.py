# core/pcg.py
"""
Seedable PCG32 generator (XSH-RR output, 64-bit state).

Every draw is pure integer arithmetic modulo 2**64, so two generators with
the same ``(state, sequence)`` seed produce the same stream on any platform.
Renders create one generator per pixel instead of sharing global state.
"""

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF
_MULTIPLIER = 6364136223846793005
_FLOAT_SCALE = 1.0 / (1 << 24)

# Default render seeds; pixel (i, j) uses (DEFAULT_SEED_STATE + j, DEFAULT_SEED_SEQUENCE + i).
DEFAULT_SEED_STATE = 17
DEFAULT_SEED_SEQUENCE = 23


class PCG32:
    def __init__(self, state: int = 0, sequence: int = 0):
        self.state = 0
        self.inc = 1
        self.seed(state, sequence)

    def seed(self, state: int, sequence: int) -> None:
        """
        Resets the generator. Two advances around the state injection keep
        the first outputs from tracking the seed directly.
        """
        self.state = 0
        self.inc = ((sequence << 1) | 1) & _MASK64
        self.next_u32()
        self.state = (self.state + state) & _MASK64
        self.next_u32()

    @classmethod
    def for_pixel(cls, i: int, j: int, seed_state: int = DEFAULT_SEED_STATE,
                  seed_sequence: int = DEFAULT_SEED_SEQUENCE) -> "PCG32":
        """
        Generator for pixel column ``i`` of scanline ``j``.
        """
        return cls(seed_state + j, seed_sequence + i)

    def next_u32(self) -> int:
        old = self.state
        self.state = (old * _MULTIPLIER + self.inc) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def random(self) -> float:
        """Float in [0, 1) built from the top 24 bits of one draw."""
        return (self.next_u32() >> 8) * _FLOAT_SCALE

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.random() * (hi - lo)

    def randint(self, lo: int, hi: int) -> int:
        """
        Integer in [lo, hi). Uses a plain modulo, which is slightly biased
        when the range is not a power of two.
        """
        if hi <= lo:
            raise ValueError(f"empty range [{lo}, {hi})")
        return lo + self.next_u32() % (hi - lo)

    def __repr__(self) -> str:
        return f"PCG32(state=0x{self.state:016x}, inc=0x{self.inc:016x})"
