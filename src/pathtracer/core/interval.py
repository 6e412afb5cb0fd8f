# core/interval.py
import math


class Interval:
    """
    A closed range of real numbers [minimum, maximum].

    Used to carry the range of acceptable ray parameters through the hit
    protocol. minimum <= maximum is expected but not enforced, so an empty
    interval is representable.
    """
    def __init__(self, minimum: float = math.inf, maximum: float = -math.inf):
        self.min = minimum
        self.max = maximum

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """Strict containment; the endpoints themselves are rejected."""
        return self.min < x < self.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
