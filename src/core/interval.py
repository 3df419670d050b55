# core/interval.py
import math

class Interval:
    """
    A closed range of real numbers [min, max]. The default interval is empty.
    """
    __slots__ = ("min", "max")

    def __init__(self, min_value: float = math.inf, max_value: float = -math.inf):
        self.min = min_value
        self.max = max_value

    @classmethod
    def hull(cls, a: "Interval", b: "Interval") -> "Interval":
        """
        The tightest interval enclosing both a and b.
        """
        return cls(min(a.min, b.min), max(a.max, b.max))

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __add__(self, displacement: float) -> "Interval":
        return Interval(self.min + displacement, self.max + displacement)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)
