class Vec2:
    """Integer grid vector. Hashable so it can key occupancy maps."""

    __slots__ = ("x", "y")

    def __init__(self, x=0, y=0):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"Vec2 is immutable, cannot set {name!r}")

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __eq__(self, other):
        if isinstance(other, Vec2):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return (
            self.x,
            self.y,
        ).__repr__()

    def to_tuple(self):
        return (self.x, self.y)
