from enum import Enum, IntEnum


class ShipType(Enum):
    """The fixed fleet catalog: display label and length of every ship kind."""

    CARRIER = ("Carrier", 5)
    BATTLESHIP = ("Battleship", 4)
    SUBMARINE = ("Submarine", 3)
    DESTROYER = ("Destroyer", 3)
    PATROL_BOAT = ("Patrol Boat", 2)

    def __init__(self, label, size):
        self.label = label
        self.size = size


# Placement order
FLEET = list(ShipType)


class CellState(IntEnum):
    """What the player knows about a cell. Values double as board grid codes."""

    UNKNOWN = 0
    MISS = 1
    HIT = 2


class Ship:
    """One placed ship of a given kind and the set of its cells that have been hit."""

    def __init__(self, kind, coordinates, orientation):
        self.kind = kind
        self.cells = frozenset(coordinates)
        self.coordinates = list(coordinates)  # bow first
        self.orientation = orientation  # "H" or "V"
        self.hits = set()

    @property
    def size(self):
        return self.kind.size

    def is_sunk(self):
        return self.hits == self.cells

    def check_hit(self, coord):
        """Record a shot at coord. Returns whether it landed on this ship."""
        if coord not in self.cells:
            return False
        self.hits.add(coord)
        return True

    def __repr__(self):
        return f"Ship({self.kind.name}, {self.coordinates[0]}, {self.orientation})"
