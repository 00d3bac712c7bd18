"""Game configuration defaults."""

# Board dimensions
NUM_COLUMNS = 10
NUM_ROWS = 10

# Turn economy
SHOTS_PER_TURN = 4
DAMAGE_PER_HIT = 50  # Damage a single cannon ball does to a ship

# Ships
SHIP_HEALTH_PER_CELL = 50  # A ship of size N starts with N * 50 health
FLEET = [
    ("Carrier", 5),
    ("Battleship", 4),
    ("Cruiser", 3),
    ("Submarine", 3),
    ("Destroyer", 2),
]

# Placement
PLACEMENT_ATTEMPTS = 500  # Random tries per ship before giving up
