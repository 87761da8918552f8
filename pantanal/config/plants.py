"""Plant lifecycle configuration constants."""

PLANT_MAX_AGE = 100  # Plants die once their age exceeds this
PLANT_GROWTH_INTERVAL = 5  # Steps between growth (one bite of damage healed)
PLANT_MAX_BITES = 10  # A plant dies once its bite damage exceeds this

# Reproduction
PLANT_SEED_PROBABILITY = 0.05  # Chance to seed on any step
PLANT_MAX_SEEDS = 3  # Seedlings per seeding event: uniform(1..PLANT_MAX_SEEDS)
MAX_PLANT_COUNT = 3000  # Plants stop seeding once the census reaches this

# Colors (rendering only)
PLANT_COLOR = "#228b22"  # Plants seeded with the initial population
PLANT_REGROWTH_COLOR = "#008000"  # Plants sprouted from seeds or decomposition
