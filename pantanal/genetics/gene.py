"""Fixed-width gene codec.

A gene is a string of exactly 14 decimal digits. Each trait occupies a fixed
slice of the string, so crossover and mutation work digit-wise without any
parsing ambiguity, and a gene is trivially serializable.

    offset  width  trait                  scale
    0       2      breeding age           integer
    2       3      max age                integer
    5       2      breeding probability   /100
    7       2      max litter size        integer
    9       2      disease probability    /100
    11      3      metabolism             /100
"""

import random as pyrandom
from dataclasses import dataclass
from typing import Dict, Tuple

from pantanal.exceptions import GeneticsError
from pantanal.util.rng import require_rng_param

GENE_LENGTH = 14

# Crossover takes digits [0, CROSSOVER_POINT) from the mother, the rest from the father
CROSSOVER_POINT = 7

# Per-digit mutation chance; a mutated digit moves one step up or down
DIGIT_MUTATION_CHANCE = 0.2


@dataclass(frozen=True)
class GeneField:
    """Declarative layout of one trait inside the gene string.

    Attributes:
        name: Attribute name on GeneTraits
        offset: Index of the first digit
        width: Number of digits
        min_val: Lowest value sampled for founders (raw digits, before scaling)
        max_val: Highest value sampled for founders (raw digits, before scaling)
        divisor: Raw value is divided by this when parsed (1 = integer trait)
    """

    name: str
    offset: int
    width: int
    min_val: int
    max_val: int
    divisor: int = 1

    @property
    def end(self) -> int:
        return self.offset + self.width

    def random_digits(self, rng: pyrandom.Random) -> str:
        return str(rng.randint(self.min_val, self.max_val)).zfill(self.width)

    def decode(self, gene: str):
        raw = int(gene[self.offset : self.end])
        if self.divisor == 1:
            return raw
        return raw / self.divisor

    def domain(self) -> Tuple[float, float]:
        """Sampling domain in parsed (scaled) units."""
        if self.divisor == 1:
            return self.min_val, self.max_val
        return self.min_val / self.divisor, self.max_val / self.divisor


GENE_FIELDS: Tuple[GeneField, ...] = (
    GeneField("breeding_age", offset=0, width=2, min_val=12, max_val=90),
    GeneField("max_age", offset=2, width=3, min_val=10, max_val=120),
    GeneField("breeding_probability", offset=5, width=2, min_val=0, max_val=50, divisor=100),
    GeneField("max_litter_size", offset=7, width=2, min_val=1, max_val=12),
    GeneField("disease_probability", offset=9, width=2, min_val=0, max_val=50, divisor=100),
    GeneField("metabolism", offset=11, width=3, min_val=25, max_val=100, divisor=100),
)


@dataclass(frozen=True)
class GeneTraits:
    """Life-cycle constants decoded from one organism's gene."""

    breeding_age: int
    max_age: int
    breeding_probability: float
    max_litter_size: int
    disease_probability: float
    metabolism: float

    def to_dict(self) -> Dict[str, float]:
        return {spec.name: getattr(self, spec.name) for spec in GENE_FIELDS}


def is_valid_gene(gene: object) -> bool:
    return isinstance(gene, str) and len(gene) == GENE_LENGTH and gene.isascii() and gene.isdigit()


def _require_gene(gene: object, context: str) -> str:
    if not is_valid_gene(gene):
        raise GeneticsError(f"{context}: expected {GENE_LENGTH} decimal digits, got {gene!r}")
    return gene


def encode_random(rng: pyrandom.Random) -> str:
    """Sample every trait independently within its domain and encode the result."""
    rng = require_rng_param(rng, "encode_random")
    return "".join(spec.random_digits(rng) for spec in GENE_FIELDS)


def parse(gene: str) -> GeneTraits:
    """Decode a gene string into its traits.

    Raises:
        GeneticsError: If the gene is not exactly 14 decimal digits
    """
    _require_gene(gene, "parse")
    return GeneTraits(**{spec.name: spec.decode(gene) for spec in GENE_FIELDS})


def crossover(mother_gene: str, father_gene: str) -> str:
    """Combine two genes: the mother's first 7 digits then the father's last 7.

    The split is fixed and deliberately asymmetric; swapping the arguments
    gives a different child.
    """
    _require_gene(mother_gene, "crossover(mother)")
    _require_gene(father_gene, "crossover(father)")
    return mother_gene[:CROSSOVER_POINT] + father_gene[CROSSOVER_POINT:]


def mutate(gene: str, rng: pyrandom.Random) -> str:
    """Nudge each digit by +/-1 with probability 0.2, clamped to 0..9."""
    _require_gene(gene, "mutate")
    rng = require_rng_param(rng, "mutate")
    digits = []
    for char in gene:
        digit = int(char)
        if rng.random() < DIGIT_MUTATION_CHANCE:
            digit = min(digit + 1, 9) if rng.random() < 0.5 else max(digit - 1, 0)
        digits.append(str(digit))
    return "".join(digits)
