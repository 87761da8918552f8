"""Genetics for the simulation: a fixed-width digit gene and its operators.

- encode_random: sample a founder gene
- parse: decode traits from a gene
- crossover: fixed split, mother's first half + father's second half
- mutate: per-digit +/-1 nudges
"""

from pantanal.genetics.gene import (
    CROSSOVER_POINT,
    GENE_FIELDS,
    GENE_LENGTH,
    GeneField,
    GeneTraits,
    crossover,
    encode_random,
    is_valid_gene,
    mutate,
    parse,
)
from pantanal.genetics.validation import validate_gene, validate_traits

__all__ = [
    "CROSSOVER_POINT",
    "GENE_FIELDS",
    "GENE_LENGTH",
    "GeneField",
    "GeneTraits",
    "crossover",
    "encode_random",
    "is_valid_gene",
    "mutate",
    "parse",
    "validate_gene",
    "validate_traits",
]
