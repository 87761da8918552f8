"""Validation helpers for genes and decoded traits.

These are debugging and safety checks, not hot-path logic. They return lists
of human-readable issues; an empty list means valid.
"""

from typing import List

from pantanal.genetics.gene import GENE_FIELDS, GENE_LENGTH, GeneTraits


def validate_gene(gene: object, *, path: str = "gene") -> List[str]:
    """Check the 14-digit layout of a gene string."""
    if not isinstance(gene, str):
        return [f"{path}: expected str, got {type(gene).__name__}"]

    issues: List[str] = []
    if len(gene) != GENE_LENGTH:
        issues.append(f"{path}: length {len(gene)} != {GENE_LENGTH}")
    for index, char in enumerate(gene):
        if char not in "0123456789":
            issues.append(f"{path}[{index}]: {char!r} is not a decimal digit")
    return issues


def validate_traits(traits: GeneTraits, *, path: str = "traits") -> List[str]:
    """Report traits that fall outside the founder sampling domain.

    Mutation can legitimately push descendants outside these ranges, so this
    is meant for founders and for debugging, not as an invariant on every
    organism.
    """
    issues: List[str] = []
    for spec in GENE_FIELDS:
        value = getattr(traits, spec.name)
        low, high = spec.domain()
        if value < low or value > high:
            issues.append(f"{path}.{spec.name}: {value} not in [{low}, {high}]")
    return issues
