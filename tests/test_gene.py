import random

import pytest
from conftest import ScriptedRandom

from pantanal.exceptions import GeneticsError
from pantanal.genetics import (
    GENE_FIELDS,
    GENE_LENGTH,
    crossover,
    encode_random,
    is_valid_gene,
    mutate,
    parse,
    validate_traits,
)


def test_parse_reads_fixed_offsets():
    traits = parse("12" "085" "30" "06" "15" "075")

    assert traits.breeding_age == 12
    assert traits.max_age == 85
    assert traits.breeding_probability == pytest.approx(0.30)
    assert traits.max_litter_size == 6
    assert traits.disease_probability == pytest.approx(0.15)
    assert traits.metabolism == pytest.approx(0.75)


def test_gene_fields_tile_the_gene_without_gaps():
    offset = 0
    for spec in GENE_FIELDS:
        assert spec.offset == offset
        offset = spec.end
    assert offset == GENE_LENGTH


@pytest.mark.parametrize("seed", range(50))
def test_random_genes_parse_within_sampling_domains(seed):
    gene = encode_random(random.Random(seed))

    assert is_valid_gene(gene)
    assert validate_traits(parse(gene)) == []


def test_random_genes_cover_domain_extremes():
    rng = random.Random(3)
    ages = {parse(encode_random(rng)).breeding_age for _ in range(3000)}
    assert min(ages) == 12
    assert max(ages) == 90


def test_crossover_takes_first_half_from_mother_and_second_from_father():
    mother = "11111112222222"
    father = "33333334444444"

    child = crossover(mother, father)

    assert len(child) == GENE_LENGTH
    assert child[:7] == mother[:7]
    assert child[7:] == father[7:]
    assert child == "11111114444444"


def test_crossover_is_not_symmetric():
    mother = "11111112222222"
    father = "33333334444444"
    assert crossover(mother, father) != crossover(father, mother)


@pytest.mark.parametrize("seed", range(20))
def test_crossover_of_random_genes(seed):
    rng = random.Random(seed)
    mother, father = encode_random(rng), encode_random(rng)
    child = crossover(mother, father)
    assert child[:7] == mother[:7] and child[7:] == father[7:]
    parse(child)


def test_mutate_keeps_genes_valid_under_repetition():
    rng = random.Random(11)
    gene = encode_random(rng)
    for _ in range(500):
        gene = mutate(gene, rng)
        assert len(gene) == GENE_LENGTH
        assert all(char in "0123456789" for char in gene)
    parse(gene)


def test_mutate_moves_each_digit_by_at_most_one():
    rng = random.Random(5)
    gene = "09182736450918"
    for _ in range(200):
        mutated = mutate(gene, rng)
        assert all(abs(int(a) - int(b)) <= 1 for a, b in zip(gene, mutated))


def test_mutate_without_hits_is_identity():
    # Every roll lands above the 0.2 mutation chance.
    assert mutate("09182736450918", ScriptedRandom(0.5)) == "09182736450918"


def test_mutate_up_clamps_at_nine():
    # Roll 0.1 mutates, second roll 0.1 picks "up".
    assert mutate("09182736450918", ScriptedRandom(0.1)) == "19293847561929"


def test_mutate_down_clamps_at_zero():
    # Roll 0.1 mutates, second roll 0.9 picks "down".
    assert mutate("09182736450918", ScriptedRandom(0.1, 0.9)) == "08071625340807"


@pytest.mark.parametrize(
    "bad",
    ["", "1234567890123", "123456789012345", "12345678901a34", "１２３４５６７８９０１２３４", None, 12345678901234],
)
def test_malformed_genes_are_rejected(bad):
    assert not is_valid_gene(bad)
    with pytest.raises(GeneticsError):
        parse(bad)
    with pytest.raises(GeneticsError):
        mutate(bad, random.Random(1))
    with pytest.raises(GeneticsError):
        crossover(bad, "12345678901234")
