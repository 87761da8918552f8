import random

from conftest import BREEDER_GENE, HEALTHY_GENE, OTHER_BREEDER_GENE, ScriptedRandom

from pantanal.config.species import Sex, Species
from pantanal.entities import Animal, StepContext
from pantanal.genetics import crossover


def animal_newborns(context):
    return [organism for organism in context.newborns if isinstance(organism, Animal)]


def test_litter_inherits_crossover_of_both_parents(make_field, place_animal):
    field = make_field(3, 3, ScriptedRandom(0.3))
    mother = place_animal(field, Species.CAPYBARA, 1, 1, gene=BREEDER_GENE, sex=Sex.FEMALE)
    father = place_animal(
        field, Species.CAPYBARA, 0, 0, gene=OTHER_BREEDER_GENE, sex=Sex.MALE
    )
    origin = mother.location
    context = StepContext(step=1)

    mother.act(context)

    young = animal_newborns(context)
    assert 1 <= len(young) <= 4
    expected = crossover(mother.gene, father.gene)
    assert expected == "01120500300020"
    for child in young:
        assert child.gene == expected
        assert child.species is Species.CAPYBARA
        assert child.age == 0
        assert child.color == mother.color
        assert child.is_alive()
        assert field.occupant_at(child.location) is child
        assert abs(child.location.row - origin.row) <= 1
        assert abs(child.location.col - origin.col) <= 1


def test_mutated_offspring_stay_within_one_of_crossover(make_field, place_animal):
    births = 0
    for seed in range(30):
        field = make_field(3, 3, random.Random(seed))
        mother = place_animal(
            field, Species.DEER, 1, 1, gene=BREEDER_GENE, sex=Sex.FEMALE
        )
        father = place_animal(field, Species.DEER, 2, 2, gene=OTHER_BREEDER_GENE, sex=Sex.MALE)
        expected = crossover(mother.gene, father.gene)
        context = StepContext(step=1)

        mother.act(context)

        for child in animal_newborns(context):
            births += 1
            assert len(child.gene) == 14
            for got, want in zip(child.gene, expected):
                assert abs(int(got) - int(want)) <= 1
    assert births > 0


def test_births_limited_to_free_cells(make_field, place_animal):
    field = make_field(1, 3, ScriptedRandom(0.0))
    mother = place_animal(field, Species.DEER, 0, 1, gene=BREEDER_GENE, sex=Sex.FEMALE)
    place_animal(field, Species.DEER, 0, 0, gene=OTHER_BREEDER_GENE, sex=Sex.MALE)
    context = StepContext(step=1)

    mother.act(context)

    young = animal_newborns(context)
    assert len(young) == 1
    assert young[0].location.col == 2


def test_no_births_without_a_mate(make_field, place_animal):
    field = make_field(3, 3, ScriptedRandom(0.0))
    mother = place_animal(field, Species.DEER, 1, 1, gene=BREEDER_GENE, sex=Sex.FEMALE)
    context = StepContext(step=1)

    mother.act(context)

    assert animal_newborns(context) == []


def test_no_births_with_same_sex_neighbor(make_field, place_animal):
    field = make_field(3, 3, ScriptedRandom(0.0))
    mother = place_animal(field, Species.DEER, 1, 1, gene=BREEDER_GENE, sex=Sex.FEMALE)
    place_animal(field, Species.DEER, 0, 0, gene=BREEDER_GENE, sex=Sex.FEMALE)
    context = StepContext(step=1)

    mother.act(context)

    assert animal_newborns(context) == []


def test_no_births_with_other_species(make_field, place_animal):
    field = make_field(3, 3, ScriptedRandom(0.0))
    mother = place_animal(field, Species.DEER, 1, 1, gene=BREEDER_GENE, sex=Sex.FEMALE)
    place_animal(field, Species.CAPYBARA, 0, 0, gene=BREEDER_GENE, sex=Sex.MALE)
    context = StepContext(step=1)

    mother.act(context)

    assert animal_newborns(context) == []


def test_animal_born_this_step_can_be_a_mate(make_field, place_animal):
    field = make_field(3, 3, ScriptedRandom(0.0))
    mother = place_animal(field, Species.DEER, 1, 1, gene=BREEDER_GENE, sex=Sex.FEMALE)
    fawn = place_animal(
        field, Species.DEER, 0, 0, gene=OTHER_BREEDER_GENE, sex=Sex.MALE, age=0
    )
    context = StepContext(step=1)
    context.add_newborn(fawn)

    mother.act(context)

    young = [child for child in animal_newborns(context) if child is not fawn]
    assert young
    for child in young:
        assert child.species is Species.DEER
        assert child.age == 0


def test_too_young_to_breed(make_field, place_animal):
    field = make_field(3, 3, ScriptedRandom(0.0))
    mother = place_animal(field, Species.DEER, 1, 1, gene=HEALTHY_GENE, sex=Sex.FEMALE)
    place_animal(field, Species.DEER, 0, 0, gene=HEALTHY_GENE, sex=Sex.MALE)
    context = StepContext(step=1)

    assert not mother.can_breed()
    mother.act(context)

    assert animal_newborns(context) == []
