from conftest import HEALTHY_GENE, SUSCEPTIBLE_GENE, ScriptedRandom

from pantanal.config.species import Species, get_policy
from pantanal.entities import DeathCause, StepContext


def test_disease_kills_at_species_duration_limit(make_field, place_animal):
    field = make_field(1, 2, ScriptedRandom(0.99))
    squirrel = place_animal(field, Species.SQUIRREL, 0, 0)
    squirrel.infected = True
    squirrel.disease_duration = get_policy(Species.SQUIRREL).disease_duration_limit - 1

    squirrel.act(StepContext(step=1))

    assert squirrel.death_cause is DeathCause.DISEASE
    assert squirrel.disease_duration == 10


def test_infected_animal_survives_below_limit(make_field, place_animal):
    field = make_field(1, 2, ScriptedRandom(0.99))
    deer = place_animal(field, Species.DEER, 0, 0)
    deer.infected = True
    deer.disease_duration = 3

    deer.act(StepContext(step=1))

    assert deer.is_alive()
    assert deer.disease_duration == 4


def test_disease_spreads_to_same_species_neighbors_only(make_field, place_animal):
    field = make_field(2, 2, ScriptedRandom(0.3))
    carrier = place_animal(field, Species.SQUIRREL, 0, 0, gene=HEALTHY_GENE)
    carrier.infected = True
    neighbor = place_animal(field, Species.SQUIRREL, 1, 1, gene=SUSCEPTIBLE_GENE)
    deer = place_animal(field, Species.DEER, 0, 1, gene=SUSCEPTIBLE_GENE)

    carrier.act(StepContext(step=1))

    assert neighbor.infected
    assert neighbor.disease_duration == 0
    assert not deer.infected
    assert carrier.disease_duration == 1


def test_resistant_neighbor_is_not_infected(make_field, place_animal):
    field = make_field(2, 2, ScriptedRandom(0.3))
    carrier = place_animal(field, Species.SQUIRREL, 0, 0)
    carrier.infected = True
    neighbor = place_animal(field, Species.SQUIRREL, 1, 1, gene=HEALTHY_GENE)

    carrier.act(StepContext(step=1))

    assert not neighbor.infected


def test_spontaneous_infection_uses_own_probability(make_field, place_animal):
    field = make_field(1, 2, ScriptedRandom(0.5))
    deer = place_animal(field, Species.DEER, 0, 0, gene=SUSCEPTIBLE_GENE)

    deer.act(StepContext(step=1))

    assert deer.infected
    assert deer.disease_duration == 0


def test_infected_animal_is_not_reinfected(make_field, place_animal):
    field = make_field(1, 1, ScriptedRandom(0.0))
    deer = place_animal(field, Species.DEER, 0, 0, gene=SUSCEPTIBLE_GENE)
    deer.infected = True
    deer.disease_duration = 5

    assert deer.try_gain_disease(field.rng) is False
    assert deer.disease_duration == 5
