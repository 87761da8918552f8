import dataclasses

import orjson
import pytest

from pantanal.config.plants import PLANT_REGROWTH_COLOR
from pantanal.config.species import Species, get_policy
from pantanal.exceptions import FieldError
from pantanal.simulation import FieldSnapshot


def test_snapshot_copies_cells(make_field, place_animal, place_plant):
    field = make_field(2, 3)
    deer = place_animal(field, Species.DEER, 0, 1)
    deer.organism_id = 4
    place_plant(field, 1, 2)

    snapshot = FieldSnapshot.from_field(field, step=9)

    assert snapshot.step == 9
    assert (snapshot.depth, snapshot.width) == (2, 3)
    assert snapshot.cell(0, 0) is None
    deer_cell = snapshot.cell(0, 1)
    assert deer_cell.species is Species.DEER
    assert deer_cell.alive
    assert deer_cell.color == get_policy(Species.DEER).color
    assert deer_cell.organism_id == 4
    assert snapshot.cell(1, 2).color == PLANT_REGROWTH_COLOR
    assert snapshot.population_counts() == {Species.DEER: 1, Species.PLANT: 1}


def test_snapshot_is_detached_from_the_field(make_field, place_animal):
    field = make_field(1, 2)
    place_animal(field, Species.SQUIRREL, 0, 0)
    snapshot = FieldSnapshot.from_field(field, step=0)

    field.clear()

    assert snapshot.cell(0, 0).species is Species.SQUIRREL
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.step = 3


def test_cell_outside_snapshot_raises(make_field):
    snapshot = FieldSnapshot.from_field(make_field(2, 2), step=0)

    with pytest.raises(FieldError):
        snapshot.cell(2, 0)
    with pytest.raises(FieldError):
        snapshot.cell(0, -1)


def test_snapshot_serializes_to_json(make_field, place_animal, place_plant):
    field = make_field(1, 3)
    place_animal(field, Species.JAGUAR, 0, 0)
    place_plant(field, 0, 2)

    payload = orjson.loads(FieldSnapshot.from_field(field, step=2).to_json())

    assert payload["step"] == 2
    assert payload["depth"] == 1
    assert payload["width"] == 3
    assert payload["population"] == {"Jaguar": 1, "Plant": 1}
    row = payload["cells"][0]
    assert row[0]["species"] == "Jaguar"
    assert row[1] is None
    assert row[2] == {
        "species": "Plant",
        "alive": True,
        "color": PLANT_REGROWTH_COLOR,
        "id": None,
    }
