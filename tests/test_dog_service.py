from datetime import date, timedelta

import pytest

from models.dog_enums import DogGender
from tools.dogs import DogNotFound, DogService, DogValidationError, calculate_age


@pytest.mark.parametrize(
    "born, today, expected",
    [
        (date(2020, 6, 15), date(2026, 6, 14), 5),
        (date(2020, 6, 15), date(2026, 6, 15), 6),
        (date(2020, 6, 15), date(2026, 12, 1), 6),
        (date(2026, 1, 1), date(2026, 3, 1), 0),
        (date(2027, 1, 1), date(2026, 3, 1), 0),
    ],
)
def test_calculate_age(born, today, expected):
    assert calculate_age(born, today=today) == expected


def test_add_dog_from_age(session):
    dog = DogService(session).add_dog("a1", name=" Rex ", breed="Beagle", gender="Male", age=3, weight=12.5)

    assert dog.id
    assert dog.name == "Rex"
    assert dog.gender == "male"
    assert dog.age == 3
    assert dog.born is None


def test_add_dog_from_birth_date_computes_age(session):
    born = date(date.today().year - 4, 1, 1)
    dog = DogService(session).add_dog("a1", name="Bella", breed="Poodle", gender="female", born=born, age=99)

    assert dog.age == 4
    assert dog.born == born


@pytest.mark.parametrize(
    "kwargs, field, message",
    [
        ({"name": "  "}, "name", "Dog name is required"),
        ({"breed": ""}, "breed", "Dog breed is required"),
        ({"gender": "unknown"}, "gender", None),
        ({"weight": 0}, "weight", "Weight must be greater than 0"),
        ({"weight": 250}, "weight", "Weight must be less than 200kg"),
        ({"age": -1}, "age", "Age cannot be negative"),
        ({"age": None}, "born", "Birth date or age is required"),
        ({"born": date.today() + timedelta(days=1)}, "born", "Birth date cannot be in the future"),
    ],
)
def test_add_dog_validation(session, kwargs, field, message):
    params = {"name": "Rex", "breed": "Beagle", "gender": "male", "age": 3}
    params.update(kwargs)

    with pytest.raises(DogValidationError) as err:
        DogService(session).add_dog("a1", **params)

    assert err.value.field == field
    if message:
        assert err.value.message == message


def test_dogs_are_listed_in_registration_order_per_account(session):
    service = DogService(session)
    first = service.add_dog("a1", name="Rex", breed="Beagle", gender="male", age=3)
    second = service.add_dog("a1", name="Bella", breed="Poodle", gender="female", age=1)
    service.add_dog("a2", name="Other", breed="Pug", gender="male", age=2)

    assert [d.id for d in service.list_dogs("a1")] == [first.id, second.id]
    with pytest.raises(DogNotFound):
        service.get_dog("a2", first.id)


def test_update_dog_changes_only_given_fields(session):
    service = DogService(session)
    dog = service.add_dog("a1", name="Rex", breed="Beagle", gender="male", age=3, weight=12)

    updated = service.update_dog("a1", dog.id, weight=14.2, born=date(2020, 1, 1))

    assert updated.name == "Rex"
    assert updated.weight == 14.2
    assert updated.age == calculate_age(date(2020, 1, 1))


def test_update_dog_rejects_unknown_fields(session):
    service = DogService(session)
    dog = service.add_dog("a1", name="Rex", breed="Beagle", gender="male", age=3)

    with pytest.raises(DogValidationError):
        service.update_dog("a1", dog.id, created_at=None)


def test_remove_and_clear(session):
    service = DogService(session)
    dog = service.add_dog("a1", name="Rex", breed="Beagle", gender="male", age=3)
    service.add_dog("a1", name="Bella", breed="Poodle", gender="female", age=1)

    service.remove_dog("a1", dog.id)
    with pytest.raises(DogNotFound):
        service.remove_dog("a1", dog.id)

    assert service.clear_all("a1") == 1
    assert service.list_dogs("a1") == []


def test_gender_enum_from_parsed_form_is_accepted(session):
    service = DogService(session)
    dog = service.add_dog("a1", name="Bella", breed="Poodle", gender=DogGender.FEMALE, age=2)
    assert dog.gender == "female"

    updated = service.update_dog("a1", dog.id, gender=DogGender.MALE)
    assert updated.gender == "male"


def test_editing_age_alone_clears_birth_date(session):
    service = DogService(session)
    dog = service.add_dog("a1", name="Rex", breed="Beagle", gender="male", born=date(2020, 1, 1))

    updated = service.update_dog("a1", dog.id, age=7)

    assert updated.age == 7
    assert updated.born is None
