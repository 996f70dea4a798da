#!/usr/bin/env python3
"""
Tests for the character factory and the characters it creates.
"""

import dataclasses

import pytest

from creational_patterns.characters import CharacterFactory, Mage, Warrior
from creational_patterns.core import (
    MageType,
    Role,
    UnsupportedWeaponError,
    WarriorType,
    Weapon,
)


@pytest.fixture
def factory(rng) -> CharacterFactory:
    return CharacterFactory(rng)


@pytest.mark.parametrize("weapon", ["Axe", "Sword", "Hammer", Weapon.HAMMER])
def test_warrior_weapons_create_a_sword_warrior(factory, weapon):
    character = factory.create_new_character("John", weapon)

    assert isinstance(character, Warrior)
    assert character.role is Role.WARRIOR
    assert character.level == 1
    assert character.weapon == "Sword"
    assert character.subtype in {"Barbarian", "Paladin"}


@pytest.mark.parametrize("weapon", ["Scepter", "Hands"])
def test_mage_weapons_create_a_scepter_mage(factory, weapon):
    character = factory.create_new_character("Alicia", weapon)

    assert isinstance(character, Mage)
    assert character.role is Role.MAGE
    assert character.level == 1
    assert character.uses_scepter is True
    assert character.subtype in {"Fire", "Ice"}


@pytest.mark.parametrize("weapon", ["Unknown", "hammer", "", "Bow"])
def test_unsupported_weapon_fails(factory, weapon):
    with pytest.raises(UnsupportedWeaponError) as exc_info:
        factory.create_new_character("Nobody", weapon)

    assert exc_info.value.weapon == weapon
    assert "not available for standard characters" in str(exc_info.value)


def test_hands_are_in_both_weapon_sets():
    assert "Hands" in CharacterFactory.MAGE_WEAPONS
    assert "Hands" in CharacterFactory.WARRIOR_WEAPONS


def test_both_subtypes_are_drawn(factory):
    mages = {factory.create_new_character("M", "Scepter").subtype for _ in range(64)}
    warriors = {factory.create_new_character("W", "Axe").subtype for _ in range(64)}

    assert mages == {MageType.FIRE, MageType.ICE}
    assert warriors == {WarriorType.BARBARIAN, WarriorType.PALADIN}


def test_default_factory_uses_module_random():
    character = CharacterFactory().create_new_character("John", "Hammer")
    assert character.subtype in set(WarriorType)


def test_identifier():
    mage = Mage("Alicia", 1, MageType.ICE, True)
    warrior = Warrior("John", 3, WarriorType.PALADIN, Weapon.SWORD)

    assert mage.identifier == "Alicia [Lvl 1 Ice Mage]"
    assert warrior.identifier == "John [Lvl 3 Paladin Warrior]"


def test_characters_are_immutable():
    warrior = Warrior("John", 1, WarriorType.BARBARIAN, Weapon.SWORD)
    with pytest.raises(dataclasses.FrozenInstanceError):
        warrior.weapon = Weapon.AXE


@pytest.mark.parametrize(
    "subtype, uses_scepter, expected",
    [
        (MageType.FIRE, True, "Alicia [Lvl 1 Fire Mage] casted a Fireball with their scepter!"),
        (MageType.ICE, True, "Alicia [Lvl 1 Ice Mage] casted an Iceball with their scepter!"),
        (MageType.FIRE, False, "Alicia [Lvl 1 Fire Mage] casted a Fireball using their magic hands!"),
        (MageType.ICE, False, "Alicia [Lvl 1 Ice Mage] casted an Iceball using their magic hands!"),
    ],
)
def test_mage_ability(capsys, subtype, uses_scepter, expected):
    mage = Mage("Alicia", 1, subtype, uses_scepter)

    assert mage.use_ability() == expected
    assert capsys.readouterr().out == expected + "\n"


def test_warrior_ability(capsys):
    warrior = Warrior("John", 1, WarriorType.BARBARIAN, Weapon.SWORD)

    line = warrior.use_ability()

    assert line == "John [Lvl 1 Barbarian Warrior] swings their Sword"
    assert capsys.readouterr().out == line + "\n"


def test_ability_does_not_change_character():
    mage = Mage("Alicia", 1, MageType.FIRE, True)
    before = dataclasses.asdict(mage)
    mage.use_ability()
    assert dataclasses.asdict(mage) == before
