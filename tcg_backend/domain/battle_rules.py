"""Card-battle rules that are independent from HTTP and DB.

Rule of thumb:
- OK: type lookups, multipliers, damage arithmetic.
- Not OK: touching DB sessions, FastAPI, datetime.now(), etc.
"""

import math
from enum import Enum


class PokemonType(str, Enum):
    Normal = "Normal"
    Fire = "Fire"
    Water = "Water"
    Electric = "Electric"
    Grass = "Grass"
    Ice = "Ice"
    Fighting = "Fighting"
    Poison = "Poison"
    Ground = "Ground"
    Flying = "Flying"
    Psychic = "Psychic"
    Bug = "Bug"
    Rock = "Rock"
    Ghost = "Ghost"
    Dragon = "Dragon"
    Dark = "Dark"
    Steel = "Steel"
    Fairy = "Fairy"


NORMAL_MULTIPLIER = 1.0
SUPER_EFFECTIVE_MULTIPLIER = 2.0
MINIMUM_DAMAGE = 1

# defender type -> the single attacker type it is weak to
WEAKNESS_TABLE = {
    PokemonType.Normal: PokemonType.Fighting,
    PokemonType.Fire: PokemonType.Water,
    PokemonType.Water: PokemonType.Electric,
    PokemonType.Electric: PokemonType.Ground,
    PokemonType.Grass: PokemonType.Fire,
    PokemonType.Ice: PokemonType.Fire,
    PokemonType.Fighting: PokemonType.Psychic,
    PokemonType.Poison: PokemonType.Psychic,
    PokemonType.Ground: PokemonType.Water,
    PokemonType.Flying: PokemonType.Electric,
    PokemonType.Psychic: PokemonType.Dark,
    PokemonType.Bug: PokemonType.Fire,
    PokemonType.Rock: PokemonType.Water,
    PokemonType.Ghost: PokemonType.Dark,
    PokemonType.Dragon: PokemonType.Ice,
    PokemonType.Dark: PokemonType.Fighting,
    PokemonType.Steel: PokemonType.Fire,
    PokemonType.Fairy: PokemonType.Poison,
}


def get_weakness(defender_type: PokemonType) -> PokemonType | None:
    """Return the type the defender is weak to.

    Args:
        defender_type (PokemonType): Type of the defending card

    Returns:
        PokemonType | None: Attacker type that deals bonus damage, None if the type has no weakness
    """
    return WEAKNESS_TABLE.get(defender_type)


def get_damage_multiplier(attacker_type: PokemonType, defender_type: PokemonType) -> float:
    """Return 2.0 when the attacker hits the defender's weakness, 1.0 otherwise."""
    if get_weakness(defender_type) == attacker_type:
        return SUPER_EFFECTIVE_MULTIPLIER
    return NORMAL_MULTIPLIER


def calculate_damage(attack: int, attacker_type: PokemonType, defender_type: PokemonType) -> int:
    """Calculate the damage dealt by one attack.

    Args:
        attack (int): Attack stat of the attacking card
        attacker_type (PokemonType): Type of the attacking card
        defender_type (PokemonType): Type of the defending card

    Returns:
        int: floor(attack * multiplier), never lower than 1
    """
    multiplier = get_damage_multiplier(attacker_type, defender_type)
    damage = math.floor(attack * multiplier)
    return max(MINIMUM_DAMAGE, damage)
