"""Starter catalog inserted when the server starts on an empty database."""

from tcg_backend.domain.battle_rules import PokemonType

SPRITE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{}.png"

# (pokedex_number, name, type, hp, attack)
STARTER_CARDS = [
    (1, "Bulbasaur", PokemonType.Grass, 45, 49),
    (4, "Charmander", PokemonType.Fire, 39, 52),
    (7, "Squirtle", PokemonType.Water, 44, 48),
    (12, "Butterfree", PokemonType.Bug, 60, 45),
    (16, "Pidgey", PokemonType.Flying, 40, 45),
    (19, "Rattata", PokemonType.Normal, 30, 56),
    (23, "Ekans", PokemonType.Poison, 35, 60),
    (25, "Pikachu", PokemonType.Electric, 35, 55),
    (27, "Sandshrew", PokemonType.Ground, 50, 75),
    (35, "Clefairy", PokemonType.Fairy, 70, 45),
    (56, "Mankey", PokemonType.Fighting, 40, 80),
    (63, "Abra", PokemonType.Psychic, 25, 20),
    (74, "Geodude", PokemonType.Rock, 40, 80),
    (81, "Magnemite", PokemonType.Steel, 25, 35),
    (92, "Gastly", PokemonType.Ghost, 30, 35),
    (124, "Jynx", PokemonType.Ice, 65, 50),
    (130, "Gyarados", PokemonType.Water, 95, 125),
    (143, "Snorlax", PokemonType.Normal, 160, 110),
    (147, "Dratini", PokemonType.Dragon, 41, 64),
    (197, "Umbreon", PokemonType.Dark, 95, 65),
]


def generate_starter_card_data() -> list[dict]:
    """Return the starter cards as dicts compatible with the Card table columns."""
    return [
        {
            "pokedex_number": pokedex_number,
            "name": name,
            "type": card_type,
            "hp": hp,
            "attack": attack,
            "img_url": SPRITE_URL.format(pokedex_number),
        }
        for pokedex_number, name, card_type, hp, attack in STARTER_CARDS
    ]
