"""
Integration tests for the Pokedex GraphQL endpoint
"""

import pytest

from pokedex.api.app import create_app
from pokedex.store import PokemonStore

POKEMON_FIELDS = """
    id
    name
    types
    resistant
"""


@pytest.mark.integration
@pytest.mark.asyncio
async def test_list_and_fetch_pokemon(client, execute_graphql):
    result = await execute_graphql(
        client,
        """
        query Catalog {
            pokemons { id name }
            pokemonById(id: 1) {
                name
                classification
                weight { minimum maximum }
                fleeRate
                evolutionRequirements { amount name }
                evolutions { id name }
                maxCP
                maxHP
                attacks { fast { name type damage category } special { name } }
            }
            pokemonByName(name: "Pikachu") { id }
        }
        """,
    )

    assert "errors" not in result
    data = result["data"]
    assert len(data["pokemons"]) == 12
    assert data["pokemonByName"] is None

    bulbasaur = data["pokemonById"]
    assert bulbasaur["classification"] == "Seed Pokémon"
    assert bulbasaur["weight"] == {"minimum": "6.04kg", "maximum": "7.76kg"}
    assert bulbasaur["fleeRate"] == 0.1
    assert bulbasaur["evolutionRequirements"] == {"amount": 25, "name": "Bulbasaur candies"}
    assert bulbasaur["maxCP"] == 951
    assert bulbasaur["maxHP"] == 1071
    assert bulbasaur["attacks"]["fast"][0] == {
        "name": "Tackle",
        "type": "Normal",
        "damage": 12,
        "category": "FAST",
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_search_queries(client, execute_graphql):
    result = await execute_graphql(
        client,
        """
        query Search($height: Float!) {
            pokemonByMaxHeight(maxHeight: $height) { name }
            pokemonsByType(name: "Fire") { name }
            pokemonsByAttack(name: "Bug Bite") { id }
            types
        }
        """,
        {"height": 1.0},
    )

    data = result["data"]
    assert data["pokemonByMaxHeight"] == {"name": "Ivysaur"}
    assert [p["name"] for p in data["pokemonsByType"]] == ["Charmander", "Charmeleon", "Charizard"]
    assert [p["id"] for p in data["pokemonsByAttack"]] == [10, 11, 12]
    assert "Fire" in data["types"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_get_delete_round_trip(client, execute_graphql):
    create = await execute_graphql(
        client,
        f"""
        mutation Create($input: CreatePokemonInput!) {{
            createPokemon(input: $input) {{ {POKEMON_FIELDS} classification attacks {{ fast {{ name }} }} }}
        }}
        """,
        {"input": {"name": "Mew", "types": ["Psychic"], "resistant": ["Fighting", "Psychic"]}},
    )
    created = create["data"]["createPokemon"]
    assert created == {
        "id": 13,
        "name": "Mew",
        "types": ["Psychic"],
        "resistant": ["Fighting", "Psychic"],
        "classification": None,
        "attacks": None,
    }

    fetched = await execute_graphql(
        client, f"{{ pokemonById(id: 13) {{ {POKEMON_FIELDS} }} }}"
    )
    assert fetched["data"]["pokemonById"]["name"] == "Mew"

    listing = await execute_graphql(client, "{ pokemons { id } }")
    assert len(listing["data"]["pokemons"]) == 13

    deleted = await execute_graphql(client, "mutation { deletePokemon(id: 13) { id } }")
    assert len(deleted["data"]["deletePokemon"]) == 12

    gone = await execute_graphql(client, "{ pokemonById(id: 13) { id } }")
    assert gone["data"]["pokemonById"] is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_rename_pokemon(client, execute_graphql):
    renamed = await execute_graphql(
        client, 'mutation { renamePokemon(id: 4, name: "Charmy") { id name } }'
    )
    assert renamed["data"]["renamePokemon"] == {"id": 4, "name": "Charmy"}

    missing = await execute_graphql(
        client, 'mutation { renamePokemon(id: 404, name: "Ghost") { id name } }'
    )
    assert "errors" not in missing
    assert missing["data"]["renamePokemon"] is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_type_mutations(client, execute_graphql):
    added = await execute_graphql(client, 'mutation { addType(name: "Shadow") }')
    assert "Shadow" in added["data"]["addType"]

    updated = await execute_graphql(
        client, 'mutation { updateType(name: "Shadow", change: "Light") }'
    )
    assert "Light" in updated["data"]["updateType"]
    assert "Shadow" not in updated["data"]["updateType"]

    deleted = await execute_graphql(client, 'mutation { deleteType(name: "Light") }')
    assert "Light" not in deleted["data"]["deleteType"]

    listing = await execute_graphql(client, "{ types }")
    assert listing["data"]["types"] == deleted["data"]["deleteType"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_attack_mutations(client, execute_graphql):
    added = await execute_graphql(
        client,
        """
        mutation {
            addAttack(input: {category: FAST, name: "Slap", type: "Normal", damage: 10}) {
                name type damage
            }
        }
        """,
    )
    assert {"name": "Slap", "type": "Normal", "damage": 10} in added["data"]["addAttack"]

    fast = await execute_graphql(client, "{ attacks(category: FAST) { name category } }")
    assert {"name": "Slap", "category": "FAST"} in fast["data"]["attacks"]

    updated = await execute_graphql(
        client,
        """
        mutation {
            updateAttack(category: FAST, name: "Slap", input: {type: "Fighting", damage: 20}) {
                name type damage
            }
        }
        """,
    )
    slaps = [a for a in updated["data"]["updateAttack"] if a["name"] == "Slap"]
    assert slaps == [{"name": "Slap", "type": "Fighting", "damage": 20}]

    deleted = await execute_graphql(
        client, 'mutation { deleteAttack(category: FAST, name: "Slap") { name } }'
    )
    assert "Slap" not in [a["name"] for a in deleted["data"]["deleteAttack"]]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_attacks_without_category_returns_both_buckets(client, execute_graphql):
    result = await execute_graphql(
        client,
        """
        {
            attacks { category }
            attackCatalog { fast { name } special { name } }
        }
        """,
    )
    categories = [a["category"] for a in result["data"]["attacks"]]
    assert categories.count("FAST") == 11
    assert categories.count("SPECIAL") == 21
    assert len(result["data"]["attackCatalog"]["fast"]) == 11


@pytest.mark.integration
@pytest.mark.asyncio
async def test_unknown_attack_category_is_rejected(client, store, execute_graphql):
    before = store.list_attacks("fast")

    result = await execute_graphql(
        client, 'mutation { deleteAttack(category: CHARGED, name: "Tackle") { name } }'
    )

    assert result["data"] is None
    assert result["errors"]
    assert store.list_attacks("fast") == before


@pytest.mark.integration
@pytest.mark.asyncio
async def test_validation_errors(client, execute_graphql):
    missing_arg = await execute_graphql(client, "{ pokemonById { id } }")
    assert missing_arg["data"] is None
    assert missing_arg["errors"]

    wrong_type = await execute_graphql(client, '{ pokemonById(id: "one") { id } }')
    assert wrong_type["data"] is None
    assert wrong_type["errors"]

    malformed = await execute_graphql(client, "{ pokemons { id ")
    assert malformed["data"] is None
    assert malformed["errors"]


class FaultyStore(PokemonStore):
    def list_types(self) -> list[str]:
        raise RuntimeError("boom")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_resolver_fault_is_reported_not_raised(seed, execute_graphql):
    from httpx import ASGITransport, AsyncClient

    store = FaultyStore(pokemon=seed.pokemon, attacks=seed.attacks, types=seed.types)
    app = create_app(store=store)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        result = await execute_graphql(client, "{ types pokemons { id } }")
        assert result["data"] is None
        assert "boom" in result["errors"][0]["message"]

        # The server keeps serving after the fault
        health = await client.get("/health")
        assert health.status_code == 200


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health_and_request_id(client, execute_graphql):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["X-Request-ID"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_apps_do_not_share_stores(client, execute_graphql):
    await execute_graphql(client, 'mutation { addType(name: "Shadow") }')

    from httpx import ASGITransport, AsyncClient

    other_app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=other_app), base_url="http://test"
    ) as other:
        result = await execute_graphql(other, "{ types }")

    assert "Shadow" not in result["data"]["types"]
