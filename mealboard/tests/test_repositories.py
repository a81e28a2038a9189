import json

import pytest

from mealboard.domain.Ingredient import Ingredient
from mealboard.domain.errors import AccountExists, AuthFailed, RecipeNotFound, RemoteFailure
from mealboard.infra.Auth_Repository import AuthRepository, hash_password, verify_password
from mealboard.infra.Recipe_Repository import RecipeRepository
from mealboard.infra.State_Repository import StateRepository


@pytest.fixture
def recipe_repo(tmp_path):
    return RecipeRepository(tmp_path / "recipes.json")


@pytest.fixture
def state_repo(tmp_path):
    return StateRepository(tmp_path / "planner_state.json")


@pytest.fixture
def auth_repo(tmp_path):
    return AuthRepository(tmp_path / "users.json")


def test_recipes_are_scoped_per_user(recipe_repo):
    mine = recipe_repo.create_recipe("u1", "Chili")
    recipe_repo.create_recipe("u2", "Soup")
    recipe_repo.add_ingredient(mine, "beans", 2, "cans")

    recipes = recipe_repo.list_recipes("u1")
    assert [r.name for r in recipes] == ["Chili"]
    assert recipes[0].id == mine
    assert recipes[0].is_rotation is False
    assert recipes[0].ingredients == [Ingredient("beans", 2, "cans")]


def test_list_recipes_empty_when_no_file(recipe_repo):
    assert recipe_repo.list_recipes("u1") == []


def test_set_rotation_and_delete(recipe_repo):
    rid = recipe_repo.create_recipe("u1", "Tacos")
    recipe_repo.set_rotation(rid, True)
    assert recipe_repo.list_recipes("u1")[0].is_rotation is True

    recipe_repo.delete_recipe(rid)
    assert recipe_repo.list_recipes("u1") == []


def test_unknown_recipe_id(recipe_repo):
    with pytest.raises(RecipeNotFound):
        recipe_repo.add_ingredient("missing", "salt", 1, "tsp")
    with pytest.raises(RecipeNotFound):
        recipe_repo.set_rotation("missing", True)


def test_corrupt_recipes_file_is_remote_failure(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RemoteFailure):
        RecipeRepository(path).list_recipes("u1")


def test_wrong_shape_recipes_file_is_remote_failure(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps({"rows": []}), encoding="utf-8")
    with pytest.raises(RemoteFailure):
        RecipeRepository(path).list_recipes("u1")


def test_state_upsert_keeps_one_document_per_user(state_repo):
    assert state_repo.get_state("u1") is None
    state_repo.put_state("u1", {"days": [], "checkedItems": ["a"]})
    state_repo.put_state("u1", {"days": [], "checkedItems": ["b"]})
    state_repo.put_state("u2", {"days": []})

    assert state_repo.get_state("u1") == {"days": [], "checkedItems": ["b"]}
    stored = json.loads(state_repo.state_file.read_text(encoding="utf-8"))
    assert sorted(stored) == ["u1", "u2"]
    assert "updated_at" in stored["u1"]


def test_state_write_failure_is_remote_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    repo = StateRepository(blocker / "planner_state.json")
    with pytest.raises(RemoteFailure):
        repo.put_state("u1", {"days": []})


def test_password_hashing():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cret", "not-a-hash")


def test_register_and_sign_in(auth_repo):
    user = auth_repo.register("Cook@Example.com ", "pw123456")
    assert user.email == "cook@example.com"
    assert auth_repo.get_current_user() is None

    session = auth_repo.sign_in("cook@example.com", "pw123456")
    assert session.user.id == user.id
    assert session.token
    assert auth_repo.get_current_user().email == "cook@example.com"

    auth_repo.sign_out()
    assert auth_repo.get_current_user() is None


def test_duplicate_registration(auth_repo):
    auth_repo.register("cook@example.com", "pw123456")
    with pytest.raises(AccountExists):
        auth_repo.register("COOK@example.com", "other")


def test_wrong_password(auth_repo):
    auth_repo.register("cook@example.com", "pw123456")
    with pytest.raises(AuthFailed):
        auth_repo.sign_in("cook@example.com", "nope")
    with pytest.raises(AuthFailed):
        auth_repo.sign_in("nobody@example.com", "pw123456")
    assert auth_repo.get_current_user() is None


def test_passwords_are_not_stored_in_plain_text(auth_repo):
    auth_repo.register("cook@example.com", "pw123456")
    raw = auth_repo.users_file.read_text(encoding="utf-8")
    assert "pw123456" not in raw
