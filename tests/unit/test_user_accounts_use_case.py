"""
Unit tests for UserAccountsUseCase.

Uses FakeUserRepository; no database required.
"""

import pytest

from application.exceptions import StoreFailureError, UserNotFoundError, UserValidationError
from application.use_cases import CreateUserInput, UserAccountsUseCase, require_user
from tests.fakes import FakeUserRepository, create_user_repo


@pytest.fixture
def repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def use_case(repo) -> UserAccountsUseCase:
    return UserAccountsUseCase(user_repo=repo)


@pytest.mark.unit
class TestCreateUser:
    """Tests for registering users."""

    def test_creates_user_with_empty_log(self, use_case, repo):
        user = use_case.create_user(CreateUserInput(username="fcc_test"))

        assert user.username == "fcc_test"
        assert user.id
        assert user.log == []
        assert repo.get_all() == [user]

    def test_duplicate_usernames_get_distinct_ids(self, use_case):
        first = use_case.create_user(CreateUserInput(username="same"))
        second = use_case.create_user(CreateUserInput(username="same"))

        assert first.id != second.id

    @pytest.mark.parametrize("username", [None, "", "   "])
    def test_missing_username_rejected(self, use_case, repo, username):
        with pytest.raises(UserValidationError) as exc_info:
            use_case.create_user(CreateUserInput(username=username))

        assert exc_info.value.message == "Username is required"
        assert exc_info.value.field == "username"
        assert repo.calls == []

    def test_store_failure_propagates(self, use_case, repo):
        repo.fail_on("create")

        with pytest.raises(StoreFailureError):
            use_case.create_user(CreateUserInput(username="alice"))


@pytest.mark.unit
class TestReadUsers:
    """Tests for listing and looking up users."""

    def test_list_users_in_insertion_order(self, use_case, repo):
        repo.seed([{"id": "a", "username": "alice"}, {"id": "b", "username": "bob"}])

        assert [u.username for u in use_case.list_users()] == ["alice", "bob"]

    def test_list_users_empty(self, use_case):
        assert use_case.list_users() == []

    def test_get_user_includes_log(self):
        repo = create_user_repo(user_id="u1", exercise_dates=["2020-01-01"])
        use_case = UserAccountsUseCase(user_repo=repo)

        user = use_case.get_user("u1")

        assert user.exercise_count == 1
        assert user.log[0].description == "Exercise 1"

    def test_get_unknown_user(self, use_case):
        with pytest.raises(UserNotFoundError) as exc_info:
            use_case.get_user("missing")

        assert exc_info.value.message == "User not found"
        assert exc_info.value.user_id == "missing"

    def test_require_user(self, repo):
        repo.seed([{"id": "u1", "username": "alice"}])

        assert require_user(repo, "u1").username == "alice"
        with pytest.raises(UserNotFoundError):
            require_user(repo, "u2")
