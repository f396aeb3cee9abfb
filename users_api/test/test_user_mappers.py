import sys
import os

import pytest

# Add path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from users_api.domain.entity.user_entity import User
from users_api.infra.presentators.user_mappers import (
    create_request_to_user,
    update_request_to_user,
    user_to_response,
    users_to_response,
)
from users_api.infra.rest_api.schemas import UserCreateRequest, UserUpdateRequest


class TestUserMappers:

    def test_create_request_to_user_has_no_id(self):
        user = create_request_to_user(UserCreateRequest(name="John", login="john", password="pw"))

        assert user == User(id=None, name="John", login="john", password="pw")

    def test_update_request_to_user_uses_path_id(self):
        user = update_request_to_user("U1", UserUpdateRequest(login="new"))

        assert user == User(id="U1", name=None, login="new", password=None)

    def test_none_inputs(self):
        assert create_request_to_user(None) is None
        assert update_request_to_user("U1", None) is None
        assert user_to_response(None) is None

    @pytest.mark.parametrize("password", ["secret", "", None])
    def test_response_never_contains_password(self, password):
        response = user_to_response(User(id="U1", name="John", login="john", password=password))

        dumped = response.model_dump()
        assert dumped == {"id": "U1", "name": "John", "login": "john"}
        assert "password" not in response.model_dump_json()

    def test_users_to_response_keeps_order(self):
        users = [User(id=str(i), name=f"n{i}", login=f"l{i}", password="p") for i in range(3)]

        responses = users_to_response(users)

        assert [r.id for r in responses] == ["0", "1", "2"]
