"""Unit tests for UsersServicer with a mocked call context."""

from unittest.mock import MagicMock, create_autospec

import grpc
import pytest

from directory.domain.value_objects import PostInput, UserPatch
from external.application.services import ExternalUserService
from external.domain.value_objects import ExternalUser
from external.ports.exceptions import ExternalFetchError
from plugin.messages import (
    LookupUserByIdRequest,
    LookupUserByIdRequestKey,
    MutationCreatePostRequest,
    MutationUpdateUserRequest,
    MutationUpdateUsersRequest,
    QueryExternalUserRequest,
    QueryExternalUsersRequest,
    QueryUserActivityRequest,
    QueryUserRequest,
    QueryUsersRequest,
)
from plugin.observability import PluginServerProbe
from plugin.servicer import UsersServicer


@pytest.fixture
def mock_context():
    context = MagicMock(spec=grpc.ServicerContext)
    context.abort.side_effect = grpc.RpcError()
    return context


@pytest.fixture
def mock_external_service():
    return create_autospec(ExternalUserService, instance=True)


@pytest.fixture
def mock_server_probe():
    return create_autospec(PluginServerProbe, instance=True)


@pytest.fixture
def servicer(directory_service, mock_external_service, mock_server_probe):
    return UsersServicer(
        directory_service=directory_service,
        external_service=mock_external_service,
        probe=mock_server_probe,
    )


class TestDirectoryMethods:
    """Tests for methods backed by the local directory."""

    def test_lookup_user_by_id_is_positional(self, servicer, mock_context):
        request = LookupUserByIdRequest(
            keys=[LookupUserByIdRequestKey(id=i) for i in ("2", "999", "1")]
        )

        response = servicer.LookupUserById(request, mock_context)

        assert [user.id for user in response.result] == ["2", "999", "1"]
        assert response.result[1].name == ""

    def test_query_user(self, servicer, mock_context):
        response = servicer.QueryUser(QueryUserRequest(id="1"), mock_context)

        assert response.user.name == "Alice Johnson"

    def test_query_unknown_user_returns_empty_response(self, servicer, mock_context):
        response = servicer.QueryUser(QueryUserRequest(id="999"), mock_context)

        assert response.user is None
        mock_context.abort.assert_not_called()

    def test_query_users(self, servicer, mock_context):
        response = servicer.QueryUsers(QueryUsersRequest(), mock_context)

        assert len(response.users) == 4

    def test_mutation_update_user(self, servicer, mock_context):
        request = MutationUpdateUserRequest(input=UserPatch(id="1", age=0))

        response = servicer.MutationUpdateUser(request, mock_context)

        assert response.update_user.age == 0

    def test_mutation_update_unknown_user(self, servicer, mock_context):
        request = MutationUpdateUserRequest(input=UserPatch(id="999", name="x"))

        response = servicer.MutationUpdateUser(request, mock_context)

        assert response.update_user is None

    def test_mutation_update_users_skips_unknown(self, servicer, mock_context):
        request = MutationUpdateUsersRequest(
            input=[UserPatch(id="999", name="x"), UserPatch(id="2", name="Rob")]
        )

        response = servicer.MutationUpdateUsers(request, mock_context)

        assert [user.id for user in response.update_users] == ["2"]

    def test_query_user_activity(self, servicer, mock_context):
        request = QueryUserActivityRequest(user_id="1", limit=2)

        response = servicer.QueryUserActivity(request, mock_context)

        assert len(response.user_activity) == 2

    def test_mutation_create_post(self, servicer, mock_context):
        request = MutationCreatePostRequest(input=PostInput(title="Hi", author_id="3"))

        response = servicer.MutationCreatePost(request, mock_context)

        assert response.create_post.id == "5"
        assert response.create_post.author_id == "3"

    def test_mutation_create_post_unknown_author_aborts_not_found(
        self, servicer, mock_context, mock_server_probe
    ):
        request = MutationCreatePostRequest(
            input=PostInput(title="Hi", author_id="999")
        )

        with pytest.raises(grpc.RpcError):
            servicer.MutationCreatePost(request, mock_context)

        mock_context.abort.assert_called_once_with(
            grpc.StatusCode.NOT_FOUND, "author with ID 999 not found"
        )
        mock_server_probe.rpc_aborted.assert_called_once_with(
            method="MutationCreatePost",
            status="NOT_FOUND",
            details="author with ID 999 not found",
        )


class TestExternalMethods:
    """Tests for methods backed by the external API."""

    def test_query_external_user(self, servicer, mock_context, mock_external_service):
        mock_external_service.fetch_external_user.return_value = ExternalUser(
            id="1", name="Leanne Graham"
        )

        response = servicer.QueryExternalUser(
            QueryExternalUserRequest(id="1"), mock_context
        )

        assert response.external_user.name == "Leanne Graham"
        mock_external_service.fetch_external_user.assert_called_once_with("1")

    def test_query_external_user_failure_aborts_unavailable(
        self, servicer, mock_context, mock_external_service
    ):
        mock_external_service.fetch_external_user.side_effect = ExternalFetchError(
            "HTTP 404: failed to fetch /users/999"
        )

        with pytest.raises(grpc.RpcError):
            servicer.QueryExternalUser(QueryExternalUserRequest(id="999"), mock_context)

        mock_context.abort.assert_called_once_with(
            grpc.StatusCode.UNAVAILABLE, "HTTP 404: failed to fetch /users/999"
        )

    def test_query_external_users(self, servicer, mock_context, mock_external_service):
        mock_external_service.fetch_external_users.return_value = [
            ExternalUser(id="1"),
            ExternalUser(id="2"),
        ]

        response = servicer.QueryExternalUsers(
            QueryExternalUsersRequest(), mock_context
        )

        assert [user.id for user in response.external_users] == ["1", "2"]

    def test_query_external_users_failure_aborts_unavailable(
        self, servicer, mock_context, mock_external_service
    ):
        mock_external_service.fetch_external_users.side_effect = ExternalFetchError(
            "timeout"
        )

        with pytest.raises(grpc.RpcError):
            servicer.QueryExternalUsers(QueryExternalUsersRequest(), mock_context)

        mock_context.abort.assert_called_once_with(
            grpc.StatusCode.UNAVAILABLE, "timeout"
        )

