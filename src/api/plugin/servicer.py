"""gRPC servicer for `service.UsersService`.

Each method takes a decoded request message and the call context and
returns a response message. Application errors end the call through
`context.abort`, which raises and never returns.
"""

from __future__ import annotations

from typing import NoReturn

import grpc

from directory.application.services import UserDirectoryService
from directory.ports.exceptions import AuthorNotFoundError
from external.application.services import ExternalUserService
from external.ports.exceptions import ExternalFetchError
from plugin.messages import (
    LookupUserByIdRequest,
    LookupUserByIdResponse,
    MutationCreatePostRequest,
    MutationCreatePostResponse,
    MutationUpdateUserRequest,
    MutationUpdateUserResponse,
    MutationUpdateUsersRequest,
    MutationUpdateUsersResponse,
    QueryExternalUserRequest,
    QueryExternalUserResponse,
    QueryExternalUsersRequest,
    QueryExternalUsersResponse,
    QueryUserActivityRequest,
    QueryUserActivityResponse,
    QueryUserRequest,
    QueryUserResponse,
    QueryUsersRequest,
    QueryUsersResponse,
)
from plugin.observability import DefaultPluginServerProbe, PluginServerProbe


class UsersServicer:
    """Implements the users RPC surface on top of the application services."""

    def __init__(
        self,
        directory_service: UserDirectoryService,
        external_service: ExternalUserService,
        probe: PluginServerProbe | None = None,
    ):
        self._directory = directory_service
        self._external = external_service
        self._probe = probe or DefaultPluginServerProbe()

    def LookupUserById(
        self, request: LookupUserByIdRequest, context: grpc.ServicerContext
    ) -> LookupUserByIdResponse:
        users = self._directory.lookup_users_by_id([key.id for key in request.keys])
        return LookupUserByIdResponse(result=users)

    def QueryUser(
        self, request: QueryUserRequest, context: grpc.ServicerContext
    ) -> QueryUserResponse:
        return QueryUserResponse(user=self._directory.get_user(request.id))

    def QueryUsers(
        self, request: QueryUsersRequest, context: grpc.ServicerContext
    ) -> QueryUsersResponse:
        return QueryUsersResponse(users=self._directory.list_users())

    def MutationUpdateUser(
        self, request: MutationUpdateUserRequest, context: grpc.ServicerContext
    ) -> MutationUpdateUserResponse:
        return MutationUpdateUserResponse(
            update_user=self._directory.update_user(request.input)
        )

    def MutationUpdateUsers(
        self, request: MutationUpdateUsersRequest, context: grpc.ServicerContext
    ) -> MutationUpdateUsersResponse:
        return MutationUpdateUsersResponse(
            update_users=self._directory.update_users(request.input)
        )

    def QueryUserActivity(
        self, request: QueryUserActivityRequest, context: grpc.ServicerContext
    ) -> QueryUserActivityResponse:
        items = self._directory.get_user_activity(request.user_id, request.limit)
        return QueryUserActivityResponse(user_activity=items)

    def MutationCreatePost(
        self, request: MutationCreatePostRequest, context: grpc.ServicerContext
    ) -> MutationCreatePostResponse:
        try:
            post = self._directory.create_post(
                title=request.input.title, author_id=request.input.author_id
            )
        except AuthorNotFoundError as e:
            self._abort(
                context, "MutationCreatePost", grpc.StatusCode.NOT_FOUND, str(e)
            )
        return MutationCreatePostResponse(create_post=post)

    def QueryExternalUser(
        self, request: QueryExternalUserRequest, context: grpc.ServicerContext
    ) -> QueryExternalUserResponse:
        try:
            user = self._external.fetch_external_user(request.id)
        except ExternalFetchError as e:
            self._abort(
                context, "QueryExternalUser", grpc.StatusCode.UNAVAILABLE, str(e)
            )
        return QueryExternalUserResponse(external_user=user)

    def QueryExternalUsers(
        self, request: QueryExternalUsersRequest, context: grpc.ServicerContext
    ) -> QueryExternalUsersResponse:
        try:
            users = self._external.fetch_external_users()
        except ExternalFetchError as e:
            self._abort(
                context, "QueryExternalUsers", grpc.StatusCode.UNAVAILABLE, str(e)
            )
        return QueryExternalUsersResponse(external_users=users)

    def _abort(
        self,
        context: grpc.ServicerContext,
        method: str,
        code: grpc.StatusCode,
        details: str,
    ) -> NoReturn:
        self._probe.rpc_aborted(method=method, status=code.name, details=details)
        context.abort(code, details)
