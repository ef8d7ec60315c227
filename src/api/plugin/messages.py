"""Request and response messages of the `service.UsersService` RPC surface.

Message and field names follow the service definition the router generates
from the users subgraph schema: one request/response pair per operation,
mutations wrap their payload in `input`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from directory.domain.value_objects import ActivityItem, Post, PostInput, User, UserPatch
from external.domain.value_objects import ExternalUser

SERVICE_NAME = "service.UsersService"


class LookupUserByIdRequestKey(BaseModel):
    id: str


class LookupUserByIdRequest(BaseModel):
    keys: list[LookupUserByIdRequestKey] = Field(default_factory=list)


class LookupUserByIdResponse(BaseModel):
    result: list[User] = Field(default_factory=list)


class QueryUserRequest(BaseModel):
    id: str


class QueryUserResponse(BaseModel):
    user: User | None = None


class QueryUsersRequest(BaseModel):
    pass


class QueryUsersResponse(BaseModel):
    users: list[User] = Field(default_factory=list)


class MutationUpdateUserRequest(BaseModel):
    input: UserPatch


class MutationUpdateUserResponse(BaseModel):
    update_user: User | None = None


class MutationUpdateUsersRequest(BaseModel):
    input: list[UserPatch] = Field(default_factory=list)


class MutationUpdateUsersResponse(BaseModel):
    update_users: list[User] = Field(default_factory=list)


class QueryUserActivityRequest(BaseModel):
    user_id: str
    limit: int | None = None


class QueryUserActivityResponse(BaseModel):
    user_activity: list[ActivityItem] = Field(default_factory=list)


class MutationCreatePostRequest(BaseModel):
    input: PostInput


class MutationCreatePostResponse(BaseModel):
    create_post: Post


class QueryExternalUserRequest(BaseModel):
    id: str


class QueryExternalUserResponse(BaseModel):
    external_user: ExternalUser


class QueryExternalUsersRequest(BaseModel):
    pass


class QueryExternalUsersResponse(BaseModel):
    external_users: list[ExternalUser] = Field(default_factory=list)


# RPC method name -> (request message, response message)
USERS_SERVICE_METHODS: dict[str, tuple[type[BaseModel], type[BaseModel]]] = {
    "LookupUserById": (LookupUserByIdRequest, LookupUserByIdResponse),
    "QueryUser": (QueryUserRequest, QueryUserResponse),
    "QueryUsers": (QueryUsersRequest, QueryUsersResponse),
    "MutationUpdateUser": (MutationUpdateUserRequest, MutationUpdateUserResponse),
    "MutationUpdateUsers": (MutationUpdateUsersRequest, MutationUpdateUsersResponse),
    "QueryUserActivity": (QueryUserActivityRequest, QueryUserActivityResponse),
    "MutationCreatePost": (MutationCreatePostRequest, MutationCreatePostResponse),
    "QueryExternalUser": (QueryExternalUserRequest, QueryExternalUserResponse),
    "QueryExternalUsers": (QueryExternalUsersRequest, QueryExternalUsersResponse),
}
