"""HTTP routes mirroring the users RPC surface.

Provides a REST API for manual testing with curl or the OpenAPI docs.
Request and response bodies are the same messages the gRPC service uses.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from directory.application.services import UserDirectoryService
from directory.domain.value_objects import UserPatch
from directory.ports.exceptions import AuthorNotFoundError
from external.application.services import ExternalUserService
from external.ports.exceptions import ExternalFetchError
from plugin.dependencies import get_external_user_service, get_user_directory_service
from plugin.messages import (
    LookupUserByIdRequest,
    LookupUserByIdResponse,
    MutationCreatePostRequest,
    MutationCreatePostResponse,
    MutationUpdateUserResponse,
    MutationUpdateUsersRequest,
    MutationUpdateUsersResponse,
    QueryExternalUserResponse,
    QueryExternalUsersResponse,
    QueryUserActivityResponse,
    QueryUserResponse,
    QueryUsersResponse,
)

router = APIRouter(tags=["users"])


@router.get("/users")
def list_users(
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> QueryUsersResponse:
    return QueryUsersResponse(users=service.list_users())


@router.post("/users/lookup")
def lookup_users(
    request: LookupUserByIdRequest,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> LookupUserByIdResponse:
    """Resolve a batch of ids in request order.

    Unknown ids come back as placeholder users carrying only the id.
    """
    users = service.lookup_users_by_id([key.id for key in request.keys])
    return LookupUserByIdResponse(result=users)


@router.patch("/users")
def update_users(
    request: MutationUpdateUsersRequest,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> MutationUpdateUsersResponse:
    """Apply a batch of sparse patches; unknown or empty ids are skipped."""
    return MutationUpdateUsersResponse(update_users=service.update_users(request.input))


@router.get("/users/{user_id}")
def get_user(
    user_id: str,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> QueryUserResponse:
    """Get one user. An unknown id yields `{"user": null}`, not a 404."""
    return QueryUserResponse(user=service.get_user(user_id))


@router.patch("/users/{user_id}")
def update_user(
    user_id: str,
    patch: dict[str, Any] = Body(...),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> MutationUpdateUserResponse:
    """Apply a sparse patch to one user.

    The body is a `UserPatch` without the id; the path id selects the user.
    An unknown id yields `{"update_user": null}`.
    """
    try:
        user_patch = UserPatch.model_validate({**patch, "id": user_id})
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e

    return MutationUpdateUserResponse(update_user=service.update_user(user_patch))


@router.get("/users/{user_id}/activity")
def get_user_activity(
    user_id: str,
    limit: int | None = None,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> QueryUserActivityResponse:
    """Get a user's activity, newest first.

    Query parameter:
        limit: Maximum number of items; omitted, zero or negative means all.
    """
    return QueryUserActivityResponse(
        user_activity=service.get_user_activity(user_id, limit)
    )


@router.post("/posts", status_code=status.HTTP_201_CREATED)
def create_post(
    request: MutationCreatePostRequest,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> MutationCreatePostResponse:
    """Create a post and prepend it to the author's activity.

    Raises:
        HTTPException: 404 if the author does not exist.
    """
    try:
        post = service.create_post(
            title=request.input.title, author_id=request.input.author_id
        )
    except AuthorNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e

    return MutationCreatePostResponse(create_post=post)


@router.get("/external-users")
def list_external_users(
    service: ExternalUserService = Depends(get_external_user_service),
) -> QueryExternalUsersResponse:
    """Fetch every user from the external API.

    Raises:
        HTTPException: 502 if the external API call fails.
    """
    try:
        users = service.fetch_external_users()
    except ExternalFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return QueryExternalUsersResponse(external_users=users)


@router.get("/external-users/{user_id}")
def get_external_user(
    user_id: str,
    service: ExternalUserService = Depends(get_external_user_service),
) -> QueryExternalUserResponse:
    """Fetch one user from the external API.

    Raises:
        HTTPException: 502 if the external API call fails.
    """
    try:
        user = service.fetch_external_user(user_id)
    except ExternalFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return QueryExternalUserResponse(external_user=user)
