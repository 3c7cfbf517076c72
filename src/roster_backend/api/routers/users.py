"""User resource endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from roster_backend.api.dependencies import get_user_service
from roster_backend.api.models import (
    ErrorResponse,
    MessageResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from roster_backend.api.services import (
    StoreFailureError,
    UserFields,
    UserNotFoundError,
    UserService,
)
from roster_backend.database import get_session

router = APIRouter(prefix="/users", tags=["users"])

USER_NOT_FOUND = "User not found"

_store_failure_response = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}
}
_not_found_responses = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    **_store_failure_response,
}


def _store_failure(exc: StoreFailureError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Retrieve a list of users",
    responses=_store_failure_response,
)
def list_users(
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Return every stored user."""

    try:
        users = user_service.list_users(session=session)
    except StoreFailureError as exc:
        raise _store_failure(exc) from exc
    return [UserResponse.from_schema(user) for user in users]


@router.get(
    "/{email}",
    response_model=UserResponse,
    summary="Retrieve a single user by email",
    responses=_not_found_responses,
)
def get_user(
    email: str,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user stored under ``email``."""

    try:
        user = user_service.get_user(session=session, email=email)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except StoreFailureError as exc:
        raise _store_failure(exc) from exc
    return UserResponse.from_schema(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses=_store_failure_response,
)
def create_user(
    payload: UserCreateRequest,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Insert a user; a duplicate email fails with the store's message."""

    fields = UserFields(
        first_name=payload.first_name,
        last_name=payload.last_name,
        class_=payload.class_,
    )
    try:
        user = user_service.create_user(
            session=session, email=payload.email, fields=fields
        )
    except StoreFailureError as exc:
        raise _store_failure(exc) from exc
    return UserResponse.from_schema(user)


@router.put(
    "/{email}",
    response_model=UserResponse,
    summary="Update a user by email",
    responses=_not_found_responses,
)
def update_user(
    email: str,
    payload: UserUpdateRequest,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Replace firstName, lastName and class; omitted fields become null."""

    fields = UserFields(
        first_name=payload.first_name,
        last_name=payload.last_name,
        class_=payload.class_,
    )
    try:
        user = user_service.update_user(session=session, email=email, fields=fields)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except StoreFailureError as exc:
        raise _store_failure(exc) from exc
    return UserResponse.from_schema(user)


@router.delete(
    "/{email}",
    response_model=MessageResponse,
    summary="Delete a user by email",
    responses=_not_found_responses,
)
def delete_user(
    email: str,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Remove the user stored under ``email``."""

    try:
        user_service.delete_user(session=session, email=email)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except StoreFailureError as exc:
        raise _store_failure(exc) from exc
    return MessageResponse(message="User deleted")
