"""User API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.shopfront.api.http.deps import get_user_service, parse_record_id
from src.shopfront.api.http.schemas import MessageResponse, error_responses, json_body
from src.shopfront.core.services import UserService
from src.shopfront.entities.core.user import User, UserCreate, UserUpdate

router = APIRouter(tags=["user"])


@router.get("/users", response_model=list[User], responses=error_responses(500))
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    """List every user in insertion order."""
    return service.list_users()


@router.post(
    "/user",
    status_code=201,
    response_model=MessageResponse,
    responses=error_responses(400, 409, 500),
    openapi_extra=json_body(UserCreate),
)
def create_user(
    payload: Any = Body(default=None),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Create a user from an e-mail and a plaintext password."""
    user = service.create_user(payload)
    return MessageResponse(message=f"The user {user.email} was created successfully")


@router.put(
    "/user/{id}",
    response_model=User,
    responses=error_responses(400, 404, 409, 500),
    openapi_extra=json_body(UserUpdate),
)
def update_user(
    payload: Any = Body(default=None),
    user_id: int | None = Depends(parse_record_id),
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace a user's e-mail and return the updated record."""
    return service.update_user(user_id, payload)


@router.delete(
    "/user/{id}",
    response_model=MessageResponse,
    responses=error_responses(404, 500),
)
def delete_user(
    user_id: int | None = Depends(parse_record_id),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Permanently delete a user."""
    user = service.delete_user(user_id)
    return MessageResponse(message=f"The user {user.email} was deleted successfully")
