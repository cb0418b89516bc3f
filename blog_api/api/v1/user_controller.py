# Standard library imports
from typing import Any

# External package imports
from fastapi import APIRouter, Body, Depends, status

# Local application imports
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    payload: Any = Body(default=None),
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Register a new user

    The body is taken as raw JSON so the use case can apply its own ordered
    checks (400 for an empty body, 422 for field problems).

    Args:
        payload: Decoded JSON request body

    Returns:
        UserResponse with created user information
    """
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(payload)
