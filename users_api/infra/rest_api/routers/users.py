from fastapi import APIRouter, Depends, Response, status
from typing import Annotated, List, Optional

from ..dependencies import (
    get_user_command_service_dependency,
    get_user_query_service_dependency,
    get_user_create_validator,
    get_user_update_validator,
)
from ..error_handlers import error_response
from ..schemas import UserCreateRequest, UserUpdateRequest, UserResponse
from ...auth import authenticate_admin
from ...logging_config import get_logger
from ...presentators.user_mappers import (
    create_request_to_user,
    update_request_to_user,
    user_to_response,
    users_to_response,
)
from ...presentators.user_validators import UserCreateValidator, UserUpdateValidator
from ....domain.exception.user_exceptions import user_not_found, validation_error
from ....usecase.user_management.user_command_service import (
    UserCommandService,
    UserUpdateNotFound,
)
from ....usecase.user_management.user_query_service import UserQueryService

logger = get_logger("api.users")

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    dependencies=[Depends(authenticate_admin)],
)


def _not_found(user_id: str):
    logger.warning("User not found", extra={"user_id": user_id})
    return error_response(str(user_not_found(user_id)), status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[UserResponse])
async def get_users(
    service: Annotated[UserQueryService, Depends(get_user_query_service_dependency)],
):
    """全ユーザー一覧"""
    users = await service.get_users()
    return users_to_response(users)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: str,
    service: Annotated[UserQueryService, Depends(get_user_query_service_dependency)],
):
    """ID 指定でユーザーを取得"""
    user = await service.get_user(user_id)
    if user is None:
        return _not_found(user_id)
    return user_to_response(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid input"}, 409: {"description": "Login already exists"}},
)
async def create_user(
    service: Annotated[UserCommandService, Depends(get_user_command_service_dependency)],
    validator: Annotated[UserCreateValidator, Depends(get_user_create_validator)],
    request: Optional[UserCreateRequest] = None,
):
    """
    新規ユーザー登録
    """
    errors = validator.validate(request)
    if errors:
        raise validation_error(errors)

    user = await service.create_user(create_request_to_user(request))
    return user_to_response(user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid input"},
        404: {"description": "User not found"},
        409: {"description": "Login already exists"},
    },
)
async def update_user(
    user_id: str,
    service: Annotated[UserCommandService, Depends(get_user_command_service_dependency)],
    validator: Annotated[UserUpdateValidator, Depends(get_user_update_validator)],
    request: Optional[UserUpdateRequest] = None,
):
    """
    ユーザーの部分更新（指定されたフィールドのみ変更）
    """
    errors = validator.validate(request)
    if errors:
        raise validation_error(errors)

    result = await service.update_user(update_request_to_user(user_id, request))
    if isinstance(result, UserUpdateNotFound):
        return _not_found(user_id)
    return user_to_response(result.user)


@router.delete("/{user_id}", responses={404: {"description": "User not found"}})
async def delete_user(
    user_id: str,
    service: Annotated[UserCommandService, Depends(get_user_command_service_dependency)],
):
    """ユーザー削除（存在しなければ 404）"""
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_200_OK)
