from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.update_profile_use_case import UpdateProfileUseCase
from src.service.marketplace.app.query.get_profile_use_case import GetProfileUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.marketplace.driving_adapter.http_controller.auth_controller import (
    to_user_response,
)
from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import (
    MessageResponse,
)
from src.service.marketplace.driving_adapter.http_controller.schema.user_schema import (
    ProfileImageUpdateResponse,
    ProfileUpdateRequest,
    UserResponse,
)


router = APIRouter()


@router.get('/profile', response_model=UserResponse)
@Logger.io
async def get_profile(
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetProfileUseCase = Depends(GetProfileUseCase.depends),
) -> UserResponse:
    user = await use_case.get_profile(user_id=current_user.id)
    return to_user_response(user)


@router.put('/profile', response_model=MessageResponse)
@Logger.io
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(UpdateProfileUseCase.depends),
) -> MessageResponse:
    await use_case.update_profile(
        user_id=current_user.id,
        full_name=request.full_name,
        phone=request.phone,
        address=request.address,
        profile_image_url=request.profile_image_url,
    )
    return MessageResponse(message='Profile updated successfully')


@router.put('/profile/with-image', response_model=ProfileImageUpdateResponse)
@Logger.io
async def update_profile_with_image(
    request: ProfileUpdateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(UpdateProfileUseCase.depends),
) -> ProfileImageUpdateResponse:
    user = await use_case.update_profile_with_image_url(
        user_id=current_user.id,
        full_name=request.full_name,
        phone=request.phone,
        address=request.address,
        profile_image_url=request.profile_image_url,
    )
    return ProfileImageUpdateResponse(
        message='Profile updated successfully',
        profile_image_url=user.profile_image_url or None,
    )
