from typing import List

import attrs
from fastapi import APIRouter

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.sample_image import SAMPLE_IMAGES
from src.service.marketplace.driving_adapter.http_controller.schema.image_schema import (
    SampleImageResponse,
)


router = APIRouter()


@router.get('/sample-images', response_model=List[SampleImageResponse])
@Logger.io(truncate_content=True)
async def list_sample_images() -> List[SampleImageResponse]:
    return [SampleImageResponse(**attrs.asdict(image)) for image in SAMPLE_IMAGES]
