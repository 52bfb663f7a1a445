from decimal import Decimal
from typing import Optional

import attrs
from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.create_product_use_case import CreateProductUseCase
from src.service.marketplace.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.marketplace.app.command.record_product_view_use_case import (
    RecordProductViewUseCase,
)
from src.service.marketplace.app.command.update_product_use_case import UpdateProductUseCase
from src.service.marketplace.app.dto.product_list_query import ProductSort
from src.service.marketplace.app.query.get_product_stats_use_case import GetProductStatsUseCase
from src.service.marketplace.app.query.get_product_use_case import GetProductUseCase
from src.service.marketplace.app.query.list_products_use_case import ListProductsUseCase
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.enum.product_status import ProductCondition
from src.service.marketplace.domain.value_object.image_file import ImageFile
from src.service.marketplace.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
    get_optional_user,
)
from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import (
    MessageResponse,
)
from src.service.marketplace.driving_adapter.http_controller.schema.product_schema import (
    BulkCreateRequest,
    BulkCreateResponse,
    BulkCreatedItem,
    BulkErrorItem,
    ProductCreatedResponse,
    ProductListResponse,
    ProductResponse,
    ProductStatsResponse,
    ProductWriteRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def to_product_response(product: ProductEntity) -> ProductResponse:
    return ProductResponse(**attrs.asdict(product, recurse=False))


@router.get('', response_model=ProductListResponse)
@Logger.io(truncate_content=True)
async def list_products(
    category: Optional[int] = Query(None, description='Category id'),
    search: Optional[str] = Query(None, description='Substring of title or description'),
    user_id: Optional[int] = Query(None, description='Only listings of this seller'),
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    sort: ProductSort = ProductSort.NEWEST,
    page: int = 1,
    limit: Optional[int] = None,
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> ProductListResponse:
    result = await use_case.list_products(
        category_id=category,
        search=search,
        user_id=user_id,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
        page=page,
        limit=limit,
    )
    return ProductListResponse(**result)


@router.post('', response_model=ProductCreatedResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: ProductWriteRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductCreatedResponse:
    product = await use_case.create(owner_id=current_user.id, **request.model_dump())
    return ProductCreatedResponse(message='Product created successfully', product_id=product.id)


@router.post('/bulk-create', response_model=BulkCreateResponse, status_code=status.HTTP_201_CREATED)
@Logger.io(truncate_content=True)
async def bulk_create_products(
    request: BulkCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> BulkCreateResponse:
    with tracer.start_as_current_span(
        'controller.bulk_create_products',
        attributes={'user.id': current_user.id or 0, 'product.count': len(request.products)},
    ):
        created, errors = await use_case.bulk_create(
            owner_id=current_user.id, items=[item.model_dump() for item in request.products]
        )
        return BulkCreateResponse(
            message=f'Successfully created {len(created)} products',
            created=[
                BulkCreatedItem(product_id=p.id, title=p.title, image_url=p.image_url)
                for p in created
            ],
            errors=[BulkErrorItem(**error) for error in errors],
        )


@router.post(
    '/with-image', response_model=ProductCreatedResponse, status_code=status.HTTP_201_CREATED
)
@Logger.io
async def create_product_with_image(
    title: Optional[str] = Form(None),
    price: Optional[Decimal] = Form(None),
    description: Optional[str] = Form(None),
    category_id: Optional[int] = Form(None),
    condition: Optional[ProductCondition] = Form(None),
    image: Optional[UploadFile] = File(None, description='JPEG, PNG, GIF or WebP'),
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductCreatedResponse:
    upload = None
    if image is not None and image.filename:
        upload = ImageFile(
            filename=image.filename, content_type=image.content_type, data=await image.read()
        )
    product = await use_case.create_with_upload(
        owner_id=current_user.id,
        image=upload,
        title=title,
        price=price,
        description=description,
        category_id=category_id,
        condition=condition,
    )
    return ProductCreatedResponse(
        message='Product created successfully', product_id=product.id, image_url=product.image_url
    )


@router.post(
    '/with-image-url', response_model=ProductCreatedResponse, status_code=status.HTTP_201_CREATED
)
@Logger.io
async def create_product_with_image_url(
    request: ProductWriteRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductCreatedResponse:
    product = await use_case.create_with_image_url(
        owner_id=current_user.id, **request.model_dump()
    )
    return ProductCreatedResponse(
        message='Product created successfully', product_id=product.id, image_url=product.image_url
    )


@router.get('/{product_id}', response_model=ProductResponse)
@Logger.io
async def get_product(
    product_id: int,
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> ProductResponse:
    return ProductResponse(**await use_case.get_product(product_id=product_id))


@router.put('/{product_id}', response_model=MessageResponse)
@Logger.io
async def update_product(
    product_id: int,
    request: ProductWriteRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> MessageResponse:
    await use_case.update(user_id=current_user.id, product_id=product_id, **request.model_dump())
    return MessageResponse(message='Product updated successfully')


@router.delete('/{product_id}', response_model=MessageResponse)
@Logger.io
async def delete_product(
    product_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> MessageResponse:
    await use_case.delete(user_id=current_user.id, product_id=product_id)
    return MessageResponse(message='Product deleted successfully')


@router.post('/{product_id}/view', response_model=MessageResponse)
@Logger.io
async def track_view(
    product_id: int,
    http_request: Request,
    current_user: Optional[UserEntity] = Depends(get_optional_user),
    use_case: RecordProductViewUseCase = Depends(RecordProductViewUseCase.depends),
) -> MessageResponse:
    await use_case.record(
        product_id=product_id,
        user_id=current_user.id if current_user else None,
        ip_address=http_request.client.host if http_request.client else None,
    )
    return MessageResponse(message='View tracked')


@router.get('/{product_id}/stats', response_model=ProductStatsResponse)
@Logger.io
async def get_product_stats(
    product_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetProductStatsUseCase = Depends(GetProductStatsUseCase.depends),
) -> ProductStatsResponse:
    stats = await use_case.get_stats(user_id=current_user.id, product_id=product_id)
    return ProductStatsResponse(**stats)
