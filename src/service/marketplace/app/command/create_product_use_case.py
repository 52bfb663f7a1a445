from typing import Any, List, Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CustomBaseError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_category_repo import ICategoryRepo
from src.service.marketplace.app.interface.i_image_store import IImageStore
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import ProductCondition
from src.service.marketplace.domain.value_object.image_file import ImageFile


class CreateProductUseCase:
    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        category_repo: ICategoryRepo,
        image_store: IImageStore,
    ) -> None:
        self.uow = uow
        self.category_repo = category_repo
        self.image_store = image_store

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        category_repo: ICategoryRepo = Depends(Provide[Container.category_repo]),
        image_store: IImageStore = Depends(Provide[Container.image_store]),
    ) -> Self:
        return cls(uow=uow, category_repo=category_repo, image_store=image_store)

    @Logger.io
    async def create(
        self,
        *,
        owner_id: int,
        title: Optional[str],
        price: Any,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        condition: Optional[ProductCondition] = None,
    ) -> ProductEntity:
        product = await self._build(
            owner_id=owner_id,
            title=title,
            price=price,
            description=description,
            category_id=category_id,
            image_url=image_url,
            condition=condition,
        )
        return await self._persist(product)

    @Logger.io
    async def create_with_upload(
        self, *, owner_id: int, image: Optional[ImageFile], **fields: Any
    ) -> ProductEntity:
        """Listing from a multipart form, the optional file becomes the product image"""
        # Invalid listings are rejected before anything is written to storage
        product = await self._build(owner_id=owner_id, **fields)
        if image is not None:
            image_url = await self.image_store.save_upload(image=image, prefix='product')
            product = attrs.evolve(product, image_url=image_url)
        return await self._persist(product)

    @Logger.io
    async def create_with_image_url(
        self, *, owner_id: int, image_url: Optional[str], **fields: Any
    ) -> ProductEntity:
        """Listing whose image is copied from a remote URL into local storage"""
        product = await self._build(owner_id=owner_id, **fields)
        if image_url and image_url.strip():
            stored_url = await self.image_store.download(
                url=image_url.strip(), prefix='downloaded'
            )
            product = attrs.evolve(product, image_url=stored_url)
        return await self._persist(product)

    @Logger.io(truncate_content=True)
    async def bulk_create(
        self, *, owner_id: int, items: List[dict]
    ) -> tuple[List[ProductEntity], List[dict]]:
        """
        Create several listings, an invalid item is reported without aborting the others

        Returns:
            (created products, errors as {'product': title, 'error': message})
        """
        if not items:
            raise ValidationError('Products array is required')

        valid: List[ProductEntity] = []
        errors: List[dict] = []
        for item in items:
            try:
                valid.append(await self._build(owner_id=owner_id, **item))
            except CustomBaseError as e:
                errors.append({'product': item.get('title') or 'Unknown', 'error': e.message})

        created: List[ProductEntity] = []
        if valid:
            async with self.uow:
                for product in valid:
                    created.append(await self.uow.product_command_repo.create(product=product))
                await self.uow.commit()

        metrics.record_product_listed(source='bulk', count=len(created))
        Logger.base.info(
            f'📦 [PRODUCT] User {owner_id} bulk listed {len(created)} products, '
            f'{len(errors)} rejected'
        )
        return created, errors

    async def _build(
        self,
        *,
        owner_id: int,
        title: Optional[str],
        price: Any,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        condition: Optional[ProductCondition] = None,
    ) -> ProductEntity:
        product = ProductEntity.create(
            owner_id=owner_id,
            title=title,
            price=price,
            description=description,
            category_id=category_id,
            image_url=image_url,
            condition=condition,
        )
        if category_id is not None and not await self.category_repo.exists(
            category_id=category_id
        ):
            raise ValidationError('Invalid category')
        return product

    async def _persist(self, product: ProductEntity) -> ProductEntity:
        async with self.uow:
            created = await self.uow.product_command_repo.create(product=product)
            await self.uow.commit()

        metrics.record_product_listed(source='single')
        Logger.base.info(f'📦 [PRODUCT] User {created.owner_id} listed product {created.id}')
        return created
