from typing import Optional
from uuid import uuid4

import anyio
import httpx

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import UPLOADS
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.interface.i_image_store import IImageStore
from src.service.marketplace.domain.image_error import ImageDownloadError
from src.service.marketplace.domain.value_object.image_file import ImageFile


# Remote images are named by their declared type, anything else is stored as jpg
_DOWNLOAD_EXTENSIONS = {
    'image/jpeg': '.jpg',
    'image/png': '.png',
    'image/gif': '.gif',
    'image/webp': '.webp',
}


class LocalImageStore(IImageStore):
    """
    Image files in UPLOAD_DIR, which the app serves back under /uploads

    Files get a random name so two uploads never collide. Remote fetches go
    through httpx; tests pass a MockTransport instead of reaching the network.
    """

    def __init__(
        self,
        *,
        upload_dir: Optional[str] = None,
        max_bytes: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.upload_dir = anyio.Path(upload_dir or settings.UPLOAD_DIR)
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
        self.timeout = timeout or settings.IMAGE_DOWNLOAD_TIMEOUT
        self.transport = transport

    @Logger.io
    async def save_upload(self, *, image: ImageFile, prefix: str) -> str:
        try:
            image.validate(max_bytes=self.max_bytes)
        except DomainError:
            metrics.record_image(source='upload', result='rejected')
            raise
        return await self._write(
            prefix=prefix, extension=image.extension, data=image.data, source='upload'
        )

    @Logger.io
    async def download(self, *, url: str, prefix: str) -> str:
        try:
            content_type, data = await self._fetch(url)
        except ImageDownloadError as e:
            metrics.record_image(source='download', result='rejected')
            Logger.base.warning(f'🖼️  [IMAGE] Download of {url} failed: {e.reason}')
            raise
        return await self._write(
            prefix=prefix,
            extension=_DOWNLOAD_EXTENSIONS.get(content_type, '.jpg'),
            data=data,
            source='download',
        )

    async def _fetch(self, url: str) -> tuple[str, bytes]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ImageDownloadError(url=url, reason=f'{type(e).__name__}: {e}') from e

        if response.status_code != 200:
            raise ImageDownloadError(url=url, reason=f'HTTP {response.status_code}')

        content_type = response.headers.get('content-type', '').split(';')[0].strip().lower()
        if content_type and not content_type.startswith('image/'):
            raise ImageDownloadError(url=url, reason=f'not an image ({content_type})')
        if len(response.content) > self.max_bytes:
            raise ImageDownloadError(url=url, reason=f'{len(response.content)} bytes')
        return content_type, response.content

    async def _write(self, *, prefix: str, extension: str, data: bytes, source: str) -> str:
        await self.upload_dir.mkdir(parents=True, exist_ok=True)
        filename = f'{prefix}-{uuid4().hex}{extension}'
        await (self.upload_dir / filename).write_bytes(data)

        metrics.record_image(source=source, result='stored')
        Logger.base.info(f'🖼️  [IMAGE] Stored {filename} ({len(data)} bytes)')
        return f'{UPLOADS}/{filename}'
