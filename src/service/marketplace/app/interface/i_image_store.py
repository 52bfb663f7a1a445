from abc import ABC, abstractmethod

from src.service.marketplace.domain.value_object.image_file import ImageFile


class IImageStore(ABC):
    """Stores listing and profile pictures, returns the public /uploads URL"""

    @abstractmethod
    async def save_upload(self, *, image: ImageFile, prefix: str) -> str:
        """Validate and store an uploaded file (DomainError when not an acceptable image)"""
        pass

    @abstractmethod
    async def download(self, *, url: str, prefix: str) -> str:
        """Fetch a remote image and store it (ImageDownloadError on any failure)"""
        pass
