from pathlib import PurePath
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.gif', '.webp'})
IMAGE_CONTENT_TYPES = frozenset(
    {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'}
)


@attrs.frozen
class ImageFile:
    """An uploaded image before it is written to storage"""

    filename: str
    content_type: Optional[str]
    data: bytes = attrs.field(repr=lambda data: f'<{len(data)} bytes>')

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix.lower()

    def validate(self, *, max_bytes: int) -> None:
        # Both the file name and the declared type must look like an image
        content_type = (self.content_type or '').lower()
        if self.extension not in IMAGE_EXTENSIONS or content_type not in IMAGE_CONTENT_TYPES:
            raise DomainError('Only image files (JPEG, PNG, GIF, WebP) are allowed!')
        if len(self.data) > max_bytes:
            raise DomainError(f'File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.')
