from src.platform.exception.exceptions import DomainError


class ImageDownloadError(DomainError):
    """The remote image could not be fetched, the reason is kept for logs only"""

    def __init__(self, *, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__('Failed to download image from URL')
