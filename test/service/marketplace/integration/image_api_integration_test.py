from collections.abc import Generator
from typing import Any

from dependency_injector import providers
from fastapi.testclient import TestClient
import httpx
import pytest

from src.platform.config.di import container
from src.platform.constant.route_constant import (
    PRODUCT_GET,
    PRODUCT_LIST,
    PRODUCT_WITH_IMAGE,
    PRODUCT_WITH_IMAGE_URL,
    SAMPLE_IMAGES,
    USER_PROFILE,
    USER_PROFILE_WITH_IMAGE,
)
from src.service.marketplace.driven_adapter.storage.local_image_store import LocalImageStore
from test.shared.utils import assert_response_status, auth_headers


PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 32


def _remote_images(request: httpx.Request) -> httpx.Response:
    # Only *.png paths exist on the fake image host
    if request.url.path.endswith('.png'):
        return httpx.Response(200, content=PNG_BYTES, headers={'content-type': 'image/png'})
    return httpx.Response(404)


@pytest.fixture
def remote_images() -> Generator[None, None, None]:
    store = LocalImageStore(transport=httpx.MockTransport(_remote_images))
    container.image_store.override(providers.Object(store))
    yield
    container.image_store.reset_override()


@pytest.mark.integration
class TestSampleImagesAPI:
    def test_sample_images_listed(self, client: TestClient):
        response = client.get(SAMPLE_IMAGES)

        assert_response_status(response, 200)
        images = response.json()
        assert len(images) == 10
        assert images[0] == {
            'id': 1,
            'name': 'Electronics - Laptop',
            'url': 'https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=400&h=300&fit=crop',
            'category': 'Electronics & Gadgets',
        }


@pytest.mark.integration
class TestProductImageUploadAPI:
    def test_uploaded_image_is_stored_and_served(
        self, client: TestClient, seller_user: dict[str, Any]
    ):
        """
        Given: A seller with a PNG photo
        When: The listing is created through the multipart form
        Then: The product points at /uploads and the file is served back unchanged
        """
        response = client.post(
            PRODUCT_WITH_IMAGE,
            data={'title': 'Desk Lamp', 'price': '12.50', 'condition': 'good'},
            files={'image': ('lamp.png', PNG_BYTES, 'image/png')},
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 201)
        data = response.json()
        assert data['message'] == 'Product created successfully'
        assert data['image_url'].startswith('/uploads/product-')

        detail = client.get(PRODUCT_GET.format(product_id=data['product_id'])).json()
        assert detail['image_url'] == data['image_url']
        assert detail['price'] == 12.5

        served = client.get(data['image_url'])
        assert_response_status(served, 200)
        assert served.content == PNG_BYTES

    def test_form_without_file_creates_product(
        self, client: TestClient, seller_user: dict[str, Any]
    ):
        response = client.post(
            PRODUCT_WITH_IMAGE,
            data={'title': 'Desk Lamp', 'price': '12.50'},
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 201)
        assert response.json()['image_url'] is None

    def test_non_image_upload_rejected(self, client: TestClient, seller_user: dict[str, Any]):
        response = client.post(
            PRODUCT_WITH_IMAGE,
            data={'title': 'Desk Lamp', 'price': '12.50'},
            files={'image': ('notes.txt', b'hello', 'text/plain')},
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Only image files (JPEG, PNG, GIF, WebP) are allowed!'
        assert client.get(PRODUCT_LIST).json()['products'] == []

    def test_missing_title_rejected_before_upload(
        self, client: TestClient, seller_user: dict[str, Any]
    ):
        response = client.post(
            PRODUCT_WITH_IMAGE,
            data={'price': '12.50'},
            files={'image': ('lamp.png', PNG_BYTES, 'image/png')},
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Title and valid price are required'

    def test_upload_requires_login(self, client: TestClient):
        response = client.post(PRODUCT_WITH_IMAGE, data={'title': 'Desk Lamp', 'price': '1'})

        assert_response_status(response, 401)


@pytest.mark.integration
class TestImageUrlDownloadAPI:
    def test_product_image_copied_from_url(
        self, client: TestClient, seller_user: dict[str, Any], remote_images: None
    ):
        response = client.post(
            PRODUCT_WITH_IMAGE_URL,
            json={
                'title': 'Road Bike',
                'price': '150',
                'image_url': 'https://images.example.com/bike.png',
            },
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 201)
        image_url = response.json()['image_url']
        assert image_url.startswith('/uploads/downloaded-')
        assert image_url.endswith('.png')
        assert client.get(image_url).content == PNG_BYTES

    def test_unreachable_product_image_rejected(
        self, client: TestClient, seller_user: dict[str, Any], remote_images: None
    ):
        response = client.post(
            PRODUCT_WITH_IMAGE_URL,
            json={
                'title': 'Road Bike',
                'price': '150',
                'image_url': 'https://images.example.com/missing.jpg',
            },
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Failed to download image from URL'
        assert client.get(PRODUCT_LIST).json()['products'] == []

    def test_profile_image_copied_from_url(
        self, client: TestClient, buyer_user: dict[str, Any], remote_images: None
    ):
        response = client.put(
            USER_PROFILE_WITH_IMAGE,
            json={
                'full_name': 'Bob Green',
                'profile_image_url': 'https://images.example.com/me.png',
            },
            headers=auth_headers(buyer_user['token']),
        )

        assert_response_status(response, 200)
        data = response.json()
        assert data['message'] == 'Profile updated successfully'
        assert data['profile_image_url'].startswith('/uploads/profile-')

        profile = client.get(USER_PROFILE, headers=auth_headers(buyer_user['token'])).json()
        assert profile['profile_image_url'] == data['profile_image_url']
        assert profile['full_name'] == 'Bob Green'

    def test_unreachable_profile_image_rejected(
        self, client: TestClient, buyer_user: dict[str, Any], remote_images: None
    ):
        response = client.put(
            USER_PROFILE_WITH_IMAGE,
            json={'profile_image_url': 'https://images.example.com/me.jpg'},
            headers=auth_headers(buyer_user['token']),
        )

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Failed to download profile image from URL'
