from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    BUY_NOW,
    CATEGORY_LIST,
    FAVORITES,
    PRODUCT_BULK_CREATE,
    PRODUCT_DELETE,
    PRODUCT_GET,
    PRODUCT_LIST,
    PRODUCT_STATS,
    PRODUCT_UPDATE,
    PRODUCT_VIEW,
)
from test.shared.utils import assert_response_status, auth_headers, create_product


def _category_id(client: TestClient, name: str) -> int:
    categories = client.get(CATEGORY_LIST).json()
    return next(c['id'] for c in categories if c['name'] == name)


@pytest.mark.integration
class TestCreateProductAPI:
    def test_create_and_read_back(self, client: TestClient, seller_user: dict[str, Any]):
        category_id = _category_id(client, 'Fashion & Accessories')

        response = client.post(
            PRODUCT_LIST,
            json={
                'title': '  Vintage Leather Jacket ',
                'description': 'Size M',
                'price': '45.005',
                'category_id': category_id,
                'condition': 'very_good',
            },
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 201)
        assert response.json()['message'] == 'Product created successfully'
        product = client.get(PRODUCT_GET.format(product_id=response.json()['product_id'])).json()
        assert product['title'] == 'Vintage Leather Jacket'
        assert product['price'] == 45.01
        assert product['status'] == 'available'
        assert product['condition'] == 'very_good'
        assert product['owner_id'] == seller_user['id']
        assert product['category_name'] == 'Fashion & Accessories'
        assert product['seller_name'] == seller_user['username']

    @pytest.mark.parametrize(
        'body',
        [
            {'title': 'Lamp'},
            {'title': '   ', 'price': '5'},
            {'title': 'Lamp', 'price': '0'},
            {'title': 'Lamp', 'price': '-3.50'},
        ],
    )
    def test_title_and_positive_price_required(
        self, client: TestClient, seller_user: dict[str, Any], body: dict[str, Any]
    ):
        response = client.post(PRODUCT_LIST, json=body, headers=auth_headers(seller_user['token']))

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Title and valid price are required'

    def test_unknown_category_rejected(self, client: TestClient, seller_user: dict[str, Any]):
        response = client.post(
            PRODUCT_LIST,
            json={'title': 'Lamp', 'price': '5', 'category_id': 999_999},
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Invalid category'

    def test_requires_authentication(self, client: TestClient):
        response = client.post(PRODUCT_LIST, json={'title': 'Lamp', 'price': '5'})

        assert_response_status(response, 401)

    def test_bulk_create_reports_bad_items(
        self, client: TestClient, seller_user: dict[str, Any]
    ):
        response = client.post(
            PRODUCT_BULK_CREATE,
            json={
                'products': [
                    {'title': 'Chair', 'price': '15'},
                    {'title': 'Broken', 'price': '-1'},
                    {'title': 'Table', 'price': '30.5'},
                ]
            },
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 201)
        data = response.json()
        assert data['message'] == 'Successfully created 2 products'
        assert [item['title'] for item in data['created']] == ['Chair', 'Table']
        assert data['errors'] == [
            {'product': 'Broken', 'error': 'Title and valid price are required'}
        ]

    def test_bulk_create_requires_products(self, client: TestClient, seller_user: dict[str, Any]):
        response = client.post(
            PRODUCT_BULK_CREATE, json={'products': []}, headers=auth_headers(seller_user['token'])
        )

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Products array is required'


@pytest.mark.integration
class TestListProductsAPI:
    def test_filters_and_sorting(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        books = _category_id(client, 'Books, Music & Hobbies')
        cheap = create_product(client, seller_user['token'], title='Paperback novel', price='4')
        pricey = create_product(
            client, seller_user['token'], title='Signed first edition', price='80', category_id=books
        )
        other = create_product(client, buyer_user['token'], title='Road bike', price='150')

        by_price = client.get(PRODUCT_LIST, params={'sort': 'price_low'}).json()
        assert [p['id'] for p in by_price['products']] == [cheap, pricey, other]

        in_category = client.get(PRODUCT_LIST, params={'category': books}).json()
        assert [p['id'] for p in in_category['products']] == [pricey]

        search = client.get(PRODUCT_LIST, params={'search': 'NOVEL'}).json()
        assert [p['id'] for p in search['products']] == [cheap]

        by_seller = client.get(PRODUCT_LIST, params={'user_id': buyer_user['id']}).json()
        assert [p['id'] for p in by_seller['products']] == [other]

        price_band = client.get(PRODUCT_LIST, params={'min_price': 5, 'max_price': 100}).json()
        assert [p['id'] for p in price_band['products']] == [pricey]

    def test_pagination(self, client: TestClient, seller_user: dict[str, Any]):
        for i in range(5):
            create_product(client, seller_user['token'], title=f'Item {i}')

        response = client.get(PRODUCT_LIST, params={'page': 2, 'limit': 2, 'sort': 'oldest'})

        assert_response_status(response, 200)
        data = response.json()
        assert [p['title'] for p in data['products']] == ['Item 2', 'Item 3']
        assert data['pagination'] == {
            'current_page': 2,
            'total_pages': 3,
            'total_items': 5,
            'items_per_page': 2,
        }

    def test_empty_catalog(self, client: TestClient):
        data = client.get(PRODUCT_LIST).json()

        assert data['products'] == []
        assert data['pagination']['total_items'] == 0
        assert data['pagination']['total_pages'] == 0


@pytest.mark.integration
class TestProductOwnershipAPI:
    def test_get_unknown_product(self, client: TestClient):
        response = client.get(PRODUCT_GET.format(product_id=999_999))

        assert_response_status(response, 404)
        assert response.json()['error'] == 'Product not found'

    def test_owner_updates_listing(self, client: TestClient, seller_user: dict[str, Any]):
        product_id = create_product(client, seller_user['token'])

        response = client.put(
            PRODUCT_UPDATE.format(product_id=product_id),
            json={'title': 'Jacket, size M', 'price': '35', 'condition': 'fair'},
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 200)
        product = client.get(PRODUCT_GET.format(product_id=product_id)).json()
        assert product['title'] == 'Jacket, size M'
        assert product['price'] == 35.0
        assert product['condition'] == 'fair'

    def test_non_owner_cannot_update_or_delete(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        product_id = create_product(client, seller_user['token'])
        headers = auth_headers(buyer_user['token'])

        update = client.put(
            PRODUCT_UPDATE.format(product_id=product_id),
            json={'title': 'Mine now', 'price': '1'},
            headers=headers,
        )
        delete = client.delete(PRODUCT_DELETE.format(product_id=product_id), headers=headers)

        assert_response_status(update, 404)
        assert update.json()['error'] == 'Product not found or unauthorized'
        assert_response_status(delete, 404)
        assert client.get(PRODUCT_GET.format(product_id=product_id)).json()['price'] == 10.0

    def test_owner_deletes_listing(self, client: TestClient, seller_user: dict[str, Any]):
        product_id = create_product(client, seller_user['token'])

        response = client.delete(
            PRODUCT_DELETE.format(product_id=product_id),
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 200)
        assert_response_status(client.get(PRODUCT_GET.format(product_id=product_id)), 404)

    def test_sold_product_cannot_be_deleted(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        product_id = create_product(client, seller_user['token'])
        client.post(
            BUY_NOW,
            json={'product_id': product_id, 'payment_method': 'paypal'},
            headers=auth_headers(buyer_user['token']),
        )

        response = client.delete(
            PRODUCT_DELETE.format(product_id=product_id),
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 409)
        assert response.json()['error'] == 'Cannot delete a sold product'


@pytest.mark.integration
class TestProductStatsAPI:
    def test_views_and_favorites_are_counted(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        product_id = create_product(client, seller_user['token'])
        client.post(PRODUCT_VIEW.format(product_id=product_id))
        client.post(
            PRODUCT_VIEW.format(product_id=product_id), headers=auth_headers(buyer_user['token'])
        )
        client.post(
            FAVORITES, json={'product_id': product_id}, headers=auth_headers(buyer_user['token'])
        )

        response = client.get(
            PRODUCT_STATS.format(product_id=product_id),
            headers=auth_headers(seller_user['token']),
        )

        assert_response_status(response, 200)
        data = response.json()
        assert data['view_count'] == 2
        assert data['favorites_count'] == 1
        assert data['status'] == 'available'

    def test_stats_only_for_owner(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        product_id = create_product(client, seller_user['token'])

        response = client.get(
            PRODUCT_STATS.format(product_id=product_id),
            headers=auth_headers(buyer_user['token']),
        )

        assert_response_status(response, 404)

    def test_view_of_unknown_product(self, client: TestClient):
        response = client.post(PRODUCT_VIEW.format(product_id=999_999))

        assert_response_status(response, 404)


@pytest.mark.integration
class TestCategoryAPI:
    def test_default_categories_sorted_by_name(self, client: TestClient):
        response = client.get(CATEGORY_LIST)

        assert_response_status(response, 200)
        names = [c['name'] for c in response.json()]
        assert len(names) == 12
        assert names == sorted(names)
        assert 'Free Stuff' in names
