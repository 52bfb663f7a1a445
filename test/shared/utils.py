from typing import Any, Dict, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    AUTH_LOGIN,
    AUTH_REGISTER,
    CART,
    PRODUCT_LIST,
)
from test.util_constant import DEFAULT_PRODUCT_PRICE, DEFAULT_PRODUCT_TITLE


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def register_user(
    client: TestClient, username: str, email: str, password: str
) -> Dict[str, Any]:
    """Register a user and return its id, username, email and token."""
    response = client.post(
        AUTH_REGISTER, json={'username': username, 'email': email, 'password': password}
    )
    assert_response_status(response, 201, f'Failed to register {username}: {response.text}')
    # Later requests authenticate through explicit headers only
    client.cookies.clear()
    data = response.json()
    return {**data['user'], 'token': data['token']}


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Helper function to login a user, the auth cookie stays on the client."""
    login_response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
    assert_response_status(login_response, 200, f'Login failed: {login_response.text}')
    return login_response


def create_product(
    client: TestClient,
    token: str,
    *,
    title: str = DEFAULT_PRODUCT_TITLE,
    price: str = DEFAULT_PRODUCT_PRICE,
    category_id: Optional[int] = None,
    description: str = 'Lightly used',
) -> int:
    response = client.post(
        PRODUCT_LIST,
        json={
            'title': title,
            'price': price,
            'category_id': category_id,
            'description': description,
        },
        headers=auth_headers(token),
    )
    assert_response_status(response, 201, 'Failed to create product')
    return response.json()['product_id']


def add_to_cart(client: TestClient, token: str, product_id: int) -> None:
    response = client.post(CART, json={'product_id': product_id}, headers=auth_headers(token))
    assert_response_status(response, 200, 'Failed to add product to cart')
