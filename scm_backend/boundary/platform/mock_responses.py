"""
Canned platform API responses for mock mode.

Routes may contain ":name" segments; handlers receive the request body
plus matched path parameters as keyword arguments.
"""

import re
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

MockHandler = Callable[..., Any]

MOCK_USER_ID = "user-123"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _mock_user(**overrides: Any) -> dict[str, Any]:
    user = {
        "id": MOCK_USER_ID,
        "firstName": "John",
        "lastName": "Doe",
        "name": "John Doe",
        "email": "john@example.com",
        "phoneNumber": "+1234567890",
        "role": "CUSTOMER",
        "isEmailVerified": True,
        "isPhoneVerified": False,
        "kycStatus": "PENDING_REVIEW",
        "onboardingStatus": "IN_PROGRESS",
    }
    user.update(overrides)
    return user


def _auth_response(user: dict[str, Any], access: str, refresh: str) -> dict[str, Any]:
    return {"user": user, "accessToken": access, "refreshToken": refresh}


MOCK_INVENTORY = [
    {"id": 1, "name": "Product A", "sku": "SKU001", "quantity": 100, "location": "Warehouse 1",
     "price": 10, "category": "Electronics", "supplierId": MOCK_USER_ID},
    {"id": 2, "name": "Product B", "sku": "SKU002", "quantity": 150, "location": "Warehouse 2",
     "price": 20, "category": "Clothing", "supplierId": MOCK_USER_ID},
    {"id": 3, "name": "Product C", "sku": "SKU003", "quantity": 75, "location": "Warehouse 1",
     "price": 30, "category": "Books", "supplierId": MOCK_USER_ID},
]

MOCK_ORDERS = [
    {"id": 1, "orderNumber": "ORD12345", "customerId": MOCK_USER_ID,
     "items": [{"productId": "product-1", "quantity": 2, "price": 100},
               {"productId": "product-2", "quantity": 1, "price": 50}],
     "totalAmount": 250, "status": "PROCESSING",
     "createdAt": "2024-07-26T10:00:00Z", "updatedAt": "2024-07-26T10:30:00Z"},
    {"id": 2, "orderNumber": "ORD67890", "customerId": "user-456",
     "items": [{"productId": "product-3", "quantity": 3, "price": 20},
               {"productId": "product-4", "quantity": 1, "price": 30}],
     "totalAmount": 90, "status": "PENDING",
     "createdAt": "2024-07-27T14:00:00Z", "updatedAt": "2024-07-27T14:15:00Z"},
]


def _find_order(data: Any = None, id: str = "") -> dict[str, Any] | None:
    return next((order for order in MOCK_ORDERS if str(order["id"]) == id), None)


MOCK_RESPONSES: dict[str, dict[str, MockHandler]] = {
    "POST": {
        "/auth/register": lambda data=None: _auth_response(
            _mock_user(
                firstName=(data or {}).get("firstName", ""),
                lastName=(data or {}).get("lastName", ""),
                name=f"{(data or {}).get('firstName', '')} {(data or {}).get('lastName', '')}".strip(),
                email=(data or {}).get("email", ""),
                role=(data or {}).get("role") or "CUSTOMER",
                isEmailVerified=False,
                onboardingStatus="PENDING",
            ),
            "mock_access_token",
            "mock_refresh_token",
        ),
        "/auth/login": lambda data=None: _auth_response(
            _mock_user(email=(data or {}).get("email", "")),
            "mock_access_token",
            "mock_refresh_token",
        ),
        "/auth/refresh": lambda data=None: _auth_response(
            _mock_user(), "new_mock_access_token", "new_mock_refresh_token"
        ),
        "/auth/logout": lambda data=None: {"success": True},
        "/kyc/start": lambda data=None: "IN_PROGRESS",
        "/kyc/documents": lambda data=None: {
            "id": "doc-123",
            "type": (data or {}).get("type"),
            "status": "PENDING",
            "uploadedAt": _now(),
            "url": "https://example.com/document.pdf",
        },
        "/kyc/submit": lambda data=None: {
            "status": "PENDING_REVIEW",
            "referenceId": "kyc-ref-123",
        },
        "/onboarding/start": lambda data=None: {
            "currentStep": 0,
            "completedSteps": [],
            "completed": False,
        },
        "/onboarding/complete": lambda data=None: {"success": True, "completedAt": _now()},
        "/inventory": lambda data=None: {**(data or {}), "id": uuid.uuid4().int % 100000},
        "/orders": lambda data=None: {
            **(data or {}),
            "id": uuid.uuid4().int % 100000,
            "orderNumber": f"ORD{10000 + uuid.uuid4().int % 90000}",
            "createdAt": _now(),
            "updatedAt": _now(),
        },
    },
    "GET": {
        "/users/me": lambda data=None: _mock_user(),
        "/kyc/status": lambda data=None: {
            "status": "IN_PROGRESS",
            "documents": [
                {"id": "doc-1", "type": "ID_CARD", "status": "PENDING",
                 "uploadedAt": "2023-05-01T12:00:00Z", "url": "https://example.com/id_card.pdf"},
                {"id": "doc-2", "type": "UTILITY_BILL", "status": "PENDING",
                 "uploadedAt": "2023-05-01T12:05:00Z", "url": "https://example.com/utility_bill.pdf"},
            ],
        },
        "/onboarding/progress": lambda data=None: {
            "currentStep": 2,
            "completedSteps": [0, 1],
            "completed": False,
        },
        "/inventory": lambda data=None: list(MOCK_INVENTORY),
        "/orders": lambda data=None: list(MOCK_ORDERS),
        "/orders/:id": _find_order,
    },
    "PUT": {
        "/users/me/profile": lambda data=None: {**_mock_user(), **(data or {})},
        "/onboarding/step/:step_id": lambda data=None, step_id="0": {
            "id": int(step_id),
            "status": (data or {}).get("status", "COMPLETED"),
            "data": (data or {}).get("data", {}),
        },
        "/inventory/:id": lambda data=None, id="": data,
        "/orders/:id": lambda data=None, id="": data,
    },
    "DELETE": {
        "/inventory/:id": lambda data=None, id="": {"success": True, "deletedId": id},
        "/orders/:id": lambda data=None, id="": {"success": True, "deletedId": id},
    },
}


def _template_regex(template: str) -> re.Pattern[str]:
    pattern = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", template)
    return re.compile(f"^{pattern}$")


def resolve_mock(method: str, path: str) -> tuple[MockHandler, dict[str, str]] | None:
    """
    Find the mock handler for a request.

    Exact routes win over templated ones; query strings are ignored.

    Returns:
        (handler, path params) or None when no route matches
    """
    routes = MOCK_RESPONSES.get(method.upper(), {})
    path = path.split("?", 1)[0]
    if path in routes:
        return routes[path], {}
    for template, handler in routes.items():
        if ":" not in template:
            continue
        match = _template_regex(template).match(path)
        if match:
            return handler, match.groupdict()
    return None
