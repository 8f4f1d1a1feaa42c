"""Domain error taxonomy.

Every failure the core can surface is one of three kinds:

- ``InvalidArgumentError`` - malformed or out-of-range input
- ``NotFoundError`` - referenced aggregate does not exist
- ``AlreadyExistsError`` - uniqueness violation

The HTTP layer maps these kinds to status codes; the core never does.
"""
from typing import Any, Optional


class DomainError(Exception):
    """Base class for all domain errors."""
    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(DomainError, ValueError):
    """Input rejected by a value object, aggregate or port."""
    error_code = "INVALID_ARGUMENT"


class NotFoundError(DomainError):
    """Referenced aggregate does not exist."""
    error_code = "NOT_FOUND"

    def __init__(self, message: str, entity_id: Optional[Any] = None):
        super().__init__(message)
        self.entity_id = entity_id


class ShopNotFoundError(NotFoundError):
    error_code = "ALCOHOL_SHOP_NOT_FOUND"

    def __init__(self, shop_id: Any):
        super().__init__(f"AlcoholShop with id {shop_id} not found", entity_id=shop_id)


class UserNotFoundError(NotFoundError):
    error_code = "USER_NOT_FOUND"

    def __init__(self, user_id: Any):
        super().__init__(f"User not found with id: {user_id}", entity_id=user_id)


class AlreadyExistsError(DomainError):
    """Uniqueness violation."""
    error_code = "ALREADY_EXISTS"


class UsernameAlreadyExistsError(AlreadyExistsError):
    error_code = "USERNAME_ALREADY_EXISTS"

    def __init__(self, username: str):
        super().__init__(f"Username already exists: {username}")
        self.username = username
