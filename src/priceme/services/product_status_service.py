"""Product Status Service.

Provides lifecycle transition functions for products.
State machine: DRAFT -> IN_PROGRESS -> ON_SALE, with ON_SALE -> IN_PROGRESS
for rework, any stage -> INACTIVE, and INACTIVE -> DRAFT to reopen.
"""

import logging
from dataclasses import replace
from typing import Dict, FrozenSet, Iterable, List, Union

from priceme.models.enums import ProductStatus
from priceme.models.product import Product
from priceme.utils.validators import validate_choice

from .exceptions import InvalidStatusTransition, ValidationError
from .logging_utils import get_service_logger, log_operation


logger = get_service_logger(__name__)

StatusLike = Union[ProductStatus, str]

ALLOWED_TRANSITIONS: Dict[ProductStatus, FrozenSet[ProductStatus]] = {
    ProductStatus.DRAFT: frozenset({ProductStatus.IN_PROGRESS, ProductStatus.INACTIVE}),
    ProductStatus.IN_PROGRESS: frozenset({ProductStatus.ON_SALE, ProductStatus.INACTIVE}),
    ProductStatus.ON_SALE: frozenset({ProductStatus.IN_PROGRESS, ProductStatus.INACTIVE}),
    ProductStatus.INACTIVE: frozenset({ProductStatus.DRAFT}),
}


def _coerce_status(status: StatusLike) -> ProductStatus:
    """Resolve a status name, raising ValidationError when it is unknown."""
    is_valid, message = validate_choice(status, ProductStatus, "Status")
    if not is_valid:
        raise ValidationError([message])
    return ProductStatus(status)


def can_transition(current: StatusLike, target: StatusLike) -> bool:
    """Check whether a product may move from one status to another.

    Staying in the same status is always allowed.

    Args:
        current: Current status
        target: Requested status

    Returns:
        True if the move is allowed
    """
    current = _coerce_status(current)
    target = _coerce_status(target)
    if current == target:
        return True
    return target in ALLOWED_TRANSITIONS[current]


def transition_status(product: Product, target: StatusLike) -> Product:
    """Move a product to a new lifecycle status.

    Args:
        product: Product to move
        target: Requested status

    Returns:
        Copy of the product with the new status (the same product when the
        status is unchanged)

    Raises:
        InvalidStatusTransition: If the move is not allowed
        ValidationError: If the target status is unknown
    """
    target = _coerce_status(target)
    current = ProductStatus(product.status)

    if current == target:
        return product

    if not can_transition(current, target):
        log_operation(
            logger,
            operation="transition_status",
            outcome="rejected",
            level=logging.WARNING,
            product_id=product.id,
            current=current.value,
            target=target.value,
        )
        raise InvalidStatusTransition(current.value, target.value)

    log_operation(
        logger,
        operation="transition_status",
        outcome="success",
        product_id=product.id,
        current=current.value,
        target=target.value,
    )
    return replace(product, status=target)


def filter_by_status(products: Iterable[Product], status: StatusLike) -> List[Product]:
    """Return the products in a given status, preserving order."""
    status = _coerce_status(status)
    return [product for product in products if product.status == status]


def on_sale_products(products: Iterable[Product]) -> List[Product]:
    """Return the products currently on sale."""
    return filter_by_status(products, ProductStatus.ON_SALE)
