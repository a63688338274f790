"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across pricing, inventory and other
service operations.

Usage:
    from priceme.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="calculate_product_pricing",
        outcome="success",
        product_id=12,
        target_price=15.0,
    )
"""

import logging
from typing import Any


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'priceme.services' prefix.

    Example:
        >>> logger = get_service_logger("priceme.services.inventory_service")
        >>> logger.name
        'priceme.services.inventory_service'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"priceme.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "add_stock", "transition_status")
        outcome: Outcome description (e.g., "success", "rejected")
        level: Log level (default: INFO). Use DEBUG for per-keystroke calls.
        **context: Additional context fields (product_id, material_id, ...)

    Example:
        >>> log_operation(
        ...     logger,
        ...     operation="transition_status",
        ...     outcome="rejected",
        ...     level=logging.WARNING,
        ...     product_id=3,
        ...     target="on_sale",
        ... )
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
