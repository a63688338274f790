"""Service layer exception classes for PriceMe.

The calculation core (cost aggregation and price resolution) never raises;
it degrades to safe values instead. The exceptions below are raised by the
services around it when a request itself is invalid.

Exception Hierarchy:
    ServiceError (base)
    ├── ValidationError
    ├── InvalidStatusTransition
    └── MaterialNotFound
"""


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class ValidationError(ServiceError):
    """Raised when data validation fails.

    Args:
        errors: List of human-readable validation messages

    Example:
        >>> raise ValidationError(["Name: This field is required"])
        ValidationError: Validation failed: Name: This field is required
    """

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")


class InvalidStatusTransition(ServiceError):
    """Raised when a product cannot move between two lifecycle stages.

    Args:
        current: Current status value
        target: Requested status value

    Example:
        >>> raise InvalidStatusTransition("draft", "on_sale")
        InvalidStatusTransition: Cannot move product from 'draft' to 'on_sale'
    """

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move product from '{current}' to '{target}'")


class MaterialNotFound(ServiceError):
    """Raised when a library material cannot be found by ID.

    Args:
        material_id: The library material ID that was not found
    """

    def __init__(self, material_id: int):
        self.material_id = material_id
        super().__init__(f"Library material with ID {material_id} not found")
