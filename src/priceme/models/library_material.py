"""
LibraryMaterial model for the materials inventory.

The materials library keeps one record per material the user buys, with
its price and stock. Product material lines can link to a library material
to read its stock level (percentage-of-stock lines) or to check whether a
batch can be made.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class LibraryMaterial:
    """
    Material tracked in the inventory library.

    Attributes:
        name: Material name
        unit: Unit of measurement
        price: Total amount invested in this material
        quantity: Total quantity purchased
        price_per_unit: Latest price per unit
        stock_level: Quantity currently in stock
        reorder_point: Stock level at or below which the material is low
        category: Optional category
        supplier: Optional supplier name
        supplier_link: Optional supplier URL
        details: Optional free-form details
        last_purchased_date: Date of the latest purchase
        last_purchased_price: Price per unit paid in the latest purchase
        last_purchased_quantity: Quantity bought in the latest purchase
        id: Identifier assigned by the owning application
    """

    name: str
    unit: str
    price: float = 0.0
    quantity: float = 0.0
    price_per_unit: float = 0.0
    stock_level: float = 0.0
    reorder_point: float = 0.0
    category: Optional[str] = None
    supplier: Optional[str] = None
    supplier_link: Optional[str] = None
    details: Optional[str] = None
    last_purchased_date: Optional[date] = None
    last_purchased_price: Optional[float] = None
    last_purchased_quantity: Optional[float] = None
    id: Optional[int] = None

    def __repr__(self) -> str:
        """String representation of library material."""
        return (
            f"LibraryMaterial(id={self.id}, name='{self.name}', "
            f"stock_level={self.stock_level})"
        )
