"""Services package - Business logic layer for PriceMe.

This package contains the pricing calculations and the services that
apply them to products, the materials library and user settings.

Architecture:
- Services: Stateless functions organized by domain
- Records: Plain dataclasses from priceme.models, never mutated in place
- Exceptions: Consistent error handling via ServiceError hierarchy
- Validation: Form input validated before it becomes records

Calculation Core (never raises):
- cost_aggregator: Per-unit product cost from material, labor and other lines
- pricing_resolver: Price, profit, margin and markup from one driving value

Service Modules:
- product_pricing_service: Product-level pricing entry point
- product_status_service: Product lifecycle transitions
- product_form_service: Form dictionaries to Product records
- inventory_service: Stock health, restocking and batch stock checks
- settings_service: User settings defaults and updates
- variant_service: Variant price/cost overrides
- sales_analytics_service: Revenue and profit across products on sale

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- logging_utils: Structured operation logging
- dto / dto_utils: Result structures and storage formatting
"""

from .cost_aggregator import (
    compute_cost_breakdown,
    compute_unit_cost,
    effective_batch_size,
    labor_line_cost,
    material_line_cost,
    other_cost_line_cost,
)
from .pricing_resolver import (
    break_even_price,
    driving_value_for_method,
    margin_from_markup,
    markup_from_margin,
    metrics_from_price,
    price_from_method,
    resolve_pricing,
)
from .product_pricing_service import (
    calculate_batch_summary,
    calculate_cost_breakdown,
    calculate_product_pricing,
    set_pricing,
    switch_pricing_method,
)
from .product_status_service import (
    can_transition,
    filter_by_status,
    on_sale_products,
    transition_status,
)
from .product_form_service import parse_product_form
from .inventory_service import (
    StockIssue,
    add_stock,
    check_stock_for_batch,
    is_low_stock,
    link_stock_levels,
    low_stock_materials,
    stock_status,
)
from .settings_service import (
    default_settings,
    merge_settings,
    new_labor_line,
    price_with_tax,
)
from .variant_service import (
    active_variants,
    calculate_variant_pricing,
    total_variant_stock,
)
from .sales_analytics_service import SalesSummary, summarize_sales, units_remaining
from .dto import BatchSummary, CostBreakdown, PricingResult, ProductPricingSnapshot
from .exceptions import (
    InvalidStatusTransition,
    MaterialNotFound,
    ServiceError,
    ValidationError,
)
