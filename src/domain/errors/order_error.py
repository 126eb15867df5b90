"""Order domain errors.

Defines order and order item error constants.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Raised as ValueError messages at construction time
    - Never raised for lookups (missing orders are NotFoundError results)

Usage:
    from src.domain.errors import OrderError

    if not items:
        raise ValueError(OrderError.ITEMS_REQUIRED)
"""


class OrderError:
    """Order error constants.

    Error Categories:
        - Order validation: ID_REQUIRED, CUSTOMER_ID_REQUIRED, ITEMS_REQUIRED
        - Item validation: ITEM_ID_REQUIRED, ITEM_QUANTITY_INVALID, ...
        - Item collection: ITEM_NOT_IN_ORDER, DUPLICATE_ITEM_ID
    """

    # -------------------------------------------------------------------------
    # Order Validation
    # -------------------------------------------------------------------------

    ID_REQUIRED = "Order id is required"
    CUSTOMER_ID_REQUIRED = "Order customer id is required"
    ITEMS_REQUIRED = "Order must contain at least one item"
    """An order with zero items is invalid at all times."""

    # -------------------------------------------------------------------------
    # Order Item Validation
    # -------------------------------------------------------------------------

    ITEM_ID_REQUIRED = "Order item id is required"
    ITEM_NAME_REQUIRED = "Order item name is required"
    ITEM_PRODUCT_ID_REQUIRED = "Order item product id is required"
    ITEM_QUANTITY_INVALID = "Order item quantity must be greater than zero"
    ITEM_PRICE_NEGATIVE = "Order item price must be non-negative"

    # -------------------------------------------------------------------------
    # Item Collection
    # -------------------------------------------------------------------------

    ITEM_NOT_IN_ORDER = "Order item is not part of this order"
    DUPLICATE_ITEM_ID = "Order item ids must be unique within an order"
