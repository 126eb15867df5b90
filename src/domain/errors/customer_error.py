"""Customer domain errors.

Defines customer-specific error constants for validation and state
management.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used as ValueError messages from __post_init__ and mutators
    - Used as Failure(error=...) values by application handlers

Usage:
    from src.domain.errors import CustomerError

    if not name:
        raise ValueError(CustomerError.NAME_REQUIRED)
"""


class CustomerError:
    """Customer error constants.

    Error Categories:
        - Validation errors: ID_REQUIRED, NAME_REQUIRED, address fields
        - State errors: ADDRESS_REQUIRED_TO_ACTIVATE
        - Reward errors: INVALID_REWARD_POINTS
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    ID_REQUIRED = "Customer id is required"
    """Every customer carries a unique string identifier."""

    NAME_REQUIRED = "Customer name is required"

    STREET_REQUIRED = "Street is required"
    NUMBER_INVALID = "Street number must be greater than zero"
    ZIP_REQUIRED = "Zip is required"
    CITY_REQUIRED = "City is required"

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    ADDRESS_REQUIRED_TO_ACTIVATE = "Address is mandatory to activate a customer"
    """A customer cannot be activated before an address is assigned."""

    # -------------------------------------------------------------------------
    # Reward Errors
    # -------------------------------------------------------------------------

    INVALID_REWARD_POINTS = "Reward points must be non-negative"
