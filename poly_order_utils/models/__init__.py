"""poly-order-utils — models package."""

from .domain import ContractConfig, Domain, VerifyingContract
from .order import (
    MAX_FEE_RATE_BPS,
    ZERO_ADDRESS,
    Order,
    OrderData,
    OrderHash,
    SignatureType,
    SignedOrder,
    Side,
)

__all__ = [
    "ContractConfig",
    "Domain",
    "MAX_FEE_RATE_BPS",
    "Order",
    "OrderData",
    "OrderHash",
    "SignatureType",
    "SignedOrder",
    "Side",
    "VerifyingContract",
    "ZERO_ADDRESS",
]
