"""poly-order-utils — builder package."""

from .exchange_order_builder import ExchangeOrderBuilder
from .async_signer import AsyncOrderSigner
from .normalizer import normalize_order
from .salt import SaltGenerator, SequentialSaltGenerator, generate_salt

__all__ = [
    "AsyncOrderSigner",
    "ExchangeOrderBuilder",
    "SaltGenerator",
    "SequentialSaltGenerator",
    "generate_salt",
    "normalize_order",
]
