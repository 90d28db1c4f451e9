"""poly-order-utils — build, hash and sign CTF exchange orders."""

from .builder import AsyncOrderSigner, ExchangeOrderBuilder, SequentialSaltGenerator, generate_salt
from .config.contracts import ContractRegistry, default_registry
from .core.errors import (
    InvalidAddressError,
    InvalidAmountError,
    InvalidDomainTableError,
    InvalidEnumValueError,
    InvalidFeeRateError,
    InvalidSaltError,
    MalformedSignatureError,
    OrderUtilsError,
    OrderValidationError,
    SigningFailedError,
    UnsupportedChainError,
)
from .core.logger import get_logger, setup_logging
from .models import (
    Domain,
    Order,
    OrderData,
    SignatureType,
    SignedOrder,
    Side,
    VerifyingContract,
)
from .web3_infra import PrivateKeySigner, Signer, validate_signature

__all__ = [
    "AsyncOrderSigner",
    "ContractRegistry",
    "Domain",
    "ExchangeOrderBuilder",
    "InvalidAddressError",
    "InvalidAmountError",
    "InvalidDomainTableError",
    "InvalidEnumValueError",
    "InvalidFeeRateError",
    "InvalidSaltError",
    "MalformedSignatureError",
    "Order",
    "OrderData",
    "OrderUtilsError",
    "OrderValidationError",
    "PrivateKeySigner",
    "SequentialSaltGenerator",
    "SignatureType",
    "SignedOrder",
    "Side",
    "Signer",
    "SigningFailedError",
    "UnsupportedChainError",
    "VerifyingContract",
    "default_registry",
    "generate_salt",
    "get_logger",
    "setup_logging",
    "validate_signature",
]
