"""poly-order-utils — web3_infra package.

- eip712: typed-data hashing of orders under an exchange domain
- signer / validator: signing backends and signature recovery
"""

from .eip712 import domain_separator, order_hash, order_struct_hash
from .signer import PrivateKeySigner, Signer
from .validator import recover_address, validate_signature

__all__ = [
    "PrivateKeySigner",
    "Signer",
    "domain_separator",
    "order_hash",
    "order_struct_hash",
    "recover_address",
    "validate_signature",
]
