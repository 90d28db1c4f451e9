"""EIP-712 typed-data hashing for CTF exchange orders.

The digest must equal what ``CTFExchange.hashOrder`` computes on-chain::

    keccak256(0x1901 ‖ domainSeparator ‖ hashStruct(order))

so the Order type string, field order and ABI types below mirror the
Solidity ``Order`` struct exactly.
"""

from __future__ import annotations

from eth_abi import encode
from eth_utils import keccak

from poly_order_utils.models.domain import Domain
from poly_order_utils.models.order import Order, OrderHash

EIP712_PREFIX = b"\x19\x01"

EIP712_DOMAIN_TYPE = (
    "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)
DOMAIN_TYPEHASH = keccak(text=EIP712_DOMAIN_TYPE)

# (struct member, Order attribute, ABI type), in contract order
ORDER_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("salt", "salt", "uint256"),
    ("maker", "maker", "address"),
    ("signer", "signer", "address"),
    ("taker", "taker", "address"),
    ("tokenId", "token_id", "uint256"),
    ("makerAmount", "maker_amount", "uint256"),
    ("takerAmount", "taker_amount", "uint256"),
    ("expiration", "expiration", "uint256"),
    ("nonce", "nonce", "uint256"),
    ("feeRateBps", "fee_rate_bps", "uint256"),
    ("side", "side", "uint8"),
    ("signatureType", "signature_type", "uint8"),
)

ORDER_TYPE = "Order(" + ",".join(f"{abi} {member}" for member, _, abi in ORDER_FIELDS) + ")"
ORDER_TYPEHASH = keccak(text=ORDER_TYPE)


def domain_separator(domain: Domain) -> bytes:
    """``hashStruct(EIP712Domain)`` for *domain*."""
    return keccak(
        encode(
            ["bytes32", "bytes32", "bytes32", "uint256", "address"],
            [
                DOMAIN_TYPEHASH,
                keccak(text=domain.name),
                keccak(text=domain.version),
                domain.chain_id,
                domain.verifying_contract,
            ],
        )
    )


def order_struct_hash(order: Order) -> bytes:
    """``hashStruct(Order)``: every member in its own 32-byte slot."""
    types = ["bytes32"] + [abi for _, _, abi in ORDER_FIELDS]
    values: list[object] = [ORDER_TYPEHASH]
    for _, attr, abi in ORDER_FIELDS:
        value = getattr(order, attr)
        values.append(value if abi == "address" else int(value))
    return keccak(encode(types, values))


def order_hash(order: Order, domain: Domain) -> OrderHash:
    """Final 32-byte digest that gets signed."""
    return keccak(EIP712_PREFIX + domain_separator(domain) + order_struct_hash(order))
