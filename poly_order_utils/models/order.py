"""Order models — raw input, canonical order and signed order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Union

from eth_utils import is_checksum_address
from pydantic import BaseModel, ConfigDict, Field, SkipValidation, field_validator

from poly_order_utils.core.errors import MalformedSignatureError

UINT256_MAX = 2**256 - 1
INT256_MAX = 2**255 - 1
MAX_FEE_RATE_BPS = 10_000
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
SIGNATURE_LENGTH = 65

# 32-byte keccak digest of (Order, Domain)
OrderHash = bytes


class Side(IntEnum):
    """Order side, numbered as the exchange contract encodes it."""

    BUY = 0
    SELL = 1


class SignatureType(IntEnum):
    """Wallet kind behind the signature, numbered as the exchange encodes it."""

    EOA = 0
    POLY_PROXY = 1
    POLY_GNOSIS_SAFE = 2


class OrderData(BaseModel):
    """Loosely-typed order input as a caller supplies it.

    Amounts, ids and timestamps are decimal strings (ints are accepted);
    addresses are hex strings.  ``None`` or an empty string means "use the
    default".  Fields are stored exactly as given: pydantic must not coerce
    ``True`` into ``1`` or ``1.0`` into ``1`` before the normalizer sees them.
    """

    model_config = ConfigDict(frozen=True)

    maker: SkipValidation[Optional[str]] = None
    taker: SkipValidation[Optional[str]] = None
    token_id: SkipValidation[Union[str, int]]
    maker_amount: SkipValidation[Union[str, int]]
    taker_amount: SkipValidation[Union[str, int]]
    side: SkipValidation[Union[Side, str, int]]
    fee_rate_bps: SkipValidation[Union[str, int]] = "0"
    nonce: SkipValidation[Union[str, int]] = ""
    signer: SkipValidation[Optional[str]] = None
    expiration: SkipValidation[Union[str, int]] = ""
    signature_type: SkipValidation[Union[SignatureType, str, int]] = SignatureType.EOA


class Order(BaseModel):
    """Canonical order, field-for-field what the exchange contract hashes."""

    model_config = ConfigDict(frozen=True)

    salt: int = Field(..., ge=0, le=INT256_MAX)
    maker: str
    signer: str
    taker: str = ZERO_ADDRESS
    token_id: int = Field(..., ge=0, le=UINT256_MAX)
    maker_amount: int = Field(..., gt=0, le=UINT256_MAX)
    taker_amount: int = Field(..., gt=0, le=UINT256_MAX)
    expiration: int = Field(default=0, ge=0, le=UINT256_MAX)
    nonce: int = Field(default=0, ge=0, le=UINT256_MAX)
    fee_rate_bps: int = Field(default=0, ge=0, le=MAX_FEE_RATE_BPS)
    side: Side
    signature_type: SignatureType = SignatureType.EOA

    @field_validator("maker", "signer", "taker")
    @classmethod
    def checksummed(cls, v: str) -> str:
        """Addresses are stored in EIP-55 form only."""
        if not is_checksum_address(v):
            raise ValueError("address must be an EIP-55 checksum address")
        return v


@dataclass(frozen=True)
class SignedOrder:
    """An order together with its 65-byte signature (r ‖ s ‖ v)."""

    order: Order
    signature: bytes
    order_hash: Optional[OrderHash] = None

    def __post_init__(self) -> None:
        if len(self.signature) != SIGNATURE_LENGTH:
            raise MalformedSignatureError(
                f"signature must be {SIGNATURE_LENGTH} bytes, got {len(self.signature)}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Render in the exchange's JSON order shape."""
        o = self.order
        return {
            "salt": o.salt,
            "maker": o.maker,
            "signer": o.signer,
            "taker": o.taker,
            "tokenId": str(o.token_id),
            "makerAmount": str(o.maker_amount),
            "takerAmount": str(o.taker_amount),
            "expiration": str(o.expiration),
            "nonce": str(o.nonce),
            "feeRateBps": str(o.fee_rate_bps),
            "side": o.side.name,
            "signatureType": int(o.signature_type),
            "signature": "0x" + self.signature.hex(),
        }
