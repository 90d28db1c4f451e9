"""Order normalizer — raw ``OrderData`` to canonical ``Order``.

All checks run here, so nothing downstream ever hashes or signs invalid
input.
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Any, Mapping, TypeVar

from eth_utils import is_hex_address, to_checksum_address

from poly_order_utils.builder.salt import SaltGenerator
from poly_order_utils.core.errors import (
    InvalidAddressError,
    InvalidAmountError,
    InvalidEnumValueError,
    InvalidFeeRateError,
    InvalidSaltError,
)
from poly_order_utils.models.order import (
    INT256_MAX,
    MAX_FEE_RATE_BPS,
    UINT256_MAX,
    ZERO_ADDRESS,
    Order,
    OrderData,
    SignatureType,
    Side,
)

_DECIMAL_RE = re.compile(r"^[0-9]+$")

E = TypeVar("E", bound=IntEnum)

# Wallet-kind names used by the CLOB client and exchange docs
SIGNATURE_TYPE_ALIASES: dict[str, SignatureType] = {
    "PROXY": SignatureType.POLY_PROXY,
    "PROXY_WALLET": SignatureType.POLY_PROXY,
    "POLY_PROXY_WALLET": SignatureType.POLY_PROXY,
    "MULTISIG": SignatureType.POLY_GNOSIS_SAFE,
    "MULTISIG_WALLET": SignatureType.POLY_GNOSIS_SAFE,
    "GNOSIS_SAFE": SignatureType.POLY_GNOSIS_SAFE,
    "SAFE": SignatureType.POLY_GNOSIS_SAFE,
}


def parse_address(value: Any, field: str, default: str | None = None) -> str:
    """Parse a hex address into EIP-55 form.

    An empty value takes *default*; without one it is an error.
    """
    if value is None or value == "":
        if default is None:
            raise InvalidAddressError(field, "address is required")
        return default
    if not isinstance(value, str):
        raise InvalidAddressError(field, f"expected hex string, got {type(value).__name__}")
    candidate = value.strip()
    if not is_hex_address(candidate):
        raise InvalidAddressError(field, f"malformed address {value!r}")
    return to_checksum_address(candidate)


def parse_uint256(value: Any, field: str, *, positive: bool = False, default: int | None = None) -> int:
    """Parse a decimal string (or int) into an unsigned 256-bit integer."""
    if value is None or value == "":
        if default is None:
            raise InvalidAmountError(field, "value is required")
        return default

    if isinstance(value, bool):
        raise InvalidAmountError(field, "booleans are not amounts")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if text.startswith("-") and _DECIMAL_RE.match(text[1:]):
            raise InvalidAmountError(field, f"negative value {value!r}")
        if not _DECIMAL_RE.match(text):
            raise InvalidAmountError(field, f"not a decimal integer: {value!r}")
        number = int(text)
    else:
        raise InvalidAmountError(field, f"expected decimal string, got {type(value).__name__}")

    if number < 0:
        raise InvalidAmountError(field, f"negative value {value!r}")
    if number > UINT256_MAX:
        raise InvalidAmountError(field, "value exceeds 256 bits")
    if positive and number == 0:
        raise InvalidAmountError(field, "value must be greater than zero")
    return number


def parse_fee_rate(value: Any) -> int:
    try:
        fee = parse_uint256(value, "fee_rate_bps", default=0)
    except InvalidAmountError:
        raise InvalidFeeRateError("fee_rate_bps", f"not a valid fee rate: {value!r}") from None
    if fee > MAX_FEE_RATE_BPS:
        raise InvalidFeeRateError("fee_rate_bps", f"{fee} exceeds {MAX_FEE_RATE_BPS} bps")
    return fee


def parse_enum(
    enum_cls: type[E],
    value: Any,
    field: str,
    aliases: Mapping[str, E] | None = None,
) -> E:
    """Resolve *value* to a member of *enum_cls*.

    Accepts a member, its integer code (or code as a string), its name in
    any case, or a key of *aliases*.  Names compare with ``-`` read as
    ``_``.  Anything else is rejected; there is no fallback member.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, bool):
        raise InvalidEnumValueError(field, f"invalid {enum_cls.__name__}: {value!r}")
    if isinstance(value, int):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            try:
                return enum_cls(int(text))
            except ValueError:
                pass
        key = text.upper().replace("-", "_")
        member = enum_cls.__members__.get(key)
        if member is None and aliases:
            member = aliases.get(key)
        if member is not None:
            return member
    raise InvalidEnumValueError(field, f"invalid {enum_cls.__name__}: {value!r}")

    if isinstance(value, int):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            try:
                return enum_cls(int(text))
            except ValueError:
                pass
        member = enum_cls.__members__.get(text.upper())
        if member is not None:
            return member
    raise InvalidEnumValueError(field, f"invalid {enum_cls.__name__}: {value!r}")


def check_salt(salt: Any) -> int:
    if isinstance(salt, bool) or not isinstance(salt, int):
        raise InvalidSaltError("salt", f"salt must be an int, got {type(salt).__name__}")
    if salt < 0:
        raise InvalidSaltError("salt", "salt must be non-negative")
    if salt > INT256_MAX:
        raise InvalidSaltError("salt", "salt exceeds the signed 256-bit range")
    return salt


def normalize_order(data: OrderData, salt_generator: SaltGenerator) -> Order:
    """Validate *data*, apply defaults and attach a fresh salt."""
    maker = parse_address(data.maker, "maker")
    signer = parse_address(data.signer, "signer", default=maker)
    taker = parse_address(data.taker, "taker", default=ZERO_ADDRESS)

    token_id = parse_uint256(data.token_id, "token_id")
    maker_amount = parse_uint256(data.maker_amount, "maker_amount", positive=True)
    taker_amount = parse_uint256(data.taker_amount, "taker_amount", positive=True)
    expiration = parse_uint256(data.expiration, "expiration", default=0)
    nonce = parse_uint256(data.nonce, "nonce", default=0)
    fee_rate_bps = parse_fee_rate(data.fee_rate_bps)

    side = parse_enum(Side, data.side, "side")
    signature_type = parse_enum(
        SignatureType, data.signature_type, "signature_type", SIGNATURE_TYPE_ALIASES
    )

    # Salt last: no entropy is drawn for input that fails validation
    salt = check_salt(salt_generator())

    return Order(
        salt=salt,
        maker=maker,
        signer=signer,
        taker=taker,
        token_id=token_id,
        maker_amount=maker_amount,
        taker_amount=taker_amount,
        expiration=expiration,
        nonce=nonce,
        fee_rate_bps=fee_rate_bps,
        side=side,
        signature_type=signature_type,
    )
