"""Error taxonomy for order building, hashing and signing.

Validation errors are raised by the normalizer before any hash exists.
A signature that recovers to a different address is *not* an error; the
validator returns ``False`` for it.
"""

from __future__ import annotations


class OrderUtilsError(Exception):
    """Base class for every error raised by this package."""


# ── Input validation ────────────────────────────────────────────


class OrderValidationError(OrderUtilsError, ValueError):
    """Raw order data could not be normalized."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class InvalidAddressError(OrderValidationError):
    """Malformed hex or wrong length for a 20-byte address."""


class InvalidAmountError(OrderValidationError):
    """Non-numeric, negative, zero (amounts) or wider than 256 bits."""


class InvalidFeeRateError(OrderValidationError):
    """Fee rate outside ``0..10000`` basis points."""


class InvalidEnumValueError(OrderValidationError):
    """Value outside a closed on-chain enumeration (side, signature type)."""


class InvalidSaltError(OrderValidationError):
    """Salt source returned a value that cannot occupy the salt slot."""


# ── Configuration ───────────────────────────────────────────────


class UnsupportedChainError(OrderUtilsError, LookupError):
    """No domain is registered for a (contract, chain id) pair."""

    def __init__(self, chain_id: int, contract: str | None = None) -> None:
        self.chain_id = chain_id
        self.contract = contract
        if contract is None:
            msg = f"no contracts registered for chain {chain_id}"
        else:
            msg = f"no {contract} domain registered for chain {chain_id}"
        super().__init__(msg)


class InvalidDomainTableError(OrderUtilsError, ValueError):
    """The domain table file is structurally invalid."""


# ── Signatures ──────────────────────────────────────────────────


class MalformedSignatureError(OrderUtilsError, ValueError):
    """Signature bytes are structurally invalid (length, v, r/s)."""


class SigningFailedError(OrderUtilsError, RuntimeError):
    """The signing backend failed, timed out or returned garbage."""
