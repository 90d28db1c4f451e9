"""Signer capability and the private-key backed implementation.

Anything with ``sign(digest) -> bytes`` and ``address() -> str`` can sign
orders: a local key, a hardware module, a remote signing service.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from eth_account import Account
from eth_keys import keys

from poly_order_utils.config.settings import settings
from poly_order_utils.core.logger import get_logger

logger = get_logger("web3_infra.signer")

DIGEST_LENGTH = 32
# Ethereum tooling expects v in {27, 28}
RECOVERY_OFFSET = 27


@runtime_checkable
class Signer(Protocol):
    """Signing backend for 32-byte digests."""

    def sign(self, digest: bytes) -> bytes:
        """Return a 65-byte recoverable signature ``r ‖ s ‖ v``."""
        ...

    def address(self) -> str:
        """Return the signing address (EIP-55 checksum form)."""
        ...


class PrivateKeySigner:
    """secp256k1 signer backed by an in-memory private key.

    Parameters
    ----------
    private_key:
        Hex-encoded private key (``0x`` prefix optional) or 32 raw bytes.
    """

    def __init__(self, private_key: str | bytes) -> None:
        account = Account.from_key(private_key)
        self._key = keys.PrivateKey(bytes(account.key))
        self._address = account.address

    @classmethod
    def from_settings(cls) -> PrivateKeySigner:
        """Build from ``POLYMARKET_PRIVATE_KEY``."""
        if not settings.POLYMARKET_PRIVATE_KEY:
            raise ValueError("POLYMARKET_PRIVATE_KEY is not set")
        return cls(settings.POLYMARKET_PRIVATE_KEY)

    def address(self) -> str:
        return self._address

    def sign(self, digest: bytes) -> bytes:
        if len(digest) != DIGEST_LENGTH:
            raise ValueError(f"digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
        signature = self._key.sign_msg_hash(bytes(digest))
        rs = signature.r.to_bytes(32, "big") + signature.s.to_bytes(32, "big")
        logger.debug("signer.signed", address=self._address, digest="0x" + bytes(digest).hex())
        return rs + bytes([signature.v + RECOVERY_OFFSET])

    def __repr__(self) -> str:
        return f"PrivateKeySigner(address={self._address!r})"
