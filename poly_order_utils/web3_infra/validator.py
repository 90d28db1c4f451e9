"""Signature validation by public-key recovery."""

from __future__ import annotations

from eth_keys import keys
from eth_keys.constants import SECPK1_N
from eth_keys.exceptions import BadSignature, ValidationError
from eth_utils import is_hex_address, to_checksum_address

from poly_order_utils.core.errors import MalformedSignatureError
from poly_order_utils.models.order import SIGNATURE_LENGTH


def recover_address(digest: bytes, signature: bytes) -> str:
    """Recover the checksum address that produced *signature* over *digest*.

    Raises
    ------
    MalformedSignatureError
        Wrong lengths, ``v`` outside ``{0, 1, 27, 28}``, or ``r``/``s``
        that do not describe a point on the curve.  High-s signatures are
        rejected too, as the exchange contract does.
    """
    if len(digest) != 32:
        raise MalformedSignatureError(f"digest must be 32 bytes, got {len(digest)}")
    if len(signature) != SIGNATURE_LENGTH:
        raise MalformedSignatureError(
            f"signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}"
        )

    v = signature[64]
    if v in (27, 28):
        v -= 27
    if v not in (0, 1):
        raise MalformedSignatureError(f"invalid recovery parameter v={signature[64]}")

    r = int.from_bytes(signature[0:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    if s > SECPK1_N // 2:
        raise MalformedSignatureError("non-canonical signature: s is in the upper half of the curve order")
    try:
        public_key = keys.Signature(vrs=(v, r, s)).recover_public_key_from_msg_hash(bytes(digest))
    except (BadSignature, ValidationError) as exc:
        raise MalformedSignatureError(f"unrecoverable signature: {exc}") from exc
    return public_key.to_checksum_address()


def validate_signature(address: str, digest: bytes, signature: bytes) -> bool:
    """True if *signature* over *digest* was produced by *address*.

    A well-formed signature from someone else is ``False``, not an error.
    """
    if not isinstance(address, str) or not is_hex_address(address):
        raise ValueError(f"invalid address {address!r}")
    return recover_address(digest, signature) == to_checksum_address(address)
