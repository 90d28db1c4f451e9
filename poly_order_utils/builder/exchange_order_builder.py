"""ExchangeOrderBuilder — order → hash → signature → signed order.

Configured once with a chain id and an optional salt source; every
operation afterwards is a pure function of its arguments (plus one salt
draw in ``build_order``).
"""

from __future__ import annotations

from poly_order_utils.builder.normalizer import normalize_order
from poly_order_utils.builder.salt import SaltGenerator, generate_salt
from poly_order_utils.config.contracts import ContractRegistry, default_registry
from poly_order_utils.config.settings import settings
from poly_order_utils.core.errors import SigningFailedError
from poly_order_utils.core.logger import get_logger
from poly_order_utils.models.domain import VerifyingContract
from poly_order_utils.models.order import (
    SIGNATURE_LENGTH,
    Order,
    OrderData,
    OrderHash,
    SignedOrder,
)
from poly_order_utils.web3_infra.eip712 import order_hash
from poly_order_utils.web3_infra.signer import Signer
from poly_order_utils.web3_infra.validator import validate_signature

logger = get_logger("builder.exchange_order_builder")


class ExchangeOrderBuilder:
    """Builds and signs CTF exchange orders for one chain.

    Parameters
    ----------
    chain_id:
        Chain the orders settle on.  Defaults to ``settings.CHAIN_ID``.
    salt_generator:
        Zero-argument callable returning a non-negative int.  Defaults to
        :func:`generate_salt`.  Must be thread-safe if ``build_order`` is
        called concurrently.
    registry:
        Domain table.  Defaults to :func:`default_registry`.
    """

    def __init__(
        self,
        chain_id: int | None = None,
        salt_generator: SaltGenerator | None = None,
        registry: ContractRegistry | None = None,
    ) -> None:
        self._chain_id = settings.CHAIN_ID if chain_id is None else chain_id
        self._salt_generator = salt_generator or generate_salt
        self._registry = registry or default_registry()

    @property
    def chain_id(self) -> int:
        return self._chain_id

    # ── Operations ───────────────────────────────────────────────

    def build_order(self, order_data: OrderData) -> Order:
        """Normalize *order_data* into an unsigned :class:`Order`."""
        order = normalize_order(order_data, self._salt_generator)
        logger.debug(
            "order_builder.order_built",
            maker=order.maker,
            token_id=str(order.token_id),
            side=order.side.name,
        )
        return order

    def build_order_hash(
        self,
        order: Order,
        contract: VerifyingContract = VerifyingContract.CTF_EXCHANGE,
    ) -> OrderHash:
        """EIP-712 digest of *order* under *contract*'s domain on this chain."""
        domain = self._registry.get_domain(contract, self._chain_id)
        return order_hash(order, domain)

    def build_order_signature(self, signer: Signer, order_hash: OrderHash) -> bytes:
        """Sign *order_hash* with *signer*.

        Raises
        ------
        SigningFailedError
            The backend raised, or returned something other than 65 bytes.
            Not retried.
        """
        try:
            signature = signer.sign(order_hash)
        except SigningFailedError:
            raise
        except Exception as exc:
            logger.warning("order_builder.signing_failed", error=str(exc))
            raise SigningFailedError(f"signer backend failed: {exc}") from exc

        if not isinstance(signature, (bytes, bytearray)):
            raise SigningFailedError(f"signer returned {type(signature).__name__}, expected bytes")
        if len(signature) != SIGNATURE_LENGTH:
            raise SigningFailedError(
                f"signer returned {len(signature)} bytes, expected {SIGNATURE_LENGTH}"
            )
        return bytes(signature)

    def build_signed_order(
        self,
        signer: Signer,
        order_data: OrderData,
        contract: VerifyingContract = VerifyingContract.CTF_EXCHANGE,
    ) -> SignedOrder:
        """Build, hash and sign in one go; the first failure aborts."""
        order = self.build_order(order_data)
        digest = self.build_order_hash(order, contract)
        signature = self.build_order_signature(signer, digest)

        logger.info(
            "order_builder.order_signed",
            order_hash="0x" + digest.hex(),
            signer=order.signer,
            chain_id=self._chain_id,
            contract=VerifyingContract(contract).value,
        )
        return SignedOrder(order=order, signature=signature, order_hash=digest)

    def verify_signed_order(
        self,
        signed_order: SignedOrder,
        contract: VerifyingContract = VerifyingContract.CTF_EXCHANGE,
    ) -> bool:
        """Recompute the hash and check the signature against ``order.signer``."""
        digest = self.build_order_hash(signed_order.order, contract)
        if signed_order.order_hash is not None and signed_order.order_hash != digest:
            return False
        return validate_signature(signed_order.order.signer, digest, signed_order.signature)
