"""AsyncOrderSigner — off-loop order signing with a timeout.

Signing may block (curve math locally, network I/O for a remote signer),
so it runs on a worker pool and an asyncio caller keeps its event loop.
Threads rather than processes: remote signer clients are rarely picklable.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from poly_order_utils.builder.exchange_order_builder import ExchangeOrderBuilder
from poly_order_utils.config.settings import settings
from poly_order_utils.core.errors import SigningFailedError
from poly_order_utils.core.logger import get_logger
from poly_order_utils.models.domain import VerifyingContract
from poly_order_utils.models.order import OrderData, SignedOrder
from poly_order_utils.web3_infra.signer import Signer

logger = get_logger("builder.async_signer")


class AsyncOrderSigner:
    """Async-safe wrapper around :meth:`ExchangeOrderBuilder.build_signed_order`.

    Parameters
    ----------
    builder:
        Configured order builder.
    signer:
        Signing backend.
    max_workers:
        Size of the signing pool.  Defaults to ``SIGNING_MAX_WORKERS``.
    timeout:
        Seconds allowed per order.  Defaults to ``SIGNING_TIMEOUT_SECONDS``.
    """

    def __init__(
        self,
        builder: ExchangeOrderBuilder,
        signer: Signer,
        max_workers: int | None = None,
        timeout: float | None = None,
    ) -> None:
        self._builder = builder
        self._signer = signer
        self._max_workers = max_workers or settings.SIGNING_MAX_WORKERS
        self._timeout = float(timeout if timeout is not None else settings.SIGNING_TIMEOUT_SECONDS)
        self._pool: ThreadPoolExecutor | None = None

    # ── Lifecycle ────────────────────────────────────────────────

    def start(self) -> None:
        """Start the worker pool.  Idempotent."""
        if self._pool is None:
            self._pool = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix="order-signer",
            )
            logger.info(
                "async_signer.started",
                max_workers=self._max_workers,
                signer=self._signer.address(),
            )

    def shutdown(self, wait: bool = True) -> None:
        """Shutdown the worker pool."""
        if self._pool is not None:
            self._pool.shutdown(wait=wait)
            self._pool = None
            logger.info("async_signer.shutdown")

    # ── Signing ──────────────────────────────────────────────────

    async def sign_order(
        self,
        order_data: OrderData,
        contract: VerifyingContract = VerifyingContract.CTF_EXCHANGE,
        timeout: float | None = None,
    ) -> SignedOrder:
        """Build and sign *order_data* without blocking the event loop.

        Raises
        ------
        RuntimeError
            If the signer has not been started.
        SigningFailedError
            If signing fails or exceeds the timeout.  A timed-out backend
            call is abandoned, not retried.
        OrderValidationError
            If *order_data* is invalid.
        """
        if self._pool is None:
            raise RuntimeError("AsyncOrderSigner not started — call start() first")

        limit = self._timeout if timeout is None else timeout
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(
            self._pool,
            self._builder.build_signed_order,
            self._signer,
            order_data,
            contract,
        )
        try:
            result = await asyncio.wait_for(future, timeout=limit)
        except asyncio.TimeoutError:
            logger.warning("async_signer.timeout", timeout=limit)
            raise SigningFailedError(f"signing timed out after {limit}s") from None

        logger.debug(
            "async_signer.signed",
            order_hash="0x" + result.order_hash.hex(),
        )
        return result

    # ── Context manager ──────────────────────────────────────────

    async def __aenter__(self) -> AsyncOrderSigner:
        self.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.shutdown(wait=True)
