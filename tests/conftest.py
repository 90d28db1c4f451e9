"""Shared fixtures and pinned EIP-712 vectors."""

from __future__ import annotations

import pytest

from poly_order_utils.builder import ExchangeOrderBuilder
from poly_order_utils.models import OrderData, Side, SignatureType
from poly_order_utils.web3_infra import PrivateKeySigner

# NOTE: well-known development key (Hardhat account #0), never fund it
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"  # noqa: mock
ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
OTHER_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

GOLDEN_SALT = 12345678
GOLDEN_CHAIN_ID = 137

# Polygon CTF exchange
GOLDEN_DOMAIN_SEPARATOR = bytes.fromhex(
    "1a573e3617c78403b5b4b892827992f027b03d4eaf570048b8ee8cdd84d151be"
)
# Polygon neg-risk CTF exchange
GOLDEN_NEG_RISK_DOMAIN_SEPARATOR = bytes.fromhex(
    "82cb6aa85babb812f4b521a12b10f0cbc68d2b44be7bc02c047004f544adb49f"
)
GOLDEN_STRUCT_HASH = bytes.fromhex(
    "952851ab685eb652e69abc5e39b077fbe5abb5ab89a44dfbff62692ae0320611"
)
GOLDEN_ORDER_HASH = bytes.fromhex(
    "ef694d4780b2bd55d57a2ab0036ac35b5c48ce2f30d00ee7aeafae2c8ab70112"
)
GOLDEN_NEG_RISK_ORDER_HASH = bytes.fromhex(
    "046eca4eb470d810725f4dbc09a8e80c45d9af6edc73069a2eb69f91430134ec"
)
GOLDEN_SIGNATURE = bytes.fromhex(
    "29e87ecfb0433e86335993024d5ad188b23e41f461a18512e958eaca9ede5a82"
    "0976536fa60a1acbee62b0b14f97ac5f6d1f17c0e7630a0a5b4b9e7a160ec1ff"
    "1c"
)


def make_order_data(**overrides) -> OrderData:
    """Golden order data; override any field."""
    defaults = dict(
        maker=ADDRESS,
        taker="",
        token_id="1234",
        maker_amount="100000000",
        taker_amount="50000000",
        side=Side.BUY,
        fee_rate_bps="100",
        nonce="0",
        expiration="0",
        signature_type=SignatureType.EOA,
    )
    defaults.update(overrides)
    return OrderData(**defaults)


@pytest.fixture
def order_data() -> OrderData:
    return make_order_data()


@pytest.fixture
def signer() -> PrivateKeySigner:
    return PrivateKeySigner(PRIVATE_KEY)


@pytest.fixture
def builder() -> ExchangeOrderBuilder:
    return ExchangeOrderBuilder(chain_id=GOLDEN_CHAIN_ID, salt_generator=lambda: GOLDEN_SALT)
