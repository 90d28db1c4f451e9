"""Tests for web3_infra/eip712.py — pinned against the deployed exchange's hashing."""

from __future__ import annotations

import pytest
from eth_utils import keccak

from poly_order_utils.config.contracts import default_registry
from poly_order_utils.models import Order, SignatureType, Side, VerifyingContract
from poly_order_utils.web3_infra.eip712 import (
    DOMAIN_TYPEHASH,
    EIP712_DOMAIN_TYPE,
    ORDER_TYPE,
    ORDER_TYPEHASH,
    domain_separator,
    order_hash,
    order_struct_hash,
)

from .conftest import (
    ADDRESS,
    GOLDEN_DOMAIN_SEPARATOR,
    GOLDEN_NEG_RISK_DOMAIN_SEPARATOR,
    GOLDEN_NEG_RISK_ORDER_HASH,
    GOLDEN_ORDER_HASH,
    GOLDEN_SALT,
    GOLDEN_STRUCT_HASH,
    OTHER_ADDRESS,
)

ZERO = "0x0000000000000000000000000000000000000000"


@pytest.fixture
def order() -> Order:
    return Order(
        salt=GOLDEN_SALT,
        maker=ADDRESS,
        signer=ADDRESS,
        taker=ZERO,
        token_id=1234,
        maker_amount=100_000_000,
        taker_amount=50_000_000,
        expiration=0,
        nonce=0,
        fee_rate_bps=100,
        side=Side.BUY,
        signature_type=SignatureType.EOA,
    )


@pytest.fixture
def domain():
    return default_registry().get_domain(VerifyingContract.CTF_EXCHANGE, 137)


@pytest.fixture
def neg_risk_domain():
    return default_registry().get_domain(VerifyingContract.NEG_RISK_CTF_EXCHANGE, 137)


class TestTypeHashes:

    def test_domain_type(self):
        assert EIP712_DOMAIN_TYPE == (
            "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
        )
        assert DOMAIN_TYPEHASH.hex() == (
            "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"
        )

    def test_order_type_matches_contract_struct(self):
        assert ORDER_TYPE == (
            "Order(uint256 salt,address maker,address signer,address taker,"
            "uint256 tokenId,uint256 makerAmount,uint256 takerAmount,"
            "uint256 expiration,uint256 nonce,uint256 feeRateBps,"
            "uint8 side,uint8 signatureType)"
        )
        # ORDER_TYPEHASH constant in the exchange's OrderStructs.sol
        assert ORDER_TYPEHASH.hex() == (
            "a852566c4e14d00869b6db0220888a9090a13eccdaea03713ff0a3d27bf9767c"
        )


class TestGoldenVector:

    def test_domain_separator(self, domain):
        assert domain_separator(domain) == GOLDEN_DOMAIN_SEPARATOR

    def test_neg_risk_domain_separator(self, neg_risk_domain):
        assert domain_separator(neg_risk_domain) == GOLDEN_NEG_RISK_DOMAIN_SEPARATOR

    def test_struct_hash(self, order):
        assert order_struct_hash(order) == GOLDEN_STRUCT_HASH

    def test_order_hash(self, order, domain):
        digest = order_hash(order, domain)
        assert len(digest) == 32
        assert digest == GOLDEN_ORDER_HASH

    def test_order_hash_is_prefixed_keccak(self, order, domain):
        expected = keccak(b"\x19\x01" + GOLDEN_DOMAIN_SEPARATOR + GOLDEN_STRUCT_HASH)
        assert order_hash(order, domain) == expected

    def test_neg_risk_order_hash(self, order, neg_risk_domain):
        assert order_hash(order, neg_risk_domain) == GOLDEN_NEG_RISK_ORDER_HASH


class TestProperties:

    def test_deterministic(self, order, domain):
        assert order_hash(order, domain) == order_hash(order, domain)
        rebuilt = Order(**order.model_dump())
        assert order_hash(rebuilt, domain) == order_hash(order, domain)

    def test_domain_separation(self, order, domain, neg_risk_domain):
        assert order_hash(order, domain) != order_hash(order, neg_risk_domain)

    def test_chain_separation(self, order, domain):
        amoy = domain.model_copy(update={"chain_id": 80002})
        assert order_hash(order, domain) != order_hash(order, amoy)

    @pytest.mark.parametrize("field,value", [
        ("salt", GOLDEN_SALT + 1),
        ("maker", OTHER_ADDRESS),
        ("signer", OTHER_ADDRESS),
        ("taker", OTHER_ADDRESS),
        ("token_id", 1235),
        ("maker_amount", 100_000_001),
        ("taker_amount", 50_000_001),
        ("expiration", 1_700_000_000),
        ("nonce", 1),
        ("fee_rate_bps", 0),
        ("side", Side.SELL),
        ("signature_type", SignatureType.POLY_PROXY),
    ])
    def test_single_field_change_changes_hash(self, order, domain, field, value):
        changed = order.model_copy(update={field: value})
        assert order_hash(changed, domain) != order_hash(order, domain)
