"""EIP-712 domain and per-chain contract addresses."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VerifyingContract(str, Enum):
    """Exchange variant whose domain an order is signed under."""

    CTF_EXCHANGE = "ctf_exchange"
    NEG_RISK_CTF_EXCHANGE = "neg_risk_ctf_exchange"


class Domain(BaseModel):
    """EIP-712 domain exactly as the verifying contract declares it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    chain_id: int = Field(..., gt=0)
    verifying_contract: str


class ContractConfig(BaseModel):
    """Deployed addresses for one chain."""

    model_config = ConfigDict(frozen=True)

    chain_id: int
    exchange: str
    neg_risk_exchange: str
    collateral: str
    conditional_tokens: str
