"""Contract registry — EIP-712 domains per (exchange variant, chain id).

The table itself lives in ``contracts.yaml`` next to this module so it can
be audited as data.  ``CONTRACTS_FILE`` points the default registry at a
different table.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml
from eth_utils import is_checksum_address, is_hex_address, to_checksum_address

from poly_order_utils.config.settings import settings
from poly_order_utils.core.errors import (
    InvalidDomainTableError,
    InvalidEnumValueError,
    UnsupportedChainError,
)
from poly_order_utils.core.logger import get_logger
from poly_order_utils.models.domain import ContractConfig, Domain, VerifyingContract

logger = get_logger("config.contracts")

DEFAULT_CONTRACTS_FILE = Path(__file__).with_name("contracts.yaml")


def _address(value: Any, where: str) -> str:
    if not isinstance(value, str) or not is_hex_address(value):
        raise InvalidDomainTableError(f"{where}: invalid address {value!r}")
    # Mixed case is an EIP-55 claim and must hold; only all-lowercase is unchecked
    if value != value.lower() and not is_checksum_address(value):
        raise InvalidDomainTableError(f"{where}: bad EIP-55 checksum {value!r}")
    return to_checksum_address(value)


def _text(value: Any, where: str) -> str:
    # YAML turns an unquoted `version: 1` into an int; the domain hashes bytes
    if not isinstance(value, str) or not value:
        raise InvalidDomainTableError(f"{where}: expected a non-empty quoted string, got {value!r}")
    return value


class ContractRegistry:
    """Static lookup of domains and contract addresses.

    Parameters
    ----------
    table:
        Parsed table, ``{chain_id: {collateral, conditional_tokens,
        exchanges: {selector: {name, version, verifying_contract}}}}``.
    """

    def __init__(self, table: Mapping[Any, Any]) -> None:
        self._domains: dict[tuple[VerifyingContract, int], Domain] = {}
        self._configs: dict[int, ContractConfig] = {}

        if not isinstance(table, Mapping) or not table:
            raise InvalidDomainTableError("domain table must be a non-empty mapping")

        for raw_chain, entry in table.items():
            try:
                chain_id = int(raw_chain)
            except (TypeError, ValueError):
                raise InvalidDomainTableError(f"invalid chain id {raw_chain!r}") from None
            if chain_id <= 0 or not isinstance(entry, Mapping):
                raise InvalidDomainTableError(f"chain {raw_chain!r}: invalid entry")

            exchanges = entry.get("exchanges")
            if not isinstance(exchanges, Mapping):
                raise InvalidDomainTableError(f"chain {chain_id}: missing exchanges")

            for contract in VerifyingContract:
                spec = exchanges.get(contract.value)
                where = f"chain {chain_id} {contract.value}"
                if not isinstance(spec, Mapping):
                    raise InvalidDomainTableError(f"{where}: missing domain")
                self._domains[(contract, chain_id)] = Domain(
                    name=_text(spec.get("name"), f"{where}.name"),
                    version=_text(spec.get("version"), f"{where}.version"),
                    chain_id=chain_id,
                    verifying_contract=_address(
                        spec.get("verifying_contract"), f"{where}.verifying_contract"
                    ),
                )

            unknown = set(exchanges) - {c.value for c in VerifyingContract}
            if unknown:
                raise InvalidDomainTableError(
                    f"chain {chain_id}: unknown exchanges {sorted(unknown)}"
                )

            self._configs[chain_id] = ContractConfig(
                chain_id=chain_id,
                exchange=self._domains[(VerifyingContract.CTF_EXCHANGE, chain_id)].verifying_contract,
                neg_risk_exchange=self._domains[
                    (VerifyingContract.NEG_RISK_CTF_EXCHANGE, chain_id)
                ].verifying_contract,
                collateral=_address(entry.get("collateral"), f"chain {chain_id}.collateral"),
                conditional_tokens=_address(
                    entry.get("conditional_tokens"), f"chain {chain_id}.conditional_tokens"
                ),
            )

    @classmethod
    def from_yaml(cls, path: str | Path = DEFAULT_CONTRACTS_FILE) -> ContractRegistry:
        """Load a registry from a YAML domain table."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        registry = cls(data or {})
        logger.debug("contracts.loaded", path=str(path), chains=registry.chain_ids())
        return registry

    def get_domain(self, contract: VerifyingContract, chain_id: int) -> Domain:
        """Return the domain for *contract* on *chain_id*.

        Raises
        ------
        UnsupportedChainError
            If the pair is not in the table.
        """
        try:
            contract = VerifyingContract(contract)
        except ValueError:
            raise InvalidEnumValueError("contract", f"unknown verifying contract {contract!r}") from None
        try:
            return self._domains[(contract, chain_id)]
        except KeyError:
            raise UnsupportedChainError(chain_id, contract.value) from None

    def get_contract_config(self, chain_id: int) -> ContractConfig:
        try:
            return self._configs[chain_id]
        except KeyError:
            raise UnsupportedChainError(chain_id) from None

    def chain_ids(self) -> list[int]:
        return sorted(self._configs)

    def domains(self) -> Iterator[tuple[VerifyingContract, int, Domain]]:
        """Every registered ``(contract, chain_id, domain)``."""
        for (contract, chain_id), domain in sorted(
            self._domains.items(), key=lambda kv: (kv[0][1], kv[0][0].value)
        ):
            yield contract, chain_id, domain


@lru_cache(maxsize=1)
def default_registry() -> ContractRegistry:
    """Registry for the bundled table, or ``CONTRACTS_FILE`` if set."""
    return ContractRegistry.from_yaml(settings.CONTRACTS_FILE or DEFAULT_CONTRACTS_FILE)
