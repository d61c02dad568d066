"""Node configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EVM_RPC = "http://localhost:8545/"
DEFAULT_EVM_CHAIN_ID = 31337
DEFAULT_EVM_PORTAL_ADDRESS = "0x8A791620dd6260079BF849Dc5567aDC3F2FdC318"


@dataclass
class OChainConfig:
    """Settings for reaching the EVM chain that hosts the portal contract."""

    evm_rpc: str = DEFAULT_EVM_RPC
    evm_chain_id: int = DEFAULT_EVM_CHAIN_ID
    evm_portal_address: str = DEFAULT_EVM_PORTAL_ADDRESS


def default_config() -> OChainConfig:
    """Return a fresh configuration holding the default values."""
    return OChainConfig(
        evm_rpc=DEFAULT_EVM_RPC,
        evm_chain_id=DEFAULT_EVM_CHAIN_ID,
        evm_portal_address=DEFAULT_EVM_PORTAL_ADDRESS,
    )