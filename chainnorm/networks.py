"""Chain families, numeric bounds, and family detection."""

from enum import Enum
from typing import Final

import base58
from bech32 import bech32_decode

# Numeric bounds
MAX_SAFE_VALUE: Final[int] = 2**256 - 1
MAX_GAS_LIMIT: Final[int] = 2**64 - 1
MAX_GAS_PRICE: Final[int] = 2**256 - 1
MAX_CHAIN_ID: Final[int] = 2**256 - 1

EVM_ADDRESS_LENGTH = 42
SOLANA_PUBKEY_BYTES = 32


class NamedEnum(Enum):
    """Enum whose members can be looked up by name in any case."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None


class ChainFamily(NamedEnum):
    """Supported blockchain protocol families."""

    EVM = "EVM"
    COSMOS = "COSMOS"
    SOLANA = "SOLANA"


def coerce_family(family: ChainFamily | str) -> ChainFamily:
    """Turn a family name (any case) or member into a ChainFamily.

    Raises:
        ValueError: If the name is not a supported family
    """
    if isinstance(family, ChainFamily):
        return family
    return ChainFamily(family)


def detect_family(address: str) -> ChainFamily:
    """Detect the chain family from an address's encoding.

    Args:
        address: Wallet or contract address string

    Returns:
        ChainFamily.EVM, ChainFamily.COSMOS or ChainFamily.SOLANA

    Raises:
        ValueError: If address format is unrecognized
    """
    if is_evm_address(address):
        return ChainFamily.EVM
    if is_bech32_address(address):
        return ChainFamily.COSMOS
    if is_solana_address(address):
        return ChainFamily.SOLANA
    raise ValueError(f"Unknown address format: {address}")


def is_evm_address(address: str) -> bool:
    """Check if address is EVM format (0x-prefixed, 40 hex digits)."""
    if not isinstance(address, str) or len(address) != EVM_ADDRESS_LENGTH:
        return False
    if not address.startswith("0x"):
        return False
    return all(c in "0123456789abcdefABCDEF" for c in address[2:])


def is_bech32_address(address: str) -> bool:
    """Check if address decodes as bech32 with a valid checksum."""
    if not isinstance(address, str) or not address:
        return False
    hrp, data = bech32_decode(address)[:2]
    return hrp is not None and data is not None


def is_solana_address(address: str) -> bool:
    """Check if address is a Base58-encoded 32-byte Solana public key."""
    if not isinstance(address, str) or address.startswith("0x"):
        return False
    if not 32 <= len(address) <= 44:
        return False
    try:
        decoded = base58.b58decode(address)
    except ValueError:
        return False
    return len(decoded) == SOLANA_PUBKEY_BYTES
