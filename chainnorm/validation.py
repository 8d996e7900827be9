"""Validation predicates for chain values.

Every predicate answers a yes/no question and is total over its inputs:
wrong types, garbage text and out-of-range numbers all give ``False``,
never an exception. Callers branch on the result instead of catching.
"""

import logging
import re
from decimal import Decimal
from typing import Any, assert_never

import base58
from bech32 import bech32_decode

from .abi import parse_abi
from .networks import (
    MAX_CHAIN_ID,
    MAX_GAS_LIMIT,
    MAX_GAS_PRICE,
    MAX_SAFE_VALUE,
    SOLANA_PUBKEY_BYTES,
    ChainFamily,
    coerce_family,
    is_evm_address,
)
from .units import DECIMAL_TEXT_RE, parse_integer

logger = logging.getLogger(__name__)

_SOLANA_ADDRESS_RE = re.compile(r"[0-9a-zA-Z]{32,44}")
_EVM_TX_HASH_RE = re.compile(r"0x[0-9a-fA-F]{64}")
_COSMOS_TX_HASH_RE = re.compile(r"[0-9A-F]{64}")
_SOLANA_TX_HASH_RE = re.compile(r"[0-9a-zA-Z]{87,88}")
_HEX_BODY_RE = re.compile(r"[0-9a-fA-F]*")
_METHOD_SIGNATURE_RE = re.compile(
    r"[a-zA-Z_$][a-zA-Z0-9_$]*\("
    r"(|\s*[a-zA-Z_$][a-zA-Z0-9_$]*(\[\])?(\s*,\s*[a-zA-Z_$][a-zA-Z0-9_$]*(\[\])?)*\s*)"
    r"\)"
)


def is_valid_evm_address(address: Any) -> bool:
    """Check for 0x followed by exactly 40 hex digits (any case)."""
    return is_evm_address(address)


def is_valid_cosmos_address(address: Any, prefix: str, strict: bool = False) -> bool:
    """Validate a Cosmos address for a specific chain prefix.

    Args:
        address: Address to validate
        prefix: Expected human-readable prefix (e.g. 'cosmos', 'osmo')
        strict: Also verify the bech32 checksum

    Returns:
        True if the address is ``prefix`` + '1' + 38 alphanumeric characters
        (and, with ``strict``, decodes as bech32 under that prefix)
    """
    if not isinstance(address, str) or not address:
        return False
    if not isinstance(prefix, str) or not prefix:
        return False
    if re.fullmatch(re.escape(prefix) + r"1[0-9a-zA-Z]{38}", address) is None:
        return False
    if strict:
        hrp, data = bech32_decode(address)[:2]
        return data is not None and hrp == prefix.lower()
    return True


def is_valid_solana_address(address: Any, strict: bool = False) -> bool:
    """Validate a Solana public key.

    The default check is shape only (32-44 alphanumeric characters).
    With ``strict`` the key must also Base58-decode to exactly 32 bytes.
    """
    if not isinstance(address, str) or not address:
        return False
    if _SOLANA_ADDRESS_RE.fullmatch(address) is None:
        return False
    if strict:
        try:
            return len(base58.b58decode(address)) == SOLANA_PUBKEY_BYTES
        except ValueError:
            return False
    return True


def is_valid_address(address: Any, family: ChainFamily | str, prefix: str | None = None) -> bool:
    """Validate an address for the given chain family.

    Cosmos addresses need the chain's ``prefix``; it is ignored otherwise.
    """
    try:
        family = coerce_family(family)
    except ValueError:
        return False

    if family is ChainFamily.EVM:
        return is_valid_evm_address(address)
    elif family is ChainFamily.COSMOS:
        return prefix is not None and is_valid_cosmos_address(address, prefix)
    elif family is ChainFamily.SOLANA:
        return is_valid_solana_address(address)
    else:
        assert_never(family)


def is_valid_transaction_hash(tx_hash: Any, family: ChainFamily | str) -> bool:
    """Validate a transaction hash format for the given chain family."""
    if not isinstance(tx_hash, str) or not tx_hash:
        return False
    try:
        family = coerce_family(family)
    except ValueError:
        return False

    if family is ChainFamily.EVM:
        pattern = _EVM_TX_HASH_RE
    elif family is ChainFamily.COSMOS:
        pattern = _COSMOS_TX_HASH_RE
    elif family is ChainFamily.SOLANA:
        pattern = _SOLANA_TX_HASH_RE
    else:
        assert_never(family)
    return pattern.fullmatch(tx_hash) is not None


def _amount_text(amount: Any) -> str:
    if isinstance(amount, bool):
        raise TypeError("bool is not an amount")
    if isinstance(amount, (int, str)):
        return str(amount)
    if isinstance(amount, float):
        return format(Decimal(repr(amount)), "f")
    if isinstance(amount, Decimal):
        return format(amount, "f")
    raise TypeError(f"Unsupported amount type: {type(amount).__name__}")


def is_valid_amount(amount: Any, max_decimals: int = 18) -> bool:
    """Validate that an amount is an unsigned decimal within safe bounds.

    Args:
        amount: Amount as text, int, Decimal or float
        max_decimals: Maximum allowed decimal places

    Returns:
        True if the amount has at most ``max_decimals`` fractional digits and
        lies in [0, MAX_SAFE_VALUE]
    """
    try:
        text = _amount_text(amount)
        if DECIMAL_TEXT_RE.fullmatch(text) is None or not any(c.isdigit() for c in text):
            return False

        integer_part, _, fraction = text.partition(".")
        if len(fraction) > max_decimals:
            return False

        whole = int(integer_part or "0")
        if whole > MAX_SAFE_VALUE:
            return False
        if whole == MAX_SAFE_VALUE and fraction.strip("0"):
            return False
        return True
    except (TypeError, ValueError, ArithmeticError) as exc:
        logger.debug("Rejected amount %r: %s", amount, exc)
        return False


def _in_range(value: Any, upper: int) -> bool:
    number = parse_integer(value)
    return 0 < number <= upper


def is_valid_gas_params(gas_limit: Any = None, gas_price: Any = None) -> bool:
    """Validate optional gas limit and gas price.

    A parameter that is ``None`` is not checked; a present parameter must be
    a positive integer no larger than its bound.
    """
    try:
        if gas_limit is not None and not _in_range(gas_limit, MAX_GAS_LIMIT):
            return False
        if gas_price is not None and not _in_range(gas_price, MAX_GAS_PRICE):
            return False
        return True
    except (TypeError, ValueError, ArithmeticError) as exc:
        logger.debug("Rejected gas params limit=%r price=%r: %s", gas_limit, gas_price, exc)
        return False


def is_valid_chain_id(chain_id: Any) -> bool:
    """Validate a chain ID is an integer in (0, MAX_CHAIN_ID]."""
    try:
        return _in_range(chain_id, MAX_CHAIN_ID)
    except (TypeError, ValueError, ArithmeticError) as exc:
        logger.debug("Rejected chain id %r: %s", chain_id, exc)
        return False


def is_valid_bytecode(bytecode: Any) -> bool:
    """Validate contract bytecode: 0x prefix, even length, hex body."""
    if not isinstance(bytecode, str) or not bytecode:
        return False
    if not bytecode.startswith("0x") or len(bytecode) % 2 != 0:
        return False
    return _HEX_BODY_RE.fullmatch(bytecode[2:]) is not None


def is_valid_abi(abi: Any) -> bool:
    """Check that a value is a list of well-formed ABI fragments."""
    try:
        parse_abi(abi)
    except ValueError as exc:
        logger.debug("Rejected ABI: %s", exc)
        return False
    return True


def is_valid_method_signature(signature: Any) -> bool:
    """Validate a method signature such as ``transfer(address,uint256)``."""
    if not isinstance(signature, str):
        return False
    return _METHOD_SIGNATURE_RE.fullmatch(signature) is not None
