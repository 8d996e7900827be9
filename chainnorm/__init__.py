"""chainnorm - multi-chain value validation and display formatting.

Validates addresses, transaction hashes, amounts, gas parameters, chain ids,
bytecode and ABIs for EVM, Cosmos and Solana chains, and renders values in a
canonical display form.

Usage:
    from chainnorm import ChainFamily, default_registry, format_address, is_valid_address

    registry = default_registry()
    chain = registry.resolve("cosmos-hub")
    if is_valid_address(addr, chain.family, chain.address_prefix):
        print(format_address(addr, {"family": chain.family, "truncate": True}))
"""

import logging

from .abi import (
    AbiFragment,
    ConstructorFragment,
    EventFragment,
    FallbackFragment,
    FunctionFragment,
    ReceiveFragment,
    parse_abi,
)
from .exceptions import ChainNormError, ChainNotFoundError, FormattingError, RegistryError
from .formatting import (
    SUPPORTED_LOCALES,
    format_address,
    format_gas,
    format_native_currency,
    format_number,
    format_timestamp,
    format_transaction_data,
    truncate_address,
)
from .models import (
    AddressFormatOptions,
    ChainConfig,
    DataFormat,
    GasFormat,
    GasFormatOptions,
    NativeCurrencyFormatOptions,
    NumberFormatOptions,
    RoundingMode,
    TimestampFormat,
    TimestampFormatOptions,
    TransactionDataFormatOptions,
)
from .networks import (
    MAX_CHAIN_ID,
    MAX_GAS_LIMIT,
    MAX_GAS_PRICE,
    MAX_SAFE_VALUE,
    ChainFamily,
    coerce_family,
    detect_family,
)
from .registry import ChainRegistry, default_registry
from .units import format_units, parse_integer
from .validation import (
    is_valid_abi,
    is_valid_address,
    is_valid_amount,
    is_valid_bytecode,
    is_valid_chain_id,
    is_valid_cosmos_address,
    is_valid_evm_address,
    is_valid_gas_params,
    is_valid_method_signature,
    is_valid_solana_address,
    is_valid_transaction_hash,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Chain families and bounds
    "ChainFamily",
    "coerce_family",
    "detect_family",
    "MAX_SAFE_VALUE",
    "MAX_GAS_LIMIT",
    "MAX_GAS_PRICE",
    "MAX_CHAIN_ID",
    # Exceptions
    "ChainNormError",
    "FormattingError",
    "ChainNotFoundError",
    "RegistryError",
    # Validation
    "is_valid_evm_address",
    "is_valid_cosmos_address",
    "is_valid_solana_address",
    "is_valid_address",
    "is_valid_transaction_hash",
    "is_valid_amount",
    "is_valid_gas_params",
    "is_valid_chain_id",
    "is_valid_bytecode",
    "is_valid_abi",
    "is_valid_method_signature",
    # ABI
    "AbiFragment",
    "FunctionFragment",
    "EventFragment",
    "ConstructorFragment",
    "FallbackFragment",
    "ReceiveFragment",
    "parse_abi",
    # Formatting
    "format_number",
    "format_native_currency",
    "format_address",
    "truncate_address",
    "format_timestamp",
    "format_transaction_data",
    "format_gas",
    "format_units",
    "parse_integer",
    "SUPPORTED_LOCALES",
    # Options
    "NumberFormatOptions",
    "NativeCurrencyFormatOptions",
    "AddressFormatOptions",
    "TimestampFormatOptions",
    "TransactionDataFormatOptions",
    "GasFormatOptions",
    "RoundingMode",
    "TimestampFormat",
    "DataFormat",
    "GasFormat",
    # Chain registry
    "ChainConfig",
    "ChainRegistry",
    "default_registry",
]
