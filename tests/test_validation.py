from decimal import Decimal

import pytest

from chainnorm import (
    MAX_GAS_LIMIT,
    MAX_SAFE_VALUE,
    ChainFamily,
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


@pytest.mark.parametrize("address", [
    "0x" + "0" * 40,
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0x" + "abcdef" * 6 + "ABCD",
])
def test_evm_address_valid(address):
    assert is_valid_evm_address(address) is True


@pytest.mark.parametrize("address", [
    "0x" + "0" * 41,
    "0x" + "0" * 39,
    "0X" + "0" * 40,
    "00" + "0" * 40,
    "0x" + "g" * 40,
    "",
    None,
    42,
])
def test_evm_address_invalid(address):
    assert is_valid_evm_address(address) is False


def test_cosmos_address_shape():
    assert is_valid_cosmos_address("cosmos1abcdefghijklmnopqrstuvwxyz012345678", "cosmos") is True
    # body must be exactly 38 characters
    assert is_valid_cosmos_address("cosmos1abcdefghijklmnopqrstuvwxyz01234567", "cosmos") is False
    assert is_valid_cosmos_address("cosmos1abcdefghijklmnopqrstuvwxyz0123456789", "cosmos") is False
    assert is_valid_cosmos_address("cosmos1abcdefghijklmnopqrstuvwxyz012345678", "osmo") is False
    assert is_valid_cosmos_address("cosmos1abcdefghijklmnopqrstuvwxyz012345678", "") is False
    assert is_valid_cosmos_address("", "cosmos") is False


def test_cosmos_address_strict_checks_bech32(cosmos_address):
    assert is_valid_cosmos_address(cosmos_address, "cosmos", strict=True) is True
    assert is_valid_cosmos_address("cosmos1abcdefghijklmnopqrstuvwxyz012345678", "cosmos", strict=True) is False


def test_solana_address():
    assert is_valid_solana_address("1" * 32) is True
    assert is_valid_solana_address("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v") is True
    assert is_valid_solana_address("1" * 31) is False
    assert is_valid_solana_address("1" * 45) is False
    assert is_valid_solana_address(None) is False


def test_solana_address_strict_decodes_base58():
    assert is_valid_solana_address("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", strict=True) is True
    assert is_valid_solana_address("1" * 32, strict=True) is True
    # "0" is alphanumeric but not in the Base58 alphabet
    assert is_valid_solana_address("0" * 32) is True
    assert is_valid_solana_address("0" * 32, strict=True) is False


def test_is_valid_address_dispatch():
    assert is_valid_address("0x" + "0" * 40, ChainFamily.EVM) is True
    assert is_valid_address("0x" + "0" * 40, "evm") is True
    assert is_valid_address("cosmos1abcdefghijklmnopqrstuvwxyz012345678", ChainFamily.COSMOS, "cosmos") is True
    assert is_valid_address("cosmos1abcdefghijklmnopqrstuvwxyz012345678", ChainFamily.COSMOS) is False
    assert is_valid_address("1" * 32, ChainFamily.SOLANA) is True
    assert is_valid_address("1" * 32, "TRON") is False


@pytest.mark.parametrize("tx_hash, family, expected", [
    ("0x" + "a" * 64, ChainFamily.EVM, True),
    ("0x" + "A" * 64, "EVM", True),
    ("a" * 64, ChainFamily.EVM, False),
    ("0x" + "a" * 63, ChainFamily.EVM, False),
    ("A" * 64, ChainFamily.COSMOS, True),
    ("a" * 64, ChainFamily.COSMOS, False),
    ("0x" + "A" * 64, ChainFamily.COSMOS, False),
    ("1" * 88, ChainFamily.SOLANA, True),
    ("1" * 87, ChainFamily.SOLANA, True),
    ("1" * 86, ChainFamily.SOLANA, False),
    ("1" * 89, ChainFamily.SOLANA, False),
    ("", ChainFamily.EVM, False),
    (None, ChainFamily.EVM, False),
    ("0x" + "a" * 64, "TRON", False),
])
def test_transaction_hash(tx_hash, family, expected):
    assert is_valid_transaction_hash(tx_hash, family) is expected


@pytest.mark.parametrize("amount", [
    0,
    "0",
    "1.5",
    ".5",
    "5.",
    "0.123456789012345678",
    MAX_SAFE_VALUE,
    str(MAX_SAFE_VALUE),
    f"{MAX_SAFE_VALUE}.000",
    Decimal("1.25"),
    0.1,
])
def test_amount_valid(amount):
    assert is_valid_amount(amount) is True


@pytest.mark.parametrize("amount", [
    MAX_SAFE_VALUE + 1,
    str(MAX_SAFE_VALUE + 1),
    f"{MAX_SAFE_VALUE}.1",
    "123.1234567890123456789",
    "",
    ".",
    "-1",
    -1,
    "1e5",
    "1.2.3",
    "0x10",
    " 1",
    "abc",
    True,
    None,
    float("inf"),
    "9" * 5000,
])
def test_amount_invalid(amount):
    assert is_valid_amount(amount) is False


def test_amount_max_decimals():
    assert is_valid_amount("1.23", max_decimals=2) is True
    assert is_valid_amount("1.234", max_decimals=2) is False
    assert is_valid_amount("1", max_decimals=0) is True


@pytest.mark.parametrize("gas_limit, gas_price, expected", [
    (None, None, True),
    (21000, None, True),
    (None, 30_000_000_000, True),
    ("21000", "0x6fc23ac00", True),
    (MAX_GAS_LIMIT, None, True),
    (MAX_GAS_LIMIT + 1, None, False),
    (None, 2**256, False),
    (0, None, False),
    (None, 0, False),
    (-1, None, False),
    ("abc", None, False),
    (1.5, None, False),
    (True, None, False),
])
def test_gas_params(gas_limit, gas_price, expected):
    assert is_valid_gas_params(gas_limit, gas_price) is expected


@pytest.mark.parametrize("chain_id, expected", [
    (1, True),
    ("1", True),
    ("0xa4b1", True),
    (2**256 - 1, True),
    (2**256, False),
    (0, False),
    (-1, False),
    ("-1", False),
    ("cosmoshub-4", False),
    (None, False),
    ("", False),
])
def test_chain_id(chain_id, expected):
    assert is_valid_chain_id(chain_id) is expected


@pytest.mark.parametrize("bytecode, expected", [
    ("0x", True),
    ("0x6080604052", True),
    ("0x608060405", False),
    ("0x60806040", True),
    ("0xABCDEF", True),
    ("60806040", False),
    ("0x608", False),
    ("0xzz", False),
    ("", False),
    (None, False),
])
def test_bytecode(bytecode, expected):
    assert is_valid_bytecode(bytecode) is expected


@pytest.mark.parametrize("signature, expected", [
    ("transfer(address,uint256)", True),
    ("totalSupply()", True),
    ("batch(uint256[], address)", True),
    ("_hook$(bytes)", True),
    ("1transfer()", False),
    ("transfer(", False),
    ("transfer(address,)", False),
    (None, False),
])
def test_method_signature(signature, expected):
    assert is_valid_method_signature(signature) is expected
