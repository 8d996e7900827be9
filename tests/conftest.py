import pytest
from bech32 import bech32_encode, convertbits

from chainnorm import ChainRegistry

FIXTURE_CHAINS = {
    "local-evm": {
        "id": 31337,
        "name": "Local EVM",
        "type": "EVM",
        "nativeCurrency": {"name": "Ether", "symbol": "ETH", "decimals": 18},
        "rpcUrls": ["http://127.0.0.1:8545"],
        "blockExplorers": {"default": {"name": "Local", "url": "http://127.0.0.1:4000"}},
        "networkParameters": {"averageBlockTime": 2},
    },
    "test-hub": {
        "id": "testhub-1",
        "name": "Test Hub",
        "type": "COSMOS",
        "nativeCurrency": {"name": "Test", "symbol": "TST", "decimals": 6},
        "rpcUrls": [],
        "blockExplorers": {"default": {"name": "Local", "url": "http://127.0.0.1:1317"}},
        "networkParameters": {"averageBlockTime": 6, "addressPrefix": "cosmos"},
    },
}


@pytest.fixture
def registry() -> ChainRegistry:
    return ChainRegistry(FIXTURE_CHAINS)


@pytest.fixture
def cosmos_address() -> str:
    # 20-byte account id, bech32 encoded under the "cosmos" prefix
    return bech32_encode("cosmos", convertbits(bytes(range(20)), 8, 5))
