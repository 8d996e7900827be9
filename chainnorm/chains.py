"""Built-in chain metadata.

Plain data in the same camelCase shape as a YAML chain file; turn it into
models with ``chainnorm.registry.default_registry()``.
"""

DEFAULT_CHAIN_CONFIGURATIONS: dict[str, dict] = {
    # Ethereum and L2s
    "ethereum-mainnet": {
        "id": 1,
        "name": "Ethereum Mainnet",
        "type": "EVM",
        "nativeCurrency": {"name": "Ether", "symbol": "ETH", "decimals": 18},
        "rpcUrls": [
            "https://mainnet.infura.io/v3/${INFURA_API_KEY}",
            "https://eth-mainnet.alchemyapi.io/v2/${ALCHEMY_API_KEY}",
        ],
        "blockExplorers": {
            "default": {"name": "Etherscan", "url": "https://etherscan.io"},
        },
        "networkParameters": {
            "averageBlockTime": 12,
            "chainId": "0x1",
            "networkId": 1,
            "gasPrice": {"default": "30000000000", "max": "100000000000"},
        },
    },
    "arbitrum-one": {
        "id": 42161,
        "name": "Arbitrum One",
        "type": "EVM",
        "nativeCurrency": {"name": "Ether", "symbol": "ETH", "decimals": 18},
        "rpcUrls": [
            "https://arb1.arbitrum.io/rpc",
            "https://arbitrum-mainnet.infura.io/v3/${INFURA_API_KEY}",
        ],
        "blockExplorers": {
            "default": {"name": "Arbiscan", "url": "https://arbiscan.io"},
        },
        "networkParameters": {
            "averageBlockTime": 0.25,
            "chainId": "0xa4b1",
            "networkId": 42161,
        },
    },
    # Cosmos ecosystem
    "cosmos-hub": {
        "id": "cosmoshub-4",
        "name": "Cosmos Hub",
        "type": "COSMOS",
        "nativeCurrency": {"name": "Atom", "symbol": "ATOM", "decimals": 6},
        "rpcUrls": ["https://rpc.cosmos.network", "https://cosmos-rpc.polkachu.com"],
        "restUrls": ["https://api.cosmos.network", "https://cosmos-api.polkachu.com"],
        "blockExplorers": {
            "default": {"name": "Mintscan", "url": "https://www.mintscan.io/cosmos"},
        },
        "networkParameters": {
            "averageBlockTime": 6.85,
            "chainId": "cosmoshub-4",
            "addressPrefix": "cosmos",
            "validatorPrefix": "cosmosvaloper",
        },
        "ibcConfiguration": {
            "enabled": True,
            "timeoutHeight": 1000,
            "timeoutTimestamp": 1800,
            "maxTxSize": 2097152,
        },
    },
    "osmosis": {
        "id": "osmosis-1",
        "name": "Osmosis",
        "type": "COSMOS",
        "nativeCurrency": {"name": "Osmosis", "symbol": "OSMO", "decimals": 6},
        "rpcUrls": ["https://rpc.osmosis.zone", "https://osmosis-rpc.polkachu.com"],
        "restUrls": ["https://lcd.osmosis.zone", "https://osmosis-api.polkachu.com"],
        "blockExplorers": {
            "default": {"name": "Mintscan", "url": "https://www.mintscan.io/osmosis"},
        },
        "networkParameters": {
            "averageBlockTime": 6,
            "chainId": "osmosis-1",
            "addressPrefix": "osmo",
            "validatorPrefix": "osmovaloper",
        },
        "ibcConfiguration": {
            "enabled": True,
            "timeoutHeight": 1000,
            "timeoutTimestamp": 1800,
            "maxTxSize": 2097152,
        },
    },
    # Solana
    "solana-mainnet": {
        "id": "4sGjMW1sUnHzSxGspuhpqLDx6wiyjNtZ",
        "name": "Solana Mainnet",
        "type": "SOLANA",
        "nativeCurrency": {"name": "Solana", "symbol": "SOL", "decimals": 9},
        "rpcUrls": [
            "https://api.mainnet-beta.solana.com",
            "https://solana-api.projectserum.com",
        ],
        "blockExplorers": {
            "default": {"name": "Solana Explorer", "url": "https://explorer.solana.com"},
        },
        "networkParameters": {
            "averageBlockTime": 0.4,
            "slotsPerEpoch": 432000,
            "stakingEnabled": True,
            "maximumTransactionSize": 1232,
        },
    },
}
