"""Chain configuration registry.

A ChainRegistry is an immutable mapping of registry key -> ChainConfig.
It is built explicitly (from a dict, a YAML file or the built-in table) and
handed to whoever needs chain facts; there is no module-level instance.
"""

import logging
import os
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import ValidationError

from .chains import DEFAULT_CHAIN_CONFIGURATIONS
from .exceptions import ChainNotFoundError, RegistryError
from .models import ChainConfig
from .networks import ChainFamily, coerce_family

logger = logging.getLogger(__name__)

_ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _expand_env(url: str) -> str:
    """Replace ${NAME} with the environment value; unset names are left as is."""
    return _ENV_PLACEHOLDER_RE.sub(lambda m: os.environ.get(m.group(1), m.group(0)), url)


class ChainRegistry(Mapping[str, ChainConfig]):
    """Read-only lookup of chain configurations.

    Usage:
        registry = ChainRegistry.from_yaml("chains.yaml")
        chain = registry.resolve("cosmos-hub")
        is_valid_cosmos_address(addr, chain.address_prefix)
    """

    def __init__(self, chains: Mapping[str, ChainConfig | dict]):
        """Build a registry.

        Args:
            chains: Registry key -> ChainConfig (or a dict in ChainConfig shape)

        Raises:
            RegistryError: If any entry is not a valid chain configuration
        """
        parsed: dict[str, ChainConfig] = {}
        for key, config in chains.items():
            try:
                parsed[str(key)] = (
                    config if isinstance(config, ChainConfig) else ChainConfig.model_validate(config)
                )
            except ValidationError as e:
                raise RegistryError(f"Invalid chain configuration for {key}: {e}") from e

        self._chains = MappingProxyType(parsed)
        self._keys_by_id = MappingProxyType({str(c.id): k for k, c in parsed.items()})

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ChainRegistry":
        """Load a registry from a YAML file with a top-level ``chains`` mapping.

        Raises:
            RegistryError: If the file cannot be read or its content is invalid
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise RegistryError(f"Could not load chain configuration from {path}: {e}") from e

        chains = data.get("chains") if isinstance(data, dict) else None
        if not isinstance(chains, dict):
            raise RegistryError(f"Configuration error in {path}: expected a 'chains' mapping")

        registry = cls(chains)
        logger.info("Loaded %d chain configurations from %s", len(registry), path)
        return registry

    def __getitem__(self, key: str) -> ChainConfig:
        return self._chains[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chains)

    def __len__(self) -> int:
        return len(self._chains)

    def resolve(self, chain_identifier: str | int) -> ChainConfig:
        """Find a chain by registry key or by its configured id.

        Args:
            chain_identifier: Registry key ("ethereum-mainnet") or chain id
                (1, "1", "cosmoshub-4")

        Raises:
            ChainNotFoundError: If no chain matches
        """
        key = str(chain_identifier)
        if key in self._chains:
            return self._chains[key]
        if key in self._keys_by_id:
            return self._chains[self._keys_by_id[key]]
        raise ChainNotFoundError(chain_identifier)

    get_chain_config = resolve

    def is_supported_chain(self, chain_identifier: str | int) -> bool:
        key = str(chain_identifier)
        return key in self._chains or key in self._keys_by_id

    def get_chains_by_type(self, family: ChainFamily | str) -> list[ChainConfig]:
        family = coerce_family(family)
        return [c for c in self._chains.values() if c.type is family]

    def get_chain_rpc_url(self, chain_identifier: str | int, index: int = 0) -> str:
        """Pick an RPC URL, wrapping ``index`` around the configured list.

        ``${NAME}`` placeholders are filled from the environment when set.

        Raises:
            ChainNotFoundError: Unknown chain
            RegistryError: Chain has no RPC URLs
        """
        config = self.resolve(chain_identifier)
        if not config.rpc_urls:
            raise RegistryError(f"No RPC URLs configured for chainId: {chain_identifier}")
        return _expand_env(config.rpc_urls[index % len(config.rpc_urls)])

    def get_explorer_url(self, chain_identifier: str | int, explorer_key: str = "default") -> str:
        config = self.resolve(chain_identifier)
        explorer = config.block_explorers.get(explorer_key)
        if explorer is None:
            raise RegistryError(f"Explorer not found for chainId: {chain_identifier}, key: {explorer_key}")
        return explorer.url


def default_registry() -> ChainRegistry:
    """Build a new registry from the built-in chain table."""
    return ChainRegistry(DEFAULT_CHAIN_CONFIGURATIONS)
