"""Pydantic models for chainnorm: formatter options and chain configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .networks import ChainFamily, NamedEnum
from .units import ETHER_DECIMALS


class _Record(BaseModel):
    """Immutable record accepting snake_case or camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# Option enums
class RoundingMode(NamedEnum):
    ROUND = "ROUND"
    TRUNCATE = "TRUNCATE"
    CEIL = "CEIL"
    FLOOR = "FLOOR"


class TimestampFormat(NamedEnum):
    FULL = "FULL"
    DATE_ONLY = "DATE_ONLY"
    TIME_ONLY = "TIME_ONLY"
    RELATIVE = "RELATIVE"


class DataFormat(NamedEnum):
    HEX = "HEX"
    BYTES = "BYTES"
    UTF8 = "UTF8"


class GasFormat(NamedEnum):
    GWEI = "GWEI"
    WEI = "WEI"


# Formatter options
class _Options(_Record):
    """Formatter options; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class NumberFormatOptions(_Options):
    decimals: int = Field(default=2, ge=0)
    group_separator: str = ","
    decimal_separator: str = "."
    prefix: str = ""
    suffix: str = ""
    pad_decimals: bool = False
    rounding_mode: RoundingMode = RoundingMode.ROUND


class NativeCurrencyFormatOptions(_Options):
    decimals: int = Field(default=6, ge=0)
    unit_decimals: int = Field(default=ETHER_DECIMALS, ge=0)
    symbol: str | None = None


class AddressFormatOptions(_Options):
    family: ChainFamily = ChainFamily.EVM
    truncate: bool = False
    truncate_length: int = Field(default=6, ge=1)
    checksum: bool = True
    expected_prefix: str | None = None


class TimestampFormatOptions(_Options):
    format: TimestampFormat = TimestampFormat.FULL
    timezone: str = "UTC"
    locale: str = "en-US"


class TransactionDataFormatOptions(_Options):
    format: DataFormat = DataFormat.HEX
    prefix: bool = True
    uppercase: bool = True


class GasFormatOptions(_Options):
    format: GasFormat = GasFormat.GWEI
    decimals: int = Field(default=2, ge=0)
    include_unit: bool = True


# Chain configuration
class NativeCurrency(_Record):
    name: str
    symbol: str
    decimals: int = Field(ge=0)


class ExplorerConfig(_Record):
    name: str
    url: str
    api_url: str | None = None
    standard: str | None = None

    @field_validator("standard")
    @classmethod
    def known_standard(cls, v: str | None) -> str | None:
        if v is not None and v not in ("EIP3091", "none"):
            raise ValueError("explorer standard must be 'EIP3091' or 'none'")
        return v


class GasConfig(_Record):
    default: str
    max: str | None = None
    priority_fee: str | None = None


class NetworkParameters(_Record):
    average_block_time: float
    chain_id: str | None = None
    network_id: int | None = None
    address_prefix: str | None = None
    validator_prefix: str | None = None
    gas_price: GasConfig | None = None
    slots_per_epoch: int | None = None
    staking_enabled: bool | None = None
    maximum_transaction_size: int | None = None


class IBCChannelConfig(_Record):
    channel_id: str
    port_id: str
    counterparty_chain_id: str
    counterparty_channel_id: str
    counterparty_port_id: str
    ordering: str = Field(pattern="^(ORDERED|UNORDERED)$")
    version: str


class IBCConfig(_Record):
    enabled: bool
    timeout_height: int
    timeout_timestamp: int
    max_tx_size: int
    channels: list[IBCChannelConfig] = Field(default_factory=list)


class ChainConfig(_Record):
    id: int | str
    name: str
    type: ChainFamily
    native_currency: NativeCurrency
    rpc_urls: list[str]
    rest_urls: list[str] = Field(default_factory=list)
    block_explorers: dict[str, ExplorerConfig]
    network_parameters: NetworkParameters
    ibc_configuration: IBCConfig | None = None

    @field_validator("block_explorers")
    @classmethod
    def has_default_explorer(cls, v: dict[str, ExplorerConfig]) -> dict[str, ExplorerConfig]:
        if "default" not in v:
            raise ValueError("block_explorers must contain a 'default' entry")
        return v

    @model_validator(mode="after")
    def cosmos_has_prefix(self) -> "ChainConfig":
        if self.type is ChainFamily.COSMOS and not self.network_parameters.address_prefix:
            raise ValueError(f"Cosmos chain {self.name} must declare networkParameters.addressPrefix")
        return self

    @property
    def family(self) -> ChainFamily:
        return self.type

    @property
    def address_prefix(self) -> str | None:
        return self.network_parameters.address_prefix

    @property
    def native_decimals(self) -> int:
        return self.native_currency.decimals
