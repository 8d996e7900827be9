"""Display formatting for chain values.

Each public function renders one category of value (numbers, native
currency, addresses, timestamps, transaction data, gas). Failures never fall
back to the raw input: they raise FormattingError with the category, the
value and the options that were used.

Options may be passed as the matching options model, as a plain dict
(snake_case or camelCase keys), or omitted for the defaults.
"""

import logging
import math
import re
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar, assert_never
from zoneinfo import ZoneInfo

from bech32 import bech32_decode, bech32_encode
from eth_utils import to_checksum_address
from pydantic import BaseModel

from .exceptions import FormattingError
from .models import (
    AddressFormatOptions,
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
from .networks import ChainFamily, coerce_family, is_evm_address
from .units import GWEI_DECIMALS, decimal_text, format_units, parse_magnitude

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseModel)

_HEX_BODY_RE = re.compile(r"[0-9a-fA-F]*")
_GROUP_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")
_NUMERIC_TIMESTAMP_RE = re.compile(r"\d+(\.\d+)?")


@contextmanager
def _formatting_errors(category: str, value: Any, options: Any) -> Iterator[None]:
    """Re-raise any failure inside the block as a FormattingError."""
    try:
        yield
    except Exception as exc:
        logger.debug("Failed to format %s %r: %s", category, value, exc)
        raise FormattingError(f"Failed to format {category}: {exc}", category, value, options) from exc


def _resolve_options(model: type[OptionsT], options: OptionsT | Mapping | None) -> OptionsT:
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, Mapping):
        return model.model_validate(dict(options))
    raise TypeError(f"Expected {model.__name__}, dict or None, got {type(options).__name__}")


# Numbers
def _round_fraction(
    integer_part: str,
    fraction: str,
    decimals: int,
    mode: RoundingMode,
) -> tuple[str, str]:
    """Cut ``fraction`` to ``decimals`` digits, carrying into the integer part."""
    if len(fraction) <= decimals:
        return integer_part, fraction

    kept, dropped = fraction[:decimals], fraction[decimals:]
    if mode is RoundingMode.ROUND:
        round_up = dropped[0] >= "5"
    elif mode is RoundingMode.CEIL:
        round_up = dropped.strip("0") != ""
    elif mode is RoundingMode.TRUNCATE or mode is RoundingMode.FLOOR:
        # magnitudes are non-negative, so floor and truncate agree
        round_up = False
    else:
        raise ValueError(f"Unsupported rounding mode: {mode}")

    if not round_up:
        return integer_part, kept

    digits = str(int(integer_part + kept) + 1).rjust(len(integer_part) + decimals, "0")
    if decimals == 0:
        return digits, ""
    return digits[:-decimals], digits[-decimals:]


def _render_number(value: Any, opts: NumberFormatOptions) -> str:
    integer_part, _, fraction = decimal_text(value).partition(".")
    integer_part = integer_part.lstrip("0") or "0"

    integer_part, fraction = _round_fraction(integer_part, fraction, opts.decimals, opts.rounding_mode)
    if opts.pad_decimals:
        fraction = fraction.ljust(opts.decimals, "0")

    separator = opts.group_separator
    formatted = _GROUP_RE.sub(lambda _: separator, integer_part) if separator else integer_part
    if fraction:
        formatted = f"{formatted}{opts.decimal_separator}{fraction}"
    return f"{opts.prefix}{formatted}{opts.suffix}"


def format_number(value: Any, options: NumberFormatOptions | Mapping | None = None) -> str:
    """Format a non-negative number with grouping and fixed decimals.

    Args:
        value: int, Decimal, float, or decimal/0x-hex string
        options: NumberFormatOptions (decimals, separators, prefix/suffix,
            pad_decimals, rounding_mode)

    Returns:
        Display string, e.g. ``format_number(1234567, {"decimals": 0})``
        gives ``"1,234,567"``

    Raises:
        FormattingError: Value is not a non-negative number, or options are invalid
    """
    with _formatting_errors("number", value, options):
        opts = _resolve_options(NumberFormatOptions, options)
        return _render_number(value, opts)


def format_native_currency(
    value: Any,
    options: NativeCurrencyFormatOptions | Mapping | None = None,
) -> str:
    """Format a smallest-unit amount (e.g. wei) in whole currency units.

    ``unit_decimals`` defaults to 18 (ETH); pass the chain's native decimals
    for other currencies (6 for ATOM, 9 for SOL).
    """
    with _formatting_errors("native currency", value, options):
        opts = _resolve_options(NativeCurrencyFormatOptions, options)
        whole_units = format_units(value, opts.unit_decimals)
        formatted = _render_number(whole_units, NumberFormatOptions(decimals=opts.decimals))
        return f"{formatted} {opts.symbol}" if opts.symbol else formatted


# Addresses
def truncate_address(address: str, length: int = 6) -> str:
    """Shorten an address to ``head...tail`` with ``length`` chars on each side.

    Addresses that would not get shorter are returned unchanged, so
    truncating twice gives the same result as truncating once.
    """
    if length < 1:
        raise ValueError(f"Truncate length must be positive: {length}")
    if len(address) <= 2 * length + 3:
        return address
    return f"{address[:length]}...{address[-length:]}"


def _format_evm_address(address: Any, checksum: bool) -> str:
    if not is_evm_address(address):
        raise ValueError(f"Invalid EVM address: {address!r}")
    return to_checksum_address(address) if checksum else address.lower()


def _format_cosmos_address(address: Any, expected_prefix: str | None) -> str:
    if not isinstance(address, str) or not address:
        raise ValueError(f"Invalid Cosmos address: {address!r}")
    hrp, data = bech32_decode(address)[:2]
    if hrp is None or data is None:
        raise ValueError(f"Invalid bech32 address: {address}")
    if expected_prefix is not None and hrp != expected_prefix.lower():
        raise ValueError(f"Address prefix {hrp!r} does not match {expected_prefix!r}")
    return bech32_encode(hrp, data)


def _format_solana_address(address: Any) -> str:
    if not isinstance(address, str) or not address:
        raise ValueError(f"Invalid Solana address: {address!r}")
    return address


def format_address(address: Any, options: AddressFormatOptions | Mapping | None = None) -> str:
    """Render an address in its canonical form for the chain family.

    EVM addresses are EIP-55 checksummed (or lowercased), Cosmos addresses
    are bech32 decoded and re-encoded, Solana addresses pass through.
    Any family may then be truncated to ``head...tail``.

    Raises:
        FormattingError: Address is malformed for its family, or options are invalid
    """
    with _formatting_errors("address", address, options):
        opts = _resolve_options(AddressFormatOptions, options)
        family = coerce_family(opts.family)

        if family is ChainFamily.EVM:
            formatted = _format_evm_address(address, opts.checksum)
        elif family is ChainFamily.COSMOS:
            formatted = _format_cosmos_address(address, opts.expected_prefix)
        elif family is ChainFamily.SOLANA:
            formatted = _format_solana_address(address)
        else:
            assert_never(family)

        if opts.truncate:
            formatted = truncate_address(formatted, opts.truncate_length)
        return formatted


# Timestamps
_EN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_EN_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_DE_MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)
_DE_WEEKDAYS = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")


def _clock_12h(dt: datetime) -> str:
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.hour % 12 or 12}:{dt.minute:02d}:{dt.second:02d} {meridiem} {dt.tzname()}"


def _clock_24h(dt: datetime) -> str:
    return f"{dt:%H:%M:%S} {dt.tzname()}"


@dataclass(frozen=True)
class _LocaleStyle:
    """Date and time patterns for one supported locale."""

    full_date: Callable[[datetime], str]
    medium_date: Callable[[datetime], str]
    time: Callable[[datetime], str]
    joiner: str


_LOCALES: dict[str, _LocaleStyle] = {
    "en-US": _LocaleStyle(
        full_date=lambda d: f"{_EN_WEEKDAYS[d.weekday()]}, {_EN_MONTHS[d.month - 1]} {d.day}, {d.year}",
        medium_date=lambda d: f"{_EN_MONTHS[d.month - 1][:3]} {d.day}, {d.year}",
        time=_clock_12h,
        joiner=" at ",
    ),
    "en-GB": _LocaleStyle(
        full_date=lambda d: f"{_EN_WEEKDAYS[d.weekday()]} {d.day} {_EN_MONTHS[d.month - 1]} {d.year}",
        medium_date=lambda d: f"{d.day} {_EN_MONTHS[d.month - 1][:3]} {d.year}",
        time=_clock_24h,
        joiner=" at ",
    ),
    "de-DE": _LocaleStyle(
        full_date=lambda d: f"{_DE_WEEKDAYS[d.weekday()]}, {d.day}. {_DE_MONTHS[d.month - 1]} {d.year}",
        medium_date=lambda d: f"{d:%d.%m.%Y}",
        time=_clock_24h,
        joiner=" um ",
    ),
}

SUPPORTED_LOCALES = tuple(_LOCALES)


def _to_datetime(timestamp: Any) -> datetime:
    """Interpret a datetime, Unix-seconds number or ISO-8601 string as UTC-aware."""
    if isinstance(timestamp, datetime):
        dt = timestamp
    elif isinstance(timestamp, bool):
        raise TypeError("bool is not a timestamp")
    elif isinstance(timestamp, (int, float)):
        dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    elif isinstance(timestamp, str):
        text = timestamp.strip()
        if _NUMERIC_TIMESTAMP_RE.fullmatch(text):
            dt = datetime.fromtimestamp(float(text), tz=timezone.utc)
        else:
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            dt = datetime.fromisoformat(text)
    else:
        raise TypeError(f"Unsupported timestamp type: {type(timestamp).__name__}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _format_relative(dt: datetime, now: datetime) -> str:
    elapsed = (now - dt).total_seconds()
    seconds = math.floor(abs(elapsed))

    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        count = seconds // size
        if count > 0:
            break
    else:
        unit, count = "second", seconds

    phrase = f"{count} {unit}{'' if count == 1 else 's'}"
    return f"{phrase} ago" if elapsed >= 0 else f"in {phrase}"


def format_timestamp(
    timestamp: Any,
    options: TimestampFormatOptions | Mapping | None = None,
    now: datetime | None = None,
) -> str:
    """Format an instant as a date/time string or a relative age.

    Args:
        timestamp: datetime (naive means UTC), Unix seconds, or ISO-8601 string
        options: TimestampFormatOptions (format, timezone, locale)
        now: Reference instant for RELATIVE output; defaults to the current time

    Returns:
        e.g. ``"Monday, January 1, 2024 at 12:00:00 AM UTC"`` or ``"3 hours ago"``

    Raises:
        FormattingError: Unparseable timestamp, unknown time zone or locale
    """
    with _formatting_errors("timestamp", timestamp, options):
        opts = _resolve_options(TimestampFormatOptions, options)
        if opts.locale not in _LOCALES:
            raise ValueError(f"Unsupported locale: {opts.locale} (supported: {', '.join(SUPPORTED_LOCALES)})")
        style = _LOCALES[opts.locale]
        zone = ZoneInfo(opts.timezone)
        dt = _to_datetime(timestamp)

        if opts.format is TimestampFormat.RELATIVE:
            reference = _to_datetime(now) if now is not None else datetime.now(timezone.utc)
            return _format_relative(dt, reference)

        local = dt.astimezone(zone)
        if opts.format is TimestampFormat.FULL:
            return f"{style.full_date(local)}{style.joiner}{style.time(local)}"
        elif opts.format is TimestampFormat.DATE_ONLY:
            return style.medium_date(local)
        elif opts.format is TimestampFormat.TIME_ONLY:
            return style.time(local)
        raise ValueError(f"Unsupported timestamp format: {opts.format}")


# Transaction data
def format_transaction_data(
    data: Any,
    options: TransactionDataFormatOptions | Mapping | None = None,
) -> str:
    """Format raw transaction data (hex) for display.

    HEX re-cases the hex digits, BYTES splits them into space-separated byte
    pairs, UTF8 decodes the bytes as text (invalid sequences are replaced).
    The ``0x`` prefix is re-added to HEX and BYTES output when ``prefix`` is set.

    Raises:
        FormattingError: Data is not hex, or has an odd length for BYTES/UTF8
    """
    with _formatting_errors("transaction data", data, options):
        opts = _resolve_options(TransactionDataFormatOptions, options)
        if not isinstance(data, str):
            raise TypeError(f"Transaction data must be a hex string, got {type(data).__name__}")

        body = data[2:] if data[:2] in ("0x", "0X") else data
        if _HEX_BODY_RE.fullmatch(body) is None:
            raise ValueError("Transaction data is not hex")

        if opts.format is DataFormat.HEX:
            body = body.upper() if opts.uppercase else body.lower()
        elif opts.format is DataFormat.BYTES:
            if len(body) % 2:
                raise ValueError("Transaction data has an odd number of hex digits")
            body = " ".join(body[i : i + 2] for i in range(0, len(body), 2))
        elif opts.format is DataFormat.UTF8:
            return bytes.fromhex(body).decode("utf-8", errors="replace")
        else:
            raise ValueError(f"Unsupported data format: {opts.format}")

        return f"0x{body}" if opts.prefix else body


# Gas
def format_gas(value: Any, options: GasFormatOptions | Mapping | None = None) -> str:
    """Format a gas price or amount in gwei or wei.

    ``format_gas(1500000000)`` gives ``"1.50 gwei"``; in WEI the integer is
    only grouped: ``"1,500,000,000 wei"``.
    """
    with _formatting_errors("gas", value, options):
        opts = _resolve_options(GasFormatOptions, options)

        if opts.format is GasFormat.GWEI:
            gwei = format_units(value, GWEI_DECIMALS)
            formatted = _render_number(gwei, NumberFormatOptions(decimals=opts.decimals, pad_decimals=True))
        elif opts.format is GasFormat.WEI:
            formatted = _render_number(parse_magnitude(value), NumberFormatOptions(decimals=opts.decimals))
        else:
            raise ValueError(f"Unsupported gas format: {opts.format}")

        return f"{formatted} {opts.format.value.lower()}" if opts.include_unit else formatted
