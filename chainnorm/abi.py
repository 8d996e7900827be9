"""ABI fragment shapes.

An ABI is parsed once, at the boundary, into a list of typed fragments.
Only the shape of each fragment is checked: argument lists must be lists,
but their entries are not type-decoded. Keys must use their JSON
spelling (``stateMutability``).
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictStr, TypeAdapter


class _Fragment(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")


# JSON arrays only; sets and tuples are not argument lists
ArgumentList = Annotated[list[Any], Strict()]


class FunctionFragment(_Fragment):
    type: Literal["function"]
    name: StrictStr
    inputs: ArgumentList
    outputs: ArgumentList
    state_mutability: StrictStr = Field(alias="stateMutability")


class EventFragment(_Fragment):
    type: Literal["event"]
    name: StrictStr
    inputs: ArgumentList
    anonymous: StrictBool


class ConstructorFragment(_Fragment):
    type: Literal["constructor"]


class FallbackFragment(_Fragment):
    type: Literal["fallback"]


class ReceiveFragment(_Fragment):
    type: Literal["receive"]


AbiFragment = Annotated[
    Union[
        FunctionFragment,
        EventFragment,
        ConstructorFragment,
        FallbackFragment,
        ReceiveFragment,
    ],
    Field(discriminator="type"),
]

_ABI_ADAPTER = TypeAdapter(list[AbiFragment])


def parse_abi(abi: Any) -> list[AbiFragment]:
    """Parse a JSON-style ABI into typed fragments.

    Args:
        abi: Decoded JSON value (a list of fragment objects)

    Returns:
        List of fragment models, in input order

    Raises:
        ValueError: If the value is not a list of well-formed fragments
    """
    if isinstance(abi, (str, bytes)) or not isinstance(abi, (list, tuple)):
        raise ValueError("ABI must be a list of fragment objects")
    return _ABI_ADAPTER.validate_python(list(abi))
