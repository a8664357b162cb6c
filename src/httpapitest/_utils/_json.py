import json
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError, to_jsonable_python

T = TypeVar("T")


class JSONCapture(Generic[T]):
    """Receives a JSON-decoded response body.

    When a type is given, the decoded body is validated through a pydantic
    `TypeAdapter`, so models, dataclasses and typed collections are all
    accepted. Without a type the plain `json.loads` result is stored.

    Example:
        ```python
        capture = JSONCapture(JSONStatusResponse)
        request(t, client, "GET", url, unmarshal_json_response(capture))
        assert capture.value.message == "text"
        ```
    """

    def __init__(self, type_: Optional[type[T]] = None) -> None:
        self.type = type_
        self.value: Optional[T] = None
        self._adapter: Optional[TypeAdapter[T]] = (
            TypeAdapter(type_) if type_ is not None else None
        )

    def load(self, data: Union[bytes, str]) -> T:
        if self._adapter is not None:
            self.value = self._adapter.validate_json(data)
        else:
            self.value = json.loads(data)
        return self.value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"JSONCapture(type={self.type!r}, value={self.value!r})"


JSONTarget = Union[JSONCapture[Any], dict[Any, Any], list[Any]]


def encode_json(value: Any) -> bytes:
    """Encode a value as compact JSON.

    Pydantic models are dumped by alias, dataclasses field by field and
    everything else the way `json.dumps` would.

    Raises:
        TypeError: If the value contains something that has no JSON form.
        ValueError: If the value contains NaN or infinite floats.
    """
    try:
        jsonable = to_jsonable_python(value, by_alias=True)
    except PydanticSerializationError as e:
        raise TypeError(str(e)) from e
    encoded = json.dumps(
        jsonable, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    return encoded.encode("utf-8")


def is_json_target(target: Any) -> bool:
    return isinstance(target, (JSONCapture, dict, list))


def decode_json_into(data: Union[bytes, str], target: JSONTarget) -> None:
    """Decode JSON data into a caller supplied target.

    Dicts are cleared and updated, lists have their contents replaced and
    `JSONCapture` objects store the decoded value.

    Raises:
        ValueError: If the data is not valid JSON or does not fit the target.
        TypeError: If the target cannot receive decoded data.
    """
    if isinstance(target, JSONCapture):
        target.load(data)
        return

    decoded = json.loads(data)
    if isinstance(target, dict):
        if not isinstance(decoded, dict):
            raise ValueError(
                f"cannot decode JSON {type(decoded).__name__} into dict"
            )
        target.clear()
        target.update(decoded)
    elif isinstance(target, list):
        if not isinstance(decoded, list):
            raise ValueError(
                f"cannot decode JSON {type(decoded).__name__} into list"
            )
        target[:] = decoded
    else:
        raise TypeError(f"cannot decode JSON into {type(target).__name__}")
