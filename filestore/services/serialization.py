from __future__ import annotations
from typing import Any, BinaryIO, Generic, Iterable, List, Protocol, Type, TypeVar
from pydantic import TypeAdapter

T = TypeVar("T")

class Serializer(Protocol[T]):
    """Decodes an ordered list of records from a byte stream, encodes one to bytes."""

    def decode(self, stream: BinaryIO) -> List[T]: ...

    def encode(self, items: Iterable[T]) -> bytes: ...

class JsonListSerializer(Generic[T]):
    """
    JSON array <-> List[item_type] via pydantic.
    item_type can be anything pydantic validates: models, dataclasses,
    TypedDicts or plain types such as dict.
    Decode errors surface as pydantic.ValidationError, encode errors as
    pydantic_core.PydanticSerializationError.
    """

    def __init__(self, item_type: Type[T] | Any = dict, indent: int = 2):
        self.item_type = item_type
        self.indent = indent
        self._adapter: TypeAdapter[List[T]] = TypeAdapter(List[item_type])

    def decode(self, stream: BinaryIO) -> List[T]:
        return self._adapter.validate_json(stream.read())

    def encode(self, items: Iterable[T]) -> bytes:
        return self._adapter.dump_json(list(items), indent=self.indent) + b"\n"
