"""
Entity records exchanged with callers.

Records are plain values owned by the caller for one request. `id` is None
before creation and set afterwards. JSON uses camelCase names
(`objectName`, `eventName`); Python code uses snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EntityRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    id: int | None = None


class Car(EntityRecord):
    name: str


class User(EntityRecord):
    name: str
    password: str


class Subscription(EntityRecord):
    object_name: str | None = None
    event_name: str | None = None
    callback: str


class ErrorDefinition(EntityRecord):
    name: str


__all__ = ["EntityRecord", "Car", "User", "Subscription", "ErrorDefinition"]
