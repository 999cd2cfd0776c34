"""
Table descriptors: what a RecordCollection needs to know about one entity.

A descriptor names the table and maps record fields onto columns, which gives
both directions of the conversion:

    row -> record:    {"id": 10, "car_name": "Volvo"} -> Car(id=10, name="Volvo")
    record -> values: Car(name="Volvo")                -> {"car_name": "Volvo"}

The id column is always `id` and is never part of the written values; the
database generates it on insert and it keys updates.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import Column, Table

from webapi.database.base import Base
from webapi.entities import Car, EntityRecord, ErrorDefinition, Subscription, User
from webapi import models

RecordT = TypeVar("RecordT", bound=EntityRecord)


@dataclass(frozen=True)
class TableDescriptor(Generic[RecordT]):
    model: type[Base]
    record_type: type[RecordT]
    # record field name -> column name
    columns: Mapping[str, str]

    @property
    def table(self) -> Table:
        return self.model.__table__

    @property
    def name(self) -> str:
        return self.table.name

    @property
    def key(self) -> Column:
        return self.table.c.id

    def to_record(self, row: Mapping[str, Any]) -> RecordT:
        values = {field: row[column] for field, column in self.columns.items()}
        return self.record_type(id=row["id"], **values)

    def to_values(self, record: RecordT) -> dict[str, Any]:
        return {column: getattr(record, field) for field, column in self.columns.items()}


CARS: TableDescriptor[Car] = TableDescriptor(
    model=models.Car,
    record_type=Car,
    columns={"name": "car_name"},
)

USERS: TableDescriptor[User] = TableDescriptor(
    model=models.Usr,
    record_type=User,
    columns={"name": "usr_name", "password": "usr_password"},
)

SUBSCRIPTIONS: TableDescriptor[Subscription] = TableDescriptor(
    model=models.Subscription,
    record_type=Subscription,
    columns={"object_name": "object_name", "event_name": "event_name", "callback": "call_back"},
)

ERRORS: TableDescriptor[ErrorDefinition] = TableDescriptor(
    model=models.Error,
    record_type=ErrorDefinition,
    columns={"name": "error_name"},
)
