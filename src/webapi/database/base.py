"""
Declarative base for the car/usr/subscription/error tables.
Import this Base class in any model module that defines ORM classes.

The models are declared without a schema. The Connection Provider maps the
default schema onto `Settings.DB_SCHEMA` through `schema_translate_map`, so
the same tables work on Postgres (`webapi.car`) and on SQLite in tests (`car`).
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# Naming convention for constraints and indexes
Base.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}
