import logging

import pytest

from webapi.collections import DataContext
from webapi.database.provider import DataProvider, engine_options
from webapi.errors.codes import ErrorCode

from ..test_fixtures.settings_fixtures import make_settings, sqlite_url


def test_engine_options_for_postgres_include_pool_and_schema():
    settings = make_settings(
        DATABASE_URI=None,
        POSTGRES_HOST="db",
        DB_SCHEMA="webapi",
        DB_POOL_SIZE=7,
        DB_MAX_OVERFLOW=3,
    )

    options = engine_options(settings)

    assert options["pool_pre_ping"] is True
    assert options["pool_size"] == 7
    assert options["max_overflow"] == 3
    assert options["execution_options"] == {"schema_translate_map": {None: "webapi"}}


def test_engine_options_for_mysql_include_pool_sizing():
    options = engine_options(make_settings(DATABASE_URI=None, DB_BACKEND="mysql", DB_POOL_SIZE=4))

    assert options["pool_size"] == 4
    assert options["pool_pre_ping"] is True


def test_engine_options_for_sqlite_skip_pool_sizing_and_schema():
    options = engine_options(make_settings(DATABASE_URI="sqlite+aiosqlite:///x.db", DB_SCHEMA=""))

    assert "pool_size" not in options
    assert "max_overflow" not in options
    assert "execution_options" not in options


@pytest.mark.asyncio
async def test_from_engine_loads_error_names(engine):
    provider = await DataProvider.from_engine(engine)

    assert provider.error_names.name_for(ErrorCode.OK) == "Ok"
    assert provider.error_names.name_for(ErrorCode.DATABASE_ERROR) == "DatabaseError"
    assert provider.error_names.name_for(ErrorCode.NOT_FOUND_ERROR) == "NotFoundError"
    assert len(provider.error_names) == 3


@pytest.mark.asyncio
async def test_missing_error_table_leaves_names_empty(bare_engine, caplog):
    caplog.set_level(logging.WARNING, logger="webapi.replies.error_names")

    provider = await DataProvider.from_engine(bare_engine)

    assert len(provider.error_names) == 0
    assert any(r.getMessage() == "provider.error_names.load_failed" for r in caplog.records)


@pytest.mark.asyncio
async def test_connect_and_dispose_from_settings(engine, db_path):
    settings = make_settings(DATABASE_URI=sqlite_url(db_path))

    context = await DataContext.create(settings)
    try:
        assert context.replies.error_reply(ErrorCode.NOT_FOUND_ERROR).error_name == "NotFoundError"
        assert await context.cars.get() == []
    finally:
        await context.close()
