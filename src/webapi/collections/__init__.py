# src/webapi/collections/
# ├─ __init__.py        # DataContext: provider + the four collections + reply mapper
# ├─ base.py            # RecordCollection (get/add/modify/remove)
# ├─ descriptors.py     # TableDescriptor + CARS/USERS/SUBSCRIPTIONS/ERRORS
# └─ expressions.py     # IN-list statements and id list rendering

from __future__ import annotations

from webapi.config.settings import Settings
from webapi.database.provider import DataProvider
from webapi.entities import Car, ErrorDefinition, Subscription, User
from webapi.replies.mapper import ReplyMapper
from .base import RecordCollection
from .descriptors import CARS, ERRORS, SUBSCRIPTIONS, USERS, TableDescriptor


class DataContext:
    """
    Everything a request handler needs, built once at startup and shared.

    Collections hold only the engine reference, so one instance of each serves
    all concurrent requests.
    """

    def __init__(self, provider: DataProvider) -> None:
        self.provider = provider
        self.cars: RecordCollection[Car] = RecordCollection(CARS, provider.engine)
        self.users: RecordCollection[User] = RecordCollection(USERS, provider.engine)
        self.subscriptions: RecordCollection[Subscription] = RecordCollection(SUBSCRIPTIONS, provider.engine)
        self.errors: RecordCollection[ErrorDefinition] = RecordCollection(ERRORS, provider.engine)
        self.replies = ReplyMapper(provider.error_names)

    @classmethod
    async def create(cls, settings: Settings) -> DataContext:
        return cls(await DataProvider.connect(settings))

    async def close(self) -> None:
        await self.provider.dispose()


__all__ = ["DataContext", "RecordCollection", "TableDescriptor", "CARS", "USERS", "SUBSCRIPTIONS", "ERRORS"]
