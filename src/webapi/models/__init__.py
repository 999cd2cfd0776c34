r"""
Centralized access to the ORM table models.

Importing this package registers every table with `Base.metadata`, which is
what `Base.metadata.create_all` (tests, local setup) relies on.

    from webapi.models import Car, Usr, Subscription, Error
"""

from .car import Car
from .user import Usr
from .subscription import Subscription
from .error import Error

__all__ = [
    "Car",
    "Usr",
    "Subscription",
    "Error",
]
