
# webapi/
# │
# ├── errors/
# │   ├── __init__.py
# │   ├── codes.py                   # Numeric ErrorCode taxonomy + HTTP status mapping
# │   ├── base.py                    # RepositoryError, DatabaseError
# │   ├── integrity_classifier.py    # SQL-level constraint classification (diagnostics)
# │   └── mapper.py                  # db_error_handler: driver errors -> DatabaseError

from .codes import ErrorCode, http_status_for
from .base import RepositoryError, DatabaseError

__all__ = ["ErrorCode", "http_status_for", "RepositoryError", "DatabaseError"]
