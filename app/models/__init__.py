"""
Record models package.

All models are imported here so that other modules can import from
app.models directly. CollectionDocument is the SQLAlchemy table used by
the SQL storage backend; the others are pydantic records.
"""

from app.models.user import User, Identity  # noqa: F401
from app.models.developer import Developer, DeveloperRole  # noqa: F401
from app.models.document import CollectionDocument  # noqa: F401
