# models/base.py
import re
from typing import Any, Dict

from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Tables themselves are created by the alembic revisions, never by
     metadata.create_all().
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: RecentActivity -> recent_activities
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'

     def to_dict(self) -> Dict[str, Any]:
          """Column values keyed by column name, as the front-end reads rows."""
          return {column.key: getattr(self, column.key) for column in self.__table__.columns}
