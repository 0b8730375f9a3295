# services/migration_service.py
"""
Migration Service - applies the alembic revisions to the SQLite file.

The revisions under alembic/versions form one linear chain. Each one is
applied at most once; alembic records progress in alembic_version, so
running the upgrade again on an up-to-date file is a no-op.

Usage:
     from services.migration_service import run_migrations

     run_migrations()                 # app engine, up to head
     run_migrations(engine, "20250610_000012")
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

from database import engine as default_engine

logger = logging.getLogger(__name__)

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def build_alembic_config(bind: Optional[Engine] = None) -> Config:
     """Alembic config pointing at our script directory and the given engine's URL."""
     bind = bind or default_engine
     config = Config()
     config.set_main_option("script_location", str(ALEMBIC_DIR))
     url = bind.url.render_as_string(hide_password=False)
     # configparser interpolation treats % specially
     config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
     return config


def current_revision(bind: Optional[Engine] = None) -> Optional[str]:
     """Revision the database is at, or None when nothing has been applied."""
     bind = bind or default_engine
     with bind.connect() as connection:
          return MigrationContext.configure(connection).get_current_revision()


def run_migrations(bind: Optional[Engine] = None, target: str = "head") -> Optional[str]:
     """
     Upgrade the database to `target` (default: head).

     Returns:
          The revision the database is at afterwards.
     """
     bind = bind or default_engine
     config = build_alembic_config(bind)
     before = current_revision(bind)

     with bind.begin() as connection:
          config.attributes["connection"] = connection
          command.upgrade(config, target)

     after = current_revision(bind)
     if before == after:
          logger.info("Database already at revision %s", after)
     else:
          logger.info("Migrated database from %s to %s", before or "base", after)
     return after


def downgrade_migrations(bind: Optional[Engine] = None, target: str = "base") -> Optional[str]:
     """Downgrade the database to `target` and return the resulting revision."""
     bind = bind or default_engine
     config = build_alembic_config(bind)

     with bind.begin() as connection:
          config.attributes["connection"] = connection
          command.downgrade(config, target)

     after = current_revision(bind)
     logger.info("Downgraded database to %s", after or "base")
     return after


def _description(doc: Optional[str]) -> str:
     lines = (doc or "").strip().splitlines()
     return lines[0] if lines else ""


def list_migrations(bind: Optional[Engine] = None) -> List[Dict[str, Union[int, str, bool]]]:
     """
     Every known revision in application order, flagged with whether it
     has been applied to the database.
     """
     bind = bind or default_engine
     script = ScriptDirectory.from_config(build_alembic_config(bind))
     revisions = list(reversed(list(script.walk_revisions())))  # walk_revisions goes head -> base

     current = current_revision(bind)
     applied_ids = set()
     if current is not None:
          applied_ids = {rev.revision for rev in script.iterate_revisions(current, "base")}

     return [
          {
               "version": position,
               "revision": rev.revision,
               "description": _description(rev.doc),
               "applied": rev.revision in applied_ids,
          }
          for position, rev in enumerate(revisions, start=1)
     ]
