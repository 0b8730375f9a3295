from .command_service import (
     COMMANDS,
     CommandArgumentError,
     UnknownCommandError,
     invoke,
     list_commands,
)
from .migration_service import (
     current_revision,
     downgrade_migrations,
     list_migrations,
     run_migrations,
)

__all__ = [
     "COMMANDS",
     "CommandArgumentError",
     "UnknownCommandError",
     "invoke",
     "list_commands",
     "current_revision",
     "downgrade_migrations",
     "list_migrations",
     "run_migrations",
]
