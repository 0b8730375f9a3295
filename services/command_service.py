# services/command_service.py
"""
Command Service - the named handlers the desktop shell invokes.

Every handler is a plain function with no side effects. Apart from
greet(name), they take no arguments and return a fresh copy of a fixed
payload from services.mock_data, so a caller can never change what the
next caller sees.

invoke() looks a handler up by name and validates its arguments. It is
the only place the command layer can fail.
"""
import copy
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError, validate_call

from services import mock_data


class UnknownCommandError(LookupError):
     """Raised when no handler is registered under the requested name."""

     def __init__(self, name: str):
          super().__init__(f"Unknown command: {name}")
          self.name = name


class CommandArgumentError(ValueError):
     """Raised when the supplied arguments do not fit the handler."""


def greet(name: str) -> str:
     return f"Hello, {name}!"


def get_stats_cards() -> List[Dict[str, str]]:
     return copy.deepcopy(mock_data.STATS_CARDS)


def get_recent_activities() -> List[Dict[str, str]]:
     return copy.deepcopy(mock_data.RECENT_ACTIVITIES)


def get_upcoming_tasks() -> List[Dict[str, str]]:
     return copy.deepcopy(mock_data.UPCOMING_TASKS)


def get_mock_units() -> List[Dict[str, Any]]:
     return copy.deepcopy(mock_data.UNITS)


def get_mock_tenants() -> List[Dict[str, Any]]:
     return copy.deepcopy(mock_data.TENANTS)


def get_property_types() -> List[str]:
     return list(mock_data.PROPERTY_TYPES)


def get_all_properties() -> List[Dict[str, Any]]:
     return copy.deepcopy(mock_data.PROPERTIES)


def get_all_payments() -> List[Dict[str, Any]]:
     return copy.deepcopy(mock_data.PAYMENTS)


def get_expense_categories() -> List[str]:
     return list(mock_data.EXPENSE_CATEGORIES)


def get_all_expenses() -> List[Dict[str, Any]]:
     return copy.deepcopy(mock_data.EXPENSES)


def get_building_blocks() -> List[str]:
     return list(mock_data.BUILDING_BLOCKS)


COMMANDS: Dict[str, Callable[..., Any]] = {
     handler.__name__: handler
     for handler in (
          greet,
          get_stats_cards,
          get_recent_activities,
          get_upcoming_tasks,
          get_mock_units,
          get_mock_tenants,
          get_property_types,
          get_all_properties,
          get_all_payments,
          get_expense_categories,
          get_all_expenses,
          get_building_blocks,
     )
}


def list_commands() -> List[str]:
     return sorted(COMMANDS)


def invoke(name: str, args: Optional[Dict[str, Any]] = None) -> Any:
     """
     Run the handler registered as `name` with keyword arguments `args`.

     Raises:
          UnknownCommandError: no handler has that name.
          CommandArgumentError: `args` is missing, unexpected or of the wrong type.
     """
     handler = COMMANDS.get(name)
     if handler is None:
          raise UnknownCommandError(name)

     try:
          return validate_call(handler)(**(args or {}))
     except ValidationError as e:
          raise CommandArgumentError(f"Invalid arguments for {name}: {e}") from e
