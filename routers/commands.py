# routers/commands.py
"""
Command API routes.

The desktop shell calls named commands. Each zero-argument command has a
typed GET route; POST /api/invoke/{command} dispatches any of them by
name with a JSON object of arguments.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, HTTPException, Query, status

from schemas.commands import (
     ActivityItem,
     InvokeResponse,
     MockExpense,
     MockPayment,
     MockProperty,
     MockTenant,
     MockUnit,
     StatCard,
     UpcomingTask,
)
from services import command_service
from services.command_service import CommandArgumentError, UnknownCommandError

router = APIRouter(prefix="/api", tags=["commands"])


@router.get(
     "/commands",
     response_model=List[str],
     summary="List command names"
)
def list_commands():
     return command_service.list_commands()


@router.get("/commands/greet", response_model=str, summary="Greet by name")
def greet(name: str = Query(..., description="Name to greet")):
     return command_service.greet(name)


@router.get("/commands/get_stats_cards", response_model=List[StatCard])
def get_stats_cards():
     return command_service.get_stats_cards()


@router.get("/commands/get_recent_activities", response_model=List[ActivityItem])
def get_recent_activities():
     return command_service.get_recent_activities()


@router.get("/commands/get_upcoming_tasks", response_model=List[UpcomingTask])
def get_upcoming_tasks():
     return command_service.get_upcoming_tasks()


@router.get("/commands/get_mock_units", response_model=List[MockUnit])
def get_mock_units():
     return command_service.get_mock_units()


@router.get("/commands/get_mock_tenants", response_model=List[MockTenant])
def get_mock_tenants():
     return command_service.get_mock_tenants()


@router.get("/commands/get_property_types", response_model=List[str])
def get_property_types():
     return command_service.get_property_types()


@router.get("/commands/get_all_properties", response_model=List[MockProperty])
def get_all_properties():
     return command_service.get_all_properties()


@router.get("/commands/get_all_payments", response_model=List[MockPayment])
def get_all_payments():
     return command_service.get_all_payments()


@router.get("/commands/get_expense_categories", response_model=List[str])
def get_expense_categories():
     return command_service.get_expense_categories()


@router.get("/commands/get_all_expenses", response_model=List[MockExpense])
def get_all_expenses():
     return command_service.get_all_expenses()


@router.get("/commands/get_building_blocks", response_model=List[str])
def get_building_blocks():
     return command_service.get_building_blocks()


@router.post(
     "/invoke/{command}",
     response_model=InvokeResponse,
     summary="Invoke a command by name"
)
def invoke_command(
     command: str,
     args: Optional[Dict[str, Any]] = Body(None, description="Keyword arguments for the command"),
):
     """
     Run a registered command.

     - **command**: one of the names from GET /api/commands
     - **body**: keyword arguments as a JSON object, e.g. {"name": "Ada"}
       for greet; may be omitted for commands without arguments

     An unknown command returns 404; arguments that do not fit return 400.
     """
     try:
          result = command_service.invoke(command, args)
     except UnknownCommandError as e:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
     except CommandArgumentError as e:
          raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

     return InvokeResponse(command=command, result=result)
