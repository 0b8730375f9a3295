# routers/__init__.py
from .commands import router as commands_router
from .managers import router as managers_router
from .properties import router as properties_router
from .blocks import router as blocks_router
from .units import router as units_router
from .tenants import router as tenants_router
from .leases import router as leases_router
from .payments import router as payments_router
from .expenses import router as expenses_router
from .complaints import router as complaints_router
from .dashboard import router as dashboard_router
from .users import router as users_router
from .system import router as system_router

ROUTERS = [
     commands_router,
     managers_router,
     properties_router,
     blocks_router,
     units_router,
     tenants_router,
     leases_router,
     payments_router,
     expenses_router,
     complaints_router,
     dashboard_router,
     users_router,
     system_router,
]

__all__ = ["ROUTERS"]
