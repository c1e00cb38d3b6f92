from capstone_catalog.backend.app.core.config import Settings, settings
from capstone_catalog.backend.app.core.deps import get_uow
from capstone_catalog.backend.app.core.logging import setup_logging

__all__ = ['settings',
           'Settings',
           'setup_logging',
           'get_uow']
