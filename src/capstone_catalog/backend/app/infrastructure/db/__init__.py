from capstone_catalog.backend.app.infrastructure.db.base import Base
from capstone_catalog.backend.app.infrastructure.db.engine import create_engine
from capstone_catalog.backend.app.infrastructure.db.session import create_session_factory
from capstone_catalog.backend.app.infrastructure.db.init_db import init_db
from capstone_catalog.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork

__all__ = ['init_db', 'Base', 'create_engine', 'create_session_factory', 'SqlAlchemyUnitOfWork']
