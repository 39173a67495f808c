from afterschool_catalog.infra.db.models.base import Base
from afterschool_catalog.infra.db.models.program import ProgramRow

__all__ = ["Base", "ProgramRow"]
