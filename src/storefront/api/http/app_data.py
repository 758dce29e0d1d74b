from dataclasses import dataclass

from storefront.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
