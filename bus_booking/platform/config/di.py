"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.database.orm_db_setting import Database
from bus_booking.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from bus_booking.service.audit.app.command.record_activity_use_case import RecordActivityUseCase
from bus_booking.service.audit.driven_adapter.repo.activity_repo_impl import ActivityRepoImpl
from bus_booking.service.identity.driven_adapter.repo.admin_command_repo_impl import (
    AdminCommandRepoImpl,
)
from bus_booking.service.identity.driven_adapter.repo.admin_query_repo_impl import (
    AdminQueryRepoImpl,
)
from bus_booking.service.identity.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from bus_booking.service.identity.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from bus_booking.service.inventory.driven_adapter.repo.seat_query_repo_impl import (
    SeatQueryRepoImpl,
)
from bus_booking.service.ticketing.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from bus_booking.service.ticketing.driven_adapter.repo.catalog_command_repo_impl import (
    CatalogCommandRepoImpl,
)
from bus_booking.service.ticketing.driven_adapter.repo.catalog_query_repo_impl import (
    CatalogQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (PostgreSQL, or SQLite through DATABASE_URL)
    database = providers.Singleton(Database)

    # Unit of work: a fresh instance per request, one transaction per `async with`
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Repositories (stateless - use session_factory per call)
    seat_query_repo = providers.Singleton(
        SeatQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    catalog_command_repo = providers.Singleton(
        CatalogCommandRepoImpl, session_factory=database.provided.session
    )
    catalog_query_repo = providers.Singleton(
        CatalogQueryRepoImpl, session_factory=database.provided.session
    )
    admin_command_repo = providers.Singleton(
        AdminCommandRepoImpl, session_factory=database.provided.session
    )
    admin_query_repo = providers.Singleton(
        AdminQueryRepoImpl, session_factory=database.provided.session
    )
    activity_repo = providers.Singleton(
        ActivityRepoImpl, session_factory=database.provided.session
    )

    # Audit trail (shared by every bounded context)
    activity_recorder = providers.Singleton(RecordActivityUseCase, activity_repo=activity_repo)

    # Auth services
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
