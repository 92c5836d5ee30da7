"""OrderStore — the persistence gateway used by the order service.

Wraps the domain's repositories behind a small insert/select/update surface.
Identifiers are assigned by the provider when a record is first added and
read back from the entity. One store is built at startup and handed to
`OrderService`; it holds no connection of its own, each call goes through
the provider configured for the domain.
"""

from contextlib import contextmanager

from protean.core.unit_of_work import UnitOfWork
from protean.domain import Domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.reflection import id_field

from ordering.utils.logging import get_logger

logger = get_logger(__name__)


class StoreError(Exception):
    """The persistence provider failed for a reason other than a missing record."""


class OrderStore:
    def __init__(self, domain: Domain):
        self.domain = domain

    @contextmanager
    def _guard(self, action: str, subject: str):
        try:
            yield
        except (ObjectNotFoundError, ValidationError, StoreError):
            raise
        except Exception as exc:
            logger.error("store_failure", action=action, subject=subject, error=str(exc))
            raise StoreError(f"{action} {subject} failed") from exc

    def _repository(self, entity_cls):
        return self.domain.repository_for(entity_cls)

    @contextmanager
    def transaction(self):
        """A unit of work: writes made inside it are committed together on exit.

        A failing commit is reported as `StoreError`, like any other provider
        failure.
        """
        with self._guard("commit", "transaction"):
            with UnitOfWork() as uow:
                yield uow

    def insert(self, entity):
        """Add a new record and return the identifier the provider assigned to it."""
        entity_cls = type(entity)
        with self._guard("insert", entity_cls.__name__):
            self._repository(entity_cls).add(entity)
        return getattr(entity, id_field(entity).field_name)

    def select_one(self, entity_cls, identifier):
        """Load one record by identifier. Raises `ObjectNotFoundError` when absent."""
        with self._guard("select", entity_cls.__name__):
            return self._repository(entity_cls).get(identifier)

    def select_many(self, entity_cls, order_by=None, **filters) -> list:
        with self._guard("select", entity_cls.__name__):
            query = self._repository(entity_cls)._dao.query.filter(**filters)
            if order_by:
                query = query.order_by(order_by)
            return query.all().items

    def update(self, entity):
        with self._guard("update", type(entity).__name__):
            self._repository(type(entity)).add(entity)
