"""Create and drop the relational tables backing the Ordering domain."""

from protean.domain import Domain
from sqlalchemy import create_engine

_RDBMS_PROVIDERS = ("sqlite", "postgresql")


def _rdbms_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
            yield provider


def _register_models(domain: Domain, provider) -> None:
    # Touching `_dao` builds the SQLAlchemy model for each aggregate so that
    # its table is registered on the provider's metadata. A fresh process has
    # an empty metadata until this runs.
    for _, aggregate_record in domain.registry.aggregates.items():
        if aggregate_record.cls.meta_.provider == provider.name:
            domain.repository_for(aggregate_record.cls)._dao  # noqa: B018


def setup_db(domain: Domain):
    """Create the `orders` and `order_line_items` tables if they do not exist.

    In-memory providers are skipped; they need no schema.
    """
    with domain.domain_context():
        for provider in _rdbms_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            _register_models(domain, provider)
            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    with domain.domain_context():
        for provider in _rdbms_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            _register_models(domain, provider)
            provider._metadata.drop_all(engine)
