"""
Dependency Injection Container.

Provides lazily created singletons for:
- Settings
- Database engine
- Repositories
- Mediator with handlers and pipeline behaviors registered
"""
from typing import Optional

from sqlalchemy import Engine

from ..mediator import Mediator
from ..adapters.secondary.persistence.engine import create_engine_from_config
from ..adapters.secondary.persistence.price_repository import PriceRepositorySQLAlchemy
from ..application.common.behaviors import LoggingBehavior, ValidationBehavior
from ..application.pricing.queries.get_applicable_price import (
    GetApplicablePriceQuery,
    GetApplicablePriceHandler
)
from .settings import Settings


_settings: Optional[Settings] = None
_engine: Optional[Engine] = None
_price_repo: Optional[PriceRepositorySQLAlchemy] = None
_mediator: Optional[Mediator] = None


def get_settings() -> Settings:
    """
    Get or load settings from the environment.

    Returns:
        Settings: Singleton settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_engine() -> Engine:
    """
    Get or create the SQLAlchemy engine.

    Returns:
        Engine: Singleton engine instance
    """
    global _engine
    if _engine is None:
        _engine = create_engine_from_config(config=get_settings())
    return _engine


def get_price_repository() -> PriceRepositorySQLAlchemy:
    """
    Get or create price repository.

    Returns:
        PriceRepositorySQLAlchemy: Singleton price repository instance
    """
    global _price_repo
    if _price_repo is None:
        _price_repo = PriceRepositorySQLAlchemy(get_engine())
    return _price_repo


def get_mediator() -> Mediator:
    """
    Get or create configured mediator.

    Behaviors execute in order: Logging -> Validation -> Handler

    Returns:
        Mediator: Fully configured mediator instance
    """
    global _mediator
    if _mediator is None:
        _mediator = Mediator()

        _mediator.register_behavior(LoggingBehavior())
        _mediator.register_behavior(ValidationBehavior())

        price_repo = get_price_repository()

        # ===== Pricing Query Handlers =====
        _mediator.register_handler(
            GetApplicablePriceQuery,
            lambda: GetApplicablePriceHandler(price_repo)
        )

    return _mediator


def reset_container():
    """
    Reset all singleton instances.

    Disposes the engine first so an in-memory database is released.
    """
    global _settings, _engine, _price_repo, _mediator

    if _engine is not None:
        _engine.dispose()

    _settings = None
    _engine = None
    _price_repo = None
    _mediator = None
