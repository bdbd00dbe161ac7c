"""Startup validation for handler authorization declarations."""

import logging

from backoffice.domain.shared.authorization.gate import Gate
from backoffice.domain.shared.command import CommandHandler
from backoffice.domain.shared.error import ConfigurationError
from backoffice.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _check_handler_class(handler_cls: type) -> None:
    """Raise ConfigurationError if the handler lacks an __auth__ gate."""
    if not isinstance(getattr(handler_cls, "__auth__", None), Gate):
        raise ConfigurationError(f"Handler {handler_cls.__name__} has no __auth__ declaration")


def validate_all_handlers() -> None:
    """Scan all registered CommandHandler and QueryHandler subclasses.

    Raises ConfigurationError listing all handlers missing __auth__ declarations.
    """
    violations: list[str] = []

    for base in (CommandHandler, QueryHandler):
        for handler_cls in base.__subclasses__():
            try:
                _check_handler_class(handler_cls)
            except ConfigurationError as e:
                violations.append(str(e))

    if violations:
        raise ConfigurationError(
            f"Authorization validation failed for {len(violations)} handler(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    logger.info("Authorization startup validation passed for all handlers")
