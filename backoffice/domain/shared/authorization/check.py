"""Gate evaluation shared by command and query handlers."""

import logging
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any

from backoffice.domain.shared.authorization.gate import Authenticated, Gate, Public
from backoffice.domain.shared.error import AuthorizationError, ConfigurationError

_auth_logger = logging.getLogger("backoffice.authz")

# Unbound async handler method: (self, msg) -> Coroutine -> Result
HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def wrap_run_with_gate(original_run: HandlerMethod) -> HandlerMethod:
    """Wrap the run() method with __auth__ gate evaluation."""

    @wraps(original_run)
    async def gated_run(self: Any, msg: Any) -> Any:
        from backoffice.domain.auth.model.caller import CallerContext

        auth_gate = getattr(type(self), "__auth__", None)

        if not isinstance(auth_gate, Gate):
            raise ConfigurationError(f"Handler {type(self).__name__} has no __auth__ declaration")

        if isinstance(auth_gate, Public):
            return await original_run(self, msg)

        if isinstance(auth_gate, Authenticated):
            caller = getattr(self, "caller", None)
            if not isinstance(caller, CallerContext):
                raise AuthorizationError("Authentication required", code="missing_token")

            _auth_logger.debug(
                "Auth check: handler=%s, admin_id=%s, role_id=%s, super_admin=%s",
                type(self).__name__,
                caller.admin_id,
                caller.role_id,
                caller.is_super_admin,
            )
            return await original_run(self, msg)

        raise ConfigurationError(  # pragma: no cover
            f"Handler {type(self).__name__} has unhandled __auth__ type: {type(auth_gate).__name__}"
        )

    return gated_run
