import dishka

from backoffice.util.di.scope import Scope


class Provider(dishka.Provider):
    """Base for all back-office providers. Unscoped factories default to Scope.UOW."""

    scope = Scope.UOW
