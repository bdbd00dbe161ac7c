from backoffice.domain.profile.util.di.provider import ProfileProvider

__all__ = ["ProfileProvider"]
