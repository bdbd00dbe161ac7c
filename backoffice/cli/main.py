"""Main CLI application using Cyclopts.

Server-side tooling: runs migrations, seeds admins and serves the API.
"""

import asyncio
import getpass
import sys

import cyclopts
import uvicorn

from backoffice.config import Config, configure_logging
from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.port.credential_store import CredentialStore
from backoffice.domain.auth.port.repository import AdminRepository
from backoffice.domain.shared.error import ValidationError
from backoffice.infrastructure.persistence.migrate import run_migrations
from backoffice.util.di.scope import Scope

app = cyclopts.App(
    name="backoffice",
    help="Back-office administration API",
)


@app.command
def migrate() -> None:
    """Apply pending database migrations."""
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)
    print(f"Migrating {config.database.url} ...")
    run_migrations(config.database.url)
    print("Migrations complete.")


@app.command(name="create-admin")
def create_admin(
    login_id: str,
    name: str,
    *,
    role_id: int | None = None,
    super_admin: bool = False,
    password: str | None = None,
) -> None:
    """Create an admin account with a hashed password.

    Args:
        login_id: Unique login identifier.
        name: Display name.
        role_id: Role to assign. Required unless --super-admin.
        super_admin: Bypass role and menu filtering.
        password: Initial password. Prompted for when omitted.
    """
    if password is None:
        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Repeat password: "):
            print("Passwords do not match", file=sys.stderr)
            sys.exit(1)
    if not password:
        print("Password must not be empty", file=sys.stderr)
        sys.exit(1)

    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)
    if config.database.auto_migrate:
        run_migrations(config.database.url)

    try:
        admin = asyncio.run(
            _create_admin(
                config,
                login_id=login_id,
                name=name,
                role_id=RoleId(role_id) if role_id is not None else None,
                super_admin=super_admin,
                password=password,
            )
        )
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    print(f"Created admin {admin.login_id} (id={admin.id})")


async def _create_admin(
    config: Config,
    *,
    login_id: str,
    name: str,
    role_id: RoleId | None,
    super_admin: bool,
    password: str,
) -> Admin:
    from backoffice.application.di import create_container

    container = create_container(config)
    try:
        async with container(scope=Scope.UOW) as uow:
            admin_repo = await uow.get(AdminRepository)
            credentials = await uow.get(CredentialStore)

            if await admin_repo.get_by_login_id(login_id) is not None:
                raise ValidationError(f"Login id already in use: {login_id}", field="login_id")

            admin = Admin.create(
                login_id=login_id,
                name=name,
                password_hash=credentials.hash(password),
                role_id=role_id,
                is_super_admin=super_admin,
            )
            return await admin_repo.save(admin)
    finally:
        await container.close()


@app.command
def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server with uvicorn.

    Args:
        host: Interface to bind.
        port: Port to bind.
        reload: Restart on code changes (development only).
    """
    uvicorn.run(
        "backoffice.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        access_log=True,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
