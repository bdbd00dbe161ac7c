"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    UniqueConstraint,
    text,
)
from sqlalchemy.types import JSON

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ROLES TABLE (Access)
# ============================================================================
# parent_id is a self-reference kept without a foreign key; dangling parents and
# cycles are tolerated on read and excluded from built trees.
roles_table = Table(
    "roles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("parent_id", Integer, nullable=True),
    Column("display_order", Integer, nullable=False, server_default=text("0")),
    Column("available", Boolean, nullable=False, server_default=text("true")),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("ix_roles_parent_id", roles_table.c.parent_id)


# ============================================================================
# MENUS TABLE (Access)
# ============================================================================
menus_table = Table(
    "menus",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("type", String(16), nullable=False),  # MenuType as string
    Column("parent_id", Integer, nullable=True),
    Column("display_order", Integer, nullable=False, server_default=text("0")),
    Column("url", String(500), nullable=True),
    Column("icon", String(100), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("ix_menus_parent_id", menus_table.c.parent_id)


# ============================================================================
# AUTHORITY ITEMS TABLE (Access, per-menu authority codes)
# ============================================================================
authority_items_table = Table(
    "authority_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("menu_id", Integer, ForeignKey("menus.id", ondelete="CASCADE"), nullable=False),
    Column("authority", String(100), nullable=False),
    Column("types", JSON, nullable=False),  # list of allowed action types
    Column("display_order", Integer, nullable=False, server_default=text("0")),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("ix_authority_items_menu_id", authority_items_table.c.menu_id)


# ============================================================================
# ROLE MENUS TABLE (Access grants)
# ============================================================================
role_menus_table = Table(
    "role_menus",
    metadata,
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False),
    Column("menu_id", Integer, ForeignKey("menus.id", ondelete="CASCADE"), nullable=False),
    PrimaryKeyConstraint("role_id", "menu_id", name="pk_role_menus"),
)


# ============================================================================
# ADMINS TABLE (Authentication)
# ============================================================================
admins_table = Table(
    "admins",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("login_id", String(100), nullable=False),
    Column("name", String(100), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="SET NULL"), nullable=True),
    Column("is_super_admin", Boolean, nullable=False, server_default=text("false")),
    Column("available", Boolean, nullable=False, server_default=text("true")),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
    Column("password_changed_at", DateTime(timezone=True), nullable=True),
    UniqueConstraint("login_id", name="uq_admins_login_id"),
)


# ============================================================================
# ADMIN CONFIGS TABLE (Profile)
# ============================================================================
admin_configs_table = Table(
    "admin_configs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("admin_id", Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False),
    Column("settings", JSON, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("admin_id", name="uq_admin_configs_admin_id"),
)


# ============================================================================
# REVOKED TOKENS TABLE (Authentication)
# ============================================================================
revoked_tokens_table = Table(
    "revoked_tokens",
    metadata,
    Column("token_id", String(64), primary_key=True),  # JWT jti
    Column("admin_id", Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("revoked_at", DateTime(timezone=True), nullable=False),
)

Index("ix_revoked_tokens_expires_at", revoked_tokens_table.c.expires_at)
