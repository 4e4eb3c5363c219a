"""SQLAlchemy table definitions for nameguard.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, MetaData, String, Table, UniqueConstraint

from nameguard.domain.value import (
    MAX_ADDRESS_LENGTH,
    MAX_IDENTITY_KEY_LENGTH,
    MAX_NAME_LENGTH,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PLAYERS TABLE (name <-> identity key bindings)
# ============================================================================
players_table = Table(
    "players",
    metadata,
    Column("identity_key", String(MAX_IDENTITY_KEY_LENGTH), primary_key=True),
    Column("name", String(MAX_NAME_LENGTH), nullable=False),
    Column("first_seen_address", String(MAX_ADDRESS_LENGTH), nullable=True),
    Column("last_seen_address", String(MAX_ADDRESS_LENGTH), nullable=True),
    # A second concurrent claim of the same name must fail, not overwrite
    UniqueConstraint("name", name="uq_players_name"),
)
