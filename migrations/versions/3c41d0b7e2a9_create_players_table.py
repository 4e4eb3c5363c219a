"""create_players_table

Create the players table binding display names to identity keys:
- identity_key is the primary key (one binding per identity)
- name carries a unique constraint (one binding per name)

Revision ID: 3c41d0b7e2a9
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c41d0b7e2a9"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "players",
        sa.Column("identity_key", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(16), nullable=False),
        sa.Column("first_seen_address", sa.String(45), nullable=True),
        sa.Column("last_seen_address", sa.String(45), nullable=True),
        sa.UniqueConstraint("name", name="uq_players_name"),
        if_not_exists=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("players")
