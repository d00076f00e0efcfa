"""Baseline

Revision ID: 0001
Revises: None
Create Date: 2024-01-15 00:00:00.000000

What:  Empty starting point for the migration history.
Why:   `make db-migrate` stamps a fresh database with a known revision, and
       the first real schema change autogenerates on top of it.
"""

from typing import Sequence, Union

# revision identifiers
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    pass


def downgrade() -> None:
    pass
