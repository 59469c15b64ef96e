"""seed default_preferences

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-02

Suggested labels shown during onboarding. Downgrade removes only the
seeded rows.
"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None

DEFAULT_PREFERENCES = {
    "foods": ["Coffee", "Chewing gum", "Steak", "Bagel", "Raw vegetables", "Nuts", "Candy"],
    "medications": ["Ibuprofen", "Acetaminophen", "Magnesium", "Muscle relaxant", "Night guard"],
    "exercises": ["Jaw stretches", "Walking", "Yoga", "Running", "Weight training", "Meditation"],
    "symptoms": ["Jaw pain", "Clicking", "Headache", "Ear pain", "Locking", "Teeth grinding"],
}

_table = sa.table(
    "default_preferences",
    sa.column("preference_type", sa.String),
    sa.column("preference_value", sa.String),
)


def upgrade() -> None:
    op.bulk_insert(
        _table,
        [
            {"preference_type": ptype, "preference_value": value}
            for ptype, values in DEFAULT_PREFERENCES.items()
            for value in values
        ],
    )


def downgrade() -> None:
    for ptype, values in DEFAULT_PREFERENCES.items():
        op.execute(
            _table.delete().where(
                _table.c.preference_type == ptype,
                _table.c.preference_value.in_(values),
            )
        )
