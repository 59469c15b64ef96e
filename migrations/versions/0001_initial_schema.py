"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PREFERENCE_TYPES = ("foods", "medications", "exercises", "symptoms")


def upgrade() -> None:
    # --- ENUM types ---
    preference_type_enum = sa.Enum(*PREFERENCE_TYPES, name="preference_type_enum")
    preference_type_enum.create(op.get_bind(), checkfirst=True)

    # --- daily_logs ---
    op.create_table(
        "daily_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("pain_score", sa.Integer(), nullable=False),
        sa.Column("stress_level", sa.Integer(), nullable=False),
        sa.Column("foods", sa.JSON(), nullable=False),
        sa.Column("medications", sa.JSON(), nullable=False),
        sa.Column("exercises", sa.JSON(), nullable=False),
        sa.Column("symptoms", sa.JSON(), nullable=False),
        sa.Column("work_done", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("work_type", sa.String(128), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_log_user_date"),
        sa.CheckConstraint("pain_score BETWEEN 1 AND 10", name="ck_daily_log_pain_range"),
        sa.CheckConstraint("stress_level BETWEEN 1 AND 5", name="ck_daily_log_stress_range"),
    )
    op.create_index("ix_daily_logs_id", "daily_logs", ["id"])
    op.create_index("ix_daily_logs_user_id", "daily_logs", ["user_id"])
    op.create_index("ix_daily_logs_date", "daily_logs", ["date"])

    # --- user_preferences ---
    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("preference_type", sa.Enum(
            *PREFERENCE_TYPES, name="preference_type_enum", create_type=False,
        ), nullable=False),
        sa.Column("preference_value", sa.String(128), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "preference_type", "preference_value",
            name="uq_user_preference_value",
        ),
    )
    op.create_index("ix_user_preferences_id", "user_preferences", ["id"])
    op.create_index("ix_user_preferences_user_id", "user_preferences", ["user_id"])

    # --- default_preferences ---
    op.create_table(
        "default_preferences",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("preference_type", sa.Enum(
            *PREFERENCE_TYPES, name="preference_type_enum", create_type=False,
        ), nullable=False),
        sa.Column("preference_value", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("preference_type", "preference_value", name="uq_default_preference_value"),
    )
    op.create_index("ix_default_preferences_id", "default_preferences", ["id"])

    # --- user_onboarding ---
    op.create_table(
        "user_onboarding",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("foods_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("medications_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("exercises_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("symptoms_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("onboarding_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_onboarding_id", "user_onboarding", ["id"])
    op.create_index("ix_user_onboarding_user_id", "user_onboarding", ["user_id"], unique=True)

    # --- user_subscription ---
    op.create_table(
        "user_subscription",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("subscribed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("subscription_tier", sa.String(32), nullable=True),
        sa.Column("subscription_end", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_subscription_id", "user_subscription", ["id"])
    op.create_index("ix_user_subscription_user_id", "user_subscription", ["user_id"], unique=True)


def downgrade() -> None:
    op.drop_table("user_subscription")
    op.drop_table("user_onboarding")
    op.drop_table("default_preferences")
    op.drop_table("user_preferences")
    op.drop_table("daily_logs")
    sa.Enum(name="preference_type_enum").drop(op.get_bind(), checkfirst=True)
