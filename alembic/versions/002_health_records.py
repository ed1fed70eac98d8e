"""Health records: metric readings, fitness goals, risk factors.

Revision ID: 002
Revises: 001
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

goal_type = sa.Enum("WEIGHT", "BODY_FAT", "STRENGTH", "ENDURANCE", "HEALTH_METRIC", "OTHER", name="goaltype")
risk_factor_type = sa.Enum("LIFESTYLE", "MEDICAL", "GENETIC", "ENVIRONMENTAL", name="riskfactortype")


def upgrade() -> None:
    op.create_table(
        "health_metrics",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("measurement_date", sa.Date(), nullable=False),
        sa.Column("blood_pressure_systolic", sa.Integer(), nullable=True),
        sa.Column("blood_pressure_diastolic", sa.Integer(), nullable=True),
        sa.Column("resting_heart_rate", sa.Integer(), nullable=True),
        sa.Column("cholesterol_total", sa.Float(), nullable=True),
        sa.Column("cholesterol_hdl", sa.Float(), nullable=True),
        sa.Column("cholesterol_ldl", sa.Float(), nullable=True),
        sa.Column("blood_glucose_level", sa.Float(), nullable=True),
        sa.Column("hba1c_level", sa.Float(), nullable=True),
        sa.Column("stress_level", sa.Integer(), nullable=True),
        sa.Column("anxiety_level", sa.Integer(), nullable=True),
        sa.Column("sleep_quality", sa.Integer(), nullable=True),
        sa.Column("sleep_hours", sa.Float(), nullable=True),
        sa.Column("bmi", sa.Float(), nullable=True),
        sa.Column("vo2_max", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_health_metrics_user_date", "health_metrics", ["user_id", "measurement_date"], unique=False)

    op.create_table(
        "fitness_goals",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("goal_type", goal_type, nullable=False),
        sa.Column("goal_description", sa.String(length=500), nullable=False),
        sa.Column("target_value", sa.Float(), nullable=True),
        sa.Column("current_value", sa.Float(), nullable=True),
        sa.Column("unit", sa.String(length=50), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("target_date", sa.Date(), nullable=True),
        sa.Column("is_achieved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_fitness_goals_user_created", "fitness_goals", ["user_id", "created_at"], unique=False)

    op.create_table(
        "health_risk_factors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("factor_type", risk_factor_type, nullable=False),
        sa.Column("factor_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("severity", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("onset_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_health_risk_factors_user_severity", "health_risk_factors", ["user_id", "severity"], unique=False
    )


def downgrade() -> None:
    op.drop_table("health_risk_factors")
    op.drop_table("fitness_goals")
    op.drop_table("health_metrics")
    bind = op.get_bind()
    risk_factor_type.drop(bind, checkfirst=True)
    goal_type.drop(bind, checkfirst=True)
