"""Create users and daily_reports tables.

Revision ID: 001_create_daily_reports
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_create_daily_reports"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and daily_reports."""
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("vehicle_info", postgresql.JSONB, nullable=True),
        sa.Column(
            "created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()
        ),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "daily_reports",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("is_worked", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("start_time", sa.String(5), nullable=True),
        sa.Column("end_time", sa.String(5), nullable=True),
        sa.Column("start_odometer", sa.Integer, nullable=True),
        sa.Column("end_odometer", sa.Integer, nullable=True),
        sa.Column("distance_km", sa.Integer, nullable=True),
        sa.Column("deliveries", sa.Integer, nullable=True),
        sa.Column("highway_fee", sa.Integer, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column(
            "created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()
        ),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_reports_user_date"),
        sa.CheckConstraint(
            "start_odometer IS NULL OR start_odometer BETWEEN 0 AND 999999",
            name="ck_daily_reports_start_odometer_range",
        ),
        sa.CheckConstraint(
            "end_odometer IS NULL OR end_odometer BETWEEN 0 AND 999999",
            name="ck_daily_reports_end_odometer_range",
        ),
        sa.CheckConstraint(
            "deliveries IS NULL OR deliveries BETWEEN 0 AND 999",
            name="ck_daily_reports_deliveries_range",
        ),
        sa.CheckConstraint(
            "highway_fee IS NULL OR highway_fee >= 0",
            name="ck_daily_reports_highway_fee_non_negative",
        ),
    )
    op.create_index("ix_daily_reports_user_id", "daily_reports", ["user_id"])
    op.create_index("ix_daily_reports_date", "daily_reports", ["date"])


def downgrade() -> None:
    """Drop daily_reports and users."""
    op.drop_index("ix_daily_reports_date", table_name="daily_reports")
    op.drop_index("ix_daily_reports_user_id", table_name="daily_reports")
    op.drop_table("daily_reports")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
