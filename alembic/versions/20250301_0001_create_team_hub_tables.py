"""Create team hub tables"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "20250301_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("username", sa.Text(), nullable=False, unique=True),
        sa.Column("email", sa.Text(), nullable=False, unique=True),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False, server_default="athlete"),
        sa.Column("full_name", sa.Text(), nullable=False),
        sa.Column("profile_picture", sa.Text(), nullable=True),
        sa.Column("position", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "athletes",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("user_id", sa.String(length=64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("height", sa.Text(), nullable=True),
        sa.Column("weight", sa.Text(), nullable=True),
        sa.Column("sleep_hours", sa.Text(), nullable=True),
        sa.Column("overall_performance", sa.Text(), nullable=True, server_default="0"),
        sa.Column("last_training", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_athletes_user_id", "athletes", ["user_id"], unique=False)

    op.create_table(
        "exercises",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=True),
        sa.Column("metrics", sa.JSON(), nullable=True),
        sa.Column("created_by", sa.String(length=64), sa.ForeignKey("users.id"), nullable=False),
    )
    op.create_index("ix_exercises_category", "exercises", ["category"], unique=False)

    op.create_table(
        "training_sessions",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("athlete_id", sa.String(length=64), sa.ForeignKey("athletes.id"), nullable=False),
        sa.Column("exercise_id", sa.String(length=64), sa.ForeignKey("exercises.id"), nullable=False),
        sa.Column("results", sa.JSON(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_training_sessions_athlete_id", "training_sessions", ["athlete_id"], unique=False)

    op.create_table(
        "events",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_type", sa.Text(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("mandatory", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_by", sa.String(length=64), sa.ForeignKey("users.id"), nullable=False),
    )
    op.create_index("ix_events_start_date", "events", ["start_date"], unique=False)

    op.create_table(
        "gallery",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("media_type", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("album", sa.Text(), nullable=False, server_default="general"),
        sa.Column("uploaded_by", sa.String(length=64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_gallery_album", "gallery", ["album"], unique=False)

    op.create_table(
        "best_of_week",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("athlete_id", sa.String(length=64), sa.ForeignKey("athletes.id"), nullable=False),
        sa.Column("week_start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("achievements", sa.JSON(), nullable=True),
        sa.Column("set_by", sa.String(length=64), sa.ForeignKey("users.id"), nullable=False),
    )
    op.create_index("ix_best_of_week_week_start", "best_of_week", ["week_start"], unique=False)

    op.create_table(
        "live_streams",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("youtube_url", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("scheduled_for", sa.DateTime(timezone=True), nullable=True),
        sa.Column("category", sa.Text(), nullable=False, server_default="nbb"),
        sa.Column("created_by", sa.String(length=64), sa.ForeignKey("users.id"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("live_streams")
    op.drop_index("ix_best_of_week_week_start", table_name="best_of_week")
    op.drop_table("best_of_week")
    op.drop_index("ix_gallery_album", table_name="gallery")
    op.drop_table("gallery")
    op.drop_index("ix_events_start_date", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_training_sessions_athlete_id", table_name="training_sessions")
    op.drop_table("training_sessions")
    op.drop_index("ix_exercises_category", table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_athletes_user_id", table_name="athletes")
    op.drop_table("athletes")
    op.drop_table("users")
