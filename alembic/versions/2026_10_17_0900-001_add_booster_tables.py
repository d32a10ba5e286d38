"""Add booster tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create trainees, groups, weekly tasks and notifications."""
    op.create_table('trainees', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False, server_default='trainee'),
        sa.Column('booster_enabled', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('booster_unlocked', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('booster_status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False,
                  server_default='not_started'),
        sa.Column('booster_start_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_trainees_email'), 'trainees', ['email'], unique=True)

    op.create_table('trainee_groups', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('assigned_coach', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_trainee_groups_name'), 'trainee_groups', ['name'], unique=True)

    op.create_table('group_memberships', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('group_id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['group_id'], ['trainee_groups.id'], ),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('group_id', 'trainee_id', name='uq_group_trainee'))
    op.create_index(op.f('ix_group_memberships_group_id'), 'group_memberships', ['group_id'], unique=False)
    op.create_index(op.f('ix_group_memberships_trainee_id'), 'group_memberships', ['trainee_id'], unique=False)

    op.create_table('weekly_tasks', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('mission_text', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('tip_text', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('booster_text', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('week_start_date', sa.Date(), nullable=False),
        sa.Column('week_end_date', sa.Date(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False,
                  server_default='not_started'),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('notes_thread', sa.JSON(), nullable=False),
        sa.Column('is_frozen', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_displayed_in_report', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('trainee_id', 'week', name='uq_weekly_task_trainee_week'))
    op.create_index(op.f('ix_weekly_tasks_trainee_id'), 'weekly_tasks', ['trainee_id'], unique=False)
    op.create_index(op.f('ix_weekly_tasks_week_start_date'), 'weekly_tasks', ['week_start_date'], unique=False)

    op.create_table('coach_notifications', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.Column('notification_type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('message', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('sent_by', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('sent_at', sa.DateTime(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default='false'),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_coach_notifications_trainee_id'), 'coach_notifications', ['trainee_id'],
                    unique=False)


def downgrade() -> None:
    """Drop booster tables."""
    op.drop_index(op.f('ix_coach_notifications_trainee_id'), table_name='coach_notifications')
    op.drop_table('coach_notifications')
    op.drop_index(op.f('ix_weekly_tasks_week_start_date'), table_name='weekly_tasks')
    op.drop_index(op.f('ix_weekly_tasks_trainee_id'), table_name='weekly_tasks')
    op.drop_table('weekly_tasks')
    op.drop_index(op.f('ix_group_memberships_trainee_id'), table_name='group_memberships')
    op.drop_index(op.f('ix_group_memberships_group_id'), table_name='group_memberships')
    op.drop_table('group_memberships')
    op.drop_index(op.f('ix_trainee_groups_name'), table_name='trainee_groups')
    op.drop_table('trainee_groups')
    op.drop_index(op.f('ix_trainees_email'), table_name='trainees')
    op.drop_table('trainees')
