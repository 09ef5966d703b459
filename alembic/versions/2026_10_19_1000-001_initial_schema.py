"""Initial schema: profiles, submission items, rules and submissions

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

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
    """Create all tables."""
    op.create_table('profiles',
        sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('display_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False, server_default='client'),
        sa.Column('shield_stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('gamification_effective_from', sa.Date(), nullable=True),
        sa.Column('past_submission_days', sa.Integer(), nullable=False, server_default='7'),
        sa.Column('future_submission_days', sa.Integer(), nullable=False, server_default='7'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("role IN ('admin', 'client')", name='ck_profiles_role'))

    op.create_table('submission_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('effective_from', sa.Date(), nullable=False, server_default=sa.text('CURRENT_DATE')),
        sa.Column('effective_to', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_submission_items_user_id'), 'submission_items', ['user_id'])

    op.create_table('submission_rules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('rule_type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('scope', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=True),
        sa.Column('specific_date', sa.Date(), nullable=True),
        sa.Column('value', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('group_id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=True),
        sa.Column('group_required_count', sa.Integer(), nullable=True),
        sa.Column('effective_from', sa.Date(), nullable=False, server_default=sa.text('CURRENT_DATE')),
        sa.Column('effective_to', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("rule_type IN ('deadline', 'target_day', 'rest_day', 'group')",
                           name='ck_submission_rules_rule_type'),
        sa.CheckConstraint("scope IN ('monthly', 'weekly', 'daily')", name='ck_submission_rules_scope'),
        sa.CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_submission_rules_day_of_week'))
    op.create_index(op.f('ix_submission_rules_user_id'), 'submission_rules', ['user_id'])
    op.create_index(op.f('ix_submission_rules_group_id'), 'submission_rules', ['group_id'])

    op.create_table('submissions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('target_date', sa.Date(), nullable=True),
        sa.Column('submission_item_id', sa.Integer(), nullable=True),
        sa.Column('comment_text', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('r2_key', sqlmodel.sql.sqltypes.AutoString(length=512), nullable=True),
        sa.Column('duration', sa.Float(), nullable=True),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=True),
        sa.Column('is_revival', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['submission_item_id'], ['submission_items.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("type IN ('video', 'comment', 'shield')", name='ck_submissions_type'),
        sa.CheckConstraint("status IN ('success', 'fail', 'excused')", name='ck_submissions_status'))
    op.create_index(op.f('ix_submissions_user_id'), 'submissions', ['user_id'])
    op.create_index(op.f('ix_submissions_target_date'), 'submissions', ['target_date'])
    op.create_index('uq_submissions_shield_per_day', 'submissions', ['user_id', 'target_date'], unique=True,
                    postgresql_where=sa.text("type = 'shield'"))


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index('uq_submissions_shield_per_day', table_name='submissions')
    op.drop_index(op.f('ix_submissions_target_date'), table_name='submissions')
    op.drop_index(op.f('ix_submissions_user_id'), table_name='submissions')
    op.drop_table('submissions')
    op.drop_index(op.f('ix_submission_rules_group_id'), table_name='submission_rules')
    op.drop_index(op.f('ix_submission_rules_user_id'), table_name='submission_rules')
    op.drop_table('submission_rules')
    op.drop_index(op.f('ix_submission_items_user_id'), table_name='submission_items')
    op.drop_table('submission_items')
    op.drop_table('profiles')
