"""Initial schema: vendors, users, evaluators, evaluations, documents, chat,
votes, admin settings and deployment errors.

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

SCORE_COLUMNS = (
    'experience_score', 'case_studies_score', 'domain_experience_score',
    'understanding_score', 'objectives_alignment_score', 'scope_coverage_score',
    'methodology_score', 'work_plan_score', 'team_qualification_score',
    'risk_management_score', 'innovation_score',
    'cost_score', 'value_for_money_score', 'payment_terms_score',
    'references_score', 'client_feedback_score',
    'deliverables_score', 'timeline_score',
)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(120)),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(50)),
        *_timestamps(),
    )
    op.create_table(
        'vendors',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('domain', sa.String(20), nullable=False, index=True),
        sa.Column('contact_name', sa.String(120)),
        sa.Column('email', sa.String(254)),
        sa.Column('phonenumber', sa.String(40)),
        sa.Column('website', sa.String(255)),
        sa.Column('description', sa.Text()),
        sa.Column('final_decision', sa.String(20), index=True),
        sa.Column('decided_at', sa.DateTime()),
        *_timestamps(),
    )
    op.create_table(
        'evaluators',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), unique=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('email', sa.String(254)),
        sa.Column('expertise', sa.String(20)),
        *_timestamps(),
    )
    op.create_table(
        'evaluations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), nullable=False, index=True),
        sa.Column('evaluator_id', sa.Integer(), sa.ForeignKey('evaluators.id'), nullable=False, index=True),
        sa.Column('domain', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        *[sa.Column(name, sa.Float()) for name in SCORE_COLUMNS],
        sa.Column('remarks', sa.JSON()),
        sa.Column('overall_score', sa.Float()),
        *_timestamps(),
    )
    op.create_table(
        'vendor_votes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('vote', sa.String(10), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('vendor_id', 'user_id', name='uq_vendor_votes_vendor_user'),
    )
    op.create_table(
        'documents',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), nullable=False, index=True),
        sa.Column('uploaded_by', sa.Integer(), sa.ForeignKey('users.id')),
        sa.Column('kind', sa.String(20)),
        sa.Column('storage_url', sa.String(512), nullable=False),
        sa.Column('file_metadata', sa.JSON()),
        *_timestamps(),
    )
    op.create_table(
        'chat_messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'chat_notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('message_id', sa.Integer(), sa.ForeignKey('chat_messages.id'), nullable=False),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('read_at', sa.DateTime()),
        *_timestamps(),
    )
    op.create_table(
        'admin_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('evaluations_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('voting_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('chat_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('documents_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_table(
        'deployment_errors',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('error_message', sa.Text(), nullable=False),
        sa.Column('error_stack', sa.Text()),
        sa.Column('error_code', sa.String(64)),
        sa.Column('environment', sa.String(64), nullable=False),
        sa.Column('component', sa.String(120)),
        sa.Column('error_metadata', sa.JSON()),
        sa.Column('resolved', sa.Boolean(), nullable=False, server_default=sa.false(), index=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for name in ('deployment_errors', 'admin_settings', 'chat_notifications', 'chat_messages',
                 'documents', 'vendor_votes', 'evaluations', 'evaluators', 'vendors', 'users'):
        op.drop_table(name)
