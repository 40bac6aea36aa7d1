"""create feedbacks

Revision ID: 3a7c91d2e4b0
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c91d2e4b0'
down_revision = None
branch_labels = None
depends_on = None

RATING_COLUMNS = (
    'attendance', 'dress_code', 'discipline', 'participation', 'teamwork',
    'presentation_content', 'presentation_delivery', 'communication',
    'analytical', 'creativity', 'ethics', 'emotional', 'overall_engagement',
)


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('feedbacks'):
        op.create_table(
            'feedbacks',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('student_name', sa.String(length=120), nullable=False),
            sa.Column('reg_number', sa.String(length=10), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('mobile', sa.String(length=10), nullable=False),
            sa.Column('faculty', sa.String(length=120), nullable=False),
            sa.Column('batch_id', sa.String(length=50), nullable=True),
            *[sa.Column(name, sa.Float(), nullable=True) for name in RATING_COLUMNS],
            sa.Column('quiz_marks', sa.Float(), nullable=True),
            sa.Column('weighted_score', sa.Float(), nullable=False, server_default='0'),
            sa.Column('grade', sa.String(length=2), nullable=False, server_default='-'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_feedbacks_reg_number', 'feedbacks', ['reg_number'])
        op.create_index('ix_feedbacks_faculty', 'feedbacks', ['faculty'])
        op.create_index('ix_feedbacks_created_at', 'feedbacks', ['created_at'])


def downgrade():
    op.drop_index('ix_feedbacks_created_at', table_name='feedbacks')
    op.drop_index('ix_feedbacks_faculty', table_name='feedbacks')
    op.drop_index('ix_feedbacks_reg_number', table_name='feedbacks')
    op.drop_table('feedbacks')
