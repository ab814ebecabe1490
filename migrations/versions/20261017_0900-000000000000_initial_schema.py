"""initial_schema

Revision ID: 000000000000
Revises:
Create Date: 2026-10-17 09:00:00.000000

Questions catalog plus the inspection -> answers -> photos aggregate.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '000000000000'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create enums
    op.execute("CREATE TYPE inspectionstatus AS ENUM ('IN_PROGRESS', 'COMPLETED')")
    op.execute("CREATE TYPE answertype AS ENUM ('YES', 'NO')")

    # Create questions table
    op.create_table('questions',
        sa.Column('id', sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column('question_text', sa.String(length=500), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('order_index')
    )

    # Create inspections table
    op.create_table('inspections',
        sa.Column('id', sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column('car_id', sa.String(length=100), nullable=False),
        sa.Column('inspection_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', postgresql.ENUM('IN_PROGRESS', 'COMPLETED', name='inspectionstatus', create_type=False), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    # No unique (car_id, IN_PROGRESS) constraint: one draft per car is enforced by the service only
    op.create_index('ix_inspections_car_id_status_created_at', 'inspections', ['car_id', 'status', 'created_at'])

    # Create inspection_answers table
    op.create_table('inspection_answers',
        sa.Column('id', sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column('inspection_id', sa.BigInteger(), nullable=False),
        sa.Column('question_id', sa.BigInteger(), nullable=False),
        sa.Column('answer', postgresql.ENUM('YES', 'NO', name='answertype', create_type=False), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['inspection_id'], ['inspections.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('inspection_id', 'question_id', name='uq_inspection_answers_inspection_question')
    )
    op.create_index('ix_inspection_answers_inspection_id', 'inspection_answers', ['inspection_id'])
    op.create_index('ix_inspection_answers_question_id', 'inspection_answers', ['question_id'])

    # Create inspection_photos table
    op.create_table('inspection_photos',
        sa.Column('id', sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column('answer_id', sa.BigInteger(), nullable=False),
        sa.Column('photo_url', sa.String(length=500), nullable=False),
        sa.Column('is_new', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('uploaded_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['answer_id'], ['inspection_answers.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_inspection_photos_answer_id', 'inspection_photos', ['answer_id'])


def downgrade() -> None:
    # Drop tables in reverse order
    op.drop_table('inspection_photos')
    op.drop_table('inspection_answers')
    op.drop_table('inspections')
    op.drop_table('questions')

    # Drop enums
    op.execute("DROP TYPE IF EXISTS answertype")
    op.execute("DROP TYPE IF EXISTS inspectionstatus")
