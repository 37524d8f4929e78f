"""Create books table

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('author', sa.String(255), nullable=False),
        sa.Column('isbn', sa.String(20), nullable=True, unique=True),
        sa.Column('genre', sa.String(100), nullable=True),
        sa.Column('year_published', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(20), server_default='to-read', nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("status IN ('read', 'reading', 'to-read')", name='ck_books_status'),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_books_rating'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_books_id', 'books', ['id'])
    op.create_index('ix_books_created_at', 'books', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_books_created_at', table_name='books')
    op.drop_index('ix_books_id', table_name='books')
    op.drop_table('books')
