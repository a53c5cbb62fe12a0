"""create catalog tables

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    카탈로그 테이블 생성

    - books: BIGINT IDENTITY Primary Key (저장소 할당)
    - movies: 문자열 Primary Key (호출자 지정)
    - paintings: 문자열 code Primary Key (호출자 지정)
    """
    op.create_table(
        'books',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('author', sa.String(255), nullable=False),
        sa.Column('description', sa.String(2048), nullable=False),
        sa.Column('genre', sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_books'),
    )

    op.create_table(
        'movies',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('director', sa.String(255), nullable=False),
        sa.Column('release_year', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_movies'),
    )

    op.create_table(
        'paintings',
        sa.Column('code', sa.String(128), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('artist', sa.String(255), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('medium', sa.String(255), nullable=False),
        sa.Column('period', sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint('code', name='pk_paintings'),
    )


def downgrade() -> None:
    """카탈로그 테이블 삭제"""
    op.drop_table('paintings')
    op.drop_table('movies')
    op.drop_table('books')
