"""Initial database tables creation: directors, movies

Revision ID: 20261019_initial
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "20261019_initial"
down_revision = None
branch_labels = None
depends_on = None


def table_exists(table_name):
    """Check if a table exists in the database"""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('directors'):
        op.create_table(
            'directors',
            sa.Column('id', sa.String(32), primary_key=True),
            sa.Column('first_name', sa.String(255), nullable=False),
            sa.Column('second_name', sa.String(255), nullable=False),
            sa.Column('birth_date', sa.Date(), nullable=True),
            sa.Column('bio', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    # director_id has no foreign key: the reference is enforced by the services
    if not table_exists('movies'):
        op.create_table(
            'movies',
            sa.Column('id', sa.String(32), primary_key=True),
            sa.Column('title', sa.String(255), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('release_date', sa.Date(), nullable=False),
            sa.Column('genre', sa.String(100), nullable=False),
            sa.Column('rating', sa.Float(), nullable=True),
            sa.Column('imdb_id', sa.String(32), unique=True, nullable=True),
            sa.Column('director_id', sa.String(32), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_movies_director_id', 'movies', ['director_id'])
        op.create_index('ix_movies_genre', 'movies', ['genre'])


def downgrade() -> None:
    op.drop_index('ix_movies_genre', table_name='movies')
    op.drop_index('ix_movies_director_id', table_name='movies')
    op.drop_table('movies')
    op.drop_table('directors')
