"""initial schema: users, films, friendships, likes, genres, ratings

Revision ID: 4c1a9e2b7d10
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4c1a9e2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

friendship_status = sa.Enum('requested', 'confirmed', name='friendship_status')


def upgrade() -> None:
    # 1) Reference tables
    genres = op.create_table(
        'genres',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_genres')),
        sa.UniqueConstraint('name', name='uq_genres_name'),
    )
    ratings = op.create_table(
        'ratings',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=16), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_ratings')),
        sa.UniqueConstraint('name', name='uq_ratings_name'),
    )

    # 2) Users + directed friendship edges
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('login', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('birthday', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_users_login', 'users', ['login'], unique=False)

    op.create_table(
        'friendships',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('friend_id', sa.Integer(), nullable=False),
        sa.Column('status', friendship_status, server_default=sa.text("'confirmed'"), nullable=False),
        sa.CheckConstraint('user_id <> friend_id', name=op.f('ck_friendships_no_self_friendship')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'],
                                name=op.f('fk_friendships_user_id_users'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['friend_id'], ['users.id'],
                                name=op.f('fk_friendships_friend_id_users'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'friend_id', name=op.f('pk_friendships')),
    )
    op.create_index('ix_friendships_friend_id', 'friendships', ['friend_id'], unique=False)

    # 3) Films + likes + genre links
    op.create_table(
        'films',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=200), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('rating_id', sa.Integer(), nullable=True),
        sa.CheckConstraint('duration >= 0', name=op.f('ck_films_duration_non_negative')),
        sa.ForeignKeyConstraint(['rating_id'], ['ratings.id'],
                                name=op.f('fk_films_rating_id_ratings'), ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_films')),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_films_rating_id', 'films', ['rating_id'], unique=False)

    op.create_table(
        'likes',
        sa.Column('film_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['film_id'], ['films.id'],
                                name=op.f('fk_likes_film_id_films'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'],
                                name=op.f('fk_likes_user_id_users'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('film_id', 'user_id', name=op.f('pk_likes')),
    )
    op.create_index('ix_likes_user_id', 'likes', ['user_id'], unique=False)

    op.create_table(
        'film_genres',
        sa.Column('film_id', sa.Integer(), nullable=False),
        sa.Column('genre_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['film_id'], ['films.id'],
                                name=op.f('fk_film_genres_film_id_films'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['genre_id'], ['genres.id'],
                                name=op.f('fk_film_genres_genre_id_genres'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('film_id', 'genre_id', name=op.f('pk_film_genres')),
    )
    op.create_index('ix_film_genres_genre_id', 'film_genres', ['genre_id'], unique=False)

    # 4) Seed reference data
    op.bulk_insert(genres, [
        {'id': 1, 'name': 'Comedy'},
        {'id': 2, 'name': 'Drama'},
        {'id': 3, 'name': 'Animation'},
        {'id': 4, 'name': 'Thriller'},
        {'id': 5, 'name': 'Documentary'},
        {'id': 6, 'name': 'Action'},
    ])
    op.bulk_insert(ratings, [
        {'id': 1, 'name': 'G'},
        {'id': 2, 'name': 'PG'},
        {'id': 3, 'name': 'PG-13'},
        {'id': 4, 'name': 'R'},
        {'id': 5, 'name': 'NC-17'},
    ])


def downgrade() -> None:
    op.drop_index('ix_film_genres_genre_id', table_name='film_genres')
    op.drop_table('film_genres')
    op.drop_index('ix_likes_user_id', table_name='likes')
    op.drop_table('likes')
    op.drop_index('ix_films_rating_id', table_name='films')
    op.drop_table('films')
    op.drop_index('ix_friendships_friend_id', table_name='friendships')
    op.drop_table('friendships')
    op.drop_index('ix_users_login', table_name='users')
    op.drop_table('users')
    op.drop_table('ratings')
    op.drop_table('genres')
    friendship_status.drop(op.get_bind(), checkfirst=True)
