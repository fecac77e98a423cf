"""initial livecomment schema

Revision ID: 0001
Revises:
"""
from alembic import op
import sqlalchemy as sa

revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False, unique=True),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_table(
        'themes',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('dark_mode', sa.Boolean(), nullable=False),
    )
    op.create_table(
        'icons',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('icon_hash', sa.String(64), nullable=False),
    )
    op.create_table(
        'livestreams',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('playlist_url', sa.String(255), nullable=False),
        sa.Column('thumbnail_url', sa.String(255), nullable=False),
        sa.Column('start_at', sa.BigInteger(), nullable=False),
        sa.Column('end_at', sa.BigInteger(), nullable=False),
    )
    op.create_table(
        'tags',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False, unique=True),
    )
    op.create_table(
        'livestream_tags',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('livestream_id', sa.BigInteger(), sa.ForeignKey('livestreams.id'), nullable=False, index=True),
        sa.Column('tag_id', sa.BigInteger(), sa.ForeignKey('tags.id'), nullable=False),
    )
    op.create_table(
        'livecomments',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('livestream_id', sa.BigInteger(), sa.ForeignKey('livestreams.id'), nullable=False),
        sa.Column('comment', sa.String(255), nullable=False),
        sa.Column('tip', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('livecomments_livestream_id_created_at', 'livecomments', ['livestream_id', 'created_at'])
    op.create_table(
        'livecomment_reports',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('livestream_id', sa.BigInteger(), sa.ForeignKey('livestreams.id'), nullable=False, index=True),
        sa.Column('livecomment_id', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_table(
        'ng_words',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('livestream_id', sa.BigInteger(), sa.ForeignKey('livestreams.id'), nullable=False),
        sa.Column('word', sa.String(255), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index(
        'ng_words_user_id_livestream_id_created_at', 'ng_words', ['user_id', 'livestream_id', 'created_at']
    )


def downgrade() -> None:
    op.drop_index('ng_words_user_id_livestream_id_created_at', table_name='ng_words')
    op.drop_table('ng_words')
    op.drop_table('livecomment_reports')
    op.drop_index('livecomments_livestream_id_created_at', table_name='livecomments')
    op.drop_table('livecomments')
    op.drop_table('livestream_tags')
    op.drop_table('tags')
    op.drop_table('livestreams')
    op.drop_table('icons')
    op.drop_table('themes')
    op.drop_table('users')
