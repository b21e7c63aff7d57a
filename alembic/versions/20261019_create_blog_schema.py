"""Create users, blogs, posts, comments and like tables

Revision ID: create_blog_schema
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_blog_schema'
down_revision = None
branch_labels = None
depends_on = None

LIKE_STATUS = sa.Enum('None', 'Like', 'Dislike', name='like_status', native_enum=False, length=10)


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('login', sa.String(10), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_users_login', 'users', ['login'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'blogs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(15), nullable=False),
        sa.Column('description', sa.Text, nullable=False),
        sa.Column('website_url', sa.String(100), nullable=False),
        sa.Column('is_membership', sa.Boolean, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_blogs_created_at', 'blogs', ['created_at'])

    op.create_table(
        'posts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(30), nullable=False),
        sa.Column('short_description', sa.String(100), nullable=False),
        sa.Column('content', sa.Text, nullable=False),
        sa.Column('blog_id', sa.String(36), sa.ForeignKey('blogs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_posts_blog_id', 'posts', ['blog_id'])
    op.create_index('ix_posts_created_at', 'posts', ['created_at'])

    op.create_table(
        'comments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('content', sa.Text, nullable=False),
        sa.Column('post_id', sa.String(36), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('commentator_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_comments_post_id', 'comments', ['post_id'])

    op.create_table(
        'post_likes',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('post_id', sa.String(36), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', LIKE_STATUS, nullable=False),
        sa.Column('added_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('user_id', 'post_id', name='uq_post_likes_user_post'),
    )
    op.create_index('ix_post_likes_post_status_added', 'post_likes', ['post_id', 'status', 'added_at'])

    op.create_table(
        'comment_likes',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('comment_id', sa.String(36), sa.ForeignKey('comments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', LIKE_STATUS, nullable=False),
        sa.Column('added_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('user_id', 'comment_id', name='uq_comment_likes_user_comment'),
    )
    op.create_index('ix_comment_likes_comment_status', 'comment_likes', ['comment_id', 'status'])


def downgrade():
    op.drop_table('comment_likes')
    op.drop_table('post_likes')
    op.drop_table('comments')
    op.drop_table('posts')
    op.drop_table('blogs')
    op.drop_table('users')
