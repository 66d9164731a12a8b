"""create_community_tables

Revision ID: a1c3e5f7b901
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a1c3e5f7b901'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Idempotent: init_db() may already have created the tables
    conn = op.get_bind()
    inspector = sa.inspect(conn)
    existing_tables = inspector.get_table_names()

    if 'users' not in existing_tables:
        op.create_table('users',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('role', sa.String(length=20), nullable=False),
            sa.Column('avatar', sa.String(length=500), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_users_email', 'users', ['email'], unique=True)

    if 'boards' not in existing_tables:
        op.create_table('boards',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('category', sa.String(length=100), nullable=False),
            sa.Column('allow_guest', sa.Boolean(), nullable=False),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_boards_created_at', 'boards', ['created_at'], unique=False)

    if 'posts' not in existing_tables:
        op.create_table('posts',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('title', sa.String(length=300), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('board_id', sa.Integer(), nullable=False),
            sa.Column('author_id', sa.Integer(), nullable=True),
            sa.Column('author_name', sa.String(length=100), nullable=False),
            sa.Column('is_guest', sa.Boolean(), nullable=False),
            sa.Column('views', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['board_id'], ['boards.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='SET NULL'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_posts_board_id', 'posts', ['board_id'], unique=False)
        op.create_index('ix_posts_author_id', 'posts', ['author_id'], unique=False)
        op.create_index('ix_posts_board_created', 'posts', ['board_id', 'created_at'], unique=False)

    if 'comments' not in existing_tables:
        op.create_table('comments',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('post_id', sa.Integer(), nullable=False),
            sa.Column('author_id', sa.Integer(), nullable=True),
            sa.Column('author_name', sa.String(length=100), nullable=False),
            sa.Column('is_guest', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='SET NULL'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_comments_post_id', 'comments', ['post_id'], unique=False)

    if 'todos' not in existing_tables:
        op.create_table('todos',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('title', sa.String(length=300), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('completed', sa.Boolean(), nullable=False),
            sa.Column('priority', sa.String(length=20), nullable=False),
            sa.Column('due_date', sa.DateTime(), nullable=True),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_todos_user_created', 'todos', ['user_id', 'created_at'], unique=False)

    if 'guestbook' not in existing_tables:
        op.create_table('guestbook',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=True),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('is_approved', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_guestbook_is_approved', 'guestbook', ['is_approved'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_guestbook_is_approved', table_name='guestbook')
    op.drop_table('guestbook')

    op.drop_index('ix_todos_user_created', table_name='todos')
    op.drop_table('todos')

    op.drop_index('ix_comments_post_id', table_name='comments')
    op.drop_table('comments')

    op.drop_index('ix_posts_board_created', table_name='posts')
    op.drop_index('ix_posts_author_id', table_name='posts')
    op.drop_index('ix_posts_board_id', table_name='posts')
    op.drop_table('posts')

    op.drop_index('ix_boards_created_at', table_name='boards')
    op.drop_table('boards')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
