"""create classroom schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

role_enum = sa.Enum('ADMIN', 'MODERATOR', 'NORMAL', name='role')
post_type_enum = sa.Enum('ASSIGNMENT', 'MESSAGE', name='posttype')


def _id_column() -> sa.Column:
    return sa.Column('id', sa.Integer(), nullable=False)


def _created_at_column(name: str = 'created_at') -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    op.create_table(
        'users',
        _id_column(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'classrooms',
        _id_column(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Integer(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_classrooms_created_by_users'),
        sa.PrimaryKeyConstraint('id', name='pk_classrooms'),
    )
    op.create_index('ix_classrooms_id', 'classrooms', ['id'], unique=False)
    op.create_index('ix_classrooms_created_by', 'classrooms', ['created_by'], unique=False)

    op.create_table(
        'class_members',
        _id_column(),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('role', role_enum, server_default='NORMAL', nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_class_members_user_id_users'),
        sa.ForeignKeyConstraint(['class_id'], ['classrooms.id'], name='fk_class_members_class_id_classrooms'),
        sa.PrimaryKeyConstraint('id', name='pk_class_members'),
    )
    op.create_index('ix_class_members_id', 'class_members', ['id'], unique=False)
    op.create_index('ix_class_members_user_id', 'class_members', ['user_id'], unique=False)
    op.create_index('ix_class_members_class_id', 'class_members', ['class_id'], unique=False)

    op.create_table(
        'posts',
        _id_column(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('class_room_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('post_type', post_type_enum, nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(['class_room_id'], ['classrooms.id'], name='fk_posts_class_room_id_classrooms'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], name='fk_posts_author_id_users'),
        sa.PrimaryKeyConstraint('id', name='pk_posts'),
    )
    op.create_index('ix_posts_id', 'posts', ['id'], unique=False)
    op.create_index('ix_posts_class_room_id', 'posts', ['class_room_id'], unique=False)
    op.create_index('ix_posts_author_id', 'posts', ['author_id'], unique=False)

    op.create_table(
        'file_uploads',
        _id_column(),
        sa.Column('file_path', sa.String(1000), nullable=False),
        sa.Column('file_type', sa.String(100), nullable=True),
        sa.Column('file_name', sa.String(255), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_file_uploads_user_id_users'),
        sa.ForeignKeyConstraint(['class_id'], ['classrooms.id'], name='fk_file_uploads_class_id_classrooms'),
        sa.PrimaryKeyConstraint('id', name='pk_file_uploads'),
    )
    op.create_index('ix_file_uploads_id', 'file_uploads', ['id'], unique=False)
    op.create_index('ix_file_uploads_user_id', 'file_uploads', ['user_id'], unique=False)
    op.create_index('ix_file_uploads_class_id', 'file_uploads', ['class_id'], unique=False)

    op.create_table(
        'comments',
        _id_column(),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('file_id', sa.Integer(), nullable=True),
        sa.Column('post_id', sa.Integer(), nullable=True),
        sa.Column('author_id', sa.Integer(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(['file_id'], ['file_uploads.id'], name='fk_comments_file_id_file_uploads'),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], name='fk_comments_post_id_posts'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], name='fk_comments_author_id_users'),
        sa.PrimaryKeyConstraint('id', name='pk_comments'),
    )
    op.create_index('ix_comments_id', 'comments', ['id'], unique=False)
    op.create_index('ix_comments_file_id', 'comments', ['file_id'], unique=False)
    op.create_index('ix_comments_post_id', 'comments', ['post_id'], unique=False)
    op.create_index('ix_comments_author_id', 'comments', ['author_id'], unique=False)

    op.create_table(
        'assignments',
        _id_column(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('file_id', sa.Integer(), nullable=True),
        _created_at_column(),
        sa.ForeignKeyConstraint(['class_id'], ['classrooms.id'], name='fk_assignments_class_id_classrooms'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_assignments_created_by_users'),
        sa.ForeignKeyConstraint(['file_id'], ['file_uploads.id'], name='fk_assignments_file_id_file_uploads'),
        sa.PrimaryKeyConstraint('id', name='pk_assignments'),
    )
    op.create_index('ix_assignments_id', 'assignments', ['id'], unique=False)
    op.create_index('ix_assignments_class_id', 'assignments', ['class_id'], unique=False)
    op.create_index('ix_assignments_created_by', 'assignments', ['created_by'], unique=False)

    op.create_table(
        'assignment_assignment_to',
        _id_column(),
        sa.Column('assignment_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        _created_at_column('assigned_at'),
        sa.ForeignKeyConstraint(
            ['assignment_id'], ['assignments.id'], name='fk_assignment_assignment_to_assignment_id_assignments'
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_assignment_assignment_to_user_id_users'),
        sa.PrimaryKeyConstraint('id', name='pk_assignment_assignment_to'),
    )
    op.create_index('ix_assignment_assignment_to_id', 'assignment_assignment_to', ['id'], unique=False)
    op.create_index(
        'ix_assignment_assignment_to_assignment_id', 'assignment_assignment_to', ['assignment_id'], unique=False
    )
    op.create_index('ix_assignment_assignment_to_user_id', 'assignment_assignment_to', ['user_id'], unique=False)

    op.create_table(
        'submissions',
        _id_column(),
        sa.Column('assignment_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('file_name', sa.String(255), nullable=False),
        sa.Column('file_path', sa.String(1000), nullable=False),
        sa.Column('grade', sa.Integer(), server_default='0', nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(['assignment_id'], ['assignments.id'], name='fk_submissions_assignment_id_assignments'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_submissions_user_id_users'),
        sa.PrimaryKeyConstraint('id', name='pk_submissions'),
    )
    op.create_index('ix_submissions_id', 'submissions', ['id'], unique=False)
    op.create_index('ix_submissions_assignment_id', 'submissions', ['assignment_id'], unique=False)
    op.create_index('ix_submissions_user_id', 'submissions', ['user_id'], unique=False)


def downgrade() -> None:
    for table in (
        'submissions',
        'assignment_assignment_to',
        'assignments',
        'comments',
        'file_uploads',
        'posts',
        'class_members',
        'classrooms',
        'users',
    ):
        op.drop_table(table)
    post_type_enum.drop(op.get_bind(), checkfirst=True)
    role_enum.drop(op.get_bind(), checkfirst=True)
