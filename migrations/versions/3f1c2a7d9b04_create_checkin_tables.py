from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision = '3f1c2a7d9b04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=100), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('date_created', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp())
    )

    op.create_table(
        'teachers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, unique=True),
        sa.Column('instruments', sa.JSON(), nullable=False)
    )

    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, unique=True)
    )

    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False, unique=True)
    )

    op.create_table(
        'lessons',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('room_id', sa.Integer(), sa.ForeignKey('rooms.id'), nullable=False),
        sa.Column('instrument', sa.String(length=100), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False, server_default='35'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='scheduled'),
        sa.Column('teacher_check_in', sa.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql'), nullable=True),
        sa.Column('student_check_in', sa.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql'), nullable=True),
        sa.Column('teacher_check_out', sa.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql'), nullable=True),
        sa.Column('student_check_out', sa.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql'), nullable=True),
        sa.Column('teacher_notes', sa.String(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.CheckConstraint(
            "status IN ('scheduled', 'in-progress', 'completed', 'cancelled', 'no-show')",
            name='check_lesson_status'
        )
    )
    op.create_index('ix_lessons_date_start_time', 'lessons', ['date', 'start_time'])


def downgrade():
    op.drop_index('ix_lessons_date_start_time', table_name='lessons')
    op.drop_table('lessons')
    op.drop_table('rooms')
    op.drop_table('students')
    op.drop_table('teachers')
    op.drop_table('users')
