"""create_teachers_and_courses_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:41.503217

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "teachers",
        sa.Column("TeacherId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("TeacherFName", sa.String(length=255), nullable=False),
        sa.Column("TeacherLName", sa.String(length=255), nullable=False),
        sa.Column("EmployeeNumber", sa.String(length=32), nullable=False),
        sa.Column("HireDate", sa.Date(), nullable=False),
        sa.Column("Salary", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint("TeacherId"),
        sa.UniqueConstraint("EmployeeNumber"),
    )
    op.create_index("ix_teachers_HireDate", "teachers", ["HireDate"])

    op.create_table(
        "courses",
        sa.Column("CourseId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("CourseCode", sa.String(length=32), nullable=True),
        sa.Column("TeacherId", sa.Integer(), nullable=True),
        sa.Column("CourseName", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ["TeacherId"], ["teachers.TeacherId"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("CourseId"),
    )
    op.create_index("ix_courses_TeacherId", "courses", ["TeacherId"])


def downgrade() -> None:
    op.drop_index("ix_courses_TeacherId", table_name="courses")
    op.drop_table("courses")
    op.drop_index("ix_teachers_HireDate", table_name="teachers")
    op.drop_table("teachers")
