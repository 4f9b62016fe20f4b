"""Initial schema

Revision ID: 001
Revises:
Create Date: 2024-01-17 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


proficiency_level = postgresql.ENUM(
    'Beginner', 'Intermediate', 'Advanced', 'Expert', name='proficiencylevel', create_type=False
)
experience_level = postgresql.ENUM('Junior', 'Mid-Level', 'Senior', name='experiencelevel', create_type=False)
project_status = postgresql.ENUM('Planning', 'Active', 'Completed', name='projectstatus', create_type=False)
assignment_status = postgresql.ENUM('Active', 'Completed', name='assignmentstatus', create_type=False)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in (proficiency_level, experience_level, project_status, assignment_status):
        enum_type.create(bind, checkfirst=True)

    # Create skills table
    op.create_table(
        'skills',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_skills_name'), 'skills', ['name'], unique=True)
    op.create_index(op.f('ix_skills_category'), 'skills', ['category'], unique=False)
    op.create_index(op.f('ix_skills_created_at'), 'skills', ['created_at'], unique=False)

    # Create personnel table
    op.create_table(
        'personnel',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=100), nullable=True),
        sa.Column('experience_level', experience_level, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_personnel_name'), 'personnel', ['name'], unique=False)
    op.create_index(op.f('ix_personnel_email'), 'personnel', ['email'], unique=True)
    op.create_index(op.f('ix_personnel_experience_level'), 'personnel', ['experience_level'], unique=False)
    op.create_index(op.f('ix_personnel_created_at'), 'personnel', ['created_at'], unique=False)

    # Create personnel_skills table
    op.create_table(
        'personnel_skills',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('person_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('skill_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('proficiency_level', proficiency_level, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['person_id'], ['personnel.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('person_id', 'skill_id', name='uq_person_skill'),
    )
    op.create_index(op.f('ix_personnel_skills_person_id'), 'personnel_skills', ['person_id'], unique=False)
    op.create_index(op.f('ix_personnel_skills_skill_id'), 'personnel_skills', ['skill_id'], unique=False)
    op.create_index(op.f('ix_personnel_skills_created_at'), 'personnel_skills', ['created_at'], unique=False)

    # Create projects table
    op.create_table(
        'projects',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('status', project_status, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_projects_name'), 'projects', ['name'], unique=False)
    op.create_index(op.f('ix_projects_status'), 'projects', ['status'], unique=False)
    op.create_index(op.f('ix_projects_created_at'), 'projects', ['created_at'], unique=False)

    # Create project_requirements table
    op.create_table(
        'project_requirements',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('skill_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('min_proficiency_level', proficiency_level, nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_project_requirements_project_id'), 'project_requirements', ['project_id'], unique=False)
    op.create_index(op.f('ix_project_requirements_skill_id'), 'project_requirements', ['skill_id'], unique=False)

    # Create project_assignments table
    op.create_table(
        'project_assignments',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('person_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('role', sa.String(length=100), nullable=True),
        sa.Column('status', assignment_status, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['person_id'], ['personnel.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_project_assignments_project_id'), 'project_assignments', ['project_id'], unique=False)
    op.create_index(op.f('ix_project_assignments_person_id'), 'project_assignments', ['person_id'], unique=False)
    op.create_index(op.f('ix_project_assignments_start_date'), 'project_assignments', ['start_date'], unique=False)
    op.create_index(op.f('ix_project_assignments_status'), 'project_assignments', ['status'], unique=False)
    op.create_index(op.f('ix_project_assignments_created_at'), 'project_assignments', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('project_assignments')
    op.drop_table('project_requirements')
    op.drop_table('projects')
    op.drop_table('personnel_skills')
    op.drop_table('personnel')
    op.drop_table('skills')

    # Drop enums
    bind = op.get_bind()
    for enum_type in (assignment_status, project_status, experience_level, proficiency_level):
        enum_type.drop(bind, checkfirst=True)
