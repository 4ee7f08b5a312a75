"""create Tasks table"""

from alembic import op
import sqlalchemy as sa

revision = '0001_create_tasks'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'Tasks',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('day', sa.String(length=255), nullable=True),
        sa.Column('important', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table('Tasks')
