from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20260301_create_dog_walk_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'dogs',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('account_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('breed', sa.String(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('born', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(length=10), nullable=False),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('photo', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False)
    )
    op.create_index('ix_dogs_account_id', 'dogs', ['account_id'])

    op.create_table(
        'walk_entries',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('account_id', sa.String(), nullable=False),
        sa.Column('dog_id', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.DateTime(), nullable=False),
        sa.Column('distance', sa.Float(), nullable=False, server_default='0'),
        sa.Column('duration', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False)
    )
    op.create_index('ix_walk_entries_account_id', 'walk_entries', ['account_id'])
    op.create_index('ix_walk_entries_dog_id', 'walk_entries', ['dog_id'])
    op.create_index('ix_walk_entries_account_date', 'walk_entries', ['account_id', 'date'])

    op.create_table(
        'walk_path_points',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('walk_id', sa.String(), sa.ForeignKey('walk_entries.id', ondelete='CASCADE'), nullable=False),
        sa.Column('seq', sa.Integer(), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lon', sa.Float(), nullable=False)
    )
    op.create_index('ix_walk_path_points_walk_id', 'walk_path_points', ['walk_id'])


def downgrade():
    op.drop_index('ix_walk_path_points_walk_id', table_name='walk_path_points')
    op.drop_table('walk_path_points')
    op.drop_index('ix_walk_entries_account_date', table_name='walk_entries')
    op.drop_index('ix_walk_entries_dog_id', table_name='walk_entries')
    op.drop_index('ix_walk_entries_account_id', table_name='walk_entries')
    op.drop_table('walk_entries')
    op.drop_index('ix_dogs_account_id', table_name='dogs')
    op.drop_table('dogs')
