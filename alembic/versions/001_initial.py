"""Initial database schema

Revision ID: 001
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

partner_type = sa.Enum('COURT', 'SHOP', 'BRAND', 'OTHER', name='partnertype')
application_status = sa.Enum('PENDING', 'APPROVED', 'REJECTED', name='applicationstatus')

def upgrade():
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('token_version', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # Create partner_applications table
    op.create_table(
        'partner_applications',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', partner_type, nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('social_media_link', sa.String(), nullable=True),
        sa.Column('member_benefit', sa.String(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('contact_person', sa.String(), nullable=True),
        sa.Column('proposed_discounts', sa.JSON(), nullable=False),
        sa.Column('application_date', sa.DateTime(), nullable=False),
        sa.Column('status', application_status, nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('partner_created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_partner_applications_id', 'partner_applications', ['id'])
    op.create_index('ix_partner_applications_application_date', 'partner_applications', ['application_date'])

    # Create partners table
    op.create_table(
        'partners',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', partner_type, nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('social_media_link', sa.String(), nullable=True),
        sa.Column('member_benefit', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('contact_person', sa.String(), nullable=True),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('discounts', sa.JSON(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('application_id', sa.String(), nullable=True),
        sa.Column('approved_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['application_id'], ['partner_applications.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_partners_id', 'partners', ['id'])
    op.create_index('ix_partners_application_id', 'partners', ['application_id'])

    # Create memberships table
    op.create_table(
        'memberships',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('membership_number', sa.String(), nullable=False),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )
    op.create_index('ix_memberships_id', 'memberships', ['id'])
    op.create_index('ix_memberships_membership_number', 'memberships', ['membership_number'])

def downgrade():
    op.drop_table('memberships')
    op.drop_table('partners')
    op.drop_table('partner_applications')
    op.drop_table('users')

    # Drop enums
    op.execute('DROP TYPE applicationstatus')
    op.execute('DROP TYPE partnertype')
