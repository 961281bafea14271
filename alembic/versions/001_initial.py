# alembic/versions/001_initial.py

"""Initial schema: stocks, portfolios, positions

Revision ID: 001
Revises: 
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Create stocks table
    op.create_table('stocks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('symbol', sa.String(length=20), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('sector', sa.String(length=100), nullable=False),
        sa.Column('current_price', sa.Numeric(precision=18, scale=4), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_stocks_symbol', 'stocks', ['symbol'], unique=True)

    # Create portfolios table
    op.create_table('portfolios',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('creation_date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create positions table
    op.create_table('positions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('portfolio_id', sa.Integer(), nullable=False),
        sa.Column('stock_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=18, scale=6), nullable=False),
        sa.Column('purchase_price', sa.Numeric(precision=18, scale=4), nullable=False),
        sa.Column('purchase_date', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['portfolio_id'], ['portfolios.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['stock_id'], ['stocks.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_positions_portfolio', 'positions', ['portfolio_id'])


def downgrade():
    op.drop_index('ix_positions_portfolio', table_name='positions')
    op.drop_table('positions')
    op.drop_table('portfolios')
    op.drop_index('ix_stocks_symbol', table_name='stocks')
    op.drop_table('stocks')
