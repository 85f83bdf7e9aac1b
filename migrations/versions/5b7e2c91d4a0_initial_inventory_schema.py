"""initial inventory schema

Revision ID: 5b7e2c91d4a0
Revises:
Create Date: 2026-10-19 09:12:44.318502
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b7e2c91d4a0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


product_category = sa.Enum("pc", "vest", name="product_category", native_enum=False, length=32)
product_status = sa.Enum("in_stock", "out_of_stock", name="product_status")
movement_type = sa.Enum("inbound", "outbound", name="movement_type", native_enum=False, length=16)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "staff",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "product_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category", product_category, nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_product_types_category", "product_types", ["category"])

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("product_id", sa.String(length=100), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("lot_number", sa.String(length=100), nullable=True),
        sa.Column("inbound_number", sa.String(length=13), nullable=False),
        sa.Column("status", product_status, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["type_id"], ["product_types.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_product_id", "products", ["product_id"], unique=True)
    op.create_index("ix_products_type_id", "products", ["type_id"])
    op.create_index("ix_products_inbound_number", "products", ["inbound_number"])
    op.create_index("ix_products_status", "products", ["status"])

    op.create_table(
        "pc_details",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("product_id", sa.String(length=100), nullable=False),
        sa.Column("model_number", sa.String(length=100), nullable=False),
        sa.Column("serial_number", sa.String(length=100), nullable=False),
        sa.Column("purchase_date", sa.Date(), nullable=False),
        sa.Column("warranty_period", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["product_id"], ["products.product_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("product_id"),
    )

    op.create_table(
        "pc_model_numbers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("model_number", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_pc_model_numbers_model_number", "pc_model_numbers", ["model_number"], unique=True)

    op.create_table(
        "movement_documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("movement_type", movement_type, nullable=False),
        sa.Column("document_number", sa.String(length=13), nullable=False),
        sa.Column("issued_on", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("movement_type", "document_number", name="uq_movement_documents_type_number"),
    )

    # staff_id has no foreign key on either ledger.
    op.create_table(
        "inbound_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("product_id", sa.String(length=100), nullable=False),
        sa.Column("staff_id", sa.Integer(), nullable=False),
        sa.Column("inbound_number", sa.String(length=13), nullable=False),
        sa.Column("inbound_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["product_id"], ["products.product_id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_inbound_records_product_id", "inbound_records", ["product_id"])
    op.create_index("ix_inbound_records_inbound_number", "inbound_records", ["inbound_number"])
    op.create_index("ix_inbound_records_date_id", "inbound_records", ["inbound_date", "id"])

    op.create_table(
        "outbound_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("product_id", sa.String(length=100), nullable=False),
        sa.Column("staff_id", sa.Integer(), nullable=False),
        sa.Column("outbound_number", sa.String(length=13), nullable=False),
        sa.Column("outbound_date", sa.Date(), nullable=False),
        sa.Column("customer_number", sa.String(length=100), nullable=True),
        sa.Column("customer_name", sa.String(length=200), nullable=True),
        sa.Column("purchaser_number", sa.String(length=100), nullable=True),
        sa.Column("purchaser_name", sa.String(length=200), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["product_id"], ["products.product_id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_outbound_records_product_id", "outbound_records", ["product_id"])
    op.create_index("ix_outbound_records_outbound_number", "outbound_records", ["outbound_number"])
    op.create_index("ix_outbound_records_date_id", "outbound_records", ["outbound_date", "id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("movement_documents")
    op.drop_table("outbound_records")
    op.drop_table("inbound_records")
    op.drop_table("pc_model_numbers")
    op.drop_table("pc_details")
    op.drop_table("products")
    op.drop_table("product_types")
    op.drop_table("staff")
    product_status.drop(op.get_bind(), checkfirst=True)
