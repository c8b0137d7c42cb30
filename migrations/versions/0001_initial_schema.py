"""Initial KidsPOS schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("createdAt", sa.DateTime(), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        sa.Column("updatedAt", sa.DateTime(), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
    ]


def upgrade():
    op.create_table(
        "item",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("itemId", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("stock", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("isDeleted", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("item", schema=None) as batch_op:
        batch_op.create_index("ix_item_itemId", ["itemId"], unique=True)
        batch_op.create_index("idx_item_isDeleted", ["isDeleted"], unique=False)

    op.create_table(
        "store",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("storeId", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("storeId"),
    )

    op.create_table(
        "staff",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("staffId", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("staffId"),
    )

    op.create_table(
        "sale",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("storeId", sa.Integer(), nullable=False),
        sa.Column("staffId", sa.Integer(), nullable=False),
        sa.Column("totalPrice", sa.Integer(), nullable=False),
        sa.Column("deposit", sa.Integer(), nullable=False),
        sa.Column("saleAt", sa.DateTime(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["storeId"], ["store.id"]),
        sa.ForeignKeyConstraint(["staffId"], ["staff.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("sale", schema=None) as batch_op:
        batch_op.create_index("idx_sale_storeId", ["storeId"], unique=False)
        batch_op.create_index("idx_sale_staffId", ["staffId"], unique=False)
        batch_op.create_index("idx_sale_saleAt", ["saleAt"], unique=False)

    op.create_table(
        "sale_detail",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("saleId", sa.Integer(), nullable=False),
        sa.Column("itemId", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["saleId"], ["sale.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["itemId"], ["item.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("sale_detail", schema=None) as batch_op:
        batch_op.create_index("idx_sale_detail_saleId", ["saleId"], unique=False)
        batch_op.create_index("idx_sale_detail_itemId", ["itemId"], unique=False)

    setting_table = op.create_table(
        "setting",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("key", sa.String(128), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False, server_default="string"),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("key"),
    )

    op.create_table(
        "apk_versions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.String(64), nullable=False),
        sa.Column("versionCode", sa.Integer(), nullable=False),
        sa.Column("fileName", sa.String(255), nullable=False),
        sa.Column("fileSize", sa.BigInteger(), nullable=False),
        sa.Column("filePath", sa.String(1024), nullable=False),
        sa.Column("releaseNotes", sa.Text(), nullable=True),
        sa.Column("isActive", sa.Boolean(), nullable=False, server_default=sa.text("1")),
        sa.Column("uploadedAt", sa.DateTime(), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("version"),
    )
    with op.batch_alter_table("apk_versions", schema=None) as batch_op:
        batch_op.create_index("idx_apk_versions_active_code", ["isActive", "versionCode"], unique=False)

    op.bulk_insert(
        setting_table,
        [
            {"key": "shopName", "value": "KidsPOS Shop", "type": "string", "description": "Shop name"},
            {"key": "receiptFooter", "value": "Thank you!", "type": "string", "description": "Receipt footer message"},
            {"key": "taxRate", "value": "10", "type": "number", "description": "Tax rate in percentage"},
            {"key": "currency", "value": "JPY", "type": "string", "description": "Currency code"},
        ],
    )


def downgrade():
    with op.batch_alter_table("apk_versions", schema=None) as batch_op:
        batch_op.drop_index("idx_apk_versions_active_code")
    op.drop_table("apk_versions")
    op.drop_table("setting")

    with op.batch_alter_table("sale_detail", schema=None) as batch_op:
        batch_op.drop_index("idx_sale_detail_itemId")
        batch_op.drop_index("idx_sale_detail_saleId")
    op.drop_table("sale_detail")

    with op.batch_alter_table("sale", schema=None) as batch_op:
        batch_op.drop_index("idx_sale_saleAt")
        batch_op.drop_index("idx_sale_staffId")
        batch_op.drop_index("idx_sale_storeId")
    op.drop_table("sale")

    op.drop_table("staff")
    op.drop_table("store")

    with op.batch_alter_table("item", schema=None) as batch_op:
        batch_op.drop_index("idx_item_isDeleted")
        batch_op.drop_index("ix_item_itemId")
    op.drop_table("item")
