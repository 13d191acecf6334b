"""create users, catalog, designs, orders and deliveries tables"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a7d2b10"
down_revision = None
branch_labels = None
depends_on = None


DESIGN_STATUSES = ("pending", "approved", "rejected", "completed")
ORDER_STATUSES = (
    "pending",
    "confirmed",
    "baking",
    "ready",
    "dispatched",
    "delivered",
    "cancelled",
)
DELIVERY_STATUSES = ("scheduled", "in_transit", "delivered", "failed")


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="customer"),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("verification_code", sa.String(length=16), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "ready_made_cakes",
        sa.Column("cake_id", sa.Integer(), primary_key=True),
        sa.Column("cake_name", sa.String(length=150), nullable=False),
        sa.Column("flavors_used", sa.String(length=255), nullable=True),
        sa.Column("size", sa.String(length=50), nullable=True),
        sa.Column("image_url", sa.String(length=512), nullable=True),
        sa.Column("quantity_available", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_ready_made_cakes_is_active", "ready_made_cakes", ["is_active"])

    op.create_table(
        "cake_designs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("flavor", sa.String(length=120), nullable=True),
        sa.Column("size", sa.String(length=50), nullable=True),
        sa.Column("tiers", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("theme", sa.String(length=120), nullable=True),
        sa.Column("image_url", sa.String(length=512), nullable=True),
        sa.Column("budget", sa.Numeric(10, 2), nullable=True),
        sa.Column(
            "status",
            sa.Enum(*DESIGN_STATUSES, name="cake_design_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_cake_designs_user_id", "cake_designs", ["user_id"])

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("cake_id", sa.Integer(), sa.ForeignKey("ready_made_cakes.cake_id"), nullable=True),
        sa.Column("design_id", sa.Integer(), sa.ForeignKey("cake_designs.id", ondelete="SET NULL"), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=True),
        sa.Column(
            "status",
            sa.Enum(*ORDER_STATUSES, name="order_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("delivery_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_orders_user_id", "orders", ["user_id"])

    op.create_table(
        "deliveries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("delivery_date", sa.DateTime(), nullable=False),
        sa.Column("delivery_address", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.Enum(*DELIVERY_STATUSES, name="delivery_status"),
            nullable=False,
            server_default="scheduled",
        ),
        sa.Column("courier", sa.String(length=120), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_deliveries_order_id", "deliveries", ["order_id"])


def downgrade():
    op.drop_index("ix_deliveries_order_id", table_name="deliveries")
    op.drop_table("deliveries")

    op.drop_index("ix_orders_user_id", table_name="orders")
    op.drop_table("orders")

    op.drop_index("ix_cake_designs_user_id", table_name="cake_designs")
    op.drop_table("cake_designs")

    op.drop_index("ix_ready_made_cakes_is_active", table_name="ready_made_cakes")
    op.drop_table("ready_made_cakes")

    op.drop_table("users")

    bind = op.get_bind()
    sa.Enum(*DELIVERY_STATUSES, name="delivery_status").drop(bind, checkfirst=True)
    sa.Enum(*ORDER_STATUSES, name="order_status").drop(bind, checkfirst=True)
    sa.Enum(*DESIGN_STATUSES, name="cake_design_status").drop(bind, checkfirst=True)
