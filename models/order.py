"""Order model definition."""

from decimal import Decimal

from . import db, utcnow


ORDER_STATUSES = (
    "pending",
    "confirmed",
    "baking",
    "ready",
    "dispatched",
    "delivered",
    "cancelled",
)
FINAL_ORDER_STATUSES = ("delivered", "cancelled")


class Order(db.Model):
    """An order for a catalog cake or a custom design."""

    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cake_id = db.Column(
        db.Integer, db.ForeignKey("ready_made_cakes.cake_id"), nullable=True
    )
    design_id = db.Column(
        db.Integer,
        db.ForeignKey("cake_designs.id", ondelete="SET NULL"),
        nullable=True,
    )
    quantity = db.Column(db.Integer, nullable=False, default=1)
    total_price = db.Column(db.Numeric(10, 2), nullable=True)
    status = db.Column(
        db.Enum(*ORDER_STATUSES, name="order_status"),
        nullable=False,
        default="pending",
        server_default=db.text("'pending'"),
    )
    delivery_date = db.Column(db.Date, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def to_dict(self) -> dict:
        """Serialize the order."""

        total_price = (
            float(self.total_price)
            if isinstance(self.total_price, Decimal)
            else self.total_price
        )
        return {
            "id": self.id,
            "user_id": self.user_id,
            "cake_id": self.cake_id,
            "design_id": self.design_id,
            "quantity": self.quantity,
            "total_price": total_price,
            "status": self.status,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Order id={self.id} user_id={self.user_id} status={self.status}>"
