"""Delivery model definition."""

from . import db, utcnow


DELIVERY_STATUSES = ("scheduled", "in_transit", "delivered", "failed")


class Delivery(db.Model):
    """A scheduled drop-off for an order."""

    __tablename__ = "deliveries"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(
        db.Integer,
        db.ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    delivery_date = db.Column(db.DateTime, nullable=False)
    delivery_address = db.Column(db.String(255), nullable=False)
    status = db.Column(
        db.Enum(*DELIVERY_STATUSES, name="delivery_status"),
        nullable=False,
        default="scheduled",
        server_default=db.text("'scheduled'"),
    )
    courier = db.Column(db.String(120), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "order_id": self.order_id,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
            "delivery_address": self.delivery_address,
            "status": self.status,
            "courier": self.courier,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
