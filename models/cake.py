"""Ready-made cake catalog model."""

from . import db, utcnow


class ReadyMadeCake(db.Model):
    """A catalog cake. Rows are deactivated instead of deleted."""

    __tablename__ = "ready_made_cakes"

    id = db.Column("cake_id", db.Integer, primary_key=True)
    cake_name = db.Column(db.String(150), nullable=False)
    flavors_used = db.Column(db.String(255), nullable=True)
    size = db.Column(db.String(50), nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    quantity_available = db.Column(
        db.Integer, nullable=False, default=1, server_default=db.text("1")
    )
    is_active = db.Column(
        db.Boolean, nullable=False, default=True, server_default=db.true()
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def to_dict(self) -> dict:
        """Serialize the cake using the catalog's camelCase wire names."""

        return {
            "cakeId": self.id,
            "cakeName": self.cake_name,
            "flavorsUsed": self.flavors_used,
            "size": self.size,
            "imageURL": self.image_url,
            "quantityAvailable": self.quantity_available,
            "isactive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<ReadyMadeCake id={self.id} name={self.cake_name}>"
