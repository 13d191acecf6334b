"""Custom cake design request model."""

from decimal import Decimal

from . import db, utcnow


DESIGN_STATUSES = ("pending", "approved", "rejected", "completed")


class CakeDesign(db.Model):
    """A customer's request for a bespoke cake."""

    __tablename__ = "cake_designs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description = db.Column(db.Text, nullable=False)
    flavor = db.Column(db.String(120), nullable=True)
    size = db.Column(db.String(50), nullable=True)
    tiers = db.Column(db.Integer, nullable=False, default=1)
    theme = db.Column(db.String(120), nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    budget = db.Column(db.Numeric(10, 2), nullable=True)
    status = db.Column(
        db.Enum(*DESIGN_STATUSES, name="cake_design_status"),
        nullable=False,
        default="pending",
        server_default=db.text("'pending'"),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def to_dict(self) -> dict:
        budget = float(self.budget) if isinstance(self.budget, Decimal) else self.budget
        return {
            "id": self.id,
            "user_id": self.user_id,
            "description": self.description,
            "flavor": self.flavor,
            "size": self.size,
            "tiers": self.tiers,
            "theme": self.theme,
            "image_url": self.image_url,
            "budget": budget,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
