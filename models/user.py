"""User model definition."""

from . import db, utcnow


USER_ROLES = ("customer", "admin")

# Columns that may leave the service layer; never the password or the code.
PUBLIC_FIELDS = (
    "id",
    "name",
    "email",
    "phone",
    "address",
    "role",
    "is_verified",
    "created_at",
    "updated_at",
)


class User(db.Model):
    """Represents a customer or administrator account."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone = db.Column(db.String(32), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.String(32),
        nullable=False,
        default="customer",
        server_default=db.text("'customer'"),
    )
    is_verified = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )
    verification_code = db.Column(db.String(16), nullable=True)
    created_at = db.Column(
        db.DateTime,
        nullable=False,
        default=utcnow,
        server_default=db.func.now(),
    )
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=db.func.now(),
    )

    @classmethod
    def public_columns(cls) -> list:
        return [getattr(cls, field) for field in PUBLIC_FIELDS]

    def to_dict(self) -> dict:
        """Serialize the public profile of the user."""

        return serialize_public({field: getattr(self, field) for field in PUBLIC_FIELDS})

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"


def serialize_public(row: dict) -> dict:
    """Render a mapping of public user columns as JSON-friendly values."""

    data = {field: row.get(field) for field in PUBLIC_FIELDS}
    for field in ("created_at", "updated_at"):
        value = data.get(field)
        data[field] = value.isoformat() if value else None
    return data
