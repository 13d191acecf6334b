"""Seed a demo customer and a starter cake catalog."""

from app import create_app
from models import db
from models.cake import ReadyMadeCake
from models.user import User
from utils.passwords import hash_password

CAKES = [
    {
        "cake_name": "Classic Chocolate Fudge",
        "flavors_used": "Chocolate, Cocoa",
        "size": "Medium",
        "image_url": "https://images.example.com/cakes/chocolate-fudge.jpg",
        "quantity_available": 6,
    },
    {
        "cake_name": "Strawberry Cream",
        "flavors_used": "Strawberry, Vanilla, Cream",
        "size": "Small",
        "image_url": "https://images.example.com/cakes/strawberry-cream.jpg",
        "quantity_available": 4,
    },
    {
        "cake_name": "Red Velvet",
        "flavors_used": "Red Velvet, Cream Cheese",
        "size": "Large",
        "image_url": "https://images.example.com/cakes/red-velvet.jpg",
        "quantity_available": 3,
    },
    {
        "cake_name": "Lemon Drizzle",
        "flavors_used": "Lemon",
        "size": "Small",
        "image_url": "https://images.example.com/cakes/lemon-drizzle.jpg",
        "quantity_available": 8,
    },
]


def get_or_create_customer(name: str, email: str, password: str) -> User:
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(
            name=name,
            email=email,
            phone="0700000000",
            address="Nyeri 001",
            role="customer",
            is_verified=True,
            password=hash_password(password),
        )
        db.session.add(user)
    else:
        user.is_verified = True
        user.verification_code = None
        user.password = hash_password(password)
    return user


def main() -> None:
    app = create_app()
    with app.app_context():
        get_or_create_customer("Demo Customer", "customer@example.com", "CustomerPass123")

        created = 0
        for data in CAKES:
            existing = ReadyMadeCake.query.filter_by(cake_name=data["cake_name"]).first()
            if existing is None:
                db.session.add(ReadyMadeCake(**data))
                created += 1
            else:
                existing.is_active = True
                existing.quantity_available = data["quantity_available"]

        db.session.commit()
        print(f"Demo data seeded: {created} new cakes.")


if __name__ == "__main__":
    main()
