"""Insert sample users, apartments and ratings for local development.

Run from the project root: python scripts/seed_sample_data.py
"""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from booking_api.infrastructure.database import Base, SessionLocal, engine
from booking_api.application.services.auth_service import create_user, ensure_default_admin
from booking_api.domain.models.activity_log import ActivityLog  # noqa: F401
from booking_api.domain.models.apartment import Apartment
from booking_api.domain.models.comment import Comment  # noqa: F401
from booking_api.domain.models.favorite import Favorite  # noqa: F401
from booking_api.domain.models.payment import Payment  # noqa: F401
from booking_api.domain.models.rating import Rating
from booking_api.domain.models.reservation import Reservation  # noqa: F401
from booking_api.domain.models.user import User
from booking_api.infrastructure.repositories.apartment_repository import SQLAlchemyApartmentRepository
from booking_api.infrastructure.repositories.rating_repository import SQLAlchemyRatingRepository
from booking_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

SAMPLE_PASSWORD = "password123"

SAMPLE_USERS = [
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
]

SAMPLE_APARTMENTS = [
    {
        "title": "Luxury Downtown Apartment",
        "description": "Beautiful apartment in the heart of the city with amazing views.",
        "location": "Downtown",
        "category": "Luxury",
        "price": 150.00,
        "capacity": 4,
        "amenities": "WiFi, Kitchen, Parking, Pool",
    },
    {
        "title": "Cozy Weekend Getaway",
        "description": "Perfect for a relaxing weekend away from the city.",
        "location": "Suburbs",
        "category": "Cottage",
        "price": 80.00,
        "capacity": 2,
        "amenities": "WiFi, Kitchen, Garden",
    },
    {
        "title": "Modern Studio Apartment",
        "description": "Contemporary studio with all modern amenities.",
        "location": "City Center",
        "category": "Studio",
        "price": 120.00,
        "capacity": 2,
        "amenities": "WiFi, Kitchen, Gym, Balcony",
    },
]

# (user index, apartment index, value, text)
SAMPLE_RATINGS = [
    (0, 0, 5, "Amazing apartment with great views! Everything was clean and modern."),
    (1, 0, 4, "Very nice apartment, good amenities. A bit of street noise."),
    (0, 1, 5, "Perfect weekend getaway! The garden was beautiful."),
    (1, 1, 4, "Great value for money. Clean and comfortable."),
    (0, 2, 4, "Modern studio with excellent amenities. Perfect for business travelers."),
    (1, 2, 5, "Outstanding modern apartment! The balcony view was incredible."),
]


def seed():
    print("Seeding sample data...")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        users = SQLAlchemyUserRepository(db, User)
        apartments = SQLAlchemyApartmentRepository(db, Apartment)
        ratings = SQLAlchemyRatingRepository(db, Rating)

        ensure_default_admin(users)

        seeded_users = []
        for name, email in SAMPLE_USERS:
            user = users.get_by_email(email)
            if user is None:
                user = create_user(users, name, email, SAMPLE_PASSWORD)
                print(f"Created user {email}")
            seeded_users.append(user)

        seeded_apartments = []
        for data in SAMPLE_APARTMENTS:
            apartment = db.query(Apartment).filter(Apartment.title == data["title"]).first()
            if apartment is None:
                apartment = apartments.create(data)
                print(f"Created apartment '{apartment.title}'")
            seeded_apartments.append(apartment)

        for user_idx, apt_idx, value, text in SAMPLE_RATINGS:
            user, apartment = seeded_users[user_idx], seeded_apartments[apt_idx]
            if ratings.get_direct(user.id, apartment.id) is None:
                ratings.add(
                    Rating(user_id=user.id, apartment_id=apartment.id, value=value, comment_text=text)
                )
        ratings.commit()
        print("Sample data ready.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
