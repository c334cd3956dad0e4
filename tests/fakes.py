"""
In-memory repositories implementing the domain repository protocols.

Service tests run against these instead of a database. They mirror the
store-level constraints the SQLAlchemy implementations rely on.
"""

from datetime import datetime
from itertools import count
from typing import Any, Dict, Iterable, List, Optional, Tuple

from booking_api.core.exceptions import ConflictError, DuplicatePaymentError, PersistenceError
from booking_api.domain.models.activity_log import ActivityLog
from booking_api.domain.models.apartment import Apartment
from booking_api.domain.models.comment import Comment
from booking_api.domain.models.payment import Payment
from booking_api.domain.models.rating import Rating
from booking_api.domain.models.reservation import Reservation, ReservationStatus
from booking_api.domain.models.user import User
from booking_api.infrastructure.payment_gateway import ChargeResult


class FakeRepository:
    model: Any = None

    def __init__(self):
        self.rows: List[Any] = []
        self.commits = 0
        self._ids = count(1)

    @staticmethod
    def _visible(obj) -> bool:
        return not getattr(obj, "is_deleted", False)

    def _active_rows(self) -> List[Any]:
        return [r for r in self.rows if self._visible(r)]

    @staticmethod
    def _page(rows: List[Any], skip: int, limit: int) -> Tuple[List[Any], int]:
        return rows[skip:skip + limit], len(rows)

    def get_by_id(self, id: int):
        return next((r for r in self._active_rows() if r.id == id), None)

    def add(self, obj):
        if obj.id is None:
            obj.id = next(self._ids)
        self.rows.append(obj)
        return obj

    def create(self, obj_in):
        if hasattr(obj_in, "model_dump"):
            obj_in = self.model(**obj_in.model_dump(exclude_unset=True))
        elif isinstance(obj_in, dict):
            obj_in = self.model(**obj_in)
        self.add(obj_in)
        self.commit()
        return obj_in

    def update(self, db_obj, obj_in):
        data = obj_in.model_dump(exclude_unset=True) if hasattr(obj_in, "model_dump") else obj_in
        for field, value in data.items():
            setattr(db_obj, field, value)
        self.commit()
        return db_obj

    def delete(self, db_obj) -> None:
        if hasattr(db_obj, "soft_delete"):
            db_obj.soft_delete()
        else:
            self.rows.remove(db_obj)
        self.commit()

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        pass


class FakeUserRepository(FakeRepository):
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._active_rows() if u.email.lower() == email.lower()), None)

    def get_any(self, id: int) -> Optional[User]:
        return next((u for u in self.rows if u.id == id), None)

    def email_taken(self, email: str) -> bool:
        return any(u.email.lower() == email.lower() for u in self.rows)

    def list_users(self, role, skip, limit):
        rows = [u for u in self.rows if not role or u.role == role]
        return self._page(rows, skip, limit)


class FakeApartmentRepository(FakeRepository):
    model = Apartment

    def get_for_update(self, id: int) -> Optional[Apartment]:
        return self.get_by_id(id)

    def search(self, filters, skip, limit):
        rows = self._active_rows()
        if filters.category:
            rows = [a for a in rows if a.category == filters.category]
        if filters.min_price is not None:
            rows = [a for a in rows if a.price >= filters.min_price]
        if filters.max_price is not None:
            rows = [a for a in rows if a.price <= filters.max_price]
        return self._page(rows, skip, limit)

    def list_categories(self) -> List[str]:
        return sorted({a.category for a in self._active_rows() if a.category})

    def list_locations(self) -> List[str]:
        return sorted({a.location for a in self._active_rows() if a.location})


class FakeReservationRepository(FakeRepository):
    model = Reservation

    def get_for_update(self, id: int) -> Optional[Reservation]:
        return self.get_by_id(id)

    def find_conflicts(self, apartment_id, start_time, end_time, exclude_id=None):
        return [
            r
            for r in self._active_rows()
            if r.apartment_id == apartment_id
            and r.status in ReservationStatus.ACTIVE
            and r.id != exclude_id
            and r.start_time < end_time
            and r.end_time > start_time
        ]

    def list_reservations(self, user_id, status, skip, limit):
        rows = [
            r
            for r in self._active_rows()
            if (user_id is None or r.user_id == user_id) and (not status or r.status == status)
        ]
        return self._page(rows, skip, limit)


class FakePaymentRepository(FakeRepository):
    model = Payment

    def add(self, obj):
        # Mirrors UNIQUE(reservation_id)
        if any(p.reservation_id == obj.reservation_id for p in self.rows):
            raise DuplicatePaymentError()
        return super().add(obj)

    def get_by_reservation(self, reservation_id: int) -> Optional[Payment]:
        return next((p for p in self.rows if p.reservation_id == reservation_id), None)

    def list_payments(self, user_id, skip, limit):
        rows = [p for p in self.rows if user_id is None or p.user_id == user_id]
        return self._page(rows, skip, limit)


class FakeRatingRepository(FakeRepository):
    model = Rating

    def add(self, obj):
        if obj.reservation_id is not None and self.get_by_reservation(obj.reservation_id):
            raise ConflictError("This reservation has already been rated")
        if obj.reservation_id is None and self.get_direct(obj.user_id, obj.apartment_id):
            raise ConflictError("You have already rated this apartment")
        return super().add(obj)

    def get_by_reservation(self, reservation_id: int) -> Optional[Rating]:
        return next((r for r in self.rows if r.reservation_id == reservation_id), None)

    def get_direct(self, user_id: int, apartment_id: int) -> Optional[Rating]:
        return next(
            (
                r
                for r in self.rows
                if r.user_id == user_id and r.apartment_id == apartment_id and r.reservation_id is None
            ),
            None,
        )

    def list_for_apartment(self, apartment_id, skip, limit):
        return self._page([r for r in self.rows if r.apartment_id == apartment_id], skip, limit)

    def list_for_user(self, user_id, skip, limit):
        return self._page([r for r in self.rows if r.user_id == user_id], skip, limit)

    def distribution(self, apartment_id: int) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for r in self.rows:
            if r.apartment_id == apartment_id:
                counts[r.value] = counts.get(r.value, 0) + 1
        return counts

    def stats_for_apartments(self, apartment_ids: Iterable[int]) -> Dict[int, Tuple[float, int]]:
        stats = {}
        for apartment_id in apartment_ids:
            values = [r.value for r in self.rows if r.apartment_id == apartment_id]
            if values:
                stats[apartment_id] = (round(sum(values) / len(values), 1), len(values))
        return stats


class FakeCommentRepository(FakeRepository):
    model = Comment


class FakeActivityLogRepository(FakeRepository):
    model = ActivityLog

    def __init__(self, fail: bool = False):
        super().__init__()
        self.fail = fail

    def record(self, entry: ActivityLog) -> ActivityLog:
        if self.fail:
            raise PersistenceError("Could not write activity log")
        return self.add(entry)

    def list_entries(self, action, skip, limit):
        return self._page([e for e in self.rows if not action or e.action == action], skip, limit)


class StubGateway:
    """Payment gateway with a fixed outcome that records every charge."""

    def __init__(self, success: bool = True):
        self.success = success
        self.charges: List[Tuple[float, str, int]] = []

    def charge(self, amount: float, payment_method: str, reservation_id: int) -> ChargeResult:
        self.charges.append((amount, payment_method, reservation_id))
        if self.success:
            return ChargeResult(success=True, reference="stub-ok")
        return ChargeResult(success=False, reason="Card declined")


def make_user(id: int, role: str = "user", name: Optional[str] = None) -> User:
    return User(
        id=id,
        name=name or f"User {id}",
        email=f"user{id}@example.com",
        password_hash="x",
        role=role,
        is_deleted=False,
    )


def make_apartment(repo: FakeApartmentRepository, price: float = 100.0, category: str = "Studio") -> Apartment:
    return repo.add(
        Apartment(
            title="Test flat",
            description="A flat",
            location="Downtown",
            category=category,
            price=price,
            capacity=2,
            is_deleted=False,
        )
    )


def make_reservation(
    repo: FakeReservationRepository,
    user: User,
    apartment: Apartment,
    start: datetime,
    end: datetime,
    status: str = ReservationStatus.PENDING,
) -> Reservation:
    return repo.add(
        Reservation(
            user_id=user.id,
            apartment_id=apartment.id,
            start_time=start,
            end_time=end,
            status=status,
            is_deleted=False,
        )
    )
