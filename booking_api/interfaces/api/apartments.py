"""Apartment API routes — public catalogue, availability, admin management."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from booking_api.application.services import apartment_service
from booking_api.application.services.availability_service import is_available
from booking_api.core.clock import to_utc
from booking_api.domain.models.user import User
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.rating_repository import RatingRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.apartment import (
    ApartmentCreate,
    ApartmentFilter,
    ApartmentRead,
    ApartmentUpdate,
    AvailabilityRead,
)
from booking_api.domain.schemas.common import MessageResponse, Page, PageParams
from booking_api.interfaces.api.deps import get_page_params, require_admin
from booking_api.interfaces.deps import (
    get_apartment_repository,
    get_rating_repository,
    get_reservation_repository,
)

router = APIRouter(prefix="/api/apartments", tags=["Apartments"])


@router.get("", response_model=Page[ApartmentRead])
def list_apartments(
    category: Optional[str] = None,
    location: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    capacity: Optional[int] = Query(None, ge=1),
    search: Optional[str] = None,
    params: PageParams = Depends(get_page_params),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    ratings: RatingRepository = Depends(get_rating_repository),
):
    """Filter, search and paginate apartments with their rating stats."""
    filters = ApartmentFilter(
        category=category,
        location=location,
        min_price=min_price,
        max_price=max_price,
        capacity=capacity,
        search=search,
    )
    items, total = apartment_service.list_apartments(apartments, ratings, filters, params)
    return Page[ApartmentRead].build(items, total, params)


@router.get("/categories/list", response_model=List[str])
def list_categories(apartments: ApartmentRepository = Depends(get_apartment_repository)):
    return apartment_service.list_categories(apartments)


@router.get("/locations/list", response_model=List[str])
def list_locations(apartments: ApartmentRepository = Depends(get_apartment_repository)):
    return apartment_service.list_locations(apartments)


@router.get("/{apartment_id}", response_model=ApartmentRead)
def get_apartment(
    apartment_id: int,
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    ratings: RatingRepository = Depends(get_rating_repository),
):
    return apartment_service.get_apartment(apartments, ratings, apartment_id)


@router.get("/{apartment_id}/availability", response_model=AvailabilityRead)
def check_availability(
    apartment_id: int,
    start_time: datetime,
    end_time: datetime,
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    reservations: ReservationRepository = Depends(get_reservation_repository),
):
    """Whether the apartment is free for [start_time, end_time)."""
    available = is_available(reservations, apartments, apartment_id, start_time, end_time)
    return AvailabilityRead(
        apartment_id=apartment_id,
        start_time=to_utc(start_time),
        end_time=to_utc(end_time),
        available=available,
    )


@router.post("", response_model=ApartmentRead, status_code=status.HTTP_201_CREATED)
def create_apartment(
    body: ApartmentCreate,
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    admin: User = Depends(require_admin),
):
    return apartment_service.create_apartment(apartments, body, admin)


@router.put("/{apartment_id}", response_model=ApartmentRead)
def update_apartment(
    apartment_id: int,
    body: ApartmentUpdate,
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    ratings: RatingRepository = Depends(get_rating_repository),
    admin: User = Depends(require_admin),
):
    apartment_service.update_apartment(apartments, apartment_id, body, admin)
    return apartment_service.get_apartment(apartments, ratings, apartment_id)


@router.delete("/{apartment_id}", response_model=MessageResponse)
def delete_apartment(
    apartment_id: int,
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    admin: User = Depends(require_admin),
):
    apartment_service.delete_apartment(apartments, apartment_id, admin)
    return MessageResponse(message="Apartment deleted successfully")
