import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.auth_utils import get_current_user
from app.schemas import BookingCreate, BookingStatusUpdate
from core.database import create_booking, get_all_bookings, update_booking_status

log = logging.getLogger(__name__)

router = APIRouter(prefix="/travelbookings", tags=["bookings"])


@router.post("", status_code=201)
def create(data: BookingCreate):
    """Customer-facing: no agency login required."""
    try:
        return create_booking(data.to_store())
    except Exception:
        log.exception("Error creating booking")
        return JSONResponse(
            {"message": "Failed to create booking. Please try again later."}, status_code=500
        )


@router.get("", dependencies=[Depends(get_current_user)])
def list_bookings():
    try:
        return get_all_bookings()
    except Exception:
        log.exception("Error fetching bookings")
        return JSONResponse(
            {"message": "Failed to fetch bookings. Please try again later."}, status_code=500
        )


@router.put("/{booking_id}", dependencies=[Depends(get_current_user)])
def update_status(booking_id: int, data: BookingStatusUpdate):
    if not data.bookingStatus:
        return JSONResponse({"message": "Booking status is required."}, status_code=400)

    try:
        booking = update_booking_status(booking_id, data.bookingStatus)
    except Exception:
        log.exception("Error updating booking %s", booking_id)
        return JSONResponse(
            {"message": "Error updating booking. Please try again later."}, status_code=500
        )

    if not booking:
        return JSONResponse({"message": "Booking not found."}, status_code=404)
    return {"message": "Booking updated successfully.", "booking": booking}
