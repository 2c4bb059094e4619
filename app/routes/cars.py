import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from app.auth_utils import get_current_user
from app.deps import get_storage
from app.storage import CAR_IMAGES_FOLDER, ObjectStorage
from core.database import (
    create_car,
    delete_car,
    get_car,
    get_cars_by_user,
    get_user_by_id,
    update_car,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"], dependencies=[Depends(get_current_user)])


def _store_image(storage: ObjectStorage, image: UploadFile) -> str:
    return storage.store(image.file.read(), image.content_type or "application/octet-stream", CAR_IMAGES_FOLDER)


def _blank_to_none(value):
    # empty form fields keep the stored value on update
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


@router.post("/create", status_code=201)
def create(
    car_type: str = Form(..., alias="carType"),
    price: float = Form(...),
    travel_user_id: int = Form(..., alias="travelUserId"),
    car_name: Optional[str] = Form(None, alias="carName"),
    price_per_km: Optional[float] = Form(None, alias="pricePerKm"),
    image: Optional[UploadFile] = File(None),
    storage: ObjectStorage = Depends(get_storage),
):
    if image is None or not image.filename:
        return JSONResponse({"message": "Image file is required"}, status_code=400)

    try:
        if not get_user_by_id(travel_user_id):
            return JSONResponse({"message": "User ID is invalid"}, status_code=400)

        image_url = _store_image(storage, image)
        car = create_car(
            travel_user_id,
            image=image_url,
            car_type=car_type,
            price=price,
            car_name=car_name,
            price_per_km=price_per_km,
        )
    except Exception as exc:
        log.exception("Error creating car")
        return JSONResponse({"message": "Failed to create car", "error": str(exc)}, status_code=500)
    return car


@router.get("/{travel_user_id}")
def cars_for_user(travel_user_id: int):
    try:
        if not get_user_by_id(travel_user_id):
            return JSONResponse({"message": "Invalid userId, user not found"}, status_code=404)
        cars = get_cars_by_user(travel_user_id)
    except Exception as exc:
        log.exception("Error fetching cars for user %s", travel_user_id)
        return JSONResponse({"message": "Failed to retrieve cars", "error": str(exc)}, status_code=500)

    if not cars:
        return JSONResponse({"message": "No cars found for this userId"}, status_code=404)
    return cars


@router.put("/{car_id}")
def update(
    car_id: int,
    car_name: Optional[str] = Form(None, alias="carName"),
    car_type: Optional[str] = Form(None, alias="carType"),
    price: Optional[str] = Form(None),
    price_per_km: Optional[str] = Form(None, alias="pricePerKm"),
    image: Optional[UploadFile] = File(None),
    storage: ObjectStorage = Depends(get_storage),
):
    try:
        car = get_car(car_id)
        if not car:
            return JSONResponse({"message": "Car not found"}, status_code=404)

        fields = {
            "carName": _blank_to_none(car_name),
            "carType": _blank_to_none(car_type),
            "price": _blank_to_none(price),
            "pricePerKm": _blank_to_none(price_per_km),
        }
        for key in ("price", "pricePerKm"):
            if fields[key] is not None:
                fields[key] = float(fields[key])

        if image is not None and image.filename:
            storage.delete(car["image"])
            fields["image"] = _store_image(storage, image)

        updated = update_car(car_id, fields)
    except Exception as exc:
        log.exception("Error updating car %s", car_id)
        return JSONResponse({"message": "Failed to update car", "error": str(exc)}, status_code=500)

    if not updated:
        return JSONResponse({"message": "Car not found"}, status_code=404)
    return updated


@router.delete("/{car_id}")
def remove(car_id: int, storage: ObjectStorage = Depends(get_storage)):
    try:
        car = get_car(car_id)
        if not car:
            return JSONResponse({"message": "Car not found"}, status_code=404)

        storage.delete(car["image"])
        delete_car(car_id)
    except Exception as exc:
        log.exception("Error deleting car %s", car_id)
        return JSONResponse({"message": "Failed to delete car", "error": str(exc)}, status_code=500)
    return {"message": "Car deleted successfully"}
