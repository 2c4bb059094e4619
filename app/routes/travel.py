import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from app.auth_utils import get_current_user
from app.deps import get_storage
from app.storage import TRAVEL_LOGOS_FOLDER, ObjectStorage
from core.database import (
    create_travel_agency,
    get_all_travel_agencies,
    get_travel_agencies_by_user,
    update_travel_agency_by_user,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/travel", tags=["travel"], dependencies=[Depends(get_current_user)])


def _upload_logo(storage: ObjectStorage, logo: Optional[UploadFile]) -> Optional[str]:
    if logo is None or not logo.filename:
        return None
    return storage.store(logo.file.read(), logo.content_type or "application/octet-stream", TRAVEL_LOGOS_FOLDER)


@router.post("", status_code=201)
def create_agency(
    name: str = Form(...),
    email: str = Form(...),
    contact_no: Optional[str] = Form(None, alias="contactNo"),
    city: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    country: Optional[str] = Form(None),
    pincode: Optional[str] = Form(None),
    travel_user_id: int = Form(..., alias="travelUserId"),
    logo: Optional[UploadFile] = File(None),
    storage: ObjectStorage = Depends(get_storage),
):
    try:
        logo_url = _upload_logo(storage, logo)
        agency = create_travel_agency(
            travel_user_id,
            {
                "logo": logo_url,
                "name": name,
                "email": email,
                "contactNo": contact_no,
                "city": city,
                "state": state,
                "address": address,
                "country": country,
                "pincode": pincode,
            },
        )
    except Exception as exc:
        log.exception("Error creating travel agency")
        return JSONResponse({"message": str(exc)}, status_code=400)
    return agency


@router.get("")
def list_agencies():
    try:
        return get_all_travel_agencies()
    except Exception as exc:
        log.exception("Error listing travel agencies")
        return JSONResponse({"message": str(exc)}, status_code=500)


@router.get("/{travel_user_id}")
def agencies_for_user(travel_user_id: int):
    try:
        agencies = get_travel_agencies_by_user(travel_user_id)
    except Exception as exc:
        log.exception("Error fetching travel agencies for user %s", travel_user_id)
        return JSONResponse({"message": str(exc)}, status_code=500)
    if not agencies:
        return JSONResponse({"message": "No travel agencies found for this user"}, status_code=404)
    return agencies


@router.put("/{travel_user_id}")
def update_agency(
    travel_user_id: int,
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    contact_no: Optional[str] = Form(None, alias="contactNo"),
    city: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    country: Optional[str] = Form(None),
    pincode: Optional[str] = Form(None),
    logo: Optional[UploadFile] = File(None),
    storage: ObjectStorage = Depends(get_storage),
):
    try:
        existing = get_travel_agencies_by_user(travel_user_id)
        if not existing:
            return JSONResponse({"message": "Travel agency not found for this user"}, status_code=404)

        updated = {
            "name": name,
            "email": email,
            "contactNo": contact_no,
            "city": city,
            "state": state,
            "address": address,
            "country": country,
            "pincode": pincode,
        }
        if logo is not None and logo.filename:
            old_logo = existing[0].get("logo")
            if old_logo:
                try:
                    storage.delete(old_logo)
                except Exception as exc:
                    log.warning("Could not delete old logo %s: %s", old_logo, exc)
            updated["logo"] = _upload_logo(storage, logo)

        agency = update_travel_agency_by_user(travel_user_id, updated)
    except Exception as exc:
        log.exception("Error updating travel agency for user %s", travel_user_id)
        return JSONResponse({"message": str(exc)}, status_code=400)
    return agency
