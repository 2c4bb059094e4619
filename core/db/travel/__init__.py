"""
Travel agency storage re-exports.
"""
from core.db.travel.agencies_store import (
    create_travel_agency,
    get_all_travel_agencies,
    get_travel_agencies_by_user,
    update_travel_agency_by_user,
)

__all__ = [
    "create_travel_agency",
    "get_all_travel_agencies",
    "get_travel_agencies_by_user",
    "update_travel_agency_by_user",
]
