"""
Car listing storage re-exports.
"""
from core.db.cars.cars_store import (
    create_car,
    delete_car,
    get_car,
    get_cars_by_user,
    update_car,
)

__all__ = [
    "create_car",
    "delete_car",
    "get_car",
    "get_cars_by_user",
    "update_car",
]
