from rental_api.models.car import Car
from rental_api.models.store import Store
from rental_api.models.booking import Booking
from rental_api.models.admin import Admin

__all__ = ["Car", "Store", "Booking", "Admin"]
