from sqlalchemy import Column, Integer, String

from rental_api.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String, primary_key=True)
    # Plain column, not a ForeignKey: a booking outlives the car it references.
    car_id = Column(String, nullable=False, index=True)
    car_image = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    contact_info = Column(String, nullable=False)
    pickup_location = Column(String, nullable=False)
    pickup_date = Column(String, nullable=False)
    return_date = Column(String, nullable=False)
    rental_days = Column(Integer, nullable=False)
    created_at = Column(String, nullable=False, index=True)
