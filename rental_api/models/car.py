from sqlalchemy import Column, Float, Integer, JSON, String

from rental_api.database import Base


class Car(Base):
    __tablename__ = "cars"

    id = Column(String, primary_key=True)
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    price_per_day = Column(Float, nullable=False)
    image_url = Column(String, nullable=False)
    filename = Column(String, nullable=False)
    type = Column(String, nullable=False)
    seats = Column(Integer, nullable=False)
    transmission = Column(String, nullable=False)
    features = Column(JSON, nullable=False, default=list)
    created_at = Column(String, nullable=False)
