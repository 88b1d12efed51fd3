from sqlalchemy import Column, String

from rental_api.database import Base


class Store(Base):
    __tablename__ = "stores"

    id = Column(String, primary_key=True)
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    constituency = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    filename = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
