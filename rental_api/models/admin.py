from sqlalchemy import Column, String

from rental_api.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    registered_at = Column(String, nullable=False, index=True)
