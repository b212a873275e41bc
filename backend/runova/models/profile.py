from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.sql import func
from runova.db import Base


class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the auth provider user
    id = Column(Uuid, primary_key=True)

    email = Column(String, nullable=False)
    full_name = Column(String, nullable=True)
    distance_unit = Column(String(2), nullable=False, default="mi", server_default="mi")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
