from sqlalchemy import Column, Float, Integer, String
from app.core.database import Base


class RoomType(Base):
    __tablename__ = "room_types"

    id = Column(Integer, primary_key=True, index=True)

    # e.g. "Single", "Double", "Suite"
    type = Column(String, unique=True, nullable=False)
    base_price = Column(Float, nullable=False, default=0.0)
