from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Float, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from car_store.infra.db.models.base import Base
from car_store.infra.db.models.types import UTCDateTime


class CarRow(Base):
    __tablename__ = "cars"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    make: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    model: Mapped[str] = mapped_column(String(50), nullable=False)

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )  # $9,999,999,999.99

    mileage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    body_type: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    fuel_type: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    transmission: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    color: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    horsepower: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    engine_size: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
