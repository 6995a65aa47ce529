from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from car_store.infra.db.models.base import Base
from car_store.infra.db.models.types import UTCDateTime


class FavoriteRow(Base):
    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "car_id", name="uq_favorites_user_car"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # Weak references: no foreign keys, deleting a car leaves its favorites behind
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    car_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
