from car_store.infra.db.models.base import Base
from car_store.infra.db.models.car import CarRow
from car_store.infra.db.models.favorite import FavoriteRow
from car_store.infra.db.models.review import ReviewRow
from car_store.infra.db.models.user import UserRow

__all__ = ["Base", "CarRow", "FavoriteRow", "ReviewRow", "UserRow"]
