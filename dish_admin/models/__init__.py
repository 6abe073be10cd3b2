from .base import BaseEntity, TimestampMixin
from .dish import (
    CategoryPayload,
    Dish,
    DishCategory,
    DishCreate,
    DishListResponse,
    DishQueryParams,
    DishStatus,
    DishUpdate,
    OperationResult,
)

__all__ = [
    "BaseEntity",
    "TimestampMixin",
    "CategoryPayload",
    "Dish",
    "DishCategory",
    "DishCreate",
    "DishListResponse",
    "DishQueryParams",
    "DishStatus",
    "DishUpdate",
    "OperationResult",
]
