import math
from typing import Generic, List, TypeVar

from app.models.pagination import PageParams
from app.schemas.common import CamelModel

T = TypeVar("T")


class Paginated(CamelModel, Generic[T]):
    pages_count: int
    page: int
    page_size: int
    total_count: int
    items: List[T]

    @classmethod
    def build(cls, items: List[T], total_count: int, params: PageParams) -> "Paginated[T]":
        return cls(
            pages_count=math.ceil(total_count / params.page_size),
            page=params.page_number,
            page_size=params.page_size,
            total_count=total_count,
            items=items,
        )
