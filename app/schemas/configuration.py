from typing import List
from pydantic import field_validator

from app.schemas.common import CamelModel


class CatalogConfig(CamelModel):
    theatres: List[str]
    time_slots: List[str]


class CatalogConfigUpdate(CatalogConfig):

    @field_validator("theatres", "time_slots")
    @classmethod
    def strip_blank_entries(cls, v: List[str]) -> List[str]:
        cleaned = []
        for item in v:
            item = item.strip()
            if item and item not in cleaned:
                cleaned.append(item)
        return cleaned
