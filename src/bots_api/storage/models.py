# Data models for stored bot records
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class BotRecord(BaseModel):
    """A registered bot as kept in the store hash ``bot:<id>``"""

    model_config = ConfigDict(populate_by_name=True)

    token: Optional[str] = None
    username: str = Field(min_length=1)
    added_at: Optional[str] = Field(default=None, alias='addedAt')

    def to_mapping(self) -> Dict[str, str]:
        """Flat string mapping suitable for HSET (None values dropped)"""
        return self.model_dump(by_alias=True, exclude_none=True)
