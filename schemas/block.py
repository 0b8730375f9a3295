# schemas/block.py
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class BlockCreate(BaseModel):
     block_name: str = Field(..., min_length=1)
     property_id: int = Field(..., gt=0, description="Property ID (must exist)")
     floor_count: Optional[int] = Field(None, ge=0)
     notes: Optional[str] = None


class BlockUpdate(BaseModel):
     block_name: Optional[str] = Field(None, min_length=1)
     property_id: Optional[int] = Field(None, gt=0)
     floor_count: Optional[int] = Field(None, ge=0)
     notes: Optional[str] = None

     @field_validator("block_name", "property_id")
     @classmethod
     def reject_null(cls, value):
          if value is None:
               raise ValueError("may not be null")
          return value


class BlockResponse(BaseModel):
     block_id: int
     block_name: str
     property_id: int
     floor_count: Optional[int] = None
     notes: Optional[str] = None
     property_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
