# schemas/user.py
from pydantic import BaseModel, Field, ConfigDict


class UserCreate(BaseModel):
     name: str = Field(..., min_length=1)
     email: str = Field(..., min_length=3)


class UserResponse(BaseModel):
     user_id: int
     name: str
     email: str

     model_config = ConfigDict(from_attributes=True)
