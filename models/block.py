# models/block.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Block(Base):
     """Block model - a named building block within a property."""

     block_id = Column(Integer, primary_key=True, autoincrement=True)
     block_name = Column(String, nullable=False)
     property_id = Column(Integer, ForeignKey("properties.property_id"), nullable=False)
     floor_count = Column(Integer, nullable=True)
     notes = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="blocks")

     def __repr__(self):
          return f"<Block(block_id={self.block_id}, block_name='{self.block_name}')>"
