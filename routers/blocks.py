# routers/blocks.py
"""
Building block API routes.
"""
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Block, Property
from schemas.block import BlockCreate, BlockUpdate, BlockResponse
from .common import apply_update, commit_or_409, get_or_404

router = APIRouter(prefix="/api/blocks", tags=["blocks"])


def _build_block_response(block: Block) -> BlockResponse:
     response = BlockResponse.model_validate(block)
     response.property_name = block.property.name if block.property else None
     return response


@router.get(
     "",
     response_model=List[BlockResponse],
     summary="List blocks with their property name"
)
def list_blocks(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     db: Session = Depends(get_session)
):
     query = (
          db.query(Block, Property.name)
          .join(Property, Block.property_id == Property.property_id)
     )
     if property_id:
          query = query.filter(Block.property_id == property_id)

     rows = query.order_by(Property.name, Block.block_name).all()
     return [{**block.to_dict(), "property_name": property_name} for block, property_name in rows]


@router.get(
     "/{block_id}",
     response_model=BlockResponse,
     summary="Get block by ID"
)
def get_block(block_id: int, db: Session = Depends(get_session)):
     return _build_block_response(get_or_404(db, Block, block_id, "Block"))


@router.post(
     "",
     response_model=BlockResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new block"
)
def create_block(block_data: BlockCreate, db: Session = Depends(get_session)):
     get_or_404(db, Property, block_data.property_id, "Property")

     block = Block(**block_data.model_dump())
     db.add(block)
     commit_or_409(db)
     db.refresh(block)
     return _build_block_response(block)


@router.put(
     "/{block_id}",
     response_model=BlockResponse,
     summary="Update block"
)
def update_block(
     block_id: int,
     block_data: BlockUpdate,
     db: Session = Depends(get_session)
):
     block = get_or_404(db, Block, block_id, "Block")
     if block_data.property_id is not None:
          get_or_404(db, Property, block_data.property_id, "Property")

     apply_update(block, block_data)
     commit_or_409(db)
     db.refresh(block)
     return _build_block_response(block)


@router.delete(
     "/{block_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete block"
)
def delete_block(block_id: int, db: Session = Depends(get_session)):
     block = get_or_404(db, Block, block_id, "Block")
     db.delete(block)
     commit_or_409(db, f"Block with ID {block_id} is still referenced by expenses")
