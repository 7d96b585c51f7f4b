# app/routes/receipts.py
import uuid

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ..errors import InvalidReceiptData, InvalidReceiptFormat, ReceiptNotFound
from ..schemas import PointsResponse, ProcessResponse, Receipt
from ..services.scoring import score_breakdown
from ..services.validation import is_valid_receipt
from ..store import ScoreStore, get_store
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

def new_receipt_id() -> str:
    return str(uuid.uuid4())

@router.post("/process", response_model=ProcessResponse)
async def process_receipt(request: Request, store: ScoreStore = Depends(get_store)):
    raw = await request.body()
    try:
        receipt = Receipt.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Rejected undecodable receipt: %s", e.errors(include_url=False))
        raise InvalidReceiptFormat() from e

    if not is_valid_receipt(receipt):
        logger.warning("Rejected invalid receipt from retailer %r", receipt.retailer)
        raise InvalidReceiptData()

    breakdown = score_breakdown(receipt)
    points = sum(breakdown.values())
    receipt_id = new_receipt_id()
    store.put(receipt_id, points)

    logger.debug("Receipt %s breakdown: %s", receipt_id, breakdown)
    logger.info("Receipt %s scored %s points", receipt_id, points)
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    points, found = store.get(receipt_id)
    if not found:
        logger.info("No receipt stored under %s", receipt_id)
        raise ReceiptNotFound()
    return PointsResponse(points=points)
