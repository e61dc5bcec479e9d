from fastapi import APIRouter, Depends, Request
from ..schemas import Receipt, ProcessResponse, PointsResponse, ErrorResponse
from ..services.receipts import ReceiptService


router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_receipt_service(request: Request) -> ReceiptService:
    return request.app.state.receipt_service

@router.post("/process", response_model=ProcessResponse,
             responses={400: {"model": ErrorResponse}})
def process_receipt(payload: Receipt, service: ReceiptService = Depends(get_receipt_service)):
    return ProcessResponse(id=service.submit(payload))

@router.get("/{receipt_id}/points", response_model=PointsResponse,
            responses={404: {"model": ErrorResponse}})
def get_points(receipt_id: str, service: ReceiptService = Depends(get_receipt_service)):
    return PointsResponse(points=service.lookup(receipt_id))
