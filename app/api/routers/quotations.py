from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.quotation import Quotation, QuotationRequest
from app.services.quotation import generate_quotation, get_quotation_by_id, list_quotations

router = APIRouter(prefix="/quotations", tags=["quotations"])


@router.post("", response_model=Quotation, status_code=status.HTTP_200_OK)
def create_new_quotation(
    quotation_data: QuotationRequest,
    db: Session = Depends(get_db),
):
    """
    Price and store a quotation. Expires 30 days from today.
    """
    quotation = generate_quotation(
        db,
        pet_name=quotation_data.name,
        species=quotation_data.species,
        breed=quotation_data.breed,
        age=quotation_data.age,
        premium_plan=quotation_data.premium,
    )
    return Quotation.from_domain(quotation)


@router.get("", response_model=list[Quotation])
def get_all_quotations(db: Session = Depends(get_db)):
    quotations = list_quotations(db)
    return [Quotation.from_domain(q) for q in quotations]


@router.get("/{quotation_id}", response_model=Quotation)
def get_quotation(quotation_id: str, db: Session = Depends(get_db)):
    """
    Get a quotation by ID.

    An unknown ID answers 200 with an empty body rather than 404; the policy
    side treats that as a lookup miss.
    """
    quotation = get_quotation_by_id(db, quotation_id)
    if quotation is None:
        return Response(status_code=status.HTTP_200_OK)
    return Quotation.from_domain(quotation)
