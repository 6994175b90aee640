from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlmodel import Session, select

from sazonly.core.database import get_session
from sazonly.models.nutrition import NutrientRecord, UnitConversion

router = APIRouter()


@router.get("/health")
def health(session: Session = Depends(get_session)):
    return {
        "status": "ok",
        "nutrient_records": session.exec(select(func.count()).select_from(NutrientRecord)).one(),
        "unit_conversions": session.exec(select(func.count()).select_from(UnitConversion)).one(),
    }
