"""Report router - admin dashboard reports"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import MonthlyReport
from .service import ReportService

router = APIRouter(prefix="/api/reports", tags=["Reports"])


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    """Dependency injection for ReportService"""
    return ReportService(db)


@router.get("/monthly", response_model=MonthlyReport)
async def get_monthly_report(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(...),
    service: ReportService = Depends(get_report_service),
):
    return service.monthly_report(year, month)
