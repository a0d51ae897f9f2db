"""Report service - monthly dashboard figures"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...shared.timeutils import month_bounds
from .repository import ReportRepository
from .schemas import MonthlyReport, PackageStat

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ReportRepository()

    def monthly_report(self, year: int, month: int) -> MonthlyReport:
        """
        Figures for one calendar month, first day 00:00:00 through last
        day 23:59:59 local time, both ends inclusive.
        """
        if not 1 <= month <= 12:
            raise HTTPException(status_code=400, detail=messages.invalid_message("get_monthly_report"))

        start, end = month_bounds(year, month)
        by_package = [
            PackageStat(
                packageName=name or messages.text("unknown_package"),
                count=count,
                revenue=float(revenue or 0),
            )
            for name, count, revenue in self.repo.revenue_by_package(self.db, start, end)
        ]

        report = MonthlyReport(
            totalAppointments=self.repo.count_appointments(self.db, start, end),
            totalRevenue=float(self.repo.completed_revenue(self.db, start, end)),
            completedAppointments=self.repo.count_appointments(self.db, start, end, "completed"),
            pendingAppointments=self.repo.count_appointments(self.db, start, end, "pending"),
            appointmentsByPackage=by_package,
        )
        logger.info(f"📊 Monthly report {year}-{month:02d}: {report.totalAppointments} appointments")
        return report
