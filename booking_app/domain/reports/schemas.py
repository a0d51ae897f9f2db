"""Report schemas"""

from pydantic import BaseModel


class PackageStat(BaseModel):
    packageName: str
    count: int
    revenue: float


class MonthlyReport(BaseModel):
    totalAppointments: int
    totalRevenue: float
    completedAppointments: int
    pendingAppointments: int
    appointmentsByPackage: list[PackageStat]
