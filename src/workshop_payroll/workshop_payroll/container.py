from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.service import HolidayService
from .payroll.service import SalaryReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.service import ShiftService
from .workers.mysql_worker_repository import MySQLWorkerRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    workers_repo: MySQLWorkerRepository
    shifts_repo: MySQLShiftRepository
    holidays_repo: MySQLHolidayRepository
    attendance_repo: MySQLAttendanceRepository

    shift_service: ShiftService
    holiday_service: HolidayService
    salary_service: SalaryReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    workers_repo = MySQLWorkerRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        workers_repo=workers_repo,
        shifts_repo=shifts_repo,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        shift_service=ShiftService(shifts_repo),
        holiday_service=HolidayService(holidays_repo, workers_repo),
        salary_service=SalaryReportService(workers_repo, shifts_repo, holidays_repo, attendance_repo),
    )
