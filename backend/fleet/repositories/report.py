from typing import List

from fleet.repositories.base import BaseRepository
from fleet.schemas.report import PublicReport, ReportCreate, ReportUpdate


class ReportRepository(BaseRepository[PublicReport]):
    table = "reports"
    entity_type = "report"
    record_type = PublicReport
    create_type = ReportCreate
    update_type = ReportUpdate
    created_field = "submittedAt"

    def get_by_status(self, status: str) -> List[PublicReport]:
        return self._scan(status=status)

    def get_by_barcode(self, barcode: str) -> List[PublicReport]:
        return self._scan(barcode=barcode)
