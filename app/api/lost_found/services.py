# app/api/lost_found/services.py
import logging
from typing import Dict, Any, List, Optional

from app.core.exceptions import NotFound, Forbidden, InvalidArgument
from app.models.lost_found_pet import LostFoundPet, ReportStatus
from app.models.user import User, UserRole
from app.services.store import Store, LOST_FOUND_PETS
from app.utils.datetime_utils import DateTimeUtils

# Set by the service only
PROTECTED_FIELDS = ('id', 'reporter_id', 'created_at')

class LostFoundService:
    def __init__(self, store: Store):
        self.store = store

    def list_reports(self, report_type: Optional[str] = None) -> List[LostFoundPet]:
        """Newest reports first."""
        filters = {'type': report_type} if report_type else None
        reports = [LostFoundPet.from_dict(doc) for doc in self.store.find(LOST_FOUND_PETS, filters)]
        return sorted(reports, key=lambda r: (r.created_at, r.id), reverse=True)

    def get_report(self, report_id: int) -> LostFoundPet:
        document = self.store.get(LOST_FOUND_PETS, report_id)
        if not document:
            raise NotFound("Report not found")
        return LostFoundPet.from_dict(document)

    def create_report(self, report_data: Dict[str, Any], reporter: Optional[User] = None) -> LostFoundPet:
        document = {key: value for key, value in report_data.items() if key not in PROTECTED_FIELDS}
        document.setdefault('status', ReportStatus.OPEN.value)
        document['reporter_id'] = reporter.id if reporter else None
        document['created_at'] = DateTimeUtils.now()

        report = LostFoundPet.from_dict(self.store.create(LOST_FOUND_PETS, document))
        logging.info(f"{report.type.value.capitalize()} pet report {report.id} created "
                     f"(reporter: {report.reporter_id if report.reporter_id is not None else 'anonymous'})")
        return report

    def update_report(self, report_id: int, update_data: Dict[str, Any], editor: User) -> LostFoundPet:
        """Only the reporter or an admin may edit; anonymous reports are admin-only."""
        report = self.get_report(report_id)
        is_reporter = report.reporter_id is not None and report.reporter_id == editor.id
        if not (is_reporter or editor.role == UserRole.ADMIN):
            raise Forbidden("Unauthorized to update this report")

        changes = {key: value for key, value in update_data.items() if key not in PROTECTED_FIELDS}
        if not changes:
            raise InvalidArgument("No fields to update were provided")

        document = self.store.update(LOST_FOUND_PETS, report_id, changes)
        if not document:
            raise NotFound("Report not found")
        logging.info(f"Lost/found report {report_id} updated by user {editor.id}")
        return LostFoundPet.from_dict(document)
