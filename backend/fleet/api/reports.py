from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional

from fleet.api.deps import get_reports
from fleet.repositories import ReportRepository
from fleet.schemas.report import PublicReport, ReportCreate, ReportStatus, ReportUpdate

router = APIRouter()


@router.get("", response_model=List[PublicReport])
def list_reports(status: Optional[ReportStatus] = None, repo: ReportRepository = Depends(get_reports)):
    if status:
        return repo.get_by_status(status)
    return repo.get_all()


@router.post("", response_model=PublicReport, status_code=201)
def submit_report(report: ReportCreate, repo: ReportRepository = Depends(get_reports)):
    """Public incident form. No login required."""
    return repo.create(report)


@router.get("/{report_id}", response_model=PublicReport)
def get_report(report_id: str, repo: ReportRepository = Depends(get_reports)):
    report = repo.get(report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


@router.put("/{report_id}", response_model=PublicReport)
def update_report(report_id: str, report: ReportUpdate, repo: ReportRepository = Depends(get_reports)):
    """Update a report, typically its status (new -> reviewed -> processed)."""
    updated = repo.update(report_id, report)
    if not updated:
        raise HTTPException(status_code=404, detail="Report not found")
    return updated


@router.delete("/{report_id}")
def delete_report(report_id: str, repo: ReportRepository = Depends(get_reports)):
    deleted = repo.delete(report_id)
    return {"message": "Report deleted" if deleted else "Report not found", "deleted": deleted}
