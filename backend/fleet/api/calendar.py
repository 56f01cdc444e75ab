from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional

from fleet.api.deps import get_calendar
from fleet.repositories import CalendarRepository
from fleet.schemas.calendar import CalendarEvent, CalendarEventCreate, CalendarEventUpdate

router = APIRouter()


@router.get("", response_model=List[CalendarEvent])
def list_events(date: Optional[str] = None, repo: CalendarRepository = Depends(get_calendar)):
    """Get all calendar events, or those on one day (YYYY-MM-DD)."""
    if date:
        return repo.get_by_date(date)
    return repo.get_all()


@router.post("", response_model=CalendarEvent, status_code=201)
def create_event(event: CalendarEventCreate, repo: CalendarRepository = Depends(get_calendar)):
    return repo.create(event)


@router.get("/{event_id}", response_model=CalendarEvent)
def get_event(event_id: str, repo: CalendarRepository = Depends(get_calendar)):
    event = repo.get(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Calendar event not found")
    return event


@router.put("/{event_id}", response_model=CalendarEvent)
def update_event(event_id: str, event: CalendarEventUpdate, repo: CalendarRepository = Depends(get_calendar)):
    updated = repo.update(event_id, event)
    if not updated:
        raise HTTPException(status_code=404, detail="Calendar event not found")
    return updated


@router.delete("/{event_id}")
def delete_event(event_id: str, repo: CalendarRepository = Depends(get_calendar)):
    deleted = repo.delete(event_id)
    return {"message": "Calendar event deleted" if deleted else "Calendar event not found", "deleted": deleted}
