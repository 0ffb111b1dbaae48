from fastapi import APIRouter, Depends, HTTPException, status

from ..models.scheduling import EligibleApplication, ScheduleOptions, ScheduleRequest, ScheduleResponse
from ..dependencies import get_current_session, get_scheduler

from jobportal.core.exceptions import ApplicationNotFoundError, SchedulingError
from jobportal.core.session import UserSession
from jobportal.features.scheduling.scheduler import InterviewScheduler
from jobportal.features.scheduling.slots import (
    DEFAULT_DURATION,
    DURATIONS,
    generate_time_slots,
)

router = APIRouter()


@router.get("", response_model=ScheduleOptions)
def get_schedule_options(
    session: UserSession = Depends(get_current_session),
    scheduler: InterviewScheduler = Depends(get_scheduler)
):
    """Interview-ready applications and the slots they can be booked in"""
    applications = [
        EligibleApplication(
            id=application.id,
            job_id=application.job_id,
            job_title=application.jobs.title if application.jobs else None,
            company=application.jobs.company if application.jobs else None,
            applied_at=application.applied_at
        )
        for application in scheduler.eligible_applications(session)
    ]
    return ScheduleOptions(
        applications=applications,
        dates=scheduler.date_options(),
        time_slots=generate_time_slots(),
        durations=list(DURATIONS),
        default_duration=DEFAULT_DURATION
    )


@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
def schedule_interview(
    request: ScheduleRequest,
    session: UserSession = Depends(get_current_session),
    scheduler: InterviewScheduler = Depends(get_scheduler)
):
    """Book an interview for an application"""
    try:
        interview = scheduler.schedule(
            session,
            request.application_id,
            request.day,
            request.time_slot,
            request.duration
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except ApplicationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SchedulingError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error scheduling interview. Please try again."
        )

    return ScheduleResponse(
        interview_id=interview.id,
        application_id=interview.application_id,
        scheduled_date=interview.scheduled_date,
        duration=interview.duration,
        status=interview.status
    )
