"""Interview scheduling for applications that reached the interview stage."""
from datetime import date
from typing import List, Optional

from jobportal.core.backend import BackendClient
from jobportal.core.exceptions import ApplicationNotFoundError, BackendError, SchedulingError
from jobportal.core.logging import setup_logging
from jobportal.core.schemas import Application, ApplicationStatus, Interview, InterviewStatus
from jobportal.core.session import UserSession
from jobportal.features.scheduling.slots import (
    DURATIONS,
    combine_slot,
    generate_date_options,
    generate_time_slots,
    today_in,
)

logger = setup_logging('scheduling')


class InterviewScheduler:
    """Lists interview-ready applications and books interviews for them.

    Bookings are not checked against each other; two interviews may share a
    slot.
    """

    def __init__(self, backend: BackendClient, time_zone: str = "UTC"):
        self.backend = backend
        self.time_zone = time_zone

    def date_options(self, today: Optional[date] = None) -> List[date]:
        """Bookable days, counted from today in the scheduling time zone."""
        return generate_date_options(today or today_in(self.time_zone))

    def eligible_applications(self, session: UserSession) -> List[Application]:
        """Applications of the user with status ``interview``, with job title and company.

        A failed fetch is logged and treated as "no applications".
        """
        try:
            rows = self.backend.select(
                'applications',
                filters={'user_id': session.user_id, 'status': ApplicationStatus.INTERVIEW.value},
                columns='*,jobs!inner(title,company)',
                access_token=session.access_token
            )
        except BackendError as e:
            logger.error(f"Error fetching applications for {session.user_id}: {e.message}")
            return []
        return [Application.model_validate(row) for row in rows or []]

    def _require_eligible(self, session: UserSession, application_id: str) -> None:
        try:
            rows = self.backend.select(
                'applications',
                filters={
                    'id': application_id,
                    'user_id': session.user_id,
                    'status': ApplicationStatus.INTERVIEW.value,
                },
                columns='id',
                access_token=session.access_token
            )
        except BackendError as e:
            logger.error(f"Error checking application {application_id}: {e.message}")
            raise SchedulingError("Application could not be checked") from e
        if not rows:
            raise ApplicationNotFoundError(
                f"Application {application_id} is not ready for an interview"
            )

    def schedule(
        self,
        session: UserSession,
        application_id: str,
        day: date,
        slot: str,
        duration: int,
        today: Optional[date] = None
    ) -> Interview:
        """Book an interview.

        Args:
            session: The applicant's session
            application_id: One of the user's applications with status ``interview``
            day: One of ``date_options()``
            slot: One of ``generate_time_slots()``
            duration: One of ``DURATIONS``, in minutes
            today: Reference day for the date options, defaults to today in
                the scheduling time zone

        Returns:
            The inserted interview

        Raises:
            ValueError: If the day, slot or duration is not offered
            ApplicationNotFoundError: If the application is not the user's or
                not at the interview stage
            SchedulingError: If the check or the insert fails
        """
        if day not in self.date_options(today):
            raise ValueError(f"{day.isoformat()} is not an available interview date")
        if slot not in generate_time_slots():
            raise ValueError(f"{slot} is not an available time slot")
        if duration not in DURATIONS:
            raise ValueError(f"Duration must be one of {', '.join(map(str, DURATIONS))} minutes")

        self._require_eligible(session, application_id)

        scheduled = combine_slot(day, slot, self.time_zone)
        try:
            row = self.backend.insert(
                'interviews',
                {
                    'application_id': application_id,
                    'scheduled_date': scheduled.isoformat(),
                    'duration': duration,
                    'status': InterviewStatus.SCHEDULED.value,
                },
                access_token=session.access_token
            )
        except BackendError as e:
            logger.error(f"Error scheduling interview for {application_id}: {e.message}")
            raise SchedulingError("Interview could not be scheduled") from e

        logger.info(f"Interview for application {application_id} scheduled at {scheduled.isoformat()}")
        return Interview.model_validate(row)
