"""Fixed job records used when the hosted backend has no jobs table."""
from typing import List

from jobportal.core.schemas import Job

_SAMPLE_ROWS = [
    {
        "id": "1",
        "title": "Senior Frontend Developer",
        "company": "TechCorp Inc.",
        "location": "San Francisco, CA",
        "type": "full-time",
        "salary_range": "$120,000 - $160,000",
        "description": (
            "We are looking for a Senior Frontend Developer to join our dynamic team. "
            "You will be responsible for developing user-facing web applications using "
            "modern JavaScript frameworks."
        ),
        "requirements": [
            "5+ years of React experience",
            "Strong TypeScript skills",
            "Experience with modern build tools",
            "Knowledge of responsive design",
        ],
        "benefits": [
            "Health insurance",
            "Flexible working hours",
            "Remote work options",
            "401k matching",
        ],
        "posted_date": "2024-01-15",
        "application_deadline": "2024-02-15",
        "created_at": "2024-01-15T10:00:00Z",
    },
    {
        "id": "2",
        "title": "Product Manager",
        "company": "StartupXYZ",
        "location": "New York, NY",
        "type": "full-time",
        "salary_range": "$100,000 - $140,000",
        "description": (
            "Join our product team to drive the development of innovative solutions. "
            "You will work closely with engineering and design teams to deliver "
            "exceptional user experiences."
        ),
        "requirements": [
            "3+ years product management experience",
            "Strong analytical skills",
            "Experience with Agile methodologies",
            "Excellent communication skills",
        ],
        "benefits": ["Equity package", "Unlimited PTO", "Learning budget", "Team retreats"],
        "posted_date": "2024-01-10",
        "application_deadline": "2024-02-10",
        "created_at": "2024-01-10T09:00:00Z",
    },
    {
        "id": "3",
        "title": "UX Designer",
        "company": "Design Studio",
        "location": "Remote",
        "type": "contract",
        "salary_range": "$80 - $120/hour",
        "description": (
            "We need a talented UX Designer to help create intuitive and engaging user "
            "experiences for our clients. You will be involved in the entire design "
            "process from research to prototyping."
        ),
        "requirements": [
            "Portfolio showcasing UX work",
            "Proficiency in Figma/Sketch",
            "User research experience",
            "Understanding of accessibility principles",
        ],
        "benefits": [
            "Flexible schedule",
            "Remote work",
            "Professional development",
            "Creative freedom",
        ],
        "posted_date": "2024-01-12",
        "application_deadline": "2024-02-12",
        "created_at": "2024-01-12T14:00:00Z",
    },
]


def sample_jobs() -> List[Job]:
    """Return fresh copies of the sample jobs in their listing order."""
    return [Job.model_validate(row) for row in _SAMPLE_ROWS]
