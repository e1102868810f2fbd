"""
Pydantic schemas for the /jobs endpoints.

These are NOT domain models — they define the HTTP API contract:
- JobCreate: what the user sends when submitting a print job (request body)
- JobResponse: what we send back for a single job (response body)
- JobListResponse: the whole queue in submission order

FastAPI checks the shape automatically (size="many" or 2.5 → 422).
Positivity is left to the repository, so a full queue answers 409 even
for size=0, exactly like the CLI and the library.
"""

from pydantic import BaseModel, Field


class JobCreate(BaseModel):
    """Request body for POST /jobs/ — what the user provides to submit a job."""

    size: int = Field(
        ...,  # ... means required, no default
        description="Page count",
        examples=[50],
    )
    priority: int = Field(
        ...,
        description="1 = Faculty, 2 = Student, 3 = Guest (lower prints first)",
        examples=[2],
    )


class JobResponse(BaseModel):
    """Response body for a single job — returned by POST /jobs/."""

    id: int
    size: int
    priority: int

    # from_attributes=True tells Pydantic to read from the PrintJob dataclass
    # attributes (e.g., job.size) instead of requiring a dict
    model_config = {"from_attributes": True}


class JobListResponse(BaseModel):
    """The full queue — returned by GET /jobs/."""

    jobs: list[JobResponse]
    total: int
