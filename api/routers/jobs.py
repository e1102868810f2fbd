"""
Print job endpoints.

POST /jobs/  → Submit a new print job
GET  /jobs/  → List the queue in submission order

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Call the engine
- Translate domain errors into HTTP status codes

There is no cancel endpoint: once submitted, a job stays in the queue.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_engine
from api.schemas.job import JobCreate, JobResponse, JobListResponse
from models.errors import CapacityExceeded, ValidationError
from scheduler.engine import SpoolerEngine

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/", response_model=JobResponse, status_code=201)
async def create_job(
    job_in: JobCreate,
    engine: SpoolerEngine = Depends(get_engine),
) -> JobResponse:
    """
    Submit a new print job.

    The job gets the next sequential id. A rejected job (full queue)
    does not consume an id.
    """
    try:
        job = engine.submit_job(job_in.size, job_in.priority)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CapacityExceeded as e:
        raise HTTPException(status_code=409, detail=str(e))
    return JobResponse.model_validate(job)


@router.get("/", response_model=JobListResponse)
async def list_jobs(
    engine: SpoolerEngine = Depends(get_engine),
) -> JobListResponse:
    """The current queue, unsorted (submission order)."""
    jobs = engine.list_jobs()
    return JobListResponse(
        jobs=[JobResponse.model_validate(j) for j in jobs],
        total=len(jobs),
    )
