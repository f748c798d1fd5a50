from fastapi import APIRouter

from resume_check.schemas.analysis import MessageResponse

router = APIRouter()


@router.get("/", response_model=MessageResponse, summary="Liveness", description="Check that the backend is running.")
async def root():
    return {"message": "Backend is running"}


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy"}
