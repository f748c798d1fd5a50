from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from resume_check.core.errors import AnalysisError, InternalError, UploadTooLargeError
from resume_check.parsing.models import Upload
from resume_check.schemas.analysis import AnalysisResponse, MessageResponse
from resume_check.services.analysis_service import ResumeAnalyzer

router = APIRouter()

READ_CHUNK_BYTES = 1024 * 64


def get_analyzer(request: Request) -> ResumeAnalyzer:
    return request.app.state.analyzer


async def _read_upload(file: UploadFile, max_bytes: int) -> Upload:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise UploadTooLargeError(max_bytes)
        chunks.append(chunk)
    return Upload(content=b"".join(chunks), media_type=file.content_type, filename=file.filename)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": MessageResponse}, 413: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def analyze_resume(
    request: Request,
    resume: UploadFile | None = File(default=None),
    job_description: str | None = Form(default=None, alias="jobDescription"),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
):
    try:
        upload = None
        if resume is not None and resume.filename:
            upload = await _read_upload(resume, request.app.state.settings.max_upload_bytes)
        return await analyzer.analyze(upload, job_description)
    except AnalysisError:
        raise
    except Exception as exc:
        raise InternalError() from exc
