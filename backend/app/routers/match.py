from datetime import datetime, timezone

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from app.config import settings
from app.schemas.match import MatchRequest, MatchResponse
from app.services.match_service import MatchResult, compare_documents, extract_text
from app.services.pdf_service import generate_match_report_pdf

router = APIRouter(prefix="/match", tags=["match"])

BOTH_REQUIRED = "Please paste both your resume and the job description."


def check_text_length(*texts: str):
    limit = settings.max_text_chars
    if any(len(t) > limit for t in texts):
        raise HTTPException(status_code=413, detail=f"Text too long (max {limit} characters)")


def run_match(resume_text: str, job_text: str) -> MatchResult:
    return compare_documents(resume_text, job_text, settings.tokenizer_config())


def to_response(result: MatchResult) -> MatchResponse:
    return MatchResponse(**result.model_dump())


def report_response(result: MatchResult, resume_name: str | None = None) -> Response:
    now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    pdf_bytes = generate_match_report_pdf(result, now, resume_name)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="match_report.pdf"'},
    )


def _require_texts(req: MatchRequest) -> tuple[str, str]:
    check_text_length(req.resume_text, req.job_text)
    resume_text = req.resume_text.strip()
    job_text = req.job_text.strip()
    if not resume_text or not job_text:
        raise HTTPException(status_code=400, detail=BOTH_REQUIRED)
    return resume_text, job_text


@router.post("", response_model=MatchResponse)
async def match_texts(req: MatchRequest):
    """Score a pasted resume against a pasted job description."""
    return to_response(run_match(*_require_texts(req)))


@router.post("/report")
async def match_report(req: MatchRequest):
    """Same comparison as POST /match, delivered as a PDF report."""
    return report_response(run_match(*_require_texts(req)))


@router.post("/upload", response_model=MatchResponse)
async def match_upload(
    file: UploadFile = File(...),
    job_text: str = Form(""),
):
    """Score an uploaded resume file (text or PDF) against a job description."""
    check_text_length(job_text)
    job_text = job_text.strip()
    if not job_text:
        raise HTTPException(status_code=400, detail=BOTH_REQUIRED)

    max_bytes = settings.max_upload_bytes
    size = 0
    chunks: list[bytes] = []
    while True:
        chunk = await file.read(1024 * 1024)
        if not chunk:
            break
        size += len(chunk)
        if size > max_bytes:
            raise HTTPException(status_code=413, detail=f"File too large (max {max_bytes} bytes)")
        chunks.append(chunk)

    content = b"".join(chunks)
    if not content:
        raise HTTPException(status_code=400, detail="Empty file")

    resume_text = extract_text(content, file.filename, file.content_type).strip()
    if not resume_text:
        raise HTTPException(status_code=400, detail="Could not extract any text from the uploaded file")
    return to_response(run_match(resume_text, job_text))
