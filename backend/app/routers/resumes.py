from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_user_id
from app.models.resume import SavedResume
from app.routers.match import BOTH_REQUIRED, check_text_length, report_response, run_match, to_response
from app.schemas.match import JobTextRequest, MatchResponse
from app.schemas.resume import ResumeCreate, ResumeResponse, ResumeSummary
from app.services import resume_service

router = APIRouter(prefix="/resumes", tags=["resumes"])


def _resume_to_response(index: int, resume: SavedResume) -> ResumeResponse:
    return ResumeResponse(
        index=index,
        name=resume.name,
        content=resume.content,
        content_hash=resume.content_hash,
        created_at=resume.created_at,
    )


def _get_or_404(db: Session, user_id: str, index: int) -> SavedResume:
    resume = resume_service.get_resume(db, user_id, index)
    if resume is None:
        raise HTTPException(status_code=404, detail="Resume not found")
    return resume


@router.get("", response_model=list[ResumeSummary])
async def list_resumes(
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    resumes = resume_service.list_resumes(db, user_id)
    return [
        ResumeSummary(index=i, name=r.name, created_at=r.created_at)
        for i, r in enumerate(resumes)
    ]


@router.post("", response_model=ResumeResponse, status_code=201)
async def save_resume(
    req: ResumeCreate,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    if not req.content.strip():
        raise HTTPException(status_code=400, detail="There's no resume content to save.")
    check_text_length(req.content)
    resume = resume_service.save_resume(db, user_id, req.content, req.name)
    index = len(resume_service.list_resumes(db, user_id)) - 1
    return _resume_to_response(index, resume)


@router.get("/{index}", response_model=ResumeResponse)
async def load_resume(
    index: int,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    return _resume_to_response(index, _get_or_404(db, user_id, index))


@router.delete("/{index}")
async def delete_resume(
    index: int,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    name = resume_service.delete_resume(db, user_id, index)
    if name is None:
        raise HTTPException(status_code=404, detail="Resume not found")
    return {"message": f'Deleted resume "{name}".'}


def _saved_texts(resume: SavedResume, req: JobTextRequest) -> tuple[str, str]:
    check_text_length(req.job_text)
    resume_text = resume.content.strip()
    job_text = req.job_text.strip()
    if not resume_text or not job_text:
        raise HTTPException(status_code=400, detail=BOTH_REQUIRED)
    return resume_text, job_text


@router.post("/{index}/match", response_model=MatchResponse)
async def match_saved_resume(
    index: int,
    req: JobTextRequest,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    """Score a saved resume against a pasted job description."""
    resume = _get_or_404(db, user_id, index)
    return to_response(run_match(*_saved_texts(resume, req)))


@router.post("/{index}/match/report")
async def match_saved_resume_report(
    index: int,
    req: JobTextRequest,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    resume = _get_or_404(db, user_id, index)
    result = run_match(*_saved_texts(resume, req))
    return report_response(result, resume_name=resume.name)
