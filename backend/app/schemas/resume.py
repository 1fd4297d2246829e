from app.schemas.match import CamelModel


class ResumeCreate(CamelModel):
    content: str
    name: str | None = None


class ResumeSummary(CamelModel):
    index: int
    name: str
    created_at: str


class ResumeResponse(CamelModel):
    index: int
    name: str
    content: str
    content_hash: str | None
    created_at: str
