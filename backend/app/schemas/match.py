from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MatchRequest(CamelModel):
    resume_text: str
    job_text: str


class JobTextRequest(CamelModel):
    job_text: str


class MatchResponse(CamelModel):
    match_score: int
    missing_keywords: list[str]
    matched_count: int
    target_count: int
