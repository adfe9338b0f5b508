# server/schemas.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    """Body of POST /api/ats/analyze"""

    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(..., alias="resumeText")
    job_description: Optional[str] = Field(None, alias="jobDescription")
    target_role: Optional[str] = Field(None, alias="targetRole")
