from typing import List, Optional, Tuple
from pydantic import BaseModel, Field

from services.client_metrics import AbilityScores, AttachmentScores, RadarPoint


class AxesPayload(BaseModel):
    introversion_extraversion: Optional[float] = Field(default=None, ge=0, le=100)
    sensing_intuition: Optional[float] = Field(default=None, ge=0, le=100)
    thinking_feeling: Optional[float] = Field(default=None, ge=0, le=100)
    judging_perceiving: Optional[float] = Field(default=None, ge=0, le=100)


class CodeResponse(BaseModel):
    code: str


class TypedCodeRequest(BaseModel):
    raw: str = ""
    axes: AxesPayload = Field(default_factory=AxesPayload)


class TypedCodeResponse(BaseModel):
    code: str
    axes: AxesPayload


class ClientMetricsRequest(BaseModel):
    axes: AxesPayload = Field(default_factory=AxesPayload)
    attachment: AttachmentScores = Field(default_factory=AttachmentScores)
    abilities: Optional[AbilityScores] = None


class ClientMetricsResponse(BaseModel):
    personality_code: str
    attachment_position: Tuple[float, float]
    attachment_quadrant: str
    ability_radar: List[RadarPoint]
