"""Result models"""

from pydantic import BaseModel, ConfigDict, Field


class RankedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Original line content (newline excluded)")
    score: float = Field(..., gt=0.0, description="Sum of TF x IDF over matched query terms")
    line_index: int = Field(..., ge=0, description="Position among non-empty lines")
    start: int = Field(..., ge=0, description="Offset of the line in the source text")
    end: int = Field(..., ge=0, description="Offset one past the last character of the line")
