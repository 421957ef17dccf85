"""API request and response models."""

from pydantic import BaseModel, Field
from typing import Optional, Any, List, Dict
from datetime import datetime


class EventRequest(BaseModel):
    """Body of a single-event render request."""

    payload: Any = Field(None, description="Primary payload: fragment, signals, selector, paths or script")
    options: Optional[Dict[str, Any]] = Field(None, description="Event options")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "payload": "<div id=\"greeting\">Hello</div>",
                "options": {"selector": "#greeting", "merge_mode": "outer"},
            }
        }


class StreamEventItem(EventRequest):
    """One entry of a batch stream request."""

    event: str = Field(..., description="Event name, e.g. datastar-merge-fragments")


class StreamRequest(BaseModel):
    """Body of a batch stream request."""

    events: List[StreamEventItem] = Field(..., description="Events in the order they are sent")


class HeaderPair(BaseModel):
    """One recommended response header."""

    name: str
    value: str


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = Field(False, description="是否成功")
    message: str = Field(..., description="錯誤訊息")
    error_code: Optional[str] = Field(None, description="錯誤代碼")
    timestamp: datetime = Field(default_factory=datetime.now, description="回應時間")

    def to_content(self) -> Dict[str, Any]:
        """JSON-ready body."""
        return self.model_dump(mode="json")
