from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import List, Optional

class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

class OgInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    og_image: str = Field(default="", description="og:image value found in the page")
    og_url: str = Field(default="", description="og:url value found in the page")
    url_match: bool = Field(description="Whether the og:url domain matches the requested URL's domain")

class Attempt(BaseModel):
    """One fetch performed by the scrape backend while following the chain.

    Field names on the wire are the backend's snake_case keys
    (``h_location``, ``html``); the attributes use descriptive names.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    response_status: StrictInt
    redirect_location: str = Field(default="", alias="h_location", description="Location header, if any")
    raw_html: str = Field(default="", alias="html", description="Full response body")
    og_info: Optional[OgInfo] = None

class InspectRequest(BaseModel):
    url: str

class AttemptReport(BaseModel):
    index: int
    url: str
    response_status: int
    h_location: str
    html_length: int
    og_info: Optional[OgInfo] = None
    is_last: bool
    severity: Severity
    hint: str
    chip: str = Field(description="Presentational status: ok, attention or failed")
    status_severity: Severity = Field(description="Colour of the HTTP status chip")

class InspectResponse(BaseModel):
    generation: int
    url: str
    superseded: bool = Field(default=False, description="A newer submission started while this one was in flight")
    preview_image: Optional[str] = Field(None, description="og:image of the last attempt")
    attempts: List[AttemptReport]
