# genshin_gateway/core/domain/models.py
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from genshin_gateway.core.domain.languages import Language

# --- Reserved record tokens ---

INDEX_ID = "index"
BULK_ID = "all"

# --- Enums ---

class UpstreamShape(str, Enum):
    """Which of the three upstream files a request maps to."""
    INDEX = "index"     # src/data/index/<Display>/<category>.json
    BULK = "bulk"       # data/gzips/<language>-<category>.min.json.gzip
    RECORD = "record"   # src/data/<Display>/<category>/<id>.json

# --- Entities ---

class ParsedRequest(BaseModel):
    """
    The resolved intent of one inbound request.
    Built by the resolver and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    language: Language = Field(..., description="Canonical language key")
    category: Optional[str] = Field(None, description="Data folder, e.g. 'artifacts'")
    id: str = Field(INDEX_ID, description="'index', 'all' or a record identifier")
    branch: str = Field(..., description="Upstream branch or tag")

    @property
    def shape(self) -> UpstreamShape:
        if self.id == BULK_ID:
            return UpstreamShape.BULK
        if self.id == INDEX_ID:
            return UpstreamShape.INDEX
        return UpstreamShape.RECORD


class RelayedDocument(BaseModel):
    """
    A successful outbound body, ready to be written to the client.
    """
    model_config = ConfigDict(frozen=True)

    content: bytes
    media_type: str = "application/json"


class HelpCatalog(BaseModel):
    """
    Static help attached to error responses and served at the root path.
    Built once per process.
    """
    model_config = ConfigDict(frozen=True)

    languages: List[str]
    locales: Dict[str, str]
    folders: List[str]
    examples: List[str]


@dataclass(frozen=True)
class UpstreamResponse:
    """What the upstream client port hands back for a single GET."""
    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.content)
