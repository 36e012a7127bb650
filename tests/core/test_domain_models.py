# tests/core/test_domain_models.py
import pytest
from pydantic import ValidationError

from genshin_gateway.core.domain.languages import Language
from genshin_gateway.core.domain.models import (
    ParsedRequest,
    RelayedDocument,
    UpstreamResponse,
    UpstreamShape,
)

class TestParsedRequest:

    def test_id_defaults_to_index(self):
        parsed = ParsedRequest(language=Language.ENGLISH, category="weapons", branch="v4")
        assert parsed.id == "index"
        assert parsed.branch == "v4"
        assert parsed.shape is UpstreamShape.INDEX

    def test_branch_is_required(self):
        # The default branch comes from settings, via the resolver
        with pytest.raises(ValidationError):
            ParsedRequest(language=Language.ENGLISH, category="weapons")

    @pytest.mark.parametrize("record_id,shape", [
        ("all", UpstreamShape.BULK),
        ("index", UpstreamShape.INDEX),
        ("adventurer", UpstreamShape.RECORD),
        ("All", UpstreamShape.RECORD),
    ])
    def test_shape_is_derived_from_id(self, record_id, shape):
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", id=record_id, branch="main")
        assert parsed.shape is shape

    def test_is_immutable(self):
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", branch="main")
        with pytest.raises(ValidationError):
            parsed.category = "weapons"

    def test_rejects_non_directory_language(self):
        with pytest.raises(ValidationError):
            ParsedRequest(language="klingon", category="artifacts", branch="main")


class TestUpstreamResponse:

    @pytest.mark.parametrize("status_code,ok", [(200, True), (204, True), (301, False), (404, False), (500, False)])
    def test_ok(self, status_code, ok):
        assert UpstreamResponse(status_code=status_code).ok is ok

    def test_json(self):
        response = UpstreamResponse(status_code=200, content=b'{"name": "Amber"}')
        assert response.json() == {"name": "Amber"}


def test_relayed_document_defaults_to_json():
    assert RelayedDocument(content=b"[]").media_type == "application/json"
