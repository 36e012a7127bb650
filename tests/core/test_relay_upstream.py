# tests/core/test_relay_upstream.py
import json

import pytest

from genshin_gateway.core.domain.exceptions import UpstreamNotFoundError
from genshin_gateway.core.domain.languages import Language
from genshin_gateway.core.domain.models import ParsedRequest, UpstreamResponse

DATA = "https://raw.githubusercontent.com/theBowja/genshin-db/refs/heads"
DIST = "https://raw.githubusercontent.com/theBowja/genshin-db-dist/refs/heads"

@pytest.mark.asyncio
class TestRelayUpstream:

    async def test_record_is_reindented(self, container, mock_upstream_client, json_response, sample_artifact):
        """
        Scenario: A record exists upstream.
        Expected: The same document comes back, indented by two spaces.
        """
        # Arrange
        use_case = container.relay_use_case()
        mock_upstream_client.fetch.return_value = json_response(sample_artifact)
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", id="adventurer", branch="main")

        # Act
        result = await use_case.execute(parsed)

        # Assert
        mock_upstream_client.fetch.assert_called_once_with(
            f"{DATA}/main/src/data/English/artifacts/adventurer.json"
        )
        assert result.media_type == "application/json"
        assert json.loads(result.content) == sample_artifact
        assert result.content.decode("utf-8") == json.dumps(sample_artifact, indent=2)

    async def test_index_keeps_non_ascii_text(self, container, mock_upstream_client, json_response):
        use_case = container.relay_use_case()
        index = {"names": {"冒険家": "adventurer"}, "aliases": {}}
        mock_upstream_client.fetch.return_value = json_response(index)
        parsed = ParsedRequest(language=Language.JAPANESE, category="artifacts", branch="main")

        result = await use_case.execute(parsed)

        mock_upstream_client.fetch.assert_called_once_with(
            f"{DATA}/main/src/data/index/Japanese/artifacts.json"
        )
        assert "冒険家" in result.content.decode("utf-8")
        assert json.loads(result.content) == index

    async def test_bulk_archive_is_decompressed(self, container, mock_upstream_client, gzip_response):
        """
        Scenario: The whole category is requested.
        Expected: The gzip archive is fetched from the dist repository and
        the decompressed bytes are returned untouched.
        """
        use_case = container.relay_use_case()
        raw = b'{"adventurer":{"name":"Adventurer"},"berserker":{"name":"Berserker"}}'
        mock_upstream_client.fetch.return_value = gzip_response(raw)
        parsed = ParsedRequest(language=Language.GERMAN, category="artifacts", id="all", branch="v4")

        result = await use_case.execute(parsed)

        mock_upstream_client.fetch.assert_called_once_with(
            f"{DIST}/v4/data/gzips/german-artifacts.min.json.gzip"
        )
        assert result.content == raw
        assert result.media_type == "application/json"

    async def test_missing_bulk_archive(self, container, mock_upstream_client):
        use_case = container.relay_use_case()
        mock_upstream_client.fetch.return_value = UpstreamResponse(status_code=404, content=b"404: Not Found")
        parsed = ParsedRequest(language=Language.ENGLISH, category="nothing", id="all", branch="main")

        with pytest.raises(UpstreamNotFoundError) as excinfo:
            await use_case.execute(parsed)

        assert excinfo.value.message == "Category name not found"
        assert excinfo.value.status_code == 404

    @pytest.mark.parametrize("record_id", ["index", "adventurer"])
    async def test_missing_file(self, container, mock_upstream_client, record_id):
        use_case = container.relay_use_case()
        mock_upstream_client.fetch.return_value = UpstreamResponse(status_code=404)
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", id=record_id, branch="main")

        with pytest.raises(UpstreamNotFoundError) as excinfo:
            await use_case.execute(parsed)

        assert excinfo.value.message == "File not found"

    async def test_corrupt_archive_propagates(self, container, mock_upstream_client):
        use_case = container.relay_use_case()
        mock_upstream_client.fetch.return_value = UpstreamResponse(status_code=200, content=b"not gzip at all")
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", id="all", branch="main")

        with pytest.raises(OSError):
            await use_case.execute(parsed)

    async def test_invalid_json_propagates(self, container, mock_upstream_client):
        use_case = container.relay_use_case()
        mock_upstream_client.fetch.return_value = UpstreamResponse(status_code=200, content=b"<html>oops</html>")
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", id="adventurer", branch="main")

        with pytest.raises(json.JSONDecodeError):
            await use_case.execute(parsed)

    async def test_transport_errors_propagate(self, container, mock_upstream_client):
        use_case = container.relay_use_case()
        mock_upstream_client.fetch.side_effect = ConnectionError("upstream unreachable")
        parsed = ParsedRequest(language=Language.ENGLISH, category="artifacts", branch="main")

        with pytest.raises(ConnectionError):
            await use_case.execute(parsed)

        assert mock_upstream_client.fetch.call_count == 1
