"""Tests for the HTTP API."""

import pytest


@pytest.mark.asyncio
async def test_health_check(client):
    """Test that health endpoint returns healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_root(client):
    """Test that root endpoint returns API info."""
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "docviews API"
    assert "version" in data


class TestListViews:
    """Tests for GET /api/views."""

    @pytest.mark.asyncio
    async def test_lists_registered_views(self, client):
        """Test every built-in view is listed."""
        response = await client.get("/api/views")

        assert response.status_code == 200
        names = [v["name"] for v in response.json()["views"]]
        assert "documents" in names
        assert "language_proficiencies" in names
        assert "by_path_docs_level1_level2" in names


class TestProjectDocument:
    """Tests for POST /api/views/{name}/project."""

    @pytest.mark.asyncio
    async def test_projects_documents_view(self, client, sample_document):
        """Test rows come back as JSON arrays in emission order."""
        response = await client.post("/api/views/documents/project", json=sample_document)

        assert response.status_code == 200
        data = response.json()
        assert data["view"] == "documents"
        assert data["total_rows"] == 4
        assert data["rows"] == [
            {"key": [1, 0], "value": "a"},
            {"key": [1, 1], "value": "b"},
            {"key": [1, "p1"], "value": {"providerId": "p1"}},
            {"key": [1, "L", "M"], "value": {"level2param": "M"}},
        ]

    @pytest.mark.asyncio
    async def test_projects_language_proficiencies(self, client):
        """Test the second entry point over HTTP."""
        response = await client.post(
            "/api/views/language_proficiencies/project",
            json={"id": 2, "languageproficiencies": [{"pos": 3}]},
        )

        assert response.status_code == 200
        assert response.json()["rows"] == [{"key": [2, 3], "value": {"pos": 3}}]

    @pytest.mark.asyncio
    async def test_unknown_view_returns_404(self, client, sample_document):
        """Test projecting with an unregistered view."""
        response = await client.post("/api/views/nope/project", json=sample_document)

        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_missing_field_returns_422(self, client, sample_document):
        """Test a document lacking a required field is rejected."""
        del sample_document["level1"]

        response = await client.post("/api/views/documents/project", json=sample_document)

        assert response.status_code == 422
        assert "level1" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_malformed_collection_returns_422(self, client, sample_document):
        """Test a collection that is not a list is rejected."""
        sample_document["names"] = {"first": "a"}

        response = await client.post("/api/views/documents/project", json=sample_document)

        assert response.status_code == 422
        assert "names" in response.json()["detail"]


class TestDesignDocument:
    """Tests for GET /api/views/design."""

    @pytest.mark.asyncio
    async def test_returns_design_document(self, client):
        """Test the design document uses CouchDB field names."""
        response = await client.get("/api/views/design")

        assert response.status_code == 200
        data = response.json()
        assert data["_id"] == "_design/core"
        assert data["language"] == "javascript"
        assert "map" in data["views"]["by_path_docs_names"]
        assert data["views"]["by_query_id"] == {"map": "function(doc){ emit(doc.id, doc); }"}
