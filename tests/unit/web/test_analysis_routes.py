#!/usr/bin/env python3
"""
API tests for matching and interview question routes.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from core.analysis import AnalysisProvider, AnalysisProviderError
from storage import InsertResume
from web.backend.app import create_app


class TestAnalyze:

    def test_analyze_creates_new_result(self, client):
        response = client.post("/api/analyze/1/1")

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 2
        assert data["resumeId"] == 1
        assert data["jobDescriptionId"] == 1
        assert data["matchPercentage"] == 67
        assert data["missingSkills"] == ["React"]
        assert {s["skill"] for s in data["matchedSkills"]} == {"JavaScript", "TypeScript"}

    def test_get_analysis_returns_latest(self, client):
        client.post("/api/analyze/1/1")

        response = client.get("/api/analyze/1/1")

        assert response.status_code == 200
        data = response.json()
        assert data["resume"]["id"] == 1
        assert data["analysis"]["id"] == 2
        assert data["questions"] is None

    def test_get_analysis_seeded(self, client):
        data = client.get("/api/analyze/1/1").json()

        assert data["analysis"]["matchPercentage"] == 80

    def test_get_analysis_without_match_has_null_analysis(self, client):
        response = client.get("/api/analyze/1/999")

        assert response.status_code == 200
        assert response.json()["analysis"] is None

    def test_get_analysis_missing_resume_is_404(self, client):
        assert client.get("/api/analyze/999/1").status_code == 404

    def test_analyze_missing_job_description_is_404(self, client):
        response = client.post("/api/analyze/1/999")

        assert response.status_code == 404
        assert response.json()["type"] == "JobDescriptionNotFoundException"

    def test_analyze_bad_ids_are_400(self, client):
        assert client.post("/api/analyze/x/1").status_code == 400
        assert client.post("/api/analyze/1/0").status_code == 400

    def test_unanalysed_resume_is_analysed_first(self, seeded_storage, provider):
        resume = seeded_storage.create_resume(InsertResume(
            filename="raw.txt",
            file_size=20,
            file_type="text/plain",
            content="React and TypeScript",
        ))
        client = TestClient(create_app(storage=seeded_storage, provider=provider))

        response = client.post(f"/api/analyze/{resume.id}/1")

        assert response.status_code == 201
        assert response.json()["matchPercentage"] == 67
        assert seeded_storage.get_resume(resume.id).analyzed_data["skills"] == ["TypeScript", "React"]

    def test_provider_failure_is_502(self, seeded_storage):
        provider = MagicMock(spec=AnalysisProvider)
        provider.compute_match.side_effect = AnalysisProviderError("timeout")
        client = TestClient(create_app(storage=seeded_storage, provider=provider), raise_server_exceptions=False)

        response = client.post("/api/analyze/1/1")

        assert response.status_code == 502
        assert len(seeded_storage.get_analysis_results_by_resume_id(1)) == 1

    def test_malformed_match_is_502(self, seeded_storage):
        provider = MagicMock(spec=AnalysisProvider)
        provider.compute_match.return_value = {"matchPercentage": "lots"}
        client = TestClient(create_app(storage=seeded_storage, provider=provider), raise_server_exceptions=False)

        assert client.post("/api/analyze/1/1").status_code == 502


class TestInterviewQuestions:

    def test_get_before_generation_is_404(self, client):
        assert client.get("/api/interview-questions/1/1").status_code == 404

    def test_generate_and_fetch(self, client):
        created = client.post("/api/interview-questions/1/1")

        assert created.status_code == 201
        data = created.json()
        assert data["resumeId"] == 1
        assert any("JavaScript" in q for q in data["technicalQuestions"])
        assert data["skillGapQuestions"] == ["This role uses React. How would you get up to speed with it?"]

        fetched = client.get("/api/interview-questions/1/1")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == data["id"]

        composite = client.get("/api/analyze/1/1").json()
        assert composite["questions"]["id"] == data["id"]

    def test_generation_computes_missing_match(self, seeded_storage, provider):
        from storage import InsertJobDescription
        job = seeded_storage.create_job_description(InsertJobDescription(
            title="Frontend", description="React developer"
        ))
        client = TestClient(create_app(storage=seeded_storage, provider=provider))

        response = client.post(f"/api/interview-questions/1/{job.id}")

        assert response.status_code == 201
        assert seeded_storage.get_analysis_result_by_resume_and_job(1, job.id) is not None

    def test_generate_for_missing_resume_is_404(self, client):
        assert client.post("/api/interview-questions/5/1").status_code == 404
