#!/usr/bin/env python3
"""
Storage contract tests, run against every Storage backend.

Covers id assignment, copy semantics, session filtering, analysis updates,
reference checks, "latest" resolution and the composite lookup.
"""

from datetime import datetime, timezone

import pytest

from storage import (
    InsertUser,
    InsertResume,
    InsertJobDescription,
    InsertAnalysisResult,
    InsertInterviewQuestions,
    MatchedSkill,
    ReferenceNotFoundError,
    DuplicateUsernameError,
)
from storage.entities import latest


def make_resume(n: int = 1, session_id=None) -> InsertResume:
    return InsertResume(
        filename=f"resume-{n}.pdf",
        file_size=100 + n,
        file_type="application/pdf",
        content=f"Resume {n} content",
        session_id=session_id,
    )


def make_job(n: int = 1) -> InsertJobDescription:
    return InsertJobDescription(title=f"Job {n}", description=f"Description {n}")


def make_analysis(resume_id: int, job_id: int, pct: float = 50) -> InsertAnalysisResult:
    return InsertAnalysisResult(
        resume_id=resume_id,
        job_description_id=job_id,
        match_percentage=pct,
        matched_skills=[MatchedSkill(skill="Python", match_percentage=100)],
        missing_skills=["Rust"],
        candidate_strengths=["Python"],
        candidate_weaknesses=["No Rust"],
    )


def make_questions(resume_id: int, job_id: int, marker: str = "q") -> InsertInterviewQuestions:
    return InsertInterviewQuestions(
        resume_id=resume_id,
        job_description_id=job_id,
        technical_questions=[f"{marker}-technical"],
        experience_questions=[f"{marker}-experience"],
        skill_gap_questions=[],
        inclusion_questions=[f"{marker}-inclusion"],
    )


class TestIdentity:
    """Ids are store-assigned, strictly increasing and stable."""

    def test_resume_ids_strictly_increase(self, storage):
        created = [storage.create_resume(make_resume(n)) for n in range(5)]
        ids = [r.id for r in created]

        assert len(set(ids)) == 5
        assert ids == sorted(ids)
        assert all(i > 0 for i in ids)

    def test_refetch_matches_created_record(self, storage):
        created = [storage.create_resume(make_resume(n, session_id="s")) for n in range(3)]

        for record in created:
            assert storage.get_resume(record.id) == record

    def test_created_timestamp_is_assigned(self, storage):
        before = datetime.now(timezone.utc)
        job = storage.create_job_description(make_job())

        assert job.created is not None
        assert job.created >= before.replace(microsecond=0)

    def test_caller_supplied_id_is_ignored(self, storage):
        payload = InsertJobDescription.model_validate(
            {"id": 999, "created": "2000-01-01T00:00:00Z", "title": "T", "description": "D"}
        )
        job = storage.create_job_description(payload)

        assert job.id == 1
        assert job.created.year != 2000

    def test_ids_are_independent_per_kind(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())

        assert resume.id == 1
        assert job.id == 1


class TestLookups:

    def test_missing_ids_return_none(self, storage):
        assert storage.get_resume(999) is None
        assert storage.get_job_description(999) is None
        assert storage.get_analysis_result(999) is None
        assert storage.get_interview_questions(999) is None
        assert storage.get_user(999) is None
        assert storage.get_user_by_username("nobody") is None

    def test_get_resumes_without_filter_returns_all_in_order(self, storage):
        created = [storage.create_resume(make_resume(n, session_id=f"s{n % 2}")) for n in range(4)]

        assert [r.id for r in storage.get_resumes()] == [r.id for r in created]

    def test_get_resumes_filters_by_exact_session(self, storage):
        a1 = storage.create_resume(make_resume(1, session_id="alpha"))
        storage.create_resume(make_resume(2, session_id="beta"))
        a2 = storage.create_resume(make_resume(3, session_id="alpha"))
        storage.create_resume(make_resume(4, session_id=None))
        storage.create_resume(make_resume(5, session_id="alpha-2"))

        result = storage.get_resumes("alpha")

        assert [r.id for r in result] == [a1.id, a2.id]
        assert all(r.session_id == "alpha" for r in result)

    def test_get_resumes_unknown_session_is_empty(self, storage):
        storage.create_resume(make_resume(1, session_id="alpha"))

        assert storage.get_resumes("missing") == []

    def test_get_job_descriptions_returns_all(self, storage):
        jobs = [storage.create_job_description(make_job(n)) for n in range(3)]

        assert [j.id for j in storage.get_job_descriptions()] == [j.id for j in jobs]


class TestAnalysisUpdates:

    def test_update_job_description_analysis(self, storage):
        job = storage.create_job_description(make_job())
        analysis = {"skills": ["Python"], "biasAnalysis": {"hasBias": False, "biasTypes": [],
                                                            "explanation": "", "suggestedImprovements": []}}

        updated = storage.update_job_description_analysis(job.id, analysis)

        assert updated.analyzed_data == analysis
        assert storage.get_job_description(job.id).analyzed_data == analysis
        assert updated.title == job.title
        assert updated.created == job.created

    def test_update_missing_job_description_has_no_effect(self, storage):
        job = storage.create_job_description(make_job())

        assert storage.update_job_description_analysis(999, {"skills": []}) is None
        assert storage.get_job_description(job.id) == job
        assert len(storage.get_job_descriptions()) == 1

    def test_update_resume_analysis(self, storage):
        resume = storage.create_resume(make_resume())
        analysis = {"skills": ["Go"], "experience": [], "education": []}

        updated = storage.update_resume_analysis(resume.id, analysis)

        assert updated.analyzed_data == analysis
        assert storage.get_resume(resume.id).analyzed_data == analysis

    def test_update_missing_resume_returns_none(self, storage):
        resume = storage.create_resume(make_resume())

        assert storage.update_resume_analysis(42, {"skills": []}) is None
        assert storage.get_resume(resume.id).analyzed_data is None

    def test_caller_mutation_does_not_leak_into_store(self, storage):
        job = storage.create_job_description(make_job())
        analysis = {"skills": ["Python"]}
        storage.update_job_description_analysis(job.id, analysis)

        analysis["skills"].append("Injected")
        fetched = storage.get_job_description(job.id)
        fetched.analyzed_data["skills"].append("AlsoInjected")

        assert storage.get_job_description(job.id).analyzed_data == {"skills": ["Python"]}


class TestAnalysisResults:

    def test_create_requires_existing_references(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())

        with pytest.raises(ReferenceNotFoundError):
            storage.create_analysis_result(make_analysis(resume.id, 999))
        with pytest.raises(ReferenceNotFoundError):
            storage.create_analysis_result(make_analysis(999, job.id))

        assert storage.get_analysis_results_by_resume_id(resume.id) == []

    def test_lookup_by_resume_and_job(self, storage):
        r1 = storage.create_resume(make_resume(1))
        r2 = storage.create_resume(make_resume(2))
        j1 = storage.create_job_description(make_job(1))
        j2 = storage.create_job_description(make_job(2))

        a = storage.create_analysis_result(make_analysis(r1.id, j1.id))
        b = storage.create_analysis_result(make_analysis(r1.id, j2.id))
        c = storage.create_analysis_result(make_analysis(r2.id, j1.id))

        assert [x.id for x in storage.get_analysis_results_by_resume_id(r1.id)] == [a.id, b.id]
        assert [x.id for x in storage.get_analysis_results_by_job_description_id(j1.id)] == [a.id, c.id]
        assert storage.get_analysis_result(b.id) == b

    def test_round_trip_preserves_nested_fields(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())
        created = storage.create_analysis_result(make_analysis(resume.id, job.id, pct=72.5))

        fetched = storage.get_analysis_result(created.id)

        assert fetched.match_percentage == 72.5
        assert fetched.matched_skills == [MatchedSkill(skill="Python", match_percentage=100)]
        assert fetched.missing_skills == ["Rust"]

    def test_pair_lookup_returns_latest(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())
        storage.create_analysis_result(make_analysis(resume.id, job.id, pct=10))
        newest = storage.create_analysis_result(make_analysis(resume.id, job.id, pct=90))

        assert storage.get_analysis_result_by_resume_and_job(resume.id, job.id).id == newest.id

    def test_pair_lookup_missing_returns_none(self, storage):
        resume = storage.create_resume(make_resume())

        assert storage.get_analysis_result_by_resume_and_job(resume.id, 1) is None


class TestInterviewQuestions:

    def test_create_and_lookup(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())

        first = storage.create_interview_questions(make_questions(resume.id, job.id, "first"))
        second = storage.create_interview_questions(make_questions(resume.id, job.id, "second"))

        assert storage.get_interview_questions(first.id) == first
        assert [q.id for q in storage.get_interview_questions_by_resume_id(resume.id)] == [first.id, second.id]
        assert [q.id for q in storage.get_interview_questions_by_job_description_id(job.id)] == [first.id, second.id]
        latest_questions = storage.get_interview_question_by_resume_and_job(resume.id, job.id)
        assert latest_questions.technical_questions == ["second-technical"]

    def test_create_requires_existing_references(self, storage):
        with pytest.raises(ReferenceNotFoundError):
            storage.create_interview_questions(make_questions(1, 1))


class TestComposite:

    def test_resume_without_analysis_is_valid(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())

        result = storage.get_resume_with_latest_analysis_and_questions(resume.id, job.id)

        assert result.resume == resume
        assert result.analysis is None
        assert result.questions is None

    def test_all_parts_resolved(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())
        storage.create_analysis_result(make_analysis(resume.id, job.id, pct=20))
        latest_analysis = storage.create_analysis_result(make_analysis(resume.id, job.id, pct=60))
        questions = storage.create_interview_questions(make_questions(resume.id, job.id))

        result = storage.get_resume_with_latest_analysis_and_questions(resume.id, job.id)

        assert result.resume.id == resume.id
        assert result.analysis.id == latest_analysis.id
        assert result.questions.id == questions.id

    def test_missing_resume_yields_empty_composite(self, storage):
        result = storage.get_resume_with_latest_analysis_and_questions(5, 5)

        assert result.resume is None
        assert result.analysis is None
        assert result.questions is None

    def test_analysis_for_other_job_is_not_returned(self, storage):
        resume = storage.create_resume(make_resume())
        j1 = storage.create_job_description(make_job(1))
        j2 = storage.create_job_description(make_job(2))
        storage.create_analysis_result(make_analysis(resume.id, j1.id))

        assert storage.get_resume_with_latest_analysis_and_questions(resume.id, j2.id).analysis is None


class TestUsers:

    def test_create_and_lookup_user(self, storage):
        user = storage.create_user(InsertUser(username="alice", password="hash"))

        assert user.id == 1
        assert storage.get_user(user.id) == user
        assert storage.get_user_by_username("alice") == user

    def test_duplicate_username_rejected(self, storage):
        storage.create_user(InsertUser(username="alice", password="hash"))

        with pytest.raises(DuplicateUsernameError):
            storage.create_user(InsertUser(username="alice", password="other"))

        assert storage.get_user(2) is None


class TestLatestHelper:
    """latest() breaks created-timestamp ties by highest id."""

    def test_tie_breaks_by_id(self):
        ts = datetime(2026, 1, 1, tzinfo=timezone.utc)

        class Record:
            def __init__(self, id, created):
                self.id = id
                self.created = created

        records = [Record(1, ts), Record(3, ts), Record(2, ts)]

        assert latest(records).id == 3

    def test_empty(self):
        assert latest([]) is None


class TestOversizedIds:
    """Ids beyond any stored key behave like any other unknown id."""

    HUGE = 2**70

    def test_point_lookups_return_none(self, storage):
        storage.create_resume(make_resume())
        storage.create_job_description(make_job())

        assert storage.get_resume(self.HUGE) is None
        assert storage.get_job_description(self.HUGE) is None
        assert storage.get_analysis_result(self.HUGE) is None
        assert storage.get_interview_questions(self.HUGE) is None
        assert storage.get_user(self.HUGE) is None
        assert storage.get_analysis_result_by_resume_and_job(1, self.HUGE) is None
        assert storage.get_interview_question_by_resume_and_job(self.HUGE, 1) is None

    def test_sequence_lookups_return_empty(self, storage):
        assert storage.get_analysis_results_by_resume_id(self.HUGE) == []
        assert storage.get_analysis_results_by_job_description_id(self.HUGE) == []
        assert storage.get_interview_questions_by_resume_id(self.HUGE) == []
        assert storage.get_interview_questions_by_job_description_id(self.HUGE) == []

    def test_updates_return_none(self, storage):
        assert storage.update_resume_analysis(self.HUGE, {"skills": []}) is None
        assert storage.update_job_description_analysis(self.HUGE, {"skills": []}) is None

    def test_composite_is_empty(self, storage):
        result = storage.get_resume_with_latest_analysis_and_questions(self.HUGE, self.HUGE)

        assert result.resume is None
        assert result.analysis is None

    def test_create_with_oversized_reference_is_rejected(self, storage):
        resume = storage.create_resume(make_resume())

        with pytest.raises(ReferenceNotFoundError):
            storage.create_analysis_result(make_analysis(resume.id, self.HUGE))
        with pytest.raises(ReferenceNotFoundError):
            storage.create_interview_questions(make_questions(self.HUGE, 1))


class TestMatchPercentagePrecision:

    def test_refetch_equals_created_for_long_fractions(self, storage):
        resume = storage.create_resume(make_resume())
        job = storage.create_job_description(make_job())

        created = storage.create_analysis_result(make_analysis(resume.id, job.id, pct=83.333))

        assert created.match_percentage == 83.33
        assert storage.get_analysis_result(created.id) == created
