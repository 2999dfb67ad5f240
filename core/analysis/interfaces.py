"""
Analysis Provider Interface - Abstract base for resume / job description analysis.

The storage and API layers only depend on the payload shapes defined here:

- resume analysis:          {skills, experience, education}
- job description analysis: {skills, biasAnalysis}
- match:                    {matchPercentage, matchedSkills, missingSkills,
                             candidateStrengths, candidateWeaknesses}
- interview questions:      {technicalQuestions, experienceQuestions,
                             skillGapQuestions, inclusionQuestions}
"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class AnalysisProviderError(Exception):
    """Raised when an analysis provider cannot produce a result."""
    pass


class AnalysisProvider(ABC):
    """
    Abstract Interface for analysis providers (keyword heuristics, OpenAI, etc.).
    """

    @abstractmethod
    def analyze_resume(self, content: str) -> Dict[str, Any]:
        """
        Extract skills, experience and education from resume text.

        Returns a dictionary with keys:
        - skills: list of skill names
        - experience: list of {title, company, duration}
        - education: list of {degree, institution}
        """
        pass

    @abstractmethod
    def analyze_job_description(self, title: str, description: str) -> Dict[str, Any]:
        """
        Extract required skills and detect biased wording.

        Returns a dictionary with keys:
        - skills: list of skill names
        - biasAnalysis: {hasBias, biasTypes, explanation, suggestedImprovements}
        """
        pass

    @abstractmethod
    def compute_match(self, resume_data: Dict[str, Any], job_data: Dict[str, Any]) -> Dict[str, Any]:
        """Compare analysed resume data against analysed job description data."""
        pass

    @abstractmethod
    def generate_interview_questions(
        self,
        resume_data: Dict[str, Any],
        job_data: Dict[str, Any],
        match: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Generate interview questions for a candidate / role pair."""
        pass
