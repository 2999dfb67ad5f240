"""
Keyword Analysis Provider - deterministic, offline analysis.

Skills are found by whole-word search against a fixed vocabulary, bias by a
list of coded terms. Used when no LLM is configured and in tests.
"""
import logging
import re
from typing import Dict, Any, List, Tuple

from core.analysis.interfaces import AnalysisProvider

logger = logging.getLogger(__name__)


SKILL_VOCABULARY: List[str] = [
    # Languages
    "Python", "Java", "JavaScript", "TypeScript", "C++", "C#", "Golang", "Rust",
    "Ruby", "PHP", "Kotlin", "Swift", "Scala", "SQL", "Bash",
    # Frontend
    "React", "Angular", "Vue", "Next.js", "HTML", "CSS", "Tailwind", "Redux",
    # Backend / frameworks
    "Node.js", "Express", "Django", "Flask", "FastAPI", "Spring", ".NET", "Rails", "GraphQL",
    # Data
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch", "Kafka", "Spark",
    "Pandas", "NumPy", "TensorFlow", "PyTorch", "Machine Learning", "Data Analysis",
    # Infrastructure
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Linux", "Git",
    "CI/CD", "Jenkins",
    # Practices
    "REST", "Microservices", "Agile", "Scrum", "TDD", "System Design",
    "Communication", "Leadership", "Project Management",
]

# category -> {coded term: neutral suggestion}
BIAS_TERMS: Dict[str, Dict[str, str]] = {
    "gender": {
        "rockstar": "skilled engineer",
        "ninja": "expert",
        "guru": "specialist",
        "manpower": "workforce",
        "salesman": "salesperson",
        "chairman": "chairperson",
        "aggressive": "proactive",
        "dominant": "leading",
        "he will": "they will",
        "his team": "their team",
    },
    "age": {
        "young": "motivated",
        "digital native": "comfortable with digital tools",
        "recent graduate": "early-career candidate",
        "energetic": "enthusiastic",
        "overqualified": "experienced",
    },
    "cultural": {
        "native english speaker": "fluent in English",
        "culture fit": "values alignment",
        "clean-shaven": "meets safety requirements",
    },
    "ability": {
        "able-bodied": "able to perform the essential functions of the role",
        "must be able to stand": "role involves standing; accommodations available",
    },
}

_EXPERIENCE_LINE = re.compile(
    r"^\s*(?:[-*•]\s*)?(?P<title>[A-Z][^,@()\n]*?)\s+(?:at|@)\s+(?P<company>[^,()|\n]+?)"
    r"\s*(?:[(,|–]\s*(?P<duration>[^)\n]+?)\s*\)?)?\s*$"
)
_DEGREE = re.compile(
    r"\b(?:B\.?S\.?c?|B\.?A\.?|M\.?S\.?c?|M\.?B\.?A\.?|Ph\.?D\.?|Bachelor|Master|Doctor|Associate)(?![A-Za-z])"
)
_INSTITUTION = re.compile(r"University|College|Institute|School|Academy|Polytechnic", re.IGNORECASE)
_EDUCATION_SPLIT = re.compile(r",|;|\s+-\s+|\s+at\s+|\s+from\s+")

MAX_LISTED = 5


def _skill_pattern(skill: str) -> re.Pattern:
    return re.compile(
        r"(?<![A-Za-z0-9+#.])" + re.escape(skill) + r"(?![A-Za-z0-9+#])",
        re.IGNORECASE
    )


_SKILL_PATTERNS: List[Tuple[str, re.Pattern]] = [(s, _skill_pattern(s)) for s in SKILL_VOCABULARY]


def extract_skills(text: str) -> List[str]:
    """Vocabulary skills mentioned in text, in vocabulary order."""
    if not text:
        return []
    return [skill for skill, pattern in _SKILL_PATTERNS if pattern.search(text)]


def extract_experience(text: str) -> List[Dict[str, str]]:
    entries = []
    for line in text.splitlines():
        if len(line) > 120:
            continue
        match = _EXPERIENCE_LINE.match(line)
        if not match:
            continue
        entries.append({
            "title": match.group("title").strip(),
            "company": match.group("company").strip(),
            "duration": (match.group("duration") or "").strip(),
        })
    return entries


def extract_education(text: str) -> List[Dict[str, str]]:
    entries = []
    for line in text.splitlines():
        if not _DEGREE.search(line):
            continue
        parts = [p.strip(" -*•\t") for p in _EDUCATION_SPLIT.split(line) if p.strip(" -*•\t")]
        if not parts:
            continue
        degree = parts[0]
        institution = next((p for p in parts[1:] if _INSTITUTION.search(p)), parts[1] if len(parts) > 1 else "")
        entries.append({"degree": degree, "institution": institution})
    return entries


def detect_bias(text: str) -> Dict[str, Any]:
    lowered = (text or "").lower()
    bias_types = []
    found: List[Tuple[str, str]] = []

    for category, terms in BIAS_TERMS.items():
        hits = [(term, suggestion) for term, suggestion in terms.items()
                if re.search(r"\b" + re.escape(term) + r"\b", lowered)]
        if hits:
            bias_types.append(category)
            found.extend(hits)

    if not found:
        return {
            "hasBias": False,
            "biasTypes": [],
            "explanation": "No bias detected",
            "suggestedImprovements": [],
        }

    terms_text = ", ".join(f"'{term}'" for term, _ in found)
    return {
        "hasBias": True,
        "biasTypes": bias_types,
        "explanation": f"Potentially exclusionary wording found: {terms_text}",
        "suggestedImprovements": [f"Replace '{term}' with '{suggestion}'" for term, suggestion in found],
    }


class KeywordAnalysisProvider(AnalysisProvider):
    """Vocabulary and pattern based analysis with no external calls."""

    def analyze_resume(self, content: str) -> Dict[str, Any]:
        data = {
            "skills": extract_skills(content),
            "experience": extract_experience(content or ""),
            "education": extract_education(content or ""),
        }
        logger.debug(f"Resume analysis found {len(data['skills'])} skills")
        return data

    def analyze_job_description(self, title: str, description: str) -> Dict[str, Any]:
        text = f"{title}\n{description}"
        return {
            "skills": extract_skills(text),
            "biasAnalysis": detect_bias(text),
        }

    def compute_match(self, resume_data: Dict[str, Any], job_data: Dict[str, Any]) -> Dict[str, Any]:
        resume_skills = {s.lower() for s in (resume_data or {}).get("skills", [])}
        required = list((job_data or {}).get("skills", []))

        matched = [s for s in required if s.lower() in resume_skills]
        missing = [s for s in required if s.lower() not in resume_skills]
        percentage = round(len(matched) / len(required) * 100) if required else 0

        strengths = [f"Demonstrated {skill} experience" for skill in matched[:MAX_LISTED]]
        experience = (resume_data or {}).get("experience", [])
        if experience:
            first = experience[0]
            strengths.append(f"Relevant experience as {first.get('title')} at {first.get('company')}")

        weaknesses = [f"No demonstrated {skill} experience" for skill in missing[:MAX_LISTED]]
        if not required:
            weaknesses.append("No skills could be identified in the job description")

        return {
            "matchPercentage": percentage,
            "matchedSkills": [{"skill": s, "matchPercentage": 100} for s in matched],
            "missingSkills": missing,
            "candidateStrengths": strengths,
            "candidateWeaknesses": weaknesses,
        }

    def generate_interview_questions(
        self,
        resume_data: Dict[str, Any],
        job_data: Dict[str, Any],
        match: Dict[str, Any]
    ) -> Dict[str, Any]:
        matched = [m["skill"] for m in (match or {}).get("matchedSkills", [])]
        missing = list((match or {}).get("missingSkills", []))
        experience = (resume_data or {}).get("experience", [])

        technical = [
            f"Describe a project where you used {skill}. What trade-offs did you make?"
            for skill in matched[:MAX_LISTED]
        ]
        if not technical:
            technical = ["Walk us through the most technically challenging problem you have solved."]

        experience_questions = [
            f"What were your main responsibilities as {entry.get('title')} at {entry.get('company')}?"
            for entry in experience[:3]
        ]
        if not experience_questions:
            experience_questions = ["Tell us about a recent role and the impact you had there."]

        skill_gap = [
            f"This role uses {skill}. How would you get up to speed with it?"
            for skill in missing[:MAX_LISTED]
        ]

        inclusion = [
            "How do you make sure every voice is heard when your team makes decisions?",
            "Describe a time you adapted your communication for a colleague with a different background.",
        ]

        return {
            "technicalQuestions": technical,
            "experienceQuestions": experience_questions,
            "skillGapQuestions": skill_gap,
            "inclusionQuestions": inclusion,
        }
