RESUME_ANALYSIS_SYSTEM_PROMPT = """
You are a resume analysis engine.

Task
- Extract the candidate's skills, work experience and education into the provided JSON Schema.

Hard rules
- Use only information explicitly present in the resume. No inference or guessing.
- skills: technologies, tools and professional skills, deduplicated, original casing.
- experience: one item per role with title, company and duration as stated ("" when missing).
- education: one item per entry with degree and institution as stated.
"""

JOB_DESCRIPTION_ANALYSIS_SYSTEM_PROMPT = """
You are a job description review engine.

Task
- List the skills the job description asks for.
- Review the wording for bias (gender-coded, age-related, cultural, ability-related language).

Rules
- skills: only skills explicitly requested, deduplicated, original casing.
- biasAnalysis.hasBias is true only when specific wording can be quoted.
- biasAnalysis.biasTypes uses short lowercase category names.
- biasAnalysis.suggestedImprovements gives one concrete rewrite per problem.
"""

MATCH_SYSTEM_PROMPT = """
You are a candidate-to-role matching engine.

Task
- Compare the analysed resume with the analysed job description.

Rules
- matchPercentage: 0-100 overall fit, based on the job's required skills.
- matchedSkills: each required skill the candidate has, with a 0-100 confidence.
- missingSkills: required skills with no evidence in the resume.
- candidateStrengths / candidateWeaknesses: short factual statements grounded in the resume.
"""

INTERVIEW_QUESTIONS_SYSTEM_PROMPT = """
You are an interview preparation assistant.

Task
- Write interview questions for this candidate and role.

Rules
- technicalQuestions: probe the matched skills in depth.
- experienceQuestions: refer to the candidate's stated roles.
- skillGapQuestions: explore the missing skills without penalising the candidate.
- inclusionQuestions: assess collaboration and inclusive behaviour.
- 3-5 questions per list, each a single sentence.
"""

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

RESUME_ANALYSIS_SCHEMA = {
    "name": "resume_analysis",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["skills", "experience", "education"],
        "properties": {
            "skills": _STRING_LIST,
            "experience": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["title", "company", "duration"],
                    "properties": {
                        "title": {"type": "string"},
                        "company": {"type": "string"},
                        "duration": {"type": "string"},
                    },
                },
            },
            "education": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["degree", "institution"],
                    "properties": {
                        "degree": {"type": "string"},
                        "institution": {"type": "string"},
                    },
                },
            },
        },
    },
}

JOB_DESCRIPTION_ANALYSIS_SCHEMA = {
    "name": "job_description_analysis",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["skills", "biasAnalysis"],
        "properties": {
            "skills": _STRING_LIST,
            "biasAnalysis": {
                "type": "object",
                "additionalProperties": False,
                "required": ["hasBias", "biasTypes", "explanation", "suggestedImprovements"],
                "properties": {
                    "hasBias": {"type": "boolean"},
                    "biasTypes": _STRING_LIST,
                    "explanation": {"type": "string"},
                    "suggestedImprovements": _STRING_LIST,
                },
            },
        },
    },
}

MATCH_SCHEMA = {
    "name": "match_result",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": [
            "matchPercentage", "matchedSkills", "missingSkills",
            "candidateStrengths", "candidateWeaknesses",
        ],
        "properties": {
            "matchPercentage": {"type": "number"},
            "matchedSkills": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["skill", "matchPercentage"],
                    "properties": {
                        "skill": {"type": "string"},
                        "matchPercentage": {"type": "number"},
                    },
                },
            },
            "missingSkills": _STRING_LIST,
            "candidateStrengths": _STRING_LIST,
            "candidateWeaknesses": _STRING_LIST,
        },
    },
}

INTERVIEW_QUESTIONS_SCHEMA = {
    "name": "interview_questions",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": [
            "technicalQuestions", "experienceQuestions",
            "skillGapQuestions", "inclusionQuestions",
        ],
        "properties": {
            "technicalQuestions": _STRING_LIST,
            "experienceQuestions": _STRING_LIST,
            "skillGapQuestions": _STRING_LIST,
            "inclusionQuestions": _STRING_LIST,
        },
    },
}
