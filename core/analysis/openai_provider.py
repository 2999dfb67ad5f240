"""
OpenAI Analysis Provider - analysis through the OpenAI chat completions API.

Every call uses JSON Schema response format; transient API errors are
retried with exponential backoff.
"""
from typing import Dict, Any, Optional
import json
import logging

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    RetryCallState,
)

from core.analysis.interfaces import AnalysisProvider, AnalysisProviderError
from core.analysis.system_prompts import (
    RESUME_ANALYSIS_SYSTEM_PROMPT,
    JOB_DESCRIPTION_ANALYSIS_SYSTEM_PROMPT,
    MATCH_SYSTEM_PROMPT,
    INTERVIEW_QUESTIONS_SYSTEM_PROMPT,
    RESUME_ANALYSIS_SCHEMA,
    JOB_DESCRIPTION_ANALYSIS_SCHEMA,
    MATCH_SCHEMA,
    INTERVIEW_QUESTIONS_SCHEMA,
)

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        "Transient API error (attempt %s). Waiting %.1fs before retry. Details: %s",
        retry_state.attempt_number, wait, exc,
    )


def _clamp_percentage(value: Any) -> float:
    try:
        return min(max(float(value), 0.0), 100.0)
    except (TypeError, ValueError):
        return 0.0


def _llm_retry(max_attempts: int = 4):
    """Return a tenacity @retry decorator for LLM API calls."""
    return retry(
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        wait=wait_exponential(multiplier=1, min=2, max=30),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


class OpenAIAnalysisProvider(AnalysisProvider):
    """Analysis provider backed by an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        client: Optional[OpenAI] = None
    ):
        if client is None:
            client_kwargs = {}
            if api_key:
                client_kwargs['api_key'] = api_key
            if base_url:
                client_kwargs['base_url'] = base_url
            client = OpenAI(**client_kwargs)

        self.client = client
        self.model = model
        self.temperature = temperature

    @_llm_retry()
    def _create_completion(self, system_prompt: str, user_message: str, schema_spec: Dict[str, Any]):
        return self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            temperature=self.temperature,
            response_format={
                "type": "json_schema",
                "json_schema": schema_spec,
            },
        )

    def _complete_json(self, system_prompt: str, user_message: str, schema_spec: Dict[str, Any]) -> Dict[str, Any]:
        """Run one structured completion and parse its JSON body."""
        try:
            response = self._create_completion(system_prompt, user_message, schema_spec)
        except openai.OpenAIError as e:
            logger.error(f"{schema_spec['name']} request failed: {e}")
            raise AnalysisProviderError(f"Analysis request failed: {e.__class__.__name__}") from e

        try:
            content = response.choices[0].message.content
            data = json.loads(content)
        except (json.JSONDecodeError, IndexError, AttributeError, TypeError) as e:
            logger.error(f"Failed to parse {schema_spec['name']} response: {e}")
            raise AnalysisProviderError("Analysis response was not valid JSON") from e

        if not isinstance(data, dict):
            raise AnalysisProviderError("Analysis response was not a JSON object")

        logger.info(f"{schema_spec['name']} completed with {self.model}")
        return data

    def analyze_resume(self, content: str) -> Dict[str, Any]:
        return self._complete_json(
            RESUME_ANALYSIS_SYSTEM_PROMPT,
            f"<RESUME>\n{content}\n</RESUME>\n\nExtract the resume data.",
            RESUME_ANALYSIS_SCHEMA,
        )

    def analyze_job_description(self, title: str, description: str) -> Dict[str, Any]:
        return self._complete_json(
            JOB_DESCRIPTION_ANALYSIS_SYSTEM_PROMPT,
            f"<JOB_TITLE>{title}</JOB_TITLE>\n<JOB_DESCRIPTION>\n{description}\n</JOB_DESCRIPTION>",
            JOB_DESCRIPTION_ANALYSIS_SCHEMA,
        )

    def compute_match(self, resume_data: Dict[str, Any], job_data: Dict[str, Any]) -> Dict[str, Any]:
        data = self._complete_json(
            MATCH_SYSTEM_PROMPT,
            f"<RESUME_ANALYSIS>\n{json.dumps(resume_data)}\n</RESUME_ANALYSIS>\n"
            f"<JOB_ANALYSIS>\n{json.dumps(job_data)}\n</JOB_ANALYSIS>",
            MATCH_SCHEMA,
        )
        data["matchPercentage"] = _clamp_percentage(data.get("matchPercentage"))
        for skill in data.get("matchedSkills", []):
            skill["matchPercentage"] = _clamp_percentage(skill.get("matchPercentage"))
        return data

    def generate_interview_questions(
        self,
        resume_data: Dict[str, Any],
        job_data: Dict[str, Any],
        match: Dict[str, Any]
    ) -> Dict[str, Any]:
        return self._complete_json(
            INTERVIEW_QUESTIONS_SYSTEM_PROMPT,
            f"<RESUME_ANALYSIS>\n{json.dumps(resume_data)}\n</RESUME_ANALYSIS>\n"
            f"<JOB_ANALYSIS>\n{json.dumps(job_data)}\n</JOB_ANALYSIS>\n"
            f"<MATCH>\n{json.dumps(match)}\n</MATCH>",
            INTERVIEW_QUESTIONS_SCHEMA,
        )
