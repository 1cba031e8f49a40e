"""LLM interaction for cmdsmith."""

import json
import logging

import litellm
from litellm import exceptions as llm_errors

from cmdsmith.errors import TransportError, UpstreamError
from cmdsmith.models import CmdsmithConfig, LLMMessage

log = logging.getLogger(__name__)

# Suppress litellm's noisy logging
litellm.suppress_debug_info = True

COMPLETION_PROVIDER = "openai"
COMPLETION_API_BASE = "https://api.openai.com/v1"
REQUEST_TIMEOUT_SECONDS = 30.0

# Timeout derives from openai.APITimeoutError, not litellm's APIConnectionError.
# Several status errors (BadGatewayError, InvalidRequestError) do not derive from
# litellm's APIError, so each one is listed.
TRANSPORT_ERRORS = (llm_errors.APIConnectionError, llm_errors.Timeout)
UPSTREAM_ERRORS = (
    llm_errors.AuthenticationError,
    llm_errors.PermissionDeniedError,
    llm_errors.RateLimitError,
    llm_errors.BadRequestError,
    llm_errors.InvalidRequestError,
    llm_errors.NotFoundError,
    llm_errors.UnprocessableEntityError,
    llm_errors.ServiceUnavailableError,
    llm_errors.InternalServerError,
    llm_errors.BadGatewayError,
    llm_errors.APIResponseValidationError,
    llm_errors.APIError,
)


def extract_content(response) -> str:
    """Return the first choice's message text from a completion response."""
    choices = getattr(response, "choices", None)
    if not choices:
        raise UpstreamError("completion response contained no choices")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        raise UpstreamError("completion response has no message content")
    return content


def query_llm(messages: list[LLMMessage], config: CmdsmithConfig) -> str:
    """Send messages to the completion endpoint and return the raw reply text."""
    log.debug("model=%s", config.model)
    log.debug("messages=%s", json.dumps(messages, indent=2))
    try:
        response = litellm.completion(
            model=config.model,
            messages=messages,
            api_key=config.api_key,
            api_base=COMPLETION_API_BASE,
            custom_llm_provider=COMPLETION_PROVIDER,
            timeout=REQUEST_TIMEOUT_SECONDS,
            max_retries=0,
        )
    except TRANSPORT_ERRORS as e:
        log.debug("transport failure: %s", e)
        raise TransportError(f"could not reach the completion service: {e}") from e
    except UPSTREAM_ERRORS as e:
        log.debug("upstream failure: %s", e)
        raise UpstreamError(str(e)) from e

    content = extract_content(response)
    log.debug("raw response: %s", content)
    return content
