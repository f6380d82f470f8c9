"""Content step: ask the completion API for the blog post as JSON.

The endpoint is OpenAI-compatible (OpenRouter by default), so the official
`openai` SDK is used with a custom base URL.
"""

from __future__ import annotations

import json
import time
from typing import Optional

import openai

from blog_generator import config
from blog_generator.errors import ConfigError, ContentParseError, UpstreamError
from blog_generator.pipeline.prompts import build_content_prompt, build_system_prompt


def create_client(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    site_url: Optional[str] = None,
) -> openai.OpenAI:
    """Build the completion client.

    Raises ConfigError when no API key is available, before anything is sent.
    """
    api_key = api_key or config.OPENROUTER_API_KEY
    if not api_key:
        raise ConfigError("OPENROUTER_API_KEY not set. Add it to your .env file.")

    return openai.OpenAI(
        api_key=api_key,
        base_url=base_url or config.BASE_URL,
        default_headers={
            "HTTP-Referer": site_url or config.SITE_URL,
            "X-Title": config.APP_TITLE,
        },
    )


def strip_code_fence(text: str) -> str:
    """Remove a ```json ... ``` or ``` ... ``` wrapper if present.

    Text without a leading fence is returned unchanged apart from
    surrounding whitespace.
    """
    text = text.strip()
    if text.startswith("```json"):
        text = text[len("```json"):]
    elif text.startswith("```"):
        text = text[len("```"):]
    else:
        return text

    if text.rstrip().endswith("```"):
        text = text.rstrip()[:-3]
    return text.strip()


def parse_blog_content(text: str) -> dict:
    """Parse completion text into the blog content dict."""
    json_string = strip_code_fence(text)
    try:
        content = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ContentParseError(
            f"Failed to parse generated content: {e}", raw_text=json_string
        ) from e
    if not isinstance(content, dict):
        raise ContentParseError(
            "Failed to parse generated content: expected a JSON object", raw_text=json_string
        )
    return content


def request_completion(prompt: str, client: Optional[openai.OpenAI] = None) -> str:
    """Send one chat-completion request and return the message text."""
    client = client or create_client()

    try:
        completion = client.chat.completions.create(
            model=config.COMPLETION_MODEL,
            messages=[
                {"role": "system", "content": build_system_prompt()},
                {"role": "user", "content": prompt},
            ],
            temperature=config.COMPLETION_TEMPERATURE,
            max_tokens=config.COMPLETION_MAX_TOKENS,
            response_format={"type": "json_object"},
        )
    except openai.APIStatusError as e:
        raise UpstreamError(
            f"Completion API error {e.status_code}: {e.message}",
            status_code=e.status_code,
        ) from e
    except openai.OpenAIError as e:
        raise UpstreamError(f"Completion API error: {e}") from e

    choices = getattr(completion, "choices", None) or []
    content = choices[0].message.content if choices and choices[0].message else None
    if not content:
        raise UpstreamError("No content in API response")
    return content


def fetch_blog_content(topic: str, client: Optional[openai.OpenAI] = None) -> dict:
    """Generate and parse the blog content for a topic."""
    prompt = build_content_prompt(topic)

    print(f"  -> Generating content ({config.COMPLETION_MODEL})...")
    start = time.time()
    response = request_completion(prompt, client=client)
    elapsed = time.time() - start

    content = parse_blog_content(response)
    print(
        f"  OK Generated \"{content.get('title', '?')}\" with "
        f"{len(content.get('sections') or [])} sections in {elapsed:.1f}s"
    )
    return content
