"""
Shared fixtures for blog generator tests
"""
import copy
import json
from types import SimpleNamespace
from unittest.mock import MagicMock, Mock

import pytest
import requests

from blog_generator import config

SAMPLE_CONTENT = {
    "title": "10 Essential Benefits of Outdoor Games",
    "description": "Discover why outdoor games matter for kids and adults alike: better health, sharper minds, stronger friendships and more fun under the open sky today.",
    "keywords": ["outdoor games", "play", "health"],
    "author": "Jamie Rivera",
    "date": "2025-03-07",
    "readingTime": "6 min read",
    "featuredImage": {
        "url": "https://picsum.photos/600/300?random=1",
        "altText": "Kids playing outside",
        "caption": "Fresh air and fun",
    },
    "sections": [
        {
            "title": "Physical Health",
            "content": "Running around builds stamina.",
            "listItems": ["Stronger bones", "Better sleep"],
            "image": {
                "url": "https://picsum.photos/600/300?random=0.42",
                "altText": "Placeholder",
                "caption": "Placeholder caption",
            },
        },
        {
            "title": "Social Skills",
            "content": "Team games teach cooperation.",
            "listItems": [],
        },
    ],
    "tags": ["outdoors", "kids", "health"],
    "relatedPosts": [{"title": "Indoor Games for Rainy Days", "url": "/blogs/indoor-games.html"}],
}

SAMPLE_IMAGES = [
    {"url": "https://images.pexels.com/photos/1/featured.jpeg", "altText": "Children running in a park"},
    {"url": "https://images.pexels.com/photos/2/section.jpeg", "altText": "Football on grass"},
    {"url": "https://images.pexels.com/photos/3/extra.jpeg", "altText": "Pexels image"},
]


@pytest.fixture
def sample_content():
    """A two-section post as the completion model would return it"""
    return copy.deepcopy(SAMPLE_CONTENT)


@pytest.fixture
def sample_images():
    """Three images as returned by fetch_pexels_images"""
    return copy.deepcopy(SAMPLE_IMAGES)


@pytest.fixture
def pexels_payload():
    """Raw Pexels search response body"""
    return {
        "page": 1,
        "per_page": 3,
        "photos": [
            {
                "id": i,
                "alt": image["altText"] if image["altText"] != "Pexels image" else "",
                "src": {"original": image["url"], "large": image["url"] + "?w=940"},
            }
            for i, image in enumerate(SAMPLE_IMAGES, 1)
        ],
    }


@pytest.fixture
def mock_pexels_response(pexels_payload):
    """Create a successful mock HTTP response from Pexels"""
    response = Mock(spec=requests.Response)
    response.status_code = 200
    response.ok = True
    response.reason = "OK"
    response.json.return_value = pexels_payload
    return response


def make_completion_client(text):
    """Fake OpenAI client whose chat.completions.create returns `text`"""
    client = MagicMock()
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=text))]
    )
    return client


@pytest.fixture
def completion_client(sample_content):
    """Fake completion client answering with a fenced JSON document"""
    return make_completion_client("```json\n" + json.dumps(sample_content) + "\n```")


@pytest.fixture
def api_keys(monkeypatch):
    """Configure both API keys"""
    monkeypatch.setattr(config, "OPENROUTER_API_KEY", "test-openrouter-key")
    monkeypatch.setattr(config, "PEXELS_API_KEY", "test-pexels-key")


@pytest.fixture
def no_api_keys(monkeypatch):
    """Unset both API keys regardless of the local .env"""
    monkeypatch.setattr(config, "OPENROUTER_API_KEY", "")
    monkeypatch.setattr(config, "PEXELS_API_KEY", "")


@pytest.fixture
def no_network(monkeypatch):
    """Fail the test if anything tries to reach Pexels or build an OpenAI client"""
    def _fail(*args, **kwargs):
        raise AssertionError("network access attempted")

    monkeypatch.setattr("blog_generator.pipeline.images.requests.get", _fail)
    monkeypatch.setattr("blog_generator.pipeline.content.openai.OpenAI", _fail)


@pytest.fixture
def make_client():
    """Factory fixture for fake completion clients"""
    return make_completion_client
