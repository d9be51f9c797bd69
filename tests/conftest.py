"""
Shared fixtures and configuration for pytest.
"""

import json
from unittest.mock import Mock

import pytest
import requests


BLOG_URL = 'https://test-blog.tumblr.com'


def wrap_jsonp(data):
    """Wrap a payload the way the v1 feed does."""
    return f"var tumblr_api_read = {json.dumps(data)};"


def make_response(text='', content=b'', status_code=200):
    """Build a Mock standing in for a requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.iter_content.return_value = [content] if content else []
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error"
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def blog_url():
    return BLOG_URL


@pytest.fixture
def sample_photo_post():
    """Sample v1 photo post."""
    return {
        'id': '123456789',
        'url': 'https://test-blog.tumblr.com/post/123456789',
        'type': 'photo',
        'date': 'Fri, 01 Jan 2021 00:00:00',
        'photo-caption': '<p>Test image 1</p>',
        'photo-url-1280': 'https://64.media.tumblr.com/abc123/tumblr_test1_1280.jpg',
        'photo-url-500': 'https://64.media.tumblr.com/abc123/tumblr_test1_500.jpg',
    }


@pytest.fixture
def sample_text_post():
    """Sample v1 text (regular) post."""
    return {
        'id': '987654321',
        'url': 'https://test-blog.tumblr.com/post/987654321',
        'type': 'regular',
        'date': 'Sat, 02 Jan 2021 00:00:00',
        'regular-body': '<p>Just text</p>',
    }


@pytest.fixture
def sample_feed(sample_photo_post, sample_text_post):
    """Sample decoded feed payload."""
    return {
        'tumblelog': {
            'title': 'Test Blog',
            'name': 'test-blog',
            'description': 'A test blog for unit tests',
        },
        'posts-start': 0,
        'posts-total': 45,
        'posts-type': False,
        'posts': [sample_photo_post, sample_text_post],
    }


@pytest.fixture
def sample_feed_text(sample_feed):
    """Sample feed body as served, JSONP wrapper included."""
    return wrap_jsonp(sample_feed)


@pytest.fixture
def mock_session():
    """Mock requests session."""
    session = Mock()
    session.get.return_value = make_response()
    return session


@pytest.fixture
def response_factory():
    """Factory for mock responses, see make_response."""
    return make_response


@pytest.fixture
def jsonp():
    """Wrap a payload in the v1 feed's JSONP wrapper."""
    return wrap_jsonp
