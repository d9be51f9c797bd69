"""
Tests for feed data models.
"""

import json

import pytest

from tumblr_download.models import BlogInfo, FeedPage, Post


class TestPost:
    """Tests for the Post model."""

    def test_fields_read_from_feed_keys(self, sample_photo_post):
        post = Post.model_validate(sample_photo_post)

        assert post.id == '123456789'
        assert post.url == 'https://test-blog.tumblr.com/post/123456789'
        assert post.post_type == 'photo'
        assert post.date == 'Fri, 01 Jan 2021 00:00:00'
        assert post.caption == '<p>Test image 1</p>'
        assert post.photo_url == 'https://64.media.tumblr.com/abc123/tumblr_test1_1280.jpg'

    def test_is_photo(self, sample_photo_post, sample_text_post):
        assert Post.model_validate(sample_photo_post).is_photo
        assert not Post.model_validate(sample_text_post).is_photo

    def test_missing_fields_are_none(self):
        post = Post.model_validate({})
        assert post.post_type is None
        assert post.photo_url is None
        assert post.caption is None
        assert not post.is_photo

    def test_numeric_id_coerced(self):
        assert Post.model_validate({'id': 42}).id == '42'

    def test_populate_by_field_name(self):
        post = Post(post_type='photo', photo_url='https://x/y.jpg')
        assert post.is_photo
        assert post.photo_url == 'https://x/y.jpg'


class TestFeedPage:
    """Tests for FeedPage decoding."""

    def test_from_json(self, sample_feed):
        page = FeedPage.from_json(json.dumps(sample_feed))

        assert page.blog == BlogInfo(title='Test Blog', name='test-blog')
        assert page.total_posts == 45
        assert len(page.posts) == 2
        assert [p.id for p in page.posts] == ['123456789', '987654321']

    def test_string_total_coerced(self):
        page = FeedPage.from_json('{"posts-total": "45"}')
        assert page.total_posts == 45

    def test_missing_keys_default(self):
        page = FeedPage.from_json('{}')

        assert page.blog.title is None
        assert page.posts == []
        assert page.total_posts is None

    def test_unknown_keys_ignored(self):
        page = FeedPage.from_json('{"posts-start": 0, "extra": {"x": 1}, "posts": []}')
        assert page.posts == []

    @pytest.mark.parametrize('text', ['not json', '', '[1, 2]'])
    def test_undecodable_input_gives_empty_page(self, text, caplog):
        page = FeedPage.from_json(text)

        assert page.posts == []
        assert page.total_posts is None
        assert 'treating page as empty' in caplog.text

    def test_mistyped_fields_dropped_individually(self, sample_photo_post, caplog):
        """A bad field falls back to its default; everything else survives."""
        payload = {
            'tumblelog': 'oops',
            'posts-total': 45,
            'posts': [sample_photo_post],
        }

        page = FeedPage.from_json(json.dumps(payload))

        assert page.blog == BlogInfo()
        assert page.total_posts == 45
        assert len(page.posts) == 1
        assert page.posts[0].is_photo
        assert page.posts[0].photo_url == sample_photo_post['photo-url-1280']
        assert 'FeedPage.blog' in caplog.text

    def test_bad_total_keeps_posts(self, sample_photo_post):
        payload = {'posts-total': '', 'posts': [sample_photo_post]}

        page = FeedPage.from_json(json.dumps(payload))

        assert page.total_posts is None
        assert len(page.posts) == 1

    def test_posts_not_a_list(self, caplog):
        page = FeedPage.from_json('{"posts": "nope", "posts-total": 3}')

        assert page.posts == []
        assert page.total_posts == 3
        assert 'FeedPage.posts' in caplog.text

    def test_non_object_post_entries_skipped(self, sample_photo_post, sample_text_post):
        payload = {'posts': [sample_photo_post, 'junk', 7, sample_text_post]}

        page = FeedPage.from_json(json.dumps(payload))

        assert [p.post_type for p in page.posts] == ['photo', 'regular']

    def test_mistyped_post_field_keeps_post(self, sample_photo_post):
        post = dict(sample_photo_post, **{'photo-caption': {'html': 'x'}})

        page = FeedPage.from_json(json.dumps({'posts': [post]}))

        assert page.posts[0].caption is None
        assert page.posts[0].is_photo
        assert page.posts[0].photo_url == sample_photo_post['photo-url-1280']
