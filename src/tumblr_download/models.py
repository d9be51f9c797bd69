"""
Data models for the Tumblr v1 feed.

Pydantic models describing one page of ``/api/read/json`` output. Every field
is optional and decoded leniently: a missing key is simply ``None``, and a
value of the wrong type is logged and replaced by the field's default without
affecting the fields around it.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)


logger = logging.getLogger(__name__)


PHOTO_POST_TYPE = "photo"

_FEED_MODEL_CONFIG = ConfigDict(
    populate_by_name=True,
    extra="ignore",
    coerce_numbers_to_str=True,
)


class FeedModel(BaseModel):
    """
    Base for feed models: a field that fails validation falls back to its
    default instead of failing the whole model.
    """

    model_config = _FEED_MODEL_CONFIG

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_invalid(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError as e:
            logger.warning(
                f"Ignoring invalid {cls.__name__}.{info.field_name} in feed response "
                f"({value!r}): {e.errors()[0]['msg']}"
            )
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class Post(FeedModel):
    """
    A single post entry from the feed.

    Only ``post_type`` and ``photo_url`` drive behavior; the rest is
    carried for display.
    """

    id: Optional[str] = Field(None, description="Post identifier")
    url: Optional[str] = Field(None, description="Permalink to the post")
    post_type: Optional[str] = Field(
        None,
        alias="type",
        description="Post type (photo, regular, quote, link, ...)"
    )
    date: Optional[str] = Field(None, description="Publication date as sent by the API")
    caption: Optional[str] = Field(
        None,
        alias="photo-caption",
        description="HTML caption of a photo post"
    )
    photo_url: Optional[str] = Field(
        None,
        alias="photo-url-1280",
        description="URL of the 1280px rendition of the photo"
    )

    @property
    def is_photo(self) -> bool:
        """True if this is a photo post."""
        return self.post_type == PHOTO_POST_TYPE


class BlogInfo(FeedModel):
    """Blog metadata (``tumblelog``), display only."""

    title: Optional[str] = None
    name: Optional[str] = None


class FeedPage(FeedModel):
    """
    One page of the blog feed.

    Attributes:
        blog: Blog metadata
        posts: Posts on this page, in feed order
        total_posts: Total number of posts on the blog, as reported by the API
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    blog: BlogInfo = Field(default_factory=BlogInfo, alias="tumblelog")
    posts: List[Post] = Field(default_factory=list)
    total_posts: Optional[int] = Field(None, alias="posts-total")

    @field_validator("posts", mode="before")
    @classmethod
    def _drop_non_object_posts(cls, value: Any) -> Any:
        # Entries that are not objects cannot be posts; keep the rest in order.
        if not isinstance(value, list):
            return value
        kept = [item for item in value if isinstance(item, dict)]
        if len(kept) != len(value):
            logger.warning(f"Ignoring {len(value) - len(kept)} non-object post entries in feed response")
        return kept

    @classmethod
    def from_json(cls, text: str) -> "FeedPage":
        """
        Decode feed JSON into a FeedPage.

        Decoding is lenient: text that is not a JSON object yields an empty
        page, and mistyped fields are dropped individually, each with a
        warning rather than an error.

        Args:
            text: Bare JSON text (JSONP wrapper already removed)

        Returns:
            The decoded page, possibly empty
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Feed response is not valid JSON, treating page as empty: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning("Feed response is not a JSON object, treating page as empty")
            return cls()

        return cls.model_validate(data)
