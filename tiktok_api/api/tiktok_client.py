"""Client for TikTok's web JSON API."""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..config.settings import TikTokConfig, get_config
from ..core import constructor, urls
from ..core.errors import IllegalIdentifier, ResourceNotFound
from ..core.models import (
    Audio,
    AudioInfo,
    Tag,
    TagIdentifier,
    TagInfo,
    User,
    UserIdentifier,
    UserInfo,
    Video,
    VideoInfo,
)

logger = logging.getLogger(__name__)


@dataclass
class ContentResponse:
    """Parsed response from a TikTok endpoint."""
    status_code: int | None
    body: dict[str, Any] = field(default_factory=dict)
    http_status: int | None = None


class TikTokClient:
    """Client for retrieving public TikTok content.

    Each operation performs a single GET request. Nothing is cached and
    nothing is retried; wrap calls with your own timeout or retry policy.
    """

    def __init__(self, config: TikTokConfig | None = None):
        """Initialize API client with configuration."""
        self.config = config or get_config()
        self.status_codes = self.config.status_codes

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.api.timeout),
            headers={
                'User-Agent': self.config.api.user_agent,
                'Referer': self.config.api.referer,
            },
            follow_redirects=True,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def fetch_content(self, url: str) -> ContentResponse:
        """GET ``url`` and parse its JSON body.

        TikTok reports domain errors through the ``statusCode`` field of the
        body, so HTTP status lines are never treated as failures here.
        Transport errors and undecodable bodies propagate to the caller.
        """
        logger.debug(f"GET {url}")
        response = await self.client.get(url)
        body = response.json()
        if not isinstance(body, dict):
            body = {}

        status_code = body.get('statusCode')
        logger.debug(f"HTTP {response.status_code}, statusCode={status_code}")
        return ContentResponse(
            status_code=status_code,
            body=body,
            http_status=response.status_code,
        )

    def _check_status(self, content: ContentResponse, resource: str,
                      not_found_code: int, check_identifier: bool = True) -> None:
        """Raise for the error codes TikTok embeds in its responses."""
        codes = self.status_codes
        if check_identifier and content.status_code == codes.illegal_identifier:
            raise IllegalIdentifier("An illegal identifier was used for this request.")
        if content.status_code == not_found_code:
            raise ResourceNotFound(f"Could not find a {resource} with the given identifier.")
        self._flag_unrecognized(content)

    def _require_entity(self, content: ContentResponse, path: tuple[str, ...],
                        resource: str, id_keys: tuple[str, ...] = ('id',)) -> dict:
        """Return the entity block at ``path``, raising if the response carries none."""
        entity = constructor.dig(content.body, path)
        if not isinstance(entity, dict) or not any(entity.get(key) for key in id_keys):
            raise ResourceNotFound(f"The response did not contain a {resource}.")
        return entity

    def _flag_unrecognized(self, content: ContentResponse) -> None:
        codes = self.status_codes
        known = {codes.success, codes.illegal_identifier,
                 codes.resource_not_found, codes.video_not_found}
        if content.status_code is not None and content.status_code not in known:
            logger.warning(f"Unrecognized statusCode {content.status_code}, treating as success")

    async def _fetch_items(self, url: str) -> list[VideoInfo]:
        content = await self.fetch_content(url)
        self._flag_unrecognized(content)

        items = content.body.get('items')
        if not items:
            return []
        return [constructor.video_info_from_content(v) for v in items]

    async def _fetch_top_items(self, url: str) -> list[VideoInfo]:
        content = await self.fetch_content(url)
        self._flag_unrecognized(content)

        body = content.body.get('body') or {}
        items = body.get('itemListData')
        if not items:
            return []
        return [constructor.video_info_from_top_content(v) for v in items]

    async def get_trending_videos(self) -> list[VideoInfo]:
        """Retrieve the top trending videos (at most one page of 30)."""
        return await self._fetch_items(urls.trending_url(self.config))

    async def get_user_by_name(self, username: str) -> User:
        """Resolve a username to a User with both id and username set."""
        user_info = await self.get_user_info(username)
        return user_info.user

    async def get_user_info(self, identifier: UserIdentifier) -> UserInfo:
        """Retrieve the profile of a user, given a User or a username.

        Raises:
            IllegalIdentifier: the username is invalid.
            ResourceNotFound: no user has this username.
            IllegalArgument: the User has neither username nor id set.
        """
        content = await self.fetch_content(urls.user_info_url(identifier, self.config))
        self._check_status(content, "User", self.status_codes.resource_not_found)
        self._require_entity(content, ('userInfo', 'user'), "User", id_keys=('id', 'uniqueId'))
        return constructor.user_info_from_content(content.body)

    async def get_recent_videos(self, user: User) -> list[VideoInfo]:
        """Retrieve a user's latest videos; empty if there are none."""
        return await self._fetch_items(urls.recent_videos_url(user, self.config))

    async def get_liked_videos(self, user: User) -> list[VideoInfo]:
        """Retrieve the videos a user has liked; empty if there are none."""
        return await self._fetch_items(urls.liked_videos_url(user, self.config))

    async def get_video_info(self, video: Video) -> VideoInfo:
        """Retrieve the metadata of a video.

        Raises:
            IllegalIdentifier: the video id is invalid.
            ResourceNotFound: no video has this id.
            IllegalArgument: the Video has no id set.
        """
        content = await self.fetch_content(urls.video_info_url(video, self.config))
        self._check_status(content, "Video", self.status_codes.video_not_found)

        item = self._require_entity(content, ('itemInfo', 'itemStruct'), "Video")
        return constructor.video_info_from_content(item)

    async def get_audio_info(self, audio: Audio) -> AudioInfo:
        """Retrieve the metadata of an audio track.

        Raises:
            IllegalIdentifier: the audio id is invalid.
            ResourceNotFound: no audio has this id.
            IllegalArgument: the Audio has no id set.
        """
        content = await self.fetch_content(urls.audio_info_url(audio, self.config))
        self._check_status(content, "Audio", self.status_codes.resource_not_found)
        self._require_entity(content, ('musicInfo', 'music'), "Audio")
        return constructor.audio_info_from_content(content.body)

    async def get_audio_top_videos(self, audio: Audio) -> list[VideoInfo]:
        """Retrieve the top videos using an audio track."""
        return await self._fetch_top_items(urls.audio_top_videos_url(audio, self.config))

    async def get_tag(self, tag_id: str) -> Tag:
        """Resolve a tag id to a Tag with its title set."""
        tag_info = await self.get_tag_info(tag_id)
        return tag_info.tag

    async def get_tag_info(self, identifier: TagIdentifier) -> TagInfo:
        """Retrieve the metadata of a tag, given a Tag or a tag id.

        Raises:
            ResourceNotFound: no tag has this id.
            IllegalArgument: the Tag has no id set.
        """
        content = await self.fetch_content(urls.tag_info_url(identifier, self.config))
        self._check_status(content, "Tag", self.status_codes.resource_not_found,
                           check_identifier=False)
        self._require_entity(content, ('challengeInfo', 'challenge'), "Tag")
        return constructor.tag_info_from_content(content.body)

    async def get_tag_top_videos(self, tag: Tag) -> list[VideoInfo]:
        """Retrieve the top videos of a tag."""
        return await self._fetch_top_items(urls.tag_top_videos_url(tag, self.config))


# Module-level operations, one short-lived client per call


def get_user_by_id(user_id: str) -> User:
    """Return a User with only its id set. Does not fetch the username."""
    return constructor.user_from_id(user_id)


def get_video(video_id: str) -> Video:
    """Return a Video with its id set."""
    return constructor.video_from_id(video_id)


def get_audio(audio_id: str) -> Audio:
    """Return an Audio with its id set."""
    return constructor.audio_from_id(audio_id)


async def get_trending_videos() -> list[VideoInfo]:
    async with TikTokClient() as client:
        return await client.get_trending_videos()


async def get_user_by_name(username: str) -> User:
    async with TikTokClient() as client:
        return await client.get_user_by_name(username)


async def get_user_info(identifier: UserIdentifier) -> UserInfo:
    async with TikTokClient() as client:
        return await client.get_user_info(identifier)


async def get_recent_videos(user: User) -> list[VideoInfo]:
    async with TikTokClient() as client:
        return await client.get_recent_videos(user)


async def get_liked_videos(user: User) -> list[VideoInfo]:
    async with TikTokClient() as client:
        return await client.get_liked_videos(user)


async def get_video_info(video: Video) -> VideoInfo:
    async with TikTokClient() as client:
        return await client.get_video_info(video)


async def get_audio_info(audio: Audio) -> AudioInfo:
    async with TikTokClient() as client:
        return await client.get_audio_info(audio)


async def get_audio_top_videos(audio: Audio) -> list[VideoInfo]:
    async with TikTokClient() as client:
        return await client.get_audio_top_videos(audio)


async def get_tag(tag_id: str) -> Tag:
    async with TikTokClient() as client:
        return await client.get_tag(tag_id)


async def get_tag_info(identifier: TagIdentifier) -> TagInfo:
    async with TikTokClient() as client:
        return await client.get_tag_info(identifier)


async def get_tag_top_videos(tag: Tag) -> list[VideoInfo]:
    async with TikTokClient() as client:
        return await client.get_tag_top_videos(tag)
