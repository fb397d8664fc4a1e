"""Request URL construction for TikTok's web endpoints."""

import httpx

from ..config.settings import TikTokConfig, get_config
from .errors import IllegalArgument
from .models import Audio, Tag, TagIdentifier, User, UserIdentifier, Video, as_tag, as_user

# item_list / share list "type" values
TRENDING_TYPE = 5
RECENT_VIDEOS_TYPE = 1
LIKED_VIDEOS_TYPE = 2
TAG_TOP_TYPE = 3
AUDIO_TOP_TYPE = 4

# item_list "sourceType" values
TRENDING_SOURCE = 12
RECENT_VIDEOS_SOURCE = 8
LIKED_VIDEOS_SOURCE = 9


def _build(base: str, path: str, params: dict) -> str:
    return str(httpx.URL(base.rstrip('/') + path, params=params))


def _require(value: str | None, message: str) -> str:
    if not value:
        raise IllegalArgument(message)
    return value


def _item_list_url(config: TikTokConfig, list_id: str, list_type: int, source_type: int) -> str:
    endpoints = config.endpoints
    params = {
        'count': config.api.page_size,
        'id': list_id,
        'type': list_type,
        'secUid': '',
        'maxCursor': 0,
        'minCursor': 0,
        'sourceType': source_type,
        'appId': endpoints.app_id,
        'language': endpoints.language,
    }
    return _build(endpoints.base_url, endpoints.item_list, params)


def _share_list_url(config: TikTokConfig, list_id: str, list_type: int) -> str:
    endpoints = config.endpoints
    params = {
        'secUid': '',
        'id': list_id,
        'type': list_type,
        'count': config.api.page_size,
        'minCursor': 0,
        'maxCursor': 0,
        'shareUid': '',
        'lang': endpoints.language,
    }
    return _build(endpoints.share_url, endpoints.share_item_list, params)


def trending_url(config: TikTokConfig | None = None) -> str:
    """URL of the trending feed."""
    config = config or get_config()
    return _item_list_url(config, '1', TRENDING_TYPE, TRENDING_SOURCE)


def user_info_url(identifier: UserIdentifier, config: TikTokConfig | None = None) -> str:
    """URL of a user's profile, addressed by username or, failing that, by id."""
    config = config or get_config()
    user = as_user(identifier)
    endpoints = config.endpoints

    if user.username:
        params = {'uniqueId': user.username}
    elif user.id:
        params = {'userId': user.id}
    else:
        raise IllegalArgument("The User object must have its username or id set.")

    params['language'] = endpoints.language
    return _build(endpoints.base_url, endpoints.user_info, params)


def recent_videos_url(user: User, config: TikTokConfig | None = None) -> str:
    """URL of a user's most recent videos."""
    config = config or get_config()
    user_id = _require(user.id, "The User object must have its id set.")
    return _item_list_url(config, user_id, RECENT_VIDEOS_TYPE, RECENT_VIDEOS_SOURCE)


def liked_videos_url(user: User, config: TikTokConfig | None = None) -> str:
    """URL of the videos a user has liked."""
    config = config or get_config()
    user_id = _require(user.id, "The User object must have its id set.")
    return _item_list_url(config, user_id, LIKED_VIDEOS_TYPE, LIKED_VIDEOS_SOURCE)


def video_info_url(video: Video, config: TikTokConfig | None = None) -> str:
    config = config or get_config()
    video_id = _require(video.id, "The Video object must have its id set.")
    endpoints = config.endpoints
    params = {'itemId': video_id, 'language': endpoints.language}
    return _build(endpoints.base_url, endpoints.video_info, params)


def audio_info_url(audio: Audio, config: TikTokConfig | None = None) -> str:
    config = config or get_config()
    audio_id = _require(audio.id, "The Audio object must have its id set.")
    endpoints = config.endpoints
    params = {'musicId': audio_id, 'language': endpoints.language}
    return _build(endpoints.base_url, endpoints.audio_info, params)


def audio_top_videos_url(audio: Audio, config: TikTokConfig | None = None) -> str:
    config = config or get_config()
    audio_id = _require(audio.id, "The Audio object must have its id set.")
    return _share_list_url(config, audio_id, AUDIO_TOP_TYPE)


def tag_info_url(identifier: TagIdentifier, config: TikTokConfig | None = None) -> str:
    config = config or get_config()
    tag = as_tag(identifier)
    tag_id = _require(tag.id, "The Tag object must have its id set.")
    endpoints = config.endpoints
    params = {'challengeId': tag_id, 'language': endpoints.language}
    return _build(endpoints.base_url, endpoints.tag_info, params)


def tag_top_videos_url(tag: Tag, config: TikTokConfig | None = None) -> str:
    config = config or get_config()
    tag_id = _require(tag.id, "The Tag object must have its id set.")
    return _share_list_url(config, tag_id, TAG_TOP_TYPE)
