"""Typed asyncio client for TikTok's public web content."""

from .api import (
    ContentResponse,
    TikTokClient,
    get_audio,
    get_audio_info,
    get_audio_top_videos,
    get_liked_videos,
    get_recent_videos,
    get_tag,
    get_tag_info,
    get_tag_top_videos,
    get_trending_videos,
    get_user_by_id,
    get_user_by_name,
    get_user_info,
    get_video,
    get_video_info,
)
from .config import TikTokConfig, get_config, load_config
from .core.errors import IllegalArgument, IllegalIdentifier, ResourceNotFound, TikTokAPIError
from .core.models import (
    Audio,
    AudioCovers,
    AudioInfo,
    Tag,
    TagInfo,
    User,
    UserInfo,
    Video,
    VideoInfo,
    VideoStats,
)

__version__ = "0.1.0"

__all__ = [
    "Audio",
    "AudioCovers",
    "AudioInfo",
    "ContentResponse",
    "IllegalArgument",
    "IllegalIdentifier",
    "ResourceNotFound",
    "Tag",
    "TagInfo",
    "TikTokAPIError",
    "TikTokClient",
    "TikTokConfig",
    "User",
    "UserInfo",
    "Video",
    "VideoInfo",
    "VideoStats",
    "get_audio",
    "get_audio_info",
    "get_audio_top_videos",
    "get_config",
    "get_liked_videos",
    "get_recent_videos",
    "get_tag",
    "get_tag_info",
    "get_tag_top_videos",
    "get_trending_videos",
    "get_user_by_id",
    "get_user_by_name",
    "get_user_info",
    "get_video",
    "get_video_info",
    "load_config",
]
