"""TikTok API integration layer."""

from .tiktok_client import (
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

__all__ = [
    "ContentResponse",
    "TikTokClient",
    "get_audio",
    "get_audio_info",
    "get_audio_top_videos",
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
]
