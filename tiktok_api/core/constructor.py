"""Builds domain objects from raw TikTok JSON payloads."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .models import (
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

logger = logging.getLogger(__name__)

FieldPath = tuple[str | int, ...]


def dig(data: Any, path: FieldPath) -> Any:
    """Follow a path of keys/indices into nested JSON, returning None if any step is missing."""
    for step in path:
        if isinstance(step, int):
            if not isinstance(data, list) or len(data) <= step:
                return None
        elif not isinstance(data, dict) or step not in data:
            return None
        data = data[step]
    return data


def _str(value: Any) -> str | None:
    return None if value is None else str(value)


def user_from_id(user_id: str) -> User:
    return User(id=user_id)


def video_from_id(video_id: str) -> Video:
    return Video(id=video_id)


def audio_from_id(audio_id: str) -> Audio:
    return Audio(id=audio_id)


def user_info_from_content(content: dict) -> UserInfo:
    """Build a UserInfo from a user detail response."""
    user = dig(content, ('userInfo', 'user')) or {}
    stats = dig(content, ('userInfo', 'stats')) or {}

    return UserInfo(
        user=User(id=_str(user.get('id')), username=user.get('uniqueId')),
        nickname=user.get('nickname'),
        avatar=user.get('avatarLarger'),
        signature=user.get('signature'),
        verified=user.get('verified'),
        private=user.get('privateAccount'),
        following=stats.get('followingCount'),
        followers=stats.get('followerCount'),
        likes=stats.get('heartCount'),
        videos=stats.get('videoCount'),
    )


def audio_info_from_content(content: dict) -> AudioInfo:
    """Build an AudioInfo from a music detail response."""
    music = dig(content, ('musicInfo', 'music')) or {}
    stats = dig(content, ('musicInfo', 'stats')) or {}

    return AudioInfo(
        audio=Audio(id=_str(music.get('id'))),
        title=music.get('title'),
        author_name=music.get('authorName'),
        original=music.get('original'),
        covers=AudioCovers(
            small=music.get('coverThumb'),
            medium=music.get('coverMedium'),
            large=music.get('coverLarge'),
        ),
        video_count=stats.get('videoCount'),
    )


def tag_info_from_content(content: dict) -> TagInfo:
    """Build a TagInfo from a challenge detail response."""
    challenge = dig(content, ('challengeInfo', 'challenge')) or {}
    stats = dig(content, ('challengeInfo', 'stats')) or {}

    return TagInfo(
        tag=Tag(id=_str(challenge.get('id')), title=challenge.get('title')),
        description=challenge.get('desc'),
        videos=stats.get('videoCount'),
        views=stats.get('viewCount'),
    )


class VideoShape(Enum):
    """The two JSON shapes TikTok uses for a video."""

    ITEM = "item"                # item detail and item_list feeds
    TOP_CONTENT = "top_content"  # share/item/list itemListData entries


@dataclass(frozen=True)
class VideoFieldPaths:
    """Where each VideoInfo field lives in one video JSON shape."""

    id: FieldPath
    description: FieldPath
    created_at: FieldPath
    author_id: FieldPath
    author_username: FieldPath
    audio_id: FieldPath
    audio_title: FieldPath
    audio_author: FieldPath
    audio_original: FieldPath
    cover_small: FieldPath
    cover_medium: FieldPath
    cover_large: FieldPath
    play_count: FieldPath
    likes: FieldPath
    comments: FieldPath
    shares: FieldPath
    tags: FieldPath
    tag_id: str
    tag_title: str


VIDEO_FIELD_PATHS = {
    VideoShape.ITEM: VideoFieldPaths(
        id=('id',),
        description=('desc',),
        created_at=('createTime',),
        author_id=('author', 'id'),
        author_username=('author', 'uniqueId'),
        audio_id=('music', 'id'),
        audio_title=('music', 'title'),
        audio_author=('music', 'authorName'),
        audio_original=('music', 'original'),
        cover_small=('music', 'coverThumb'),
        cover_medium=('music', 'coverMedium'),
        cover_large=('music', 'coverLarge'),
        play_count=('stats', 'playCount'),
        likes=('stats', 'diggCount'),
        comments=('stats', 'commentCount'),
        shares=('stats', 'shareCount'),
        tags=('challenges',),
        tag_id='id',
        tag_title='title',
    ),
    VideoShape.TOP_CONTENT: VideoFieldPaths(
        id=('itemInfos', 'id'),
        description=('itemInfos', 'text'),
        created_at=('itemInfos', 'createTime'),
        author_id=('authorInfos', 'userId'),
        author_username=('authorInfos', 'uniqueId'),
        audio_id=('musicInfos', 'musicId'),
        audio_title=('musicInfos', 'musicName'),
        audio_author=('musicInfos', 'authorName'),
        audio_original=('musicInfos', 'original'),
        cover_small=('musicInfos', 'covers', 0),
        cover_medium=('musicInfos', 'coversMedium', 0),
        cover_large=('musicInfos', 'coversLarge', 0),
        play_count=('itemInfos', 'playCount'),
        likes=('itemInfos', 'diggCount'),
        comments=('itemInfos', 'commentCount'),
        shares=('itemInfos', 'shareCount'),
        tags=('challengeInfoList',),
        tag_id='challengeId',
        tag_title='challengeName',
    ),
}


def detect_video_shape(fragment: dict) -> VideoShape:
    if 'itemInfos' in fragment:
        return VideoShape.TOP_CONTENT
    return VideoShape.ITEM


def _int(value: Any) -> int | None:
    # createTime arrives as a string in some feeds
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric value {value!r}")
        return None


def _build_video_info(fragment: dict, paths: VideoFieldPaths) -> VideoInfo:
    def get(path: FieldPath) -> Any:
        return dig(fragment, path)

    raw_tags = get(paths.tags)
    tags = None
    if isinstance(raw_tags, list):
        tags = tuple(
            Tag(id=_str(t.get(paths.tag_id)), title=t.get(paths.tag_title))
            for t in raw_tags
            if isinstance(t, dict)
        )

    return VideoInfo(
        video=Video(id=_str(get(paths.id))),
        author=User(id=_str(get(paths.author_id)), username=get(paths.author_username)),
        audio=AudioInfo(
            audio=Audio(id=_str(get(paths.audio_id))),
            title=get(paths.audio_title),
            author_name=get(paths.audio_author),
            original=get(paths.audio_original),
            covers=AudioCovers(
                small=get(paths.cover_small),
                medium=get(paths.cover_medium),
                large=get(paths.cover_large),
            ),
        ),
        description=get(paths.description),
        created_at=_int(get(paths.created_at)),
        stats=VideoStats(
            play_count=_int(get(paths.play_count)),
            likes=_int(get(paths.likes)),
            comments=_int(get(paths.comments)),
            shares=_int(get(paths.shares)),
        ),
        tags=tags,
    )


def normalize_video_info(fragment: dict) -> VideoInfo:
    """Build a VideoInfo from either video shape."""
    return _build_video_info(fragment, VIDEO_FIELD_PATHS[detect_video_shape(fragment)])


def video_info_from_content(fragment: dict) -> VideoInfo:
    """Build a VideoInfo from an item (``itemStruct`` / ``items[]``) fragment."""
    return _build_video_info(fragment, VIDEO_FIELD_PATHS[VideoShape.ITEM])


def video_info_from_top_content(fragment: dict) -> VideoInfo:
    """Build a VideoInfo from a ``body.itemListData[]`` fragment."""
    return _build_video_info(fragment, VIDEO_FIELD_PATHS[VideoShape.TOP_CONTENT])
