"""Domain models for TikTok content."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Identifies a TikTok account by id, username, or both."""

    id: str | None = None
    username: str | None = None


@dataclass(frozen=True)
class UserInfo:
    """Profile snapshot of a TikTok user."""

    user: User
    nickname: str | None = None
    avatar: str | None = None
    signature: str | None = None
    verified: bool | None = None
    private: bool | None = None
    following: int | None = None
    followers: int | None = None
    likes: int | None = None
    videos: int | None = None


@dataclass(frozen=True)
class Video:
    """Identifies a TikTok video."""

    id: str


@dataclass(frozen=True)
class Audio:
    """Identifies a TikTok audio track."""

    id: str


@dataclass(frozen=True)
class AudioCovers:
    """Cover image URLs of an audio track."""

    small: str | None = None
    medium: str | None = None
    large: str | None = None


@dataclass(frozen=True)
class AudioInfo:
    """Metadata snapshot of a TikTok audio track."""

    audio: Audio
    title: str | None = None
    author_name: str | None = None
    original: bool | None = None
    covers: AudioCovers = AudioCovers()
    video_count: int | None = None


@dataclass(frozen=True)
class Tag:
    """A hashtag (challenge). The title is only known after a lookup."""

    id: str
    title: str | None = None


@dataclass(frozen=True)
class TagInfo:
    """Metadata snapshot of a TikTok hashtag."""

    tag: Tag
    description: str | None = None
    videos: int | None = None
    views: int | None = None


@dataclass(frozen=True)
class VideoStats:
    """Engagement counters of a video."""

    play_count: int | None = None
    likes: int | None = None
    comments: int | None = None
    shares: int | None = None


@dataclass(frozen=True)
class VideoInfo:
    """Metadata snapshot of a TikTok video."""

    video: Video
    author: User
    audio: AudioInfo
    description: str | None = None
    created_at: int | None = None  # unix timestamp
    stats: VideoStats = VideoStats()
    tags: tuple[Tag, ...] | None = None


# Accepted wherever a caller may pass either the object or a bare string
UserIdentifier = User | str
TagIdentifier = Tag | str


def as_user(identifier: UserIdentifier) -> User:
    """Return the canonical User for a User or a username."""
    if isinstance(identifier, User):
        return identifier
    return User(username=identifier)


def as_tag(identifier: TagIdentifier) -> Tag:
    """Return the canonical Tag for a Tag or a tag id."""
    if isinstance(identifier, Tag):
        return identifier
    return Tag(id=identifier)
