"""Pytest configuration and fixtures."""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from tiktok_api.api.tiktok_client import TikTokClient
from tiktok_api.config.settings import TikTokConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    return TikTokConfig()


@pytest.fixture
def mock_client(test_config):
    """Create a TikTok client whose HTTP client is a spy."""
    client = TikTokClient(test_config)
    client.client = AsyncMock()
    return client


@pytest.fixture
def item_fragment():
    """A video in the item shape (item detail / item_list)."""
    return {
        "id": "6829267836783971589",
        "desc": "dance break #fyp #dance",
        "createTime": 1589805600,
        "author": {
            "id": "6745191554350760966",
            "uniqueId": "charlidamelio",
            "nickname": "charli d'amelio",
        },
        "music": {
            "id": "6824510564349774597",
            "title": "original sound",
            "authorName": "charli d'amelio",
            "original": True,
            "coverThumb": "https://p16.muscdn.com/thumb.jpeg",
            "coverMedium": "https://p16.muscdn.com/medium.jpeg",
            "coverLarge": "https://p16.muscdn.com/large.jpeg",
        },
        "stats": {
            "diggCount": 1200000,
            "shareCount": 5400,
            "commentCount": 23000,
            "playCount": 8900000,
        },
        "challenges": [
            {"id": "229207", "title": "fyp"},
            {"id": "16162", "title": "dance"},
        ],
        "video": {"duration": 15, "ratio": "720p"},
    }


@pytest.fixture
def top_fragment():
    """The same video in the top-content shape (share/item/list)."""
    return {
        "itemInfos": {
            "id": "6829267836783971589",
            "text": "dance break #fyp #dance",
            "createTime": "1589805600",
            "diggCount": 1200000,
            "shareCount": 5400,
            "commentCount": 23000,
            "playCount": 8900000,
            "covers": ["https://p16.muscdn.com/video-cover.jpeg"],
        },
        "authorInfos": {
            "userId": "6745191554350760966",
            "uniqueId": "charlidamelio",
            "nickName": "charli d'amelio",
        },
        "musicInfos": {
            "musicId": "6824510564349774597",
            "musicName": "original sound",
            "authorName": "charli d'amelio",
            "original": True,
            "covers": ["https://p16.muscdn.com/thumb.jpeg"],
            "coversMedium": ["https://p16.muscdn.com/medium.jpeg"],
            "coversLarge": ["https://p16.muscdn.com/large.jpeg"],
        },
        "challengeInfoList": [
            {"challengeId": "229207", "challengeName": "fyp"},
            {"challengeId": "16162", "challengeName": "dance"},
        ],
    }


@pytest.fixture
def user_detail():
    """A user detail response."""
    return {
        "statusCode": 0,
        "userInfo": {
            "user": {
                "id": "6745191554350760966",
                "uniqueId": "charlidamelio",
                "nickname": "charli d'amelio",
                "avatarLarger": "https://p16.muscdn.com/avatar.jpeg",
                "signature": "don't worry i don't get the hype either",
                "verified": True,
                "privateAccount": False,
            },
            "stats": {
                "followingCount": 1033,
                "followerCount": 52700000,
                "heartCount": 4100000000,
                "videoCount": 1124,
            },
        },
    }


@pytest.fixture
def music_detail():
    """A music detail response."""
    return {
        "statusCode": 0,
        "musicInfo": {
            "music": {
                "id": "6824510564349774597",
                "title": "original sound",
                "authorName": "charli d'amelio",
                "original": True,
                "coverThumb": "https://p16.muscdn.com/thumb.jpeg",
                "coverMedium": "https://p16.muscdn.com/medium.jpeg",
                "coverLarge": "https://p16.muscdn.com/large.jpeg",
            },
            "stats": {"videoCount": 31000},
        },
    }


@pytest.fixture
def challenge_detail():
    """A challenge detail response for the "funny" tag."""
    return {
        "statusCode": 0,
        "challengeInfo": {
            "challenge": {
                "id": "funny",
                "title": "Funny",
                "desc": "Make us laugh!",
            },
            "stats": {"videoCount": 4500000, "viewCount": 98000000000},
        },
    }
