"""Test request URL construction."""

import httpx
import pytest

from tiktok_api.config.settings import TikTokConfig
from tiktok_api.core import urls
from tiktok_api.core.errors import IllegalArgument
from tiktok_api.core.models import Audio, Tag, User, Video


def query(url: str) -> dict:
    return dict(httpx.URL(url).params)


class TestListURLs:
    """Test the endpoints that return lists of videos."""

    @pytest.mark.parametrize(
        "url",
        [
            urls.trending_url(TikTokConfig()),
            urls.recent_videos_url(User(id="6745191554350760966"), TikTokConfig()),
            urls.liked_videos_url(User(id="6745191554350760966"), TikTokConfig()),
            urls.audio_top_videos_url(Audio(id="6824510564349774597"), TikTokConfig()),
            urls.tag_top_videos_url(Tag(id="229207"), TikTokConfig()),
        ],
    )
    def test_page_size_is_thirty(self, url):
        """Every list URL asks for 30 items."""
        assert query(url)["count"] == "30"

    def test_trending(self, test_config):
        """Trending uses the item_list endpoint with type 5."""
        url = urls.trending_url(test_config)

        assert url.startswith("https://m.tiktok.com/api/item_list/?")
        params = query(url)
        assert params["type"] == "5"
        assert params["id"] == "1"

    def test_recent_and_liked_differ_by_type(self, test_config):
        """Recent and liked videos share an endpoint but not a type."""
        user = User(id="6745191554350760966")

        recent = query(urls.recent_videos_url(user, test_config))
        liked = query(urls.liked_videos_url(user, test_config))

        assert recent["id"] == liked["id"] == "6745191554350760966"
        assert recent["type"] == "1"
        assert liked["type"] == "2"

    def test_top_videos_use_share_endpoint(self, test_config):
        """Audio and tag top lists come from the share list endpoint."""
        audio_url = urls.audio_top_videos_url(Audio(id="99"), test_config)
        tag_url = urls.tag_top_videos_url(Tag(id="88"), test_config)

        assert audio_url.startswith("https://www.tiktok.com/share/item/list?")
        assert query(audio_url)["type"] == "4"
        assert query(audio_url)["id"] == "99"
        assert query(tag_url)["type"] == "3"
        assert query(tag_url)["id"] == "88"

    def test_smaller_page_size_from_config(self):
        """A configured page size below 30 is honored."""
        config = TikTokConfig(api={"page_size": 10})

        assert query(urls.trending_url(config))["count"] == "10"


class TestDetailURLs:
    """Test the single-resource endpoints."""

    def test_user_info_by_username(self, test_config):
        """A bare string is treated as a username."""
        url = urls.user_info_url("charlidamelio", test_config)

        assert url.startswith("https://m.tiktok.com/api/user/detail/?")
        assert query(url)["uniqueId"] == "charlidamelio"

    def test_user_info_prefers_username(self, test_config):
        """A User with both fields is addressed by username."""
        params = query(urls.user_info_url(User(id="1", username="someone"), test_config))

        assert params["uniqueId"] == "someone"
        assert "userId" not in params

    def test_user_info_by_id(self, test_config):
        """A User with only an id is addressed by id."""
        params = query(urls.user_info_url(User(id="123"), test_config))

        assert params["userId"] == "123"

    def test_video_audio_tag(self, test_config):
        """Detail endpoints carry their identifier."""
        assert query(urls.video_info_url(Video(id="42"), test_config))["itemId"] == "42"
        assert query(urls.audio_info_url(Audio(id="7"), test_config))["musicId"] == "7"
        assert query(urls.tag_info_url("funny", test_config))["challengeId"] == "funny"
        assert query(urls.tag_info_url(Tag(id="funny"), test_config))["challengeId"] == "funny"

    def test_identifier_is_encoded(self, test_config):
        """Identifiers are percent-encoded in the query string."""
        url = urls.user_info_url("a b&c", test_config)

        assert "a b&c" not in url
        assert query(url)["uniqueId"] == "a b&c"


class TestMissingIdentifiers:
    """Test IllegalArgument on missing required fields."""

    @pytest.mark.parametrize(
        "build, arg",
        [
            (urls.user_info_url, User()),
            (urls.user_info_url, ""),
            (urls.recent_videos_url, User(username="charlidamelio")),
            (urls.liked_videos_url, User(username="charlidamelio")),
            (urls.video_info_url, Video(id="")),
            (urls.audio_info_url, Audio(id="")),
            (urls.audio_top_videos_url, Audio(id="")),
            (urls.tag_info_url, Tag(id="")),
            (urls.tag_top_videos_url, Tag(id="")),
        ],
    )
    def test_raises_illegal_argument(self, test_config, build, arg):
        """Builders refuse identity objects without their identifying field."""
        with pytest.raises(IllegalArgument):
            build(arg, test_config)

    def test_illegal_argument_is_value_error(self, test_config):
        """IllegalArgument can be caught as a ValueError."""
        with pytest.raises(ValueError):
            urls.video_info_url(Video(id=""), test_config)
