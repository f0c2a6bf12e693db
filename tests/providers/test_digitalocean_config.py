from __future__ import annotations

import pytest

from node_discover.args import parse_args
from node_discover.errors import MalformedArgument, MissingArgument, UnexpectedArgument
from node_discover.providers.digitalocean import DOConfig, DOProvider

pytestmark = pytest.mark.unit


def build(raw: str) -> DOConfig:
    return DOConfig.from_args(parse_args(raw))


class TestDOConfig:
    def test_all_fields(self):
        config = build("provider=digitalocean region=lon1 tag_name=cool-tag api_token=secret")
        assert config == DOConfig(tag_name="cool-tag", api_token="secret", region="lon1")

    def test_region_is_optional(self):
        assert build("provider=digitalocean tag_name=web api_token=t").region is None

    def test_region_is_not_transformed(self):
        assert build("provider=digitalocean tag_name=web api_token=t region=LON1").region == "LON1"

    def test_token_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_TOKEN", "from-env")
        assert build("provider=digitalocean tag_name=web").api_token == "from-env"

    def test_argument_token_wins_over_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_TOKEN", "from-env")
        assert build("provider=digitalocean tag_name=web api_token=from-arg").api_token == "from-arg"

    def test_token_is_hidden_from_repr(self):
        config = build("provider=digitalocean tag_name=web api_token=secret")
        assert "secret" not in repr(config)

    def test_create_provider(self):
        config = build("provider=digitalocean tag_name=web api_token=t")
        provider = config.create_provider()
        assert isinstance(provider, DOProvider)
        assert provider.config is config
        assert config.kind == "digitalocean"


class TestDOConfigErrors:
    def test_missing_token_everywhere(self):
        with pytest.raises(MissingArgument) as exc:
            build("provider=digitalocean tag_name=web")
        assert exc.value == MissingArgument("api_token")

    def test_empty_environment_token_counts_as_missing(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_TOKEN", "")
        with pytest.raises(MissingArgument) as exc:
            build("provider=digitalocean tag_name=web")
        assert exc.value == MissingArgument("api_token")

    def test_missing_tag_name(self):
        with pytest.raises(MissingArgument) as exc:
            build("provider=digitalocean api_token=t")
        assert exc.value == MissingArgument("tag_name")

    def test_tag_name_reported_before_token(self):
        with pytest.raises(MissingArgument) as exc:
            build("provider=digitalocean")
        assert exc.value == MissingArgument("tag_name")

    @pytest.mark.parametrize("key", ["tag_key", "addr_type", "tags"])
    def test_unexpected_key(self, key: str):
        with pytest.raises(UnexpectedArgument) as exc:
            build(f"provider=digitalocean tag_name=web api_token=t {key}=x")
        assert exc.value == UnexpectedArgument(key)

    def test_parse_rejects_other_provider(self):
        with pytest.raises(MalformedArgument) as exc:
            DOConfig.parse("provider=aws tag_key=k tag_value=v")
        assert exc.value == MalformedArgument("provider=aws", "Expected provider=digitalocean")

    def test_parse(self):
        assert DOConfig.parse("provider=digitalocean tag_name=web api_token=t").tag_name == "web"
