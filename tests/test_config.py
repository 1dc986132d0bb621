import pytest
import snug

from rakuten_ws import Configuration, ConfigurationError


class TestConfiguration:
    def test_defaults(self):
        config = Configuration()
        assert config.application_id is None
        assert config.affiliate_id is None

    def test_from_env(self):
        config = Configuration.from_env(
            {"RWS_APPLICATION_ID": "app", "RWS_AFFILIATE_ID": "aff"}
        )
        assert config == Configuration("app", "aff")

    def test_from_env_empty_values(self):
        config = Configuration.from_env({"RWS_APPLICATION_ID": ""})
        assert config == Configuration()

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("RWS_APPLICATION_ID", "app")
        monkeypatch.setenv("RWS_AFFILIATE_ID", "aff")
        assert Configuration.from_env() == Configuration("app", "aff")

    def test_replace(self):
        config = Configuration("app")
        assert config.replace(affiliate_id="aff") == Configuration("app", "aff")
        assert config == Configuration("app")

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Configuration("app").application_id = "other"

    def test_equality(self):
        assert Configuration("app") != Configuration("other")
        assert Configuration("app") != "app"

    def test_repr(self):
        assert repr(Configuration("app")) == (
            "Configuration(application_id='app', affiliate_id=None)"
        )


class TestAuthenticate:
    def test_application_id(self):
        request = Configuration("app").authenticate(
            snug.GET("https://a.test/", params={"keyword": "tea"})
        )
        assert request == snug.GET(
            "https://a.test/",
            params={"keyword": "tea", "applicationId": "app"},
        )

    def test_affiliate_id(self):
        request = Configuration("app", "aff").authenticate(
            snug.GET("https://a.test/")
        )
        assert request.params == {"applicationId": "app", "affiliateId": "aff"}

    def test_missing_application_id(self):
        with pytest.raises(ConfigurationError, match="RWS_APPLICATION_ID"):
            Configuration(affiliate_id="aff").authenticate(
                snug.GET("https://a.test/")
            )
