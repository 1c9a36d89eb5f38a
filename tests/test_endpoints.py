"""
Tests for the endpoint table.
"""

from fortnite_api.endpoints import (
    ACCOUNT_ID_TOKEN,
    BASE_URL,
    COSMETIC_ID_TOKEN,
    PLAYLIST_ID_TOKEN,
    Endpoints,
)


class TestEndpoints:
    """Test cases for Endpoints."""

    def test_all_endpoints_use_base_url(self):
        """Every template is an absolute Fortnite-API URL."""
        for endpoint in Endpoints:
            assert endpoint.value.startswith(f"{BASE_URL}/v")

    def test_only_lookup_templates_have_placeholders(self):
        """Only the id lookups carry placeholder tokens."""
        with_tokens = {endpoint for endpoint in Endpoints if "{" in endpoint.value}
        assert with_tokens == {
            Endpoints.COSMETICS_BY_ID,
            Endpoints.PLAYLIST_BY_ID,
            Endpoints.BR_STATS_BY_ACCOUNT_ID,
        }

    def test_substitute_cosmetic_id(self):
        """The cosmetic id token is replaced literally."""
        url = Endpoints.COSMETICS_BY_ID.substitute(COSMETIC_ID_TOKEN, "CID_028_Athena_Commando_F")
        assert url == "https://fortnite-api.com/v2/cosmetics/br/CID_028_Athena_Commando_F"

    def test_substitute_playlist_id(self):
        """The playlist id token is replaced literally."""
        url = Endpoints.PLAYLIST_BY_ID.substitute(PLAYLIST_ID_TOKEN, "Playlist_DefaultSolo")
        assert url == "https://fortnite-api.com/v1/playlists/Playlist_DefaultSolo"

    def test_substitute_account_id(self):
        """The account id token is replaced literally."""
        url = Endpoints.BR_STATS_BY_ACCOUNT_ID.substitute(ACCOUNT_ID_TOKEN, "4735ce91")
        assert url == "https://fortnite-api.com/v2/stats/br/v2/4735ce91"

    def test_substitute_does_not_escape(self):
        """Substitution performs no escaping."""
        url = Endpoints.COSMETICS_BY_ID.substitute(COSMETIC_ID_TOKEN, "a b")
        assert url.endswith("/br/a b")

    def test_substitute_wrong_token_is_noop(self):
        """A token absent from the template leaves it unchanged."""
        assert Endpoints.MAP.substitute(COSMETIC_ID_TOKEN, "x") == Endpoints.MAP.value
