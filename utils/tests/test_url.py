"""Unit tests for utils.url."""

from utils.url import add_query_param, append_path


class TestAddQueryParam:
    """Tests for add_query_param."""

    def test_add_query_param_change_url(self) -> None:
        """A new query param is added, then a second one is appended."""
        url = "http://abc.com"

        new_url = add_query_param(url, "new_param", "new_value")

        assert "?new_param=new_value" in new_url

        new_url = add_query_param(new_url, "new_param_2", "new_value_2")

        assert "&new_param_2=new_value_2" in new_url

    def test_next_param_is_encoded(self) -> None:
        """Paths used as values are percent-encoded where needed."""
        url = add_query_param("/accounts/login/", "next", "/events/tea dance/")
        assert url.startswith("/accounts/login/?next=")
        assert " " not in url


class TestAppendPath:
    """Tests for append_path."""

    def test_host_only(self) -> None:
        """Appending to a bare host creates an absolute path."""
        assert append_path("https://crm.example.com", "api/contacts") == (
            "https://crm.example.com/api/contacts"
        )

    def test_keeps_base_path(self) -> None:
        """The base path is kept, with or without a trailing slash."""
        assert append_path("https://crm.example.com/api", "contacts") == (
            "https://crm.example.com/api/contacts"
        )
        assert append_path("https://crm.example.com/api/", "/contacts") == (
            "https://crm.example.com/api/contacts"
        )
