"""Tests for the user identity, list and want list facades."""

import json

import httpx
import pytest
import respx

from discogs_sdk.api import UserIdentityApi, UserListsApi, UserWantListApi
from discogs_sdk.exceptions import AuthError
from discogs_sdk.models.identity import (
    EditUserProfileRequest,
    GetUserContributionsRequest,
    GetUserProfileRequest,
    GetUserSubmissionsRequest,
)
from discogs_sdk.models.lists import GetListRequest, GetUserListsRequest
from discogs_sdk.models.types import Currency
from discogs_sdk.models.wantlist import (
    AddToWantListRequest,
    DeleteFromWantListRequest,
    EditReleaseInWantListRequest,
    GetWantListRequest,
)

BASE_URL = "https://api.discogs.com"


class TestUserIdentityApi:
    """Test suite for UserIdentityApi."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_identity(self, connection, load_fixture):
        """Test fetching the authenticated identity."""
        respx.get(f"{BASE_URL}/oauth/identity").mock(
            return_value=httpx.Response(200, json=load_fixture("identity"))
        )

        api = UserIdentityApi(connection)
        identity = await api.get_identity()

        assert identity.id == 1
        assert identity.username == "example"
        assert identity.consumer_name == "Your Application Name"

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_get_identity_requires_auth(self, anonymous_connection):
        """Test that identity needs credentials."""
        route = respx.get(f"{BASE_URL}/oauth/identity")

        api = UserIdentityApi(anonymous_connection)
        with pytest.raises(AuthError) as exc_info:
            await api.get_identity()

        assert "UserIdentityApi::get_identity" in str(exc_info.value)
        assert route.call_count == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_user_profile(self, connection, load_fixture):
        """Test fetching a profile."""
        respx.get(f"{BASE_URL}/users/rodneyfool").mock(
            return_value=httpx.Response(200, json=load_fixture("user_profile"))
        )

        api = UserIdentityApi(connection)
        profile = await api.get_user_profile(GetUserProfileRequest(username="rodneyfool"))

        assert profile.id == 1578108
        assert profile.name == "Rodney"
        assert profile.num_want_list == 5
        assert profile.curr_abbr is Currency.USD

    @pytest.mark.asyncio
    @respx.mock
    async def test_edit_user_profile(self, connection, load_fixture):
        """Test that profile edits are posted as JSON."""
        route = respx.post(f"{BASE_URL}/users/rodneyfool").mock(
            return_value=httpx.Response(200, json=load_fixture("user_profile"))
        )

        api = UserIdentityApi(connection)
        await api.edit_user_profile(
            EditUserProfileRequest(username="rodneyfool", location="Portland")
        )

        assert json.loads(route.calls.last.request.content) == {
            "username": "rodneyfool",
            "location": "Portland",
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_user_submissions(self, connection, load_fixture):
        """Test that submissions expose a single entry per page."""
        respx.get(f"{BASE_URL}/users/rodneyfool/submissions").mock(
            return_value=httpx.Response(
                200,
                json={
                    "pagination": {"page": 1, "pages": 1, "per_page": 50, "items": 1, "urls": {}},
                    "submissions": {
                        "artists": [],
                        "labels": [load_fixture("label")],
                        "releases": [load_fixture("release")],
                    },
                },
            )
        )

        api = UserIdentityApi(connection)
        submissions = await api.get_user_submissions(
            GetUserSubmissionsRequest(username="rodneyfool")
        )

        assert submissions.submissions.labels[0].name == "Planet E"
        assert submissions.submissions.releases[0].id == 249504
        assert len(submissions.entries) == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_user_contributions(self, connection, load_fixture):
        """Test listing contributions."""
        route = respx.get(f"{BASE_URL}/users/rodneyfool/contributions").mock(
            return_value=httpx.Response(
                200,
                json={
                    "pagination": {"page": 2, "pages": 2, "per_page": 1, "items": 2, "urls": {}},
                    "contributions": [load_fixture("release")],
                },
            )
        )

        api = UserIdentityApi(connection)
        contributions = await api.get_user_contributions(
            GetUserContributionsRequest(username="rodneyfool", page=2, per_page=1)
        )

        assert route.calls.last.request.url.params["page"] == "2"
        assert contributions.contributions[0].title == "Never Gonna Give You Up"

    @pytest.mark.asyncio
    @respx.mock
    async def test_submissions_and_contributions_are_public(self, anonymous_connection):
        """Test that anonymous clients can read submissions and contributions."""
        empty_page = {"page": 1, "pages": 1, "per_page": 50, "items": 0, "urls": {}}
        submissions_route = respx.get(f"{BASE_URL}/users/rodneyfool/submissions").mock(
            return_value=httpx.Response(
                200,
                json={
                    "pagination": empty_page,
                    "submissions": {"artists": [], "labels": [], "releases": []},
                },
            )
        )
        contributions_route = respx.get(f"{BASE_URL}/users/rodneyfool/contributions").mock(
            return_value=httpx.Response(
                200, json={"pagination": empty_page, "contributions": []}
            )
        )

        api = UserIdentityApi(anonymous_connection)
        submissions = await api.get_user_submissions(
            GetUserSubmissionsRequest(username="rodneyfool")
        )
        contributions = await api.get_user_contributions(
            GetUserContributionsRequest(username="rodneyfool")
        )

        assert submissions.submissions.releases == []
        assert contributions.contributions == []
        assert submissions_route.call_count == 1
        assert contributions_route.call_count == 1
        assert "Authorization" not in submissions_route.calls.last.request.headers


class TestUserListsApi:
    """Test suite for UserListsApi."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_user_lists_anonymous(self, anonymous_connection, load_fixture):
        """Test that public lists are readable without credentials."""
        respx.get(f"{BASE_URL}/users/rodneyfool/lists").mock(
            return_value=httpx.Response(200, json=load_fixture("user_lists"))
        )

        api = UserListsApi(anonymous_connection)
        lists = await api.get_user_lists(GetUserListsRequest(username="rodneyfool"))

        summary = lists.lists[0]
        assert summary.id == 362057
        assert summary.name == "My favorite releases"
        assert summary.is_public is True

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_list(self, connection, load_fixture):
        """Test fetching a list with its items."""
        respx.get(f"{BASE_URL}/lists/362057").mock(
            return_value=httpx.Response(200, json=load_fixture("list"))
        )

        api = UserListsApi(connection)
        user_list = await api.get_list(GetListRequest(list_id=362057))

        assert user_list.user.username == "rodneyfool"
        assert len(user_list.items) == 1
        assert user_list.items[0].id == 13764
        assert user_list.items[0].display_title == "Silver Apples - Silver Apples"


class TestUserWantListApi:
    """Test suite for UserWantListApi."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_want_list(self, connection, load_fixture):
        """Test listing wants."""
        respx.get(f"{BASE_URL}/users/example/wants").mock(
            return_value=httpx.Response(200, json=load_fixture("wants"))
        )

        api = UserWantListApi(connection)
        wants = await api.get_want_list(GetWantListRequest(username="example"))

        want = wants.wants[0]
        assert want.id == 1867708
        assert want.rating == 4
        assert want.basic_information.artists[0].name == "Nine Inch Nails"

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_get_want_list_requires_auth(self, anonymous_connection):
        """Test that the want list needs credentials."""
        route = respx.get(f"{BASE_URL}/users/example/wants")

        api = UserWantListApi(anonymous_connection)
        with pytest.raises(AuthError):
            await api.get_want_list(GetWantListRequest(username="example"))

        assert route.call_count == 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_to_want_list(self, connection):
        """Test that adding a want sends notes as query parameters with no body."""
        route = respx.put(f"{BASE_URL}/users/example/wants/1867708").mock(
            return_value=httpx.Response(
                201, json={"id": 1867708, "rating": 0, "notes": "first pressing"}
            )
        )

        api = UserWantListApi(connection)
        want = await api.add_to_want_list(
            AddToWantListRequest(username="example", release_id=1867708, notes="first pressing")
        )

        request = route.calls.last.request
        assert request.url.params["notes"] == "first pressing"
        assert request.content == b""
        assert want.notes == "first pressing"

    @pytest.mark.asyncio
    @respx.mock
    async def test_edit_release_in_want_list(self, connection):
        """Test editing a want's rating."""
        route = respx.post(f"{BASE_URL}/users/example/wants/1867708").mock(
            return_value=httpx.Response(200, json={"id": 1867708, "rating": 5})
        )

        api = UserWantListApi(connection)
        want = await api.edit_release_in_want_list(
            EditReleaseInWantListRequest(username="example", release_id=1867708, rating=5)
        )

        assert route.calls.last.request.url.params["rating"] == "5"
        assert want.rating == 5

    @pytest.mark.asyncio
    @respx.mock
    async def test_delete_from_want_list(self, connection):
        """Test removing a want."""
        route = respx.delete(f"{BASE_URL}/users/example/wants/1867708").mock(
            return_value=httpx.Response(204)
        )

        api = UserWantListApi(connection)
        result = await api.delete_from_want_list(
            DeleteFromWantListRequest(username="example", release_id=1867708)
        )

        assert result is None
        assert route.called
