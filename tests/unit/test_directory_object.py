"""Tests for the DirectoryObject operation primitive and sync protocol."""
from types import SimpleNamespace

import pytest

from azgraph.directory import DirectoryObject, Group, HttpError, InvalidResponseError, ObjectNotPersistedError, User
from tests.conftest import TENANT, TOKEN, tenant_url


@pytest.fixture()
def user(client):
    return User(TOKEN, TENANT, {"id": "u1", "displayName": "Alice", "jobTitle": "Analyst"}, client=client)


class TestDoOperation:
    def test_get_own_resource(self, user, graph_api):
        graph_api.add("GET", tenant_url("users", "u1"), {"id": "u1"})

        assert user.do_operation() == {"id": "u1"}

        call = graph_api.calls[0]
        assert call["headers"]["Authorization"] == f"Bearer {TOKEN}"
        assert "json" not in call

    def test_operation_path_and_passthrough_options(self, user, graph_api):
        graph_api.add("POST", tenant_url("users", "u1", "getMemberGroups"), {"value": []})

        user.do_operation(
            "getMemberGroups",
            body={"securityEnabledOnly": True},
            http_verb="POST",
            params={"$select": "id"},
            headers={"ConsistencyLevel": "eventual"},
        )

        call = graph_api.calls[0]
        assert call["json"] == {"securityEnabledOnly": True}
        assert call["params"] == {"$select": "id"}
        assert call["headers"]["ConsistencyLevel"] == "eventual"
        assert call["headers"]["Authorization"] == f"Bearer {TOKEN}"

    def test_plural_segment_per_subtype(self, client, graph_api):
        graph_api.add("GET", tenant_url("groups", "g1"), {"id": "g1"})
        Group(TOKEN, TENANT, {"id": "g1"}, client=client).do_operation()
        assert graph_api.calls[0]["url"] == tenant_url("groups", "g1")

    def test_no_content_returns_none(self, user, graph_api):
        graph_api.add("DELETE", tenant_url("users", "u1"), status_code=204)
        assert user.do_operation(http_verb="DELETE") is None

    def test_http_error_carries_status_and_body(self, user, graph_api):
        graph_api.add("GET", tenant_url("users", "u1", "manager"), status_code=404, text='{"error": "NotFound"}')

        with pytest.raises(HttpError) as exc_info:
            user.do_operation("manager")

        assert exc_info.value.status == 404
        assert exc_info.value.body == '{"error": "NotFound"}'

    def test_object_without_id_cannot_operate(self, client, graph_api):
        obj = User(TOKEN, TENANT, {"displayName": "Nobody"}, client=client)

        with pytest.raises(ObjectNotPersistedError):
            obj.do_operation()
        assert graph_api.calls == []

    def test_token_object_with_access_token(self, client, graph_api):
        graph_api.add("GET", tenant_url("users", "u1"), {"id": "u1"})
        token = SimpleNamespace(access_token="from-credential")

        User(token, TENANT, {"id": "u1"}, client=client).do_operation()

        assert graph_api.calls[0]["headers"]["Authorization"] == "Bearer from-credential"


class TestIdentity:
    def test_token_and_tenant_are_read_only(self, user):
        with pytest.raises(AttributeError):
            user.token = "other"
        with pytest.raises(AttributeError):
            user.tenant = "other"

    def test_type_is_fixed_by_class(self, client):
        assert DirectoryObject(TOKEN, TENANT, {}, client=client).type == "directoryObject"
        assert User(TOKEN, TENANT, {}, client=client).type == "user"

    def test_properties_are_copied(self, client):
        raw = {"id": "u1"}
        obj = User(TOKEN, TENANT, raw, client=client)
        obj.properties["id"] = "changed"
        assert raw == {"id": "u1"}

    def test_accessors(self, user):
        assert user.id == "u1"
        assert user.display_name == "Alice"
        assert user.get("jobTitle") == "Analyst"
        assert user.get("missing", "n/a") == "n/a"


class TestSyncFields:
    def test_replaces_properties_wholesale(self, user, graph_api):
        graph_api.add("GET", tenant_url("users", "u1"), {"id": "u1", "displayName": "Alice Smith"})

        assert user.sync_fields() is user
        assert user.properties == {"id": "u1", "displayName": "Alice Smith"}

    def test_empty_body_keeps_local_properties(self, user, graph_api):
        before = dict(user.properties)
        graph_api.add("GET", tenant_url("users", "u1"), status_code=200, text="")

        with pytest.raises(InvalidResponseError):
            user.sync_fields()

        assert user.properties == before
        assert user.id == "u1"


class TestUpdate:
    def test_success_commits_merged_properties(self, user, graph_api):
        graph_api.add("PATCH", tenant_url("users", "u1"), status_code=204)

        user.update(jobTitle="Manager", department="Finance")

        expected = {"id": "u1", "displayName": "Alice", "jobTitle": "Manager", "department": "Finance"}
        assert user.properties == expected
        assert graph_api.calls[0]["json"] == expected

    def test_failure_leaves_properties_unchanged(self, user, graph_api):
        before = dict(user.properties)
        graph_api.add("PATCH", tenant_url("users", "u1"), status_code=400, text="Bad Request")

        with pytest.raises(HttpError):
            user.update(jobTitle="Manager")

        assert user.properties == before


class TestDelete:
    def test_declined_confirmation_sends_nothing(self, user, graph_api, prompt):
        prompt.answer = False

        assert user.delete() is None

        assert prompt.messages == ["Do you really want to delete the user 'Alice'?"]
        assert graph_api.calls_for("DELETE") == []

    def test_accepted_confirmation_deletes(self, user, graph_api, prompt):
        prompt.answer = True
        graph_api.add("DELETE", tenant_url("users", "u1"), status_code=204)

        user.delete()

        assert len(graph_api.calls_for("DELETE")) == 1

    def test_without_confirmation_skips_prompt(self, user, graph_api, prompt):
        graph_api.add("DELETE", tenant_url("users", "u1"), status_code=204)

        user.delete(confirm=False)

        assert prompt.messages == []
        assert len(graph_api.calls_for("DELETE")) == 1
        # local handle is not modified
        assert user.id == "u1"

    def test_delete_failure_propagates(self, user, graph_api):
        graph_api.add("DELETE", tenant_url("users", "u1"), status_code=403, text="Forbidden")

        with pytest.raises(HttpError) as exc_info:
            user.delete(confirm=False)
        assert exc_info.value.status_code == 403


class TestDefaultClient:
    def test_construction_does_not_read_settings(self, monkeypatch):
        monkeypatch.setenv("GRAPH_REQUEST_TIMEOUT", "soon")

        user = User(TOKEN, TENANT, {"id": "u1", "displayName": "Alice"})

        assert user.id == "u1"
        assert user.display_name == "Alice"

    def test_client_built_from_settings_on_first_call(self, monkeypatch, graph_api):
        monkeypatch.setenv("GRAPH_REQUEST_TIMEOUT", "soon")
        user = User(TOKEN, TENANT, {"id": "u1"})

        monkeypatch.setenv("GRAPH_HOST", "https://graph.env/v1.0")
        monkeypatch.setenv("GRAPH_REQUEST_TIMEOUT", "9")
        graph_api.add("GET", f"https://graph.env/v1.0/{TENANT}/users/u1", {"id": "u1"})

        user.sync_fields()

        assert graph_api.calls[0]["timeout"] == 9.0
        # built once, then shared with objects it creates
        assert user.client is user.client
