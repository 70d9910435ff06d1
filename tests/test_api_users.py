"""HTTP tests for the /users endpoints."""

import pytest


class TestCreateUser:

    def test_first_create_is_201_then_200_with_same_id(self, client, auth):
        body = {"userinfo": {"sub": "user1", "name": "One", "email": "one@example.com", "picture": "p.png"}}

        first = client.post("/users", json=body, headers=auth("user1"))
        second = client.post("/users", json=body, headers=auth("user1"))

        assert first.status_code == 201
        assert second.status_code == 200
        assert first.json()["U_ID"] == second.json()["U_ID"]

        data = first.json()
        assert data["U_Auth_Sub"] == "user1"
        assert data["U_Name"] == "One"
        assert data["U_Email"] == "one@example.com"
        assert data["U_Profile"] == "p.png"
        assert data["Is_Custom_Time"] is False
        assert data["Time_Length"] == 10
        assert data["Pixel_Amount"] == 10
        assert data["U_Friends"] == []
        assert data["self"] == f"http://testserver/users/{data['U_ID']}"

    def test_sub_mismatch_is_forbidden(self, client, auth):
        response = client.post("/users", json={"userinfo": {"sub": "user2"}}, headers=auth("user1"))

        assert response.status_code == 403
        assert response.json() == {"Error": "You are not the user"}

    def test_missing_body(self, client, auth):
        response = client.post("/users", headers=auth("user1"))

        assert response.status_code == 400

    def test_userinfo_must_be_object(self, client, auth):
        response = client.post("/users", json={"userinfo": "user1"}, headers=auth("user1"))

        assert response.status_code == 400

    def test_missing_credential(self, client):
        response = client.post("/users", json={"userinfo": {"sub": "user1"}})

        assert response.status_code == 401
        assert response.json()["code"] == "no auth header"

    def test_malformed_credential(self, client):
        response = client.post(
            "/users",
            json={"userinfo": {"sub": "user1"}},
            headers={"Authorization": "Basic user1"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_header"


class TestReadAndDeleteUser:

    def test_list_users_needs_no_credential(self, client, register):
        register("user1")
        register("user2")

        response = client.get("/users")

        assert response.status_code == 200
        assert [u["U_Auth_Sub"] for u in response.json()] == ["user1", "user2"]

    def test_get_self(self, client, auth, register):
        user = register("user1")

        response = client.get(f"/users/{user['U_ID']}", headers=auth("user1"))

        assert response.status_code == 200
        assert response.json()["U_ID"] == user["U_ID"]

    def test_get_other_user_is_forbidden(self, client, auth, register):
        user = register("user1")
        register("user2")

        response = client.get(f"/users/{user['U_ID']}", headers=auth("user2"))

        assert response.status_code == 403

    def test_get_missing_user(self, client, auth, register):
        register("user1")

        response = client.get("/users/999", headers=auth("user1"))

        assert response.status_code == 404
        assert response.json() == {"Error": "No user with this user_id exists"}

    @pytest.mark.parametrize("user_id", ["abc", "1.5", "0", "99999999999999999999"])
    def test_id_that_cannot_name_a_user_is_not_found(self, client, auth, register, user_id):
        register("user1")

        response = client.get(f"/users/{user_id}", headers=auth("user1"))

        assert response.status_code == 404
        assert response.json() == {"Error": "No user with this user_id exists"}

    def test_oversized_friend_id_is_not_found(self, client, auth, register):
        user = register("user1")

        response = client.patch(f"/users/{user['U_ID']}/users/99999999999999999999", headers=auth("user1"))

        assert response.status_code == 404
        assert response.json() == {"Error": "No user with this user_id exists"}

    def test_delete_cascades_to_arts(self, client, auth, register):
        user = register("user1")
        art = client.post("/arts", headers=auth("user1")).json()

        response = client.delete(f"/users/{user['U_ID']}", headers=auth("user1"))

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/users").json() == []
        assert client.get("/arts").json()["items"] == []
        assert client.get(f"/arts/{art['A_ID']}", headers=auth("user1")).status_code == 404


class TestFriends:

    def test_friendship_is_directional(self, client, auth, register):
        a = register("alice")
        b = register("bob")

        response = client.patch(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))

        assert response.status_code == 200
        assert response.json()["U_Friends"] == [
            {"U_ID": b["U_ID"], "U_Name": "bob", "self": f"http://testserver/users/{b['U_ID']}"}
        ]
        bob = client.get(f"/users/{b['U_ID']}", headers=auth("bob")).json()
        assert bob["U_Friends"] == []

    def test_duplicate_friend_is_forbidden(self, client, auth, register):
        a = register("alice")
        b = register("bob")
        client.patch(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))

        response = client.patch(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))

        assert response.status_code == 403
        assert response.json() == {"Error": "Friend already exists"}

    def test_self_friend_checked_before_ownership(self, client, auth, register):
        a = register("alice")
        register("bob")

        response = client.patch(f"/users/{a['U_ID']}/users/{a['U_ID']}", headers=auth("bob"))

        assert response.status_code == 403
        assert response.json() == {"Error": "A user cannot friend themselves"}

    def test_only_the_user_can_add_friends(self, client, auth, register):
        a = register("alice")
        b = register("bob")

        response = client.patch(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("bob"))

        assert response.status_code == 403
        assert response.json() == {"Error": "You are not the user"}

    def test_friend_must_exist(self, client, auth, register):
        a = register("alice")

        response = client.patch(f"/users/{a['U_ID']}/users/999", headers=auth("alice"))

        assert response.status_code == 404

    def test_deleting_friend_removes_edges_both_ways(self, client, auth, register):
        a = register("alice")
        b = register("bob")
        client.patch(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))
        client.patch(f"/users/{b['U_ID']}/users/{a['U_ID']}", headers=auth("bob"))

        deleted = client.delete(f"/users/{b['U_ID']}", headers=auth("bob"))

        assert deleted.status_code == 204
        alice = client.get(f"/users/{a['U_ID']}", headers=auth("alice")).json()
        assert alice["U_Friends"] == []

        # bob -> alice went with bob; re-registering bob starts with no friends
        bob = register("bob")
        assert bob["U_Friends"] == []

    def test_remove_friend(self, client, auth, register):
        a = register("alice")
        b = register("bob")
        client.patch(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))

        response = client.delete(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))

        assert response.status_code == 200
        assert response.json()["U_Friends"] == []

    def test_remove_missing_friend(self, client, auth, register):
        a = register("alice")
        b = register("bob")

        response = client.delete(f"/users/{a['U_ID']}/users/{b['U_ID']}", headers=auth("alice"))

        assert response.status_code == 403
        assert response.json() == {"Error": "Friend does not exist"}

    def test_body_not_allowed(self, client, auth, register):
        a = register("alice")
        b = register("bob")

        response = client.patch(
            f"/users/{a['U_ID']}/users/{b['U_ID']}",
            json={"x": 1},
            headers=auth("alice"),
        )

        assert response.status_code == 400
        assert response.json() == {"Error": "The request should not have any content json"}


class TestRefreshTodayTime:

    def test_automatic_refresh(self, client, register):
        register("user1")

        response = client.patch("/users", json={"request_method": "automatically"})

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["Today_Time"]

    def test_manual_trigger_rejected(self, client):
        response = client.patch("/users", json={"request_method": "manually"})

        assert response.status_code == 400
        assert response.json() == {"Error": "Should not be triggered manually"}
