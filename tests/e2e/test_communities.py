"""End-to-end tests for communities, moderation and the karma gate."""

from uuid import uuid4

from tests.conftest import auth_headers, make_community, make_post, make_user


class TestCreateCommunity:
    """POST /communities"""

    def test_karma_gate(self, client, store):
        """49 karma is refused, 50 is enough."""
        # Arrange
        newcomer = make_user(karma=49)
        regular = make_user(karma=50)
        store.users.update({newcomer.id: newcomer, regular.id: regular})

        # Act
        refused = client.post(
            "/communities", json={"name": "neuro"}, headers=auth_headers(newcomer)
        )
        created = client.post(
            "/communities",
            json={"name": "neuro", "description": "Brains", "rules": ["Cite"]},
            headers=auth_headers(regular),
        )

        # Assert
        assert refused.status_code == 400
        assert refused.json()["message"] == "You need at least 50 karma to create a community"
        assert created.status_code == 201
        community = created.json()["data"]["community"]
        assert community["name"] == "neuro"
        assert community["moderator_ids"] == [str(regular.id)]
        assert community["rules"] == ["Cite"]
        assert community["subscribers"] == 0

    def test_invalid_name(self, client, store):
        creator = make_user(karma=100)
        store.users[creator.id] = creator

        response = client.post(
            "/communities", json={"name": "no spaces"}, headers=auth_headers(creator)
        )

        assert response.status_code == 400
        assert response.json()["status"] == "fail"

    def test_requires_authentication(self, client):
        response = client.post("/communities", json={"name": "anon"})

        assert response.status_code == 401


class TestModeration:
    """Ban and unban routes."""

    def test_banned_user_cannot_post_until_unbanned(self, client, store):
        # Arrange
        creator = make_user()
        member = make_user()
        community = make_community(creator)
        store.users.update({creator.id: creator, member.id: member})
        store.communities[community.id] = community
        post_body = {"community": str(community.id), "title": "Hi"}

        # Act / Assert
        banned = client.post(
            f"/communities/{community.id}/ban",
            json={"user": str(member.id)},
            headers=auth_headers(creator),
        )
        assert banned.status_code == 200
        assert banned.json()["data"]["community"]["banned_user_ids"] == [
            str(member.id)
        ]

        refused = client.post("/posts", json=post_body, headers=auth_headers(member))
        assert refused.status_code == 403
        assert refused.json() == {
            "status": "fail",
            "message": "You are banned from this community",
        }
        assert store.posts == {}

        unbanned = client.post(
            f"/communities/{community.id}/unban",
            json={"user": str(member.id)},
            headers=auth_headers(creator),
        )
        assert unbanned.status_code == 200

        accepted = client.post("/posts", json=post_body, headers=auth_headers(member))
        assert accepted.status_code == 201

    def test_banned_user_cannot_comment(self, client, store):
        creator = make_user()
        member = make_user()
        community = make_community(creator, banned_user_ids=frozenset({member.id}))
        post = make_post(creator, community)
        store.users.update({creator.id: creator, member.id: member})
        store.communities[community.id] = community
        store.posts[post.id] = post

        response = client.post(
            "/comments",
            json={"post": str(post.id), "content": "Let me in"},
            headers=auth_headers(member),
        )

        assert response.status_code == 403
        assert store.comments == {}

    def test_creator_cannot_be_banned(self, client, store):
        creator = make_user()
        moderator = make_user()
        community = make_community(creator, moderator_ids=frozenset({moderator.id}))
        store.users.update({creator.id: creator, moderator.id: moderator})
        store.communities[community.id] = community

        response = client.post(
            f"/communities/{community.id}/ban",
            json={"user": str(creator.id)},
            headers=auth_headers(moderator),
        )

        assert response.status_code == 400


class TestCommunityLifecycle:
    """Read, update, subscribe and delete."""

    def test_update_subscribe_delete(self, client, store):
        # Arrange
        creator = make_user()
        member = make_user()
        community = make_community(creator)
        store.users.update({creator.id: creator, member.id: member})
        store.communities[community.id] = community
        path = f"/communities/{community.id}"

        # Act / Assert
        updated = client.patch(
            path, json={"description": "Updated"}, headers=auth_headers(creator)
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["community"]["description"] == "Updated"

        forbidden = client.patch(
            path, json={"description": "Mine now"}, headers=auth_headers(member)
        )
        assert forbidden.status_code == 400

        subscribed = client.post(f"{path}/subscribe", headers=auth_headers(member))
        assert subscribed.status_code == 200
        assert subscribed.json()["data"]["user"]["subscribed_communities"] == [
            str(community.id)
        ]
        assert client.get(path).json()["data"]["community"]["subscribers"] == 1

        again = client.post(f"{path}/subscribe", headers=auth_headers(member))
        assert again.status_code == 400

        not_allowed = client.delete(path, headers=auth_headers(member))
        assert not_allowed.status_code == 403

        deleted = client.delete(path, headers=auth_headers(creator))
        assert deleted.status_code == 204
        assert client.get(path).status_code == 404

    def test_unknown_community(self, client):
        response = client.get(f"/communities/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["status"] == "fail"
