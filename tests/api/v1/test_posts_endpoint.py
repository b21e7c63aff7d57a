import pytest
from unittest.mock import patch

from app.core.exceptions import ReadModelIntegrityError


@pytest.fixture
def alice(make_user):
    return make_user("alice")


@pytest.fixture
def bob(make_user):
    return make_user("bob")


@pytest.fixture
def post(make_blog, make_post):
    return make_post(make_blog())


def like(client, headers, post_id, status):
    return client.put(f"/api/v1/posts/{post_id}/like-status", json={"likeStatus": status}, headers=headers)


class TestPostLikeStatus:
    def test_like_is_reflected_for_the_viewer(self, client, auth_headers, alice, post):
        response = like(client, auth_headers(alice), post.id, "Like")

        assert response.status_code == 204
        info = client.get(f"/api/v1/posts/{post.id}", headers=auth_headers(alice)).json()["extendedLikesInfo"]
        assert info["likesCount"] == 1
        assert info["dislikesCount"] == 0
        assert info["myStatus"] == "Like"
        assert info["newestLikes"][0]["userId"] == alice.id
        assert info["newestLikes"][0]["login"] == "alice"
        assert info["newestLikes"][0]["addedAt"].endswith("Z")

    def test_anonymous_viewer_sees_counts_only(self, client, auth_headers, alice, bob, post):
        like(client, auth_headers(alice), post.id, "Like")
        like(client, auth_headers(bob), post.id, "Dislike")

        info = client.get(f"/api/v1/posts/{post.id}").json()["extendedLikesInfo"]

        assert info["likesCount"] == 1
        assert info["dislikesCount"] == 1
        assert info["myStatus"] == "None"

    def test_invalid_token_on_public_read_is_anonymous(self, client, auth_headers, alice, post):
        like(client, auth_headers(alice), post.id, "Like")

        response = client.get(f"/api/v1/posts/{post.id}", headers={"Authorization": "Bearer broken"})

        assert response.status_code == 200
        assert response.json()["extendedLikesInfo"]["myStatus"] == "None"

    def test_flip_and_clear(self, client, auth_headers, alice, bob, post):
        like(client, auth_headers(alice), post.id, "Like")
        like(client, auth_headers(bob), post.id, "Dislike")
        like(client, auth_headers(alice), post.id, "Dislike")

        info = client.get(f"/api/v1/posts/{post.id}", headers=auth_headers(alice)).json()["extendedLikesInfo"]
        assert (info["likesCount"], info["dislikesCount"], info["myStatus"]) == (0, 2, "Dislike")
        assert info["newestLikes"] == []

        like(client, auth_headers(alice), post.id, "None")

        info = client.get(f"/api/v1/posts/{post.id}", headers=auth_headers(alice)).json()["extendedLikesInfo"]
        assert (info["likesCount"], info["dislikesCount"], info["myStatus"]) == (0, 1, "None")

    def test_requires_authentication(self, client, post):
        response = client.put(f"/api/v1/posts/{post.id}/like-status", json={"likeStatus": "Like"})

        assert response.status_code == 401

    @pytest.mark.parametrize("body", [{"likeStatus": "Love"}, {"likeStatus": ""}, {}])
    def test_invalid_status_is_rejected(self, client, auth_headers, alice, post, body):
        response = client.put(f"/api/v1/posts/{post.id}/like-status", json=body, headers=auth_headers(alice))

        assert response.status_code == 422

    def test_missing_post(self, client, auth_headers, alice):
        assert like(client, auth_headers(alice), "unknown", "Like").status_code == 404

    def test_post_of_deleted_blog_cannot_be_liked(self, client, auth_headers, alice, post, db):
        post.blog.soft_delete()
        db.commit()

        assert like(client, auth_headers(alice), post.id, "Like").status_code == 404


class TestPostListing:
    def test_newest_likes_follow_recency(self, client, auth_headers, make_user, post):
        users = [make_user(name) for name in ("ann", "ben", "cat", "dan")]
        for user in users[:3]:
            like(client, auth_headers(user), post.id, "Like")

        newest = client.get(f"/api/v1/posts/{post.id}").json()["extendedLikesInfo"]["newestLikes"]
        assert [entry["login"] for entry in newest] == ["cat", "ben", "ann"]

        like(client, auth_headers(users[3]), post.id, "Like")

        newest = client.get(f"/api/v1/posts/{post.id}").json()["extendedLikesInfo"]["newestLikes"]
        assert [entry["login"] for entry in newest] == ["dan", "cat", "ben"]

    def test_page_carries_viewer_status_per_post(self, client, auth_headers, alice, make_blog, make_post):
        blog = make_blog()
        liked = make_post(blog, title="Liked")
        disliked = make_post(blog, title="Disliked")
        make_post(blog, title="Untouched")
        like(client, auth_headers(alice), liked.id, "Like")
        like(client, auth_headers(alice), disliked.id, "Dislike")

        body = client.get("/api/v1/posts", headers=auth_headers(alice)).json()

        statuses = {item["title"]: item["extendedLikesInfo"]["myStatus"] for item in body["items"]}
        assert statuses == {"Liked": "Like", "Disliked": "Dislike", "Untouched": "None"}
        assert body["totalCount"] == 3

    def test_sort_by_blog_name_and_search_title(self, client, make_blog, make_post):
        make_post(make_blog("zeta"), title="Python tips")
        make_post(make_blog("alpha"), title="python tricks")
        make_post(make_blog("beta"), title="Go notes")

        body = client.get(
            "/api/v1/posts",
            params={"searchTitleTerm": "PYTHON", "sortBy": "blogName", "sortDirection": "asc"},
        ).json()

        assert [item["blogName"] for item in body["items"]] == ["alpha", "zeta"]

    def test_soft_deleted_posts_are_hidden(self, client, make_blog, make_post, db):
        blog = make_blog()
        kept = make_post(blog, title="Kept")
        removed = make_post(blog, title="Removed")
        removed.soft_delete()
        db.commit()

        body = client.get("/api/v1/posts").json()

        assert [item["id"] for item in body["items"]] == [kept.id]
        assert client.get(f"/api/v1/posts/{removed.id}").status_code == 404

    def test_empty_page(self, client):
        body = client.get("/api/v1/posts", params={"pageNumber": 3}).json()

        assert body == {"pagesCount": 0, "page": 3, "pageSize": 10, "totalCount": 0, "items": []}

    def test_missing_summary_is_a_server_error(self, client, post):
        with patch(
            "app.services.reactions.aggregator.ReactionAggregator.summary_for",
            side_effect=ReadModelIntegrityError("missing"),
        ):
            response = client.get("/api/v1/posts")

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "READ_MODEL_INTEGRITY"
