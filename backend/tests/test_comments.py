"""Comment creation, threading and the denormalized comment counter."""

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from forum.main import app
from forum.models.comment import Comment
from forum.models.post import Post


def _comment(client, post_id, author, content="Nice", parent_id=None):
    payload = {"post_id": post_id, "author_id": author.user_id, "content": content}
    if parent_id is not None:
        payload["parent_id"] = parent_id
    return client.post("/api/comments", json=payload)


def test_create_comment_resolves_author_and_bumps_counter(client, db, seed_users, seed_courses, make_post):
    ana, luis = seed_users["ana"], seed_users["luis"]
    post = make_post(ana)
    resp = _comment(client, post["post_id"], luis, "Great post")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    comment = body["comment"]
    assert comment["content"] == "Great post"
    assert comment["parent_id"] is None
    assert comment["author"] == {"user_id": luis.user_id, "fullname": "Luis", "avatar": "uploads/avatars/luis.png"}
    assert "email" not in comment["author"]

    stored = db.query(Post).filter(Post.post_id == post["post_id"]).first()
    assert stored.comments_count == 1


def test_counter_matches_comment_rows(client, db, seed_users, seed_courses, make_post):
    ana, luis = seed_users["ana"], seed_users["luis"]
    post = make_post(ana)
    other = make_post(ana, title="other")
    for i in range(7):
        assert _comment(client, post["post_id"], luis if i % 2 else ana, f"c{i}").status_code == 200
    assert _comment(client, other["post_id"], luis).status_code == 200

    for post_id in (post["post_id"], other["post_id"]):
        stored = db.query(Post).filter(Post.post_id == post_id).first()
        db.refresh(stored)
        assert stored.comments_count == db.query(Comment).filter(Comment.post_id == post_id).count()

    feed = {p["post_id"]: p["comments_count"] for p in client.get("/api/posts").json()}
    assert feed[post["post_id"]] == 7
    assert feed[other["post_id"]] == 1


def test_comment_on_missing_post_fails_fast(client, db, seed_users):
    resp = _comment(client, 999, seed_users["ana"])
    assert resp.status_code == 404
    assert db.query(Comment).count() == 0


def test_comment_by_unknown_author(client, db, seed_users, seed_courses, make_post):
    post = make_post(seed_users["ana"])
    resp = client.post("/api/comments", json={"post_id": post["post_id"], "author_id": 999, "content": "hi"})
    assert resp.status_code == 404
    assert db.query(Post).filter(Post.post_id == post["post_id"]).first().comments_count == 0


def test_blank_comment_rejected(client, seed_users, seed_courses, make_post):
    post = make_post(seed_users["ana"])
    resp = _comment(client, post["post_id"], seed_users["ana"], "   ")
    assert resp.status_code == 422


def test_reply_must_target_comment_on_same_post(client, db, seed_users, seed_courses, make_post):
    ana = seed_users["ana"]
    first = make_post(ana, title="first")
    second = make_post(ana, title="second")
    root = _comment(client, first["post_id"], ana).json()["comment"]

    cross = _comment(client, second["post_id"], ana, "reply", parent_id=root["comment_id"])
    assert cross.status_code == 400
    missing = _comment(client, first["post_id"], ana, "reply", parent_id=12345)
    assert missing.status_code == 400
    assert db.query(Post).filter(Post.post_id == second["post_id"]).first().comments_count == 0


def test_list_comments_flat_in_creation_order(client, seed_users, seed_courses, make_post):
    ana, luis = seed_users["ana"], seed_users["luis"]
    post = make_post(ana)
    root = _comment(client, post["post_id"], ana, "root").json()["comment"]
    _comment(client, post["post_id"], luis, "reply", parent_id=root["comment_id"])
    _comment(client, post["post_id"], luis, "second root")

    resp = client.get(f"/api/posts/{post['post_id']}/comments")
    assert resp.status_code == 200
    rows = resp.json()
    assert [c["content"] for c in rows] == ["root", "reply", "second root"]
    assert rows[1]["parent_id"] == root["comment_id"]
    assert rows[1]["author"]["fullname"] == "Luis"
    assert "replies" not in rows[0]


def test_list_comments_missing_post(client):
    assert client.get("/api/posts/999/comments").status_code == 404


def test_comment_tree(client, seed_users, seed_courses, make_post):
    ana, luis = seed_users["ana"], seed_users["luis"]
    post = make_post(ana)
    root = _comment(client, post["post_id"], ana, "root").json()["comment"]
    reply = _comment(client, post["post_id"], luis, "reply", parent_id=root["comment_id"]).json()["comment"]
    _comment(client, post["post_id"], ana, "nested", parent_id=reply["comment_id"])
    _comment(client, post["post_id"], luis, "other root")

    tree = client.get(f"/api/posts/{post['post_id']}/comments/tree").json()
    assert [n["content"] for n in tree] == ["root", "other root"]
    assert [n["content"] for n in tree[0]["replies"]] == ["reply"]
    assert [n["content"] for n in tree[0]["replies"][0]["replies"]] == ["nested"]
    assert tree[1]["replies"] == []


def test_concurrent_comments_keep_counter_exact(client, db, seed_users, seed_courses, make_post):
    ana, luis = seed_users["ana"], seed_users["luis"]
    post = make_post(ana)
    authors = [ana.user_id, luis.user_id]

    def send(i):
        resp = TestClient(app).post(
            "/api/comments",
            json={"post_id": post["post_id"], "author_id": authors[i % 2], "content": f"c{i}"},
        )
        return resp.status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(send, range(40)))

    assert set(statuses) == {200}
    stored = db.query(Post).filter(Post.post_id == post["post_id"]).first()
    db.refresh(stored)
    assert stored.comments_count == 40
    assert db.query(Comment).filter(Comment.post_id == post["post_id"]).count() == 40
