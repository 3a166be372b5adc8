"""End-to-end tests for questions, answers, comments, votes and notifications."""

from uuid import uuid4


def _ask(client, title="How do I reverse a list?"):
    response = client.post(
        "/questions",
        json={"title": title, "description": "<p>In place</p>", "tags": ["python"]},
    )
    assert response.status_code == 201, response.text
    return response.json()


def _answer(client, question_id, text="Use list.reverse()"):
    response = client.post("/answers", json={"question_id": question_id, "text": text})
    assert response.status_code == 201, response.text
    return response.json()


class TestQuestions:
    """Question endpoints."""

    def test_create_and_list(self, login_as, client):
        alice = login_as("alice")
        question = _ask(alice)

        response = client.get("/questions")

        assert response.status_code == 200
        (listed,) = response.json()
        assert listed["id"] == question["id"]
        assert listed["author"]["username"] == "alice"
        assert listed["answers_count"] == 0

    def test_each_get_counts_a_view(self, login_as, client):
        question = _ask(login_as("alice"))

        client.get(f"/questions/{question['id']}")
        response = client.get(f"/questions/{question['id']}")

        assert response.json()["views"] == 2

    def test_list_is_unbounded_without_limit(self, login_as, client):
        alice = login_as("alice")
        for i in range(60):
            _ask(alice, title=f"Question number {i}")

        everything = client.get("/questions")
        page = client.get("/questions", params={"limit": 10, "offset": 55})

        assert len(everything.json()) == 60
        assert [q["title"] for q in page.json()] == [
            f"Question number {i}" for i in range(4, -1, -1)
        ]

    def test_create_requires_login(self, client):
        response = client.post("/questions", json={"title": "t", "description": "d"})

        assert response.status_code == 401

    def test_malformed_id_is_400(self, client):
        response = client.get("/questions/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid question ID format"}

    def test_unknown_question_is_404(self, client):
        response = client.get(f"/questions/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Question not found"}

    def test_only_author_can_edit(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        question = _ask(alice)

        denied = bob.patch(f"/questions/{question['id']}", json={"title": "Mine now"})
        allowed = alice.patch(f"/questions/{question['id']}", json={"title": "Better title"})

        assert denied.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["title"] == "Better title"

    def test_delete_removes_answers(self, login_as, client):
        alice = login_as("alice")
        bob = login_as("bob")
        question = _ask(alice)
        answers = [_answer(bob, question["id"], text=f"answer {i}") for i in range(3)]

        response = alice.delete(f"/questions/{question['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Question and related answers deleted",
            "answers_deleted": 3,
        }
        for answer in answers:
            assert client.get(f"/answers/single/{answer['id']}").status_code == 404


class TestAnswers:
    """Answer endpoints."""

    def test_answers_are_listed_newest_first(self, login_as, client):
        alice = login_as("alice")
        bob = login_as("bob")
        question = _ask(alice)
        first = _answer(bob, question["id"], "first")
        second = _answer(bob, question["id"], "second")

        response = client.get(f"/answers/{question['id']}")

        assert [a["id"] for a in response.json()] == [second["id"], first["id"]]
        assert client.get("/questions").json()[0]["answers_count"] == 2

    def test_create_requires_login(self, client):
        response = client.post(
            "/answers", json={"question_id": str(uuid4()), "text": "Anonymous"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_malformed_body_is_rejected_before_login_check(self, client):
        # Body validation runs before the route checks the session cookie
        response = client.post("/answers", json={"text": "No question"})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_camel_case_question_id(self, login_as):
        alice = login_as("alice")
        question = _ask(alice)

        response = alice.post(
            "/answers", json={"questionId": question["id"], "text": "Also works"}
        )

        assert response.status_code == 201

    def test_answer_to_unknown_question_is_404(self, login_as):
        bob = login_as("bob")

        response = bob.post("/answers", json={"question_id": str(uuid4()), "text": "hi"})

        assert response.status_code == 404

    def test_edit_and_delete(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        answer = _answer(bob, _ask(alice)["id"])

        assert alice.patch(f"/answers/{answer['id']}", json={"text": "x"}).status_code == 403
        edited = bob.patch(f"/answers/{answer['id']}", json={"text": "Edited"})
        deleted = bob.delete(f"/answers/{answer['id']}")

        assert edited.json()["text"] == "Edited"
        assert deleted.json() == {"message": "Answer deleted"}


class TestVotes:
    """PATCH /answers/{id}/vote."""

    def test_vote_switch_and_duplicate(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        answer = _answer(bob, _ask(alice)["id"])
        url = f"/answers/{answer['id']}/vote"

        up = alice.patch(url, json={"type": "up"})
        again = alice.patch(url, json={"type": "up"})
        down = alice.patch(url, json={"type": "down"})

        assert up.json()["votes"] == 1
        assert again.status_code == 400
        assert again.json() == {"error": "You have already voted this way"}
        assert down.json()["votes"] == -1
        assert down.json()["voters"] == {alice.user["id"]: "down"}

    def test_invalid_vote_type(self, login_as):
        alice = login_as("alice")
        answer = _answer(alice, _ask(alice)["id"])

        response = alice.patch(f"/answers/{answer['id']}/vote", json={"type": "meh"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid vote type"}

    def test_vote_requires_login(self, login_as, client):
        alice = login_as("alice")
        answer = _answer(alice, _ask(alice)["id"])

        response = client.patch(f"/answers/{answer['id']}/vote", json={"type": "up"})

        assert response.status_code == 401


class TestAccept:
    """PATCH /answers/{id}/accept."""

    def test_asker_accepts_and_switches(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        question = _ask(alice)
        first = _answer(bob, question["id"], "first")
        second = _answer(bob, question["id"], "second")

        alice.patch(f"/answers/{first['id']}/accept")
        response = alice.patch(f"/answers/{second['id']}/accept")

        assert response.status_code == 200
        accepted = [a["id"] for a in response.json() if a["is_accepted"]]
        assert accepted == [second["id"]]

    def test_answerer_cannot_accept(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        answer = _answer(bob, _ask(alice)["id"])

        response = bob.patch(f"/answers/{answer['id']}/accept")

        assert response.status_code == 403


class TestComments:
    """Comment endpoints."""

    def test_comment_shows_up_with_author_then_deleted(self, login_as, client):
        alice = login_as("alice")
        bob = login_as("bob")
        answer = _answer(bob, _ask(alice)["id"])

        created = alice.post(f"/answers/{answer['id']}/comments", json={"text": "Thanks!"})
        fetched = client.get(f"/answers/single/{answer['id']}")

        assert created.status_code == 201
        comment = created.json()
        (embedded,) = fetched.json()["comments"]
        assert embedded["id"] == comment["id"]
        assert embedded["author"]["username"] == "alice"

        denied = bob.delete(f"/answers/{answer['id']}/comments/{comment['id']}")
        removed = alice.delete(f"/answers/{answer['id']}/comments/{comment['id']}")

        assert denied.status_code == 403
        assert removed.status_code == 200
        assert removed.json()["comments"] == []

    def test_unknown_comment_is_404(self, login_as):
        alice = login_as("alice")
        answer = _answer(alice, _ask(alice)["id"])

        response = alice.delete(f"/answers/{answer['id']}/comments/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Comment not found"}


class TestNotifications:
    """Notification feed."""

    def test_answer_and_mention_notifications(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        carol = login_as("carol")
        question = _ask(alice, title="Tabs or spaces?")

        _answer(bob, question["id"], "Spaces. @carol agrees")

        (to_alice,) = alice.get("/notifications").json()
        assert to_alice["type"] == "answer"
        assert to_alice["message"] == 'Someone answered your question: "Tabs or spaces?"'
        assert to_alice["link"] == f"/questions/{question['id']}"
        (to_carol,) = carol.get("/notifications").json()
        assert to_carol["type"] == "mention"
        assert bob.get("/notifications").json() == []

    def test_mark_read(self, login_as):
        alice = login_as("alice")
        bob = login_as("bob")
        answer = _answer(alice, _ask(alice)["id"])
        bob.post(f"/answers/{answer['id']}/comments", json={"text": "Nice"})
        (note,) = alice.get("/notifications").json()

        assert note["read"] is False
        assert bob.patch(f"/notifications/{note['id']}/read").status_code == 404
        response = alice.patch(f"/notifications/{note['id']}/read")

        assert response.status_code == 200
        assert response.json()["read"] is True
        assert alice.get("/notifications").json()[0]["read"] is True

    def test_feed_requires_login(self, client):
        assert client.get("/notifications").status_code == 401
