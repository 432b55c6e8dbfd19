"""Journal API tests.

- GET /api/journal
- POST /api/journal
- GET/PUT/DELETE /api/journal/<id>
- POST /api/journal/preview
- GET /api/journal/calendar
"""

from datetime import datetime

import pytest

from app.extensions import db
from journal.models import JournalEntry, Tag

pytestmark = pytest.mark.integration


def create(client, **overrides):
    payload = {"title": "First", "content": "Hello **there**", "tags": []}
    payload.update(overrides)
    return client.post("/api/journal", json=payload)


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_json()["docs"] == "/apidocs/"


def test_list_empty(client):
    resp = client.get("/api/journal")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_create_entry_with_mood_and_tags(client, moods):
    resp = create(client, mood_id=moods["Happy"], tags=[{"name": "walks", "color": "#8BC34A"}, {"name": "family"}])

    assert resp.status_code == 201
    data = resp.get_json()
    assert data["title"] == "First"
    assert data["mood"]["name"] == "Happy"
    assert sorted(t["name"] for t in data["tags"]) == ["family", "walks"]
    colors = {t["name"]: t["color"] for t in data["tags"]}
    assert colors["walks"] == "#8BC34A"
    assert colors["family"] == "#6B7280"
    assert data["created_at"]


def test_tags_are_shared_by_name(app, client):
    create(client, tags=[{"name": "work", "color": "#111111"}])
    second = create(client, title="Second", tags=[{"name": "work", "color": "#222222"}, {"name": "work"}])

    assert second.status_code == 201
    assert [t["color"] for t in second.get_json()["tags"]] == ["#111111"]
    with app.app_context():
        assert Tag.query.count() == 1


@pytest.mark.parametrize("payload", [
    {"content": "no title"},
    {"title": "no content"},
    {"title": "   ", "content": "blank title"},
    {"title": "bad tags", "content": "x", "tags": [{"color": "#fff"}]},
])
def test_create_requires_title_and_content(client, payload):
    resp = client.post("/api/journal", json=payload)

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "Invalid input"
    assert body["details"]


def test_create_without_json_body(client):
    resp = client.post("/api/journal", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_create_with_unknown_mood(client):
    resp = create(client, mood_id=999)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Mood not found"


def test_get_entry_includes_rendered_html(client):
    entry_id = create(client).get_json()["id"]

    resp = client.get(f"/api/journal/{entry_id}")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["content"] == "Hello **there**"
    assert data["content_html"] == "<p>Hello <strong>there</strong></p>"


def test_get_missing_entry(client):
    resp = client.get("/api/journal/404")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Journal entry not found"


def test_update_replaces_fields_and_keeps_creation_time(app, client, moods, make_entry):
    entry_id = make_entry("Old", datetime(2024, 1, 1, 9), tags=["a", "b"])

    resp = client.put(f"/api/journal/{entry_id}", json={
        "title": "New",
        "content": "Updated",
        "mood_id": moods["Calm"],
        "tags": [{"name": "b"}, {"name": "c", "color": "#333333"}],
    })

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["title"] == "New"
    assert data["content"] == "Updated"
    assert data["mood"]["name"] == "Calm"
    assert sorted(t["name"] for t in data["tags"]) == ["b", "c"]
    assert data["created_at"] == "2024-01-01T09:00:00"
    with app.app_context():
        # Unlinked tags stay available for reuse.
        assert Tag.query.filter_by(name="a").first() is not None


def test_update_clears_mood(client, moods):
    entry_id = create(client, mood_id=moods["Happy"]).get_json()["id"]

    resp = client.put(f"/api/journal/{entry_id}", json={"title": "T", "content": "C"})

    assert resp.status_code == 200
    assert resp.get_json()["mood"] is None


def test_update_validation_and_missing(client):
    entry_id = create(client).get_json()["id"]

    assert client.put(f"/api/journal/{entry_id}", json={"title": "only"}).status_code == 400
    assert client.put(f"/api/journal/{entry_id}", json={"title": "T", "content": "C", "mood_id": 42}).status_code == 400
    assert client.put("/api/journal/999", json={"title": "T", "content": "C"}).status_code == 404


def test_delete_entry(app, client):
    entry_id = create(client, tags=[{"name": "keep"}]).get_json()["id"]

    resp = client.delete(f"/api/journal/{entry_id}")

    assert resp.status_code == 200
    assert client.get(f"/api/journal/{entry_id}").status_code == 404
    assert client.delete(f"/api/journal/{entry_id}").status_code == 404
    with app.app_context():
        assert db.session.get(JournalEntry, entry_id) is None
        assert Tag.query.filter_by(name="keep").count() == 1


def test_list_is_newest_first(client, make_entry):
    make_entry("Older", datetime(2024, 1, 1, 8))
    make_entry("Newer", datetime(2024, 2, 1, 8))

    titles = [e["title"] for e in client.get("/api/journal").get_json()]

    assert titles == ["Newer", "Older"]


def test_list_filters(client, moods, make_entry):
    make_entry("Run", datetime(2024, 1, 10, 8), content="5k", mood_id=moods["Happy"], tags=["sport"])
    make_entry("Meeting", datetime(2024, 1, 11, 8), content="Budget talk", tags=["work"])
    make_entry("Swim", datetime(2024, 1, 12, 8), content="Pool", mood_id=moods["Calm"], tags=["sport"])

    def titles(query):
        return [e["title"] for e in client.get("/api/journal" + query).get_json()]

    tags = {t["name"]: t["id"] for t in client.get("/api/tags").get_json()}

    assert titles("?q=budget") == ["Meeting"]
    assert titles(f"?tag={tags['sport']}") == ["Swim", "Run"]
    assert titles(f"?mood={moods['Calm']}&mood={moods['Happy']}") == ["Swim", "Run"]
    assert titles("?start=2024-01-11&end=2024-01-12") == ["Swim", "Meeting"]
    assert titles("?date=2024-01-10") == ["Run"]


def test_list_rejects_bad_filter(client):
    resp = client.get("/api/journal?start=yesterday")
    assert resp.status_code == 400


def test_preview(client):
    resp = client.post("/api/journal/preview", json={"content": "> hi"})

    assert resp.status_code == 200
    assert resp.get_json() == {"html": "<p><blockquote>hi</blockquote></p>"}


def test_calendar(client, make_entry):
    make_entry("a", datetime(2024, 1, 1, 8))
    make_entry("b", datetime(2024, 1, 1, 20))
    make_entry("c", datetime(2024, 1, 31, 8))
    make_entry("d", datetime(2024, 2, 1, 8))

    resp = client.get("/api/journal/calendar?year=2024&month=1")

    assert resp.status_code == 200
    grid = resp.get_json()
    assert grid["year"] == 2024 and grid["month"] == 1
    assert grid["days"][0] is None
    assert grid["days"][1] == {"date": "2024-01-01", "count": 2}
    assert grid["days"][-1] == {"date": "2024-01-31", "count": 1}
    assert grid["total"] == 3


def test_calendar_defaults_to_current_month_and_rejects_bad_month(client, now):
    grid = client.get("/api/journal/calendar").get_json()
    assert (grid["year"], grid["month"]) == (now.year, now.month)

    assert client.get("/api/journal/calendar?year=2024&month=13").status_code == 400


@pytest.mark.parametrize("mood_id", [0, -3, 10**30])
def test_out_of_range_mood_id_is_invalid_input(client, mood_id):
    resp = create(client, mood_id=mood_id)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid input"


def test_huge_entry_id_is_not_found(client):
    url = f"/api/journal/{10**30}"

    assert client.get(url).status_code == 404
    assert client.put(url, json={"title": "T", "content": "C"}).status_code == 404
    assert client.delete(url).status_code == 404


def test_apidocs_reference_error_definition(client):
    resp = client.get("/apispec.json")

    assert resp.status_code == 200
    spec = resp.get_json()
    assert "Error" in spec["definitions"]
    assert "#/definitions/Error" in resp.get_data(as_text=True)
