"""Dashboard UI Routes — rendered page, fragments and form posts.

Tests:
    - Page and fragments render current store contents
    - Form posts redirect (303) with a notice; failures surface in the notice
    - Errors on fragment requests render a notification with the error status
"""

from urllib.parse import parse_qs, urlsplit

from tests.factories import valid_payload


def _notice(response) -> dict:
    query = parse_qs(urlsplit(response.headers["location"]).query)
    return {key: values[0] for key, values in query.items()}


async def test_dashboard_page_renders(seeded_client):
    response = await seeded_client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert "Sarah Johnson" in html
    assert 'data-intern-id="INT-005"' in html
    assert "Total Interns" in html
    assert "New Application" in html


async def test_dashboard_page_filters(seeded_client):
    response = await seeded_client.get("/", params={"department": "Design"})
    html = response.text
    assert "Emily Rodriguez" in html
    assert "Sarah Johnson" not in html
    assert "Found 1 intern(s) matching your filters." in html


async def test_dashboard_page_empty_state(client):
    html = (await client.get("/")).text
    assert "No interns found" in html


async def test_dashboard_page_detail_and_edit(seeded_client):
    html = (await seeded_client.get("/", params={"view": "INT-003", "edit": "INT-002"})).text
    assert 'id="internModal"' in html
    assert "December 15, 2023" in html
    assert "Edit INT-002" in html


async def test_dashboard_page_shows_query_notice(client):
    html = (await client.get("/", params={"notice": "Saved!", "level": "bogus"})).text
    assert "notification-info" in html
    assert "Saved!" in html


async def test_metrics_fragment(seeded_client):
    response = await seeded_client.get("/ui/fragments/metrics")
    assert response.status_code == 200
    assert "Hired This Month" in response.text


async def test_metrics_fragment_error_state(client, store):
    store.path.write_text("garbage", encoding="utf-8")
    response = await client.get("/ui/fragments/metrics")
    assert response.status_code == 500
    assert "Failed to load dashboard metrics" in response.text
    assert "Retry" in response.text


async def test_interns_fragment_filters(seeded_client):
    response = await seeded_client.get("/ui/fragments/interns", params={"search": "patel"})
    assert 'data-intern-id="INT-005"' in response.text
    assert 'data-intern-id="INT-001"' not in response.text


async def test_interns_fragment_bad_sort_is_notification(seeded_client):
    response = await seeded_client.get("/ui/fragments/interns", params={"sortBy": "salary"})
    assert response.status_code == 400
    assert "notification-error" in response.text


async def test_detail_fragment(seeded_client):
    response = await seeded_client.get("/ui/fragments/interns/INT-004")
    assert response.status_code == 200
    assert "David Kim" in response.text
    assert "N/A" in response.text
    assert "I understand this cannot be undone" in response.text


async def test_detail_fragment_active_has_no_delete(seeded_client):
    response = await seeded_client.get("/ui/fragments/interns/INT-001")
    assert "Active interns cannot be deleted" in response.text


async def test_detail_fragment_not_found(seeded_client):
    response = await seeded_client.get("/ui/fragments/interns/INT-999")
    assert response.status_code == 404
    assert "not found" in response.text


async def test_create_from_form_redirects_with_success(client):
    form = valid_payload(skills="SQL, Go", gpa="3.4")
    response = await client.post("/ui/interns", data=form)
    assert response.status_code == 303
    notice = _notice(response)
    assert notice["level"] == "success"
    assert "INT-001" in notice["notice"]

    created = (await client.get("/api/interns/INT-001")).json()["data"]
    assert created["skills"] == ["SQL", "Go"]
    assert created["gpa"] == 3.4


async def test_create_from_form_reports_validation(client):
    response = await client.post("/ui/interns", data={"firstName": "A"})
    assert response.status_code == 303
    notice = _notice(response)
    assert notice["level"] == "error"
    assert notice["notice"].startswith("Please check your form data")


async def test_update_from_form(seeded_client):
    response = await seeded_client.post(
        "/ui/interns/INT-002", data={"notes": "Ready to start", "phone": ""},
    )
    assert response.status_code == 303
    notice = _notice(response)
    assert notice["notice"] == "Intern INT-002 updated: notes."
    assert notice["view"] == "INT-002"


async def test_delete_from_form_needs_checkbox(seeded_client):
    response = await seeded_client.post("/ui/interns/INT-002/delete", data={})
    assert _notice(response)["level"] == "error"
    assert (await seeded_client.get("/api/interns/INT-002")).status_code == 200


async def test_delete_from_form_active_is_warning(seeded_client):
    response = await seeded_client.post("/ui/interns/INT-001/delete", data={"confirm": "on"})
    assert _notice(response)["level"] == "warning"


async def test_delete_from_form(seeded_client):
    response = await seeded_client.post("/ui/interns/INT-003/delete", data={"confirm": "true"})
    assert _notice(response) == {"notice": "Intern INT-003 deleted.", "level": "success"}
    assert (await seeded_client.get("/api/interns/INT-003")).status_code == 404
