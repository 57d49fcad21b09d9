from __future__ import annotations

from employee_records.database.bootstrap import seed_employees


def test_index_empty(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Employees" in resp.data
    assert b'class="employee"' not in resp.data


def test_index_lists_all_employees(seeded, client):
    resp = client.get("/")
    html = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert html.count('class="employee"') == 9
    assert "John Doe" in html
    assert "hi@example.com" in html
    assert "52 years old." in html
    assert "Hired: 2012-03-03" in html


def test_index_renders_status_labels(seeded, client):
    html = client.get("/").get_data(as_text=True)

    assert html.count("(Active)") == 7
    assert html.count("(Out of Office)") == 2


def test_employees_first_page(seeded, client):
    resp = client.get("/employees")
    html = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert html.count('class="employee"') == 2
    assert "John Doe" in html
    assert "Mary Doe" in html
    assert "page=2" in html


def test_employees_last_page(seeded, client):
    html = client.get("/employees?page=5").get_data(as_text=True)

    assert html.count('class="employee"') == 1
    assert "Mary Park" in html


def test_employees_page_out_of_range(seeded, client):
    resp = client.get("/employees?page=6")

    assert resp.status_code == 404
    assert b"Page Not Found" in resp.data


def test_employees_active_filter(seeded, client):
    html = client.get("/employees?active=0").get_data(as_text=True)

    assert html.count('class="employee"') == 2
    assert "Jane Tanaka" in html
    assert "Harold Ishida" in html


def test_unknown_url_uses_404_page(client):
    resp = client.get("/does-not-exist")

    assert resp.status_code == 404
    assert b"Back to the employee list" in resp.data


def test_reseeding_keeps_nine_cards(seeded, client):
    seed_employees()

    assert client.get("/").get_data(as_text=True).count('class="employee"') == 9
