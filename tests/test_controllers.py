from __future__ import annotations

from datetime import date, timedelta

from src.employee_management.employee_management.core.exceptions import QueryFailedError


def _form(departments, **overrides):
    form = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@x.com",
        "hire_date": "2020-01-01",
        "salary": "50000",
        "department_id": str(departments["IT"].id),
    }
    form.update(overrides)
    return form


def test_home_redirects_to_dashboard(client):
    resp = client.get("/")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/dashboard")


def test_dashboard_renders(client, add_employee):
    add_employee("Jane", "Doe", salary="40000")
    add_employee("John", "Roe", salary="60000")

    resp = client.get("/dashboard?search=jane")

    assert resp.status_code == 200
    assert b"50,000.00" in resp.data
    assert b"Search results for" in resp.data


def test_employee_list_with_bad_paging_params_uses_defaults(client, add_employee):
    add_employee("Jane", "Doe")

    resp = client.get("/employees?page=abc&pageSize=-3&sortBy=nope&sortDir=sideways")

    assert resp.status_code == 200
    assert b"Jane" in resp.data


def test_create_employee_redirects_and_persists(client, container, departments):
    resp = client.post("/employees/create", data=_form(departments))

    assert resp.status_code == 302
    result = container.employee_service.get_paged("jane@x.com", 1, 10, "email", "asc")
    assert result.total_count == 1
    assert result.items[0].department.name == "IT"


def test_create_employee_shows_field_errors(client, container, departments):
    resp = client.post("/employees/create", data=_form(departments, email="not-an-email", salary="0"))

    assert resp.status_code == 200
    assert b"valid email address" in resp.data
    assert b"Salary must be greater than 0." in resp.data
    assert container.employee_service.get_paged(None, 1, 10, "lastname", "asc").total_count == 0


def test_create_employee_rejects_future_hire_date(client, departments):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    resp = client.post("/employees/create", data=_form(departments, hire_date=tomorrow))

    assert resp.status_code == 200
    assert b"cannot be in the future" in resp.data


def test_details_and_edit_pages(client, add_employee):
    employee = add_employee("Jane", "Doe")

    assert client.get(f"/employees/{employee.id}").status_code == 200
    resp = client.get(f"/employees/{employee.id}/edit")
    assert resp.status_code == 200
    assert b'value="Jane"' in resp.data


def test_missing_employee_is_404(client):
    assert client.get("/employees/999").status_code == 404
    assert client.get("/employees/999/edit").status_code == 404
    assert client.get("/employees/999/delete").status_code == 404


def test_edit_updates_employee(client, container, add_employee, departments):
    employee = add_employee("Jane", "Doe")

    resp = client.post(
        f"/employees/{employee.id}/edit",
        data=_form(departments, id=str(employee.id), first_name="Janet", department_id=str(departments["HR"].id)),
    )

    assert resp.status_code == 302
    updated = container.employee_service.get_by_id(employee.id)
    assert updated.first_name == "Janet"
    assert updated.department.name == "HR"


def test_edit_with_mismatched_id_is_404(client, add_employee, departments):
    employee = add_employee("Jane", "Doe")

    resp = client.post(f"/employees/{employee.id}/edit", data=_form(departments, id=str(employee.id + 1)))

    assert resp.status_code == 404


def test_delete_is_idempotent(client, container, add_employee):
    employee = add_employee("Jane", "Doe")

    assert client.post(f"/employees/{employee.id}/delete").status_code == 302
    assert client.post(f"/employees/{employee.id}/delete").status_code == 302
    assert container.employee_service.get_by_id(employee.id) is None


def test_export_csv_contains_filtered_rows(client, add_employee):
    add_employee("Jane", "Doe", email="jane@x.com")
    add_employee("John", "Roe", email="john@x.com")

    resp = client.get("/employees/export?search=jane")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    body = resp.data.decode("utf-8-sig")
    assert body.splitlines()[0] == "id,first_name,last_name,email,hire_date,salary,department"
    assert "jane@x.com" in body
    assert "john@x.com" not in body


def test_department_pages(client, add_employee, departments):
    add_employee("Jane", "Doe", department="HR")

    assert client.get("/departments").status_code == 200
    resp = client.get(f"/departments/{departments['HR'].id}")
    assert resp.status_code == 200
    assert b"Jane Doe" in resp.data


def test_department_create_and_duplicate(client, container):
    assert client.post("/departments/create", data={"name": "Legal"}).status_code == 302

    resp = client.post("/departments/create", data={"name": "legal"})
    assert resp.status_code == 200
    assert b"already exists" in resp.data


def test_deleting_department_in_use_is_blocked(client, container, add_employee, departments):
    add_employee(department="IT")
    it_id = departments["IT"].id

    resp = client.post(f"/departments/{it_id}/delete", follow_redirects=True)

    assert resp.status_code == 200
    assert b"cannot be deleted" in resp.data
    assert container.department_service.get_by_id(it_id) is not None


def test_deleting_empty_department(client, container, departments):
    resp = client.post(f"/departments/{departments['Marketing'].id}/delete")

    assert resp.status_code == 302
    assert container.department_service.get_by_id(departments["Marketing"].id) is None


def test_unexpected_errors_redirect_to_error_page(client, container, monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise QueryFailedError("Error retrieving employees: disk I/O error")

    monkeypatch.setattr(container.employee_service, "get_paged", boom)

    resp = client.get("/employees", headers={"User-Agent": "pytest-agent"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/error")
    assert "pytest-agent" in caplog.text
    assert "/employees" in caplog.text

    error_page = client.get("/error")
    assert error_page.status_code == 500
    assert b"An error occurred" in error_page.data
