from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.employee_management.employee_management.database.connection import db
from src.employee_management.employee_management.database.tables import EmployeeRecord


def _ids(result):
    return [e.id for e in result.items]


def test_created_employee_comes_back_with_its_department(container, add_employee):
    created = add_employee("Jane", "Doe", email="jane@x.com", hire_date=date(2020, 1, 1), salary="50000", department="IT")

    loaded = container.employee_service.get_by_id(created.id)

    assert loaded is not None
    assert loaded.first_name == "Jane"
    assert loaded.email == "jane@x.com"
    assert loaded.salary == Decimal("50000")
    assert loaded.department.name == "IT"
    assert loaded.department.employee_count is None


@pytest.mark.parametrize("sort_by", ["LastName", "salary", "HireDate", "email", "firstname", "bogus"])
@pytest.mark.parametrize("page_size", [1, 3, 4, 7, 50])
def test_pages_cover_the_filtered_set_exactly_once(container, add_employee, sort_by, page_size):
    for i in range(11):
        # Repeated last names and salaries force ties in every sort key.
        add_employee(f"F{i % 3}", f"L{i % 4}", salary=str(1000 + (i % 5)), hire_date=date(2020, 1, 1 + i % 6))

    service = container.employee_service
    everything = service.get_paged(None, 1, 1000, sort_by, "asc")

    collected = []
    page = 1
    while True:
        result = service.get_paged(None, page, page_size, sort_by, "asc")
        assert len(result.items) <= page_size
        assert result.total_count == 11
        if not result.items:
            break
        collected.extend(_ids(result))
        page += 1

    assert collected == _ids(everything)
    assert len(set(collected)) == 11


def test_salary_sorts_numerically(container, add_employee):
    add_employee("A", "Ten", salary="10.00")
    add_employee("B", "NineNinetyNine", salary="9.99")
    add_employee("C", "Hundred", salary="100")

    asc = container.employee_service.get_paged(None, 1, 10, "salary", "asc")
    desc = container.employee_service.get_paged(None, 1, 10, "Salary", "DESC")

    assert [e.salary for e in asc.items] == [Decimal("9.99"), Decimal("10.00"), Decimal("100")]
    assert [e.salary for e in desc.items] == [Decimal("100"), Decimal("10.00"), Decimal("9.99")]


def test_hire_date_sorts_chronologically(container, add_employee):
    add_employee("A", "A", hire_date=date(2021, 3, 1))
    add_employee("B", "B", hire_date=date(1999, 12, 31))
    add_employee("C", "C", hire_date=date(2010, 6, 1))

    result = container.employee_service.get_paged(None, 1, 10, "hiredate", "desc")

    assert [e.hire_date.year for e in result.items] == [2021, 2010, 1999]


def test_unknown_sort_field_falls_back_to_last_then_first_name(container, add_employee):
    add_employee("Zoe", "Adams")
    add_employee("Amy", "Baker")
    add_employee("Bob", "Adams")

    for sort_by in ("department", "", None):
        result = container.employee_service.get_paged(None, 1, 10, sort_by, "desc")
        assert [(e.last_name, e.first_name) for e in result.items] == [
            ("Adams", "Bob"),
            ("Adams", "Zoe"),
            ("Baker", "Amy"),
        ]


def test_any_direction_other_than_desc_is_ascending(container, add_employee):
    add_employee("B", "B")
    add_employee("A", "A")

    for direction in ("asc", "descending", "", None, "up"):
        result = container.employee_service.get_paged(None, 1, 10, "firstname", direction)
        assert [e.first_name for e in result.items] == ["A", "B"]


def test_search_matches_names_and_email(container, add_employee):
    add_employee("Jane", "Doe", email="jane@x.com")
    add_employee("John", "Smith", email="jsmith@corp.io")
    add_employee("Mary", "Janeway", email="mary@x.com")

    by_name = container.employee_service.get_paged("jane", 1, 10, "firstname", "asc")
    by_email = container.employee_service.get_paged("corp.io", 1, 10, "firstname", "asc")

    assert [e.first_name for e in by_name.items] == ["Jane", "Mary"]
    assert [e.first_name for e in by_email.items] == ["John"]


def test_search_treats_like_wildcards_literally(container, add_employee):
    add_employee("Ann", "Lee", email="ann_lee@x.com")
    add_employee("Annie", "Leeds", email="annlee@x.com")

    result = container.employee_service.get_paged("_", 1, 10, "firstname", "asc")

    assert [e.first_name for e in result.items] == ["Ann"]


def test_search_folds_non_ascii_case_like_the_dashboard(container, add_employee):
    add_employee("Émile", "Zola", email="zola@x.com")
    add_employee("Emily", "Stone", email="stone@x.com")

    listing = container.employee_service.get_paged("émile", 1, 10, "firstname", "asc")
    dashboard = container.dashboard_service.build("émile")

    assert [e.first_name for e in listing.items] == ["Émile"]
    assert [e.first_name for e in dashboard.search_results] == ["Émile"]


def test_department_filter(container, add_employee, departments):
    add_employee("A", "A", department="IT")
    add_employee("B", "B", department="HR")
    add_employee("C", "C", department="HR")

    result = container.employee_service.get_paged(None, 1, 10, "firstname", "asc", departments["HR"].id)

    assert result.total_count == 2
    assert {e.department.name for e in result.items} == {"HR"}


def test_total_count_is_computed_before_paging(container, add_employee):
    for i in range(7):
        add_employee(f"F{i}", "Same")

    result = container.employee_service.get_paged(None, 3, 3, "firstname", "asc")

    assert result.total_count == 7
    assert [e.first_name for e in result.items] == ["F6"]
    assert result.total_pages == 3
    assert result.has_previous and not result.has_next


def test_rows_breaking_business_rules_never_show_up(app, container, add_employee, departments):
    add_employee("Valid", "Person")
    db.session.add_all(
        [
            EmployeeRecord(
                first_name="Zero", last_name="Pay", email="zero@x.com",
                hire_date=date(2020, 1, 1), salary=Decimal("0"), department_id=departments["IT"].id,
            ),
            EmployeeRecord(
                first_name="Future", last_name="Hire", email="future@x.com",
                hire_date=date.today() + timedelta(days=10), salary=Decimal("1000"),
                department_id=departments["IT"].id,
            ),
        ]
    )
    db.session.commit()

    result = container.employee_service.get_paged(None, 1, 10, "lastname", "asc")

    assert result.total_count == 1
    assert [e.first_name for e in result.items] == ["Valid"]
