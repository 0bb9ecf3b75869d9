from __future__ import annotations

import csv
import io
import logging

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today_local
from ..common.request_args import int_arg, optional_int_arg
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, UNBOUNDED_PAGE_SIZE
from ..core.exceptions import BusinessRuleError, ValidationError
from ..container import Container
from .model import Employee
from .validation import validate_employee_form

logger = logging.getLogger(__name__)

NON_FIELD_ERRORS = "__all__"

EXPORT_FIELDS = ["id", "first_name", "last_name", "email", "hire_date", "salary", "department"]


def _form_values(employee: Employee) -> dict:
    return {
        "id": str(employee.id or ""),
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "email": employee.email,
        "hire_date": employee.hire_date.isoformat(),
        "salary": str(employee.salary),
        "department_id": str(employee.department_id or ""),
    }


def register(app: Flask, container: Container) -> None:
    def _listing_state() -> dict:
        args = request.args
        return {
            "search": args.get("search") or None,
            "page": int_arg(args, "page", DEFAULT_PAGE),
            "page_size": int_arg(
                args,
                "pageSize",
                int(app.config.get("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)),
                maximum=int(app.config.get("MAX_PAGE_SIZE", MAX_PAGE_SIZE)),
            ),
            "sort_by": args.get("sortBy") or "LastName",
            "sort_dir": args.get("sortDir") or "asc",
            "department_id": optional_int_arg(args, "departmentId"),
        }

    def _department_ids(departments) -> set[int]:
        return {int(d.id) for d in departments}

    def _load_or_404(employee_id: int) -> Employee:
        employee = container.employee_service.get_by_id(employee_id)
        if employee is None:
            abort(404)
        return employee

    @app.route("/employees", endpoint="employees_index")
    def employees_index():
        state = _listing_state()
        result = container.employee_service.get_paged(
            state["search"],
            state["page"],
            state["page_size"],
            state["sort_by"],
            state["sort_dir"],
            state["department_id"],
        )
        return render_template(
            "employees/index.html",
            result=result,
            state=state,
            departments=container.department_service.get_all(),
            active_page="employees",
        )

    @app.route("/employees/export", endpoint="employees_export")
    def employees_export():
        state = _listing_state()
        result = container.employee_service.get_paged(
            state["search"], 1, UNBOUNDED_PAGE_SIZE, state["sort_by"], state["sort_dir"], state["department_id"]
        )

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for e in result.items:
            writer.writerow(
                {
                    "id": e.id,
                    "first_name": e.first_name,
                    "last_name": e.last_name,
                    "email": e.email,
                    "hire_date": e.hire_date.isoformat(),
                    "salary": str(e.salary),
                    "department": e.department.name if e.department else "",
                }
            )

        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=employees.csv"},
        )

    @app.route("/employees/<int:employee_id>", endpoint="employees_details")
    def employees_details(employee_id: int):
        return render_template("employees/details.html", employee=_load_or_404(employee_id), active_page="employees")

    @app.route("/employees/create", methods=["GET", "POST"], endpoint="employees_create")
    def employees_create():
        departments = container.department_service.get_all()
        values: dict = {}
        errors: dict = {}

        if request.method == "POST":
            values = request.form.to_dict()
            try:
                employee = validate_employee_form(
                    request.form, department_ids=_department_ids(departments), today=today_local()
                )
                container.employee_service.create(employee)
                flash("Employee created successfully.", "success")
                return redirect(url_for("employees_index"))
            except ValidationError as e:
                errors = e.errors or {NON_FIELD_ERRORS: str(e)}
            except BusinessRuleError as e:
                logger.warning("Error creating employee: %s", e)
                errors = {NON_FIELD_ERRORS: str(e)}

        return render_template(
            "employees/form.html",
            mode="create",
            values=values,
            errors=errors,
            departments=departments,
            active_page="employees",
        )

    @app.route("/employees/<int:employee_id>/edit", methods=["GET", "POST"], endpoint="employees_edit")
    def employees_edit(employee_id: int):
        departments = container.department_service.get_all()
        errors: dict = {}

        if request.method == "POST":
            posted_id = (request.form.get("id") or "").strip()
            if posted_id != str(employee_id):
                abort(404)

            values = request.form.to_dict()
            try:
                employee = validate_employee_form(
                    request.form,
                    department_ids=_department_ids(departments),
                    today=today_local(),
                    employee_id=employee_id,
                )
                if not container.employee_service.update(employee):
                    abort(404)
                flash("Employee updated successfully.", "success")
                return redirect(url_for("employees_index"))
            except ValidationError as e:
                errors = e.errors or {NON_FIELD_ERRORS: str(e)}
            except BusinessRuleError as e:
                logger.warning("Error updating employee %s: %s", employee_id, e)
                errors = {NON_FIELD_ERRORS: str(e)}
        else:
            values = _form_values(_load_or_404(employee_id))

        return render_template(
            "employees/form.html",
            mode="edit",
            employee_id=employee_id,
            values=values,
            errors=errors,
            departments=departments,
            active_page="employees",
        )

    @app.route("/employees/<int:employee_id>/delete", methods=["GET", "POST"], endpoint="employees_delete")
    def employees_delete(employee_id: int):
        if request.method == "POST":
            container.employee_service.delete(employee_id)
            flash("Employee deleted successfully.", "success")
            return redirect(url_for("employees_index"))

        return render_template("employees/delete.html", employee=_load_or_404(employee_id), active_page="employees")
