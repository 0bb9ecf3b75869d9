from __future__ import annotations

import logging

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..common.request_args import int_arg
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.exceptions import DepartmentInUseError, ValidationError
from ..container import Container
from .model import Department

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _load_or_404(department_id: int) -> Department:
        department = container.department_service.get_by_id(department_id)
        if department is None:
            abort(404)
        return department

    @app.route("/departments", endpoint="departments_index")
    def departments_index():
        departments = container.department_service.get_all()
        return render_template("departments/index.html", departments=departments, active_page="departments")

    @app.route("/departments/<int:department_id>", endpoint="departments_details")
    def departments_details(department_id: int):
        department = _load_or_404(department_id)
        employees = container.employee_service.get_paged(
            None,
            int_arg(request.args, "page", DEFAULT_PAGE),
            int(app.config.get("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)),
            request.args.get("sortBy"),
            request.args.get("sortDir"),
            department.id,
        )
        return render_template(
            "departments/details.html",
            department=department,
            employees=employees,
            active_page="departments",
        )

    @app.route("/departments/create", methods=["GET", "POST"], endpoint="departments_create")
    def departments_create():
        values: dict = {}
        errors: dict = {}
        if request.method == "POST":
            values = request.form.to_dict()
            try:
                container.department_service.create(Department(id=None, name=request.form.get("name", "")))
                flash("Department created successfully.", "success")
                return redirect(url_for("departments_index"))
            except ValidationError as e:
                errors = e.errors or {"name": str(e)}

        return render_template(
            "departments/form.html", mode="create", values=values, errors=errors, active_page="departments"
        )

    @app.route("/departments/<int:department_id>/edit", methods=["GET", "POST"], endpoint="departments_edit")
    def departments_edit(department_id: int):
        errors: dict = {}
        if request.method == "POST":
            values = request.form.to_dict()
            try:
                updated = container.department_service.update(
                    Department(id=department_id, name=request.form.get("name", ""))
                )
                if not updated:
                    abort(404)
                flash("Department updated successfully.", "success")
                return redirect(url_for("departments_index"))
            except ValidationError as e:
                errors = e.errors or {"name": str(e)}
        else:
            department = _load_or_404(department_id)
            values = {"name": department.name}

        return render_template(
            "departments/form.html",
            mode="edit",
            department_id=department_id,
            values=values,
            errors=errors,
            active_page="departments",
        )

    @app.route("/departments/<int:department_id>/delete", methods=["GET", "POST"], endpoint="departments_delete")
    def departments_delete(department_id: int):
        if request.method == "POST":
            try:
                container.department_service.delete(department_id)
                flash("Department deleted successfully.", "success")
                return redirect(url_for("departments_index"))
            except DepartmentInUseError as e:
                logger.warning("Blocked department delete: %s", e)
                flash(str(e), "danger")
                return redirect(url_for("departments_delete", department_id=department_id))

        return render_template(
            "departments/delete.html", department=_load_or_404(department_id), active_page="departments"
        )
