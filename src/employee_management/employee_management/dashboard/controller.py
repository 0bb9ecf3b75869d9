from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        return redirect(url_for("dashboard"))

    @app.route("/dashboard", endpoint="dashboard")
    def dashboard():
        stats = container.dashboard_service.build(request.args.get("search"))
        return render_template("dashboard/index.html", stats=stats, active_page="dashboard")
