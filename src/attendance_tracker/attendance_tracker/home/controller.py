from __future__ import annotations

from flask import Flask, redirect, render_template, url_for

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return render_template("index.html", title="Home")

    @app.errorhandler(404)
    def not_found(_error):
        # Unknown URLs land on the home page.
        return redirect(url_for("index"))
