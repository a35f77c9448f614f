# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from flask import Blueprint, Response, jsonify, render_template

from fintrack.shared.config.settings import LedgerConfig

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SERVICE_WORKER = """\
self.addEventListener('install', () => self.skipWaiting());
self.addEventListener('fetch', () => {});
"""


def _icon_data_uri(symbol: str) -> str:
    svg = (
        "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>"
        f"<text y='.9em' font-size='90'>{symbol}</text></svg>"
    )
    return "data:image/svg+xml," + quote(svg, safe="/:=' ")


class FrontendController:
    """Serves the installable single-page client."""

    def __init__(self, *, ledger: LedgerConfig | None = None) -> None:
        self._ledger = ledger or LedgerConfig()  # type: ignore[call-arg]

    def index(self) -> str:
        return render_template(
            "index.html",
            currency=self._ledger.currency_symbol,
            locale=self._ledger.force_locale,
        )

    def manifest(self) -> Response:
        response = jsonify(
            {
                "name": "Finance Tracker",
                "short_name": "Finance",
                "start_url": "/",
                "display": "standalone",
                "background_color": "#1a1a1a",
                "theme_color": "#1a1a1a",
                "icons": [
                    {
                        "src": _icon_data_uri(self._ledger.currency_symbol),
                        "sizes": "192x192",
                        "type": "image/svg+xml",
                    }
                ],
            }
        )
        response.mimetype = "application/manifest+json"
        return response

    def service_worker(self) -> Response:
        return Response(SERVICE_WORKER, mimetype="application/javascript")

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("frontend", __name__, template_folder=str(TEMPLATES_DIR))
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/manifest.json", view_func=self.manifest, methods=["GET"])
        bp.add_url_rule("/sw.js", view_func=self.service_worker, methods=["GET"])
        return bp
