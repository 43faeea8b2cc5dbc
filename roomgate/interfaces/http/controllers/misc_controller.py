# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from werkzeug.exceptions import NotFound


class MiscController:
    def __init__(self, *, bind_label: bool, metrics_enabled: bool) -> None:
        self._bind_label = bind_label
        self._metrics_enabled = metrics_enabled

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def health(self):
        return jsonify({"ok": True, "labelBinding": self._bind_label})

    def metrics(self):
        if not self._metrics_enabled:
            raise NotFound()
        return Response(generate_latest(), content_type=CONTENT_TYPE_LATEST)
