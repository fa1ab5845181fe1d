from __future__ import annotations

import io
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from flask import Flask, current_app, jsonify, request, send_file

from qr_forge import generator
from qr_forge.constants import ErrorCorrectionLevel
from qr_forge.exceptions import QRError
from qr_forge.model import QRModel
from qr_forge.render import render_image, render_svg

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "QR_DEFAULT_ECC": "H",
    "QR_BOX_SIZE": 10,
    "QR_BORDER": 4,
    "QR_MAX_TEXT_LENGTH": 1000,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class QRRequest:
    data: str
    error_correction: ErrorCorrectionLevel
    border: int
    box_size: int

    @staticmethod
    def _build_payload(payload: Mapping[str, object], max_text_length: int) -> str:
        kind = str(payload.get("type") or "text").lower()
        if kind == "text":
            return generator.build_text_payload(str(payload.get("data") or ""), max_length=max_text_length)
        if kind == "contact":
            return generator.build_vcard_payload(
                str(payload.get("name") or ""),
                str(payload.get("phone") or ""),
                str(payload.get("email") or ""),
                str(payload.get("address") or ""),
            )
        if kind == "wifi":
            auth = payload.get("auth")
            return generator.build_wifi_payload(
                str(payload.get("ssid") or ""),
                password=str(payload.get("password") or ""),
                auth=str(auth) if auth else None,
                hidden=_as_bool(payload.get("hidden", False)),
            )
        raise ValueError(f"unknown payload type: {kind}")

    @classmethod
    def from_payload(cls, payload: Mapping[str, object], config: Mapping[str, Any]) -> "QRRequest":
        data = cls._build_payload(payload, int(config["QR_MAX_TEXT_LENGTH"]))

        error_correction = ErrorCorrectionLevel.parse(
            str(payload.get("errorCorrection") or config["QR_DEFAULT_ECC"])
        )

        try:
            border = int(payload.get("border", config["QR_BORDER"]))
        except (TypeError, ValueError) as exc:
            raise ValueError("border must be an integer") from exc
        if border < 0:
            raise ValueError("border must be zero or positive")

        try:
            box_size = int(payload.get("boxSize", config["QR_BOX_SIZE"]))
        except (TypeError, ValueError) as exc:
            raise ValueError("boxSize must be an integer") from exc
        if not 1 <= box_size <= 100:
            raise ValueError("boxSize must be between 1 and 100")

        return cls(data=data, error_correction=error_correction, border=border, box_size=box_size)


def _read_payload() -> Dict[str, object]:
    if request.method == "GET":
        return {key: value for key, value in request.args.items()}
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        payload = {}
    return payload


def _encode_request():
    qr_request = QRRequest.from_payload(_read_payload(), current_app.config)
    qr = QRModel.encode_text(qr_request.data, qr_request.error_correction)
    return qr_request, qr


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("QR_FORGE")
    if config:
        app.config.from_mapping(config)

    @app.errorhandler(QRError)
    @app.errorhandler(ValueError)
    def bad_request(exc: Exception):
        logger.info("rejected QR request: %s", exc)
        return jsonify({"message": str(exc)}), 400

    @app.route("/api/qr-preview", methods=["GET", "POST"])
    def qr_preview():
        qr_request, qr = _encode_request()
        image = render_image(qr, box_size=qr_request.box_size, border=qr_request.border)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        buffer.seek(0)
        return send_file(buffer, mimetype="image/png")

    @app.route("/api/qr-svg", methods=["GET", "POST"])
    def qr_svg():
        qr_request, qr = _encode_request()
        svg = render_svg(qr, box_size=qr_request.box_size, border=qr_request.border)
        return app.response_class(svg, mimetype="image/svg+xml")

    @app.route("/api/qr-matrix", methods=["GET", "POST"])
    def qr_matrix():
        _, qr = _encode_request()
        return jsonify(
            {
                "version": qr.version,
                "errorCorrection": qr.error_correction_level.name,
                "mask": qr.mask_pattern,
                "moduleCount": qr.module_count,
                "modules": [[int(value) for value in row] for row in qr.get_matrix()],
            }
        )

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(host="0.0.0.0", port=5000, debug=True)
