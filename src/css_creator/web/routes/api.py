from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from css_creator.errors import ValidationError
from css_creator.generator import CssCreator
from css_creator.model.element import ElementType

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/stylesheet", methods=["OPTIONS"])
def stylesheet_preflight():
    """Handle CORS preflight for stylesheet generation."""
    return "", 204


@api_bp.route("/element-types")
def element_types():
    """List the supported element types."""
    return jsonify({"types": [str(t) for t in ElementType]})


@api_bp.route("/stylesheet", methods=["POST"])
def create_stylesheet():
    """Generate a stylesheet from a JSON list of elements."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
        return jsonify({"error": "elements list required"}), 400

    generator = CssCreator(config=current_app.extensions["css_creator_config"])
    for index, item in enumerate(data["elements"]):
        if not isinstance(item, dict) or "type" not in item:
            return jsonify({"error": "each element needs a type", "index": index}), 400
        properties = item.get("properties") or {}
        if not isinstance(properties, dict):
            return jsonify({"error": "properties must be an object", "index": index}), 400
        try:
            generator.add_element(item["type"], properties)
        except ValidationError as exc:
            return jsonify({"error": str(exc), "index": index}), 400

    return jsonify(generator.to_dict())
