from datetime import datetime
from argparse import ArgumentParser

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import BaseModel, ValidationError

from yamlindent import detect_indentation, IndentationDetectionError
from yamlindent.connection import submit_record
from yamlindent.utils.constants import DEFAULT_PORT

import logging

log = logging.getLogger(__name__)


app = Flask(__name__)
CORS(app, resources={r"/*": {"origins": "*"}})


class DetectRequest(BaseModel):
    yaml: str


@app.route("/detect", methods=["POST"])
def detect():
    try:
        data = DetectRequest.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False)}), 422

    in_time = datetime.now()
    spaces = None
    error = None
    try:
        indentation = detect_indentation(data.yaml)
        spaces = indentation.spaces if indentation is not None else None
    except IndentationDetectionError as e:
        error = e

    try:
        submit_record(
            table="detections",
            in_yaml=data.yaml,
            in_time=in_time,
            spaces=spaces,
            error=None if error is None else f"{type(error).__name__}: {error}",
        )
    except Exception as e:
        log.error("Error submitting record (non-critical): %s", e)

    if error is not None:
        return jsonify({"error": str(error), "kind": type(error).__name__}), 400
    return jsonify({"spaces": spaces})


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--port", default=DEFAULT_PORT, type=str, required=False)
    args = parser.parse_args()
    app.run(host="0.0.0.0", port=args.port)
