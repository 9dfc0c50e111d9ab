from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import parse_flag, require_mapping
from ..container import Container
from ..core.exceptions import AnswerRejectedError, ValidationError
from ..responses.schema import is_well_formed_answer


def register(app: Flask, container: Container) -> None:
    def _answer_from_request():
        return require_mapping(request.get_json(silent=True), "Request body")

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/answers/validate", methods=["POST"], endpoint="validate_answer")
    def validate_answer():
        try:
            answer = _answer_from_request()
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        result = container.validator.validate(answer, auto_fix=parse_flag(request.args.get("autoFix")))
        return jsonify(
            {
                "success": True,
                "result": result.to_dict(),
                "wellFormed": is_well_formed_answer(answer),
            }
        )

    @app.route("/api/answers/review", methods=["POST"], endpoint="review_answer")
    def review_answer():
        try:
            answer = _answer_from_request()
            reviewed = container.review_service.review(answer)
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except AnswerRejectedError as e:
            return jsonify({"success": False, "error": str(e), "result": e.result.to_dict()}), 422

        return jsonify({"success": True, "answer": reviewed})
