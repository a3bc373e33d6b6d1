from flask import current_app, jsonify, request, session
from firebase_admin import auth
from flask_wtf.csrf import generate_csrf

from . import bp


@bp.route("/session_login", methods=["POST"])
def session_login():
    """
    This endpoint is called from the client-side after a successful Firebase login.
    It receives the ID token, verifies it, and creates a server-side session.
    """
    id_token = (request.get_json(silent=True) or {}).get("idToken")
    if not id_token:
        return jsonify({"status": "error", "message": "Missing ID token."}), 400
    try:
        decoded_token = auth.verify_id_token(id_token)
    except Exception as e:
        current_app.logger.error(f"Error during session login: {e}")
        return jsonify({"status": "error", "message": "Invalid token."}), 401

    session.clear()
    session["user_id"] = decoded_token["uid"]
    session["name"] = decoded_token.get("name") or decoded_token.get("email", "")
    return jsonify({"status": "success", "user_id": decoded_token["uid"]})


@bp.route("/logout", methods=["POST"])
def logout():
    """Clear the server-side session."""
    session.clear()
    return jsonify({"status": "success"})


@bp.route("/csrf_token", methods=["GET"])
def csrf_token():
    """Hand a CSRF token to API clients; send it back as X-CSRFToken."""
    return jsonify({"csrf_token": generate_csrf()})
