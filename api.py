"""JSON blog API: read-only access to posts."""
import logging

from flask import Blueprint, jsonify

from models import Post

api = Blueprint("api", __name__, url_prefix="/api")
logger = logging.getLogger(__name__)

FETCH_FAILED = {"error": "Failed to fetch posts"}
POST_NOT_FOUND = {"error": "Post not found"}

# Largest value a BIGINT / SQLite INTEGER primary key can hold
MAX_POST_ID = 2**63 - 1


def parse_post_id(raw):
    """Return the id as an int, or None when it cannot name any stored post."""
    try:
        post_id = int(raw)
    except ValueError:
        return None
    if post_id < 1 or post_id > MAX_POST_ID:
        return None
    return post_id


@api.route("/posts")
def index():
    try:
        posts = Post.latest()
    except Exception:
        logger.exception("Error listing posts")
        return jsonify(FETCH_FAILED), 500
    return jsonify([p.to_dict() for p in posts]), 200


@api.route("/posts/<post_id>")
def show(post_id):
    parsed = parse_post_id(post_id)
    if parsed is None:
        return jsonify(POST_NOT_FOUND), 404
    try:
        post = Post.find(parsed)
    except Exception:
        logger.exception("Error fetching post %s", parsed)
        return jsonify(FETCH_FAILED), 500
    if post is None:
        return jsonify(POST_NOT_FOUND), 404
    return jsonify(post.to_dict()), 200
