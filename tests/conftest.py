"""
Test fixtures for the portfolio site.

Each test gets a fresh app bound to an in-memory SQLite database.
"""

from datetime import datetime, timedelta

import pytest

from app import create_app
from config import TestConfig
from models import db, Post


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def make_post(app):
    """Create posts one minute apart so recency order is unambiguous."""
    base = datetime(2024, 1, 1, 12, 0, 0)
    counter = {"n": 0}

    def _make(title=None, content="Some content.", **fields):
        counter["n"] += 1
        post = Post.create(title=title or f"Post {counter['n']}", content=content, **fields)
        post.created_at = base + timedelta(minutes=counter["n"])
        db.session.commit()
        return post

    return _make


@pytest.fixture
def five_posts(make_post):
    return [make_post() for _ in range(5)]
