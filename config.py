import os
from dotenv import load_dotenv

load_dotenv()


def _database_url():
    url = os.getenv("DATABASE_URL", "sqlite:///portfolio.db")
    # Render and Heroku still hand out the old scheme
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # Use DATABASE_URL from environment (Postgres on Render), SQLite locally
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SITE_OWNER = os.getenv("SITE_OWNER", "Your Name")
    SITE_TAGLINE = os.getenv("SITE_TAGLINE", "Developer, writer, tinkerer.")
    LATEST_POSTS_COUNT = int(os.getenv("LATEST_POSTS_COUNT", "3"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LATEST_POSTS_COUNT = 3
