import re
import unicodedata
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import IntegrityError

db = SQLAlchemy()

# Fields that may be set from a mapping (CLI input, seed data)
FILLABLE = ("title", "slug", "content")


def utcnow():
    return datetime.now(timezone.utc)


def isoformat_utc(value):
    """ISO 8601 with an explicit offset; naive values (SQLite) are stored as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def slugify(text: str) -> str:
    """Lowercase ASCII slug: 'Hello, World!' -> 'hello-world'."""
    text = unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return text or "post"


def unique_slug(title: str) -> str:
    base = slugify(title)
    candidate = base
    i = 2
    while db.session.execute(db.select(Post.id).filter_by(slug=candidate)).first():
        candidate = f"{base}-{i}"
        i += 1
    return candidate


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(160), nullable=False)
    slug = db.Column(db.String(180), unique=True, nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Post {self.id} {self.slug!r}>"

    @classmethod
    def fill(cls, data):
        """Build a Post from the allowlisted keys of ``data``; the rest is dropped."""
        return cls(**{k: v for k, v in data.items() if k in FILLABLE})

    @classmethod
    def create(cls, **fields):
        post = cls.fill(fields)
        post.title = (post.title or "").strip()
        post.content = (post.content or "").strip()
        if not (post.title and post.content):
            raise ValueError("title and content are required")
        post.slug = slugify(post.slug) if post.slug else unique_slug(post.title)
        db.session.add(post)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise
        return post

    @classmethod
    def latest(cls, limit=None):
        """Most recent first; id breaks ties between rows sharing a timestamp."""
        query = db.select(cls).order_by(cls.created_at.desc(), cls.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return db.session.execute(query).scalars().all()

    @classmethod
    def find(cls, post_id):
        return db.session.get(cls, post_id)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "content": self.content,
            "created_at": isoformat_utc(self.created_at),
            "updated_at": isoformat_utc(self.updated_at),
        }
