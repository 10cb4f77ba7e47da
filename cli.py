import click
from sqlalchemy.exc import IntegrityError

from models import db, Post

SAMPLE_POSTS = [
    ("Hello, world", "First post on the new site. More to come."),
    ("Setting up the stack", "Flask, SQLAlchemy and a sprinkle of Jinja templates."),
    ("Notes on testing", "A handful of pytest fixtures go a long way."),
    ("Deploying to Render", "Gunicorn, a Postgres add-on and a DATABASE_URL."),
    ("What I'm reading", "A short list of books and articles from this month."),
]


def register_commands(app):
    @app.cli.command("init-db")
    @click.option("--drop", is_flag=True, help="Drop existing tables first.")
    def init_db(drop):
        """Create the posts table."""
        if drop:
            db.drop_all()
        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("create-post")
    @click.argument("title")
    @click.option("--content", required=True, help="Post body.")
    @click.option("--slug", default=None, help="URL slug (derived from title if omitted).")
    def create_post(title, content, slug):
        """Insert a single post."""
        try:
            post = Post.create(title=title, content=content, slug=slug)
        except ValueError as e:
            raise click.ClickException(str(e))
        except IntegrityError:
            raise click.ClickException(f"Slug already in use: {slug}")
        click.echo(f"Created post {post.id} ({post.slug})")

    @app.cli.command("seed-posts")
    @click.option("--count", default=len(SAMPLE_POSTS), show_default=True, type=click.IntRange(min=1))
    def seed_posts(count):
        """Insert sample posts in creation order."""
        for i in range(count):
            title, content = SAMPLE_POSTS[i % len(SAMPLE_POSTS)]
            if i >= len(SAMPLE_POSTS):
                title = f"{title} ({i + 1})"
            Post.create(title=title, content=content)
        click.echo(f"Seeded {count} posts.")
