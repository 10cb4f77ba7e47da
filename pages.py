from flask import Blueprint, current_app, render_template

from models import Post

pages = Blueprint("pages", __name__)


@pages.route("/")
def index():
    posts = Post.latest(current_app.config["LATEST_POSTS_COUNT"])
    return render_template(
        "index.html",
        owner=current_app.config["SITE_OWNER"],
        tagline=current_app.config["SITE_TAGLINE"],
        posts=posts,
    )


@pages.route("/blog")
def blog():
    return render_template("blog.html", posts=Post.latest())
