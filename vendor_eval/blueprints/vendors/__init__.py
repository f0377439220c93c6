from flask import Blueprint

bp = Blueprint("vendors", __name__)

from . import routes  # noqa: E402,F401
