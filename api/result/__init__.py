from flask import Blueprint

result_bp = Blueprint('result', __name__)

from . import routes  # noqa: E402,F401
