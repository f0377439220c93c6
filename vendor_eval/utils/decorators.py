from functools import wraps
from flask import abort, jsonify
from flask_login import current_user


def admin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user.is_authenticated:
            abort(401)
        if getattr(current_user, "role", None) != "admin":
            abort(403)
        return view(*args, **kwargs)
    return wrapped


def feature_required(toggle):
    """Answer 403 while the AdminSettings toggle ``toggle`` is switched off."""
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            from ..models.admin_settings import AdminSettings
            if not getattr(AdminSettings.get(), toggle):
                feature = toggle.replace("_enabled", "")
                return jsonify({"error": f"{feature} disabled"}), 403
            return view(*args, **kwargs)
        return wrapped
    return decorator
