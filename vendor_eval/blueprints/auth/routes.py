from flask import abort, current_app, flash, jsonify, redirect, render_template, url_for
from flask_login import login_user, logout_user, login_required, current_user
from . import bp
from ...extensions import db
from .forms import LoginForm, SignupForm
from ...models.user import User, ROLE_ADMIN
from ...utils.decorators import admin_required

@bp.route("/login", methods=["GET", "POST"])
def login():
    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(email=form.email.data).first()
        if user and user.check_password(form.password.data):
            login_user(user)
            return redirect(url_for("index"))
        current_app.logger.warning('failed login for %s', form.email.data)
        flash("Invalid credentials", "danger")
    return render_template("auth/login.html", form=form)

@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return redirect(url_for("auth.login"))

@bp.route("/signup", methods=["GET", "POST"])
def signup():
    """First account: anyone, and it becomes admin. Afterwards admins only."""
    form = SignupForm()
    user_exists = User.query.first() is not None
    if user_exists and (not current_user.is_authenticated or current_user.role != ROLE_ADMIN):
        return abort(403)

    if form.validate_on_submit():
        if User.query.filter_by(email=form.email.data).first():
            flash("A user with this email already exists", "danger")
        else:
            role = form.role.data if user_exists else ROLE_ADMIN
            user = User(name=form.name.data, email=form.email.data, role=role)
            user.set_password(form.password.data)
            db.session.add(user)
            db.session.commit()
            current_app.logger.info('user %s created with role %s', user.email, user.role)
            flash("Account created.", "success")
            if user_exists:
                return redirect(url_for("auth.users_index"))
            return redirect(url_for("auth.login"))
    return render_template("auth/signup.html", form=form, user_exists=user_exists)

@bp.get("/me")
@login_required
def me():
    return jsonify(current_user.to_dict())

@bp.route("/users", methods=["GET"])
@admin_required
def users_index():
    users = User.query.order_by(User.id.asc()).all()
    return render_template("auth/users.html", users=users)
