"""
Auth Routes

User authentication routes. Appwrite issues the session; the secret travels
in the session cookie and Flask-Login resolves it back into a user.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import current_user
from appwrite_demo.auth import auth_bp
from appwrite_demo.errors import AppwriteDemoError
from appwrite_demo.services.auth import sign_in, sign_out, sign_up
from appwrite_demo.services.cookies import clear_session_cookie, set_session_cookie


def _is_safe_next(target):
    return bool(target) and target.startswith('/') and not target.startswith('//')


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if current_user.is_authenticated:
        return redirect(url_for('todos.index'))

    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        confirm_password = request.form.get('confirm_password', '')

        # Validation
        if not name:
            flash('Please provide your name.', 'danger')
            return render_template('auth/register.html'), 400

        if not email or '@' not in email:
            flash('Please provide a valid email address.', 'danger')
            return render_template('auth/register.html'), 400

        if not password or len(password) < 8:
            flash('Password must be at least 8 characters long.', 'danger')
            return render_template('auth/register.html'), 400

        if password != confirm_password:
            flash('Passwords do not match.', 'danger')
            return render_template('auth/register.html'), 400

        try:
            secret = sign_up(email, password, name)
        except AppwriteDemoError as e:
            flash(e.message, 'danger')
            return render_template('auth/register.html'), 400

        set_session_cookie(secret)
        flash(f'Welcome, {name}!', 'success')
        return redirect(url_for('todos.index'))

    return render_template('auth/register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if current_user.is_authenticated:
        return redirect(url_for('todos.index'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please provide both email and password.', 'danger')
            return render_template('auth/login.html'), 400

        try:
            secret = sign_in(email, password)
        except AppwriteDemoError as e:
            flash(e.message, 'danger')
            return render_template('auth/login.html'), 401

        set_session_cookie(secret)
        flash('Welcome back!', 'success')

        next_page = request.args.get('next')
        return redirect(next_page) if _is_safe_next(next_page) else redirect(url_for('todos.index'))

    return render_template('auth/login.html')


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """User logout route - the cookie is cleared even if Appwrite fails"""
    sign_out()
    clear_session_cookie()
    flash('You have been logged out successfully.', 'info')
    return redirect(url_for('auth.login'))
