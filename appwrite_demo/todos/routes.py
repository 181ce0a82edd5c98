"""
Todo Routes

Server-rendered todo list with create, update, toggle and delete forms.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from appwrite_demo.errors import BackendError, ConfigurationIncomplete
from appwrite_demo.services.todos import create_todo, delete_todo, list_todos, update_todo
from appwrite_demo.todos import todos_bp


@todos_bp.route('/')
def home():
    """Redirect to the todo list if logged in, otherwise to login"""
    if current_user.is_authenticated:
        return redirect(url_for('todos.index'))
    return redirect(url_for('auth.login'))


@todos_bp.route('/todos', methods=['GET', 'POST'])
@login_required
def index():
    """List todos, newest first, and handle the create form"""
    if request.method == 'POST':
        title = request.form.get('title', '').strip()
        if not title:
            flash('Please enter a title for the todo.', 'danger')
            return redirect(url_for('todos.index'))

        try:
            create_todo(title)
            flash('Todo added.', 'success')
        except (BackendError, ConfigurationIncomplete):
            flash('Could not add the todo. Please try again.', 'danger')
        return redirect(url_for('todos.index'))

    try:
        todos = list_todos()
    except (BackendError, ConfigurationIncomplete):
        flash('Could not load your todos. Please try again.', 'danger')
        todos = []

    remaining = sum(1 for t in todos if not t.is_completed)
    return render_template('todos/index.html', todos=todos, remaining=remaining)


@todos_bp.route('/todos/<todo_id>/update', methods=['POST'])
@login_required
def update(todo_id):
    """Overwrite title and completion flag"""
    title = request.form.get('title', '').strip()
    is_completed = request.form.get('is_completed') in ('on', 'true', '1')

    if not title:
        flash('Title cannot be empty.', 'danger')
        return redirect(url_for('todos.index'))

    try:
        update_todo(todo_id, title, is_completed)
        flash('Todo updated.', 'success')
    except (BackendError, ConfigurationIncomplete):
        flash('Could not update the todo. Please try again.', 'danger')
    return redirect(url_for('todos.index'))


@todos_bp.route('/todos/<todo_id>/toggle', methods=['POST'])
@login_required
def toggle(todo_id):
    """Flip the completion flag, keeping the posted title"""
    title = request.form.get('title', '').strip()
    is_completed = request.form.get('is_completed') in ('on', 'true', '1')

    if not title:
        flash('Title cannot be empty.', 'danger')
        return redirect(url_for('todos.index'))

    try:
        update_todo(todo_id, title, not is_completed)
    except (BackendError, ConfigurationIncomplete):
        flash('Could not update the todo. Please try again.', 'danger')
    return redirect(url_for('todos.index'))


@todos_bp.route('/todos/<todo_id>/delete', methods=['POST'])
@login_required
def delete(todo_id):
    """Delete a todo"""
    try:
        delete_todo(todo_id)
        flash('Todo deleted.', 'info')
    except (BackendError, ConfigurationIncomplete):
        flash('Could not delete the todo. Please try again.', 'danger')
    return redirect(url_for('todos.index'))
