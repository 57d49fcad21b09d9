from flask import Blueprint, current_app, render_template, request

from employee_records.common.datetime_utils import format_hire_date
from employee_records.core.constants import DEFAULT_PER_PAGE
from employee_records.services.employee_service import EmployeeService

home_bp = Blueprint('home', __name__)


@home_bp.app_template_filter('hire_date')
def hire_date_filter(value):
    return format_hire_date(value)


@home_bp.route('/')
def index():
    employees = EmployeeService.list_all()
    return render_template('index.html', employees=employees)


@home_bp.route('/employees')
def employees():
    page = request.args.get('page', 1, type=int)
    per_page = current_app.config.get('EMPLOYEES_PER_PAGE', DEFAULT_PER_PAGE)

    # ?active=1 / ?active=0 narrows the list; anything else shows everyone
    active_arg = request.args.get('active')
    active = {'1': True, '0': False}.get(active_arg)

    pagination = EmployeeService.paginate(page=page, per_page=per_page, active=active)
    return render_template(
        'employees.html',
        pagination=pagination,
        active_arg=active_arg if active is not None else None,
    )


@home_bp.app_errorhandler(404)
def page_not_found(error):
    return render_template('404.html'), 404
