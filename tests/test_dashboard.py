import datetime
from unittest import mock

import pytest
from django.db import OperationalError
from django.utils import timezone

from madrasa_app.models import Attendance, Fee, KitchenExpense

pytestmark = pytest.mark.django_db

RICE = {'en': 'Rice', 'hi': 'चावल', 'ur': 'چاول'}


def test_dashboard_stats(api_client, make_student, tenant):
    today = timezone.localdate()
    first = make_student()
    second = make_student()
    make_student(status='Inactive')

    Attendance.objects.create(tenant=tenant, student=first, date=today, status='Present')
    Attendance.objects.create(tenant=tenant, student=second, date=today, status='Absent')
    Attendance.objects.create(tenant=tenant, student=second, date=today - datetime.timedelta(days=1),
                              status='Absent')

    Fee.objects.create(tenant=tenant, student=first, month=today.month, year=today.year,
                       fee_amount=1000, paid_amount=1000)
    Fee.objects.create(tenant=tenant, student=second, month=today.month, year=today.year,
                       fee_amount=1000, paid_amount=400)
    Fee.objects.create(tenant=tenant, student=second, month=today.month, year=today.year - 1,
                       fee_amount=500)

    KitchenExpense.objects.create(tenant=tenant, date=today.replace(day=1), item_name=RICE, quantity=2, cost=50)

    response = api_client.get('/api/dashboard/stats')
    assert response.status_code == 200
    stats = response.json()['data']

    assert stats['students'] == {'total': 2, 'active': 2, 'inactive': 1}
    assert stats['attendance']['today'] == {'present': 1, 'absent': 1, 'total': 2}
    monthly = stats['fees']['monthly']
    assert (monthly['month'], monthly['year']) == (today.month, today.year)
    assert monthly['collection'] == 1400
    assert monthly['pending'] == 600
    assert monthly['paidCount'] == 1
    assert monthly['pendingCount'] == 1
    assert stats['fees']['totalPending'] == 1100
    assert stats['fees']['pendingCount'] == 2
    assert stats['kitchen']['totalExpenses'] == 100
    assert stats['kitchen']['expenseCount'] == 1


def test_dashboard_for_another_month(api_client, tenant):
    stats = api_client.get('/api/dashboard/stats', {'month': 2, 'year': 2024}).json()['data']
    assert stats['kitchen'] == {'month': 2, 'year': 2024, 'totalExpenses': 0, 'expenseCount': 0}


def test_dashboard_rejects_bad_month(api_client, tenant):
    assert api_client.get('/api/dashboard/stats', {'month': 13}).status_code == 400


def test_health_check(api_client, db):
    response = api_client.get('/api/health/db')
    assert response.status_code == 200
    body = response.json()
    assert body['status'] == 'success'
    assert body['connected'] is True
    assert body['message'] == 'Database connection is healthy'


def test_health_check_when_database_is_down(api_client, db):
    with mock.patch('madrasa_app.views.connection') as connection:
        connection.cursor.side_effect = OperationalError('connection refused')
        response = api_client.get('/api/health/db')
    assert response.status_code == 503
    body = response.json()
    assert body['connected'] is False
    assert body['message'] == 'Database connection failed'
    assert 'connection refused' not in str(body)


def test_dashboard_rejects_out_of_range_year(api_client, tenant):
    response = api_client.get('/api/dashboard/stats', {'year': 10000})
    assert response.status_code == 400
    assert response.json()['message'] == 'year: Ensure this value is between 2000 and 2100.'
