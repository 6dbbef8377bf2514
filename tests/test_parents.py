import datetime
from decimal import Decimal

import pytest

from madrasa_app.models import Attendance, Fee
from madrasa_app.views import ParentSearchView

pytestmark = pytest.mark.django_db


def test_search_needs_two_characters(api_client, tenant):
    response = api_client.get('/api/parents/search', {'search': 'a'})
    assert response.status_code == 400
    assert response.json() == {'success': False, 'message': 'Search query must be at least 2 characters'}
    assert api_client.get('/api/parents/search').status_code == 400


def test_search_returns_only_active_students(api_client, make_student):
    make_student(name='Yusuf Ahmad')
    make_student(name='Yusuf Khan', status='Inactive')

    body = api_client.get('/api/parents/search', {'search': 'yusuf'}).json()
    assert body['success'] is True
    assert [row['name'] for row in body['data']] == ['Yusuf Ahmad']
    assert set(body['data'][0]) == {'id', 'studentId', 'name', 'fatherName', 'motherName', 'class', 'section',
                                    'phone'}


def test_search_ignores_bad_tokens(api_client, make_student, settings):
    settings.MADRASA_ALLOW_UNAUTHENTICATED = False
    make_student(name='Yusuf Ahmad')
    api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')
    response = api_client.get('/api/parents/search', {'search': 'Yusuf'})
    assert response.status_code == 200


def test_search_caps_results(api_client, make_student, monkeypatch):
    monkeypatch.setattr(ParentSearchView, 'MAX_RESULTS', 2)
    for _ in range(3):
        make_student(name='Hamza')
    assert len(api_client.get('/api/parents/search', {'search': 'hamza'}).json()['data']) == 2


def test_student_report(api_client, student, tenant):
    start = datetime.date(2024, 5, 1)
    for offset in range(4):
        Attendance.objects.create(
            tenant=tenant, student=student, date=start + datetime.timedelta(days=offset),
            status='Absent' if offset == 3 else 'Present',
            remarks={'en': 'Sick', 'hi': 'बीमार', 'ur': 'بیمار'} if offset == 3 else {'en': '', 'hi': '', 'ur': ''},
        )
    Fee.objects.create(tenant=tenant, student=student, month=4, year=2024, fee_amount=1000, paid_amount=1000)
    Fee.objects.create(tenant=tenant, student=student, month=5, year=2024, fee_amount=1000, paid_amount=Decimal('250'))

    body = api_client.get(f'/api/parents/student/{student.pk}', {'lang': 'hi'}).json()
    assert body['message'] == 'Student report retrieved successfully'
    report = body['data']

    assert report['profile']['name'] == 'Muhammad Ali (hi)'
    assert report['attendance']['totalDays'] == 4
    assert report['attendance']['presentDays'] == 3
    assert report['attendance']['absentDays'] == 1
    assert report['attendance']['attendancePercentage'] == 75.0
    assert report['attendance']['recentRecords'][0] == {'date': '2024-05-04', 'status': 'Absent', 'remarks': 'बीमार'}

    assert report['fees']['totalPaid'] == 1250
    assert report['fees']['totalPending'] == 750
    assert report['fees']['pendingCount'] == 1
    assert [fee['month'] for fee in report['fees']['history']] == [5, 4]
    assert report['fees']['pendingDues'] == [{'month': 5, 'year': 2024, 'dueAmount': 750}]


def test_attendance_percentage_is_rounded(api_client, student, tenant):
    start = datetime.date(2024, 5, 1)
    for offset in range(3):
        Attendance.objects.create(tenant=tenant, student=student, date=start + datetime.timedelta(days=offset),
                                  status='Present' if offset else 'Absent')
    report = api_client.get(f'/api/parents/student/{student.pk}').json()['data']
    assert report['attendance']['attendancePercentage'] == 66.67


def test_student_without_records(api_client, student):
    report = api_client.get(f'/api/parents/student/{student.pk}').json()['data']
    assert report['attendance']['attendancePercentage'] == 0
    assert report['fees']['history'] == []


def test_unknown_student(api_client, tenant):
    response = api_client.get('/api/parents/student/9999')
    assert response.status_code == 404
    assert response.json()['message'] == 'Student not found'
