from decimal import Decimal

import pytest

from madrasa_app.models import Fee

pytestmark = pytest.mark.django_db


# ==================== MODEL ====================
def test_fully_paid_fee_is_paid(student, tenant):
    fee = Fee.objects.create(tenant=tenant, student=student, month=5, year=2024,
                             fee_amount=Decimal('1000'), paid_amount=Decimal('1000'), status='Pending')
    assert fee.due_amount == Decimal('0')
    assert fee.status == 'Paid'


def test_overpayment_never_makes_due_negative(student, tenant):
    fee = Fee.objects.create(tenant=tenant, student=student, month=5, year=2024,
                             fee_amount=Decimal('1000'), paid_amount=Decimal('1200'))
    assert fee.due_amount == Decimal('0')
    assert fee.status == 'Paid'


def test_partial_payment_is_pending(student, tenant):
    fee = Fee.objects.create(tenant=tenant, student=student, month=5, year=2024,
                             fee_amount=Decimal('1000'), paid_amount=Decimal('400'))
    assert fee.due_amount == Decimal('600')
    assert fee.status == 'Pending'


def test_explicit_status_is_kept_while_due(student, tenant):
    fee = Fee.objects.create(tenant=tenant, student=student, month=5, year=2024,
                             fee_amount=Decimal('1000'), paid_amount=Decimal('400'), status='Paid')
    assert fee.status == 'Paid'


# ==================== API ====================
def test_create_fee(api_client, student):
    response = api_client.post('/api/fees', {
        'studentId': student.pk, 'month': 5, 'year': 2024, 'feeAmount': 1000, 'paidAmount': 250,
        'paymentMode': 'Cash', 'paymentDate': '2024-05-10',
    }, format='json')
    assert response.status_code == 201
    data = response.json()['data']
    assert data['dueAmount'] == 750
    assert data['status'] == 'Pending'
    assert data['paymentMode'] == 'Cash'
    assert data['studentName'] == 'Muhammad Ali'


def test_fee_upsert_on_student_month_year(api_client, student):
    payload = {'studentId': student.pk, 'month': 5, 'year': 2024, 'feeAmount': 1000}
    assert api_client.post('/api/fees', payload, format='json').status_code == 201

    payload['paidAmount'] = 1000
    response = api_client.post('/api/fees', payload, format='json')
    assert response.status_code == 200
    assert response.json()['data']['status'] == 'Paid'
    assert Fee.objects.filter(student=student, month=5, year=2024).count() == 1


def test_fee_validation(api_client, student):
    response = api_client.post('/api/fees', {'studentId': student.pk, 'month': 0, 'year': 2024, 'feeAmount': 10},
                               format='json')
    assert response.status_code == 400
    assert response.json()['message'].startswith('month:')


def test_list_filters(api_client, make_student, tenant):
    first, second = make_student(), make_student()
    Fee.objects.create(tenant=tenant, student=first, month=4, year=2024, fee_amount=500, paid_amount=500)
    Fee.objects.create(tenant=tenant, student=first, month=5, year=2024, fee_amount=500)
    Fee.objects.create(tenant=tenant, student=second, month=5, year=2024, fee_amount=500)

    assert len(api_client.get('/api/fees').json()['data']) == 3
    assert len(api_client.get('/api/fees', {'month': 5, 'year': 2024}).json()['data']) == 2
    assert len(api_client.get('/api/fees', {'studentId': first.pk}).json()['data']) == 2
    assert len(api_client.get('/api/fees', {'status': 'Paid'}).json()['data']) == 1
    assert api_client.get('/api/fees', {'month': 'may'}).status_code == 400


def test_update_recomputes_due_and_status(api_client, student, tenant):
    fee = Fee.objects.create(tenant=tenant, student=student, month=5, year=2024,
                             fee_amount=Decimal('1000'), paid_amount=Decimal('1000'))
    assert fee.status == 'Paid'

    response = api_client.put(f'/api/fees/{fee.pk}', {'feeAmount': 1500}, format='json')
    assert response.status_code == 200
    fee.refresh_from_db()
    assert fee.due_amount == Decimal('500')
    assert fee.status == 'Pending'

    api_client.put(f'/api/fees/{fee.pk}', {'paidAmount': 1500, 'paymentMode': 'Online'}, format='json')
    fee.refresh_from_db()
    assert fee.due_amount == Decimal('0')
    assert fee.status == 'Paid'


def test_delete_fee(api_client, student, tenant):
    fee = Fee.objects.create(tenant=tenant, student=student, month=5, year=2024, fee_amount=500)
    assert api_client.delete(f'/api/fees/{fee.pk}').status_code == 200
    assert api_client.delete(f'/api/fees/{fee.pk}').status_code == 404


# ==================== REPORTS ====================
@pytest.fixture
def fee_book(make_student, tenant):
    first, second = make_student(name='Yusuf'), make_student(name='Omar')
    Fee.objects.create(tenant=tenant, student=first, month=4, year=2024, fee_amount=1000, paid_amount=1000)
    Fee.objects.create(tenant=tenant, student=first, month=5, year=2024, fee_amount=1000, paid_amount=300)
    Fee.objects.create(tenant=tenant, student=second, month=5, year=2024, fee_amount=800)
    return first, second


def test_monthly_report(api_client, fee_book):
    report = api_client.get('/api/fees/reports', {'type': 'monthly', 'month': 5, 'year': 2024}).json()['data']
    assert report == {
        'month': 5, 'year': 2024, 'totalCollection': 300, 'totalPending': 1500,
        'totalStudents': 2, 'paidCount': 0, 'pendingCount': 2,
    }


def test_monthly_report_for_whole_year(api_client, fee_book):
    report = api_client.get('/api/fees/reports', {'year': 2024}).json()['data']
    assert report['month'] is None
    assert report['totalCollection'] == 1300
    assert report['paidCount'] == 1


def test_pending_report(api_client, fee_book):
    report = api_client.get('/api/fees/reports', {'type': 'pending', 'lang': 'hi'}).json()['data']
    assert report['count'] == 2
    assert report['totalPending'] == 1500
    assert {fee['studentName'] for fee in report['fees']} == {'Yusuf (hi)', 'Omar (hi)'}


def test_student_report(api_client, fee_book):
    first, _ = fee_book
    report = api_client.get('/api/fees/reports', {'type': 'student', 'studentId': first.pk}).json()['data']
    assert report['studentId'] == first.pk
    assert report['totalPaid'] == 1300
    assert report['totalPending'] == 700
    assert [fee['month'] for fee in report['fees']] == [5, 4]


def test_student_report_requires_student_id(api_client, tenant):
    response = api_client.get('/api/fees/reports', {'type': 'student'})
    assert response.status_code == 400
    assert response.json()['message'] == 'Student ID is required'


def test_unknown_report_type(api_client, tenant):
    response = api_client.get('/api/fees/reports', {'type': 'weekly'})
    assert response.status_code == 400
    assert response.json() == {'success': False, 'message': 'Invalid report type'}
