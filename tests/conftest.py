import datetime

import pytest
from rest_framework.test import APIClient

from madrasa_app.authentication import generate_token
from madrasa_app.models import Admin, Student, Tenant, generate_student_id


def bundle(en, hi=None, ur=None):
    return {'en': en, 'hi': hi if hi is not None else f"{en} (hi)", 'ur': ur if ur is not None else f"{en} (ur)"}


def student_payload(**overrides):
    payload = {
        'name': {'en': 'Muhammad Ali', 'hi': 'मुहम्मद अली', 'ur': 'محمد علی'},
        'fatherName': {'en': 'Abdul Rahman', 'hi': 'अब्दुल रहमान', 'ur': 'عبدالرحمن'},
        'motherName': {'en': 'Fatima Begum', 'hi': 'फातिमा बेगम', 'ur': 'فاطمہ بیگم'},
        'class': 'Hifz',
        'section': 'A',
        'dob': '2012-04-15',
        'address': {'en': '12 Street, Delhi', 'hi': '12 सड़क, दिल्ली', 'ur': '12 گلی، دہلی'},
        'phone': '9876543210',
        'admissionDate': '2024-06-01',
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def fast_settings(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
    settings.MADRASA_ALLOW_UNAUTHENTICATED = True
    settings.MADRASA_DEMO_DATA = {
        'STUDENTS': (3, 4),
        'STAFF': (1, 2),
        'ATTENDANCE_MONTHS': 1,
        'FEE_MONTHS': 2,
        'KITCHEN_DAYS': 3,
    }


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def tenant(db):
    return Tenant.objects.create(name='Nizam-e-Taleem', subdomain='nizam')


@pytest.fixture
def other_tenant(db):
    return Tenant.objects.create(name='Talimul Quran', subdomain='talimul')


@pytest.fixture
def admin_user(tenant):
    return Admin.objects.create_user(
        username='admin', email='admin@madrasa.com', password='admin123',
        name='Administrator', role='admin', tenant=tenant,
    )


@pytest.fixture
def admin_token(admin_user):
    return generate_token(admin_user)


@pytest.fixture
def auth_client(api_client, admin_token):
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {admin_token}')
    return api_client


@pytest.fixture
def make_student(tenant):
    def _make_student(name='Muhammad Ali', father='Abdul Rahman', status='Active',
                      class_name='Hifz', owner=None, **extra):
        owner = owner or tenant
        return Student.objects.create(
            tenant=owner,
            student_id=generate_student_id(owner),
            name=bundle(name),
            father_name=bundle(father),
            mother_name=bundle('Fatima'),
            address=bundle('Delhi'),
            class_name=class_name,
            section='A',
            dob=datetime.date(2012, 4, 15),
            phone='9876543210',
            admission_date=datetime.date(2024, 6, 1),
            status=status,
            **extra,
        )
    return _make_student


@pytest.fixture
def student(make_student):
    return make_student()
