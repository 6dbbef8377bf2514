"""
Demo data for a tenant.

Every generated row carries ``is_demo_data=True`` so that clearing only ever
removes synthetic records. Volumes come from ``settings.MADRASA_DEMO_DATA``.
"""
import datetime
import logging
import random
from decimal import Decimal

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.db import transaction
from django.utils import timezone

from .exceptions import DemoDataAlreadyLoaded
from .models import Admin, Attendance, Fee, KitchenExpense, Student, Tenant

logger = logging.getLogger(__name__)

DEFAULT_VOLUMES = {
    'STUDENTS': (75, 100),
    'STAFF': (10, 15),
    'ATTENDANCE_MONTHS': 3,
    'FEE_MONTHS': 6,
    'KITCHEN_DAYS': 30,
}

STUDENT_NAMES = [
    ('Muhammad Ali', 'मुहम्मद अली', 'محمد علی'),
    ('Ahmed Hassan', 'अहमद हसन', 'احمد حسن'),
    ('Ibrahim Khan', 'इब्राहिम खान', 'ابراہیم خان'),
    ('Yusuf Ahmad', 'यूसुफ अहमद', 'یوسف احمد'),
    ('Hamza Malik', 'हम्ज़ा मलिक', 'حمزہ ملک'),
    ('Omar Farooq', 'उमर फारूक', 'عمر فاروق'),
    ('Hassan Raza', 'हसन रज़ा', 'حسن رضا'),
    ('Ali Akbar', 'अली अकबर', 'علی اکبر'),
    ('Fatima Zahra', 'फातिमा ज़हरा', 'فاطمہ زہرا'),
    ('Ayesha Siddiqua', 'आयशा सिद्दीकी', 'عائشہ صدیقہ'),
    ('Khadija Begum', 'खदीजा बेगम', 'خدیجہ بیگم'),
    ('Zainab Ali', 'ज़ैनब अली', 'زینب علی'),
    ('Maryam Khan', 'मरियम खान', 'مریم خان'),
    ('Amina Sheikh', 'अमीना शेख', 'امینہ شیخ'),
    ('Safiya Ahmed', 'सफिया अहमद', 'صفیہ احمد'),
    ('Abdullah Rahman', 'अब्दुल्लाह रहमान', 'عبداللہ رحمان'),
    ('Zakariya Hussain', 'ज़कारिया हुसैन', 'زکریا حسین'),
    ('Ismail Shah', 'इस्माईल शाह', 'اسماعیل شاہ'),
    ('Yaqub Ali', 'याकूब अली', 'یعقوب علی'),
    ('Haroon Raza', 'हारून रज़ा', 'ہارون رضا'),
    ('Musa Khan', 'मूसा खान', 'موسیٰ خان'),
    ('Dawud Malik', 'दाऊद मलिक', 'داؤد ملک'),
    ('Sulaiman Sheikh', 'सुलेमान शेख', 'سلیمان شیخ'),
    ('Ilyas Hussain', 'इल्यास हुसैन', 'الیاس حسین'),
    ('Yunus Ali', 'यूनुस अली', 'یونس علی'),
    ('Idris Shah', 'इदरीस शाह', 'ادریس شاہ'),
    ('Luqman Ahmad', 'लुकमान अहमद', 'لقمان احمد'),
    ('Usman Ghani', 'उस्मान ग़नी', 'عثمان غنی'),
    ('Abdul Qadir', 'अब्दुल कादिर', 'عبدالقادر'),
    ('Ahmad Raza', 'अहमद रज़ा', 'احمد رضا'),
]

FATHER_NAMES = [
    ('Abdul Rahman', 'अब्दुल रहमान', 'عبدالرحمن'),
    ('Muhammad Hussain', 'मुहम्मद हुसैन', 'محمد حسین'),
    ('Ahmed Ali', 'अहमद अली', 'احمد علی'),
    ('Ibrahim Khan', 'इब्राहिम खान', 'ابراہیم خان'),
    ('Yusuf Ahmad', 'यूसुफ अहमद', 'یوسف احمد'),
    ('Hamza Malik', 'हम्ज़ा मलिक', 'حمزہ ملک'),
    ('Omar Farooq', 'उमर फारूक', 'عمر فاروق'),
    ('Hassan Raza', 'हसन रज़ा', 'حسن رضا'),
    ('Zakariya Hussain', 'ज़कारिया हुसैन', 'زکریا حسین'),
    ('Ismail Shah', 'इस्माईल शाह', 'اسماعیل شاہ'),
    ('Musa Khan', 'मूसा खान', 'موسیٰ خان'),
    ('Ayyub Khan', 'अय्यूब खान', 'ایوب خان'),
]

CITIES = [
    ('Delhi', 'दिल्ली', 'دہلی'),
    ('Mumbai', 'मुंबई', 'ممبئی'),
    ('Hyderabad', 'हैदराबाद', 'حیدرآباد'),
    ('Lucknow', 'लखनऊ', 'لکھنؤ'),
    ('Bhopal', 'भोपाल', 'بھوپال'),
    ('Jaipur', 'जयपुर', 'جے پور'),
    ('Kolkata', 'कोलकाता', 'کولکتہ'),
    ('Bangalore', 'बैंगलोर', 'بنگلور'),
]

KITCHEN_ITEMS = [
    ('Rice', 'चावल', 'چاول', Decimal('55')),
    ('Flour', 'आटा', 'آٹا', Decimal('40')),
    ('Lentils', 'दाल', 'دال', Decimal('110')),
    ('Vegetables', 'सब्ज़ियाँ', 'سبزیاں', Decimal('35')),
    ('Cooking Oil', 'खाने का तेल', 'کوکنگ آئل', Decimal('160')),
    ('Milk', 'दूध', 'دودھ', Decimal('60')),
]

CLASSES = ['Hifz', 'Aalim', 'Qari', 'Dars-e-Nizami', 'Primary', 'Secondary',
           'Class 1', 'Class 2', 'Class 3', 'Class 4']
SECTIONS = ['A', 'B', 'C']
STAFF_ROLES = ['teacher', 'teacher', 'teacher', 'accountant', 'admin']
SICK_REMARKS = {'en': 'Sick', 'hi': 'बीमार', 'ur': 'بیمار'}
EMPTY_REMARKS = {'en': '', 'hi': '', 'ur': ''}


def _bundle(values):
    return {'en': values[0], 'hi': values[1], 'ur': values[2]}


def _volumes():
    volumes = dict(DEFAULT_VOLUMES)
    volumes.update(getattr(settings, 'MADRASA_DEMO_DATA', {}))
    return volumes


def _month_start(today, months_back):
    month_index = today.year * 12 + (today.month - 1) - months_back
    return datetime.date(month_index // 12, month_index % 12 + 1, 1)


def _month_days(first_day):
    day = first_day
    while day.month == first_day.month:
        yield day
        day += datetime.timedelta(days=1)


def _build_students(tenant, rng, count):
    students = []
    for i in range(count):
        name = rng.choice(STUDENT_NAMES)
        father = rng.choice(FATHER_NAMES)
        city = rng.choice(CITIES)
        house = rng.randint(1, 100)
        students.append(Student(
            tenant=tenant,
            student_id=f"NET{i + 1:04d}",
            name=_bundle(name),
            father_name=_bundle(father),
            mother_name={
                'en': f"Fatima {father[0]}",
                'hi': f"फातिमा {father[1]}",
                'ur': f"فاطمہ {father[2]}",
            },
            address={
                'en': f"{house} Street, {city[0]}",
                'hi': f"{house} सड़क, {city[1]}",
                'ur': f"{house} گلی، {city[2]}",
            },
            class_name=rng.choice(CLASSES),
            section=rng.choice(SECTIONS),
            dob=datetime.date(rng.randint(2010, 2018), rng.randint(1, 12), rng.randint(1, 28)),
            phone=f"9{rng.randint(100000000, 999999999)}",
            admission_date=datetime.date(rng.randint(2022, 2024), rng.randint(1, 12), rng.randint(1, 28)),
            status='Active' if rng.random() > 0.1 else 'Inactive',
            is_demo_data=True,
        ))
    return Student.objects.bulk_create(students)


def _build_staff(tenant, rng, count):
    # One hash for every demo account; they all share the demo password
    password = make_password('demo123')
    staff = []
    for i in range(count):
        username = f"demo{tenant.pk}_staff{i + 1}"
        staff.append(Admin(
            username=username,
            email=f"{username}@demo.madrasa.local",
            password=password,
            name=rng.choice(STUDENT_NAMES)[0],
            role=rng.choice(STAFF_ROLES),
            tenant=tenant,
            is_demo_data=True,
        ))
    return Admin.objects.bulk_create(staff)


def _build_attendance(tenant, rng, students, months, today):
    records = []
    for months_back in range(months):
        for day in _month_days(_month_start(today, months_back)):
            if day > today or day.weekday() >= 5:
                continue
            present_count = int(len(students) * (0.80 + rng.random() * 0.15))
            shuffled = rng.sample(students, len(students))
            present, absent = shuffled[:present_count], shuffled[present_count:]
            for student in present:
                records.append(Attendance(tenant=tenant, student=student, date=day, status='Present',
                                          remarks=dict(EMPTY_REMARKS), is_demo_data=True))
            for student in absent[:5]:
                records.append(Attendance(tenant=tenant, student=student, date=day, status='Absent',
                                          remarks=dict(SICK_REMARKS), is_demo_data=True))
    Attendance.objects.bulk_create(records, batch_size=1000)
    return len(records)


def _build_fees(tenant, rng, students, months, today):
    records = []
    for months_back in range(months):
        first_day = _month_start(today, months_back)
        for student in students:
            amount = Decimal(500 + rng.randint(0, 1500))
            is_paid = rng.random() > 0.3
            records.append(Fee(
                tenant=tenant,
                student=student,
                month=first_day.month,
                year=first_day.year,
                fee_amount=amount,
                paid_amount=amount if is_paid else Decimal('0'),
                due_amount=Decimal('0') if is_paid else amount,
                status='Paid' if is_paid else 'Pending',
                payment_date=first_day.replace(day=rng.randint(1, 28)) if is_paid else None,
                payment_mode=rng.choice(['Cash', 'Online']) if is_paid else None,
                is_demo_data=True,
            ))
    Fee.objects.bulk_create(records, batch_size=1000)
    return len(records)


def _build_kitchen(tenant, rng, days, today):
    # bulk_create skips save(), so the total is computed here
    records = []
    for offset in range(days):
        day = today - datetime.timedelta(days=offset)
        for item in rng.sample(KITCHEN_ITEMS, 2):
            quantity = Decimal(rng.randint(1, 20))
            records.append(KitchenExpense(
                tenant=tenant,
                date=day,
                item_name=_bundle(item),
                quantity=quantity,
                cost=item[3],
                total_amount=quantity * item[3],
                is_demo_data=True,
            ))
    KitchenExpense.objects.bulk_create(records, batch_size=1000)
    return len(records)


@transaction.atomic
def generate_demo_data(tenant, seed=None):
    """Create the demo dataset for ``tenant`` and flag it as loaded"""
    logger.info(f"Generating demo data for tenant {tenant.pk}")
    rng = random.Random(seed)
    volumes = _volumes()
    today = timezone.localdate()

    students = _build_students(tenant, rng, rng.randint(*volumes['STUDENTS']))
    # bulk_create only returns primary keys on some backends
    if any(student.pk is None for student in students):
        students = list(Student.objects.filter(tenant=tenant, is_demo_data=True))
    staff = _build_staff(tenant, rng, rng.randint(*volumes['STAFF']))
    attendance_count = _build_attendance(tenant, rng, students, volumes['ATTENDANCE_MONTHS'], today)
    fee_count = _build_fees(tenant, rng, students, volumes['FEE_MONTHS'], today)
    kitchen_count = _build_kitchen(tenant, rng, volumes['KITCHEN_DAYS'], today)

    Tenant.objects.filter(pk=tenant.pk).update(demo_data_loaded=True)
    tenant.demo_data_loaded = True

    stats = {
        'students': len(students),
        'teachers': len(staff),
        'attendance': attendance_count,
        'fees': fee_count,
        'kitchen': kitchen_count,
    }
    logger.info(f"Demo data generated for tenant {tenant.pk}: {stats}")
    return stats


@transaction.atomic
def clear_demo_data(tenant):
    """Delete only rows flagged as demo data; demo_mode is left as is"""
    logger.info(f"Clearing demo data for tenant {tenant.pk}")
    Attendance.objects.filter(tenant=tenant, is_demo_data=True).delete()
    Fee.objects.filter(tenant=tenant, is_demo_data=True).delete()
    KitchenExpense.objects.filter(tenant=tenant, is_demo_data=True).delete()
    Student.objects.filter(tenant=tenant, is_demo_data=True).delete()
    Admin.objects.filter(tenant=tenant, is_demo_data=True, is_super_admin=False).delete()

    Tenant.objects.filter(pk=tenant.pk).update(demo_data_loaded=False)
    tenant.demo_data_loaded = False


def enable_demo_mode(tenant):
    tenant.demo_mode = True
    tenant.save(update_fields=['demo_mode', 'updated_at'])
    if not tenant.demo_data_loaded:
        return 'Demo mode enabled and data loaded', generate_demo_data(tenant)
    return 'Demo mode enabled', None


def disable_demo_mode(tenant):
    tenant.demo_mode = False
    tenant.save(update_fields=['demo_mode', 'updated_at'])
    return 'Demo mode disabled', None


def load_demo_data(tenant):
    if tenant.demo_data_loaded:
        raise DemoDataAlreadyLoaded()
    return 'Demo data loaded successfully', generate_demo_data(tenant)


def clear_demo(tenant):
    clear_demo_data(tenant)
    return 'Demo data cleared successfully', None


@transaction.atomic
def reset_demo_data(tenant):
    clear_demo_data(tenant)
    return 'Demo data reset successfully', generate_demo_data(tenant)


DEMO_ACTIONS = {
    'enable': enable_demo_mode,
    'disable': disable_demo_mode,
    'load': load_demo_data,
    'clear': clear_demo,
    'reset': reset_demo_data,
}


def run_demo_action(tenant, action):
    """Returns (message, stats or None); raises DemoDataAlreadyLoaded for a repeated load"""
    return DEMO_ACTIONS[action](tenant)
