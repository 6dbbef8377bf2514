# views.py
import datetime
import logging
from decimal import Decimal
from io import BytesIO

import pandas as pd
from django.conf import settings
from django.db import DatabaseError, connection, transaction
from django.db.models import Q, Sum
from django.http import HttpResponse
from django.utils import timezone
from django.utils.dateparse import parse_date
from rest_framework import exceptions, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import TOKEN_COOKIE_NAME, OptionalTokenAuthentication, generate_token
from .demo_data import run_demo_action
from .exceptions import TenantNotFound
from .i18n import SUPPORTED_LANGUAGES, format_response, get_language_from_request, localize
from .models import Admin, Attendance, Fee, KitchenExpense, Student, Tenant, empty_bundle, generate_student_id
from .permissions import IsAdminOrDemo
from .serializers import (
    AdminSerializer, AttendanceInputSerializer, AttendanceSerializer, DemoActionSerializer,
    FeeInputSerializer, FeeSerializer, FeeUpdateSerializer, KitchenExpenseSerializer,
    KitchenInputSerializer, LoginSerializer, StudentInputSerializer, StudentSerializer,
    StudentSummarySerializer,
)
from .validation import validate

logger = logging.getLogger(__name__)

STUDENT_BUNDLE_FIELDS = ('name', 'father_name', 'mother_name', 'address')
TOKEN_MAX_AGE = 60 * 60 * 24 * 7
MIN_YEAR, MAX_YEAR = 2000, 2100


# ==================== SHARED HELPERS ====================
def search_filter(term):
    """Case-insensitive match on any language of name or father name"""
    query = Q()
    for field in ('name', 'father_name'):
        for lang in SUPPORTED_LANGUAGES:
            query |= Q(**{f"{field}__{lang}__icontains": term})
    return query


def merge_bundle(current, update):
    return {**empty_bundle(), **(current or {}), **dict(update)}


def total(queryset, field):
    return queryset.aggregate(total=Sum(field))['total'] or Decimal('0')


def int_param(request, name, default=None):
    value = request.query_params.get(name)
    if value in (None, ''):
        return default
    try:
        return int(value)
    except ValueError:
        raise exceptions.ValidationError({name: 'A valid integer is required.'})


def date_param(request, name):
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        parsed = parse_date(value[:10])
    except ValueError:
        parsed = None
    if parsed is None:
        raise exceptions.ValidationError({name: 'Date has wrong format. Use YYYY-MM-DD.'})
    return parsed


def year_param(request, default):
    year = int_param(request, 'year', default)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise exceptions.ValidationError({'year': f'Ensure this value is between {MIN_YEAR} and {MAX_YEAR}.'})
    return year


def month_bounds(year, month):
    first_day = datetime.date(year, month, 1)
    if month == 12:
        return first_day, datetime.date(year, 12, 31)
    return first_day, datetime.date(year, month + 1, 1) - datetime.timedelta(days=1)


class TenantAPIView(APIView):
    """
    Base for tenant-scoped routes.

    Resolves the request language and tenant and wraps payloads in the
    {success, data, message, lang, rtl} envelope.
    """
    permission_classes = [IsAdminOrDemo]

    def get_lang(self):
        return get_language_from_request(self.request)

    def get_tenant(self):
        tenant = self.request.tenant
        if not tenant:
            raise TenantNotFound()
        self.check_tenant_access(tenant)
        return tenant

    def check_tenant_access(self, tenant):
        """Admins bound to a tenant only reach that tenant; super admins reach all"""
        user = self.request.user
        if not isinstance(user, Admin) or user.is_super_admin or user.tenant_id is None:
            return
        if user.tenant_id != tenant.pk:
            logger.warning(f"Admin {user.pk} of tenant {user.tenant_id} denied access to tenant {tenant.pk}")
            raise exceptions.PermissionDenied('You do not have access to this tenant')

    def get_serializer_context(self):
        return {'request': self.request, 'lang': self.get_lang()}

    def respond(self, data, message, status_code=status.HTTP_200_OK):
        return Response(format_response(data, self.get_lang(), message), status=status_code)

    def fail(self, message, status_code=status.HTTP_400_BAD_REQUEST):
        return Response({'success': False, 'message': message}, status=status_code)

    def get_student(self, pk):
        student = Student.objects.filter(tenant=self.get_tenant(), pk=pk).first()
        if student is None:
            raise exceptions.NotFound('Student not found')
        return student


# ==================== STUDENT MANAGEMENT VIEWS ====================
class StudentListView(TenantAPIView):
    """List students (search/class/status filters) and admit new ones"""

    def get(self, request):
        students = Student.objects.filter(tenant=self.get_tenant())

        search = request.query_params.get('search', '').strip()
        if search:
            students = students.filter(search_filter(search))
        class_filter = request.query_params.get('class')
        if class_filter:
            students = students.filter(class_name=class_filter)
        status_filter = request.query_params.get('status')
        if status_filter:
            students = students.filter(status=status_filter)

        serializer = StudentSerializer(students, many=True, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Students retrieved successfully')

    def post(self, request):
        result = validate(StudentInputSerializer, request.data)
        if not result.success:
            return self.fail(result.error)

        tenant = self.get_tenant()
        data = result.data
        student = Student.objects.create(
            tenant=tenant,
            student_id=generate_student_id(tenant),
            name=dict(data['name']),
            father_name=dict(data['father_name']),
            mother_name=dict(data['mother_name']),
            address=dict(data['address']),
            class_name=data['class_name'],
            section=data['section'],
            dob=data['dob'],
            phone=data['phone'],
            admission_date=data['admission_date'],
            status=data.get('status') or 'Active',
        )
        logger.info(f"Student {student.student_id} added to tenant {tenant.pk}")

        serializer = StudentSerializer(student, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Student added successfully', status.HTTP_201_CREATED)


class StudentDetailView(TenantAPIView):

    def get(self, request, pk):
        student = self.get_student(pk)
        serializer = StudentSerializer(student, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Student retrieved successfully')

    def put(self, request, pk):
        student = self.get_student(pk)
        result = validate(StudentInputSerializer, request.data, partial=True)
        if not result.success:
            return self.fail(result.error)

        for field, value in result.data.items():
            if field in STUDENT_BUNDLE_FIELDS:
                value = merge_bundle(getattr(student, field), value)
            setattr(student, field, value)
        student.save()

        serializer = StudentSerializer(student, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Student updated successfully')

    def delete(self, request, pk):
        student = self.get_student(pk)
        with transaction.atomic():
            # Attendance and fee rows go with the student
            student.delete()
        logger.info(f"Student {pk} deleted with its attendance and fees")
        return self.respond({'id': pk}, 'Student deleted successfully')


class StudentExportView(TenantAPIView):
    """Download the tenant's students as an Excel sheet"""

    COLUMNS = ['Student ID', 'Name', 'Father Name', 'Mother Name', 'Class', 'Section',
               'Date of Birth', 'Phone', 'Address', 'Admission Date', 'Status']

    def get(self, request):
        lang = self.get_lang()
        students = Student.objects.filter(tenant=self.get_tenant())
        status_filter = request.query_params.get('status')
        if status_filter:
            students = students.filter(status=status_filter)

        rows = [[
            student.student_id,
            localize(student.name, lang),
            localize(student.father_name, lang),
            localize(student.mother_name, lang),
            student.class_name,
            student.section,
            student.dob.isoformat(),
            student.phone,
            localize(student.address, lang),
            student.admission_date.isoformat(),
            student.status,
        ] for student in students]
        df = pd.DataFrame(rows, columns=self.COLUMNS)

        output = BytesIO()
        with pd.ExcelWriter(output, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name='Students', index=False)

            # Auto-adjust column widths
            worksheet = writer.sheets['Students']
            for column in worksheet.columns:
                max_length = max(len(str(cell.value or '')) for cell in column)
                worksheet.column_dimensions[column[0].column_letter].width = min(max_length + 2, 40)

        response = HttpResponse(
            output.getvalue(),
            content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        filename = f"students_{timezone.localdate().isoformat()}.xlsx"
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response


# ==================== ATTENDANCE VIEWS ====================
class AttendanceListView(TenantAPIView):

    def get(self, request):
        records = Attendance.objects.filter(tenant=self.get_tenant()).select_related('student')

        student_id = int_param(request, 'studentId')
        if student_id is not None:
            records = records.filter(student_id=student_id)
        date = date_param(request, 'date')
        if date:
            records = records.filter(date=date)
        class_filter = request.query_params.get('class')
        if class_filter:
            records = records.filter(student__class_name=class_filter)

        serializer = AttendanceSerializer(records, many=True, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Attendance retrieved successfully')

    def post(self, request):
        result = validate(AttendanceInputSerializer, request.data)
        if not result.success:
            return self.fail(result.error)

        data = result.data
        student = self.get_student(data['student_id'])
        defaults = {'tenant': student.tenant, 'status': data['status']}
        if 'remarks' in data:
            defaults['remarks'] = merge_bundle(None, data['remarks'])

        # One row per student and day; marking again overwrites
        record, created = Attendance.objects.update_or_create(
            student=student, date=data['date'], defaults=defaults
        )

        serializer = AttendanceSerializer(record, context=self.get_serializer_context())
        if created:
            return self.respond(serializer.data, 'Attendance marked successfully', status.HTTP_201_CREATED)
        return self.respond(serializer.data, 'Attendance updated successfully')


class AttendanceDetailView(TenantAPIView):

    def get_record(self, pk):
        record = (
            Attendance.objects.filter(tenant=self.get_tenant(), pk=pk)
            .select_related('student')
            .first()
        )
        if record is None:
            raise exceptions.NotFound('Attendance record not found')
        return record

    def put(self, request, pk):
        record = self.get_record(pk)
        result = validate(AttendanceInputSerializer, request.data, partial=True)
        if not result.success:
            return self.fail(result.error)

        data = result.data
        if 'student_id' in data:
            record.student = self.get_student(data['student_id'])
        if 'date' in data:
            record.date = data['date']
        if 'status' in data:
            record.status = data['status']
        if 'remarks' in data:
            record.remarks = merge_bundle(record.remarks, data['remarks'])

        clash = Attendance.objects.filter(student=record.student, date=record.date).exclude(pk=record.pk)
        if clash.exists():
            return self.fail('Attendance already marked for this student on this date')
        record.save()

        serializer = AttendanceSerializer(record, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Attendance updated successfully')

    def delete(self, request, pk):
        record = self.get_record(pk)
        record.delete()
        return self.respond({'id': pk}, 'Attendance deleted successfully')


# ==================== FEE VIEWS ====================
class FeeListView(TenantAPIView):

    def get(self, request):
        fees = Fee.objects.filter(tenant=self.get_tenant()).select_related('student')

        student_id = int_param(request, 'studentId')
        if student_id is not None:
            fees = fees.filter(student_id=student_id)
        month = int_param(request, 'month')
        if month is not None:
            fees = fees.filter(month=month)
        year = int_param(request, 'year')
        if year is not None:
            fees = fees.filter(year=year)
        status_filter = request.query_params.get('status')
        if status_filter:
            fees = fees.filter(status=status_filter)

        serializer = FeeSerializer(fees, many=True, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Fees retrieved successfully')

    def post(self, request):
        result = validate(FeeInputSerializer, request.data)
        if not result.success:
            return self.fail(result.error)

        data = result.data
        student = self.get_student(data['student_id'])
        defaults = {
            'tenant': student.tenant,
            'fee_amount': data['fee_amount'],
            'paid_amount': data.get('paid_amount', Decimal('0')),
            'status': data.get('status', 'Pending'),
        }
        for field in ('payment_date', 'payment_mode'):
            if field in data:
                defaults[field] = data[field]

        # One row per student and month; due and status are derived on save
        fee, created = Fee.objects.update_or_create(
            student=student, month=data['month'], year=data['year'], defaults=defaults
        )

        serializer = FeeSerializer(fee, context=self.get_serializer_context())
        if created:
            return self.respond(serializer.data, 'Fee record created successfully', status.HTTP_201_CREATED)
        return self.respond(serializer.data, 'Fee record updated successfully')


class FeeDetailView(TenantAPIView):

    def get_fee(self, pk):
        fee = Fee.objects.filter(tenant=self.get_tenant(), pk=pk).select_related('student').first()
        if fee is None:
            raise exceptions.NotFound('Fee record not found')
        return fee

    def put(self, request, pk):
        fee = self.get_fee(pk)
        result = validate(FeeUpdateSerializer, request.data, partial=True)
        if not result.success:
            return self.fail(result.error)

        data = result.data
        for field, value in data.items():
            setattr(fee, field, value)
        if 'status' not in data:
            fee.status = 'Pending'
        fee.save()

        serializer = FeeSerializer(fee, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Fee record updated successfully')

    def delete(self, request, pk):
        fee = self.get_fee(pk)
        fee.delete()
        return self.respond({'id': pk}, 'Fee record deleted successfully')


class FeeReportView(TenantAPIView):
    """Fee reports: ?type=monthly (default), pending or student"""

    def get(self, request):
        report_type = request.query_params.get('type', 'monthly')
        fees = Fee.objects.filter(tenant=self.get_tenant())

        if report_type == 'monthly':
            report = self.monthly_report(request, fees)
        elif report_type == 'pending':
            report = self.pending_report(fees)
        elif report_type == 'student':
            student_id = int_param(request, 'studentId')
            if student_id is None:
                return self.fail('Student ID is required')
            report = self.student_report(student_id, fees)
        else:
            return self.fail('Invalid report type')

        return self.respond(report, 'Fee report retrieved successfully')

    def monthly_report(self, request, fees):
        month = int_param(request, 'month')
        year = year_param(request, timezone.localdate().year)
        fees = fees.filter(year=year)
        if month is not None:
            fees = fees.filter(month=month)
        return {
            'month': month,
            'year': year,
            'totalCollection': total(fees, 'paid_amount'),
            'totalPending': total(fees, 'due_amount'),
            'totalStudents': fees.count(),
            'paidCount': fees.filter(status='Paid').count(),
            'pendingCount': fees.filter(status='Pending').count(),
        }

    def pending_report(self, fees):
        lang = self.get_lang()
        pending = fees.filter(status='Pending').select_related('student').order_by('-year', '-month')
        return {
            'totalPending': total(pending, 'due_amount'),
            'count': pending.count(),
            'fees': [{
                'id': fee.pk,
                'studentId': fee.student_id,
                'studentName': localize(fee.student.name, lang),
                'studentClass': fee.student.class_name,
                'month': fee.month,
                'year': fee.year,
                'dueAmount': fee.due_amount,
            } for fee in pending],
        }

    def student_report(self, student_id, fees):
        student_fees = fees.filter(student_id=student_id).select_related('student')
        return {
            'studentId': student_id,
            'totalPaid': total(student_fees, 'paid_amount'),
            'totalPending': total(student_fees, 'due_amount'),
            'fees': FeeSerializer(student_fees, many=True, context=self.get_serializer_context()).data,
        }


# ==================== KITCHEN VIEWS ====================
class KitchenListView(TenantAPIView):
    """Kitchen expenses for a day, a month, or by default the current year"""

    def get(self, request):
        expenses = KitchenExpense.objects.filter(tenant=self.get_tenant()).select_related('added_by')

        date = date_param(request, 'date')
        month = int_param(request, 'month')
        year = year_param(request, timezone.localdate().year)
        if date:
            expenses = expenses.filter(date=date)
        elif month is not None:
            if not 1 <= month <= 12:
                return self.fail('month: Ensure this value is between 1 and 12.')
            expenses = expenses.filter(date__range=month_bounds(year, month))
        else:
            expenses = expenses.filter(date__year=year)

        serializer = KitchenExpenseSerializer(expenses, many=True, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Kitchen expenses retrieved successfully')

    def post(self, request):
        result = validate(KitchenInputSerializer, request.data)
        if not result.success:
            return self.fail(result.error)

        data = result.data
        expense = KitchenExpense.objects.create(
            tenant=self.get_tenant(),
            date=data['date'],
            item_name=dict(data['item_name']),
            quantity=data['quantity'],
            cost=data['cost'],
            added_by=request.user if request.user.is_authenticated else None,
        )

        serializer = KitchenExpenseSerializer(expense, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Kitchen expense added successfully', status.HTTP_201_CREATED)


class KitchenDetailView(TenantAPIView):

    def get_expense(self, pk):
        expense = (
            KitchenExpense.objects.filter(tenant=self.get_tenant(), pk=pk)
            .select_related('added_by')
            .first()
        )
        if expense is None:
            raise exceptions.NotFound('Kitchen expense not found')
        return expense

    def put(self, request, pk):
        expense = self.get_expense(pk)
        result = validate(KitchenInputSerializer, request.data, partial=True)
        if not result.success:
            return self.fail(result.error)

        for field, value in result.data.items():
            if field == 'item_name':
                value = merge_bundle(expense.item_name, value)
            setattr(expense, field, value)
        # total_amount is recomputed from quantity and cost
        expense.save()

        serializer = KitchenExpenseSerializer(expense, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Kitchen expense updated successfully')

    def delete(self, request, pk):
        expense = self.get_expense(pk)
        expense.delete()
        return self.respond({'id': pk}, 'Kitchen expense deleted successfully')


# ==================== PARENT VIEWS ====================
class ParentSearchView(TenantAPIView):
    """Read-only student search for parents; login optional"""
    authentication_classes = [OptionalTokenAuthentication]
    permission_classes = [permissions.AllowAny]
    MAX_RESULTS = 50

    def get(self, request):
        search = request.query_params.get('search', '').strip()
        if len(search) < 2:
            return self.fail('Search query must be at least 2 characters')

        students = Student.objects.filter(
            search_filter(search), tenant=self.get_tenant(), status='Active'
        )[:self.MAX_RESULTS]

        serializer = StudentSummarySerializer(students, many=True, context=self.get_serializer_context())
        return self.respond(serializer.data, 'Search results retrieved successfully')


class ParentStudentView(TenantAPIView):
    """Student profile with attendance and fee summaries for parents"""
    authentication_classes = [OptionalTokenAuthentication]
    permission_classes = [permissions.AllowAny]
    ATTENDANCE_WINDOW = 30
    RECENT_RECORDS = 10

    def get(self, request, pk):
        lang = self.get_lang()
        student = self.get_student(pk)

        records = list(student.attendance_records.order_by('-date')[:self.ATTENDANCE_WINDOW])
        total_days = len(records)
        present_days = sum(1 for record in records if record.status == 'Present')
        percentage = round(present_days / total_days * 100, 2) if total_days else 0

        fees = list(student.fees.order_by('-year', '-month'))
        pending_fees = [fee for fee in fees if fee.status == 'Pending']

        report = {
            'profile': StudentSerializer(student, context=self.get_serializer_context()).data,
            'attendance': {
                'totalDays': total_days,
                'presentDays': present_days,
                'absentDays': total_days - present_days,
                'attendancePercentage': percentage,
                'recentRecords': [{
                    'date': record.date.isoformat(),
                    'status': record.status,
                    'remarks': localize(record.remarks, lang),
                } for record in records[:self.RECENT_RECORDS]],
            },
            'fees': {
                'totalPaid': sum((fee.paid_amount for fee in fees), Decimal('0')),
                'totalPending': sum((fee.due_amount for fee in fees), Decimal('0')),
                'pendingCount': len(pending_fees),
                'history': [{
                    'month': fee.month,
                    'year': fee.year,
                    'feeAmount': fee.fee_amount,
                    'paidAmount': fee.paid_amount,
                    'dueAmount': fee.due_amount,
                    'status': fee.status,
                    'paymentDate': fee.payment_date.isoformat() if fee.payment_date else None,
                    'paymentMode': fee.payment_mode,
                } for fee in fees],
                'pendingDues': [{
                    'month': fee.month,
                    'year': fee.year,
                    'dueAmount': fee.due_amount,
                } for fee in pending_fees],
            },
        }
        return self.respond(report, 'Student report retrieved successfully')


# ==================== AUTHENTICATION VIEWS ====================
class LoginView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        lang = get_language_from_request(request)
        result = validate(LoginSerializer, request.data)
        if not result.success:
            return Response({'success': False, 'message': result.error}, status=status.HTTP_400_BAD_REQUEST)

        username = result.data['username']
        admin = Admin.objects.filter(Q(username=username) | Q(email=username.lower())).first()
        if admin is None or not admin.is_active or not admin.check_password(result.data['password']):
            logger.warning(f"Failed login attempt for {username}")
            return Response({'success': False, 'message': 'Invalid credentials'},
                            status=status.HTTP_401_UNAUTHORIZED)

        admin.last_login = timezone.now()
        admin.save(update_fields=['last_login'])
        token = generate_token(admin)
        logger.info(f"Admin {admin.username} logged in")

        response = Response(format_response({
            'token': token,
            'user': AdminSerializer(admin).data,
        }, lang, 'Login successful'))
        response.set_cookie(
            TOKEN_COOKIE_NAME, token,
            max_age=TOKEN_MAX_AGE,
            httponly=True,
            samesite='Lax',
            secure=not settings.DEBUG,
        )
        return response


class LogoutView(APIView):
    """Tokens are stateless; logging out only drops the cookie"""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        response = Response(format_response(None, get_language_from_request(request), 'Logout successful'))
        response.delete_cookie(TOKEN_COOKIE_NAME, samesite='Lax')
        return response


# ==================== DASHBOARD VIEWS ====================
class DashboardStatsView(TenantAPIView):

    def get(self, request):
        tenant = self.get_tenant()
        today = timezone.localdate()
        month = int_param(request, 'month', today.month)
        year = year_param(request, today.year)
        if not 1 <= month <= 12:
            return self.fail('month: Ensure this value is between 1 and 12.')

        students = Student.objects.filter(tenant=tenant)
        active_students = students.filter(status='Active').count()
        today_attendance = Attendance.objects.filter(tenant=tenant, date=today)
        today_present = today_attendance.filter(status='Present').count()
        today_absent = today_attendance.filter(status='Absent').count()

        fees = Fee.objects.filter(tenant=tenant)
        monthly_fees = fees.filter(month=month, year=year)
        pending_fees = fees.filter(status='Pending')
        kitchen = KitchenExpense.objects.filter(tenant=tenant, date__range=month_bounds(year, month))

        stats = {
            'students': {
                'total': active_students,
                'active': active_students,
                'inactive': students.filter(status='Inactive').count(),
            },
            'attendance': {
                'today': {
                    'present': today_present,
                    'absent': today_absent,
                    'total': today_present + today_absent,
                },
            },
            'fees': {
                'monthly': {
                    'month': month,
                    'year': year,
                    'collection': total(monthly_fees, 'paid_amount'),
                    'pending': total(monthly_fees, 'due_amount'),
                    'totalStudents': monthly_fees.count(),
                    'paidCount': monthly_fees.filter(status='Paid').count(),
                    'pendingCount': monthly_fees.filter(status='Pending').count(),
                },
                'totalPending': total(pending_fees, 'due_amount'),
                'pendingCount': pending_fees.count(),
            },
            'kitchen': {
                'month': month,
                'year': year,
                'totalExpenses': total(kitchen, 'total_amount'),
                'expenseCount': kitchen.count(),
            },
        }
        return self.respond(stats, 'Dashboard statistics retrieved successfully')


# ==================== PUBLIC VIEWS ====================
class DatabaseHealthView(APIView):
    """Check the database connection"""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
        except DatabaseError as e:
            logger.error(f"Database health check failed: {str(e)}")
            return Response({
                'status': 'error',
                'message': 'Database connection failed',
                'connected': False,
                'timestamp': timezone.now().isoformat()
            }, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response({
            'status': 'success',
            'message': 'Database connection is healthy',
            'connected': True,
            'timestamp': timezone.now().isoformat()
        })


# ==================== DEMO MODE VIEWS ====================
class TenantDemoView(TenantAPIView):
    """Demo mode flags and the enable/disable/load/clear/reset actions"""

    def get_target_tenant(self, tenant_id):
        if tenant_id is None:
            return self.get_tenant()
        tenant = Tenant.objects.filter(pk=tenant_id).first()
        if tenant is None:
            raise exceptions.NotFound('Tenant not found')
        self.check_tenant_access(tenant)
        return tenant

    def demo_state(self, tenant):
        return {'demoMode': tenant.demo_mode, 'demoDataLoaded': tenant.demo_data_loaded}

    def get(self, request):
        tenant = self.get_target_tenant(int_param(request, 'tenantId'))
        return self.respond(self.demo_state(tenant), 'Demo status retrieved successfully')

    def post(self, request):
        result = validate(DemoActionSerializer, request.data)
        if not result.success:
            return self.fail(result.error)

        tenant = self.get_target_tenant(result.data.get('tenant_id'))
        action = result.data['action']
        logger.info(f"Demo action '{action}' requested for tenant {tenant.pk}")
        message, stats = run_demo_action(tenant, action)

        data = self.demo_state(tenant)
        if stats is not None:
            data['stats'] = stats
        return self.respond(data, message)
