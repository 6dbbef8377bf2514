# serializers.py
import datetime

from django.utils.dateparse import parse_datetime
from rest_framework import serializers

from .i18n import DEFAULT_LANGUAGE, localize
from .models import Admin, Attendance, Fee, KitchenExpense, Student


# ==================== SHARED FIELDS ====================
class CalendarDateField(serializers.DateField):
    """Accepts dates, datetimes and their ISO strings; always yields a date"""

    def to_internal_value(self, value):
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str) and ('T' in value or ' ' in value.strip()):
            parsed = parse_datetime(value.strip().replace('Z', '+00:00'))
            if parsed is not None:
                return parsed.date()
        return super().to_internal_value(value)


class LocalizedTextSerializer(serializers.Serializer):
    en = serializers.CharField(error_messages={
        'required': 'English text is required', 'blank': 'English text is required'})
    hi = serializers.CharField(error_messages={
        'required': 'Hindi text is required', 'blank': 'Hindi text is required'})
    ur = serializers.CharField(error_messages={
        'required': 'Urdu text is required', 'blank': 'Urdu text is required'})


class RemarksSerializer(serializers.Serializer):
    en = serializers.CharField(required=False, allow_blank=True)
    hi = serializers.CharField(required=False, allow_blank=True)
    ur = serializers.CharField(required=False, allow_blank=True)


class LocalizedValueField(serializers.Field):
    """Read-only: resolves a stored bundle to the language in context"""

    def __init__(self, **kwargs):
        kwargs['read_only'] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return localize(value, self.context.get('lang', DEFAULT_LANGUAGE))


class ClassFieldMixin:
    """Exposes ``class_name`` under the reserved key ``class``"""
    class_field_kwargs = {}

    def get_fields(self):
        fields = super().get_fields()
        fields['class'] = serializers.CharField(source='class_name', **self.class_field_kwargs)
        return fields


# ==================== INPUT (VALIDATION) SERIALIZERS ====================
class StudentInputSerializer(ClassFieldMixin, serializers.Serializer):
    class_field_kwargs = {'error_messages': {'required': 'Class is required', 'blank': 'Class is required'}}

    name = LocalizedTextSerializer()
    fatherName = LocalizedTextSerializer(source='father_name')
    motherName = LocalizedTextSerializer(source='mother_name')
    section = serializers.CharField(max_length=10, error_messages={
        'required': 'Section is required', 'blank': 'Section is required'})
    dob = CalendarDateField()
    address = LocalizedTextSerializer()
    phone = serializers.CharField(min_length=10, max_length=20, error_messages={
        'min_length': 'Valid phone number is required'})
    admissionDate = CalendarDateField(source='admission_date')
    status = serializers.ChoiceField(choices=Student.STATUS_CHOICES, required=False)


class AttendanceInputSerializer(serializers.Serializer):
    studentId = serializers.IntegerField(source='student_id', error_messages={
        'required': 'Student ID is required', 'invalid': 'Student ID is required'})
    date = CalendarDateField()
    status = serializers.ChoiceField(choices=Attendance.STATUS_CHOICES)
    remarks = RemarksSerializer(required=False)


class FeeInputSerializer(serializers.Serializer):
    studentId = serializers.IntegerField(source='student_id', error_messages={
        'required': 'Student ID is required', 'invalid': 'Student ID is required'})
    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    feeAmount = serializers.DecimalField(source='fee_amount', max_digits=12, decimal_places=2, min_value=0)
    paidAmount = serializers.DecimalField(source='paid_amount', max_digits=12, decimal_places=2,
                                          min_value=0, required=False)
    paymentDate = CalendarDateField(source='payment_date', required=False)
    paymentMode = serializers.ChoiceField(source='payment_mode', choices=Fee.PAYMENT_MODE_CHOICES,
                                          required=False)
    status = serializers.ChoiceField(choices=Fee.STATUS_CHOICES, required=False)


class FeeUpdateSerializer(serializers.Serializer):
    """The (student, month, year) key of a fee is fixed once created"""
    feeAmount = serializers.DecimalField(source='fee_amount', max_digits=12, decimal_places=2, min_value=0)
    paidAmount = serializers.DecimalField(source='paid_amount', max_digits=12, decimal_places=2, min_value=0)
    paymentDate = CalendarDateField(source='payment_date')
    paymentMode = serializers.ChoiceField(source='payment_mode', choices=Fee.PAYMENT_MODE_CHOICES)
    status = serializers.ChoiceField(choices=Fee.STATUS_CHOICES)


class KitchenInputSerializer(serializers.Serializer):
    date = CalendarDateField()
    itemName = LocalizedTextSerializer(source='item_name')
    quantity = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(error_messages={
        'required': 'Username is required', 'blank': 'Username is required'})
    password = serializers.CharField(min_length=6, write_only=True, error_messages={
        'min_length': 'Password must be at least 6 characters'})


class DemoActionSerializer(serializers.Serializer):
    ACTION_CHOICES = ['enable', 'disable', 'load', 'clear', 'reset']

    tenantId = serializers.IntegerField(source='tenant_id', required=False, error_messages={
        'invalid': 'Invalid tenant ID'})
    action = serializers.ChoiceField(choices=ACTION_CHOICES, error_messages={
        'invalid_choice': 'Invalid action'})


# ==================== OUTPUT SERIALIZERS ====================
class StudentSerializer(ClassFieldMixin, serializers.ModelSerializer):
    studentId = serializers.CharField(source='student_id', read_only=True)
    name = LocalizedValueField()
    fatherName = LocalizedValueField(source='father_name')
    motherName = LocalizedValueField(source='mother_name')
    address = LocalizedValueField()
    admissionDate = serializers.DateField(source='admission_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Student
        fields = [
            'id', 'studentId', 'name', 'fatherName', 'motherName', 'section',
            'dob', 'address', 'phone', 'admissionDate', 'status',
            'createdAt', 'updatedAt',
        ]


class StudentSummarySerializer(ClassFieldMixin, serializers.ModelSerializer):
    """Parent search results"""
    studentId = serializers.CharField(source='student_id', read_only=True)
    name = LocalizedValueField()
    fatherName = LocalizedValueField(source='father_name')
    motherName = LocalizedValueField(source='mother_name')

    class Meta:
        model = Student
        fields = ['id', 'studentId', 'name', 'fatherName', 'motherName', 'section', 'phone']


class AttendanceSerializer(serializers.ModelSerializer):
    studentId = serializers.IntegerField(source='student_id', read_only=True)
    studentName = LocalizedValueField(source='student.name')
    studentClass = serializers.CharField(source='student.class_name', read_only=True)
    remarks = LocalizedValueField()

    class Meta:
        model = Attendance
        fields = ['id', 'studentId', 'studentName', 'studentClass', 'date', 'status', 'remarks']


class FeeSerializer(serializers.ModelSerializer):
    studentId = serializers.IntegerField(source='student_id', read_only=True)
    studentName = LocalizedValueField(source='student.name')
    studentClass = serializers.CharField(source='student.class_name', read_only=True)
    feeAmount = serializers.DecimalField(source='fee_amount', max_digits=12, decimal_places=2, read_only=True)
    paidAmount = serializers.DecimalField(source='paid_amount', max_digits=12, decimal_places=2, read_only=True)
    dueAmount = serializers.DecimalField(source='due_amount', max_digits=12, decimal_places=2, read_only=True)
    paymentDate = serializers.DateField(source='payment_date', read_only=True)
    paymentMode = serializers.CharField(source='payment_mode', read_only=True)

    class Meta:
        model = Fee
        fields = [
            'id', 'studentId', 'studentName', 'studentClass', 'month', 'year',
            'feeAmount', 'paidAmount', 'dueAmount', 'paymentDate', 'paymentMode', 'status',
        ]


class KitchenExpenseSerializer(serializers.ModelSerializer):
    itemName = LocalizedValueField(source='item_name')
    totalAmount = serializers.DecimalField(source='total_amount', max_digits=14, decimal_places=2,
                                           read_only=True)
    addedBy = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = KitchenExpense
        fields = ['id', 'date', 'itemName', 'quantity', 'cost', 'totalAmount', 'addedBy', 'createdAt']

    def get_addedBy(self, obj):
        if obj.added_by is None:
            return ''
        return obj.added_by.name or obj.added_by.username


class AdminSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admin
        fields = ['id', 'username', 'email', 'name', 'role']
