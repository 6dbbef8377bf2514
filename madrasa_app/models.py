# models.py
from decimal import Decimal

from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models.functions import Length
from django.utils import timezone as dj_timezone

LANGUAGE_CHOICES = [
    ('en', 'English'),
    ('hi', 'Hindi'),
    ('ur', 'Urdu'),
]


# ==================== UTILITY FUNCTIONS ====================
def empty_bundle():
    return {'en': '', 'hi': '', 'ur': ''}


def generate_student_id(tenant, year=None):
    """Next year-prefixed student id for the tenant, e.g. 20240007"""
    year = year or dj_timezone.localdate().year
    last_student = (
        Student.objects.filter(tenant=tenant, student_id__startswith=str(year))
        .annotate(id_length=Length('student_id'))
        .order_by('-id_length', '-student_id')
        .first()
    )
    if last_student:
        # Suffix grows past four digits after 9999
        try:
            last_number = int(last_student.student_id[len(str(year)):])
        except ValueError:
            last_number = 0
        return f"{year}{last_number + 1:04d}"
    return f"{year}0001"


# ==================== TENANTS ====================
class Tenant(models.Model):
    PLAN_CHOICES = [
        ('free', 'Free'),
        ('basic', 'Basic'),
        ('premium', 'Premium'),
        ('enterprise', 'Enterprise'),
    ]

    name = models.CharField(max_length=200)
    subdomain = models.CharField(max_length=100, unique=True, blank=True, null=True)
    domain = models.CharField(max_length=255, unique=True, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    demo_mode = models.BooleanField(default=False)
    demo_data_loaded = models.BooleanField(default=False)

    # Settings
    primary_language = models.CharField(max_length=2, choices=LANGUAGE_CHOICES, default='en')
    timezone = models.CharField(max_length=50, default='Asia/Kolkata')
    currency = models.CharField(max_length=3, default='INR')
    academic_year = models.CharField(max_length=9, default='2024-25')

    # Subscription
    plan = models.CharField(max_length=20, choices=PLAN_CHOICES, default='free')
    subscription_start = models.DateTimeField(default=dj_timezone.now)
    subscription_end = models.DateTimeField(blank=True, null=True)
    subscription_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['is_active', 'demo_mode'], name='tenant_active_demo_idx'),
        ]

    def save(self, *args, **kwargs):
        # Empty strings would collide on the unique constraints
        self.subdomain = self.subdomain.strip().lower() if self.subdomain else None
        self.domain = self.domain.strip().lower() if self.domain else None
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


# ==================== USER MANAGEMENT ====================
class Admin(AbstractUser):
    ROLE_CHOICES = [
        ('super_admin', 'Super Administrator'),
        ('admin', 'Administrator'),
        ('teacher', 'Teacher'),
        ('accountant', 'Accountant'),
        ('parent', 'Parent'),
    ]
    SUPERSET_ROLES = ('admin', 'super_admin')

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='admin')
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, null=True, blank=True,
                               related_name='admins')
    is_super_admin = models.BooleanField(default=False)
    is_demo_data = models.BooleanField(default=False)

    REQUIRED_FIELDS = ['email', 'name']

    class Meta:
        indexes = [
            models.Index(fields=['role'], name='admin_role_idx'),
            models.Index(fields=['tenant', 'is_demo_data'], name='admin_tenant_demo_idx'),
        ]

    def save(self, *args, **kwargs):
        self.email = (self.email or '').strip().lower()
        super().save(*args, **kwargs)

    def has_role(self, role):
        return role is None or self.role == role or self.role in self.SUPERSET_ROLES

    def __str__(self):
        return f"{self.name or self.username} ({self.role})"


# ==================== STUDENT MANAGEMENT ====================
class Student(models.Model):
    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Inactive', 'Inactive'),
    ]

    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='students')
    student_id = models.CharField(max_length=20)

    # Localized {en, hi, ur} bundles
    name = models.JSONField(default=empty_bundle)
    father_name = models.JSONField(default=empty_bundle)
    mother_name = models.JSONField(default=empty_bundle)
    address = models.JSONField(default=empty_bundle)

    class_name = models.CharField(max_length=50)
    section = models.CharField(max_length=10)
    dob = models.DateField()
    phone = models.CharField(max_length=20)
    admission_date = models.DateField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='Active')
    is_demo_data = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['tenant', 'student_id'], name='uniq_student_id_per_tenant'),
        ]
        indexes = [
            models.Index(fields=['class_name'], name='student_class_idx'),
            models.Index(fields=['status'], name='student_status_idx'),
            models.Index(fields=['tenant', 'is_demo_data'], name='student_tenant_demo_idx'),
        ]

    def __str__(self):
        return f"{self.name.get('en', '')} ({self.student_id})"


# ==================== ATTENDANCE ====================
class Attendance(models.Model):
    STATUS_CHOICES = [
        ('Present', 'Present'),
        ('Absent', 'Absent'),
    ]

    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='attendance_records')
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='attendance_records')
    date = models.DateField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES)
    remarks = models.JSONField(default=empty_bundle, blank=True)
    is_demo_data = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-id']
        constraints = [
            models.UniqueConstraint(fields=['student', 'date'], name='uniq_attendance_per_day'),
        ]
        indexes = [
            models.Index(fields=['date'], name='attendance_date_idx'),
            models.Index(fields=['tenant', 'is_demo_data'], name='attendance_tenant_demo_idx'),
        ]

    def __str__(self):
        return f"{self.student.student_id} - {self.date} - {self.status}"


# ==================== FEE MANAGEMENT ====================
class Fee(models.Model):
    STATUS_CHOICES = [
        ('Paid', 'Paid'),
        ('Pending', 'Pending'),
    ]
    PAYMENT_MODE_CHOICES = [
        ('Cash', 'Cash'),
        ('Online', 'Online'),
        ('Cheque', 'Cheque'),
        ('Bank Transfer', 'Bank Transfer'),
    ]

    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='fees')
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='fees')
    month = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])
    year = models.PositiveSmallIntegerField(validators=[MinValueValidator(2000), MaxValueValidator(2100)])

    # Amounts
    fee_amount = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    paid_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    due_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    payment_date = models.DateField(blank=True, null=True)
    payment_mode = models.CharField(max_length=20, choices=PAYMENT_MODE_CHOICES, blank=True, null=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='Pending')
    is_demo_data = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-year', '-month', '-id']
        constraints = [
            models.UniqueConstraint(fields=['student', 'month', 'year'], name='uniq_fee_per_month'),
        ]
        indexes = [
            models.Index(fields=['year', 'month'], name='fee_period_idx'),
            models.Index(fields=['status'], name='fee_status_idx'),
            models.Index(fields=['tenant', 'is_demo_data'], name='fee_tenant_demo_idx'),
        ]

    def save(self, *args, **kwargs):
        # Due never goes negative; a settled fee is always Paid
        self.due_amount = max(Decimal(self.fee_amount) - Decimal(self.paid_amount or 0), Decimal('0'))
        if self.due_amount == 0:
            self.status = 'Paid'
        elif not self.status:
            self.status = 'Pending'
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.student.student_id} - {self.month}/{self.year} - {self.status}"


# ==================== KITCHEN ====================
class KitchenExpense(models.Model):
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='kitchen_expenses')
    date = models.DateField()
    item_name = models.JSONField(default=empty_bundle)
    quantity = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    cost = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    total_amount = models.DecimalField(max_digits=22, decimal_places=2, default=0)
    added_by = models.ForeignKey(Admin, on_delete=models.SET_NULL, null=True, blank=True,
                                 related_name='kitchen_expenses')
    is_demo_data = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['date'], name='kitchen_date_idx'),
            models.Index(fields=['tenant', 'is_demo_data'], name='kitchen_tenant_demo_idx'),
        ]

    def save(self, *args, **kwargs):
        self.total_amount = (Decimal(self.quantity) * Decimal(self.cost)).quantize(Decimal('0.01'))
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.date} - {self.item_name.get('en', '')} - {self.total_amount}"
